# Routes package init
"""
Cars API Backend — API Routes Package
======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - cars.py:  GET /cars/{name}   (car details, or 204 when unknown)

Design Principle:
    Routes are THIN. They extract the path parameter, call the service,
    and choose the status code. Lookup logic belongs in the service.
"""
