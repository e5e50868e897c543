# Services package init
"""
Cars API Backend — Services Layer
==================================

What:  Business logic layer sitting between routes (HTTP) and repositories (data).
Why:   Routes handle HTTP, repositories handle storage, services decide what
       a lookup result means.

Service Inventory:
    - CarService: get_details(name) → Car, or CarNotFoundError
"""
