"""
Cars API Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the lookup path.
Why:   Absence must be an explicit, distinguishable failure rather than a
       None that a caller could mistake for a real car.
How:   Each exception carries a message and an optional context dict.
       The context is logged server-side and never returned to the client.
Who:   Raised by the lookup service and the SQL repository; translated by
       the /cars route and the global handlers in main.py.

Exception Hierarchy:
    CarsApiError (base)            → 500 Internal Server Error
    ├── NotFoundError              → resource lookup miss
    │   └── CarNotFoundError       → 204 No Content at GET /cars/{name}
    └── DatabaseError              → 500 Internal Server Error

Translation rules:
    CarNotFoundError is matched explicitly by the /cars route; it is the only
    domain error and the service never swallows it. DatabaseError and anything
    unexpected reach the global handlers and become a generic 500.
"""

from typing import Any, Dict, Optional


class CarsApiError(Exception):
    """
    Base exception for all Cars API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(CarsApiError):
    """
    Raised when a requested resource does not exist.

    Repositories return None for missing rows (SQLAlchemy's
    scalar_one_or_none does not raise). The service layer converts that
    None into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class CarNotFoundError(NotFoundError):
    """
    Raised when no car matches the requested name.

    When:    CarService.get_details() and the repository returned None.
    HTTP:    204 No Content with an empty body (translated by the /cars route).
    """

    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(resource="car", resource_id=name, context=context)
        self.name = name


class DatabaseError(CarsApiError):
    """
    Raised when the backing store fails unexpectedly.

    What:    A query failed or the connection was lost mid-lookup.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. Driver errors,
        SQL text and table names are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
