"""
Cars API Backend — Pydantic Schemas
====================================

What:  The Car value type and the standard error envelope.
Why:   `Car` is both the domain value the service returns and the API
       contract FastAPI serializes, so the two can never drift apart.
How:   Frozen Pydantic models. `from_attributes` lets the SQL repository
       build a Car straight from a CarRecord row.

Design Decision:
    Car is separate from the CarRecord ORM model:
    1. The service and route never see SQLAlchemy objects
    2. The in-memory provider builds Car values without a database
    3. The JSON body is exactly {name, type}, nothing from the table leaks
"""

from typing import Optional

from pydantic import BaseModel, Field


class Car(BaseModel):
    """
    What:  Immutable car value identified by name.
    Who:   Returned by every CarRepository and by CarService.get_details();
           serialized as the body of GET /cars/{name}.

    Example:
        {"name": "prius", "type": "hybrid"}
    """
    name: str = Field(description="Car name (lookup key, case-sensitive)")
    type: str = Field(description="Free-form classification, e.g. 'hybrid'")

    model_config = {"frozen": True, "from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for server errors.
    Why:   Clients need a consistent structure to parse errors programmatically.

    Fields:
        error: Machine-readable error code (e.g., "server_error")
        message: Human-readable description
        request_id: Correlation ID for tracing this error in server logs

    Error context stays in the server logs; it is never part of the body.
    Note: a missing car is NOT an error response; it is an empty 204.
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
