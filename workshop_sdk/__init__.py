from workshop_sdk.client import WorkshopClient, create_client
from workshop_sdk.errors import (
    HttpStatusError,
    ParseError,
    ShapeValidationError,
    TransportError,
    WorkshopAPIError,
)

__all__ = [
    "WorkshopClient",
    "create_client",
    "WorkshopAPIError",
    "TransportError",
    "HttpStatusError",
    "ParseError",
    "ShapeValidationError",
]
