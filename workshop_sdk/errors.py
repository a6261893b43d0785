# workshop_sdk/errors.py
"""
Errors raised by the workshop SDK.

Every failure of an API call surfaces as one of the WorkshopAPIError
subclasses below. Nothing is retried or recovered internally.
"""
from typing import Any


class WorkshopAPIError(Exception):
    """Base class for all SDK errors"""


class TransportError(WorkshopAPIError):
    """The underlying network call could not complete."""

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        super().__init__(f"Request failed: {method} {url} - {reason}")


class HttpStatusError(WorkshopAPIError):
    """
    Response status outside 200-299.

    When the server answers with its JSON error body ({"message": ..., "data": ...})
    those fields are exposed as `message` and `data`.
    """

    def __init__(self, status: int, message: str | None = None, data: Any = None):
        self.status = status
        self.message = message
        self.data = data
        text = f"API error: {status}"
        if message:
            text += f" ({message})"
        super().__init__(text)


class ParseError(WorkshopAPIError):
    def __init__(self, reason: str):
        super().__init__(f"Failed to parse JSON response: {reason}")


class ShapeValidationError(WorkshopAPIError):
    """Decoded body is not the list / object / null the operation expects."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Invalid response for {operation}")
