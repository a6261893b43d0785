# workshop_sdk/shapes.py
"""
Coarse response checks done at the API boundary.

Only the container is verified (list, non-null object, or null). The fields
inside are trusted to match the typed entities in workshop_sdk.models.
"""
import logging
from typing import Any

from workshop_sdk.errors import ShapeValidationError

logger = logging.getLogger(__name__)


def _reject(operation: str, response: Any) -> ShapeValidationError:
    logger.error(
        f"Unexpected response shape for {operation}: {type(response).__name__}"
    )
    return ShapeValidationError(operation)


def expect_list(operation: str, response: Any) -> list:
    if not isinstance(response, list):
        raise _reject(operation, response)
    return response


def expect_object(operation: str, response: Any) -> dict:
    if not isinstance(response, dict):
        raise _reject(operation, response)
    return response


def expect_none(operation: str, response: Any) -> None:
    if response is not None:
        raise _reject(operation, response)
