"""
Domain errors raised by the store and services.

Handlers do not catch these individually; ``main.create_app``
registers exception handlers that render them as JSON bodies with a
``message`` field and the status code declared on the class.
"""

from fastapi import status


class StoreError(Exception):
    """Base class for store failures."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RecordNotFoundError(StoreError):
    """No record matched a keyed lookup or replacement."""

    status_code = status.HTTP_404_NOT_FOUND


class DuplicateRecordError(StoreError):
    """A record with the same unique key already exists."""

    status_code = status.HTTP_409_CONFLICT


class ValuationError(StoreError):
    """A derived value (portfolio total, suggestion) is not a finite number."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
