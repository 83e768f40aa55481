"""Domain exceptions raised by the service layer.

Each exception carries the HTTP status it is translated to by the handlers
registered in ``atlas.main``.
"""

from typing import Any
from uuid import UUID


class AtlasError(Exception):
    """Base class for all catalog errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, detail: Any = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class EntityNotFoundError(AtlasError):
    """A referenced entity id does not resolve."""

    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id: UUID | str, message: str | None = None):
        super().__init__(message or f'{entity} with ID "{entity_id}" does not exist')
        self.entity = entity
        self.entity_id = entity_id


class InvalidInputError(AtlasError):
    """Input violates a structural or datatype constraint."""

    status_code = 400
    code = "INVALID_INPUT"


class EntityReferenceConstraintViolationError(AtlasError):
    """An operation is blocked because another record still depends on the target."""

    status_code = 409
    code = "REFERENCE_CONSTRAINT_VIOLATION"
