"""Error kinds raised by the entity stores and storage backends."""

from typing import List, Optional


class StoreError(Exception):
    """Base class for store failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StoreError):
    """A required field is missing/empty or a cross-field invariant is broken."""

    def __init__(self, errors: List[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class NotFoundError(StoreError):
    """An operation referenced an id that is not in the collection."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} '{entity_id}' not found")


class StorageUnavailableError(StoreError):
    """The persistence collaborator could not be read or written."""

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        super().__init__(message)
