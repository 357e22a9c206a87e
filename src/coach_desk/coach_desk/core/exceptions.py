class DomainError(Exception):
    """Base exception for data layer and business rule failures."""


class ValidationError(DomainError):
    """Raised when input data is malformed (bad amount, date, month, status...)."""


class ConstraintViolationError(DomainError):
    """Raised when a uniqueness, NOT NULL or foreign key constraint is violated."""


class NotFoundError(DomainError):
    """Raised when a caller requires an entity that does not exist."""


class StorageError(DomainError):
    """Raised when the storage engine fails (I/O, corruption, locked database)."""
