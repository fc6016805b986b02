"""Custom exception hierarchy for cre-mock."""


class CreMockError(Exception):
    """Base exception for all cre-mock errors."""

    code = "SERVER_ERROR"
    status_code = 500


class EntityNotFoundError(CreMockError):
    """Raised when a referenced entity does not exist."""

    code = "NOT_FOUND"
    status_code = 404


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class InvalidEntityStateError(CreMockError):
    """Raised when an entity is in an invalid state for the operation."""


class InvalidPaginationError(CreMockError):
    """Raised when limit or offset fail validation."""

    code = "INVALID_PAGINATION"
    status_code = 400


class RegenerationError(CreMockError):
    """Raised when the dataset could not be regenerated."""

    code = "REGENERATION_FAILED"
    status_code = 500


class DocsUnavailableError(CreMockError):
    """Raised when the bundled API description could not be loaded."""

    code = "DOCS_UNAVAILABLE"
    status_code = 503


class ConfigurationError(CreMockError):
    """Raised when configuration is invalid or missing."""


class SinkError(CreMockError):
    """Raised when a sink operation fails."""
