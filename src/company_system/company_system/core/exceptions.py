class DomainError(Exception):
    """Base exception for the company system."""


class InvalidArgumentError(DomainError):
    """Raised when a caller passes an unusable argument (e.g. a non-positive id)."""


class ConfigurationError(DomainError):
    """Raised at startup when settings are missing or malformed."""


class ConstraintViolationError(DomainError):
    """Raised when the store's own unique/foreign-key constraints reject a write."""

    def __init__(self, kind, message: str):
        super().__init__(message)
        self.kind = kind
