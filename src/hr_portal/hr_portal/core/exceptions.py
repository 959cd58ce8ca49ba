class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when required input is missing, before any store call."""


class NotFoundError(DomainError):
    """Raised when a looked-up record does not exist (e.g. unknown employee id at login)."""


class StoreError(DomainError):
    """Raised when the record store rejects an operation.

    The message is the store's own text where one is available.
    """


class PartialFailureError(StoreError):
    """Raised when a multi-step write stopped after some steps were already applied."""


class ConfigurationError(DomainError):
    """Raised at startup when required settings are missing or malformed."""
