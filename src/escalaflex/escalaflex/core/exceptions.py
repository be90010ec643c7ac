class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotConfiguredError(DomainError):
    """Raised when no shift pattern has been set up yet."""


class StorageError(DomainError):
    """Raised when persisted data cannot be read back."""


class SuggestionError(DomainError):
    """Raised when the AI suggestion service fails."""


class SuggestionInProgressError(SuggestionError):
    """Raised when a suggestion is requested while another is still running."""


class SuggestionNotConfiguredError(SuggestionError):
    """Raised when no AI client is configured."""
