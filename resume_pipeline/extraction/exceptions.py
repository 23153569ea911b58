class CompletionError(Exception):
    """Raised when the completion provider returns no usable answer."""


class CompletionNetworkError(CompletionError):
    """Raised when the completion call fails due to network/infrastructure issues."""


class DraftValidationError(Exception):
    """Raised when a parsed completion does not have the résumé draft shape."""
