# File: backoffice/errors.py
"""
View resolution errors.

Raised by the view resolver. The page controller only guards against a
missing view through an existence check; everything else propagates to
Flask's default error handling.
"""


class ViewError(Exception):
    """Base for view resolution failures."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key = key


class ViewNotFound(ViewError):
    """No template exists for the requested view key."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"View not found: {key!r}")


class RenderError(ViewError):
    """The template exists but could not be compiled or rendered."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(key, f"Failed to render view {key!r}: {reason}")
        self.reason = reason
