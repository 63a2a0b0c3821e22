"""Error taxonomy shared by the CV store, the render engine and the HTTP layer."""

from typing import Optional


class CvStudioError(Exception):
    """
    Base class for every error raised by cvstudio services.

    Attributes:
        message: Error description
        original_error: The underlying exception, kept for diagnostics
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error

        parts = [message]
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class ValidationError(CvStudioError):
    """Required root or personal-info fields are missing or malformed."""


class NotFoundError(CvStudioError):
    """No CV with the given id belongs to the given owner."""


class StorageError(CvStudioError):
    """The transaction failed and was rolled back."""


class RenderError(CvStudioError):
    """The CV has nothing to render, or the document backend failed."""
