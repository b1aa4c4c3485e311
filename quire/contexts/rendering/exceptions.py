"""Custom exceptions for rendering context."""

from typing import Optional


class DocumentGenerationError(Exception):
    """
    Exception raised when a backend fails to produce a document.

    Attributes:
        message: Error description
        backend: Name of the backend that failed (e.g., 'procedural')
        original_error: The exception raised by the PDF library
    """

    def __init__(
        self,
        message: str,
        backend: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.backend = backend
        self.original_error = original_error

        # Build enhanced error message
        parts = [message]

        if backend:
            parts.append(f"\nBackend: {backend}")

        if original_error:
            parts.append(f"\nOriginal error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))
