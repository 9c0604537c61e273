"""
Exception hierarchy for pdfqa.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class PdfQAException(Exception):
    """Base exception for all pdfqa errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(PdfQAException):
    """Raised when settings are missing or invalid (API key, provider)."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the offending setting or environment variable
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class DocumentLoadError(PdfQAException):
    """Raised when a PDF cannot be read or its text cannot be extracted."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document load error.

        Args:
            message: Error message
            file_path: Path that failed to load
            details: Additional context
        """
        details = details or {}
        if file_path is not None:
            details["file_path"] = file_path
        self.file_path = file_path
        super().__init__(message, details)


class EmbeddingServiceError(PdfQAException):
    """Raised when the embedding service fails (network, auth, quota)."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize embedding service error.

        Args:
            message: Error message
            operation: Operation that failed (embed_documents, embed_query)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class GenerationServiceError(PdfQAException):
    """Raised when the LLM completion call fails (timeout, quota, network)."""

    def __init__(
        self,
        message: str,
        model: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize generation service error.

        Args:
            message: Error message
            model: Model identifier used for the failed call
            details: Additional context
        """
        details = details or {}
        if model:
            details["model"] = model
        super().__init__(message, details)
