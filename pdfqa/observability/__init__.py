"""
Observability helpers.

Logging configuration and safe structured logging utilities.
"""

from pdfqa.observability.logger import configure_logging

__all__ = ["configure_logging"]
