"""Exception classes for the house price maps."""

from typing import Any, Dict, Optional


class PriceMapsError(Exception):
    """Base exception for all house price map errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ColorModelError(PriceMapsError, ValueError):
    """Raised when a threshold color model is misconfigured or queried with an unknown color."""


class DataLoadError(PriceMapsError):
    """Raised when an input file cannot be fetched or parsed."""

    def __init__(self, source: str, reason: str):
        message = f"Failed to load {source}: {reason}"
        super().__init__(message, details={"source": source, "reason": reason})
        self.source = source
        self.reason = reason
