"""
vshelf exception hierarchy.

Series detection itself never raises on malformed books; these exceptions
cover the layers around it (settings files, strict record validation).

Exception Hierarchy:
    VshelfError (base)
    ├── ConfigurationError - Settings file issues, invalid settings
    └── ValidationError - Strict book record validation failures
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class VshelfError(Exception):
    """Base exception for all vshelf errors."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """
        Initialize vshelf exception.

        Args:
            message: Human-readable error message
            details: Optional structured error details for logging/debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(VshelfError):
    """Configuration file or settings error."""

    def __init__(
        self,
        message: str,
        *,
        config_file: Path | str | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if config_file:
            details["config_file"] = str(config_file)
        if field:
            details["field"] = field
        super().__init__(message, details=details)
        self.config_file = config_file
        self.field = field


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(VshelfError):
    """Book record validation failure."""

    def __init__(
        self,
        message: str,
        *,
        errors: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if errors:
            details["errors"] = errors
        super().__init__(message, details=details)
        self.errors = errors or []
