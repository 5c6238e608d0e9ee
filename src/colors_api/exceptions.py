"""Domain exception hierarchy for the Colors API.

All domain-specific exceptions inherit from ColorsApiError.
This allows catching all application errors with a single base class
while preserving specificity for individual error types.
"""

from typing import Any


class ColorsApiError(Exception):
    """Base exception for all Colors API errors.

    All domain exceptions should inherit from this class.
    Includes optional error_code for API responses and extra context.
    """

    error_code: str = "COLORS_ERROR"
    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        status_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        if status_code:
            self.status_code = status_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "success": False,
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Validation Errors
# =============================================================================


class ColorValidationError(ColorsApiError):
    """Base exception for invalid generation or export input."""

    error_code = "VALIDATION_ERROR"
    status_code = 422


class InvalidColorFormatError(ColorValidationError):
    """Raised when a color is not a #RRGGBB hex string."""

    error_code = "INVALID_COLOR_FORMAT"
    status_code = 400

    def __init__(self, value: Any, field: str | None = None) -> None:
        label = f"Invalid {field}" if field else "Invalid hex color format"
        super().__init__(
            f"{label}: {value!r}. Expected format: #RRGGBB",
            context={"value": str(value), "field": field},
        )


class InvalidThemeOptionError(ColorValidationError):
    """Raised when a gray or background theme keyword is not recognised."""

    error_code = "INVALID_THEME_OPTION"
    status_code = 400

    def __init__(self, value: Any, allowed: list[str], field: str | None = None) -> None:
        name = field or "theme"
        super().__init__(
            f"{name} must be one of: {', '.join(allowed)} (got {value!r})",
            context={"value": str(value), "field": field, "allowed": allowed},
        )


class InvalidExportOptionError(ColorValidationError):
    """Raised when an export option (mode, case style, structure) is unknown."""

    error_code = "INVALID_EXPORT_OPTION"
    status_code = 400

    def __init__(self, option: str, value: Any, allowed: list[str]) -> None:
        super().__init__(
            f"{option} must be one of: {', '.join(allowed)} (got {value!r})",
            context={"option": option, "value": str(value), "allowed": allowed},
        )


# =============================================================================
# Export Errors
# =============================================================================


class ExportError(ColorsApiError):
    """Base exception for export-related errors."""

    error_code = "EXPORT_ERROR"
    status_code = 400


class UnsupportedExportFormatError(ExportError):
    """Raised when an export format id has no registered exporter."""

    error_code = "UNSUPPORTED_EXPORT_FORMAT"

    def __init__(self, format_id: Any, supported: list[str]) -> None:
        super().__init__(
            f"Unsupported export format: {format_id}",
            context={"format": str(format_id), "supported": supported},
        )


# =============================================================================
# Session Errors
# =============================================================================


class SessionError(ColorsApiError):
    """Base exception for palette session errors."""

    error_code = "SESSION_ERROR"
    status_code = 400


class SessionNotFoundError(SessionError):
    """Raised when a session id is unknown or its palette has expired."""

    error_code = "SESSION_NOT_FOUND"
    status_code = 404

    def __init__(self, session_id: str) -> None:
        super().__init__(
            f"Color system session not found or has expired: {session_id}",
            context={"session_id": session_id},
        )
