"""
dockgen Error Classes

All errors raised by dockgen packages derive from ``DockgenError`` so callers
can catch a single base class. Each error carries a machine-readable ``code``
and can be serialized with ``to_dict()`` for JSON output.

Note that generating a Dockerfile for an unknown framework is NOT an error:
the generator returns a placeholder instead.
"""

from typing import Any, Dict, Optional


class DockgenError(Exception):
    """Base class for all dockgen errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or "DOCKGEN_ERROR"
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error for JSON output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


class ValidationError(DockgenError):
    """Raised when configuration values fail validation."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class TemplateRenderError(DockgenError):
    """Raised when a Dockerfile template cannot be found or rendered."""

    def __init__(self, message: str, template: Optional[str] = None):
        self.template = template
        super().__init__(message, code="TEMPLATE_ERROR")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["template"] = self.template
        return data


class ClipboardError(DockgenError):
    """Raised internally when the system clipboard is unavailable."""

    def __init__(self, message: str):
        super().__init__(message, code="CLIPBOARD_ERROR")
