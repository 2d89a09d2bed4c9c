"""
dockgen Common Package

Shared primitives used by every dockgen package.

This package provides:
- Exception classes for consistent error handling
- Constants for supported frameworks, default versions and ports
- Logging helpers built on the standard library
- Settings loaded from DOCKGEN_* environment variables

Usage:
    from dockgen_common import get_logger, get_settings, SUPPORTED_FRAMEWORKS
"""

# Error classes
from .errors import (
    DockgenError,
    ValidationError,
    TemplateRenderError,
    ClipboardError,
)

# Constants
from .constants import (
    DOCKGEN_VERSION,
    NODE_FRAMEWORKS,
    PYTHON_FRAMEWORKS,
    SUPPORTED_FRAMEWORKS,
    LOG_LEVELS,
    OUTPUT_FORMATS,
    DEFAULT_NODE_VERSION,
    DEFAULT_PYTHON_VERSION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FILE,
    PLACEHOLDER_DOCKERFILE,
)

# Logger
from .logger import (
    DockgenLogger,
    JsonFormatter,
    get_logger,
    configure_logging,
)

# Settings
from .config import Settings, get_settings

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DockgenError",
    "ValidationError",
    "TemplateRenderError",
    "ClipboardError",
    # Constants
    "DOCKGEN_VERSION",
    "NODE_FRAMEWORKS",
    "PYTHON_FRAMEWORKS",
    "SUPPORTED_FRAMEWORKS",
    "LOG_LEVELS",
    "OUTPUT_FORMATS",
    "DEFAULT_NODE_VERSION",
    "DEFAULT_PYTHON_VERSION",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_OUTPUT_FILE",
    "PLACEHOLDER_DOCKERFILE",
    # Logger
    "DockgenLogger",
    "JsonFormatter",
    "get_logger",
    "configure_logging",
    # Settings
    "Settings",
    "get_settings",
]
