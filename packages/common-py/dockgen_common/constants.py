"""
dockgen Shared Constants

Single source of truth for supported frameworks, version defaults and the
ports each generated image exposes.

Usage:
    from dockgen_common.constants import SUPPORTED_FRAMEWORKS, DEFAULT_NODE_VERSION
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

DOCKGEN_VERSION = "0.1.0"
"""Current dockgen package version"""


# =============================================================================
# SUPPORTED VALUES
# =============================================================================

NODE_FRAMEWORKS = ["react-vite", "nextjs", "express"]
"""Frameworks built on a Node.js base image"""

PYTHON_FRAMEWORKS = ["fastapi", "django"]
"""Frameworks built on a Python base image"""

SUPPORTED_FRAMEWORKS = NODE_FRAMEWORKS + PYTHON_FRAMEWORKS
"""All framework keys, in display order"""

LOG_LEVELS = ["debug", "info", "warning", "error"]
"""Valid log levels for DOCKGEN_LOG_LEVEL"""

OUTPUT_FORMATS = ["table", "json", "yaml"]
"""Formats accepted by `dockgen frameworks --format`"""


# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULT_NODE_VERSION = "20-alpine"
"""Default Node.js image tag"""

DEFAULT_PYTHON_VERSION = "3.11-slim"
"""Default Python image tag"""

DEFAULT_LOG_LEVEL = "warning"
"""Default logging level"""

PLACEHOLDER_DOCKERFILE = "# Please select a framework"
"""Text returned when no (or an unknown) framework is selected"""

DEFAULT_OUTPUT_FILE = "Dockerfile"
"""File name suggested in usage instructions and used by --output"""


# =============================================================================
# PORTS
# =============================================================================

STATIC_SERVER_PORT = 80
"""Port nginx listens on in the react-vite runtime stage"""

NODE_SERVER_PORT = 3000
"""Port Next.js and Express listen on"""

PYTHON_SERVER_PORT = 8000
"""Port uvicorn and gunicorn bind to"""

STATIC_HOST_PORT = 8080
"""Host port suggested for `docker run -p` with the nginx image"""


# =============================================================================
# ENVIRONMENT VARIABLE NAMES
# =============================================================================

ENV_PREFIX = "DOCKGEN_"
"""Prefix for every dockgen environment variable"""

ENV_LOG_LEVEL = "DOCKGEN_LOG_LEVEL"
ENV_LOG_JSON = "DOCKGEN_LOG_JSON"
ENV_NODE_VERSION = "DOCKGEN_NODE_VERSION"
ENV_PYTHON_VERSION = "DOCKGEN_PYTHON_VERSION"
ENV_TEMPLATE_DIR = "DOCKGEN_TEMPLATE_DIR"
