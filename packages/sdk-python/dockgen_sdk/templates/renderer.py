"""
dockgen Template Renderer
=========================

Renders the per-framework Dockerfile templates with Jinja2.

Templates live in ``dockerfiles/<framework>.Dockerfile.j2`` next to this
file. A ``templates/dockerfiles`` directory in the current working directory,
or any directory passed explicitly, is searched first so users can override
a template without touching the package.

The context handed to templates is deliberately small (image name, version,
ports) so that two renders of the same framework differ only where the
version is substituted.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from dockgen_common import DockgenError, TemplateRenderError, get_logger, get_settings
from dockgen_common.constants import DOCKGEN_VERSION
from dockgen_schema import FrameworkSpec
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    Undefined,
)

logger = get_logger(__name__)

# ============================================================================
# Constants
# ============================================================================

# Package templates (same directory as this renderer.py file)
PACKAGE_TEMPLATE_DIR = Path(__file__).parent

# Sub-directory holding the Dockerfile templates, in every search path
DOCKERFILES_DIR = "dockerfiles"

# User-provided templates, resolved against the working directory at init
USER_TEMPLATE_DIR_NAME = "templates"


def dockerfile_template_path(spec: FrameworkSpec) -> str:
    """Template name (relative to a search path) for a framework."""
    return f"{DOCKERFILES_DIR}/{spec.template}"


# ============================================================================
# Template Context Builder
# ============================================================================


class TemplateContext:
    """
    Builds the context dictionary for rendering one framework's Dockerfile.
    """

    def __init__(self, spec: FrameworkSpec, version: str):
        """
        Args:
            spec: Framework metadata from the registry
            version: Image tag to interpolate, used verbatim
        """
        self.spec = spec
        self.version = version

    def build(self, extra_context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context = {
            "dockgen_version": DOCKGEN_VERSION,
            "framework": self.spec.key.value,
            "label": self.spec.label,
            "family": self.spec.family.value,
            "base_image": self.spec.base_image,
            "version": self.version,
            "container_port": self.spec.container_port,
            "host_port": self.spec.host_port,
        }

        if extra_context:
            context.update(extra_context)

        return context


# ============================================================================
# Template Renderer
# ============================================================================


class TemplateRenderer:
    """
    Jinja2 rendering engine for Dockerfile templates.

    Example:
        >>> renderer = TemplateRenderer()
        >>> spec = get_framework("fastapi")
        >>> dockerfile = renderer.render_dockerfile(spec, "3.12-slim")
    """

    def __init__(
        self, template_dirs: Optional[List[Union[str, Path]]] = None, strict_mode: bool = True
    ):
        """
        Initialize the template renderer.

        Args:
            template_dirs: Custom template directories (searched first)
            strict_mode: If True, raise errors for undefined variables
        """
        search_paths: List[str] = []

        if template_dirs:
            for td in template_dirs:
                path = Path(td)
                if path.exists():
                    search_paths.append(str(path))
                else:
                    logger.warning(f"Template directory does not exist, skipping: {path}")

        for default_dir in (Path.cwd() / USER_TEMPLATE_DIR_NAME, PACKAGE_TEMPLATE_DIR):
            if default_dir.exists() and str(default_dir) not in search_paths:
                search_paths.append(str(default_dir))

        if not search_paths:
            raise DockgenError(
                "No template directories found. Expected templates at:\n"
                f"  - {PACKAGE_TEMPLATE_DIR}"
            )

        logger.debug(f"Template search paths: {search_paths}")

        # Dockerfiles are plain text: no autoescaping, and the final newline
        # of each template file is dropped so output ends at the last instruction
        self.env = Environment(
            loader=FileSystemLoader(search_paths),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            undefined=StrictUndefined if strict_mode else Undefined,
        )

        self.template_paths = search_paths

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with given context.

        Raises:
            TemplateRenderError: If template not found or rendering fails
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)

        except TemplateNotFound as e:
            raise TemplateRenderError(
                f"Template not found: {template_name}\nSearched in: {self.template_paths}",
                template=template_name,
            ) from e
        except TemplateError as e:
            raise TemplateRenderError(
                f"Template rendering error: {e}", template=template_name
            ) from e

    def render_dockerfile(
        self,
        spec: FrameworkSpec,
        version: str,
        extra_context: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Render the Dockerfile for one framework.

        Args:
            spec: Framework metadata
            version: Image tag substituted into the FROM lines
            extra_context: Additional template variables (for custom templates)

        Returns:
            Dockerfile content without a trailing newline
        """
        context = TemplateContext(spec, version).build(extra_context)
        template_file = dockerfile_template_path(spec)
        logger.debug(f"Rendering Dockerfile from template: {template_file}")
        return self.render(template_file, context)

    def list_templates(self) -> List[str]:
        """
        List all available templates.

        Returns:
            Sorted template file paths relative to their search path
        """
        templates: List[str] = []
        for path in self.template_paths:
            for root, _, files in os.walk(path):
                for file in files:
                    if file.endswith(".j2"):
                        rel_path = os.path.relpath(os.path.join(root, file), path)
                        rel_path = rel_path.replace(os.sep, "/")
                        if rel_path not in templates:
                            templates.append(rel_path)
        return sorted(templates)


# ============================================================================
# Convenience Functions
# ============================================================================

# Global renderer instance (lazy initialization)
_renderer: Optional[TemplateRenderer] = None


def get_renderer() -> TemplateRenderer:
    """Get or create the global template renderer."""
    global _renderer
    if _renderer is None:
        template_dir = get_settings().template_dir
        _renderer = TemplateRenderer(template_dirs=[template_dir] if template_dir else None)
    return _renderer


def reset_renderer() -> None:
    """Drop the global renderer so the next call rebuilds its search path."""
    global _renderer
    _renderer = None


def render_dockerfile(spec: FrameworkSpec, version: str, **kwargs: Any) -> str:
    """Convenience function to render a Dockerfile."""
    return get_renderer().render_dockerfile(spec, version, kwargs if kwargs else None)


__all__ = [
    "TemplateRenderer",
    "TemplateContext",
    "render_dockerfile",
    "get_renderer",
    "reset_renderer",
    "dockerfile_template_path",
    "PACKAGE_TEMPLATE_DIR",
    "DOCKERFILES_DIR",
]
