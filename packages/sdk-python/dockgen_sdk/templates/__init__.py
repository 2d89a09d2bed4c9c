"""
Template System Module
======================

Jinja2 templates for the generated Dockerfiles, one file per framework.
"""

from .renderer import (
    DOCKERFILES_DIR,
    PACKAGE_TEMPLATE_DIR,
    TemplateContext,
    TemplateRenderer,
    dockerfile_template_path,
    get_renderer,
    render_dockerfile,
    reset_renderer,
)

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
