"""
Dockerfile Generator
====================

The core operation: pick the template for a framework and interpolate the
version into it.

    >>> from dockgen_sdk import generate
    >>> print(generate("fastapi", "3.12-slim").splitlines()[1])
    FROM python:3.12-slim

An empty or unknown framework is not an error; the placeholder text
``# Please select a framework`` is returned instead.
"""

from typing import Optional, Union

from dockgen_common import PLACEHOLDER_DOCKERFILE, get_logger
from dockgen_schema import FrameworkKey, GenerationRequest

from .registry import get_framework
from .templates import get_renderer

logger = get_logger(__name__)


def generate(
    framework: Union[FrameworkKey, str, None],
    version: Optional[str] = None,
) -> str:
    """
    Generate Dockerfile text for a framework.

    Args:
        framework: Framework key (enum or string); None when nothing is selected
        version: Image tag for the base image, used verbatim. None selects
            the framework family's default (20-alpine / 3.11-slim)

    Returns:
        The Dockerfile text, or the placeholder when no known framework is given
    """
    spec = get_framework(framework)
    if spec is None:
        if framework:
            logger.debug(f"Unknown framework '{framework}', returning placeholder")
        return PLACEHOLDER_DOCKERFILE

    resolved = spec.default_version if version is None else version
    logger.debug(f"Generating Dockerfile for {spec.key.value} with {spec.base_image}:{resolved}")
    return get_renderer().render_dockerfile(spec, resolved)


def generate_from_request(request: GenerationRequest) -> str:
    """Generate Dockerfile text for a validated request model."""
    spec = get_framework(request.framework_key)
    if spec is None:
        return PLACEHOLDER_DOCKERFILE
    return generate(spec.key, request.resolved_version(spec.family))
