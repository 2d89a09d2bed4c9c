"""
dockgen Schema Package

Pydantic models for framework selection and generation requests.

Usage:
    from dockgen_schema import FrameworkKey, GenerationRequest

    request = GenerationRequest(framework="fastapi", version="3.12-slim")
    request.framework_key  # FrameworkKey.FASTAPI
"""

from .models import (
    FrameworkFamily,
    FrameworkKey,
    FrameworkSpec,
    GenerationRequest,
)

__version__ = "0.1.0"

__all__ = [
    "FrameworkFamily",
    "FrameworkKey",
    "FrameworkSpec",
    "GenerationRequest",
]
