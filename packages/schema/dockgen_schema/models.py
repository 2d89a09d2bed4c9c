"""
dockgen Schema Models

Pydantic models describing what can be generated:

- FrameworkKey: the five supported application frameworks
- FrameworkFamily: Node vs Python, which decides the base image and the
  meaning of the version string
- FrameworkSpec: static metadata for one framework (template, ports, label)
- GenerationRequest: a framework selection plus an optional version override

Design Principles:
- Pure data: no template rendering, no I/O
- Lenient keys: unknown framework values parse to None instead of raising,
  because "no framework selected" is a normal state of the form
- Version strings are never validated; they are interpolated verbatim
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from dockgen_common import (
    DEFAULT_NODE_VERSION,
    DEFAULT_PYTHON_VERSION,
    ValidationError,
)


# =============================================================================
# ENUMS
# =============================================================================

class FrameworkFamily(str, Enum):
    """Runtime family of a framework."""

    NODE = "node"
    PYTHON = "python"

    @property
    def base_image(self) -> str:
        """Docker Hub image name used in the build stage FROM line."""
        return self.value

    @property
    def default_version(self) -> str:
        """Image tag used when the caller gives no version."""
        if self is FrameworkFamily.NODE:
            return DEFAULT_NODE_VERSION
        return DEFAULT_PYTHON_VERSION


class FrameworkKey(str, Enum):
    """Identifier of a supported framework."""

    REACT_VITE = "react-vite"
    NEXTJS = "nextjs"
    EXPRESS = "express"
    FASTAPI = "fastapi"
    DJANGO = "django"

    @classmethod
    def parse(cls, value: Union["FrameworkKey", str, None]) -> Optional["FrameworkKey"]:
        """
        Parse a framework key, returning None for empty or unknown values.

        Keys match exactly; "FastAPI" or " django" are unknown.
        """
        if value is None or value == "":
            return None
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


# =============================================================================
# FRAMEWORK METADATA
# =============================================================================

class FrameworkSpec(BaseModel):
    """
    Static description of one framework.

    Attributes:
        key: Framework identifier
        label: Human readable name shown in prompts and instructions
        family: Node or Python
        template: Template file name relative to the dockerfiles directory
        container_port: Port declared with EXPOSE in the generated Dockerfile
        host_port: Port suggested for `docker run -p <host>:<container>`
    """

    key: FrameworkKey
    label: str
    family: FrameworkFamily
    template: str
    container_port: int
    host_port: int

    model_config = ConfigDict(frozen=True)

    @field_validator("container_port", "host_port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Ports must be in the valid TCP range"""
        if not 1 <= v <= 65535:
            raise ValidationError(f"Port must be between 1 and 65535, got {v}")
        return v

    @field_validator("template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """Template names must be Jinja2 files"""
        if not v.endswith(".j2"):
            raise ValidationError(f"Template '{v}' must be a .j2 file")
        return v

    @property
    def base_image(self) -> str:
        return self.family.base_image

    @property
    def default_version(self) -> str:
        return self.family.default_version

    @property
    def is_node(self) -> bool:
        return self.family is FrameworkFamily.NODE

    @property
    def is_python(self) -> bool:
        return self.family is FrameworkFamily.PYTHON


# =============================================================================
# REQUESTS
# =============================================================================

class GenerationRequest(BaseModel):
    """
    One "Generate Dockerfile" action.

    ``framework`` is kept as the raw string the user supplied so that an
    unknown value can still be reported back; ``framework_key`` is the
    parsed form (None when unset or unknown).
    """

    framework: Optional[str] = None
    version: Optional[str] = None

    @field_validator("framework", mode="before")
    @classmethod
    def coerce_framework(cls, v):
        if isinstance(v, FrameworkKey):
            return v.value
        return v

    @property
    def framework_key(self) -> Optional[FrameworkKey]:
        return FrameworkKey.parse(self.framework)

    @property
    def is_selected(self) -> bool:
        return self.framework_key is not None

    def resolved_version(self, family: FrameworkFamily) -> str:
        """Return the version override, or the family default when unset."""
        if self.version is None:
            return family.default_version
        return self.version
