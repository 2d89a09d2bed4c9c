"""
Framework Registry
==================

Declarative table of every framework dockgen can generate a Dockerfile for.

Adding a framework is a data change: add a row to ``FRAMEWORKS`` and drop a
matching ``<key>.Dockerfile.j2`` file into ``templates/dockerfiles``. No
branching logic elsewhere needs to change.
"""

from typing import Dict, List, Optional, Union

from dockgen_common.constants import (
    NODE_SERVER_PORT,
    PYTHON_SERVER_PORT,
    STATIC_HOST_PORT,
    STATIC_SERVER_PORT,
)
from dockgen_schema import FrameworkFamily, FrameworkKey, FrameworkSpec

FrameworkRef = Union[FrameworkKey, str, None]

# Ordered as presented to the user
FRAMEWORKS: Dict[FrameworkKey, FrameworkSpec] = {
    spec.key: spec
    for spec in (
        FrameworkSpec(
            key=FrameworkKey.REACT_VITE,
            label="React with Vite",
            family=FrameworkFamily.NODE,
            template="react-vite.Dockerfile.j2",
            container_port=STATIC_SERVER_PORT,
            host_port=STATIC_HOST_PORT,
        ),
        FrameworkSpec(
            key=FrameworkKey.NEXTJS,
            label="Next.js",
            family=FrameworkFamily.NODE,
            template="nextjs.Dockerfile.j2",
            container_port=NODE_SERVER_PORT,
            host_port=NODE_SERVER_PORT,
        ),
        FrameworkSpec(
            key=FrameworkKey.EXPRESS,
            label="Express.js",
            family=FrameworkFamily.NODE,
            template="express.Dockerfile.j2",
            container_port=NODE_SERVER_PORT,
            host_port=NODE_SERVER_PORT,
        ),
        FrameworkSpec(
            key=FrameworkKey.FASTAPI,
            label="FastAPI",
            family=FrameworkFamily.PYTHON,
            template="fastapi.Dockerfile.j2",
            container_port=PYTHON_SERVER_PORT,
            host_port=PYTHON_SERVER_PORT,
        ),
        FrameworkSpec(
            key=FrameworkKey.DJANGO,
            label="Django",
            family=FrameworkFamily.PYTHON,
            template="django.Dockerfile.j2",
            container_port=PYTHON_SERVER_PORT,
            host_port=PYTHON_SERVER_PORT,
        ),
    )
}


def get_framework(key: FrameworkRef) -> Optional[FrameworkSpec]:
    """Look up a framework; None for empty or unknown keys."""
    parsed = FrameworkKey.parse(key)
    if parsed is None:
        return None
    return FRAMEWORKS.get(parsed)


def list_frameworks() -> List[FrameworkSpec]:
    """All frameworks in display order."""
    return list(FRAMEWORKS.values())


def framework_keys() -> List[str]:
    """String keys of all frameworks in display order."""
    return [key.value for key in FRAMEWORKS]


def default_version(ref: Union[FrameworkRef, FrameworkFamily]) -> Optional[str]:
    """
    Default image tag for a framework or family.

    Returns None when ``ref`` names no known framework.
    """
    if isinstance(ref, FrameworkFamily):
        return ref.default_version
    spec = get_framework(ref)
    return spec.default_version if spec else None


def is_node_framework(key: FrameworkRef) -> bool:
    spec = get_framework(key)
    return spec is not None and spec.is_node


def is_python_framework(key: FrameworkRef) -> bool:
    spec = get_framework(key)
    return spec is not None and spec.is_python
