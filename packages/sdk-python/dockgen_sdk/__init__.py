"""dockgen SDK - Generate Dockerfiles for common application frameworks.

This package provides tools for:
- Generating a Dockerfile for React+Vite, Next.js, Express, FastAPI or Django
- Looking up framework metadata (ports, default versions)
- Tracking an interactive generation session
- Building usage instructions and copying output to the clipboard

Example:
    >>> from dockgen_sdk import generate
    >>> dockerfile = generate("react-vite", "18-alpine")
    >>> dockerfile.splitlines()[1]
    'FROM node:18-alpine AS build'

Package Structure:
    dockgen_sdk/
    ├── generator.py    - generate() entry point
    ├── registry.py     - framework table
    ├── session.py      - interactive session state
    ├── usage.py        - build/run instructions
    ├── clipboard.py    - clipboard copy
    └── templates/      - Jinja2 Dockerfile templates
"""

from .generator import generate, generate_from_request
from .registry import (
    FRAMEWORKS,
    default_version,
    framework_keys,
    get_framework,
    is_node_framework,
    is_python_framework,
    list_frameworks,
)
from .session import GeneratorSession
from .usage import UsageInstructions, build_usage
from .clipboard import copy_to_clipboard, write_clipboard
from .templates import TemplateContext, TemplateRenderer, get_renderer, render_dockerfile

__version__ = "0.1.0"

__all__ = [
    # Generation
    "generate",
    "generate_from_request",
    # Registry
    "FRAMEWORKS",
    "default_version",
    "framework_keys",
    "get_framework",
    "is_node_framework",
    "is_python_framework",
    "list_frameworks",
    # Session
    "GeneratorSession",
    # Usage
    "UsageInstructions",
    "build_usage",
    # Clipboard
    "copy_to_clipboard",
    "write_clipboard",
    # Templates
    "TemplateRenderer",
    "TemplateContext",
    "get_renderer",
    "render_dockerfile",
]
