"""
Generator Session
=================

In-memory state of one interactive generation: the selected framework, the
Node and Python version fields, and the most recently generated Dockerfile.

Selecting a different framework clears the generated text, so stale output
for a previous framework is never shown or copied.
"""

from typing import Optional, Union

from dockgen_common import DockgenLogger, get_logger, get_settings
from dockgen_schema import FrameworkFamily, FrameworkKey, FrameworkSpec

from .clipboard import copy_to_clipboard
from .generator import generate
from .registry import get_framework
from .usage import UsageInstructions, build_usage

logger = get_logger(__name__)


class GeneratorSession:
    """
    Stateful wrapper around ``generate`` for interactive front ends.

    Example:
        >>> session = GeneratorSession()
        >>> session.select_framework("nextjs")
        >>> session.set_version("18-alpine")
        >>> text = session.generate()
        >>> session.copy()
    """

    def __init__(
        self,
        node_version: Optional[str] = None,
        python_version: Optional[str] = None,
    ):
        settings = get_settings()
        self.framework: Optional[FrameworkKey] = None
        self.node_version = settings.node_version if node_version is None else node_version
        self.python_version = (
            settings.python_version if python_version is None else python_version
        )
        self.dockerfile = ""

    @property
    def spec(self) -> Optional[FrameworkSpec]:
        return get_framework(self.framework)

    @property
    def family(self) -> Optional[FrameworkFamily]:
        spec = self.spec
        return spec.family if spec else None

    def select_framework(self, framework: Union[FrameworkKey, str, None]) -> Optional[FrameworkKey]:
        """
        Make ``framework`` the active selection and clear the generated text.

        Unknown values leave the session with no active framework.
        """
        self.framework = FrameworkKey.parse(framework)
        self.dockerfile = ""
        if self.framework is None and framework:
            logger.warning(f"Unknown framework '{framework}'")
        return self.framework

    @property
    def active_version(self) -> Optional[str]:
        """Version field that applies to the active framework."""
        family = self.family
        if family is FrameworkFamily.NODE:
            return self.node_version
        if family is FrameworkFamily.PYTHON:
            return self.python_version
        return None

    def set_version(self, version: str) -> None:
        """Store ``version`` in the Node or Python field, per the active family."""
        family = self.family
        if family is FrameworkFamily.NODE:
            self.node_version = version
        elif family is FrameworkFamily.PYTHON:
            self.python_version = version
        else:
            logger.warning("No framework selected; version ignored")

    def generate(self) -> str:
        """Generate, store and return the Dockerfile for the active framework."""
        self.dockerfile = generate(self.framework, self.active_version)
        if self.framework is not None:
            DockgenLogger(logger, framework=self.framework.value).debug(
                "Generated Dockerfile", extra={"version": self.active_version}
            )
        return self.dockerfile

    def copy(self) -> bool:
        """Copy the current Dockerfile text to the clipboard."""
        if not self.dockerfile:
            logger.debug("Nothing generated yet; skipping clipboard copy")
            return False
        return copy_to_clipboard(self.dockerfile)

    def usage(self) -> Optional[UsageInstructions]:
        return build_usage(self.framework)

    def __repr__(self) -> str:
        framework = self.framework.value if self.framework else None
        return f"GeneratorSession(framework={framework!r}, version={self.active_version!r})"


__all__ = ["GeneratorSession"]
