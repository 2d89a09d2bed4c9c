"""
Usage Instructions
==================

Step-by-step instructions for using a generated Dockerfile: where to save it,
how to build the image and how to run it with the right port mapping.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from dockgen_common import DEFAULT_OUTPUT_FILE
from dockgen_schema import FrameworkKey

from .registry import get_framework


@dataclass(frozen=True)
class UsageInstructions:
    """How to build and run the image for one framework."""

    framework: str
    label: str
    container_port: int
    host_port: int

    @property
    def image_name(self) -> str:
        return f"my-{self.framework}-app"

    @property
    def build_command(self) -> str:
        return f"docker build -t {self.image_name} ."

    @property
    def port_mapping(self) -> str:
        return f"{self.host_port}:{self.container_port}"

    @property
    def run_command(self) -> str:
        return f"docker run -p {self.port_mapping} {self.image_name}"

    @property
    def url(self) -> str:
        return f"http://localhost:{self.host_port}"

    def steps(self) -> List[str]:
        """Ordered instruction lines."""
        return [
            f"Create a new file named {DEFAULT_OUTPUT_FILE} (no extension) "
            f"in your {self.label} project's root directory",
            f"Copy the generated content into the {DEFAULT_OUTPUT_FILE}",
            "Open a terminal in your project directory",
            f"Build the Docker image: {self.build_command}",
            f"Run the container: {self.run_command}",
            f"Visit {self.url} in your browser",
        ]


def build_usage(framework: Union[FrameworkKey, str, None]) -> Optional[UsageInstructions]:
    """Usage instructions for a framework, or None if it is unknown."""
    spec = get_framework(framework)
    if spec is None:
        return None
    return UsageInstructions(
        framework=spec.key.value,
        label=spec.label,
        container_port=spec.container_port,
        host_port=spec.host_port,
    )
