"""dockgen CLI - Main entry point."""
from typing import Optional

import typer

from dockgen_common import DockgenError, configure_logging, get_settings
from . import generate_cmd, frameworks_cmd, info_cmd
from .utils import error

app = typer.Typer(
    name="dockgen",
    help="dockgen CLI - Generate Dockerfiles for React+Vite, Next.js, Express, FastAPI and Django",
    no_args_is_help=True,
    add_completion=False
)


@app.callback()
def setup(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level: debug, info, warning or error (default: DOCKGEN_LOG_LEVEL or warning)"
    )
):
    """Configure logging before any command runs."""
    try:
        settings = get_settings()
        configure_logging(log_level or settings.log_level, json_output=settings.log_json)
    except DockgenError as e:
        error(e.message)
        raise typer.Exit(1)


# Register all commands
app.command()(generate_cmd.generate)
app.command()(frameworks_cmd.frameworks)
app.command()(info_cmd.version)
app.command()(info_cmd.doctor)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
