"""Shared console helpers for dockgen commands."""

from rich.console import Console
from rich.prompt import Confirm

from dockgen_common import DockgenError, get_logger

console = Console()
logger = get_logger(__name__)


def success(message: str) -> None:
    console.print(f"[bold green]✅ {message}[/bold green]")


def error(message: str) -> None:
    console.print(f"[bold red]❌ {message}[/bold red]")


def warning(message: str) -> None:
    console.print(f"[bold yellow]⚠️  {message}[/bold yellow]")


def info(message: str) -> None:
    console.print(f"[cyan]ℹ️  {message}[/cyan]")


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask a yes/no question on the console."""
    return Confirm.ask(message, default=default, console=console)


def handle_error(exc: Exception, verbose: bool = False) -> None:
    """Report an unexpected exception; full traceback only in verbose mode."""
    if isinstance(exc, DockgenError):
        error(f"{exc.message} [{exc.code}]")
    else:
        error(f"Unexpected error: {exc}")
    logger.debug("Command failed", exc_info=exc)
    if verbose:
        console.print_exception()
    else:
        console.print("[dim]Run with --verbose for details[/dim]")
