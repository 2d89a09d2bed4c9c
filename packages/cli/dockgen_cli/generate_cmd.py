"""Generate command - Produce a Dockerfile for a framework."""
import sys
from pathlib import Path
from typing import Optional

import click
import typer
from rich.panel import Panel
from rich.syntax import Syntax

from dockgen_common import configure_logging, get_settings
from dockgen_schema import FrameworkFamily
from dockgen_sdk import GeneratorSession, framework_keys, list_frameworks
from .utils import console, success, info, warning, confirm_action, handle_error

app = typer.Typer()


def stdin_is_interactive() -> bool:
    return sys.stdin.isatty()


def prompt_framework() -> str:
    """Ask the user to pick one of the supported frameworks."""
    console.print("[bold cyan]Select your application framework:[/bold cyan]")
    for spec in list_frameworks():
        console.print(f"  • [cyan]{spec.key.value}[/cyan] - {spec.label}")
    return typer.prompt(
        "Framework",
        type=click.Choice(framework_keys(), case_sensitive=False),
    )


def prompt_version(session: GeneratorSession) -> str:
    """Ask for the image tag, prefilled with the session's current value."""
    label = "Node version" if session.family is FrameworkFamily.NODE else "Python version"
    return typer.prompt(label, default=session.active_version)


def write_output(path: Path, content: str, force: bool) -> bool:
    """
    Save the Dockerfile to disk.

    Returns:
        False if the user declined to overwrite an existing file
    """
    if path.exists() and not force:
        if not confirm_action(f"{path} already exists. Overwrite?", default=False):
            return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n")
    return True


def show_usage(session: GeneratorSession) -> None:
    usage = session.usage()
    if usage is None:
        return
    console.print("\n[bold cyan]How to use this Dockerfile:[/bold cyan]")
    for idx, step in enumerate(usage.steps(), 1):
        console.print(f"  {idx}. {step}", highlight=False)


@app.command(name="generate")
def generate(
    framework: Optional[str] = typer.Argument(
        None,
        help="Framework key: react-vite, nextjs, express, fastapi or django (prompted if omitted on a terminal)"
    ),
    version: Optional[str] = typer.Option(
        None,
        "--version", "-V",
        help="Base image tag, e.g. 18-alpine or 3.10-slim (default: 20-alpine / 3.11-slim)"
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Also write the Dockerfile to this path"
    ),
    force: bool = typer.Option(
        False,
        "--force", "-f",
        help="Overwrite the output file without asking"
    ),
    copy: bool = typer.Option(
        False,
        "--copy", "-c",
        help="Copy the generated Dockerfile to the clipboard"
    ),
    usage: bool = typer.Option(
        True,
        "--usage/--no-usage",
        help="Show build and run instructions"
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print only the Dockerfile text (for piping)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show detailed output"
    )
):
    """
    Generate a Dockerfile for your application framework.

    Node frameworks (react-vite, nextjs, express) use a node:<version> build
    stage; Python frameworks (fastapi, django) use python:<version>.

    Examples:
        dockgen generate
        dockgen generate react-vite --version 18-alpine
        dockgen generate fastapi -V 3.10-slim -o Dockerfile
        dockgen generate django --plain > Dockerfile
    """
    try:
        if verbose:
            configure_logging("debug", json_output=get_settings().log_json)

        session = GeneratorSession()

        interactive = framework is None and stdin_is_interactive()
        if interactive:
            framework = prompt_framework()

        key = session.select_framework(framework)
        if key is not None:
            if version is not None:
                session.set_version(version)
            elif interactive:
                session.set_version(prompt_version(session))

        dockerfile = session.generate()

        if key is None:
            if not plain:
                problem = "No framework given" if framework is None else f"Unknown framework '{framework}'"
                warning(f"{problem}. Choose one of: {', '.join(framework_keys())}")
            typer.echo(dockerfile)
            return

        if plain:
            typer.echo(dockerfile)
        else:
            console.print()
            syntax = Syntax(dockerfile, "docker", theme="monokai", word_wrap=True)
            console.print(Panel(syntax, title="Generated Dockerfile", border_style="green"))

        if output:
            output_path = Path(output)
            if write_output(output_path, dockerfile, force):
                if not plain:
                    success(f"Dockerfile written to {output_path}")
            elif not plain:
                warning(f"Skipped writing {output_path}")

        if copy:
            if session.copy():
                if not plain:
                    success("Dockerfile copied to clipboard!")
            elif not plain:
                warning("Could not copy to clipboard; copy the text above manually")

        if usage and not plain:
            show_usage(session)

        if verbose and not plain:
            console.print()
            info(f"Base image: {session.spec.base_image}:{session.active_version}")

    except typer.Exit:
        raise
    except click.exceptions.Abort:
        console.print()
        info("Cancelled")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        info("\nGeneration cancelled by user")
        raise typer.Exit(130)
    except Exception as e:
        handle_error(e, verbose)
        raise typer.Exit(1)
