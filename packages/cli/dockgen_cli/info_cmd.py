"""Info commands - Version and doctor diagnostics."""
import sys

import typer
from rich.table import Table

from dockgen_common import DockgenError, get_settings
from .utils import console, success, warning, error, info

app = typer.Typer()


@app.command(name="version")
def version():
    """
    Show dockgen version information.

    Examples:
        dockgen version
    """
    try:
        import dockgen_common
        import dockgen_sdk
        from . import __version__ as cli_version

        python_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

        table = Table(title="dockgen Version Information", show_header=True, header_style="bold cyan")
        table.add_column("Component", style="cyan", no_wrap=True)
        table.add_column("Version", style="green")

        table.add_row("CLI", cli_version)
        table.add_row("SDK", dockgen_sdk.__version__)
        table.add_row("Common", dockgen_common.__version__)
        table.add_row("Python", python_version)

        console.print(table)

    except Exception as e:
        error(f"Failed to get version info: {str(e)}")
        raise typer.Exit(1)


@app.command(name="doctor")
def doctor():
    """
    Diagnose common issues with your dockgen setup.

    Checks for:
    - Python version
    - Valid DOCKGEN_* settings
    - A renderable template for every framework

    Examples:
        dockgen doctor
    """
    console.print("[bold cyan]🔍 Running diagnostics...[/bold cyan]\n")

    issues = []
    checks_passed = 0
    total_checks = 0

    # Python version
    total_checks += 1
    if sys.version_info >= (3, 9):
        success(f"Python {sys.version.split()[0]}")
        checks_passed += 1
    else:
        warning(f"Python {sys.version.split()[0]} (3.9+ required)")
        issues.append("Upgrade to Python 3.9 or higher")

    # Settings
    total_checks += 1
    try:
        get_settings.cache_clear()
        settings = get_settings()
        success(f"Settings loaded (log level: {settings.log_level})")
        checks_passed += 1
    except DockgenError as e:
        warning(f"Invalid settings: {e.message}")
        issues.append("Fix the DOCKGEN_* environment variables")
        settings = None

    # Templates
    from dockgen_sdk import generate, list_frameworks

    for spec in list_frameworks():
        total_checks += 1
        try:
            generate(spec.key)
            success(f"Template OK: {spec.key.value}")
            checks_passed += 1
        except DockgenError as e:
            warning(f"Template failed for {spec.key.value}: {e.message}")
            issues.append(f"Check the template {spec.template}")

    if settings is not None and settings.template_dir:
        info(f"Custom template directory: {settings.template_dir}")

    # Summary
    console.print()
    console.print("[bold]Summary:[/bold]")
    if checks_passed == total_checks:
        success(f"All checks passed! ({checks_passed}/{total_checks})")
        console.print("\n[bold green]✨ Your setup looks good![/bold green]")
    else:
        info(f"Passed {checks_passed}/{total_checks} checks")

        if issues:
            console.print("\n[bold yellow]📋 Action items:[/bold yellow]")
            for idx, issue in enumerate(issues, 1):
                console.print(f"  {idx}. {issue}")
        raise typer.Exit(1)

    console.print()
