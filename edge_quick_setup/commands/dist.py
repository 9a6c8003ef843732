import click
from rich.console import Console
from rich.panel import Panel

from edge_quick_setup import distinfo


@click.command()
def dist():
    """Print distribution information."""
    console = Console()

    lines = [f"Version: [cyan]{distinfo.VERSION}[/cyan]"]
    if distinfo.OS:
        lines.append(f"Os: [yellow]{distinfo.OS}[/yellow]")
    if distinfo.ARCH:
        lines.append(f"Architecture: [yellow]{distinfo.ARCH}[/yellow]")

    console.print(Panel("\n".join(lines), title="Distribution Information", expand=False))
