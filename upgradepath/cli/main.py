"""Main CLI interface using Typer."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .. import __version__
from ..core import ImageMaterializer, PodmanClient
from ..exporters import IscV2Alpha1Exporter, IscV3Alpha1Exporter
from ..graphdata import GraphLoader
from ..model.config import ToolConfig
from ..model.upgrade import UpgradePath
from ..upgrade import resolve as resolve_path
from ..utils.logger import get_logger, set_log_level
from ..utils.versions import is_valid_version

# Create CLI app
app = typer.Typer(
    name="upgradepath",
    help="Calculate release upgrade paths from the published update graph",
    add_completion=True,
)

console = Console()
logger = get_logger(__name__)


def _print_path(path: UpgradePath) -> None:
    """Print the resolved releases and disclosed risks."""
    if not path.found:
        console.print(
            f"[yellow]No upgrade path found from {path.from_version} to {path.to_version}[/yellow]"
        )
        return

    table = Table(title="Upgrade Path", show_header=True, header_style="bold magenta")
    table.add_column("Version", style="cyan", no_wrap=True)
    table.add_column("Image", style="white")
    for result in path.images:
        table.add_row(result.version, result.image)
    console.print(table)

    if path.risks:
        console.print(f"\n[bold]Risks for {path.from_version} → {path.stepping_stone}:[/bold]")
        for risk in path.risks:
            console.print(f"  ⚠️  [yellow]{risk.name}[/yellow]: {risk.message}")
            if risk.url:
                console.print(f"      {risk.url}")


@app.command()
def resolve(
    from_version: str = typer.Argument(..., help="Current release version (e.g. 4.14.1)"),
    to_version: str = typer.Argument(..., help="Target release version"),
    channel: str = typer.Option(..., "--channel", "-c", help="Update channel (e.g. stable-4.14)"),
    arch: str = typer.Option("amd64", "--arch", "-a", help="Release architecture"),
    loglevel: str = typer.Option(
        "info", "--loglevel", "-l", help="Log level: info, debug or trace"
    ),
    force_update: bool = typer.Option(
        False, "--force-update", help="Download the graph instead of reading the cache"
    ),
    build: bool = typer.Option(
        False, "--build", help="Build a local image for every release on the path"
    ),
    save: bool = typer.Option(False, "--save", help="Save built images to the output directory"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Directory for image set configuration files"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to a YAML or JSON configuration file"
    ),
):
    """Resolve the upgrade path between two versions and export image set configs."""
    if not is_valid_version(from_version) or not is_valid_version(to_version):
        console.print(
            "[red]Error:[/red] ensure from-version and to-version are valid semver versions"
        )
        raise typer.Exit(1)

    set_log_level(loglevel)

    try:
        settings = ToolConfig.from_file(config)
        output_dir = output or settings.output_dir

        logger.info(f"from_version: {from_version}")
        logger.info(f"to_version: {to_version}")
        logger.info(f"arch: {arch}")

        loader = GraphLoader(settings)
        graph = loader.load(channel, arch, from_version, force_update=force_update)
        path = resolve_path(graph, from_version, to_version)

        _print_path(path)

        for exporter in (IscV2Alpha1Exporter(output_dir), IscV3Alpha1Exporter(output_dir)):
            filepath = exporter.export(path, channel)
            logger.debug(exporter.render(path, channel))
            console.print(f"[green]✓[/green] Wrote [cyan]{filepath}[/cyan]")

        if build:
            materializer = ImageMaterializer(
                PodmanClient(settings.build_tool), output_dir, settings.image_prefix
            )
            tags = materializer.materialize(path, output_dir / "images" if save else None)
            for tag in tags:
                console.print(f"[green]✓[/green] Built [cyan]{tag}[/cyan]")

    except Exception as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def fetch(
    channel: str = typer.Argument(..., help="Update channel (e.g. stable-4.14)"),
    version: str = typer.Argument(..., help="Release version to query the graph with"),
    arch: str = typer.Option("amd64", "--arch", "-a", help="Release architecture"),
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to a YAML or JSON configuration file"
    ),
):
    """Download the update graph into the local cache."""
    try:
        settings = ToolConfig.from_file(config)
        loader = GraphLoader(settings)
        with console.status("[bold green]Fetching update graph..."):
            loader.refresh(channel, arch, version)
        console.print(
            f"[green]✓[/green] Graph cached at [cyan]{loader.cache.path_for(channel, arch)}[/cyan]"
        )
    except Exception as e:
        console.print(f"[red]Error:[/red] {str(e)}")
        raise typer.Exit(1)


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]upgradepath[/bold] version {__version__}")
    console.print("Release upgrade path calculator for disconnected mirroring")


if __name__ == "__main__":
    app()
