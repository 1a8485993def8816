"""``bundleforge check TYPE PATHS...``: report staleness without writing."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from bundleforge.cli.commands._options import (
    BASE_PATH,
    CACHE_PATH,
    MINIFIED,
    make_request,
    make_settings,
)
from bundleforge.core.bundler import BundleBuilder
from bundleforge.core.hasher import compute_fingerprint
from bundleforge.core.markers import file_marker
from bundleforge.models.assets import BundleType

console = Console()


def check_cmd(
    bundle_type: BundleType = typer.Argument(..., help="Bundle type: js or css."),
    paths: list[str] = typer.Argument(..., help="Logical asset paths, in order."),
    base_path: Path | None = BASE_PATH,
    cache_path: Path | None = CACHE_PATH,
    minified: bool | None = MINIFIED,
) -> None:
    """Show how PATHS resolve and whether their bundle would be rebuilt."""
    settings = make_settings(
        base_path=base_path, cache_path=cache_path, use_minified=minified
    )
    builder = BundleBuilder(settings)
    request = make_request(bundle_type, paths)
    assets = request.bundleable(bundle_type)
    try:
        resolved = builder.resolve_assets(assets, request=request)
    except OSError as exc:
        console.print(f"[bold red]Check failed:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"{bundle_type.value} assets")
    table.add_column("Logical path", style="cyan")
    table.add_column("Resolved path")
    table.add_column("Marker", style="dim")

    resolved_by_path = {a.logical_path: a for a in resolved}
    for asset in assets:
        hit = resolved_by_path.get(asset.logical_path)
        if hit is None:
            table.add_row(asset.logical_path, "[red]missing[/red]", "")
        else:
            table.add_row(asset.logical_path, str(hit.resolved_path), _marker_cell(hit.resolved_path))
    console.print(table)

    if not resolved:
        console.print("[yellow]Nothing to bundle.[/yellow]")
        raise typer.Exit(code=1)

    asset_map = {a.logical_path: a.resolved_path for a in resolved}
    fingerprint = compute_fingerprint(asset_map)
    bundle_path = builder.bundle_path(bundle_type, fingerprint)
    try:
        status = builder.detector.check(asset_map, bundle_path, bundle_type, fingerprint)
    except OSError as exc:
        console.print(f"[bold red]Check failed:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold]Fingerprint:[/bold] {fingerprint}")
    console.print(f"[bold]Bundle:[/bold]      {bundle_path}")
    console.print(f"[bold]Status:[/bold]      {status.value}")


def _marker_cell(path: Path) -> str:
    try:
        return file_marker(path)
    except FileNotFoundError:
        return "[red]vanished[/red]"
