"""``bundleforge build TYPE PATHS...``: build or reuse a bundle."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from bundleforge.cli.commands._options import (
    BASE_PATH,
    CACHE_PATH,
    MINIFIED,
    SKIP,
    WEB_ROOT,
    make_request,
    make_settings,
)
from bundleforge.core.pipeline import AssetPipeline
from bundleforge.models.assets import BundleStatus, BundleType

console = Console()

_STATUS_STYLE = {
    BundleStatus.NEW: "green",
    BundleStatus.CHANGED: "yellow",
    BundleStatus.UNCHANGED: "dim",
}


def build_cmd(
    bundle_type: BundleType = typer.Argument(..., help="Bundle type: js or css."),
    paths: list[str] = typer.Argument(..., help="Logical asset paths, in order."),
    skip: list[str] = SKIP,
    base_path: Path | None = BASE_PATH,
    cache_path: Path | None = CACHE_PATH,
    web_root: str | None = WEB_ROOT,
    minified: bool | None = MINIFIED,
) -> None:
    """Build the bundle for PATHS, or reuse it if nothing changed.

    Prints the verdict and the bundle's public path. Exits with code 1 when
    no asset could be bundled or the bundle could not be written.
    """
    settings = make_settings(
        base_path=base_path,
        cache_path=cache_path,
        web_root=web_root,
        use_minified=minified,
    )
    request = make_request(bundle_type, paths, skip)
    pipeline = AssetPipeline(settings)

    try:
        result = pipeline.build(request, bundle_type)
    except OSError as exc:
        console.print(f"[bold red]Build failed:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    if result is None:
        console.print(
            f"[bold red]No {bundle_type.value} assets could be bundled.[/bold red]"
        )
        raise typer.Exit(code=1)

    style = _STATUS_STYLE[result.status]
    console.print(
        Panel(
            "\n".join([
                f"[bold]Status:[/bold]       [{style}]{result.status.value}[/{style}]",
                f"[bold]Fingerprint:[/bold]  {result.fingerprint}",
                f"[bold]Files:[/bold]        {len(result.logical_paths)}",
                f"[bold]Bundle:[/bold]       {result.bundle_path}",
                f"[bold]Public path:[/bold]  {result.public_path}",
            ]),
            title=f"[bold]{bundle_type.value} bundle[/bold]",
            border_style=style,
            padding=(1, 2),
        )
    )

    # Print the public path plainly for scripting
    console.print(result.public_path, markup=False, highlight=False, soft_wrap=True)
