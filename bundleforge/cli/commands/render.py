"""``bundleforge render TYPE PATHS...``: print HTML inclusion tags."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

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
from bundleforge.models.assets import BundleType

console = Console()


def render_cmd(
    bundle_type: BundleType = typer.Argument(..., help="Bundle type: js or css."),
    paths: list[str] = typer.Argument(..., help="Logical asset paths, in order."),
    skip: list[str] = SKIP,
    base_path: Path | None = BASE_PATH,
    cache_path: Path | None = CACHE_PATH,
    web_root: str | None = WEB_ROOT,
    minified: bool | None = MINIFIED,
    optimize: bool = typer.Option(
        True, "--optimize/--no-optimize", help="Bundle assets instead of including each one."
    ),
) -> None:
    """Print the <script>/<link> tags that include PATHS, building as needed."""
    settings = make_settings(
        base_path=base_path,
        cache_path=cache_path,
        web_root=web_root,
        use_minified=minified,
        optimize_assets=optimize,
    )
    request = make_request(bundle_type, paths, skip)

    try:
        html = AssetPipeline(settings).render(request, bundle_type)
    except OSError as exc:
        console.print(f"[bold red]Render failed:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    console.print(html, end="", markup=False, highlight=False, soft_wrap=True)
