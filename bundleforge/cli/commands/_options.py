"""Options shared by the bundle commands."""

from __future__ import annotations

from typing import Any

import typer

from bundleforge.config import BundlerSettings
from bundleforge.core.request import BundleRequest
from bundleforge.models.assets import BundleType

BASE_PATH = typer.Option(
    None, "--base-path", "-b", help="Directory logical asset paths are relative to."
)
CACHE_PATH = typer.Option(
    None, "--cache-path", "-c", help="Directory holding bundle manifests."
)
WEB_ROOT = typer.Option(None, "--web-root", help="Prefix for public bundle URLs.")
MINIFIED = typer.Option(
    None, "--minified/--no-minified", help="Prefer .min. siblings of each asset."
)
SKIP = typer.Option(
    [], "--skip", "-s", help="Asset to include on its own instead of bundling."
)


def make_settings(**overrides: Any) -> BundlerSettings:
    """BundlerSettings from env/.env, with any non-None CLI values applied."""
    return BundlerSettings(**{k: v for k, v in overrides.items() if v is not None})


def make_request(
    bundle_type: BundleType, paths: list[str], skip: list[str] | None = None
) -> BundleRequest:
    """Register *paths* (in order) and *skip* entries on a fresh request."""
    request = BundleRequest()
    for path in paths:
        request.add(path, bundle_type)
    for path in skip or []:
        request.add(path, bundle_type, skip=True)
    return request
