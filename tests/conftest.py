"""Shared test fixtures for Bundleforge."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from bundleforge.config import BundlerSettings
from bundleforge.core.bundler import BundleBuilder
from bundleforge.core.file_writer import AtomicFileWriter
from bundleforge.core.manifest_store import ManifestStore
from bundleforge.core.resolver import PathResolver
from bundleforge.models.assets import AssetDescriptor


@pytest.fixture
def tmp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test artifacts."""
    return tmp_path


@pytest.fixture
def asset_root(tmp_dir: Path) -> Path:
    """Provide the on-disk web root that logical asset paths live under."""
    root = tmp_dir / "public"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def cache_dir(tmp_dir: Path) -> Path:
    return tmp_dir / "cache"


@pytest.fixture
def settings(asset_root: Path, cache_dir: Path) -> BundlerSettings:
    """Provide settings pointing at the temp web root and cache."""
    return BundlerSettings(base_path=asset_root, cache_path=cache_dir, web_root="")


@pytest.fixture
def writer() -> AtomicFileWriter:
    return AtomicFileWriter(fsync=False)


@pytest.fixture
def manifest_store(cache_dir: Path, writer: AtomicFileWriter) -> ManifestStore:
    """Provide a fresh ManifestStore in a temp directory."""
    return ManifestStore(cache_dir, writer=writer)


@pytest.fixture
def resolver(asset_root: Path) -> PathResolver:
    return PathResolver(asset_root, prefer_minified=True)


@pytest.fixture
def builder(
    settings: BundlerSettings,
    manifest_store: ManifestStore,
    writer: AtomicFileWriter,
) -> BundleBuilder:
    """Provide a BundleBuilder wired to the temp web root and cache."""
    return BundleBuilder(settings, manifest_store=manifest_store, writer=writer)


# ---------------------------------------------------------------------------
# File and asset factories shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def write_asset(asset_root: Path) -> Callable[..., Path]:
    """Factory fixture: write a file under the web root, optionally pinning its mtime."""

    def _factory(
        logical_path: str,
        content: str | bytes = "",
        *,
        mtime_ns: int | None = None,
    ) -> Path:
        path = asset_root / logical_path.lstrip("/")
        path.parent.mkdir(parents=True, exist_ok=True)
        data = content.encode("utf-8") if isinstance(content, str) else content
        path.write_bytes(data)
        if mtime_ns is not None:
            os.utime(path, ns=(mtime_ns, mtime_ns))
        return path

    return _factory


@pytest.fixture
def make_asset() -> Callable[..., AssetDescriptor]:
    """Factory fixture: build an AssetDescriptor with sensible defaults."""

    def _factory(logical_path: str = "/js/app.js", **overrides: Any) -> AssetDescriptor:
        defaults: dict[str, Any] = {"logical_path": logical_path}
        defaults.update(overrides)
        return AssetDescriptor(**defaults)

    return _factory


@pytest.fixture
def bump_mtime() -> Callable[..., None]:
    """Factory fixture: move a file's mtime forward so its change marker differs."""

    def _bump(path: Path, seconds: int = 10) -> None:
        st = path.stat()
        new_ns = st.st_mtime_ns + seconds * 1_000_000_000
        os.utime(path, ns=(new_ns, new_ns))

    return _bump
