"""Bundle request: the per-invocation registry of js and css assets.

A request is created by the caller for each page render and passed
explicitly; nothing is shared between requests.
"""

from __future__ import annotations

from pathlib import Path

from bundleforge.core.resolver import PathResolver, is_external
from bundleforge.models.assets import AssetDescriptor, BundleType


class BundleRequest:
    """Ordered, de-duplicated set of assets for one render.

    Assets are keyed by logical path within each bundle type. Re-adding a
    path replaces its descriptor but keeps its registration position.
    """

    def __init__(self) -> None:
        self._assets: dict[BundleType, dict[str, AssetDescriptor]] = {
            bundle_type: {} for bundle_type in BundleType
        }
        self._resolved: dict[str, Path | None] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add(
        self,
        path: str,
        bundle_type: BundleType,
        sort_key: int = 0,
        skip: bool = False,
    ) -> bool:
        """Register an asset. Returns False for an empty path."""
        if not path:
            return False
        self._assets[bundle_type][path] = AssetDescriptor(
            logical_path=path,
            is_external=is_external(path),
            skip=skip,
            sort_key=sort_key,
        )
        return True

    def add_js(self, path: str, sort_key: int = 0, skip: bool = False) -> bool:
        """Register a js file; lower ``sort_key`` is included first."""
        return self.add(path, BundleType.JS, sort_key, skip)

    def add_css(self, path: str, sort_key: int = 0, skip: bool = False) -> bool:
        """Register a css file; lower ``sort_key`` is included first."""
        return self.add(path, BundleType.CSS, sort_key, skip)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def assets(self, bundle_type: BundleType) -> list[AssetDescriptor]:
        """All assets of a type, stable-sorted by ``sort_key``."""
        return sorted(self._assets[bundle_type].values(), key=lambda a: a.sort_key)

    def bundleable(self, bundle_type: BundleType) -> list[AssetDescriptor]:
        return [a for a in self.assets(bundle_type) if a.bundleable]

    def inline(self, bundle_type: BundleType) -> list[AssetDescriptor]:
        """External and skipped assets, which are always included individually."""
        return [a for a in self.assets(bundle_type) if not a.bundleable]

    def __len__(self) -> int:
        return sum(len(assets) for assets in self._assets.values())

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, asset: AssetDescriptor, resolver: PathResolver) -> AssetDescriptor:
        """Return *asset* with its resolved path, resolving at most once per request."""
        if asset.resolved_path is not None or not asset.bundleable:
            return asset
        key = str(resolver.to_disk_path(asset.logical_path))
        if key not in self._resolved:
            self._resolved[key] = resolver.resolve(asset.logical_path)
        return asset.with_resolved_path(self._resolved[key])
