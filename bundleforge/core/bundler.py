"""Bundle builder: fingerprint, staleness check, concatenate, persist.

Bundle files are content-addressed by the fingerprint of their input set:
{base_path}/{web_path}/{bundle_type}_{fingerprint}.{bundle_type}
so any change to which files make up a bundle changes its public URL.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from bundleforge.config import BundlerSettings
from bundleforge.core.file_writer import AtomicFileWriter
from bundleforge.core.hasher import compute_fingerprint
from bundleforge.core.manifest_store import ManifestStore
from bundleforge.core.markers import file_marker
from bundleforge.core.request import BundleRequest
from bundleforge.core.resolver import PathResolver
from bundleforge.core.staleness import StalenessDetector
from bundleforge.models.assets import (
    AssetDescriptor,
    BundleResult,
    BundleStatus,
    BundleType,
)

logger = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"


class AssetReadError(OSError):
    """Raised when a resolved asset cannot be read during a rebuild."""


class BundleBuilder:
    """Produces (or reuses) the combined file for a list of assets.

    Parameters
    ----------
    settings:
        Paths and URL layout. Uses defaults if not provided.
    resolver:
        Maps logical paths to files. Built from ``settings`` if not provided.
    manifest_store:
        Change-marker records. Built from ``settings.cache_path`` if not provided.
    writer:
        Atomic writer shared by bundles and manifests.
    """

    def __init__(
        self,
        settings: BundlerSettings | None = None,
        *,
        resolver: PathResolver | None = None,
        manifest_store: ManifestStore | None = None,
        writer: AtomicFileWriter | None = None,
    ) -> None:
        self.settings = settings or BundlerSettings()
        self.writer = writer or AtomicFileWriter()
        self.resolver = resolver or PathResolver(
            self.settings.base_path, prefer_minified=self.settings.use_minified
        )
        self.manifest_store = manifest_store or ManifestStore(
            self.settings.cache_path, writer=self.writer
        )
        self.detector = StalenessDetector(self.manifest_store)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    @staticmethod
    def bundle_filename(bundle_type: BundleType, fingerprint: str) -> str:
        return f"{bundle_type.value}_{fingerprint}.{bundle_type.value}"

    def bundle_path(self, bundle_type: BundleType, fingerprint: str) -> Path:
        web_path = self.settings.web_path(bundle_type).strip("/")
        return (
            Path(self.settings.base_path).resolve()
            / web_path
            / self.bundle_filename(bundle_type, fingerprint)
        )

    def public_path(self, bundle_type: BundleType, fingerprint: str) -> str:
        web_path = self.settings.web_path(bundle_type)
        if not web_path.endswith("/"):
            web_path += "/"
        return (
            f"{self.settings.web_root}{web_path}"
            f"{self.bundle_filename(bundle_type, fingerprint)}"
        )

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(
        self,
        assets: Sequence[AssetDescriptor],
        bundle_type: BundleType,
        *,
        request: BundleRequest | None = None,
    ) -> str | None:
        """Return the public path of the bundle for *assets*, rebuilding if stale.

        Returns None when nothing is bundleable (every asset external,
        skipped, or missing on disk).
        """
        result = self.build_result(assets, bundle_type, request=request)
        return result.public_path if result else None

    def build_result(
        self,
        assets: Sequence[AssetDescriptor],
        bundle_type: BundleType,
        *,
        request: BundleRequest | None = None,
    ) -> BundleResult | None:
        """Like ``build`` but reports the fingerprint and staleness verdict.

        Raises AssetReadError if an asset vanishes before it is read and
        BundleWriteError if the bundle or manifest cannot be written.
        """
        resolved = self.resolve_assets(assets, request=request)
        if not resolved:
            return None

        asset_map = {a.logical_path: a.resolved_path for a in resolved}
        fingerprint = compute_fingerprint(asset_map)
        bundle_path = self.bundle_path(bundle_type, fingerprint)
        public_path = self.public_path(bundle_type, fingerprint)

        status = self.detector.check(asset_map, bundle_path, bundle_type, fingerprint)
        ordered = sorted(resolved, key=lambda a: a.sort_key)

        if status is BundleStatus.UNCHANGED:
            logger.debug("%s bundle %s is up to date", bundle_type.value, fingerprint)
        else:
            logger.info(
                "Rebuilding %s bundle %s (%s, %d files)",
                bundle_type.value,
                fingerprint,
                status.value,
                len(ordered),
            )
            # markers before content, so an edit during the read is never recorded as built
            markers = {a.logical_path: self._marker(a) for a in ordered}
            content = self.concatenate(ordered)
            self.writer.write(bundle_path, content)
            self.manifest_store.save(bundle_type, fingerprint, markers)

        return BundleResult(
            bundle_type=bundle_type,
            fingerprint=fingerprint,
            status=status,
            bundle_path=bundle_path,
            public_path=public_path,
            logical_paths=[a.logical_path for a in ordered],
        )

    def resolve_assets(
        self,
        assets: Sequence[AssetDescriptor],
        *,
        request: BundleRequest | None = None,
    ) -> list[AssetDescriptor]:
        """Bundleable assets that resolve to a file, in the order given.

        A logical path given twice is kept once, at its first position, with
        the later descriptor.
        """
        resolved: dict[str, AssetDescriptor] = {}
        for asset in assets:
            if not asset.bundleable:
                continue
            if request is not None:
                asset = request.resolve(asset, self.resolver)
            elif asset.resolved_path is None:
                asset = asset.with_resolved_path(self.resolver.resolve(asset.logical_path))
            if asset.resolved_path is None:
                logger.debug("Dropping %s: no file found", asset.logical_path)
                continue
            resolved[asset.logical_path] = asset
        return list(resolved.values())

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def concatenate(self, assets: Sequence[AssetDescriptor]) -> bytes:
        """Join asset contents, each wrapped in start/end comments, in order."""
        return b"".join(self.load_asset(asset) for asset in assets)

    def load_asset(self, asset: AssetDescriptor) -> bytes:
        try:
            content = asset.resolved_path.read_bytes()
        except OSError as exc:
            raise AssetReadError(
                f"Asset {asset.logical_path} could not be read from "
                f"{asset.resolved_path}: {exc}"
            ) from exc

        content = content.removeprefix(UTF8_BOM)
        label = self.resolver.display_path(asset.resolved_path).encode("utf-8")
        return (
            b"\n/* Start: " + label + b" */\n"
            + content
            + b"\n/* End: " + label + b" */\n"
        )

    @staticmethod
    def _marker(asset: AssetDescriptor) -> str:
        try:
            return file_marker(asset.resolved_path)
        except FileNotFoundError as exc:
            raise AssetReadError(
                f"Asset {asset.logical_path} disappeared while bundling"
            ) from exc
