"""Staleness detection: decides whether a fingerprint's bundle is reusable."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from bundleforge.core.manifest_store import ManifestStore
from bundleforge.core.markers import file_marker
from bundleforge.models.assets import BundleStatus, BundleType

logger = logging.getLogger(__name__)


class StalenessDetector:
    """Compares current change markers against the stored manifest.

    The verdict is NEW when either the bundle file or its manifest is
    missing, CHANGED when any asset's marker differs from (or is absent in)
    the manifest, and UNCHANGED otherwise.
    """

    def __init__(self, manifest_store: ManifestStore) -> None:
        self._manifests = manifest_store

    def check(
        self,
        asset_map: Mapping[str, Path | str],
        bundle_path: Path | str,
        bundle_type: BundleType,
        fingerprint: str,
    ) -> BundleStatus:
        """Return the verdict for *asset_map* (logical path -> resolved path).

        Assets are checked in the mapping's order and the first mismatch
        wins. A file that vanished since resolution counts as a mismatch;
        the read error is raised later by the rebuild.
        """
        if not Path(bundle_path).exists():
            return BundleStatus.NEW

        manifest = self._manifests.load(bundle_type, fingerprint)
        if manifest is None:
            return BundleStatus.NEW

        for logical_path, resolved_path in asset_map.items():
            recorded = manifest.markers.get(logical_path)
            if recorded is None:
                logger.debug("%s not in manifest for %s", logical_path, fingerprint)
                return BundleStatus.CHANGED
            try:
                current = file_marker(resolved_path)
            except FileNotFoundError:
                logger.debug("%s disappeared before staleness check", resolved_path)
                return BundleStatus.CHANGED
            if current != recorded:
                logger.debug("%s changed (%s != %s)", logical_path, current, recorded)
                return BundleStatus.CHANGED

        return BundleStatus.UNCHANGED
