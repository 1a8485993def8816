"""Asset and bundle models: all frozen, resolution produces copies."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class BundleType(str, Enum):
    """The two kinds of bundle the builder produces."""

    CSS = "css"
    JS = "js"


class BundleStatus(str, Enum):
    """Verdict of the staleness check for one fingerprint."""

    NEW = "new"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


class AssetDescriptor(BaseModel):
    """A single registered asset.

    ``resolved_path`` is filled in lazily by the bundle request and stays
    ``None`` for external and skipped assets, which are never bundled.
    """

    model_config = ConfigDict(frozen=True)

    logical_path: str
    resolved_path: Path | None = None
    is_external: bool = False
    skip: bool = False
    sort_key: int = 0

    @property
    def bundleable(self) -> bool:
        """Whether this asset may take part in a bundle."""
        return not (self.is_external or self.skip)

    def with_resolved_path(self, resolved_path: Path | None) -> AssetDescriptor:
        """Return a copy carrying the given resolved path."""
        return self.model_copy(update={"resolved_path": resolved_path})


class BundleResult(BaseModel):
    """Outcome of one ``BundleBuilder.build_result`` call."""

    model_config = ConfigDict(frozen=True)

    bundle_type: BundleType
    fingerprint: str
    status: BundleStatus
    bundle_path: Path
    public_path: str
    logical_paths: list[str] = Field(default_factory=list)

    @property
    def rebuilt(self) -> bool:
        """True when this call (re)wrote the bundle artifact."""
        return self.status is not BundleStatus.UNCHANGED
