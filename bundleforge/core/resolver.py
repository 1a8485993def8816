"""Asset path resolution and external-source detection."""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import urlparse

_MINIFIED_RE = re.compile(r"(.+)\.min\.(js|css)$", re.IGNORECASE)
_ASSET_RE = re.compile(r"(.+)\.(js|css)$", re.IGNORECASE)


def is_external(path: str) -> bool:
    """True when *path* carries a network host (``https://cdn/x.js``, ``//cdn/x.js``)."""
    return bool(urlparse(path).netloc)


def minified_variant(logical_path: str) -> str | None:
    """Return the ``.min.`` sibling of a js/css path, or None if not applicable."""
    if _MINIFIED_RE.match(logical_path):
        return None
    match = _ASSET_RE.match(logical_path)
    if match is None:
        return None
    return f"{match.group(1)}.min.{match.group(2)}"


class PathResolver:
    """Maps logical asset paths to existing files under a base directory.

    Parameters
    ----------
    base_path:
        Directory logical paths are relative to (typically the web root on disk).
        Made absolute, so resolved paths identify the site they belong to.
    prefer_minified:
        Consider the ``.min.`` sibling of each asset as well. Among existing,
        non-empty candidates the most recently modified wins; the minified
        sibling wins a tie.
    """

    def __init__(self, base_path: Path | str, *, prefer_minified: bool = True) -> None:
        self._base = Path(base_path).resolve()
        self._prefer_minified = prefer_minified

    @property
    def base_path(self) -> Path:
        return self._base

    def to_disk_path(self, logical_path: str) -> Path:
        return self._base / logical_path.lstrip("/")

    def candidates(self, logical_path: str) -> list[Path]:
        paths = [logical_path]
        if self._prefer_minified:
            variant = minified_variant(logical_path)
            if variant is not None:
                paths.insert(0, variant)
        return [self.to_disk_path(p) for p in paths]

    def resolve(self, logical_path: str) -> Path | None:
        """Return the best existing candidate for *logical_path*, or None."""
        best: Path | None = None
        best_mtime: int | None = None
        for candidate in self.candidates(logical_path):
            try:
                st = candidate.stat()
            except OSError:
                continue
            if not candidate.is_file() or st.st_size == 0:
                continue
            if best_mtime is None or st.st_mtime_ns > best_mtime:
                best, best_mtime = candidate, st.st_mtime_ns
        return best

    def display_path(self, resolved_path: Path) -> str:
        """Render *resolved_path* relative to the base, as a web-style path."""
        try:
            return "/" + resolved_path.relative_to(self._base).as_posix()
        except ValueError:
            return resolved_path.as_posix()
