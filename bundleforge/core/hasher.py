"""Canonical hashing helpers for fingerprints and manifest serialization."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

FINGERPRINT_DELIMITER = "_"


def canonical_json_bytes(obj: Any) -> bytes:
    """Produce deterministic, sorted, compact JSON bytes.

    - sorted keys
    - no whitespace separators (",", ":")
    - ensure_ascii=True
    - UTF-8 encoding
    """
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    """Return the SHA-256 hex digest of raw bytes."""
    return hashlib.sha256(data).hexdigest()


def compute_fingerprint(
    assets: Mapping[str, str | Path] | Iterable[tuple[str, str | Path]],
) -> str:
    """SHA-256 of the resolved paths, ordered by logical path.

    Accepts a mapping or ``(logical_path, resolved_path)`` pairs. The same
    logical-to-resolved mapping always yields the same fingerprint no matter
    the order it was registered in; pointing a logical path at a different
    file (e.g. its minified sibling) yields a different one.
    """
    pairs = assets.items() if isinstance(assets, Mapping) else assets
    mapping = {logical: str(resolved) for logical, resolved in pairs}
    joined = FINGERPRINT_DELIMITER.join(mapping[key] for key in sorted(mapping))
    return sha256_hex(joined.encode("utf-8"))
