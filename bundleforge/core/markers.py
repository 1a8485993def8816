"""Change markers: cheap per-file freshness signatures.

A marker is the file's modification time (ns) immediately followed by its
size in bytes. It is not a content hash: an edit that leaves both unchanged
goes unnoticed.
"""

from __future__ import annotations

from pathlib import Path


def file_marker(path: Path | str) -> str:
    """Return ``<mtime_ns><size>`` for *path*.

    Raises FileNotFoundError if the file does not exist.
    """
    st = Path(path).stat()
    return f"{st.st_mtime_ns}{st.st_size}"
