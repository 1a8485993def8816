"""Atomic file writer used for bundle artifacts and manifests.

Content is written to a temporary file in the destination directory,
flushed to disk, then moved over the final path with ``os.replace``.
Readers see either the previous file or the complete new one.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from tempfile import NamedTemporaryFile

logger = logging.getLogger(__name__)


def _current_umask() -> int:
    # os.umask can only be read by setting it; done once at import.
    mask = os.umask(0)
    os.umask(mask)
    return mask


DEFAULT_FILE_MODE = 0o666 & ~_current_umask()


class BundleWriteError(OSError):
    """Raised when a bundle or manifest cannot be written to disk."""


class AtomicFileWriter:
    """Write whole files with all-or-nothing visibility.

    Parameters
    ----------
    fsync:
        Flush file contents to stable storage before the rename.
    """

    def __init__(self, *, fsync: bool = True) -> None:
        self._fsync = fsync

    def write(self, path: Path | str, content: bytes | str) -> Path:
        """Atomically replace *path* with *content*.

        Parent directories are created as needed. On failure no file is left
        at *path* (beyond any previous version) and the temp file is removed.
        """
        target = Path(path)
        data = content.encode("utf-8") if isinstance(content, str) else content

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp = NamedTemporaryFile(
                mode="wb",
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            )
        except OSError as exc:
            raise BundleWriteError(
                f"The file {target} could not be opened for writing: {exc}"
            ) from exc

        tmp_path = Path(tmp.name)
        try:
            with tmp:
                tmp.write(data)
                tmp.flush()
                if self._fsync:
                    os.fsync(tmp.fileno())
            os.chmod(tmp_path, self._mode_for(target))
            os.replace(tmp_path, target)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise BundleWriteError(
                f"The file {target} could not be written to: {exc}"
            ) from exc

        logger.debug("AtomicFileWriter: wrote %d bytes to %s", len(data), target)
        return target

    @staticmethod
    def _mode_for(target: Path) -> int:
        """Keep the permissions of the file being replaced, else the umask default."""
        try:
            return stat.S_IMODE(target.stat().st_mode)
        except FileNotFoundError:
            return DEFAULT_FILE_MODE
