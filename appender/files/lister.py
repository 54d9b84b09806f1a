import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def _is_listable(entry: os.DirEntry, base: Path) -> bool:
    try:
        if entry.is_symlink() and not Path(entry.path).resolve().is_relative_to(base):
            return False
        return not entry.is_dir()
    except (OSError, RuntimeError):
        # broken entry such as a symlink loop
        return False


def list_files(path: Path) -> list[str]:
    """Return the names of non-directory entries in path, in directory order.

    Symlinks whose target lies outside path are left out, since appends to
    them are refused. An unreadable directory yields an empty list; the
    error is only logged.
    """
    files: list[str] = []
    try:
        base = Path(path).resolve()
        with os.scandir(path) as entries:
            for entry in entries:
                if _is_listable(entry, base):
                    files.append(entry.name)
                else:
                    logger.debug(f"Skipping {entry.name}")
    except OSError as e:
        logger.warning(f"Cannot read directory {path}: {e}")
        return []
    return files
