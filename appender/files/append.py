import logging
import os
from pathlib import Path

from appender.errors import FileOpenError, FileWriteError, PathTraversalError

logger = logging.getLogger(__name__)


def resolve_target(base_dir: Path, file_name: str) -> Path:
    """Join file_name onto base_dir, refusing anything that escapes it."""
    if "\x00" in file_name:
        raise PathTraversalError(file_name, "embedded null byte")
    base = base_dir.resolve()
    try:
        target = (base / file_name).resolve()
    except RuntimeError as e:
        # symlink loop
        raise FileOpenError(file_name, str(e)) from e
    if not target.is_relative_to(base):
        logger.warning(f"Rejected file name outside {base}: {file_name!r}")
        raise PathTraversalError(file_name)
    return target


def append_text(base_dir: Path, file_name: str, text: bytes | str) -> Path:
    """Append text plus a newline to an existing file under base_dir.

    Bytes are written as given; str is encoded as UTF-8. The file is never
    created. Open and write failures raise FileOpenError and FileWriteError
    respectively; a failed write may leave a partial line.
    """
    if isinstance(text, str):
        text = text.encode("utf-8")
    target = resolve_target(base_dir, file_name)

    try:
        # No O_CREAT: missing targets must fail
        fd = os.open(target, os.O_WRONLY | os.O_APPEND)
    except OSError as e:
        logger.warning(f"Open failed for {target}: {e}")
        raise FileOpenError(file_name, e.strerror or str(e)) from e

    try:
        with os.fdopen(fd, "ab") as f:
            f.write(text + b"\n")
    except OSError as e:
        logger.warning(f"Write failed for {target}: {e}")
        raise FileWriteError(file_name, e.strerror or str(e)) from e

    logger.info(f"Appended {len(text)} bytes to {target.name!r}")
    return target
