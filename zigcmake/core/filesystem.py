"""
File system utilities for zigcmake.

Provides the output side of toolchain generation: creating the destination
directory and writing toolchain files without ever leaving a partially
written file behind. Failures are reported as FilesystemError carrying the
offending path.
"""

import logging
import tempfile
from pathlib import Path
from typing import Union

from zigcmake.core.exceptions import FilesystemError

logger = logging.getLogger(__name__)


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists (idempotent), creating parents as needed.

    Args:
        path: Directory path

    Returns:
        Path object

    Raises:
        FilesystemError: If the directory cannot be created

    Example:
        >>> ensure_directory('build/toolchains')
        PosixPath('build/toolchains')
    """
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(
            f"Could not create output directory {path}: {e}", path
        ) from e
    logger.debug(f"Ensured output directory exists: {path}")
    return path


def atomic_write(file_path: Union[str, Path], content: str) -> None:
    """
    Write file atomically using temp file + rename.

    Content is encoded as UTF-8 and written in binary mode, so the bytes on
    disk are identical on every platform (no newline translation).

    Args:
        file_path: Path to write to
        content: Text to write

    Raises:
        FilesystemError: If the file cannot be written

    Example:
        >>> atomic_write('x86_64-linux-gnu.cmake', 'set ( ZIG_OS "linux" )')
    """
    file_path = Path(file_path)

    try:
        # Create temp file in same directory (ensures same filesystem)
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=file_path.parent, prefix=f".{file_path.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise FilesystemError(f"Could not write {file_path}: {e}", file_path) from e

    temp_path = Path(temp_path_str)

    try:
        with open(temp_fd, "wb") as f:
            f.write(content.encode("utf-8"))

        # Atomic rename (replaces destination if it exists)
        temp_path.replace(file_path)

    except OSError as e:
        try:
            temp_path.unlink(missing_ok=True)
        except OSError:
            logger.debug(f"Could not remove temporary file {temp_path}")
        raise FilesystemError(f"Could not write {file_path}: {e}", file_path) from e
