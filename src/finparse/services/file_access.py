"""Scoped access to user-selected files.

Files picked by the user may live outside the app's own storage and need
explicit access bracketing around reads. FileAccess providers expose that
as a context manager so release happens on every exit path.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from pathlib import Path
from typing import Protocol

from finparse.core.exceptions import AccessDeniedError, EmptyFileError, FileReadError

logger = logging.getLogger(__name__)


class FileAccess(Protocol):
    """Grants scoped read access to a path."""

    def scoped(self, path: Path) -> AbstractContextManager[Path]:
        ...


class LocalFileAccess:
    """Scoped access backed by the local filesystem permissions."""

    @contextmanager
    def scoped(self, path: Path) -> Iterator[Path]:
        """Hold read access to ``path`` for the duration of the block.

        Raises:
            AccessDeniedError: If the path is missing or not readable
        """
        if not (path.is_file() and os.access(path, os.R_OK)):
            raise AccessDeniedError(details={"filename": path.name})

        logger.debug("Acquired file access", extra={"file_name": path.name})
        try:
            yield path
        finally:
            logger.debug("Released file access", extra={"file_name": path.name})


def read_file(path: Path) -> bytes:
    """Read the whole file into memory.

    Raises:
        AccessDeniedError: If the OS refuses the read
        FileReadError: On any other I/O failure
        EmptyFileError: If the file has no content
    """
    try:
        data = path.read_bytes()
    except PermissionError as e:
        raise AccessDeniedError(details={"filename": path.name}) from e
    except OSError as e:
        raise FileReadError(details={"filename": path.name, "error_type": type(e).__name__}) from e

    if not data:
        raise EmptyFileError(details={"filename": path.name})
    return data
