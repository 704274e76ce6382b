from __future__ import annotations

"""
Recent Files Store.

Keeps a private copy of every profiler export opened by the user inside
the application data directory, so that previous analyses can be reopened
by name.
"""

import logging
import os
import shutil
from typing import List, Optional

from symbolanalyzer.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

RECENT_DIR_NAME = "recent-files"
DEFAULT_FILE_NAME = "output.csv"


class RecentFileStore:
    """
    Directory-backed store of previously opened files.

    Contract: store(path) copies a file in, list() returns the stored
    names, retrieve(name) returns a readable path or raises
    PermissionError.
    """

    def __init__(self, base_dir: Optional[str] = None):
        self._dir = base_dir or os.path.join(get_user_data_dir(), RECENT_DIR_NAME)

    @property
    def directory(self) -> str:
        return self._dir

    def store(self, path: str) -> str:
        """
        Copy a file into the store, replacing an entry with the same name.

        Args:
            path: File to remember.

        Returns:
            str: The name under which the file was stored.

        Raises:
            OSError: If the copy fails.
        """
        name = os.path.basename(path) or DEFAULT_FILE_NAME
        target = os.path.join(self._dir, name)
        if os.path.abspath(path) == os.path.abspath(target):
            return name

        os.makedirs(self._dir, exist_ok=True)
        shutil.copyfile(path, target)
        logger.debug(f"Stored recent file: {name}")
        return name

    def list(self) -> List[str]:
        """Names of stored files that can currently be read, sorted."""
        if not os.path.isdir(self._dir):
            return []
        names = []
        for entry in os.scandir(self._dir):
            if entry.is_file() and os.access(entry.path, os.R_OK):
                names.append(entry.name)
        return sorted(names)

    def retrieve(self, name: str) -> str:
        """
        Resolve a stored file by name.

        Args:
            name: Name as returned by list().

        Returns:
            str: Absolute path to the stored copy.

        Raises:
            FileNotFoundError: If no file with that name is stored.
            PermissionError: If the stored copy cannot be read.
        """
        if not name or os.path.basename(name) != name:
            raise FileNotFoundError(f"No recent file named {name!r}")

        path = os.path.join(self._dir, name)
        if not os.path.isfile(path):
            raise FileNotFoundError(f"No recent file named {name!r}")
        if not os.access(path, os.R_OK):
            raise PermissionError(f"Permission denied to read recent file {name!r}")
        return os.path.abspath(path)
