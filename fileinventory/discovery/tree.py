"""
Recursive directory enumeration
"""

import logging
import os
from typing import Iterator

from fileinventory.errors import RootPathNotFound

logger = logging.getLogger("fileinventory")


class TreeWalker:
    def walk_tree(self, root: str) -> Iterator[str]:
        """
        Lazily yield every regular file below root.

        The root is checked eagerly so a missing directory fails before
        any work is scheduled. Directory symlinks are not followed.
        """
        if not os.path.exists(root):
            raise RootPathNotFound(f"Directory not found: {root}")
        if not os.path.isdir(root):
            raise RootPathNotFound(f"Not a directory: {root}")

        logger.debug(f"Walking tree: {root}")
        return self._walk_directory(root)

    def _walk_directory(self, path: str) -> Iterator[str]:
        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as e:
            logger.warning(f"Cannot list {path}: {e}")
            return

        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    yield from self._walk_directory(entry.path)
                elif entry.is_file():
                    yield entry.path
            except OSError as e:
                logger.warning(f"Cannot inspect {entry.path}: {e}")
