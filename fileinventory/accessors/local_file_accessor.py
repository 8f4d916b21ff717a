import os
from pathlib import Path

from fileinventory.accessors.file_accessor import FileAccessor
from fileinventory.errors import PerFileProcessingError


class LocalFileAccessor(FileAccessor):
    """Reads metadata and ownership from the local filesystem"""

    def stat(self, path: str) -> os.stat_result:
        try:
            return os.stat(path)
        except OSError as e:
            raise PerFileProcessingError(path, e) from e

    def get_owner(self, path: str) -> str:
        # Path.owner() is unsupported where there is no pwd database
        try:
            return Path(path).owner()
        except (OSError, KeyError, NotImplementedError) as e:
            raise PerFileProcessingError(path, e) from e
