# fileinventory/accessors/file_accessor.py

import os
from abc import ABC, abstractmethod


class FileAccessor(ABC):
    @abstractmethod
    def stat(self, path: str) -> os.stat_result:
        ...

    @abstractmethod
    def get_owner(self, path: str) -> str:
        ...
