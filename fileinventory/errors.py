"""
Exception taxonomy for the file inventory scanner
"""


class InventoryError(Exception):
    """Base class for all scanner errors"""


class RootPathNotFound(InventoryError):
    """The directory to scan does not exist"""


class PerFileProcessingError(InventoryError):
    def __init__(self, file_path: str, cause: Exception):
        super().__init__(f"{file_path}: {cause}")
        self.file_path = file_path
        self.cause = cause


class LinkInspectionError(InventoryError):
    pass


class OutputWriteError(InventoryError):
    """The output file could not be written"""
