"""
Configuration management for the file inventory scanner
"""

from dataclasses import dataclass, field
from typing import List, Optional

import toml

LOG_LEVELS = ("debug", "info", "warning")
LOG_TYPES = ("plain", "json")


def normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


# ---------------- TARGETING ----------------

@dataclass
class TargetingConfig:
    directory_path: Optional[str] = None


# ---------------- SCANNING ----------------

@dataclass
class ScanningConfig:
    expiration_months: int = 12
    unwanted_extensions: List[str] = field(default_factory=lambda: [
        ".tmp", ".log", ".bak"
    ])
    link_timeout: float = 30  # seconds, 0 disables


# ---------------- OUTPUT ----------------

@dataclass
class OutputConfig:
    output_file: Optional[str] = None

    log_level: str = "info"
    log_type: str = "plain"
    log_file: Optional[str] = None


# ---------------- ADVANCED ----------------

@dataclass
class AdvancedConfig:
    concurrency: int = 4


# ---------------- ROOT CONFIG ----------------
@dataclass
class InventoryConfiguration:
    targets: TargetingConfig = field(default_factory=TargetingConfig)
    scanning: ScanningConfig = field(default_factory=ScanningConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    advanced: AdvancedConfig = field(default_factory=AdvancedConfig)

    @property
    def unwanted_extensions(self) -> frozenset:
        return frozenset(
            normalize_extension(e)
            for e in self.scanning.unwanted_extensions
            if e.strip()
        )

    # ---------- validation ----------
    def validate(self):
        if not self.targets.directory_path:
            raise ValueError("directory_path is required")

        if not self.output.output_file:
            raise ValueError("output_file is required")

        if self.advanced.concurrency < 1:
            raise ValueError(
                f"concurrency must be at least 1, got {self.advanced.concurrency}"
            )

        if self.scanning.expiration_months < 1:
            raise ValueError(
                f"expiration_months must be at least 1, "
                f"got {self.scanning.expiration_months}"
            )

        if self.scanning.link_timeout < 0:
            raise ValueError("link_timeout cannot be negative")

        if self.output.log_level.lower() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.output.log_level}")

        if self.output.log_type.lower() not in LOG_TYPES:
            raise ValueError(f"Unknown log type: {self.output.log_type}")

    # ---------- TOML ----------

    def load_from_toml(self, path: str):
        data = toml.load(path)

        for section, values in data.items():
            if hasattr(self, section):
                obj = getattr(self, section)
                for key, value in values.items():
                    if hasattr(obj, key):
                        setattr(obj, key, value)
