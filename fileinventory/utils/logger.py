"""
Logging utilities for the file inventory scanner
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "fileinventory"

RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[37m",
    logging.INFO: "\033[92m",
    logging.WARNING: "\033[93m",
    logging.ERROR: "\033[91m",
    logging.CRITICAL: "\033[1;91m",
}


class InventoryFormatter(logging.Formatter):
    """[time] [LEVEL] message, with the level coloured on interactive consoles"""

    def __init__(self, use_colors: bool = False):
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        level = f"[{record.levelname}]"
        if self.use_colors:
            level = f"{LEVEL_COLORS.get(record.levelno, '')}{level}{RESET}"
        return f"[{self.formatTime(record, self.datefmt)}] {level} {record.getMessage()}"


class InventoryJSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }

        for field in (
                "file_path",
                "owner",
                "size_mb",
                "active",
                "unwanted",
                "contains_links",
        ):
            if hasattr(record, field):
                data[field] = getattr(record, field)

        return json.dumps(data)


def setup_logging(
        log_level: str = "info",
        log_to_file: bool = False,
        log_file_path: Optional[str] = None,
        log_to_console: bool = True,
        log_type: str = "plain",
) -> logging.Logger:

    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
    }

    level = level_map.get(log_level.lower(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()

    if log_to_console:
        ch = logging.StreamHandler(sys.stdout)
        ch.setLevel(level)
        if log_type == "json":
            ch.setFormatter(InventoryJSONFormatter())
        else:
            ch.setFormatter(InventoryFormatter(use_colors=sys.stdout.isatty()))
        logger.addHandler(ch)

    if log_to_file and log_file_path:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file_path, mode="a")
        fh.setLevel(level)

        if log_type == "json":
            fh.setFormatter(InventoryJSONFormatter())
        else:
            fh.setFormatter(InventoryFormatter())

        logger.addHandler(fh)

    return logger


def log_file_record(logger: logging.Logger, record) -> None:
    flags = []
    if record.active:
        flags.append("active")
    if record.unwanted:
        flags.append("unwanted")
    if record.contains_links:
        flags.append("links")

    logger.debug(
        f"[{record.owner}] [{record.size_mb:.2f}MB] "
        f"[{','.join(flags) or 'stale'}] {record.full_path}",
        extra={
            "file_path": record.full_path,
            "owner": record.owner,
            "size_mb": record.size_mb,
            "active": record.active,
            "unwanted": record.unwanted,
            "contains_links": record.contains_links,
        },
    )


def format_duration(seconds: float) -> str:
    minutes, secs = divmod(seconds, 60)
    hours, minutes = divmod(int(minutes), 60)
    if hours:
        return f"{hours}h {minutes}m {int(secs)}s"
    if minutes:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.2f}s"


def log_run_completion(start_time: datetime, output_path, end_time: Optional[datetime] = None) -> float:
    """Report where the inventory went and how long the run took."""
    logger = logging.getLogger(LOGGER_NAME)
    end_time = end_time or datetime.now()
    elapsed = end_time.timestamp() - start_time.timestamp()

    logger.info(f"Output written to {output_path}")
    logger.info(
        f"Run {start_time:%Y-%m-%d %H:%M:%S} -> {end_time:%H:%M:%S}, "
        f"Duration: {format_duration(elapsed)}"
    )
    return elapsed
