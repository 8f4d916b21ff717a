#!/usr/bin/env python3
from pathlib import Path
from typing import Optional, List

import click
import typer

from fileinventory.config.configuration import (
    AdvancedConfig,
    InventoryConfiguration,
    LOG_LEVELS,
    LOG_TYPES,
    ScanningConfig,
)
from fileinventory.engine.runner import InventoryRunner
from fileinventory.errors import OutputWriteError, RootPathNotFound
from fileinventory.utils.logger import setup_logging

app = typer.Typer(
    add_completion=False,
    help="File inventory – flag stale, unwanted and hyperlinked files in a directory tree"
)

# ---------------- DEFAULTS ----------------
# Shown in help only; InventoryConfiguration applies them.

_SCANNING = ScanningConfig()
_ADVANCED = AdvancedConfig()


def banner():
    typer.echo("File Inventory Scanner\n")


def split_extensions(values: List[str]) -> List[str]:
    return [
        part.strip()
        for value in values
        for part in value.split(",")
        if part.strip()
    ]


@app.command()
def run(
        directory_path: Path = typer.Option(
            ..., "-d", "--directory-path",
            help="Root directory to scan",
            rich_help_panel="Targeting",
        ),
        output_file_path: Path = typer.Option(
            ..., "-o", "--output-file-path",
            help="CSV file to write (overwritten if present)",
            rich_help_panel="Output",
        ),
        expiration_months: Optional[int] = typer.Option(
            None, "-e", "--expiration-months",
            help=f"Files not accessed within this many 30-day months are stale "
                 f"(default: {_SCANNING.expiration_months})",
            rich_help_panel="Scanning",
            min=1,
        ),
        unwanted_extensions: Optional[List[str]] = typer.Option(
            None, "-u", "--unwanted-extensions",
            help=f"Extensions to flag as unwanted, repeatable or comma separated "
                 f"(default: {','.join(_SCANNING.unwanted_extensions)})",
            rich_help_panel="Scanning",
        ),
        link_timeout: Optional[float] = typer.Option(
            None, "--link-timeout",
            help=f"Seconds allowed per workbook hyperlink check, 0 disables "
                 f"(default: {_SCANNING.link_timeout})",
            rich_help_panel="Scanning",
            min=0,
        ),
        concurrency: Optional[int] = typer.Option(
            None, "-x", "--concurrency",
            help=f"Number of worker threads (default: {_ADVANCED.concurrency})",
            rich_help_panel="Advanced",
            min=1,
        ),
        config_file: Optional[Path] = typer.Option(
            None, "-z", "--config",
            help="Path to TOML configuration file",
            rich_help_panel="Advanced",
        ),
        log_level: Optional[str] = typer.Option(
            None,
            "--log-level",
            help="Log level: debug | info | warning",
            rich_help_panel="Logging",
            click_type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
        ),
        log_type: Optional[str] = typer.Option(
            None,
            "-t", "--log-type",
            help="Log format: plain | json",
            rich_help_panel="Logging",
            click_type=click.Choice(list(LOG_TYPES), case_sensitive=False),
        ),
        log_file: Optional[Path] = typer.Option(
            None, "--log-file",
            help="Write log output to this file instead of the console",
            rich_help_panel="Logging",
        ),
        no_banner: bool = typer.Option(
            False,
            "--no-banner",
            help="Disable startup banner",
            rich_help_panel="Logging",
        ),
):
    if not no_banner:
        banner()

    # ---------- load configuration ----------
    cfg = InventoryConfiguration()

    if config_file:
        cfg.load_from_toml(str(config_file))

    # ---------- TARGETING / OUTPUT ----------
    cfg.targets.directory_path = str(directory_path)
    cfg.output.output_file = str(output_file_path)

    # ---------- SCANNING ----------
    if expiration_months is not None:
        cfg.scanning.expiration_months = expiration_months
    if unwanted_extensions:
        cfg.scanning.unwanted_extensions = split_extensions(unwanted_extensions)
    if link_timeout is not None:
        cfg.scanning.link_timeout = link_timeout

    # ---------- ADVANCED ----------
    if concurrency is not None:
        cfg.advanced.concurrency = concurrency

    # ---------- LOGGING ----------
    if log_level:
        cfg.output.log_level = log_level.lower()
    if log_type:
        cfg.output.log_type = log_type.lower()
    if log_file:
        cfg.output.log_file = str(log_file)

    # ---------- validate ----------
    try:
        cfg.validate()
    except ValueError as e:
        raise typer.BadParameter(str(e))

    # ---------- logging ----------
    logger = setup_logging(
        log_level=cfg.output.log_level,
        log_to_file=cfg.output.log_file is not None,
        log_file_path=cfg.output.log_file,
        log_to_console=cfg.output.log_file is None,
        log_type=cfg.output.log_type,
    )

    # ---------- run ----------
    try:
        InventoryRunner(cfg).execute()
    except (RootPathNotFound, OutputWriteError) as e:
        logger.error(str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
