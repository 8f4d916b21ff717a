import csv
from unittest.mock import patch

import typer
from typer.testing import CliRunner

from fileinventory.config.configuration import AdvancedConfig, ScanningConfig
from fileinventory.cli.main import app

runner = CliRunner()


# ---------- helpers ----------

def base_args(tmp_path):
    return [
        "--no-banner",
        "--directory-path", str(tmp_path),
        "--output-file-path", str(tmp_path / "out.csv"),
    ]


def invoke_with_mocked_runner(args):
    with patch("fileinventory.cli.main.InventoryRunner") as runner_cls, \
         patch("fileinventory.cli.main.setup_logging"):

        result = runner.invoke(app, args)

    return result, runner_cls


# ---------- tests ----------

def test_cli_defaults(tmp_path):
    result, runner_cls = invoke_with_mocked_runner(base_args(tmp_path))

    assert result.exit_code == 0
    runner_cls.return_value.execute.assert_called_once()

    cfg = runner_cls.call_args[0][0]
    assert cfg.targets.directory_path == str(tmp_path)
    assert cfg.output.output_file == str(tmp_path / "out.csv")
    assert cfg.scanning.expiration_months == 12
    assert cfg.unwanted_extensions == {".tmp", ".log", ".bak"}
    assert cfg.advanced.concurrency == 4


def test_cli_scanning_options(tmp_path):
    result, runner_cls = invoke_with_mocked_runner(
        base_args(tmp_path) + [
            "--expiration-months", "6",
            "--unwanted-extensions", ".OLD,swp",
            "--unwanted-extensions", ".bak",
            "--concurrency", "8",
            "--link-timeout", "0",
        ],
    )

    assert result.exit_code == 0
    cfg = runner_cls.call_args[0][0]
    assert cfg.scanning.expiration_months == 6
    assert cfg.unwanted_extensions == {".old", ".swp", ".bak"}
    assert cfg.advanced.concurrency == 8
    assert cfg.scanning.link_timeout == 0


def test_cli_missing_required_options():
    result = runner.invoke(app, ["--no-banner"])

    assert result.exit_code != 0


def test_cli_rejects_zero_concurrency(tmp_path):
    result = runner.invoke(app, base_args(tmp_path) + ["--concurrency", "0"])

    assert result.exit_code != 0


def test_cli_config_file_with_cli_precedence(tmp_path):
    cfg_file = tmp_path / "config.toml"
    cfg_file.write_text("""
        [scanning]
        expiration_months = 3
        unwanted_extensions = [".old"]

        [advanced]
        concurrency = 2
    """)

    result, runner_cls = invoke_with_mocked_runner(
        base_args(tmp_path) + [
            "--config", str(cfg_file),
            "--concurrency", "6",
        ],
    )

    assert result.exit_code == 0
    cfg = runner_cls.call_args[0][0]
    assert cfg.scanning.expiration_months == 3
    assert cfg.unwanted_extensions == {".old"}
    assert cfg.advanced.concurrency == 6


def test_cli_missing_directory_exits_non_zero(tmp_path):
    result = runner.invoke(
        app,
        [
            "--no-banner",
            "--directory-path", str(tmp_path / "missing"),
            "--output-file-path", str(tmp_path / "out.csv"),
        ],
    )

    assert result.exit_code == 1
    assert "Error: Directory not found" in result.output
    assert not (tmp_path / "out.csv").exists()


def test_cli_unwritable_output_exits_non_zero(tmp_path):
    result = runner.invoke(
        app,
        [
            "--no-banner",
            "--directory-path", str(tmp_path),
            "--output-file-path", str(tmp_path / "no" / "out.csv"),
        ],
    )

    assert result.exit_code == 1
    assert "Error: Output directory does not exist" in result.output


def test_cli_end_to_end(tmp_path, touch, fixed_owner):
    share = tmp_path / "share"
    touch(share / "a.tmp", size=2048)
    touch(share / "docs" / "c.LOG", size=1024, accessed_days_ago=400)
    output = tmp_path / "inventory.csv"

    result = runner.invoke(
        app,
        [
            "--no-banner",
            "-d", str(share),
            "-o", str(output),
            "--concurrency", "1",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Output written to" in result.output

    with open(output, newline="", encoding="utf-8") as fh:
        rows = {row["Name"]: row for row in csv.DictReader(fh)}

    assert rows["a.tmp"]["Unwanted"] == "True"
    assert rows["c.LOG"]["Unwanted"] == "True"
    assert rows["c.LOG"]["Extension"] == ".LOG"
    assert rows["c.LOG"]["Active"] == "False"


def test_cli_help_shows_configuration_defaults():
    params = {p.name: p for p in typer.main.get_command(app).params}
    scanning = ScanningConfig()

    assert f"(default: {scanning.expiration_months})" in params["expiration_months"].help
    assert ",".join(scanning.unwanted_extensions) in params["unwanted_extensions"].help
    assert f"(default: {scanning.link_timeout})" in params["link_timeout"].help
    assert f"(default: {AdvancedConfig().concurrency})" in params["concurrency"].help
