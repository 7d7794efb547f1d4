from __future__ import annotations

import json
from importlib import import_module
from pathlib import Path

import pytest
from typer.testing import CliRunner

from pc_builder.cli.app import app, get_container, reset_container
from pc_builder.config import AppSettings
from pc_builder.container import build_container

app_module = import_module("pc_builder.cli.app")


def _env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    db_url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("PC_BUILDER_DATABASE_URL", db_url)
    monkeypatch.setenv("PC_BUILDER_STORAGE_BACKEND", "sqlite")
    monkeypatch.setenv("PC_BUILDER_ENV", "test")
    monkeypatch.delenv("PC_BUILDER_SNAPSHOT_KEY", raising=False)
    monkeypatch.delenv("PC_BUILDER_LOG_LEVEL", raising=False)
    reset_container()


def test_cli_submit_and_show(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()

    result = runner.invoke(
        app,
        [
            "submit",
            "--base-model",
            "Tower-X",
            "--component",
            "type=cpu,name=Ryzen,price=300",
            "-c",
            "type=ram,name=Corsair,price=80,capacity=16",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "Total Components: 2" in result.stdout
    assert "Total Price: $380" in result.stdout
    assert "Saved configuration under 'computerConfig'" in result.stdout

    shown = runner.invoke(app, ["show"])
    assert shown.exit_code == 0, shown.output
    assert "Base Model: Tower-X" in shown.stdout
    assert "    Capacity: 16 GB" in shown.stdout
    assert "Total Price: $380" in shown.stdout


def test_cli_submit_reports_validation_errors(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()

    result = runner.invoke(
        app,
        ["submit", "--base-model", "Tower-X", "-c", "type=storage,name=NVMe,price=120"],
    )

    assert result.exit_code == 1
    assert "Validation failed:" in result.stdout
    assert "components[0].capacity: Capacity is required for RAM and Storage" in result.stdout
    assert "components[0].storageType" in result.stdout

    shown = runner.invoke(app, ["show"])
    assert shown.exit_code == 1
    assert "No saved configuration found" in shown.stdout


def test_cli_submit_without_components(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    result = CliRunner().invoke(app, ["submit", "--base-model", "Tower-X"])
    assert result.exit_code == 1
    assert "components: At least one component is required" in result.stdout


def test_cli_submit_rejects_unknown_component_values(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()

    bad_type = runner.invoke(app, ["submit", "--base-model", "X", "-c", "type=psu,name=Corsair"])
    assert bad_type.exit_code == 1
    assert "Invalid component" in bad_type.stdout

    bad_field = runner.invoke(app, ["submit", "--base-model", "X", "-c", "type=cpu,watts=65"])
    assert bad_field.exit_code == 1
    assert "Invalid component" in bad_field.stdout


def test_cli_submit_from_file_dry_run(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    config_file = tmp_path / "rig.json"
    config_file.write_text(
        json.dumps(
            {
                "baseModel": "Tower-X",
                "components": [
                    {
                        "type": "storage",
                        "name": "NVMe",
                        "price": 120,
                        "capacity": "1000",
                        "storageType": "ssd",
                    }
                ],
                "totalPrice": 9999,
            }
        ),
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(app, ["submit", "--from-file", str(config_file), "--dry-run"])

    assert result.exit_code == 0, result.output
    assert "Total Price: $120" in result.stdout
    assert "Dry run: configuration not saved" in result.stdout
    assert "    Storage Type: ssd" in result.stdout

    shown = runner.invoke(app, ["show"])
    assert shown.exit_code == 1


def test_cli_show_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    result = CliRunner().invoke(app, ["show-settings"])
    assert result.exit_code == 0
    assert "Environment:\ttest" in result.stdout
    assert "Snapshot Key:\tcomputerConfig" in result.stdout


def test_cli_uses_patched_container(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PC_BUILDER_LOG_LEVEL", raising=False)
    monkeypatch.setenv("PC_BUILDER_STORAGE_BACKEND", "memory")
    container = build_container(AppSettings(storage_backend="memory", snapshot_key="stub"))
    monkeypatch.setattr(app_module, "get_container", lambda: container)
    runner = CliRunner()

    result = runner.invoke(
        app, ["--log-level", "info", "submit", "--base-model", "Mini", "-c", "type=gpu,name=RTX,price=499.99"]
    )

    assert result.exit_code == 0, result.output
    assert "Saved configuration under 'stub'" in result.stdout
    assert container.key_value_store.keys() == ("stub",)


def test_parse_component_option() -> None:
    assert app_module.parse_component_option("type=ram, name=Corsair ,price=80,") == {
        "type": "ram",
        "name": "Corsair",
        "price": "80",
    }


def test_container_is_cached_until_reset(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    first = get_container()
    assert get_container() is first

    other_url = f"sqlite+aiosqlite:///{tmp_path / 'other.db'}"
    monkeypatch.setenv("PC_BUILDER_DATABASE_URL", other_url)
    assert get_container() is first

    reset_container()
    rebuilt = get_container()
    assert rebuilt is not first
    assert rebuilt.settings.database_url == other_url
    reset_container()
