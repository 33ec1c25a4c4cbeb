from __future__ import annotations

import logging
from datetime import date, timedelta
from pathlib import Path

import pytest

from underwriting_app.core import config as app_config
from underwriting_app.core.container import build_container
from underwriting_app.models.contract import ContractCreate


def write_config(path: Path, db_path: str, level: str = "DEBUG") -> Path:
    path.write_text(
        f"db:\n  path: {db_path}\n  foreign_keys: true\nlogging:\n  level: {level}\n",
        encoding="utf-8",
    )
    return path


def test_load_config_reads_yaml(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(app_config.DB_PATH_ENV, raising=False)
    config_file = write_config(tmp_path / "underwriting.yaml", "data/test.db", level="warning")

    config = app_config.load_config(config_file)

    assert config.database.path == "data/test.db"
    assert config.database.foreign_keys is True
    assert config.logging.level == "WARNING"
    assert config.logging.format == app_config.DEFAULT_LOG_FORMAT


def test_db_path_env_overrides_yaml(tmp_path: Path, monkeypatch) -> None:
    config_file = write_config(tmp_path / "underwriting.yaml", "data/test.db")
    monkeypatch.setenv(app_config.DB_PATH_ENV, str(tmp_path / "other.db"))

    config = app_config.load_config(config_file)

    assert config.database.path == str(tmp_path / "other.db")


def test_missing_db_path_is_rejected(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(app_config.DB_PATH_ENV, raising=False)
    config_file = tmp_path / "underwriting.yaml"
    config_file.write_text("logging:\n  level: INFO\n", encoding="utf-8")

    with pytest.raises(RuntimeError):
        app_config.load_config(config_file)


def test_config_path_env(tmp_path: Path, monkeypatch) -> None:
    config_file = write_config(tmp_path / "custom.yaml", "x.db")
    monkeypatch.setenv(app_config.CONFIG_PATH_ENV, str(config_file))

    assert app_config.resolve_default_config_path() == config_file


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(RuntimeError):
        app_config.configure_logging(app_config.LoggingConfig(level="LOUD", format="%(message)s"))


def test_build_container_from_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(app_config.DB_PATH_ENV, raising=False)
    config_file = write_config(tmp_path / "underwriting.yaml", str(tmp_path / "app.db"))

    container = build_container(config_file)
    with container.database.transaction():
        container.database.execute(
            "INSERT INTO products (id, short_name, sort_order) VALUES (1, 'Leben', 1)"
        )
        container.database.execute(
            "INSERT INTO customers (id, name, birth_date) VALUES (1, 'Carla', '1980-01-01')"
        )
        contract = container.contract_service.create_contract(
            ContractCreate(id=1, product_id=1, customer_id=1, start_date=date.today() + timedelta(days=1))
        )

    assert logging.getLogger("underwriting_app").level == logging.DEBUG
    assert container.rating_service.calc_monthly_rate(contract.id) == 0
    container.database.close_connection()
