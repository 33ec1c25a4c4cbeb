"""Configuration loader for database and logging settings."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

import yaml


@dataclass(frozen=True)
class DatabaseConfig:
    path: str
    foreign_keys: bool


@dataclass(frozen=True)
class LoggingConfig:
    level: str
    format: str


@dataclass(frozen=True)
class AppConfig:
    database: DatabaseConfig
    logging: LoggingConfig


DEFAULT_CONFIG_REL_PATH = Path("config/underwriting.yaml")
CONFIG_PATH_ENV = "UNDERWRITING_CONFIG_PATH"
DB_PATH_ENV = "UNDERWRITING_DB_PATH"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_default_config_path() -> Path:
    """Resolve configuration path for source and packaged execution."""
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)

    candidates: list[Path] = []

    if getattr(sys, "frozen", False):
        exe_dir = Path(sys.executable).resolve().parent
        candidates.append(exe_dir / DEFAULT_CONFIG_REL_PATH)

    candidates.append(Path.cwd() / DEFAULT_CONFIG_REL_PATH)
    candidates.append(Path(__file__).resolve().parents[3] / DEFAULT_CONFIG_REL_PATH)

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return candidates[0] if candidates else DEFAULT_CONFIG_REL_PATH


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load the app configuration from YAML."""
    path = config_path or resolve_default_config_path()
    with path.open("r", encoding="utf-8") as file:
        raw = yaml.safe_load(file) or {}

    db_raw = raw.get("db") or {}
    log_raw = raw.get("logging") or {}
    db_path = os.getenv(DB_PATH_ENV) or db_raw.get("path")
    if not db_path:
        raise RuntimeError(f"Database path is not configured in {path}")

    return AppConfig(
        database=DatabaseConfig(
            path=str(db_path),
            foreign_keys=bool(db_raw.get("foreign_keys", True)),
        ),
        logging=LoggingConfig(
            level=str(log_raw.get("level", "INFO")).upper(),
            format=str(log_raw.get("format", DEFAULT_LOG_FORMAT)),
        ),
    )


def configure_logging(config: LoggingConfig) -> None:
    """Apply the configured level and format to the package logger."""
    level = logging.getLevelName(config.level)
    if not isinstance(level, int):
        raise RuntimeError(f"Unknown log level: {config.level}")

    logger = logging.getLogger("underwriting_app")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(handler)
