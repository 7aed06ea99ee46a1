"""Configuration loading, validation, and bootstrap-message assembly."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .patterns import RULES_DATA_TYPE
from .types import DataConfig, LoggingConfig, PageInterestsConfig

CONFIG_FILENAMES = [
    "page-interests.yaml",
    "page-interests.yml",
    "page-interests.json",
]

CONFIG_ENV_VAR = "PAGE_INTERESTS_CONFIG"

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _discover_config() -> Path | None:
    """$PAGE_INTERESTS_CONFIG, else the nearest config file from CWD up to home."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)

    home = Path.home()
    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        found = next(
            (directory / name for name in CONFIG_FILENAMES if (directory / name).is_file()),
            None,
        )
        if found is not None or directory == home:
            return found
    return None


def _resolve(path: str | None, base: Path | None) -> str | None:
    if not path or base is None or Path(path).is_absolute():
        return path
    return str(base / path)


def _build_config(raw: dict[str, Any], base: Path | None = None) -> PageInterestsConfig:
    """Build a PageInterestsConfig from a raw dict.

    Data paths are relative to ``base`` (the config file's directory).
    """
    worker_raw = raw.get("worker", {})
    data_raw = raw.get("data", {})
    logging_raw = raw.get("logging", {})

    data = DataConfig(
        rules=_resolve(data_raw.get("rules"), base),
        rules_type=data_raw.get("rules_type", RULES_DATA_TYPE),
        classifier_model=_resolve(data_raw.get("classifier_model"), base),
        url_stopwords=_resolve(data_raw.get("url_stopwords"), base),
    )

    return PageInterestsConfig(
        region_code=worker_raw.get("region_code"),
        namespace=worker_raw.get("namespace", "default"),
        data=data,
        logging=LoggingConfig(level=str(logging_raw.get("level", "WARNING")).upper()),
    )


def validate_config(config: PageInterestsConfig) -> list[str]:
    """Validate a config. Returns list of error strings (empty = valid)."""
    errors: list[str] = []

    if not config.namespace:
        errors.append("worker.namespace must not be empty")

    if config.logging.level not in LOG_LEVELS:
        errors.append(
            f"logging.level '{config.logging.level}' must be one of "
            f"{', '.join(sorted(LOG_LEVELS))}"
        )

    for key in ("rules", "classifier_model", "url_stopwords"):
        path = getattr(config.data, key)
        if path and not Path(path).is_file():
            errors.append(f"data.{key} file not found: {path}")

    return errors


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")
    text = path.read_text()
    if path.suffix == ".json":
        return json.loads(text)
    return yaml.safe_load(text) or {}


def load_config(
    config_path: str | Path | None = None,
    config_dict: dict | None = None,
) -> PageInterestsConfig:
    """Load config from a dict, an explicit path, or a discovered file.

    Without any of them the defaults apply (no rule data, text
    classification unconfigured).
    """
    if config_dict is not None:
        return _build_config(config_dict)

    path = Path(config_path) if config_path is not None else _discover_config()
    if path is None:
        return _build_config({})
    return _build_config(_read_config_file(path), base=path.parent)


def _read_json(path: str | None) -> Any:
    if not path:
        return None
    return json.loads(Path(path).read_text())


def build_bootstrap_message(config: PageInterestsConfig) -> dict:
    """Assemble a bootstrap message from the data files the config references."""
    message: dict[str, Any] = {
        "message": "bootstrap",
        "workerRegionCode": config.region_code,
        "workerNamespace": config.namespace,
        "interestsDataType": config.data.rules_type,
        "interestsData": _read_json(config.data.rules),
    }
    model = _read_json(config.data.classifier_model)
    if model is not None:
        message["interestsClassifierModel"] = model
    stopwords = _read_json(config.data.url_stopwords)
    if stopwords is not None:
        message["interestsUrlStopwords"] = stopwords
    return message


def configure_logging(config: PageInterestsConfig, level: str | None = None) -> None:
    """Log to stderr. Unknown levels fall back to WARNING (validate reports them)."""
    level = (level or config.logging.level).upper()
    logging.basicConfig(
        level=level if level in LOG_LEVELS else "WARNING",
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
