"""
Configuration for the Interview Insights CLI.

Sources, lowest precedence first:

  ``config/default.toml``   committed defaults (or the file given by ``--config``)
  ``local.toml``            optional sibling of that file, never committed
  ``.env``                  project-root dotenv file, loaded into ``os.environ``
  ``INTERVIEW_INSIGHTS_*``  individual environment overrides

Only the CLI calls ``load_config()``.  The assemblers never read config;
they receive plain arguments such as ``preview_chars``.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DisplayConfig(BaseModel):
    """Presentation limits applied while assembling views."""

    model_config = ConfigDict(frozen=True)

    answer_preview_chars: int = 200

    @field_validator("answer_preview_chars")
    @classmethod
    def check_preview_chars(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"answer_preview_chars must be positive, got {v}.")
        return v


class DataConfig(BaseModel):
    """Where payloads are read from and exports are written to."""

    model_config = ConfigDict(frozen=True)

    payload_dir: str = "data/payloads"
    output_dir: str = "data/outputs"


class LoggingConfig(BaseModel):
    """Log level, optional log file, and text vs. JSON-lines output."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: Optional[str] = None
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Log level must be one of {list(_LOG_LEVELS)}, got '{v}'.")
        return level


class AppConfig(BaseModel):
    """Top-level configuration handed to every CLI command."""

    model_config = ConfigDict(frozen=True)

    display: DisplayConfig = DisplayConfig()
    data:    DataConfig = DataConfig()
    logging: LoggingConfig = LoggingConfig()
    debug:   bool = False


# ── Loading ───────────────────────────────────────────────────────────────────


def _truthy(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# (variable, config section or None for top level, key, converter)
_ENV_OVERRIDES: tuple[tuple[str, Optional[str], str, Callable[[str], Any]], ...] = (
    ("INTERVIEW_INSIGHTS_LOG_LEVEL",     "logging", "level",                str),
    ("INTERVIEW_INSIGHTS_PREVIEW_CHARS", "display", "answer_preview_chars", str),
    ("INTERVIEW_INSIGHTS_DEBUG",         None,      "debug",                _truthy),
)


def _project_root() -> Path:
    """Nearest ancestor of this package holding ``pyproject.toml``."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "pyproject.toml").is_file():
            return candidate
    return here.parent


def _read_toml(path: Path) -> dict[str, Any]:
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _merge(base: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` updated by ``layer``; nested tables merge key by key."""
    merged = dict(base)
    for key, value in layer.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = _merge(current, value)
        merged[key] = value
    return merged


def _env_layer() -> dict[str, Any]:
    layer: dict[str, Any] = {}
    for variable, section, key, convert in _ENV_OVERRIDES:
        raw_value = os.environ.get(variable)
        if not raw_value:
            continue
        target = layer if section is None else layer.setdefault(section, {})
        target[key] = convert(raw_value)
    return layer


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Read, merge and validate configuration.

    Args:
        config_path: TOML file to start from.  Defaults to
            ``<project_root>/config/default.toml``.  A ``local.toml`` next to
            it is merged on top when present.

    Returns:
        Validated, frozen ``AppConfig``.

    Raises:
        FileNotFoundError: ``config_path`` does not exist.
        pydantic.ValidationError: A merged value is out of range or mistyped.
    """
    root = _project_root()
    load_dotenv(dotenv_path=root / ".env", override=False)

    path = Path(config_path) if config_path else root / "config" / "default.toml"
    if not path.is_file():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Create config/default.toml or pass --config PATH."
        )

    raw = _read_toml(path)
    local = path.with_name("local.toml")
    if local.is_file():
        raw = _merge(raw, _read_toml(local))
    raw = _merge(raw, _env_layer())

    # ``[project] debug`` is the file-level spelling; a top-level or env value wins.
    project = raw.pop("project", {})
    raw.setdefault("debug", project.get("debug", False))
    return AppConfig.model_validate(raw)
