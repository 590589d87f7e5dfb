from __future__ import annotations

import logging
import os
import pathlib
import time
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import orjson

CONFIG_HOME = pathlib.Path(os.path.expanduser("~/.glicko_period"))
CONFIG_PATH = CONFIG_HOME / "config.toml"
DEFAULTS_PATH = pathlib.Path(__file__).resolve().parents[1] / "config" / "defaults.toml"


@dataclass(frozen=True)
class RatingConfig:
    initial_rating: float = 1500.0
    initial_rd: float = 350.0
    inactivity_constant: float = 34.6


def ensure_config() -> bool:
    CONFIG_HOME.mkdir(parents=True, exist_ok=True)
    if not CONFIG_PATH.exists():
        CONFIG_PATH.write_text(DEFAULTS_PATH.read_text(encoding="utf-8"), encoding="utf-8")
        logging.getLogger(__name__).info("Initialised configuration at %s", CONFIG_PATH)
        return True
    return False


def _read_toml(path: pathlib.Path) -> Dict[str, Any]:
    # Prefer stdlib tomllib (3.11+), else tomli
    try:
        import tomllib  # type: ignore[attr-defined]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]
    with open(path, "rb") as f:
        return tomllib.load(f)


def _rating_table(path: pathlib.Path) -> Dict[str, Any]:
    table = _read_toml(path).get("rating", {})
    if not isinstance(table, dict):
        raise ValueError(f"[rating] in {path} must be a table, got {type(table).__name__}")
    known = {f.name for f in fields(RatingConfig)}
    values: Dict[str, Any] = {}
    for key, value in table.items():
        if key not in known:
            logging.getLogger(__name__).warning("Ignoring unknown config key rating.%s in %s", key, path)
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"rating.{key} in {path} must be a number, got {value!r}")
        values[key] = float(value)
    return values


def load_config(path: Optional[pathlib.Path] = None) -> RatingConfig:
    """Rating defaults from the packaged defaults overlaid with the user file.

    A missing user file is not an error. Malformed TOML raises TOMLDecodeError;
    a non-table [rating] or a non-numeric value raises ValueError.
    """
    values = _rating_table(DEFAULTS_PATH)
    path = CONFIG_PATH if path is None else pathlib.Path(path)
    if path.exists():
        values.update(_rating_table(path))
    return RatingConfig(**values)


def log_event(module: str, event: str, **kwargs) -> None:
    """Structured event logging through the central logger.

    Emits a single JSON line via the Python logging system so it reaches the
    handlers the embedding application configured.
    """
    payload = {"ts": time.time(), "module": module, "event": event}
    payload.update(kwargs)
    try:
        line = orjson.dumps(payload).decode("utf-8")
        logging.getLogger(f"event.{module}").info(line)
    except Exception:
        logging.getLogger("event").exception("failed to log event: %s", {"module": module, "event": event})
