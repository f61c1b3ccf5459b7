"""Settings for the rating tools, loaded from JSON."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

DATA_PATH = Path(__file__).resolve().parent.parent / "data"
SETTINGS_FILE = "settings.json"


@dataclass(frozen=True)
class RaterSettings:
    precision: Optional[int] = None
    describe: bool = False
    log_level: str = "WARNING"

    def with_overrides(self, **overrides: Any) -> "RaterSettings":
        """Return a copy with every override that is not ``None`` applied."""

        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


def settings_from_dict(payload: Dict[str, Any]) -> RaterSettings:
    known = {field.name for field in fields(RaterSettings)}
    unknown = sorted(set(payload) - known)
    if unknown:
        raise ValueError(f"Unknown settings: {', '.join(unknown)}")
    precision = payload.get("precision")
    if precision is not None and (type(precision) is not int or precision < 0):
        raise ValueError("precision must be a non-negative integer")
    describe = payload.get("describe", False)
    if type(describe) is not bool:
        raise ValueError("describe must be true or false")
    log_level = str(payload.get("log_level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log level: {log_level}")
    return RaterSettings(
        precision=precision,
        describe=describe,
        log_level=log_level,
    )


def load_settings(path: Path) -> RaterSettings:
    payload = json.loads(Path(path).read_text())
    if not isinstance(payload, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return settings_from_dict(payload)


def default_settings() -> RaterSettings:
    path = DATA_PATH / SETTINGS_FILE
    if not path.exists():
        return RaterSettings()
    return load_settings(path)


__all__ = ["RaterSettings", "load_settings", "default_settings", "settings_from_dict", "DATA_PATH"]
