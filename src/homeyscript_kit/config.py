"""Config loading and flag resolution."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from homeyscript_kit.contracts.config import ConfigFile, SessionConfig
from homeyscript_kit.contracts.exceptions import ConfigError

CONFIG_FILENAME = ".hsk.json"


def load_config_file(path: str | Path | None = None) -> ConfigFile:
    """Load ``.hsk.json``; a missing file yields an empty config."""
    config_path = Path(path).expanduser() if path is not None else Path.cwd() / CONFIG_FILENAME
    if not config_path.exists():
        return ConfigFile()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return ConfigFile.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc


def merge_flags(defaults: Mapping[str, Any] | None, explicit: Mapping[str, Any] | None) -> dict[str, Any]:
    """Overlay *explicit* onto *defaults*.

    Nested mappings are merged key by key. ``None`` in *explicit* means "not
    given" and keeps the default.
    """
    merged: dict[str, Any] = dict(defaults or {})
    for key, value in (explicit or {}).items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_flags(current, value)
        else:
            merged[key] = value
    return merged


def resolve_session_config(
    config_file: ConfigFile,
    *,
    api_key: str | None = None,
    ip: str | None = None,
    host: str | None = None,
    https: bool | None = None,
    verbose: bool = False,
) -> SessionConfig:
    """Combine file settings with command-line overrides; overrides win."""
    file_values = config_file.model_dump(exclude_none=True)
    resolved = merge_flags(file_values, {"api_key": api_key, "ip": ip, "host": host, "https": https})
    return SessionConfig(**resolved, verbose=verbose)
