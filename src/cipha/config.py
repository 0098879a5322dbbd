import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

CONFIG_PATH = Path.home() / ".cipha.json"
HISTORY_PATH = Path.home() / ".cipha_history.jsonl"

DEFAULT_SHIFT = 3
DEFAULT_RAILS = 3

ENV_MAPPING: Dict[str, str] = {
    "default_shift": "CIPHA_SHIFT",
    "default_rails": "CIPHA_RAILS",
    "history_enabled": "CIPHA_HISTORY",
    "history_path": "CIPHA_HISTORY_PATH",
    "strict": "CIPHA_STRICT",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class CiphaConfig:
    default_shift: int = DEFAULT_SHIFT
    default_rails: int = DEFAULT_RAILS
    history_enabled: bool = True
    history_path: str = str(HISTORY_PATH)
    strict: bool = False

    def to_dict(self) -> Dict[str, object]:
        return {
            "default_shift": self.default_shift,
            "default_rails": self.default_rails,
            "history_enabled": self.history_enabled,
            "history_path": self.history_path,
            "strict": self.strict,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "CiphaConfig":
        config = cls()
        for field_name, value in data.items():
            if field_name in ENV_MAPPING and value is not None:
                _assign(config, field_name, value)
        return config


def _parse_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Not a boolean value: {value!r}")


def _assign(config: CiphaConfig, field_name: str, value: object) -> None:
    if field_name in ("default_shift", "default_rails"):
        setattr(config, field_name, int(value))  # type: ignore[arg-type]
    elif field_name in ("history_enabled", "strict"):
        setattr(config, field_name, _parse_bool(value))
    else:
        setattr(config, field_name, str(value))


def _merge_env(config: CiphaConfig) -> CiphaConfig:
    for field_name, env_var in ENV_MAPPING.items():
        env_val = os.getenv(env_var, "")
        if not env_val:
            continue
        try:
            _assign(config, field_name, env_val)
        except ValueError:
            # Ignore unparsable overrides and keep the file/default value.
            continue
    return config


def load_config(path: Optional[Path] = None) -> CiphaConfig:
    """
    Load settings from the JSON config file, then let environment variables override them.

    A missing or malformed file falls back to the built-in defaults.
    """
    path = path or CONFIG_PATH
    config = CiphaConfig()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if isinstance(data, dict):
                config = CiphaConfig.from_dict(data)
        except (OSError, TypeError, ValueError):
            # Fall back to defaults/env if file malformed.
            config = CiphaConfig()
    return _merge_env(config)


def save_config(config: CiphaConfig, path: Optional[Path] = None) -> None:
    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
