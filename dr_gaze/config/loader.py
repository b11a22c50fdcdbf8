"""Dr.Gaze — Завантаження конфігурації"""
import yaml
from enum import Enum
from pathlib import Path
from dataclasses import asdict, fields, is_dataclass
from typing import Any, Dict

from dr_gaze.exceptions import ConfigError
from .settings import DrGazeConfig


def _to_plain(value: Any) -> Any:
    """Enum → значення, рекурсивно для словників і списків"""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    return value


def _build(cls, data: Dict[str, Any], path: str = ""):
    """Зібрати dataclass з вкладеного словника"""
    if not isinstance(data, dict):
        raise ConfigError(f"Expected mapping for '{path or cls.__name__}', got {type(data).__name__}")

    known = {f.name: f for f in fields(cls)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ConfigError(f"Unknown config keys in '{path or cls.__name__}': {', '.join(unknown)}")

    kwargs = {}
    for name, value in data.items():
        field_type = known[name].type
        key_path = f"{path}.{name}" if path else name

        if is_dataclass(field_type):
            kwargs[name] = _build(field_type, value or {}, key_path)
        elif isinstance(field_type, type) and issubclass(field_type, Enum):
            try:
                kwargs[name] = field_type(value)
            except ValueError:
                allowed = ", ".join(m.value for m in field_type)
                raise ConfigError(f"Invalid value for '{key_path}': {value!r} (allowed: {allowed})")
        elif isinstance(field_type, type) and not isinstance(value, field_type):
            raise ConfigError(
                f"Invalid value for '{key_path}': {value!r} "
                f"(expected {field_type.__name__}, got {type(value).__name__})"
            )
        else:
            kwargs[name] = value

    return cls(**kwargs)


def config_from_dict(data: Dict[str, Any]) -> DrGazeConfig:
    return _build(DrGazeConfig, data or {})


def save_yaml(config: DrGazeConfig, path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(_to_plain(asdict(config)), f, default_flow_style=False, allow_unicode=True)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in '{path}': {e}") from e


def save_config(config: DrGazeConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> DrGazeConfig:
    return config_from_dict(load_yaml(path))
