"""Dr.Gaze — Модуль конфігурації"""
from .settings import (
    DrGazeConfig,
    get_default_config,
    LoggingConfig,
    RankingConfig,
    MessagesConfig,
    LogLevel,
    NameOrder,
)
from .loader import save_config, load_config, save_yaml, load_yaml, config_from_dict

__all__ = [
    "DrGazeConfig",
    "get_default_config",
    "LoggingConfig",
    "RankingConfig",
    "MessagesConfig",
    "LogLevel",
    "NameOrder",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
    "config_from_dict",
]
