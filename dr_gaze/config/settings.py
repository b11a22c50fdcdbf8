"""
Dr.Gaze — Налаштування системи

Всі параметри системи зібрані в dataclass-и для:
- Типізації та валідації
- Легкого доступу через config.ranking.name_order
- Серіалізації в YAML
"""

from dataclasses import dataclass, field
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================

class LogLevel(str, Enum):
    """Рівень логування"""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class NameOrder(str, Enum):
    """Порядок назв діагнозів у групах"""
    ALPHABETICAL = "alphabetical"
    REGISTRY = "registry"       # порядок таблиці діагнозів


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

@dataclass
class LoggingConfig:
    """Параметри логування"""
    level: LogLevel = LogLevel.WARNING
    fmt: str = "%(asctime)s | %(levelname)-8s | [%(name)s] | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


# =============================================================================
# RANKING CONFIGURATION
# =============================================================================

@dataclass
class RankingConfig:
    """Параметри ранжування диференціальних діагнозів"""

    # Попереджати про симптоми, яких немає в базі знань
    warn_unknown_symptoms: bool = True

    # Порядок назв у групах з однаковим балом
    name_order: NameOrder = NameOrder.ALPHABETICAL


# =============================================================================
# MESSAGES
# =============================================================================

@dataclass
class MessagesConfig:
    """Тексти термінальних станів для інтерфейсу"""
    nothing_checked: str = "Nothing checked!"
    no_localization: str = "No localizations found!"
    multiple_top: str = "Multiple differentials likely!"
    multiple_second: str = "Also consider the following:"
    no_additional: str = "No additional differentials"


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class DrGazeConfig:
    """
    Головна конфігурація Dr.Gaze

    Приклад використання:
        config = DrGazeConfig()
        print(config.ranking.name_order)      # NameOrder.ALPHABETICAL
        print(config.messages.no_additional)  # "No additional differentials"
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "Dr.Gaze"

    # Компоненти
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    ranking: RankingConfig = field(default_factory=RankingConfig)
    messages: MessagesConfig = field(default_factory=MessagesConfig)


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> DrGazeConfig:
    """Отримати конфігурацію за замовчуванням"""
    return DrGazeConfig()
