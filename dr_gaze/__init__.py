"""
Dr.Gaze — Диференціальна діагностика порушень окорухової системи

Архітектура: Множини + База знань + Звуження локалізації + Ранжування

Модулі:
- config: Конфігурація системи
- sets: Множина з алгебраїчними операціями (KeyedSet)
- knowledge_base: Зони локалізації та діагнози
- localization: Звуження локалізації (перетин зон)
- ranking: Ранжування диференціальних діагнозів
- engine: Повний цикл оцінки вибору користувача
- schemas: Схеми результатів
"""

__version__ = "0.1.0"
__author__ = "Oleksii Bychkov"

from .config import DrGazeConfig, get_default_config
from .exceptions import DrGazeError, UnknownKeyError, ConfigError, KnowledgeBaseError
from .sets import KeyedSet, STOP
from .knowledge_base import KnowledgeBase, ZoneName, DiagnosisName
from .localization import LocalizationResolver, resolve_localization
from .ranking import DifferentialRanker, RankingResult, rank_differentials
from .engine import DiagnosisEngine, EvaluationResult, EvaluationStatus
