"""
Dr.Gaze — Звуження локалізації

Структури, узгоджені з УСІМА вибраними зонами, — це перетин їх множин.

Перша зона задає початкове значення, кожна наступна перетинається з ним.
Починати з порожньої множини не можна: перетин з нею завжди порожній.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from dr_gaze.knowledge_base import KnowledgeBase
from dr_gaze.sets import KeyedSet


logger = logging.getLogger(__name__)


@dataclass
class LocalizationResult:
    """Результат звуження локалізації"""
    structures: KeyedSet
    zone_ids: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.structures.is_empty()

    @property
    def structure_names(self) -> List[str]:
        return sorted(self.structures.keys())


class LocalizationResolver:
    """
    Перетин множин вибраних зон.

    Приклад використання:
        resolver = LocalizationResolver(KnowledgeBase.default())

        resolver.resolve([])                          # порожня множина
        resolver.resolve(["ino"])                     # {'R MLF', 'L MLF'}
        resolver.resolve(["horizontal", "leftLG"])    # {'L LR', 'R MR', 'R MLF'}
    """

    def __init__(self, knowledge_base: Optional[KnowledgeBase] = None):
        self.knowledge_base = knowledge_base or KnowledgeBase.default()

    def resolve(self, zone_ids: Sequence[str]) -> KeyedSet:
        """
        Args:
            zone_ids: Вибрані зони (порядок вибору)

        Returns:
            Нова множина структур

        Raises:
            UnknownKeyError: якщо зони немає в базі знань
        """
        zone_ids = list(zone_ids)
        if not zone_ids:
            return KeyedSet()

        first, rest = zone_ids[0], zone_ids[1:]
        accumulator = self.knowledge_base.zone(first)
        logger.debug("Bootstrap with '%s': %d structures", first, len(accumulator))

        for zone_id in rest:
            accumulator = accumulator.intersection(self.knowledge_base.zone(zone_id))
            logger.debug("After '%s': %d structures", zone_id, len(accumulator))

        return accumulator

    def resolve_detailed(self, zone_ids: Sequence[str]) -> LocalizationResult:
        zone_ids = list(zone_ids)
        return LocalizationResult(structures=self.resolve(zone_ids), zone_ids=zone_ids)

    def __repr__(self) -> str:
        return f"LocalizationResolver({self.knowledge_base!r})"


def resolve_localization(
    zone_ids: Sequence[str],
    knowledge_base: Optional[KnowledgeBase] = None
) -> KeyedSet:
    """Звузити локалізацію за вибраними зонами"""
    return LocalizationResolver(knowledge_base).resolve(zone_ids)
