"""
Dr.Gaze — Ранжування диференціальних діагнозів

Pipeline:
1. Симптоми + локалізація → діагнози-кандидати (об'єднання по симптомах)
2. Локалізація ∪ симптоми → множина доказів
3. Ознаки діагнозу ∩ докази → перекриття, бал = розмір перекриття
4. Групування за балом → перше місце та друге місце (з нічиїми)
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from dr_gaze.config import NameOrder, RankingConfig
from dr_gaze.knowledge_base import KnowledgeBase
from dr_gaze.sets import KeyedSet


logger = logging.getLogger(__name__)


@dataclass
class RankingRecord:
    """Перекриття одного діагнозу з доказами"""
    diagnosis: str
    overlap: KeyedSet

    @property
    def score(self) -> int:
        return len(self.overlap)

    @property
    def overlap_items(self) -> List[str]:
        return sorted(self.overlap.keys())


@dataclass
class RankingResult:
    """
    Результат ранжування.

    Перше місце: один діагноз з його перекриттям (top_overlap),
    або кілька діагнозів з однаковим балом (top_overlap = None).
    Друге місце так само; порожній second_names означає
    "немає додаткових диференціальних діагнозів".
    """
    top_names: List[str] = field(default_factory=list)
    top_overlap: Optional[KeyedSet] = None
    second_names: List[str] = field(default_factory=list)
    second_overlap: Optional[KeyedSet] = None

    # Проміжні дані
    candidates: List[str] = field(default_factory=list)
    records: List[RankingRecord] = field(default_factory=list)
    evidence: KeyedSet = field(default_factory=KeyedSet)

    @property
    def is_empty(self) -> bool:
        return not self.top_names

    @property
    def is_top_tied(self) -> bool:
        return len(self.top_names) > 1

    @property
    def is_second_tied(self) -> bool:
        return len(self.second_names) > 1

    @property
    def has_additional(self) -> bool:
        return bool(self.second_names)

    @property
    def top_score(self) -> int:
        return self.records[0].score if self.records else 0

    @property
    def second_score(self) -> int:
        if not self.has_additional:
            return 0
        return self.get_record(self.second_names[0]).score

    def get_record(self, diagnosis: str) -> Optional[RankingRecord]:
        for record in self.records:
            if record.diagnosis == diagnosis:
                return record
        return None


class DifferentialRanker:
    """
    Ранжування диференціальних діагнозів за перекриттям доказів.

    Приклад використання:
        ranker = DifferentialRanker(KnowledgeBase.default())
        localization = resolve_localization(["ino"])

        result = ranker.rank(["right_impaired_adduction"], localization)
        print(result.top_names)        # ['R INO']
        print(result.has_additional)   # False
    """

    def __init__(
        self,
        knowledge_base: Optional[KnowledgeBase] = None,
        config: Optional[RankingConfig] = None
    ):
        """
        Args:
            knowledge_base: База знань (за замовчуванням вбудована)
            config: Конфігурація ранжування
        """
        self.knowledge_base = knowledge_base or KnowledgeBase.default()
        self.config = config or RankingConfig()

    def select_candidates(
        self,
        symptom_ids: Sequence[str],
        localization: KeyedSet
    ) -> KeyedSet:
        """
        Діагнози, що містять хоча б один вибраний симптом
        і перетинаються з локалізацією.

        Returns:
            Нова множина назв діагнозів
        """
        candidates = KeyedSet()

        for symptom in symptom_ids:
            if self.config.warn_unknown_symptoms and not self.knowledge_base.is_symptom(symptom):
                logger.warning("Unknown symptom '%s' matches no diagnosis", symptom)

            matched = KeyedSet()
            for name in self.knowledge_base.diagnosis_names:
                features = self.knowledge_base.diagnosis(name)
                if features.has(symptom) and not features.intersection(localization).is_empty():
                    matched.add(name)

            logger.debug("Symptom '%s' → %s", symptom, matched)
            candidates = candidates.union(matched)

        return candidates

    def build_evidence(
        self,
        localization: KeyedSet,
        symptom_ids: Sequence[str]
    ) -> KeyedSet:
        """Локалізація ∪ симптоми (нова множина)"""
        return localization.union(list(symptom_ids))

    def score(
        self,
        candidates: KeyedSet,
        evidence: KeyedSet
    ) -> List[RankingRecord]:
        """
        Перекриття кожного кандидата з доказами.

        Returns:
            Записи, відсортовані за балом (спадання), потім за назвою
        """
        records = [
            RankingRecord(
                diagnosis=name,
                overlap=self.knowledge_base.diagnosis(name).intersection(evidence)
            )
            for name in candidates.keys()
        ]
        order = self._name_order()
        records.sort(key=lambda r: (-r.score, order(r.diagnosis)))

        for record in records:
            logger.debug("%s: %d (%s)", record.diagnosis, record.score, record.overlap_items)

        return records

    def rank(
        self,
        symptom_ids: Sequence[str],
        localization: KeyedSet
    ) -> RankingResult:
        """
        Відранжувати діагнози.

        Без симптомів ранжування не виконується (порожній результат).
        Локалізація не змінюється.
        """
        symptom_ids = list(symptom_ids)
        if not symptom_ids:
            return RankingResult(evidence=localization.copy())

        # Кандидати відбираються ДО додавання симптомів до локалізації
        candidates = self.select_candidates(symptom_ids, localization)
        evidence = self.build_evidence(localization, symptom_ids)
        records = self.score(candidates, evidence)

        groups: Dict[int, List[RankingRecord]] = {}
        for record in records:
            groups.setdefault(record.score, []).append(record)
        scores = sorted(groups, reverse=True)

        top_group = groups[scores[0]] if scores else []
        second_group = groups[scores[1]] if len(scores) > 1 else []

        result = RankingResult(
            top_names=[r.diagnosis for r in top_group],
            top_overlap=top_group[0].overlap if len(top_group) == 1 else None,
            second_names=[r.diagnosis for r in second_group],
            second_overlap=second_group[0].overlap if len(second_group) == 1 else None,
            candidates=[r.diagnosis for r in records],
            records=records,
            evidence=evidence,
        )

        logger.debug(
            "Top: %s, second: %s",
            result.top_names, result.second_names or "none"
        )
        return result

    def _name_order(self):
        if self.config.name_order == NameOrder.REGISTRY:
            index = {name: i for i, name in enumerate(self.knowledge_base.diagnosis_names)}
            return lambda name: index.get(name, len(index))
        return lambda name: name

    def __repr__(self) -> str:
        return f"DifferentialRanker(name_order={self.config.name_order.value})"


def rank_differentials(
    symptom_ids: Sequence[str],
    localization: KeyedSet,
    knowledge_base: Optional[KnowledgeBase] = None
) -> RankingResult:
    """Відранжувати диференціальні діагнози"""
    return DifferentialRanker(knowledge_base).rank(symptom_ids, localization)
