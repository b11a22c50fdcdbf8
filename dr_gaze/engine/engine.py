"""
Dr.Gaze — Головний діагностичний движок

DiagnosisEngine об'єднує компоненти:
1. LocalizationResolver — перетин вибраних зон
2. DifferentialRanker — ранжування діагнозів за доказами

Один виклик evaluate() відповідає одній зміні чекбокса.
Усі проміжні множини створюються заново при кожному виклику,
спільною є лише база знань (тільки читання).
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from dr_gaze.config import DrGazeConfig, get_default_config
from dr_gaze.knowledge_base import KnowledgeBase
from dr_gaze.localization import LocalizationResolver
from dr_gaze.ranking import DifferentialRanker, RankingResult
from dr_gaze.schemas import (
    DifferentialGroup, EvaluationReport, EvaluationStatus, SelectionRequest
)
from dr_gaze.sets import KeyedSet


logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Результат оцінки вибору користувача"""
    status: EvaluationStatus

    # Вхідні дані
    zones: List[str] = field(default_factory=list)
    symptoms: List[str] = field(default_factory=list)

    # Локалізація та ранжування
    localization: KeyedSet = field(default_factory=KeyedSet)
    ranking: Optional[RankingResult] = None

    @property
    def is_ranked(self) -> bool:
        return self.status == EvaluationStatus.RANKED

    @property
    def localization_names(self) -> List[str]:
        return sorted(self.localization.keys())

    def to_report(self) -> EvaluationReport:
        """Конвертувати в EvaluationReport schema"""
        top = second = None
        candidates = {}

        if self.ranking is not None and not self.ranking.is_empty:
            top = _group(self.ranking, self.ranking.top_names, self.ranking.top_overlap)
            second = _group(self.ranking, self.ranking.second_names, self.ranking.second_overlap)
            candidates = {r.diagnosis: r.score for r in self.ranking.records}

        return EvaluationReport(
            status=self.status,
            zones=self.zones,
            symptoms=self.symptoms,
            localization=self.localization_names,
            top=top,
            second=second,
            candidates=candidates,
        )


def _group(
    ranking: RankingResult,
    names: List[str],
    overlap: Optional[KeyedSet]
) -> DifferentialGroup:
    if not names:
        return DifferentialGroup()
    return DifferentialGroup(
        names=names,
        score=ranking.get_record(names[0]).score,
        features=sorted(overlap.keys()) if overlap is not None else None,
    )


class DiagnosisEngine:
    """
    Головний діагностичний движок.

    Приклад використання:
        engine = DiagnosisEngine()

        result = engine.evaluate(zones=["ino"], symptoms=["right_impaired_adduction"])
        print(result.status)                  # EvaluationStatus.RANKED
        print(result.ranking.top_names)       # ['R INO']

        result = engine.evaluate(zones=["lefttilt", "righttilt"])
        print(result.status)                  # EvaluationStatus.EMPTY_LOCALIZATION
    """

    def __init__(
        self,
        knowledge_base: Optional[KnowledgeBase] = None,
        config: Optional[DrGazeConfig] = None
    ):
        """
        Args:
            knowledge_base: База знань (за замовчуванням вбудована)
            config: Конфігурація Dr.Gaze
        """
        self.config = config or get_default_config()
        self.knowledge_base = knowledge_base or KnowledgeBase.default()

        self.resolver = LocalizationResolver(self.knowledge_base)
        self.ranker = DifferentialRanker(self.knowledge_base, self.config.ranking)

    def evaluate(
        self,
        zones: Optional[Sequence[str]] = None,
        symptoms: Optional[Sequence[str]] = None
    ) -> EvaluationResult:
        """
        Оцінити вибір користувача.

        Args:
            zones: Вибрані зони локалізації
            symptoms: Вибрані симптоми

        Returns:
            EvaluationResult з термінальним станом

        Raises:
            UnknownKeyError: якщо зони немає в базі знань
        """
        zones = list(zones or [])
        symptoms = list(symptoms or [])

        if not zones and not symptoms:
            logger.info("Nothing checked")
            return EvaluationResult(status=EvaluationStatus.NO_SELECTION)

        localization = self.resolver.resolve(zones)

        if localization.is_empty():
            logger.info("No localization for zones %s", zones)
            return EvaluationResult(
                status=EvaluationStatus.EMPTY_LOCALIZATION,
                zones=zones,
                symptoms=symptoms,
                localization=localization,
            )

        if not symptoms:
            return EvaluationResult(
                status=EvaluationStatus.LOCALIZED,
                zones=zones,
                localization=localization,
            )

        ranking = self.ranker.rank(symptoms, localization)
        logger.info(
            "Ranked %d candidates for zones %s and symptoms %s",
            len(ranking.candidates), zones, symptoms
        )

        return EvaluationResult(
            status=EvaluationStatus.RANKED,
            zones=zones,
            symptoms=symptoms,
            localization=localization,
            ranking=ranking,
        )

    def evaluate_request(self, request: SelectionRequest) -> EvaluationResult:
        return self.evaluate(zones=request.zones, symptoms=request.symptoms)

    def __repr__(self) -> str:
        return f"DiagnosisEngine({self.knowledge_base!r})"
