"""
Dr.Gaze — Схеми запиту та результату оцінки

Pydantic моделі для:
- SelectionRequest: вибрані зони та симптоми
- DifferentialGroup: одне місце в ранжуванні (один діагноз або нічия)
- EvaluationReport: повний результат для інтерфейсу
"""

from datetime import datetime
from typing import Dict, List, Optional
from enum import Enum
from pydantic import BaseModel, Field, field_validator


class EvaluationStatus(str, Enum):
    """Термінальний стан оцінки"""
    NO_SELECTION = "no_selection"               # нічого не вибрано
    EMPTY_LOCALIZATION = "empty_localization"   # перетин зон порожній
    LOCALIZED = "localized"                     # є локалізація, симптомів немає
    RANKED = "ranked"                           # є ранжування діагнозів


def _normalize_ids(values: List[str]) -> List[str]:
    seen = set()
    result = []
    for value in values:
        value = value.strip()
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


class SelectionRequest(BaseModel):
    """
    Вибір користувача.

    Приклад:
        request = SelectionRequest(
            zones=["horizontal", " leftLG "],
            symptoms=["nystagmus"]
        )
        request.zones  # ['horizontal', 'leftLG']
    """
    zones: List[str] = Field(default_factory=list, description="Вибрані зони (порядок вибору)")
    symptoms: List[str] = Field(default_factory=list, description="Вибрані симптоми")

    @field_validator("zones", "symptoms")
    @classmethod
    def normalize(cls, v: List[str]) -> List[str]:
        """Без пробілів по краях, без порожніх і повторів"""
        return _normalize_ids(v)

    @property
    def is_empty(self) -> bool:
        return not self.zones and not self.symptoms

    class Config:
        json_schema_extra = {
            "example": {
                "zones": ["ino"],
                "symptoms": ["right_impaired_adduction"]
            }
        }


class DifferentialGroup(BaseModel):
    """
    Одне місце в ранжуванні.

    Один діагноз — з переліком ознак, що співпали;
    нічия — лише назви діагнозів.
    """
    names: List[str] = Field(default_factory=list, description="Діагнози на цьому місці")
    score: int = Field(default=0, ge=0, description="Кількість спільних ознак")
    features: Optional[List[str]] = Field(
        default=None,
        description="Ознаки, що співпали (лише для одного діагнозу)"
    )

    @property
    def is_tied(self) -> bool:
        return len(self.names) > 1

    @property
    def is_empty(self) -> bool:
        return not self.names


class EvaluationReport(BaseModel):
    """
    Результат оцінки вибору для інтерфейсу.
    """
    status: EvaluationStatus = Field(..., description="Термінальний стан")

    # Вхідні дані
    zones: List[str] = Field(default_factory=list)
    symptoms: List[str] = Field(default_factory=list)

    # Локалізація
    localization: List[str] = Field(default_factory=list, description="Узгоджені структури")

    # Ранжування
    top: Optional[DifferentialGroup] = Field(default=None, description="Перше місце")
    second: Optional[DifferentialGroup] = Field(default=None, description="Друге місце")
    candidates: Dict[str, int] = Field(
        default_factory=dict,
        description="Бал кожного кандидата {diagnosis: score}"
    )

    # Метадані
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def has_additional(self) -> bool:
        return self.second is not None and not self.second.is_empty

    def to_summary(self) -> Dict:
        """Короткий підсумок для UI"""
        return {
            "status": self.status.value,
            "localization_count": len(self.localization),
            "top": self.top.names if self.top else [],
            "second": self.second.names if self.second else [],
            "candidate_count": len(self.candidates),
        }

    class Config:
        json_schema_extra = {
            "example": {
                "status": "ranked",
                "zones": ["ino"],
                "symptoms": ["right_impaired_adduction"],
                "localization": ["L MLF", "R MLF"],
                "top": {
                    "names": ["R INO"],
                    "score": 2,
                    "features": ["R MLF", "right_impaired_adduction"]
                },
                "second": {"names": [], "score": 0},
                "candidates": {"R INO": 2}
            }
        }
