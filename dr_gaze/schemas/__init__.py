"""
Dr.Gaze — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації.

Приклад використання:
    from dr_gaze.schemas import SelectionRequest, EvaluationReport

    request = SelectionRequest(zones=["ino"], symptoms=["nystagmus"])

    # Серіалізація в JSON
    json_data = report.model_dump_json()

    # Десеріалізація з JSON
    report_loaded = EvaluationReport.model_validate_json(json_data)
"""

from .evaluation import (
    EvaluationStatus,
    SelectionRequest,
    DifferentialGroup,
    EvaluationReport,
)


__all__ = [
    "EvaluationStatus",
    "SelectionRequest",
    "DifferentialGroup",
    "EvaluationReport",
]
