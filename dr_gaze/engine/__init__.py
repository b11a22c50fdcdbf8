"""
Dr.Gaze — Модуль діагностичного движка (engine)

Компоненти:
- DiagnosisEngine: Повний цикл оцінки вибору
- EvaluationResult: Результат з термінальним станом
- EvaluationStatus: NO_SELECTION / EMPTY_LOCALIZATION / LOCALIZED / RANKED
- render_text: Текстове відображення результату

Приклад використання:
    from dr_gaze.engine import DiagnosisEngine, render_text

    engine = DiagnosisEngine()
    result = engine.evaluate(zones=["horizontal"], symptoms=["nystagmus"])

    print(render_text(result))
    print(result.to_report().model_dump_json(indent=2))
"""

from dr_gaze.schemas import EvaluationStatus

from .engine import DiagnosisEngine, EvaluationResult
from .presenter import render_text


__all__ = [
    "DiagnosisEngine",
    "EvaluationResult",
    "EvaluationStatus",
    "render_text",
]
