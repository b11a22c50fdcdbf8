"""
Dr.Gaze — Текстове відображення результату

Формулювання повідомлень береться з MessagesConfig.
"""

from typing import List, Optional

from dr_gaze.config import MessagesConfig
from dr_gaze.schemas import EvaluationStatus

from .engine import EvaluationResult


def _items(lines: List[str], values) -> None:
    for value in values:
        lines.append(f"  - {value}")


def render_text(
    result: EvaluationResult,
    messages: Optional[MessagesConfig] = None
) -> str:
    """
    Відобразити результат оцінки як текст.

    Returns:
        Багаторядковий текст: локалізація, перше та друге місце
    """
    messages = messages or MessagesConfig()
    lines: List[str] = []

    if result.status == EvaluationStatus.NO_SELECTION:
        lines.append(messages.nothing_checked)
        lines.append(messages.no_localization)
        return "\n".join(lines)

    if result.status == EvaluationStatus.EMPTY_LOCALIZATION:
        lines.append(messages.no_localization)
        return "\n".join(lines)

    lines.append("Localization:")
    _items(lines, result.localization_names)

    if result.ranking is None or result.ranking.is_empty:
        return "\n".join(lines)

    ranking = result.ranking

    lines.append("")
    if ranking.is_top_tied:
        lines.append(messages.multiple_top)
        _items(lines, ranking.top_names)
    else:
        lines.append(f"{ranking.top_names[0]}:")
        _items(lines, sorted(ranking.top_overlap.keys()))

    lines.append("")
    if not ranking.has_additional:
        lines.append(messages.no_additional)
    elif ranking.is_second_tied:
        lines.append(messages.multiple_second)
        _items(lines, ranking.second_names)
    else:
        lines.append(f"{ranking.second_names[0]}:")
        _items(lines, sorted(ranking.second_overlap.keys()))

    return "\n".join(lines)
