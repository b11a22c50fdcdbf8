"""
Dr.Gaze — Модуль ранжування (ranking)

Відбирає діагнози-кандидати за симптомами та локалізацією
і ранжує їх за кількістю спільних ознак з доказами.

Компоненти:
- DifferentialRanker: Головний клас ранжування
- RankingResult: Перше та друге місце з нічиїми
- RankingRecord: Перекриття одного діагнозу

Приклад використання:
    from dr_gaze.localization import resolve_localization
    from dr_gaze.ranking import rank_differentials

    localization = resolve_localization(["horizontal"])
    result = rank_differentials(["nystagmus"], localization)

    if result.is_top_tied:
        print("Multiple differentials likely!", result.top_names)
    else:
        print(result.top_names[0], result.top_overlap.keys())
"""

from .ranker import DifferentialRanker, RankingRecord, RankingResult, rank_differentials


__all__ = [
    "DifferentialRanker",
    "RankingRecord",
    "RankingResult",
    "rank_differentials",
]
