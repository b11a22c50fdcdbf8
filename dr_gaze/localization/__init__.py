"""
Dr.Gaze — Модуль локалізації (localization)

Приклад використання:
    from dr_gaze.localization import resolve_localization

    structures = resolve_localization(["horizontal", "nohyper"])
    if structures.is_empty():
        print("No localizations found!")
"""

from .resolver import LocalizationResolver, LocalizationResult, resolve_localization


__all__ = [
    "LocalizationResolver",
    "LocalizationResult",
    "resolve_localization",
]
