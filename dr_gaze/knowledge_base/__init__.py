"""
Dr.Gaze — Модуль бази знань (knowledge_base)

Фіксований реєстр іменованих множин:
- ZoneName: зони локалізації (ідентифікатори чекбоксів)
- DiagnosisName: диференціальні діагнози
- KnowledgeBase: незмінний реєстр з перевіреним lookup()

Приклад використання:
    from dr_gaze.knowledge_base import KnowledgeBase, ZoneName

    kb = KnowledgeBase.default()
    print(kb)                                # KnowledgeBase(zones=15, ...)
    print(kb.zone(ZoneName.INO).keys())      # ['R MLF', 'L MLF']
    print(kb.diagnoses_with("nystagmus"))
"""

from .data import (
    DiagnosisName,
    ZoneName,
    DIAGNOSES,
    ZONES,
    STRUCTURES,
    SYMPTOMS,
)
from .registry import KnowledgeBase


__all__ = [
    "KnowledgeBase",
    "ZoneName",
    "DiagnosisName",
    "ZONES",
    "DIAGNOSES",
    "STRUCTURES",
    "SYMPTOMS",
]
