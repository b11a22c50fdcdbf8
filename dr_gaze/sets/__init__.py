"""
Dr.Gaze — Модуль множин (sets)

KeyedSet — множина з алгебраїчними операціями, ключ елемента
задається функцією при створенні.

Приклад використання:
    from dr_gaze.sets import KeyedSet, STOP

    left_gaze = KeyedSet(["L LR", "R MR", "R MLF"])
    right_gaze = KeyedSet(["R LR", "L MR", "L MLF"])

    left_gaze.intersection(right_gaze).is_empty()  # True
    left_gaze.union(right_gaze).keys()

    # Ітерація з ранньою зупинкою
    left_gaze.each(lambda value, key: STOP if value == "R MR" else None)
"""

from .keyed_set import KeyedSet, STOP


__all__ = [
    "KeyedSet",
    "STOP",
]
