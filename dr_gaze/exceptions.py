"""
Dr.Gaze — Винятки

Операції над множинами ніколи не кидають винятків.
Помилки виникають лише при зверненні до реєстру та при завантаженні конфігурації.
"""

from typing import Optional


class DrGazeError(Exception):
    """Базовий виняток Dr.Gaze"""


class UnknownKeyError(DrGazeError, KeyError):
    """
    Назва відсутня в базі знань.

    Виникає лише через помилку у відповідності ідентифікаторів,
    тому не повинна маскуватись порожньою множиною.
    """

    def __init__(self, name: str, kind: str = "entry", known: Optional[list] = None):
        self.name = name
        self.kind = kind
        self.known = list(known) if known else []
        super().__init__(name)

    def __str__(self) -> str:
        message = f"Unknown {self.kind}: {self.name!r}"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        return message


class ConfigError(DrGazeError, ValueError):
    """Некоректна конфігурація"""


class KnowledgeBaseError(DrGazeError):
    """Неузгоджена таблиця бази знань"""

    def __init__(self, issues: list):
        self.issues = list(issues)
        super().__init__("; ".join(self.issues))
