"""
Dr.Gaze — Множина з алгебраїчними операціями

KeyedSet зберігає відображення канонічний ключ → оригінальне значення.
Ключ обчислюється функцією key (за замовчуванням — сам елемент).

Ініціалізатори (конструктор, add, права частина бінарних операцій):
- один елемент:          KeyedSet("R MR")
- кілька елементів:      KeyedSet("R MR", "L MR")
- послідовність:         KeyedSet(["R MR", "L MR"])
- інша множина:          KeyedSet(other)
- генератор:             KeyedSet(s.strip() for s in raw)
- будь-яка комбінація:   KeyedSet("R MR", ["L MR"], other)

Розгортається будь-який ітерований об'єкт, крім рядків, bytes та
словників: вони завжди вважаються одним елементом.

Для іншої KeyedSet з іншою функцією ключа ключі перераховуються
функцією ключа отримувача.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Dict, Hashable, Iterator, List, Optional


# Сигнал зупинки для each(): колбек повертає саме False
STOP = False


def _identity(item: Any) -> Any:
    return item


def _is_collection(item: Any) -> bool:
    """Чи треба розгорнути item як набір елементів"""
    if isinstance(item, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(item, Iterable)


class KeyedSet:
    """
    Невпорядкована множина з унікальними ключами.

    Приклад використання:
        horizontal = KeyedSet(["R MR", "R LR", "L MR", "L LR"])
        vertical = KeyedSet(["R SR", "R IR", "L SR", "L IR"])

        horizontal.union(vertical)
        horizontal.intersection(["R MR", "R SR"])   # KeyedSet(['R MR'])
        horizontal.is_subset(horizontal | vertical)  # True

        # Власна функція ключа
        people = KeyedSet({"id": 1}, {"id": 2}, key=lambda p: p["id"])
        people.has({"id": 1})  # True
    """

    __hash__ = None

    def __init__(self, *items: Any, key: Optional[Callable[[Any], Hashable]] = None):
        self._key = key or _identity
        self._data: Dict[Hashable, Any] = {}
        self.add(*items)

    # =========================================================================
    # Мутації
    # =========================================================================

    def add(self, *items: Any) -> "KeyedSet":
        """Додати елементи. Повторне додавання перезаписує значення."""
        for item in items:
            if self._same_key(item):
                self._data.update(item._data)
            elif _is_collection(item):
                for element in item:
                    self._add(element)
            else:
                self._add(item)
        return self

    def _add(self, element: Any) -> None:
        self._data[self._key(element)] = element

    def remove(self, *items: Any) -> "KeyedSet":
        """Видалити елементи. Відсутній ключ — не помилка."""
        for item in items:
            if self._same_key(item):
                for k in item._data:
                    self._data.pop(k, None)
            elif _is_collection(item):
                for element in item:
                    self._data.pop(self._key(element), None)
            else:
                self._data.pop(self._key(item), None)
        return self

    def clear(self) -> "KeyedSet":
        self._data = {}
        return self

    # =========================================================================
    # Запити
    # =========================================================================

    def has(self, item: Any) -> bool:
        return self._key(item) in self._data

    def has_all(self, *items: Any) -> bool:
        """Чи містить множина всі передані елементи"""
        return self.is_superset(self._make_new(*items))

    def is_empty(self) -> bool:
        return not self._data

    def keys(self) -> List[Any]:
        """Оригінальні значення (не канонічні ключі)"""
        return list(self._data.values())

    def copy(self) -> "KeyedSet":
        return self._make_new(self)

    # =========================================================================
    # Побудова нових множин
    # =========================================================================

    def _make_new(self, *items: Any) -> "KeyedSet":
        """Нова множина того ж типу і з тією ж функцією ключа"""
        new_set = self.__class__(key=self._key)
        if items:
            new_set.add(*items)
        return new_set

    def _same_key(self, other: Any) -> bool:
        """Чи є other KeyedSet з тією ж функцією ключа"""
        return isinstance(other, KeyedSet) and other._key is self._key

    def _make_set(self, other: Any) -> "KeyedSet":
        if self._same_key(other):
            return other
        return self._make_new(other)

    def _from_items(self, pairs) -> "KeyedSet":
        new_set = self._make_new()
        for k, value in pairs:
            new_set._data[k] = value
        return new_set

    # =========================================================================
    # Алгебра
    # =========================================================================

    def equals(self, other: Any) -> bool:
        """Рівність як взаємне включення"""
        other = self._make_set(other)
        return self.is_subset(other) and self.is_superset(other)

    def union(self, other: Any) -> "KeyedSet":
        other = self._make_set(other)
        return self._make_new(self).add(other)

    def intersection(self, other: Any) -> "KeyedSet":
        other = self._make_set(other)
        return self._from_items(
            (k, value) for k, value in self._data.items() if k in other._data
        )

    def difference(self, other: Any) -> "KeyedSet":
        """Елементи self, яких немає в other"""
        other = self._make_set(other)
        return self._from_items(
            (k, value) for k, value in self._data.items() if k not in other._data
        )

    def symmetric_difference(self, other: Any) -> "KeyedSet":
        """Елементи, що є рівно в одній з двох множин"""
        other = self._make_set(other)
        return self.difference(other).add(other.difference(self))

    def is_subset(self, other: Any) -> bool:
        """Кожен елемент self є в other"""
        other = self._make_set(other)
        return self.each_return(lambda value, k: k in other._data)

    def is_superset(self, other: Any) -> bool:
        """Кожен елемент other є в self"""
        other = self._make_set(other)
        return other.each_return(lambda value, k: k in self._data)

    # =========================================================================
    # Ітерація
    # =========================================================================

    def each(self, fn: Callable[[Any, Hashable], Any]) -> "KeyedSet":
        """
        Викликати fn(value, key) для кожного елемента.

        Ітерація зупиняється, якщо fn повертає STOP.
        """
        self.each_return(fn)
        return self

    def each_return(self, fn: Callable[[Any, Hashable], Any]) -> bool:
        """Як each(), але повертає False, якщо ітерацію зупинено"""
        for k, value in list(self._data.items()):
            if fn(value, k) is STOP:
                return False
        return True

    def every_matches(self, fn: Callable[[Any, Hashable], Any]) -> bool:
        """
        True, якщо жоден елемент не змусив fn(value, key) повернути False.

        Той самий колбек, що й у each() та some_matches().
        """
        return self.each_return(fn)

    def some_matches(self, fn: Callable[[Any, Hashable], Any]) -> bool:
        """True, якщо fn(value, key) повертає True хоча б для одного елемента"""
        return not self.each_return(lambda value, k: fn(value, k) is not True)

    def filter(self, fn: Callable[[Hashable], Any]) -> "KeyedSet":
        """Нова множина з елементів, для яких fn(key) істинне"""
        return self._from_items(
            (k, value) for k, value in list(self._data.items()) if fn(k)
        )

    def map(self, fn: Callable[[Hashable], Any]) -> "KeyedSet":
        """
        Нова множина з ОРИГІНАЛЬНИХ елементів, для яких fn(key) не None.

        Повернене fn значення не потрапляє в результат, тобто це фактично
        ще один фільтр.
        """
        return self._from_items(
            (k, value) for k, value in list(self._data.items()) if fn(k) is not None
        )

    # =========================================================================
    # Python протоколи
    # =========================================================================

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._data.values()))

    def __contains__(self, item: Any) -> bool:
        return self.has(item)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, KeyedSet):
            return NotImplemented
        return self.equals(other)

    def __or__(self, other: Any) -> "KeyedSet":
        return self.union(other)

    def __and__(self, other: Any) -> "KeyedSet":
        return self.intersection(other)

    def __sub__(self, other: Any) -> "KeyedSet":
        return self.difference(other)

    def __xor__(self, other: Any) -> "KeyedSet":
        return self.symmetric_difference(other)

    def __le__(self, other: Any) -> bool:
        return self.is_subset(other)

    def __ge__(self, other: Any) -> bool:
        return self.is_superset(other)

    def __repr__(self) -> str:
        return f"KeyedSet({sorted(map(str, self._data.values()))})"
