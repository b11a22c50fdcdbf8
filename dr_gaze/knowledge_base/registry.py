"""
Dr.Gaze — Реєстр бази знань

KnowledgeBase — незмінний іменований реєстр множин:
- зони локалізації (назва зони → структури)
- діагнози (назва діагнозу → структури + симптоми)

Реєстр будується один раз і далі лише читається.
Записи зберігаються як кортежі за MappingProxyType;
lookup() щоразу будує нову KeyedSet, тож зміна результату не торкається реєстру.
"""

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from dr_gaze.exceptions import KnowledgeBaseError, UnknownKeyError
from dr_gaze.sets import KeyedSet

from .data import DIAGNOSES, STRUCTURES, SYMPTOMS, ZONES


logger = logging.getLogger(__name__)


class KnowledgeBase:
    """
    Незмінна база знань.

    Приклад використання:
        kb = KnowledgeBase.default()

        kb.lookup("horizontal")        # KeyedSet зони
        kb.lookup("R INO")             # KeyedSet діагнозу
        kb.zone(ZoneName.LEFT_TILT)
        kb.diagnosis_names             # у порядку таблиці

        kb.lookup("upward")            # UnknownKeyError
    """

    _default: Optional["KnowledgeBase"] = None

    def __init__(
        self,
        zones: Mapping[str, Iterable[str]],
        diagnoses: Mapping[str, Iterable[str]],
        structures: Iterable[str],
        symptoms: Iterable[str],
        validate: bool = True
    ):
        """
        Args:
            zones: Назва зони → структури
            diagnoses: Назва діагнозу → структури та симптоми
            structures: Словник відомих структур
            symptoms: Словник відомих симптомів
            validate: Перевірити узгодженість таблиці
        """
        self._structures: FrozenSet[str] = frozenset(structures)
        self._symptoms: FrozenSet[str] = frozenset(symptoms)

        # Незмінне сховище: кортежі унікальних назв у порядку таблиці
        self._zones: Mapping[str, Tuple[str, ...]] = MappingProxyType({
            str(_value(name)): _freeze(items) for name, items in zones.items()
        })
        self._diagnoses: Mapping[str, Tuple[str, ...]] = MappingProxyType({
            str(_value(name)): _freeze(items) for name, items in diagnoses.items()
        })

        if validate:
            issues = self.validate()
            if issues:
                raise KnowledgeBaseError(issues)

        logger.debug(
            "Knowledge base built: %d zones, %d diagnoses",
            len(self._zones), len(self._diagnoses)
        )

    @classmethod
    def default(cls) -> "KnowledgeBase":
        """Вбудована база знань (створюється один раз на процес)"""
        if cls._default is None:
            cls._default = cls(
                zones=ZONES,
                diagnoses=DIAGNOSES,
                structures=STRUCTURES,
                symptoms=SYMPTOMS,
            )
        return cls._default

    # =========================================================================
    # Lookup
    # =========================================================================

    def lookup(self, name: str) -> KeyedSet:
        """
        Знайти множину за назвою (зона або діагноз).

        Raises:
            UnknownKeyError: якщо назви немає в реєстрі
        """
        key = _value(name)
        if key in self._zones:
            return KeyedSet(self._zones[key])
        if key in self._diagnoses:
            return KeyedSet(self._diagnoses[key])
        raise UnknownKeyError(key, kind="entry")

    def zone(self, name: str) -> KeyedSet:
        key = _value(name)
        try:
            return KeyedSet(self._zones[key])
        except KeyError:
            raise UnknownKeyError(key, kind="zone", known=self.zone_names) from None

    def diagnosis(self, name: str) -> KeyedSet:
        key = _value(name)
        try:
            return KeyedSet(self._diagnoses[key])
        except KeyError:
            raise UnknownKeyError(key, kind="diagnosis") from None

    def has_zone(self, name: str) -> bool:
        return _value(name) in self._zones

    def has_diagnosis(self, name: str) -> bool:
        return _value(name) in self._diagnoses

    def is_symptom(self, name: str) -> bool:
        return name in self._symptoms

    def diagnoses_with(self, feature: str) -> List[str]:
        """Діагнози, набір ознак яких містить feature"""
        return [name for name, features in self._diagnoses.items() if feature in features]

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def zone_names(self) -> List[str]:
        return list(self._zones)

    @property
    def diagnosis_names(self) -> List[str]:
        """Назви діагнозів у порядку таблиці"""
        return list(self._diagnoses)

    @property
    def structures(self) -> List[str]:
        return sorted(self._structures)

    @property
    def symptoms(self) -> List[str]:
        return sorted(self._symptoms)

    # =========================================================================
    # Перевірки
    # =========================================================================

    def validate(self) -> List[str]:
        """
        Перевірити узгодженість таблиці.

        Returns:
            Список проблем (порожній, якщо все гаразд)
        """
        issues = []

        overlap = sorted(set(self._zones) & set(self._diagnoses))
        for name in overlap:
            issues.append(f"'{name}' is both a zone and a diagnosis")

        for name, structures in self._zones.items():
            unknown = sorted(s for s in structures if s not in self._structures)
            if unknown:
                issues.append(f"zone '{name}' has unknown structures: {', '.join(unknown)}")

        known_features = self._structures | self._symptoms
        for name, features in self._diagnoses.items():
            unknown = sorted(f for f in features if f not in known_features)
            if unknown:
                issues.append(f"diagnosis '{name}' has unknown features: {', '.join(unknown)}")

        return issues

    def snapshot(self) -> Dict[str, FrozenSet[str]]:
        """Знімок вмісту всіх записів (для перевірки незмінності)"""
        result = {name: frozenset(s) for name, s in self._zones.items()}
        result.update({name: frozenset(s) for name, s in self._diagnoses.items()})
        return result

    def __contains__(self, name: str) -> bool:
        key = _value(name)
        return key in self._zones or key in self._diagnoses

    def __len__(self) -> int:
        return len(self._zones) + len(self._diagnoses)

    def __repr__(self) -> str:
        return (
            f"KnowledgeBase(zones={len(self._zones)}, "
            f"diagnoses={len(self._diagnoses)}, symptoms={len(self._symptoms)})"
        )


def _freeze(items: Iterable[str]) -> Tuple[str, ...]:
    """Унікальні значення у порядку першої появи"""
    return tuple(dict.fromkeys(_value(item) for item in items))


def _value(name) -> str:
    """Enum → його значення, рядок → без змін"""
    return getattr(name, "value", name)
