"""
Dr.Gaze — Таблиця бази знань

Зони локалізації (структури, узгоджені з клінічною знахідкою)
та діагнози (структури + симптоми, що їх характеризують).

Позначення структур:
- "R MR", "L LR", ... — окорухові м'язи правого/лівого ока
  (MR/LR — медіальний/латеральний прямий, SR/IR — верхній/нижній прямий,
  SO/IO — верхній/нижній косий)
- "R MLF", "L MLF" — медіальний поздовжній пучок
- "R sympathetic", "L parasympathetic", ... — іннервація зіниці
"""

from enum import Enum
from typing import Dict, Tuple


# =============================================================================
# STRUCTURES
# =============================================================================

MUSCLES: Tuple[str, ...] = (
    "R MR", "L MR", "R SR", "L SR", "R IR", "L IR",
    "R LR", "L LR", "R SO", "L SO", "R IO", "L IO",
)

PATHWAYS: Tuple[str, ...] = ("R MLF", "L MLF")

PUPIL_INNERVATION: Tuple[str, ...] = (
    "R sympathetic", "L sympathetic",
    "R parasympathetic", "L parasympathetic",
)

STRUCTURES: Tuple[str, ...] = MUSCLES + PATHWAYS + PUPIL_INNERVATION


# =============================================================================
# SYMPTOMS
# =============================================================================

SYMPTOMS: Tuple[str, ...] = (
    "nystagmus",
    "impaired_adduction",
    "right_impaired_adduction",
    "left_impaired_adduction",
    "convergence_impaired",
    "ptosis",
    "eye_pain",
    "headache",
    "facial_numbness",
    "ipsilateral_ataxia",
    "contralateral_ataxia",
    "contralateral_hemiparesis",
    "ipsilateral_hemiface_weakness",
)


# =============================================================================
# ZONES
# =============================================================================

class ZoneName(str, Enum):
    """Зона локалізації; значення — ідентифікатор чекбокса"""
    HORIZONTAL = "horizontal"
    DIAGONAL = "diagonal"
    VERTICAL = "vertical"
    LEFT_GAZE = "leftLG"
    RIGHT_GAZE = "rightLG"
    LEFT_HYPER = "lefthyper"
    RIGHT_HYPER = "righthyper"
    NO_HYPER = "nohyper"
    LEFT_TILT = "lefttilt"
    RIGHT_TILT = "righttilt"
    RIGHT_LARGER = "rightlarger"
    LEFT_LARGER = "leftlarger"
    DARK = "dark"
    LIGHT = "light"
    INO = "ino"             # ізольоване порушення аддукції з ністагмом


ZONES: Dict[ZoneName, Tuple[str, ...]] = {
    # Обмеження руху
    ZoneName.HORIZONTAL: ("R MR", "R LR", "L MR", "L LR", "L MLF", "R MLF"),
    ZoneName.DIAGONAL: ("R IO", "L IO", "R SR", "L SR", "R IR", "L IR"),
    ZoneName.VERTICAL: ("L IO", "R IO", "L SO", "R SO", "L IR", "R IR", "L SR", "R SR"),

    # Погляд вліво / вправо
    ZoneName.LEFT_GAZE: ("L LR", "R MR", "R IO", "R SO", "L SR", "L IR", "R MLF"),
    ZoneName.RIGHT_GAZE: ("R LR", "L MR", "L IO", "L SO", "R SR", "R IR", "L MLF"),

    # Гіпертропія
    ZoneName.LEFT_HYPER: ("L SO", "L IR", "R SR", "R IO", "L MLF"),
    ZoneName.RIGHT_HYPER: ("R SO", "R IR", "L SR", "L IO", "R MLF"),
    ZoneName.NO_HYPER: ("L LR", "R LR", "L MR", "R MR", "L MLF", "R MLF"),

    # Нахил голови
    ZoneName.LEFT_TILT: ("L SR", "L SO", "R IR", "R IO"),
    ZoneName.RIGHT_TILT: ("R SR", "R SO", "L IR", "L IO"),

    # Анізокорія
    ZoneName.RIGHT_LARGER: ("R parasympathetic", "L sympathetic"),
    ZoneName.LEFT_LARGER: ("L parasympathetic", "R sympathetic"),
    ZoneName.DARK: ("L sympathetic", "R sympathetic"),
    ZoneName.LIGHT: ("R parasympathetic", "L parasympathetic"),

    # Міжʼядерна офтальмоплегія
    ZoneName.INO: ("R MLF", "L MLF"),
}


# =============================================================================
# DIAGNOSES
# =============================================================================

class DiagnosisName(str, Enum):
    """Діагноз; значення — назва для відображення"""
    R_INO = "R INO"
    L_INO = "L INO"
    R_CN_III_PALSY = "R CN III Palsy"
    L_CN_III_PALSY = "L CN III Palsy"
    R_CN_IV_PALSY = "R CN IV Palsy"
    L_CN_IV_PALSY = "L CN IV Palsy"
    R_CN_VI_PALSY = "R CN VI Palsy"
    L_CN_VI_PALSY = "L CN VI Palsy"
    INTRACRANIAL_ANEURYSM = "Intracranial Aneurysm"
    CAVERNOUS_SINUS = "Cavernous Sinus"
    HORNER = "Horner"
    MIDBRAIN_SCP = "Midbrain at the Level of the Superior Cerebellar Peduncle"
    DORSAL_PONS = "Dorsal Pons"
    BASE_OF_MIDBRAIN = "Base of the Midbrain"
    INCREASED_ICP = "Increased ICP"
    TEGMENTUM_OF_MIDBRAIN = "Tegmentum of the Midbrain"


_R_OCULOMOTOR = ("R MR", "R IO", "R SR", "R IR")
_L_OCULOMOTOR = ("L MR", "L IO", "L SR", "L IR")

DIAGNOSES: Dict[DiagnosisName, Tuple[str, ...]] = {
    DiagnosisName.R_INO: (
        "R MLF", "nystagmus", "impaired_adduction", "right_impaired_adduction",
    ),
    DiagnosisName.L_INO: (
        "L MLF", "nystagmus", "impaired_adduction", "left_impaired_adduction",
    ),
    DiagnosisName.R_CN_III_PALSY: _R_OCULOMOTOR + (
        "R parasympathetic", "ptosis", "eye_pain", "convergence_impaired",
        "impaired_adduction", "right_impaired_adduction",
    ),
    DiagnosisName.L_CN_III_PALSY: _L_OCULOMOTOR + (
        "L parasympathetic", "ptosis", "eye_pain", "convergence_impaired",
        "impaired_adduction", "left_impaired_adduction",
    ),
    DiagnosisName.R_CN_IV_PALSY: ("R SO", "eye_pain"),
    DiagnosisName.L_CN_IV_PALSY: ("L SO", "eye_pain"),
    DiagnosisName.R_CN_VI_PALSY: ("R LR", "eye_pain"),
    DiagnosisName.L_CN_VI_PALSY: ("L LR", "eye_pain"),
    DiagnosisName.INTRACRANIAL_ANEURYSM: _R_OCULOMOTOR + _L_OCULOMOTOR + (
        "R parasympathetic", "ptosis", "convergence_impaired",
        "impaired_adduction", "headache",
    ),
    DiagnosisName.CAVERNOUS_SINUS: _R_OCULOMOTOR + _L_OCULOMOTOR + (
        "R SO", "L SO", "R LR", "L LR", "R sympathetic", "L sympathetic",
        "facial_numbness", "ptosis", "eye_pain",
    ),
    DiagnosisName.HORNER: ("R sympathetic", "L sympathetic", "ptosis"),
    DiagnosisName.MIDBRAIN_SCP: _R_OCULOMOTOR + _L_OCULOMOTOR + (
        "R MLF", "L MLF", "R parasympathetic", "L parasympathetic",
        "ptosis", "ipsilateral_ataxia", "nystagmus", "impaired_adduction",
    ),
    DiagnosisName.DORSAL_PONS: (
        "L LR", "R LR", "L MLF", "R MLF",
        "ipsilateral_hemiface_weakness", "impaired_adduction",
    ),
    DiagnosisName.BASE_OF_MIDBRAIN: _R_OCULOMOTOR + _L_OCULOMOTOR + (
        "contralateral_hemiparesis",
    ),
    DiagnosisName.INCREASED_ICP: (
        "R LR", "L LR", "R parasympathetic", "L parasympathetic", "headache",
    ),
    DiagnosisName.TEGMENTUM_OF_MIDBRAIN: _R_OCULOMOTOR + _L_OCULOMOTOR + (
        "R parasympathetic", "ipsilateral_ataxia", "contralateral_ataxia",
        "contralateral_hemiparesis", "nystagmus",
    ),
}
