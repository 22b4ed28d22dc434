"""
Constants and shared tables for the cycle calendar services.
"""
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

from src.models.cycle import JointParameters, JointType
from src.models.phase import CyclePhase, PhaseInfo

PHASE_INFO: Mapping[CyclePhase, PhaseInfo] = MappingProxyType({
    CyclePhase.MENSTRUAL: PhaseInfo(label="Menstrual", color="bg-pink-200", factor=1.0),
    CyclePhase.EARLY_FOLLICULAR: PhaseInfo(label="Folicular Temprana", color="bg-blue-200", factor=1.2),
    CyclePhase.LATE_FOLLICULAR: PhaseInfo(label="Folicular Tardía", color="bg-blue-400", factor=1.8),
    CyclePhase.OVULATION: PhaseInfo(label="Ovulación", color="bg-purple-300", factor=1.3),
    CyclePhase.EARLY_LUTEAL: PhaseInfo(label="Lútea Temprana", color="bg-orange-200", factor=1.1),
    CyclePhase.LATE_LUTEAL: PhaseInfo(label="Lútea Tardía", color="bg-red-200", factor=1.7),
})

HIGH_RISK_PHASES: FrozenSet[CyclePhase] = frozenset({
    CyclePhase.LATE_FOLLICULAR,
    CyclePhase.LATE_LUTEAL,
})

# Fallbacks for a phase missing from PHASE_INFO
DEFAULT_RISK_FACTOR = 1.0
UNCLASSIFIED_COLOR = "bg-gray-100"

# Upper cycle day (inclusive) for each phase after menstruation.
# Fixed cutoffs for a 28-day reference cycle, not rescaled by cycle length.
PHASE_DAY_THRESHOLDS: Tuple[Tuple[int, CyclePhase], ...] = (
    (7, CyclePhase.EARLY_FOLLICULAR),
    (13, CyclePhase.LATE_FOLLICULAR),
    (16, CyclePhase.OVULATION),
    (22, CyclePhase.EARLY_LUTEAL),
)

JOINT_PARAMETERS: Mapping[JointType, JointParameters] = MappingProxyType({
    JointType.ANKLE: JointParameters(s_base=5.8, s_max=9.0),
    JointType.KNEE: JointParameters(s_base=0.0, s_max=3.0),
})

MIN_RISK = 0.0
MAX_RISK = 10.0

# 6 rows x 7 days, Sunday first
DAYS_PER_WEEK = 7
CALENDAR_ROWS = 6
CALENDAR_GRID_SIZE = DAYS_PER_WEEK * CALENDAR_ROWS

# Accepted input ranges (inclusive)
CYCLE_DURATION_RANGE = (21, 35)
PERIOD_DURATION_RANGE = (3, 8)
STRESS_VALUE_RANGE = (0.0, 10.0)

DEFAULT_CYCLE_DURATION = 28
DEFAULT_PERIOD_DURATION = 5
DEFAULT_STRESS_VALUE = 5.0

MONTH_NAMES: Tuple[str, ...] = (
    "Enero",
    "Febrero",
    "Marzo",
    "Abril",
    "Mayo",
    "Junio",
    "Julio",
    "Agosto",
    "Septiembre",
    "Octubre",
    "Noviembre",
    "Diciembre",
)

DAY_NAMES: Tuple[str, ...] = ("Dom", "Lun", "Mar", "Mié", "Jue", "Vie", "Sáb")

JOINT_LABELS: Mapping[JointType, str] = MappingProxyType({
    JointType.KNEE: "Rodilla",
    JointType.ANKLE: "Tobillo",
})

HIGH_RISK_RECOMMENDATION = (
    "Durante los días de alto riesgo (Folicular Tardía y Lútea Tardía), considera "
    "reducir la intensidad del entrenamiento y enfócate en ejercicios de "
    "fortalecimiento y flexibilidad."
)

HIGH_RISK_DAY_WARNING = "Considera modificar la intensidad del entrenamiento"
