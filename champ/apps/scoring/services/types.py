"""
Tipos del motor de ranking.

Todo es inmutable: el motor solo lee snapshots ya cargados en memoria y
produce proyecciones nuevas en cada llamada (nunca se persisten).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union

# Un timestamp puede venir como datetime (ORM) o como epoch en milisegundos.
Timestamp = Union[datetime, int, float, None]

# Rank usado en el desempate para WODs sin entrada.
MISSING_RANK = 999

EMPTY_DISPLAY = "—"


class ScoreType(str, Enum):
    """Tipo de score de un workout. Define parseo y polaridad de comparación."""

    TIME = "TIME"
    REPS = "REPS"
    WEIGHT = "WEIGHT"

    @classmethod
    def coerce(cls, value) -> Optional["ScoreType"]:
        """Tolera mayúsculas/minúsculas ('time' -> TIME). None si no es un tipo conocido."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None

    @property
    def lower_is_better(self) -> bool:
        return self is ScoreType.TIME


@dataclass(frozen=True)
class WorkoutDescriptor:
    id: str
    name: str
    score_type: ScoreType
    unit: str = ""


@dataclass(frozen=True)
class RawScore:
    """Envío de un atleta para un workout (solo lectura para el motor)."""

    athlete_id: str
    workout_id: str
    division_id: str
    score_type: ScoreType
    score_value_text: str
    submitted_at: Timestamp = None
    athlete_name: str = ""
    score_id: Optional[str] = None


@dataclass(frozen=True)
class ParsedScore:
    score: RawScore
    numeric: float
    submitted_at_millis: int


@dataclass(frozen=True)
class WorkoutRankEntry:
    score: RawScore
    rank: int
    points: int
    display: str = ""


@dataclass(frozen=True)
class WodCell:
    has_entry: bool
    raw_display: str
    rank_in_workout: int
    points: int

    @classmethod
    def empty(cls) -> "WodCell":
        return cls(has_entry=False, raw_display=EMPTY_DISPLAY, rank_in_workout=0, points=0)


@dataclass(frozen=True)
class LeaderboardRow:
    athlete_id: str
    athlete_name: str
    division_id: str
    cells: Dict[str, WodCell]
    total_points: int
    overall_rank: int


@dataclass(frozen=True)
class EventLeaderboardTable:
    columns: List[WorkoutDescriptor]
    rows: List[LeaderboardRow]
    division_id: str
    workout_rankings: Dict[str, List[WorkoutRankEntry]] = field(default_factory=dict)
