# champ/apps/benchmarks/services/results.py
"""
Resultado de benchmark como unión etiquetada por tipo de score:
un resultado "weight" solo puede llevar un peso, "time" solo un tiempo, etc.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from champ.apps.scoring.services.types import Timestamp


class BenchmarkScoreType(str, Enum):
    TIME = "time"
    REPS = "reps"
    WEIGHT = "weight"
    TIME_OR_REPS = "time_or_reps"
    CUSTOM = "custom"

    @classmethod
    def coerce(cls, value) -> Optional["BenchmarkScoreType"]:
        """None si el tipo no es conocido (se trata como 'custom' degenerado)."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class TimeMeasurement:
    seconds: float


@dataclass(frozen=True)
class RepsMeasurement:
    reps: float


@dataclass(frozen=True)
class WeightMeasurement:
    weight: float
    unit: Optional[str] = None


Measurement = Union[TimeMeasurement, RepsMeasurement, WeightMeasurement]

_ALLOWED = {
    BenchmarkScoreType.TIME: (TimeMeasurement,),
    BenchmarkScoreType.REPS: (RepsMeasurement,),
    BenchmarkScoreType.WEIGHT: (WeightMeasurement,),
    BenchmarkScoreType.TIME_OR_REPS: (TimeMeasurement, RepsMeasurement),
    BenchmarkScoreType.CUSTOM: (TimeMeasurement, RepsMeasurement, WeightMeasurement),
}


@dataclass(frozen=True)
class BenchmarkResult:
    result_id: str
    athlete_id: str
    benchmark_id: str
    score_type: str
    measurement: Optional[Measurement] = None
    performed_at: Timestamp = None

    def __post_init__(self):
        st = BenchmarkScoreType.coerce(self.score_type)
        if st is None or self.measurement is None:
            return
        if not isinstance(self.measurement, _ALLOWED[st]):
            raise ValueError(
                f"Un resultado '{st.value}' no puede llevar {type(self.measurement).__name__}"
            )

    @property
    def time_seconds(self) -> Optional[float]:
        m = self.measurement
        return m.seconds if isinstance(m, TimeMeasurement) else None

    @property
    def reps(self) -> Optional[float]:
        m = self.measurement
        return m.reps if isinstance(m, RepsMeasurement) else None

    @property
    def weight(self) -> Optional[float]:
        m = self.measurement
        return m.weight if isinstance(m, WeightMeasurement) else None

    @property
    def unit(self) -> Optional[str]:
        m = self.measurement
        return m.unit if isinstance(m, WeightMeasurement) else None

    @classmethod
    def from_fields(
        cls,
        result_id,
        athlete_id,
        benchmark_id,
        score_type,
        time_seconds=None,
        reps=None,
        weight=None,
        unit=None,
        performed_at=None,
    ) -> "BenchmarkResult":
        """
        Mapea la fila persistida (todos los campos opcionales) a la unión:
        se toma solo el campo que corresponde al tipo; el resto se ignora.
        """
        st = BenchmarkScoreType.coerce(score_type)
        measurement: Optional[Measurement] = None
        if st is BenchmarkScoreType.TIME and time_seconds is not None:
            measurement = TimeMeasurement(float(time_seconds))
        elif st is BenchmarkScoreType.REPS and reps is not None:
            measurement = RepsMeasurement(float(reps))
        elif st is BenchmarkScoreType.WEIGHT and weight is not None:
            measurement = WeightMeasurement(float(weight), unit or None)
        elif st is BenchmarkScoreType.TIME_OR_REPS:
            if time_seconds is not None:
                measurement = TimeMeasurement(float(time_seconds))
            elif reps is not None:
                measurement = RepsMeasurement(float(reps))
        elif st is BenchmarkScoreType.CUSTOM or st is None:
            if time_seconds is not None:
                measurement = TimeMeasurement(float(time_seconds))
            elif reps is not None:
                measurement = RepsMeasurement(float(reps))
            elif weight is not None:
                measurement = WeightMeasurement(float(weight), unit or None)
        return cls(
            result_id=str(result_id),
            athlete_id=str(athlete_id),
            benchmark_id=str(benchmark_id),
            score_type=st.value if st else str(score_type),
            measurement=measurement,
            performed_at=performed_at,
        )
