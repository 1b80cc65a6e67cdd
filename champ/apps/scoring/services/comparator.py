# champ/apps/scoring/services/comparator.py
from __future__ import annotations

from typing import Optional, Tuple

from .types import ScoreType


def score_key(score_type: ScoreType, value: float, submitted_at_ms: int) -> Tuple[float, int]:
    """
    Clave de ordenamiento (menor = mejor) según el tipo de score:
      - TIME: menor tiempo mejor
      - REPS / WEIGHT: mayor valor mejor
    Desempate: envío más temprano gana.
    """
    primary = value if score_type.lower_is_better else -value
    return (primary, submitted_at_ms)


def is_better(
    score_type: ScoreType,
    value_a: float,
    submitted_a: int,
    value_b: float,
    submitted_b: int,
) -> bool:
    """True si A debe rankear antes que B. Con valor y timestamp iguales ninguno es mejor."""
    return score_key(score_type, value_a, submitted_a) < score_key(score_type, value_b, submitted_b)


# ---------- Benchmarks "time_or_reps" ----------

def time_or_reps_key(time_seconds: Optional[float], reps: Optional[float]) -> Tuple[int, float]:
    """
    Terminar dentro del tiempo supera a cualquier cantidad de reps parciales:
      - con tiempo: (0, tiempo)  -> menor mejor
      - solo reps:  (1, -reps)   -> mayor mejor
    """
    if time_seconds is not None:
        return (0, float(time_seconds))
    r = float(reps) if reps is not None else float("-inf")
    return (1, -r)


def is_better_time_or_reps(
    time_a: Optional[float],
    reps_a: Optional[float],
    time_b: Optional[float],
    reps_b: Optional[float],
) -> bool:
    return time_or_reps_key(time_a, reps_a) < time_or_reps_key(time_b, reps_b)
