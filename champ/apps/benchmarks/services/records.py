# champ/apps/benchmarks/services/records.py
"""
Récords personales (PR) por benchmark y calculadora de porcentajes sobre un 1RM.
Funciones puras sobre listas ya cargadas; no tocan la BD.
"""
from __future__ import annotations

import math
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from champ.apps.scoring.services.comparator import time_or_reps_key
from champ.apps.scoring.services.parser import format_seconds
from champ.apps.scoring.services.types import EMPTY_DISPLAY

from .results import BenchmarkResult, BenchmarkScoreType

PERCENT_MIN = 0
PERCENT_MAX = 200


def _or(value: Optional[float], default: float) -> float:
    return default if value is None else value


def get_best_result(
    results: Sequence[BenchmarkResult], score_type
) -> Optional[BenchmarkResult]:
    """
    Mejor resultado (PR) de una lista para un tipo de score:
      - time: menor tiempo (sin tiempo = +inf)
      - reps / weight: mayor valor (sin valor = -inf)
      - time_or_reps: con tiempo supera a solo-reps; luego el extremo de cada clase
      - custom / desconocido: el primero (sin orden definido)
    Con valores iguales se conserva el que aparece antes.
    """
    if not results:
        return None
    if len(results) == 1:
        return results[0]

    st = BenchmarkScoreType.coerce(score_type)
    if st is BenchmarkScoreType.TIME:
        return min(results, key=lambda r: _or(r.time_seconds, math.inf))
    if st is BenchmarkScoreType.REPS:
        return max(results, key=lambda r: _or(r.reps, -math.inf))
    if st is BenchmarkScoreType.WEIGHT:
        return max(results, key=lambda r: _or(r.weight, -math.inf))
    if st is BenchmarkScoreType.TIME_OR_REPS:
        return min(results, key=lambda r: time_or_reps_key(r.time_seconds, r.reps))
    return results[0]


def best_results_by_benchmark(
    results: Iterable[BenchmarkResult], score_types: Mapping[str, str]
) -> Dict[str, BenchmarkResult]:
    """
    Agrupa por benchmark (orden de primera aparición) y elige el PR de cada uno.
    score_types: benchmark_id -> tipo de score del benchmark.
    """
    grouped: "OrderedDict[str, List[BenchmarkResult]]" = OrderedDict()
    for r in results:
        if not r.benchmark_id:
            continue
        grouped.setdefault(r.benchmark_id, []).append(r)

    best: Dict[str, BenchmarkResult] = {}
    for benchmark_id, group in grouped.items():
        pr = get_best_result(group, score_types.get(benchmark_id, BenchmarkScoreType.CUSTOM.value))
        if pr is not None:
            best[benchmark_id] = pr
    return best


# ---------- Calculadora % ----------

@dataclass(frozen=True)
class WeightBenchmark:
    benchmark_id: str
    benchmark_name: str
    value: float
    unit: str


def weight_benchmarks(
    results: Iterable[BenchmarkResult], benchmarks: Mapping[str, tuple]
) -> List[WeightBenchmark]:
    """
    PRs de benchmarks de tipo 'weight' con peso > 0, ordenados por nombre.
    benchmarks: benchmark_id -> (nombre, tipo de score).
    """
    score_types = {bid: st for bid, (_name, st) in benchmarks.items()}
    out: List[WeightBenchmark] = []
    for benchmark_id, pr in best_results_by_benchmark(results, score_types).items():
        if benchmark_id not in benchmarks:
            continue
        name, st = benchmarks[benchmark_id]
        if BenchmarkScoreType.coerce(st) is not BenchmarkScoreType.WEIGHT:
            continue
        if pr.weight is None or pr.weight <= 0:
            continue
        unit = "kg" if pr.unit == "kg" else "lb"
        out.append(WeightBenchmark(benchmark_id, name, float(pr.weight), unit))
    out.sort(key=lambda w: w.benchmark_name.lower())
    return out


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def round_to_step(value: float, step: float) -> float:
    """Redondea al múltiplo de step más cercano (ej. 0.5 = discos), luego a 1 decimal."""
    if step <= 0:
        return value
    r = _round_half_up(value / step) * step
    return _round_half_up(r * 10) / 10


def percent_of(value: float, percent: float, step: float = 0.5) -> float:
    """percent% de un 1RM, redondeado a step. percent fuera de 0..200 -> ValueError."""
    if percent is None or math.isnan(percent) or not PERCENT_MIN <= percent <= PERCENT_MAX:
        raise ValueError(f"percent debe estar entre {PERCENT_MIN} y {PERCENT_MAX}")
    return round_to_step(value * percent / 100, step)


# ---------- Display ----------

def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def format_result_value(result: BenchmarkResult) -> str:
    """m:ss para tiempos, reps tal cual, '<peso> <unidad>' para cargas; '—' si falta."""
    st = BenchmarkScoreType.coerce(result.score_type)
    if st is BenchmarkScoreType.TIME:
        return format_seconds(result.time_seconds)
    if st is BenchmarkScoreType.REPS:
        return _number(result.reps) if result.reps is not None else EMPTY_DISPLAY
    if st is BenchmarkScoreType.WEIGHT:
        if result.weight is None:
            return EMPTY_DISPLAY
        return f"{_number(result.weight)} {result.unit or 'kg'}"
    if st is BenchmarkScoreType.TIME_OR_REPS:
        if result.time_seconds is not None:
            return format_seconds(result.time_seconds)
        if result.reps is not None:
            return _number(result.reps)
    return EMPTY_DISPLAY
