# champ/apps/benchmarks/services/snapshots.py
from __future__ import annotations

from typing import List, Tuple

from champ.apps.benchmarks import models

from .records import WeightBenchmark, best_results_by_benchmark, weight_benchmarks
from .results import BenchmarkResult


def benchmark_result(r: models.BenchmarkResult) -> BenchmarkResult:
    return BenchmarkResult.from_fields(
        result_id=r.pk,
        athlete_id=r.athlete_id,
        benchmark_id=r.benchmark_id,
        score_type=r.score_type or r.benchmark.score_type,
        time_seconds=r.time_seconds,
        reps=r.reps,
        weight=r.weight,
        unit=r.unit or None,
        performed_at=r.performed_at,
    )


def _athlete_results(athlete, include_private: bool):
    qs = models.BenchmarkResult.objects.filter(athlete=athlete).select_related("benchmark")
    if not include_private:
        qs = qs.filter(is_public=True)
    return list(qs.order_by("performed_at", "id"))


def athlete_records(athlete, include_private: bool = False) -> List[Tuple[models.Benchmark, BenchmarkResult]]:
    """PR del atleta por benchmark, ordenados por nombre del benchmark."""
    rows = _athlete_results(athlete, include_private)
    benchmarks = {str(r.benchmark_id): r.benchmark for r in rows}
    best = best_results_by_benchmark(
        [benchmark_result(r) for r in rows],
        {bid: b.score_type for bid, b in benchmarks.items()},
    )
    out = [(benchmarks[bid], pr) for bid, pr in best.items()]
    out.sort(key=lambda item: item[0].name.lower())
    return out


def athlete_weight_benchmarks(athlete, include_private: bool = False) -> List[WeightBenchmark]:
    """1RM del atleta para la calculadora %."""
    rows = _athlete_results(athlete, include_private)
    benchmarks = {str(r.benchmark_id): (r.benchmark.name, r.benchmark.score_type) for r in rows}
    return weight_benchmarks([benchmark_result(r) for r in rows], benchmarks)
