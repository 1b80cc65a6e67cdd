# champ/apps/scoring/services/leaderboard.py
"""
Leaderboard de evento (estilo Competition Corner):
  - Una tabla por división: filas = atletas, columnas = WODs, total = puntos de posición.
  - Puntos de posición: 1º = 1, 2º = 2, … ; gana el total MÁS BAJO (golf).
  - Desempate de totales: rank en cada WOD, en el orden del evento; sin entrada = 999.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from .ranking import rank_workout
from .types import (
    MISSING_RANK,
    EventLeaderboardTable,
    LeaderboardRow,
    RawScore,
    WodCell,
    WorkoutDescriptor,
    WorkoutRankEntry,
)

logger = logging.getLogger(__name__)


def _athletes_in_order(scores: Iterable[RawScore]) -> Dict[str, str]:
    """athlete_id -> nombre, en orden de primera aparición (determinista)."""
    names: Dict[str, str] = {}
    for s in scores:
        if s.athlete_id not in names or not names[s.athlete_id]:
            names[s.athlete_id] = s.athlete_name or ""
    return {aid: (name or aid) for aid, name in names.items()}


def _best_entry_by_athlete(ranking: List[WorkoutRankEntry]) -> Dict[str, WorkoutRankEntry]:
    # El ranking ya viene ordenado: el primer envío de cada atleta es el mejor.
    by_athlete: Dict[str, WorkoutRankEntry] = {}
    for entry in ranking:
        by_athlete.setdefault(entry.score.athlete_id, entry)
    return by_athlete


def _tiebreak_key(cells: Dict[str, WodCell], workouts: Sequence[WorkoutDescriptor]) -> Tuple[int, ...]:
    return tuple(
        cells[w.id].rank_in_workout if cells[w.id].has_entry else MISSING_RANK
        for w in workouts
    )


def build_event_leaderboard(
    workouts: Sequence[WorkoutDescriptor],
    scores: Iterable[RawScore],
    division_id: str,
) -> EventLeaderboardTable:
    """
    Construye la tabla del evento para UNA división.
      1) Ranking independiente por WOD.
      2) Atletas = quienes tienen al menos un score en la división (para los WODs del evento).
      3) Celdas por WOD: rank/puntos/display, o vacía (0 puntos) si no hay envío.
      4) Orden: total asc, luego rank WOD por WOD en el orden del evento (999 si falta).
      5) overall_rank denso 1..M.
    """
    workout_ids = {w.id for w in workouts}
    by_division = [s for s in scores if s.division_id == division_id and s.workout_id in workout_ids]
    athletes = _athletes_in_order(by_division)

    ranking_by_wod: Dict[str, List[WorkoutRankEntry]] = {}
    best_by_wod: Dict[str, Dict[str, WorkoutRankEntry]] = {}
    for w in workouts:
        ranked = rank_workout([s for s in by_division if s.workout_id == w.id], w.score_type, w.unit)
        ranking_by_wod[w.id] = ranked
        best_by_wod[w.id] = _best_entry_by_athlete(ranked)

    partial: List[Tuple[str, str, Dict[str, WodCell], int]] = []
    for athlete_id, athlete_name in athletes.items():
        cells: Dict[str, WodCell] = {}
        total = 0
        for w in workouts:
            entry = best_by_wod[w.id].get(athlete_id)
            if entry is None:
                cells[w.id] = WodCell.empty()
                continue
            cells[w.id] = WodCell(
                has_entry=True,
                raw_display=entry.score.score_value_text.strip(),
                rank_in_workout=entry.rank,
                points=entry.points,
            )
            total += entry.points
        partial.append((athlete_id, athlete_name, cells, total))

    # sorted es estable: empates totales conservan el orden de primera aparición
    partial.sort(key=lambda r: (r[3], _tiebreak_key(r[2], workouts)))

    rows = [
        LeaderboardRow(
            athlete_id=athlete_id,
            athlete_name=athlete_name,
            division_id=division_id,
            cells=cells,
            total_points=total,
            overall_rank=idx + 1,
        )
        for idx, (athlete_id, athlete_name, cells, total) in enumerate(partial)
    ]
    logger.debug(
        "Leaderboard división %s: %d atletas, %d WODs", division_id, len(rows), len(workouts)
    )
    return EventLeaderboardTable(
        columns=list(workouts),
        rows=rows,
        division_id=division_id,
        workout_rankings=ranking_by_wod,
    )


def build_division_leaderboards(
    workouts: Sequence[WorkoutDescriptor],
    scores: Iterable[RawScore],
    division_ids: Sequence[str],
) -> List[EventLeaderboardTable]:
    """Una tabla por división, en el orden recibido."""
    snapshot = list(scores)
    return [build_event_leaderboard(workouts, snapshot, d) for d in division_ids]
