# champ/apps/scoring/services/ranking.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .comparator import score_key
from .parser import display_value, parse_score
from .types import ParsedScore, RawScore, ScoreType, WorkoutRankEntry

logger = logging.getLogger(__name__)


def _ranking_key(score_type: ScoreType, item: ParsedScore):
    return score_key(score_type, item.numeric, item.submitted_at_millis)


def rank_workout(
    scores: Iterable[RawScore],
    score_type: ScoreType,
    unit: Optional[str] = None,
) -> List[WorkoutRankEntry]:
    """
    Ranking de un WOD dentro de una división: [(score, rank, points)].
      • Rank 1-based, denso (1..N), sin compresión de empates.
      • Puntos = rank (1º = 1, 2º = 2, …).
      • Desempate por fecha de envío; con timestamp idéntico se conserva el orden de entrada
        (sorted es estable).
    Los scores no parseables se rankean al final; nunca se descartan.
    """
    parsed = [parse_score(s, score_type) for s in scores]
    ordered = sorted(parsed, key=lambda item: _ranking_key(score_type, item))

    ranking = [
        WorkoutRankEntry(
            score=item.score,
            rank=idx + 1,
            points=idx + 1,
            display=display_value(score_type, item.score.score_value_text, unit),
        )
        for idx, item in enumerate(ordered)
    ]
    logger.debug("Ranking %s: %d scores", score_type.value, len(ranking))
    return ranking


def rank_workout_for_division(
    scores: Iterable[RawScore],
    workout_id: str,
    division_id: str,
    score_type: ScoreType,
    unit: Optional[str] = None,
) -> List[WorkoutRankEntry]:
    """Filtra por (workout, división) y rankea. Útil para el leaderboard de un solo WOD."""
    selected = [s for s in scores if s.workout_id == workout_id and s.division_id == division_id]
    return rank_workout(selected, score_type, unit)
