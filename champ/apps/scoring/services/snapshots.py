# champ/apps/scoring/services/snapshots.py
"""
Carga un snapshot consistente desde la BD y lo convierte a tipos del motor.
El motor nunca toca el ORM; todo se recalcula en cada lectura (sin cache de rankings).
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from champ.apps.events.models import Division, Event, Workout
from champ.apps.scoring.models import ScoreSubmission

from .leaderboard import build_division_leaderboards
from .ranking import rank_workout_for_division
from .types import EventLeaderboardTable, RawScore, ScoreType, WorkoutDescriptor, WorkoutRankEntry

logger = logging.getLogger(__name__)


def athlete_display_name(user) -> str:
    """Nombre + apellido; si no hay, email; si no, username."""
    if user is None:
        return "—"
    name = " ".join(p for p in (user.first_name, user.last_name) if p).strip()
    if name:
        return name
    if user.email:
        return user.email
    return user.get_username() or "—"


def workout_score_type(w: Workout) -> ScoreType:
    st = ScoreType.coerce(w.score_type)
    if st is None:
        logger.warning("Workout %s con score_type desconocido %r: se rankea como TIME", w.pk, w.score_type)
        return ScoreType.TIME
    return st


def workout_descriptor(w: Workout) -> WorkoutDescriptor:
    return WorkoutDescriptor(id=str(w.pk), name=w.name, score_type=workout_score_type(w), unit=w.unit)


def raw_score(s: ScoreSubmission) -> RawScore:
    return RawScore(
        athlete_id=str(s.athlete_id),
        athlete_name=s.athlete_name or athlete_display_name(s.athlete),
        workout_id=str(s.workout_id),
        division_id=s.division.slug,
        score_type=ScoreType.coerce(s.score_type) or workout_score_type(s.workout),
        score_value_text=s.score_value,
        submitted_at=s.submitted_at,
        score_id=str(s.pk),
    )


def event_workouts(event: Event, published_only: bool = True) -> List[Workout]:
    qs = Workout.objects.filter(event=event)
    if published_only:
        qs = qs.filter(is_published=True)
    return list(qs.order_by("order", "id"))


def event_divisions(event: Event, division_slug: Optional[str] = None) -> List[Division]:
    qs = Division.objects.filter(event=event)
    if division_slug:
        qs = qs.filter(slug=division_slug)
    return list(qs.order_by("name", "id"))


def load_scores(workouts: List[Workout]) -> List[RawScore]:
    """Scores de los workouts dados, en orden de envío (orden de entrada determinista)."""
    if not workouts:
        return []
    qs = (
        ScoreSubmission.objects.filter(workout__in=workouts)
        .select_related("athlete", "division", "workout")
        .order_by("submitted_at", "id")
    )
    return [raw_score(s) for s in qs]


def event_leaderboards(
    event: Event, division_slug: Optional[str] = None
) -> List[Tuple[Division, EventLeaderboardTable]]:
    """Una tabla por división del evento (solo WODs publicados)."""
    workouts = event_workouts(event)
    divisions = event_divisions(event, division_slug)
    columns = [workout_descriptor(w) for w in workouts]
    tables = build_division_leaderboards(columns, load_scores(workouts), [d.slug for d in divisions])
    return list(zip(divisions, tables))


def workout_leaderboards(
    workout: Workout, division_slug: Optional[str] = None
) -> List[Tuple[Division, List[WorkoutRankEntry]]]:
    """Ranking de un solo WOD, por división."""
    descriptor = workout_descriptor(workout)
    scores = load_scores([workout])
    return [
        (d, rank_workout_for_division(scores, descriptor.id, d.slug, descriptor.score_type, descriptor.unit))
        for d in event_divisions(workout.event, division_slug)
    ]

