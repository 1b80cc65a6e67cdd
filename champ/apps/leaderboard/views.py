from __future__ import annotations

from typing import Any, Dict, List

from django.http import HttpRequest, JsonResponse
from django.shortcuts import get_object_or_404

from champ.apps.events.models import Division, Event, Workout
from champ.apps.scoring.services.snapshots import event_leaderboards, workout_leaderboards
from champ.apps.scoring.services.types import EventLeaderboardTable, WorkoutRankEntry


# ---------- Utilidades ----------

def _division_filter(request: HttpRequest, event: Event):
    """?division=<slug> opcional; 404 si no existe en el evento."""
    slug = (request.GET.get("division") or "").strip()
    if slug:
        get_object_or_404(Division, event=event, slug=slug)
    return slug or None


def _division_dict(d: Division) -> Dict[str, Any]:
    return {"id": d.pk, "slug": d.slug, "name": d.name}


def _ranking_rows(ranking: List[WorkoutRankEntry]) -> List[Dict[str, Any]]:
    return [
        {
            "rank": e.rank,
            "points": e.points,
            "athlete_id": e.score.athlete_id,
            "athlete_name": e.score.athlete_name or e.score.athlete_id,
            "score_value": e.score.score_value_text,
            "display": e.display,
        }
        for e in ranking
    ]


def _table_dict(d: Division, table: EventLeaderboardTable) -> Dict[str, Any]:
    columns = [
        {"workout_id": c.id, "name": c.name, "score_type": c.score_type.value, "unit": c.unit}
        for c in table.columns
    ]
    rows = []
    for r in table.rows:
        cells = []
        for c in table.columns:
            cell = r.cells[c.id]
            cells.append(
                {
                    "workout_id": c.id,
                    "has_entry": cell.has_entry,
                    "display": cell.raw_display,
                    "rank": cell.rank_in_workout,
                    "points": cell.points,
                }
            )
        rows.append(
            {
                "overall_rank": r.overall_rank,
                "athlete_id": r.athlete_id,
                "athlete_name": r.athlete_name,
                "total_points": r.total_points,
                "cells": cells,
            }
        )
    return {"division": _division_dict(d), "columns": columns, "rows": rows}


# ---------- Vistas ----------

def leaderboard_index(request: HttpRequest) -> JsonResponse:
    """Eventos publicados, para navegar a sus leaderboards."""
    events = Event.objects.filter(status="PUBLISHED").order_by("-start_date", "name")
    return JsonResponse(
        {"events": [{"slug": e.slug, "name": e.name, "gym": e.gym.name} for e in events.select_related("gym")]}
    )


def event_leaderboard(request: HttpRequest, slug: str) -> JsonResponse:
    """
    Leaderboard por evento (una tabla por división):
      • Puntos de posición por WOD (1º = 1, 2º = 2, …); gana el total más bajo.
      • Empates: rank en W1, luego W2, … (sin entrada cuenta como 999).
    Se recalcula en cada request a partir de los scores crudos.
    """
    event = get_object_or_404(Event, slug=slug)
    division_slug = _division_filter(request, event)
    tables = event_leaderboards(event, division_slug)
    return JsonResponse(
        {
            "event": {"slug": event.slug, "name": event.name},
            "division_tables": [_table_dict(d, t) for d, t in tables],
        }
    )


def workout_leaderboard(request: HttpRequest, event_slug: str, order: int) -> JsonResponse:
    """Ranking de un solo WOD por división (misma regla de orden que el leaderboard del evento)."""
    event = get_object_or_404(Event, slug=event_slug)
    workout = get_object_or_404(Workout, event=event, order=order, is_published=True)
    division_slug = _division_filter(request, event)
    return JsonResponse(
        {
            "event": {"slug": event.slug, "name": event.name},
            "workout": {
                "id": str(workout.pk),
                "order": workout.order,
                "name": workout.name,
                "score_type": workout.score_type,
                "unit": workout.unit,
            },
            "division_tables": [
                {"division": _division_dict(d), "rows": _ranking_rows(ranking)}
                for d, ranking in workout_leaderboards(workout, division_slug)
            ],
        }
    )
