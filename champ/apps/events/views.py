from __future__ import annotations

from typing import Any, Dict

from django.http import JsonResponse, HttpRequest
from django.shortcuts import get_object_or_404

from .models import Event, Workout, Division


def _workout_dict(w: Workout) -> Dict[str, Any]:
    return {
        "id": w.pk,
        "order": w.order,
        "name": w.name,
        "score_type": w.score_type,
        "unit": w.unit,
    }


def event_list(request: HttpRequest) -> JsonResponse:
    # Solo eventos publicados
    events = Event.objects.filter(status="PUBLISHED").select_related("gym").order_by("-start_date", "name")
    return JsonResponse(
        {
            "events": [
                {
                    "slug": e.slug,
                    "name": e.name,
                    "gym": e.gym.name,
                    "start_date": e.start_date.isoformat() if e.start_date else None,
                    "end_date": e.end_date.isoformat() if e.end_date else None,
                }
                for e in events
            ]
        }
    )


def event_detail(request: HttpRequest, slug: str) -> JsonResponse:
    """
    Detalle del evento:
      - Divisiones del evento
      - WODs publicados, en orden (son las columnas del leaderboard)
    """
    event = get_object_or_404(Event, slug=slug)
    workouts = Workout.objects.filter(event=event, is_published=True).order_by("order")
    divisions = Division.objects.filter(event=event).order_by("name")

    ctx: Dict[str, Any] = {
        "slug": event.slug,
        "name": event.name,
        "description": event.description,
        "status": event.status,
        "divisions": [{"slug": d.slug, "name": d.name} for d in divisions],
        "workouts": [_workout_dict(w) for w in workouts],
    }
    return JsonResponse(ctx)


# -------- Healthcheck simple --------
def health(request: HttpRequest) -> JsonResponse:
    return JsonResponse({"ok": True})
