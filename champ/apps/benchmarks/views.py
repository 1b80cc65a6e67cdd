from __future__ import annotations

from django.contrib.auth import get_user_model
from django.http import HttpRequest, JsonResponse
from django.shortcuts import get_object_or_404

from .services.records import format_result_value, percent_of
from .services.snapshots import athlete_records, athlete_weight_benchmarks


def _parse_float(raw, default=None):
    if raw in (None, ""):
        return default
    return float(str(raw).replace(",", "."))


def athlete_personal_records(request: HttpRequest, user_id: int) -> JsonResponse:
    """PRs públicos del atleta, uno por benchmark."""
    athlete = get_object_or_404(get_user_model(), pk=user_id)
    records = [
        {
            "benchmark_id": b.pk,
            "benchmark": b.name,
            "category": b.category,
            "score_type": b.score_type,
            "result_id": pr.result_id,
            "display": format_result_value(pr),
            "performed_at": pr.performed_at.isoformat() if pr.performed_at else None,
        }
        for b, pr in athlete_records(athlete)
    ]
    return JsonResponse({"athlete_id": athlete.pk, "records": records})


def athlete_percent(request: HttpRequest, user_id: int) -> JsonResponse:
    """
    Calculadora %: ?benchmark=<id>&percent=<0..200>&step=<0.5|1|2.5|5>
    Usa el 1RM (PR de un benchmark 'weight').
    """
    athlete = get_object_or_404(get_user_model(), pk=user_id)
    items = athlete_weight_benchmarks(athlete)

    benchmark_id = (request.GET.get("benchmark") or "").strip()
    if not benchmark_id:
        return JsonResponse(
            {"items": [{"benchmark_id": i.benchmark_id, "benchmark": i.benchmark_name,
                        "value": i.value, "unit": i.unit} for i in items]}
        )

    selected = next((i for i in items if i.benchmark_id == benchmark_id), None)
    if selected is None:
        return JsonResponse({"error": "No hay 1RM para ese benchmark."}, status=404)

    try:
        percent = _parse_float(request.GET.get("percent"))
        step = _parse_float(request.GET.get("step"), 0.5)
        if percent is None:
            raise ValueError("percent requerido")
        result = percent_of(selected.value, percent, step)
    except ValueError as exc:
        return JsonResponse({"error": str(exc)}, status=400)

    return JsonResponse(
        {
            "benchmark_id": selected.benchmark_id,
            "benchmark": selected.benchmark_name,
            "one_rep_max": selected.value,
            "unit": selected.unit,
            "percent": percent,
            "step": step,
            "result": result,
            "summary": (
                f"{percent:g}% de {selected.benchmark_name} "
                f"(1RM {selected.value:g} {selected.unit}) = {result:g} {selected.unit}"
            ),
        }
    )
