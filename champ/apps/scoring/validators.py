# champ/apps/scoring/validators.py
"""
Validación estricta del texto de un score al momento de guardarlo.
  TIME: mm:ss o hh:mm:ss
  WEIGHT: número no negativo (coma o punto decimal)
  REPS: entero no negativo
El ranking NO usa esto: ahí los valores inválidos se degradan al peor valor posible.
"""
from __future__ import annotations

import re

from django.core.exceptions import ValidationError

from .services.parser import parse_time_to_seconds
from .services.types import ScoreType

_WEIGHT_RE = re.compile(r"^\d+(?:[.,]\d+)?$")
_REPS_RE = re.compile(r"^\d+$")


def validate_score_value(score_type, value: str) -> None:
    trimmed = (value or "").strip()
    if not trimmed:
        raise ValidationError("Score is required.", code="required")

    try:
        st = ScoreType(score_type)
    except ValueError:
        raise ValidationError(f"Unknown score type: {score_type!r}.", code="invalid_type")

    if st is ScoreType.TIME:
        if parse_time_to_seconds(trimmed) is None:
            raise ValidationError("Use mm:ss or hh:mm:ss (e.g. 5:30 or 1:05:30).", code="invalid_time")
    elif st is ScoreType.WEIGHT:
        if trimmed.startswith("-"):
            raise ValidationError("Weight must be non-negative.", code="negative")
        if not _WEIGHT_RE.match(trimmed):
            raise ValidationError("Enter a number (e.g. 225).", code="invalid_weight")
    elif st is ScoreType.REPS:
        if trimmed.startswith("-"):
            raise ValidationError("Reps must be non-negative.", code="negative")
        if not _REPS_RE.match(trimmed):
            raise ValidationError("Enter a whole number (e.g. 120).", code="invalid_reps")
