# champ/apps/scoring/services/parser.py
from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timezone
from typing import Optional

from .types import EMPTY_DISPLAY, ParsedScore, RawScore, ScoreType, Timestamp

logger = logging.getLogger(__name__)

# Prefijo numérico al estilo parseFloat: "225 lbs" -> 225
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_TRAILING_UNIT = re.compile(r"\s*(?:lbs?|kg)\s*$", re.IGNORECASE)


# ---------- Tiempo ----------

def parse_time_to_seconds(value: Optional[str]) -> Optional[int]:
    """
    Acepta 'mm:ss' o 'hh:mm:ss' y devuelve segundos (int) o None si no parsea.
    - Campos que no son hora: 1 o 2 dígitos.
    - Segundos < 60; minutos < 60 solo cuando hay campo de hora.
    No acepta comas ni puntos como separador.
    """
    if not value:
        return None
    parts = value.strip().split(":")
    if len(parts) not in (2, 3):
        return None
    if not all(p.isascii() and p.isdigit() for p in parts):
        return None
    if any(len(p) > 2 for p in parts[-2:]):
        return None

    if len(parts) == 2:
        mm, ss = int(parts[0]), int(parts[1])
        if ss >= 60:
            return None
        return mm * 60 + ss

    hh, mm, ss = int(parts[0]), int(parts[1]), int(parts[2])
    if mm >= 60 or ss >= 60:
        return None
    return hh * 3600 + mm * 60 + ss


def format_seconds(value: Optional[float]) -> str:
    """Segundos -> 'm:ss' (o 'h:mm:ss' desde una hora). None -> '—'."""
    if value is None or not math.isfinite(value):
        return EMPTY_DISPLAY
    total = int(value)
    hh, rem = divmod(total, 3600)
    mm, ss = divmod(rem, 60)
    if hh:
        return f"{hh}:{mm:02d}:{ss:02d}"
    return f"{mm}:{ss:02d}"


# ---------- Números (reps / peso) ----------

def parse_number(value: Optional[str]) -> Optional[float]:
    """Coma decimal -> punto, luego lee el número inicial. None si no hay número."""
    if not value:
        return None
    match = _LEADING_NUMBER.match(value.strip().replace(",", "."))
    if not match:
        return None
    return float(match.group(0))


# ---------- Valor comparable ----------

def score_value_to_number(score_type: ScoreType, text: Optional[str]) -> float:
    """
    Convierte el texto de un score a un número ordenable.
      - TIME: segundos; vacío o inválido -> +inf (peor tiempo posible)
      - REPS / WEIGHT: número; vacío o inválido -> -inf (peor cantidad posible)
    Nunca lanza: un score mal cargado no puede romper el leaderboard de todos.
    """
    s = (text or "").strip()
    if score_type is ScoreType.TIME:
        seconds = parse_time_to_seconds(s)
        if seconds is None:
            if s:
                logger.debug("Tiempo no parseable %r: se rankea como +inf", s)
            return math.inf
        return float(seconds)

    n = parse_number(s)
    if n is None or not math.isfinite(n):
        if s:
            logger.debug("Valor %s no parseable %r: se rankea como -inf", score_type.value, s)
        return -math.inf
    return n


def submitted_at_millis(value: Timestamp) -> int:
    """datetime o epoch (ms) -> epoch en ms. Sin timestamp = 0. Los datetime naive se toman como UTC."""
    if value is None:
        return 0
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(round(value.timestamp() * 1000))
    return int(value)


def parse_score(score: RawScore, score_type: Optional[ScoreType] = None) -> ParsedScore:
    """Usa el score_type del workout si se pasa; si no, el declarado en el envío."""
    st = score_type or score.score_type
    return ParsedScore(
        score=score,
        numeric=score_value_to_number(st, score.score_value_text),
        submitted_at_millis=submitted_at_millis(score.submitted_at),
    )


# ---------- Display ----------

def display_value(score_type: ScoreType, text: Optional[str], unit: Optional[str] = None) -> str:
    """
    Texto para mostrar un score:
      - TIME: el texto tal cual (recortado)
      - REPS: '120 reps'
      - WEIGHT: '225 lbs' (o la unidad del workout si se indica)
    """
    raw = (text or "").strip()
    if not raw:
        return EMPTY_DISPLAY
    if score_type is ScoreType.TIME:
        return raw
    value = _TRAILING_UNIT.sub("", raw).strip()
    if not value:
        return EMPTY_DISPLAY
    if score_type is ScoreType.REPS:
        return f"{value} reps"
    suffix = unit if unit and unit not in ("reps", "mm:ss") else "lbs"
    return f"{value} {suffix}"
