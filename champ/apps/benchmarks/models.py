from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from .services.results import BenchmarkScoreType

TRACK_CHOICES = (
    ("rx", "RX"),
    ("scaled", "Scaled"),
)


class Benchmark(models.Model):
    CATEGORY_CHOICES = (
        ("girls", "Girls"),
        ("hero", "Hero"),
        ("1rm", "1RM"),
        ("open", "Open"),
        ("custom", "Custom"),
    )
    SCORE_TYPE_CHOICES = tuple((t.value, t.value) for t in BenchmarkScoreType)

    name = models.CharField(max_length=160)
    category = models.CharField(max_length=16, choices=CATEGORY_CHOICES, default="custom")
    score_type = models.CharField(max_length=16, choices=SCORE_TYPE_CHOICES, default="time_or_reps")
    time_cap_seconds = models.PositiveIntegerField(null=True, blank=True)
    description_rx = models.TextField(blank=True)
    description_scaled = models.TextField(blank=True)
    default_track = models.CharField(max_length=8, choices=TRACK_CHOICES, default="rx")
    source = models.CharField(max_length=8, default="user")  # seed / user
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = (("name", "category"),)
        ordering = ("category", "name")

    def __str__(self) -> str:
        return self.name


class BenchmarkResult(models.Model):
    """
    Resultado de un atleta en un benchmark. Puede haber varios; el PR se calcula
    al leer (nunca se guarda).
    """
    UNIT_CHOICES = (
        ("lb", "lb"),
        ("kg", "kg"),
    )

    athlete = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="benchmark_results")
    benchmark = models.ForeignKey(Benchmark, on_delete=models.CASCADE, related_name="results")
    track = models.CharField(max_length=8, choices=TRACK_CHOICES, default="rx")
    score_type = models.CharField(max_length=16, choices=Benchmark.SCORE_TYPE_CHOICES)

    # Puntuación (solo el campo del tipo correspondiente)
    time_seconds = models.PositiveIntegerField(null=True, blank=True, help_text="Tiempo total en segundos.")
    reps = models.PositiveIntegerField(null=True, blank=True)
    weight = models.DecimalField(max_digits=7, decimal_places=2, null=True, blank=True)
    unit = models.CharField(max_length=2, choices=UNIT_CHOICES, blank=True)
    completed_within_time_cap = models.BooleanField(null=True, blank=True)

    performed_at = models.DateTimeField(default=timezone.now)
    note = models.TextField(blank=True)
    is_public = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("performed_at", "id")

    def __str__(self) -> str:
        return f"{self.athlete} · {self.benchmark} · {self.performed_at:%Y-%m-%d}"

    def clean(self):
        st = BenchmarkScoreType.coerce(self.score_type or (self.benchmark.score_type if self.benchmark_id else None))
        if st is BenchmarkScoreType.TIME and self.time_seconds is None:
            raise ValidationError("Un resultado 'time' requiere time_seconds.")
        if st is BenchmarkScoreType.REPS and self.reps is None:
            raise ValidationError("Un resultado 'reps' requiere reps.")
        if st is BenchmarkScoreType.WEIGHT and self.weight is None:
            raise ValidationError("Un resultado 'weight' requiere weight.")
        if st is BenchmarkScoreType.TIME_OR_REPS and self.time_seconds is None and self.reps is None:
            raise ValidationError("Un resultado 'time_or_reps' requiere tiempo o reps.")
