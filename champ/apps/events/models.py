from __future__ import annotations

from django.db import models
from django.utils.text import slugify
from django.core.exceptions import ValidationError

from champ.apps.scoring.services.types import ScoreType


class Gym(models.Model):
    name = models.CharField(max_length=160)
    slug = models.SlugField(unique=True)
    city = models.CharField(max_length=120, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("name",)

    def __str__(self) -> str:
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)


class Event(models.Model):
    STATUS_CHOICES = (
        ("DRAFT", "Draft"),
        ("PUBLISHED", "Published"),
        ("ARCHIVED", "Archived"),
    )

    gym = models.ForeignKey(Gym, on_delete=models.CASCADE, related_name="events")
    name = models.CharField(max_length=160)
    slug = models.SlugField(unique=True)
    description = models.TextField(blank=True)

    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default="DRAFT")

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-start_date", "name")

    def __str__(self) -> str:
        return self.name

    def clean(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValidationError("end_date no puede ser anterior a start_date")

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    @property
    def is_public(self) -> bool:
        return self.status == "PUBLISHED"


class Division(models.Model):
    """Categoría de competencia (ej. M_RX). Los scores se rankean dentro, nunca entre divisiones."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="divisions")
    name = models.CharField(max_length=120)
    slug = models.SlugField(help_text="Slug único dentro del evento.")

    class Meta:
        unique_together = (("event", "slug"),)
        ordering = ("name", "id")

    def __str__(self) -> str:
        return f"{self.event.name} · {self.name}"

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)


class Workout(models.Model):
    SCORE_TYPE_CHOICES = tuple((t.value, t.value.title()) for t in ScoreType)

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="workouts")
    order = models.PositiveIntegerField(default=1, help_text="Orden del WOD dentro del evento (1..N).")
    name = models.CharField(max_length=160)
    description = models.TextField(blank=True)
    score_type = models.CharField(max_length=16, choices=SCORE_TYPE_CHOICES, default=ScoreType.TIME.value)
    unit = models.CharField(max_length=16, blank=True, help_text='"reps", "mm:ss", "lb" o "kg".')
    is_published = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = (("event", "order"),)
        ordering = ("event", "order", "id")

    def __str__(self) -> str:
        return f"{self.event.name} · W{self.order} · {self.name}"
