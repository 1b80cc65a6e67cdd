from django.conf import settings
from django.db import models
from django.utils import timezone

from champ.apps.events.models import Division, Workout
from .validators import validate_score_value


class ScoreSubmission(models.Model):
    athlete = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="scores")
    athlete_name = models.CharField(max_length=160, blank=True)
    workout = models.ForeignKey(Workout, on_delete=models.CASCADE, related_name="scores")
    division = models.ForeignKey(Division, on_delete=models.CASCADE, related_name="scores")
    score_type = models.CharField(max_length=16, choices=Workout.SCORE_TYPE_CHOICES)
    score_value = models.CharField(max_length=64)  # e.g., '07:43' or '185' or '126'
    # Desempate: el primero en enviar un resultado idéntico queda arriba
    submitted_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        ordering = ("submitted_at", "id")

    def __str__(self):
        return f"{self.athlete_name or self.athlete} – {self.workout} = {self.score_value}"

    def clean(self):
        if not self.score_type and self.workout_id:
            self.score_type = self.workout.score_type
        validate_score_value(self.score_type, self.score_value)
