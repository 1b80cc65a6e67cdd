from django.apps import AppConfig


class ScoringConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "champ.apps.scoring"
    verbose_name = "Scoring (ranking de WODs)"
