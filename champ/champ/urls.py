from django.urls import path, include
from champ.apps.events import views as event_views

urlpatterns = [
    # API healthcheck
    path("api/health/", event_views.health, name="api_health"),

    # Eventos publicados (lectura)
    path("events/", include("champ.apps.events.urls")),

    # Leaderboard: /leaderboard/, /leaderboard/<slug>/ y por WOD
    path("leaderboard/", include("champ.apps.leaderboard.urls")),

    # Benchmarks: PRs por atleta y calculadora %
    path("benchmarks/", include("champ.apps.benchmarks.urls")),
]
