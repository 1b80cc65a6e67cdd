from django.urls import path
from . import views

urlpatterns = [
    # índice del leaderboard
    path("", views.leaderboard_index, name="leaderboard_index"),

    # ranking de un WOD (por división)
    path("<slug:event_slug>/w<int:order>/", views.workout_leaderboard, name="leaderboard_workout"),

    # leaderboard por evento
    path("<slug:slug>/", views.event_leaderboard, name="event_leaderboard"),
]
