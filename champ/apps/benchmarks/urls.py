from django.urls import path
from . import views

urlpatterns = [
    path("athletes/<int:user_id>/records/", views.athlete_personal_records, name="benchmark_records"),
    path("athletes/<int:user_id>/percent/", views.athlete_percent, name="benchmark_percent"),
]
