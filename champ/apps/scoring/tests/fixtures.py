from __future__ import annotations

from datetime import timedelta

from django.contrib.auth import get_user_model
from django.utils import timezone

from champ.apps.events.models import Division, Event, Gym, Workout
from champ.apps.scoring.models import ScoreSubmission

User = get_user_model()


def build_open_event():
    """
    Evento publicado con dos WODs publicados (Fran, Cindy) y uno en borrador.
    M RX: Alice 3:45/300, Bob 4:10/320, Carol 3:45/250 (Carol envió Fran después de Alice).
    F RX: Diana solo Fran. Scaled: sin scores.
    """
    gym = Gym.objects.create(name="CrossFit Norte", city="Monterrey")
    event = Event.objects.create(gym=gym, name="Open 2025", slug="open-2025", status="PUBLISHED")
    m_rx = Division.objects.create(event=event, name="M RX", slug="m-rx")
    f_rx = Division.objects.create(event=event, name="F RX", slug="f-rx")
    Division.objects.create(event=event, name="Scaled", slug="scaled")

    fran = Workout.objects.create(event=event, order=1, name="Fran", score_type="TIME", unit="mm:ss", is_published=True)
    cindy = Workout.objects.create(event=event, order=2, name="Cindy", score_type="REPS", unit="reps", is_published=True)
    draft = Workout.objects.create(event=event, order=3, name="Grace", score_type="TIME", is_published=False)

    alice = User.objects.create_user(username="alice", first_name="Alice")
    bob = User.objects.create_user(username="bob", first_name="Bob")
    carol = User.objects.create_user(username="carol", first_name="Carol")
    diana = User.objects.create_user(username="diana", email="diana@example.com")

    t0 = timezone.now() - timedelta(days=1)
    rows = [
        (alice, fran, m_rx, "3:45"),
        (bob, fran, m_rx, "4:10"),
        (carol, fran, m_rx, "3:45"),
        (alice, cindy, m_rx, "300"),
        (bob, cindy, m_rx, "320"),
        (carol, cindy, m_rx, "250"),
        (alice, draft, m_rx, "2:00"),
        (diana, fran, f_rx, "5:00"),
    ]
    for minutes, (athlete, workout, division, value) in enumerate(rows):
        ScoreSubmission.objects.create(
            athlete=athlete,
            workout=workout,
            division=division,
            score_type=workout.score_type,
            score_value=value,
            submitted_at=t0 + timedelta(minutes=minutes),
        )

    return {
        "event": event,
        "divisions": {"m-rx": m_rx, "f-rx": f_rx},
        "workouts": {"fran": fran, "cindy": cindy, "draft": draft},
        "athletes": {"alice": alice, "bob": bob, "carol": carol, "diana": diana},
    }
