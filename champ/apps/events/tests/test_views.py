from datetime import date

from django.core.exceptions import ValidationError
from django.test import TestCase

from champ.apps.events.models import Division, Event, Gym
from champ.apps.scoring.tests.fixtures import build_open_event


class EventViewsTest(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.event = build_open_event()["event"]

    def test_health(self):
        r = self.client.get("/api/health/")
        self.assertEqual(r.json(), {"ok": True})

    def test_event_list(self):
        r = self.client.get("/events/")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["events"][0]["gym"], "CrossFit Norte")

    def test_event_detail_lists_published_workouts(self):
        r = self.client.get(f"/events/{self.event.slug}/")
        self.assertEqual(r.status_code, 200)
        payload = r.json()
        self.assertEqual([w["name"] for w in payload["workouts"]], ["Fran", "Cindy"])
        self.assertEqual([d["slug"] for d in payload["divisions"]], ["f-rx", "m-rx", "scaled"])

    def test_event_detail_not_found(self):
        self.assertEqual(self.client.get("/events/nope/").status_code, 404)


class EventModelTest(TestCase):
    def test_slugs_from_names(self):
        gym = Gym.objects.create(name="CrossFit Norte")
        event = Event.objects.create(gym=gym, name="Summer Throwdown")
        division = Division.objects.create(event=event, name="Masters 40")
        self.assertEqual((gym.slug, event.slug, division.slug), ("crossfit-norte", "summer-throwdown", "masters-40"))
        self.assertFalse(event.is_public)

    def test_dates_order(self):
        gym = Gym.objects.create(name="Box")
        event = Event(gym=gym, name="X", start_date=date(2025, 3, 2), end_date=date(2025, 3, 1))
        with self.assertRaises(ValidationError):
            event.clean()
