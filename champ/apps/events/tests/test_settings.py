import importlib

from django.test import SimpleTestCase

from champ.apps.events.models import Workout
from champ.champ.settings import base


class ProdSettingsTest(SimpleTestCase):
    def test_prod_keeps_base_logging(self):
        prod = importlib.import_module("champ.champ.settings.prod")
        self.assertIs(prod.LOGGING, base.LOGGING)
        self.assertEqual(base.LOGGING["loggers"]["champ"]["level"], base.LOG_LEVEL)
        self.assertFalse(prod.DEBUG)


class WorkoutSchemaTest(SimpleTestCase):
    def test_workout_requires_event(self):
        field = Workout._meta.get_field("event")
        self.assertFalse(field.null)
        self.assertEqual(field.remote_field.related_name, "workouts")
        self.assertEqual(Workout._meta.unique_together, (("event", "order"),))
