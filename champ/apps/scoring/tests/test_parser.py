import math
from datetime import datetime, timedelta, timezone

from django.test import SimpleTestCase

from champ.apps.scoring.services.comparator import (
    is_better,
    is_better_time_or_reps,
    score_key,
    time_or_reps_key,
)
from champ.apps.scoring.services.parser import (
    display_value,
    format_seconds,
    parse_number,
    parse_score,
    parse_time_to_seconds,
    score_value_to_number,
    submitted_at_millis,
)
from champ.apps.scoring.services.types import RawScore, ScoreType


class ParseTimeTest(SimpleTestCase):
    def test_minutes_seconds(self):
        self.assertEqual(parse_time_to_seconds("5:30"), 330)
        self.assertEqual(parse_time_to_seconds("07:43"), 463)
        self.assertEqual(parse_time_to_seconds(" 3:45 "), 225)

    def test_hours(self):
        self.assertEqual(parse_time_to_seconds("1:05:30"), 3930)

    def test_minutes_unbounded_without_hour(self):
        self.assertEqual(parse_time_to_seconds("75:00"), 4500)

    def test_rejects_bad_formats(self):
        for value in ("", None, "5", "5:60", "1:60:00", "5:300", "5.30", "a:b", "1:2:3:4", "５:00", "-5:00"):
            with self.subTest(value=value):
                self.assertIsNone(parse_time_to_seconds(value))

    def test_format_seconds(self):
        self.assertEqual(format_seconds(330), "5:30")
        self.assertEqual(format_seconds(65), "1:05")
        self.assertEqual(format_seconds(3930), "1:05:30")
        self.assertEqual(format_seconds(None), "—")
        self.assertEqual(format_seconds(math.inf), "—")


class ParseNumberTest(SimpleTestCase):
    def test_leading_number(self):
        self.assertEqual(parse_number("225"), 225.0)
        self.assertEqual(parse_number("225 lbs"), 225.0)
        self.assertEqual(parse_number("92,5"), 92.5)
        self.assertEqual(parse_number("1e3"), 1000.0)

    def test_no_number(self):
        self.assertIsNone(parse_number(""))
        self.assertIsNone(parse_number(None))
        self.assertIsNone(parse_number("abc"))


class ScoreValueToNumberTest(SimpleTestCase):
    def test_time(self):
        self.assertEqual(score_value_to_number(ScoreType.TIME, "3:45"), 225.0)

    def test_bad_time_is_worst(self):
        self.assertEqual(score_value_to_number(ScoreType.TIME, "DNF"), math.inf)
        self.assertEqual(score_value_to_number(ScoreType.TIME, ""), math.inf)
        self.assertEqual(score_value_to_number(ScoreType.TIME, None), math.inf)

    def test_bad_quantity_is_worst(self):
        self.assertEqual(score_value_to_number(ScoreType.REPS, "muchas"), -math.inf)
        self.assertEqual(score_value_to_number(ScoreType.WEIGHT, ""), -math.inf)
        self.assertEqual(score_value_to_number(ScoreType.WEIGHT, "1e999"), -math.inf)

    def test_quantity(self):
        self.assertEqual(score_value_to_number(ScoreType.REPS, "120"), 120.0)
        self.assertEqual(score_value_to_number(ScoreType.WEIGHT, "102,5"), 102.5)

    def test_degraded_parse_is_logged(self):
        with self.assertLogs("champ.apps.scoring.services.parser", level="DEBUG") as logs:
            score_value_to_number(ScoreType.TIME, "DNF")
        self.assertIn("DNF", logs.output[0])


class SubmittedAtTest(SimpleTestCase):
    def test_missing_is_zero(self):
        self.assertEqual(submitted_at_millis(None), 0)

    def test_epoch_millis_passthrough(self):
        self.assertEqual(submitted_at_millis(1500), 1500)

    def test_naive_datetime_as_utc(self):
        self.assertEqual(submitted_at_millis(datetime(1970, 1, 1, 0, 0, 1)), 1000)

    def test_aware_datetime(self):
        tz = timezone(timedelta(hours=-5))
        self.assertEqual(submitted_at_millis(datetime(1969, 12, 31, 19, 0, 2, tzinfo=tz)), 2000)

    def test_parse_score_uses_workout_type(self):
        s = RawScore("a", "w", "d", ScoreType.REPS, "5:00", submitted_at=10)
        parsed = parse_score(s, ScoreType.TIME)
        self.assertEqual(parsed.numeric, 300.0)
        self.assertEqual(parsed.submitted_at_millis, 10)


class DisplayValueTest(SimpleTestCase):
    def test_time_as_is(self):
        self.assertEqual(display_value(ScoreType.TIME, " 5:30 "), "5:30")

    def test_reps(self):
        self.assertEqual(display_value(ScoreType.REPS, "120"), "120 reps")

    def test_weight_default_unit(self):
        self.assertEqual(display_value(ScoreType.WEIGHT, "225"), "225 lbs")
        self.assertEqual(display_value(ScoreType.WEIGHT, "225 lbs"), "225 lbs")
        self.assertEqual(display_value(ScoreType.WEIGHT, "100", "reps"), "100 lbs")

    def test_weight_workout_unit(self):
        self.assertEqual(display_value(ScoreType.WEIGHT, "100 kg", "kg"), "100 kg")

    def test_empty(self):
        self.assertEqual(display_value(ScoreType.REPS, ""), "—")
        self.assertEqual(display_value(ScoreType.WEIGHT, "lbs"), "—")


class ComparatorTest(SimpleTestCase):
    def test_time_lower_wins(self):
        self.assertTrue(is_better(ScoreType.TIME, 300, 0, 360, 0))
        self.assertFalse(is_better(ScoreType.TIME, 360, 0, 300, 0))

    def test_quantity_higher_wins(self):
        self.assertTrue(is_better(ScoreType.REPS, 120, 0, 100, 0))
        self.assertTrue(is_better(ScoreType.WEIGHT, 102.5, 0, 100, 0))

    def test_earlier_submission_breaks_tie(self):
        self.assertTrue(is_better(ScoreType.TIME, 300, 1, 300, 2))
        self.assertFalse(is_better(ScoreType.TIME, 300, 2, 300, 1))

    def test_full_tie_is_not_better(self):
        self.assertFalse(is_better(ScoreType.REPS, 100, 5, 100, 5))

    def test_worst_values_sort_last(self):
        self.assertTrue(is_better(ScoreType.TIME, 9999, 9, math.inf, 0))
        self.assertTrue(is_better(ScoreType.REPS, 0, 9, -math.inf, 0))

    def test_key_matches_is_better(self):
        self.assertLess(score_key(ScoreType.REPS, 120, 0), score_key(ScoreType.REPS, 100, 0))

    def test_time_or_reps(self):
        self.assertTrue(is_better_time_or_reps(900, None, None, 500))
        self.assertTrue(is_better_time_or_reps(300, None, 400, None))
        self.assertTrue(is_better_time_or_reps(None, 150, None, 120))
        self.assertFalse(is_better_time_or_reps(None, 500, 900, None))
        self.assertEqual(time_or_reps_key(None, None), (1, math.inf))
