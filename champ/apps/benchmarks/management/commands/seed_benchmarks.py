from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from champ.apps.benchmarks.models import Benchmark

GIRLS_NAMES = [
    "Angie", "Barbara", "Chelsea", "Diane", "Elizabeth", "Fran", "Grace",
    "Helen", "Isabel", "Jackie", "Karen", "Linda", "Mary", "Nancy",
]

HERO_NAMES = [
    "Michael", "Murph", "Josh", "Joshie", "Randy", "Lynne", "Daniel", "Helen",
    "Glen", "Tommy", "Roy", "Ryan", "JT", "Jerry", "Danny", "Jason", "Badger", "Nate",
]

LIFTS_1RM = [
    "Back Squat", "Front Squat", "Deadlift", "Bench Press", "Strict Press", "Push Press",
    "Push Jerk", "Split Jerk", "Clean", "Snatch", "Clean & Jerk",
]


def seed_catalog():
    """[(nombre, categoría, score_type)] del catálogo oficial (Girls, Hero, 1RM)."""
    items = [(n, "girls", "time_or_reps") for n in GIRLS_NAMES]
    items += [(n, "hero", "time_or_reps") for n in dict.fromkeys(HERO_NAMES)]
    items += [(n, "1rm", "weight") for n in LIFTS_1RM]
    return items


class Command(BaseCommand):
    help = "Carga el catálogo de benchmarks (Girls, Hero, 1RM). Idempotente: dedup por nombre + categoría."

    def add_arguments(self, parser):
        parser.add_argument("--dry-run", action="store_true", help="Solo muestra lo que se crearía")

    @transaction.atomic
    def handle(self, *args, **opts):
        dry_run: bool = bool(opts["dry_run"])
        created = 0
        skipped = 0

        for name, category, score_type in seed_catalog():
            exists = Benchmark.objects.filter(name__iexact=name, category=category).exists()
            if exists:
                skipped += 1
                continue
            if not dry_run:
                Benchmark.objects.create(
                    name=name,
                    category=category,
                    score_type=score_type,
                    default_track="rx",
                    source="seed",
                )
            created += 1

        prefix = "[dry-run] " if dry_run else ""
        self.stdout.write(self.style.SUCCESS(f"✓ {prefix}{created} benchmarks creados, {skipped} ya existían"))
