from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from champ.apps.events.models import Division, Event
from champ.apps.scoring.services.snapshots import event_leaderboards


class Command(BaseCommand):
    help = "Imprime el leaderboard de un evento (una tabla por división), recalculado desde los scores."

    def add_arguments(self, parser):
        parser.add_argument("slug", type=str, help="Slug del evento")
        parser.add_argument("--division", type=str, default="", help="Slug de la división (opcional)")

    def handle(self, *args, **opts):
        slug = opts["slug"]
        division_slug = (opts["division"] or "").strip() or None

        try:
            event = Event.objects.get(slug=slug)
        except Event.DoesNotExist:
            raise CommandError(f"No existe Event con slug={slug}")

        if division_slug and not Division.objects.filter(event=event, slug=division_slug).exists():
            raise CommandError(f"División '{division_slug}' no existe en el evento '{slug}'.")

        for division, table in event_leaderboards(event, division_slug):
            self.stdout.write(self.style.MIGRATE_HEADING(f"{event.name} · {division.name}"))
            header = ["#", "Atleta"] + [c.name for c in table.columns] + ["Total"]
            self.stdout.write(" | ".join(header))
            if not table.rows:
                self.stdout.write("  (sin scores)")
                continue
            for row in table.rows:
                cells = []
                for c in table.columns:
                    cell = row.cells[c.id]
                    cells.append(f"{cell.raw_display} ({cell.rank_in_workout})" if cell.has_entry else cell.raw_display)
                self.stdout.write(" | ".join([str(row.overall_rank), row.athlete_name] + cells + [str(row.total_points)]))
