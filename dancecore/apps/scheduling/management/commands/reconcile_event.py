from django.core.management.base import BaseCommand, CommandError

from dancecore.apps.core.errors import CompetitionError
from dancecore.apps.events.models import Event
from dancecore.apps.scheduling.services.reconciler import reconcile_event


class Command(BaseCommand):
    help = "Crea o corrige las performances de todas las inscripciones aprobadas de un evento."

    def add_arguments(self, parser):
        parser.add_argument("event", type=str, help="Id o slug del evento")

    def handle(self, *args, **opts):
        ref = opts["event"]
        lookup = {"pk": int(ref)} if ref.isdigit() else {"slug": ref}
        event = Event.objects.filter(**lookup).first()
        if event is None:
            raise CommandError(f"Event '{ref}' no existe.")

        try:
            report = reconcile_event(event.pk)
        except CompetitionError as exc:
            raise CommandError(exc.message)

        self.stdout.write(self.style.MIGRATE_HEADING(f"{event.name}"))
        self.stdout.write(
            f"Creadas: {report.created} · corregidas: {report.fixed} · "
            f"sin cambios: {report.unchanged} · con error: {report.failed}"
        )
        for err in report.errors:
            self.stdout.write(self.style.WARNING(f"  Inscripción {err.get('entry_id')}: {err.get('error')}"))

        if report.failed:
            self.stdout.write(self.style.WARNING("Reconciliación terminada con errores."))
        else:
            self.stdout.write(self.style.SUCCESS("Reconciliación OK."))
