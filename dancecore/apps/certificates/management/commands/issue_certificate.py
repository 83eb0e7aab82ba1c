from django.core.management.base import BaseCommand, CommandError

from dancecore.apps.core.errors import CompetitionError
from dancecore.apps.certificates.services.issuer import issue_certificate


class Command(BaseCommand):
    help = "Genera (o regenera) el certificado de una performance completada."

    def add_arguments(self, parser):
        parser.add_argument("performance_id", type=str, help="UUID de la performance")
        parser.add_argument("--no-email", action="store_true", help="No enviar el e-mail")

    def handle(self, *args, **opts):
        try:
            result = issue_certificate(opts["performance_id"], deliver=not opts["no_email"])
        except CompetitionError as exc:
            raise CommandError(exc.message)

        cert = result.certificate
        self.stdout.write(
            f"{cert.display_name}: {cert.percentage}% {cert.medallion} -> {cert.certificate_url}"
        )
        if result.sent:
            self.stdout.write(self.style.SUCCESS(f"Enviado a {result.recipient_email}"))
        elif result.delivery_error:
            self.stdout.write(self.style.WARNING(result.delivery_error))
