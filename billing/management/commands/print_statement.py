"""Print the text statement for a stored invoice."""

from django.core.management.base import BaseCommand, CommandError

from billing.conf import get_pricing_config
from billing.domain.errors import DomainError
from billing.services.statement_service import StatementService
from billing.stores.django_store import DjangoBillingStore


class Command(BaseCommand):
    help = "Print the billing statement for an invoice."

    def add_arguments(self, parser):
        parser.add_argument("invoice_id", help="Primary key of the invoice")

    def handle(self, *args, **options):
        service = StatementService(DjangoBillingStore(), config=get_pricing_config())
        try:
            statement = service.get_statement(options["invoice_id"])
        except DomainError as exc:
            raise CommandError(str(exc)) from exc
        self.stdout.write(statement, ending="")
