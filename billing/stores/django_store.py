"""Django ORM implementation of the BillingStore."""

from collections.abc import Iterable

from billing import models
from billing.domain import Audience, Invoice, Performance, Play, PlayId
from billing.domain.value_objects import read_genre
from billing.stores.interfaces import BillingStore


class DjangoBillingStore(BillingStore):
    """Database-backed billing store using Django ORM.

    Stored rows are handed over as-is; blank play ids and unknown genres are
    reported by statement generation, in invoice order.
    """

    def get_invoice(self, invoice_id: int) -> Invoice | None:
        row = models.Invoice.objects.filter(pk=invoice_id).prefetch_related("performances").first()
        if row is None:
            return None
        return Invoice(
            customer=row.customer,
            performances=tuple(
                Performance(play_id=PlayId.from_string(p.play_id), audience=Audience(p.audience))
                for p in row.performances.all()
            ),
        )

    def get_plays(self, play_ids: Iterable[str]) -> dict[str, Play]:
        rows = models.Play.objects.filter(play_id__in={pid for pid in play_ids if pid})
        return {
            row.play_id: Play(id=PlayId(row.play_id), name=row.name, genre=read_genre(row.genre))
            for row in rows
        }
