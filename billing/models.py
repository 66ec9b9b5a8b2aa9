"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/.
"""

from django.db import models


class Play(models.Model):
    """Persistence model for catalog plays."""

    play_id = models.CharField(max_length=100, unique=True)
    name = models.CharField(max_length=255)
    # Stored as free text; the domain rejects unknown genres.
    genre = models.CharField(max_length=50)

    class Meta:
        ordering = ["play_id"]

    def __str__(self) -> str:
        return self.name


class Invoice(models.Model):
    """Persistence model for customer invoices."""

    customer = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="billing_invoice_created_idx"),
        ]

    def __str__(self) -> str:
        return f"Invoice {self.pk} - {self.customer}"


class Performance(models.Model):
    """Persistence model for an invoice line."""

    invoice = models.ForeignKey(Invoice, on_delete=models.CASCADE, related_name="performances")
    play_id = models.CharField(max_length=100)
    audience = models.PositiveIntegerField()
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["position", "id"]
        indexes = [
            models.Index(fields=["invoice", "position"], name="billing_perf_invoice_pos_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.play_id} ({self.audience} seats)"
