"""Django signals for statement cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from billing.cache import bump_catalog_version, invalidate_statement
from billing.models import Invoice, Performance, Play


@receiver([post_save, post_delete], sender=Play)
def invalidate_play_cache(sender, instance, **kwargs):
    """Invalidate every cached statement when a play is saved or deleted."""
    bump_catalog_version()


@receiver([post_save, post_delete], sender=Invoice)
def invalidate_invoice_cache(sender, instance, **kwargs):
    """Invalidate the invoice's statement when it is saved or deleted."""
    invalidate_statement(instance.pk)


@receiver([post_save, post_delete], sender=Performance)
def invalidate_performance_cache(sender, instance, **kwargs):
    """Invalidate the owning invoice's statement when a line changes."""
    invalidate_statement(instance.invoice_id)
