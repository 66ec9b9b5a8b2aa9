from billing.handlers.views import InvoiceStatementView

__all__ = ["InvoiceStatementView"]
