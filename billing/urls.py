from django.urls import path

from billing.handlers import InvoiceStatementView

urlpatterns = [
    path(
        "invoices/<str:invoice_id>/statement",
        InvoiceStatementView.as_view(),
        name="invoice-statement",
    ),
]
