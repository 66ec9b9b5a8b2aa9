"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from billing.cache import statement_key
from billing.conf import get_pricing_config, get_statement_cache_timeout
from billing.domain.errors import DomainError, ErrorCode
from billing.handlers.serializers import ErrorSerializer, StatementSerializer
from billing.services.statement_service import StatementService, parse_invoice_id
from billing.stores.django_store import DjangoBillingStore

ERROR_STATUS = {
    ErrorCode.INVALID_INVOICE_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVOICE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.MISSING_PLAY: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.UNKNOWN_GENRE: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def error_response(error: DomainError) -> Response:
    return Response(ErrorSerializer(error).data, status=ERROR_STATUS[error.code])


class InvoiceStatementView(APIView):
    """Handler for GET /api/invoices/{invoice_id}/statement"""

    def get_service(self) -> StatementService:
        return StatementService(DjangoBillingStore(), config=get_pricing_config())

    def get(self, request: Request, invoice_id: str) -> Response:
        try:
            pk = parse_invoice_id(invoice_id)
            key = statement_key(pk)
            payload = cache.get(key)
            if payload is None:
                service = self.get_service()
                data = service.get_statement_data(pk)
                payload = StatementSerializer(
                    data, context={"invoice_id": pk, "text": service.render(data)}
                ).data
                cache.set(key, payload, get_statement_cache_timeout())
        except DomainError as exc:
            return error_response(exc)
        return Response(payload)
