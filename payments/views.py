import logging

from django.conf import settings
from rest_framework import status, views
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .gateways.base import UnsupportedProviderError
from .gateways.factory import list_available_gateways
from .serializers import PaymentResultSerializer, ProcessPaymentSerializer
from .services import PaymentService

logger = logging.getLogger(__name__)


class GatewayListView(views.APIView):
    """
    List the registered payment gateways.

    GET /api/payments/gateways/
    Response:
        - gateways (list): Registered gateway names
        - default (str): Gateway used when a request names none
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return Response({
            'gateways': list_available_gateways(),
            'default': getattr(settings, 'DEFAULT_PAYMENT_GATEWAY', 'pagseguro'),
        })


class ProcessPaymentView(views.APIView):
    """
    Process a single payment through the selected gateway.

    POST /api/payments/process/
    Request body:
        - provider (str, optional): Gateway name, case-insensitive
        - amount (decimal): Amount to charge
        - card_number (str): Card number

    Response:
        - 201 with the payment result when the charge went through
        - 402 with the payment result when the card was rejected
        - 400 when the gateway is not supported
    """
    permission_classes = [IsAuthenticated]

    def post(self, request):
        serializer = ProcessPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            service = PaymentService.for_provider(serializer.validated_data.get('provider'))
        except UnsupportedProviderError as e:
            return Response(
                {'error': str(e), 'error_code': e.error_code},
                status=status.HTTP_400_BAD_REQUEST
            )

        result = service.process_payment(
            amount=serializer.validated_data['amount'],
            card_number=serializer.validated_data['card_number']
        )

        logger.info(
            "Payment %s for user %s",
            'approved' if result.success else 'declined',
            request.user.pk,
            extra={'provider': result.provider}
        )

        response_status = status.HTTP_201_CREATED if result.success else status.HTTP_402_PAYMENT_REQUIRED
        return Response(PaymentResultSerializer(result).data, status=response_status)
