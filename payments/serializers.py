from rest_framework import serializers


class ProcessPaymentSerializer(serializers.Serializer):
    """
    Serializer for a payment request.
    The provider is resolved by the view so unknown names map to a gateway error.
    """
    provider = serializers.CharField(
        required=False,
        max_length=50,
        help_text="Gateway name; defaults to DEFAULT_PAYMENT_GATEWAY"
    )
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    card_number = serializers.CharField(max_length=32, write_only=True)


class PaymentResultSerializer(serializers.Serializer):
    """Serializer for PaymentResult. Never includes the card number."""
    success = serializers.BooleanField()
    provider = serializers.CharField()
    transaction_id = serializers.CharField(allow_null=True)
    error_message = serializers.CharField(allow_null=True)
    error_code = serializers.CharField(allow_null=True)
