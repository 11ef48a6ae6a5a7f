import logging
from decimal import Decimal
from typing import Optional

from .gateways.base import (
    CardValidator,
    GatewayException,
    GatewayFamily,
    PaymentResult,
    TransactionLogger,
    TransactionProcessor,
)
from .gateways.factory import FamilyRegistry, get_family

logger = logging.getLogger(__name__)

INVALID_CARD_MESSAGE = "Invalid card"


class PaymentService:
    """
    Service layer for processing a payment through one gateway family.

    The validator, processor and logger are created from the family once,
    at construction, and stay bound for the lifetime of the service. Create
    one service per checkout session.
    """

    def __init__(self, family: GatewayFamily):
        """
        Args:
            family: Gateway family supplying the three capabilities

        Raises:
            GatewayException: If the family produced capabilities from different providers
        """
        components = family.create_components()

        mismatched = [
            type(component).__name__
            for component in components
            if component.provider != family.name
        ]
        if mismatched:
            raise GatewayException(
                message=f"Gateway family '{family.name}' produced foreign components: {', '.join(mismatched)}",
                error_code='inconsistent_gateway_family',
                provider=family.name
            )

        self._family = family
        self._validator = components.validator
        self._processor = components.processor
        self._logger = components.logger

    @classmethod
    def for_provider(
        cls,
        provider_name: Optional[str] = None,
        registry: Optional[FamilyRegistry] = None
    ) -> 'PaymentService':
        """
        Resolve a provider by name and build a service for it.

        Raises:
            UnsupportedProviderError: If the provider is not registered
        """
        return cls(get_family(provider_name, registry=registry))

    @property
    def provider(self) -> str:
        return self._family.name

    @property
    def family(self) -> GatewayFamily:
        return self._family

    @property
    def validator(self) -> CardValidator:
        return self._validator

    @property
    def processor(self) -> TransactionProcessor:
        return self._processor

    @property
    def logger(self) -> TransactionLogger:
        return self._logger

    def process_payment(self, amount: Decimal, card_number: str) -> PaymentResult:
        """
        Validate the card, then charge it and log the outcome.

        A rejected card is a normal outcome, not an error: the processor is
        not called and a declined result is returned.

        Args:
            amount: Amount to charge, in the provider's currency
            card_number: Card identifier, passed as-is to the validator

        Returns:
            PaymentResult with the transaction id on success
        """
        if not self._validator.validate(card_number):
            self._logger.log(INVALID_CARD_MESSAGE)
            logger.info(
                "Payment declined: card rejected by validator",
                extra={'provider': self.provider}
            )
            return PaymentResult(
                success=False,
                provider=self.provider,
                error_message=INVALID_CARD_MESSAGE,
                error_code='invalid_card'
            )

        transaction_id = self._processor.process(amount, card_number)
        self._logger.log(f"Transaction processed: {transaction_id}")

        return PaymentResult(
            success=True,
            provider=self.provider,
            transaction_id=transaction_id
        )
