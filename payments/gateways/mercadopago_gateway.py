"""
MercadoPago gateway family.

Simulated provider: only 16-digit cards on the '5' network prefix are
accepted (the Mastercard range), charged in BRL.
"""

import logging
from decimal import Decimal

from .base import CardValidator, GatewayFamily, TransactionLogger, TransactionProcessor

logger = logging.getLogger(__name__)

PROVIDER = 'mercadopago'
DISPLAY_NAME = 'MercadoPago'

ACCEPTED_CARD_PREFIX = '5'


class MercadoPagoValidator(CardValidator):
    provider = PROVIDER

    def validate(self, card_number: str) -> bool:
        logger.info("%s: Validating card...", DISPLAY_NAME, extra={'provider': PROVIDER})
        if not isinstance(card_number, str):
            return False
        return len(card_number) == 16 and card_number.startswith(ACCEPTED_CARD_PREFIX)


class MercadoPagoProcessor(TransactionProcessor):
    provider = PROVIDER
    transaction_prefix = 'MP'

    def process(self, amount: Decimal, card_number: str) -> str:
        logger.info("%s: Processing R$ %.2f...", DISPLAY_NAME, amount, extra={'provider': PROVIDER})
        return self.generate_transaction_id()


class MercadoPagoLogger(TransactionLogger):
    provider = PROVIDER

    def log(self, message: str) -> None:
        entry = self._append(message)
        logger.info(
            "[%s Log] %s: %s",
            DISPLAY_NAME,
            entry.timestamp.isoformat(),
            message,
            extra={'provider': PROVIDER}
        )


class MercadoPagoFamily(GatewayFamily):
    name = PROVIDER
    display_name = DISPLAY_NAME

    def create_validator(self) -> CardValidator:
        return MercadoPagoValidator()

    def create_processor(self) -> TransactionProcessor:
        return MercadoPagoProcessor()

    def create_logger(self) -> TransactionLogger:
        return MercadoPagoLogger()
