"""
Stripe gateway family.

Simulated provider: only 16-digit Visa cards (prefix '4') are accepted,
charged in USD.
"""

import logging
from decimal import Decimal

from .base import CardValidator, GatewayFamily, TransactionLogger, TransactionProcessor

logger = logging.getLogger(__name__)

PROVIDER = 'stripe'
DISPLAY_NAME = 'Stripe'

ACCEPTED_CARD_PREFIX = '4'


class StripeValidator(CardValidator):
    provider = PROVIDER

    def validate(self, card_number: str) -> bool:
        logger.info("%s: Validating card...", DISPLAY_NAME, extra={'provider': PROVIDER})
        if not isinstance(card_number, str):
            return False
        return len(card_number) == 16 and card_number.startswith(ACCEPTED_CARD_PREFIX)


class StripeProcessor(TransactionProcessor):
    provider = PROVIDER
    transaction_prefix = 'STRIPE'

    def process(self, amount: Decimal, card_number: str) -> str:
        logger.info("%s: Processing $%.2f...", DISPLAY_NAME, amount, extra={'provider': PROVIDER})
        return self.generate_transaction_id()


class StripeLogger(TransactionLogger):
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


class StripeFamily(GatewayFamily):
    name = PROVIDER
    display_name = DISPLAY_NAME

    def create_validator(self) -> CardValidator:
        return StripeValidator()

    def create_processor(self) -> TransactionProcessor:
        return StripeProcessor()

    def create_logger(self) -> TransactionLogger:
        return StripeLogger()
