"""
PagSeguro gateway family.

Simulated provider: accepts any 16-character card number and charges in BRL.
"""

import logging
from decimal import Decimal

from .base import CardValidator, GatewayFamily, TransactionLogger, TransactionProcessor

logger = logging.getLogger(__name__)

PROVIDER = 'pagseguro'
DISPLAY_NAME = 'PagSeguro'


class PagSeguroValidator(CardValidator):
    provider = PROVIDER

    def validate(self, card_number: str) -> bool:
        logger.info("%s: Validating card...", DISPLAY_NAME, extra={'provider': PROVIDER})
        if not isinstance(card_number, str):
            return False
        return len(card_number) == 16


class PagSeguroProcessor(TransactionProcessor):
    provider = PROVIDER
    transaction_prefix = 'PAGSEG'

    def process(self, amount: Decimal, card_number: str) -> str:
        logger.info("%s: Processing R$ %.2f...", DISPLAY_NAME, amount, extra={'provider': PROVIDER})
        return self.generate_transaction_id()


class PagSeguroLogger(TransactionLogger):
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


class PagSeguroFamily(GatewayFamily):
    name = PROVIDER
    display_name = DISPLAY_NAME

    def create_validator(self) -> CardValidator:
        return PagSeguroValidator()

    def create_processor(self) -> TransactionProcessor:
        return PagSeguroProcessor()

    def create_logger(self) -> TransactionLogger:
        return PagSeguroLogger()
