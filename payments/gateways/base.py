"""
Base classes for gateway families.

A gateway family bundles the three capabilities every payment provider must
supply (card validation, transaction processing and transaction logging),
so that PaymentService can work with any provider without knowing which one
it is talking to.
"""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, NamedTuple, Optional, Sequence

from django.utils import timezone


class GatewayException(Exception):
    """
    Custom exception for payment gateway errors.

    Raised when a gateway cannot be resolved or is misconfigured.
    """
    def __init__(self, message: str, error_code: Optional[str] = None, provider: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        self.provider = provider
        super().__init__(self.message)


class UnsupportedProviderError(GatewayException):
    """Raised when no gateway family is registered under the requested name."""

    def __init__(self, provider, supported: Sequence[str] = ()):
        self.supported = list(supported)
        message = f"Unsupported payment gateway: {provider}."
        if self.supported:
            message += f" Supported gateways: {', '.join(self.supported)}"
        super().__init__(message=message, error_code='unsupported_gateway', provider=provider)


@dataclass
class PaymentResult:
    """
    Outcome of a single PaymentService.process_payment call.

    Attributes:
        success: True when the card was accepted and the charge processed
        provider: Registry name of the family that handled the payment
        transaction_id: Provider-prefixed id, only set on success
        error_message: Human-readable reason for a declined payment
        error_code: Machine-readable reason ('invalid_card')
    """
    success: bool
    provider: str
    transaction_id: Optional[str] = None
    error_message: Optional[str] = None
    error_code: Optional[str] = None


@dataclass
class LogEntry:
    provider: str
    timestamp: datetime
    message: str


class CardValidator(ABC):
    """Checks whether a card number is acceptable for one provider."""

    provider: str = ''

    @abstractmethod
    def validate(self, card_number: str) -> bool:
        """
        Validate a card number.

        Must never raise: unacceptable input simply returns False.
        """
        pass


class TransactionProcessor(ABC):
    """Executes a charge and returns a provider-prefixed transaction id."""

    provider: str = ''
    transaction_prefix: str = ''

    @abstractmethod
    def process(self, amount: Decimal, card_number: str) -> str:
        """
        Charge the card.

        Callers must only invoke this after the family's validator accepted
        the card; the processor does not re-check.
        """
        pass

    def generate_transaction_id(self) -> str:
        return f"{self.transaction_prefix}-{uuid.uuid4().hex[:8]}"


class TransactionLogger(ABC):
    """Records transaction events, tagged with the provider and a timestamp."""

    provider: str = ''

    def __init__(self):
        self.entries: List[LogEntry] = []

    @abstractmethod
    def log(self, message: str) -> None:
        pass

    def _append(self, message: str) -> LogEntry:
        entry = LogEntry(provider=self.provider, timestamp=timezone.now(), message=message)
        self.entries.append(entry)
        return entry


class GatewayComponents(NamedTuple):
    validator: CardValidator
    processor: TransactionProcessor
    logger: TransactionLogger


class GatewayFamily(ABC):
    """
    Abstract factory for one payment provider.

    Each create_* call returns a fresh capability instance, and all three
    must belong to the same provider. Adding a provider means adding one
    GatewayFamily subclass with its three capabilities; nothing else changes.

    Attributes:
        name: Registry key (lowercase, e.g. 'stripe')
        display_name: Name used in diagnostics (e.g. 'Stripe')
    """

    name: str = ''
    display_name: str = ''

    @abstractmethod
    def create_validator(self) -> CardValidator:
        pass

    @abstractmethod
    def create_processor(self) -> TransactionProcessor:
        pass

    @abstractmethod
    def create_logger(self) -> TransactionLogger:
        pass

    def create_components(self) -> GatewayComponents:
        return GatewayComponents(
            validator=self.create_validator(),
            processor=self.create_processor(),
            logger=self.create_logger(),
        )

    def __repr__(self):
        return f"<{self.__class__.__name__} name={self.name!r}>"
