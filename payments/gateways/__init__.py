"""
Payment gateway abstraction layer.

Provides gateway families (validator, processor and logger per provider)
and the registry used to select one by name.
"""

from .base import (
    CardValidator,
    GatewayComponents,
    GatewayException,
    GatewayFamily,
    LogEntry,
    PaymentResult,
    TransactionLogger,
    TransactionProcessor,
    UnsupportedProviderError,
)
from .mercadopago_gateway import MercadoPagoFamily
from .pagseguro_gateway import PagSeguroFamily
from .stripe_gateway import StripeFamily
from .factory import (
    FamilyRegistry,
    build_registry,
    get_default_registry,
    get_family,
    list_available_gateways,
)

__all__ = [
    'CardValidator',
    'GatewayComponents',
    'GatewayException',
    'GatewayFamily',
    'LogEntry',
    'PaymentResult',
    'TransactionLogger',
    'TransactionProcessor',
    'UnsupportedProviderError',
    'MercadoPagoFamily',
    'PagSeguroFamily',
    'StripeFamily',
    'FamilyRegistry',
    'build_registry',
    'get_default_registry',
    'get_family',
    'list_available_gateways',
]
