"""
Gateway family registry.

Maps case-insensitive provider names to GatewayFamily instances. A registry
is an ordinary object, so tests and callers can build independent ones; the
project-wide registry is built once from settings by get_default_registry()
and frozen before first use.
"""

import logging
from functools import lru_cache
from typing import Dict, List, Mapping, Optional

from django.conf import settings
from django.utils.module_loading import import_string

from .base import GatewayException, GatewayFamily, UnsupportedProviderError

logger = logging.getLogger(__name__)


class FamilyRegistry:
    """
    Registry of gateway families keyed by provider name.

    Example:
        >>> registry = FamilyRegistry({'stripe': StripeFamily()})
        >>> registry.resolve('Stripe')
        <StripeFamily name='stripe'>
    """

    def __init__(self, families: Optional[Mapping[str, GatewayFamily]] = None):
        self._families: Dict[str, GatewayFamily] = {}
        self._frozen = False
        for name, family in (families or {}).items():
            self.register(name, family)

    @staticmethod
    def normalize_name(name: str) -> str:
        return name.strip().lower()

    def register(self, name: str, family: GatewayFamily) -> None:
        """
        Register a gateway family under a provider name.

        Args:
            name: Provider identifier (e.g., 'stripe'), case-insensitive
            family: GatewayFamily instance producing the provider's capabilities

        Raises:
            GatewayException: If the registry is frozen, the name is blank,
                the family is not a GatewayFamily or the name is taken
        """
        if self._frozen:
            raise GatewayException(
                message=f"Cannot register gateway '{name}': registry is frozen",
                error_code='registry_frozen',
                provider=name
            )

        if not isinstance(name, str) or not name.strip():
            raise GatewayException(
                message="Gateway name must be a non-empty string",
                error_code='invalid_gateway_name'
            )

        if not isinstance(family, GatewayFamily):
            raise GatewayException(
                message="Gateway family must extend GatewayFamily",
                error_code='invalid_gateway_family',
                provider=name
            )

        key = self.normalize_name(name)
        if key in self._families:
            raise GatewayException(
                message=f"Gateway already registered: {key}",
                error_code='duplicate_gateway',
                provider=key
            )

        self._families[key] = family
        logger.debug("Registered gateway family %r as '%s'", family, key)

    def resolve(self, name: str) -> GatewayFamily:
        """
        Look up the family registered under name (case-insensitive).

        Raises:
            UnsupportedProviderError: If no family is registered under name
        """
        if not isinstance(name, str):
            raise UnsupportedProviderError(name, supported=self.names())

        family = self._families.get(self.normalize_name(name))
        if family is None:
            logger.warning(
                "Unsupported payment gateway requested",
                extra={'requested_gateway': name}
            )
            raise UnsupportedProviderError(name, supported=self.names())
        return family

    def names(self) -> List[str]:
        return sorted(self._families)

    def freeze(self) -> None:
        """Make the registry read-only; further register() calls fail."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and self.normalize_name(name) in self._families

    def __len__(self) -> int:
        return len(self._families)


def build_registry(config: Optional[Mapping[str, str]] = None) -> FamilyRegistry:
    """
    Build a frozen registry from a mapping of provider name to dotted path.

    Args:
        config: Mapping such as {'stripe': 'payments.gateways.stripe_gateway.StripeFamily'}.
                If None, uses PAYMENT_GATEWAY_FAMILIES from settings

    Raises:
        GatewayException: If a path cannot be imported or does not name a GatewayFamily
    """
    if config is None:
        config = getattr(settings, 'PAYMENT_GATEWAY_FAMILIES', {})

    registry = FamilyRegistry()
    for name, dotted_path in config.items():
        try:
            family_class = import_string(dotted_path)
        except ImportError as e:
            raise GatewayException(
                message=f"Invalid configuration for gateway {name}: {str(e)}",
                error_code='gateway_config_invalid',
                provider=name
            )

        if not (isinstance(family_class, type) and issubclass(family_class, GatewayFamily)):
            raise GatewayException(
                message=f"{dotted_path} is not a GatewayFamily subclass",
                error_code='gateway_config_invalid',
                provider=name
            )

        registry.register(name, family_class())

    registry.freeze()
    logger.info("Payment gateway registry ready: %s", ', '.join(registry.names()))
    return registry


@lru_cache(maxsize=None)
def get_default_registry() -> FamilyRegistry:
    """Return the project-wide registry, building it from settings on first call."""
    return build_registry()


def get_family(gateway_name: Optional[str] = None, registry: Optional[FamilyRegistry] = None) -> GatewayFamily:
    """
    Get a gateway family by provider name.

    Args:
        gateway_name: Name of the gateway ('pagseguro', 'stripe', etc.)
                      If None, uses DEFAULT_PAYMENT_GATEWAY from settings
        registry: Registry to search; defaults to the project-wide one

    Raises:
        UnsupportedProviderError: If the gateway is not registered

    Example:
        >>> family = get_family('mercadopago')
        >>> validator = family.create_validator()
    """
    if gateway_name is None:
        gateway_name = getattr(settings, 'DEFAULT_PAYMENT_GATEWAY', 'pagseguro')

    if registry is None:
        registry = get_default_registry()

    return registry.resolve(gateway_name)


def list_available_gateways(registry: Optional[FamilyRegistry] = None) -> List[str]:
    """
    List all registered payment gateways.

    Returns:
        Sorted list of gateway names
    """
    if registry is None:
        registry = get_default_registry()
    return registry.names()
