"""
Tests for the gateway family registry.

Tests cover:
- Case-insensitive resolution
- Error handling for unsupported gateways
- Registration rules (duplicates, invalid families, frozen registry)
- Building the registry from settings
"""

import pytest
from django.test import override_settings

from payments.gateways.base import GatewayException, GatewayFamily, UnsupportedProviderError
from payments.gateways.factory import (
    FamilyRegistry,
    build_registry,
    get_default_registry,
    get_family,
    list_available_gateways,
)
from payments.gateways.mercadopago_gateway import MercadoPagoFamily
from payments.gateways.pagseguro_gateway import PagSeguroFamily
from payments.gateways.stripe_gateway import StripeFamily


@pytest.fixture
def registry():
    """Fixture for an independent registry with the three built-in families"""
    return FamilyRegistry({
        'pagseguro': PagSeguroFamily(),
        'mercadopago': MercadoPagoFamily(),
        'stripe': StripeFamily(),
    })


class TestResolve:
    """Tests for FamilyRegistry.resolve"""

    @pytest.mark.parametrize('name', ['pagseguro', 'mercadopago', 'stripe'])
    def test_resolve_is_case_insensitive(self, registry, name):
        """Test every spelling of a name returns the same family instance"""
        family = registry.resolve(name)

        assert registry.resolve(name.upper()) is family
        assert registry.resolve(name.capitalize()) is family
        assert family.name == name

    def test_resolve_mixed_case(self, registry):
        """Test mixed-case lookup"""
        assert isinstance(registry.resolve('MercadoPago'), MercadoPagoFamily)
        assert isinstance(registry.resolve('sTrIpE'), StripeFamily)

    def test_resolve_with_whitespace(self, registry):
        """Test gateway name handles whitespace"""
        assert isinstance(registry.resolve('  pagseguro  '), PagSeguroFamily)

    def test_resolve_unknown_provider(self, registry):
        """Test error when requesting unsupported gateway"""
        with pytest.raises(UnsupportedProviderError) as exc_info:
            registry.resolve('unknown')

        assert 'Unsupported payment gateway' in str(exc_info.value)
        assert exc_info.value.error_code == 'unsupported_gateway'
        assert exc_info.value.provider == 'unknown'
        assert exc_info.value.supported == ['mercadopago', 'pagseguro', 'stripe']

    def test_unsupported_provider_is_gateway_exception(self, registry):
        """Test callers catching GatewayException also catch unsupported providers"""
        with pytest.raises(GatewayException):
            registry.resolve('paypal')

    @pytest.mark.parametrize('name', ['', '   ', None, 42])
    def test_resolve_invalid_names(self, registry, name):
        """Test blank and non-string names are unsupported rather than crashing"""
        with pytest.raises(UnsupportedProviderError):
            registry.resolve(name)

    def test_empty_registry(self):
        """Test an empty registry supports nothing"""
        with pytest.raises(UnsupportedProviderError) as exc_info:
            FamilyRegistry().resolve('stripe')

        assert exc_info.value.supported == []


class TestRegister:
    """Tests for FamilyRegistry.register"""

    def test_register_custom_family(self):
        """Test registering a new provider needs no changes to existing code"""
        class AcmeFamily(StripeFamily):
            name = 'acme'

        registry = FamilyRegistry()
        registry.register('Acme', AcmeFamily())

        assert 'acme' in registry
        assert 'ACME' in registry
        assert isinstance(registry.resolve('acme'), AcmeFamily)
        assert len(registry) == 1

    def test_register_invalid_family(self):
        """Test registering something that is not a GatewayFamily"""
        registry = FamilyRegistry()

        with pytest.raises(GatewayException) as exc_info:
            registry.register('invalid', object())

        assert exc_info.value.error_code == 'invalid_gateway_family'
        assert 'invalid' not in registry

    def test_register_family_class_instead_of_instance(self):
        """Test the registry holds family instances, not classes"""
        with pytest.raises(GatewayException) as exc_info:
            FamilyRegistry().register('stripe', StripeFamily)

        assert exc_info.value.error_code == 'invalid_gateway_family'

    @pytest.mark.parametrize('name', ['', '  ', None])
    def test_register_blank_name(self, name):
        """Test registering under a blank name"""
        with pytest.raises(GatewayException) as exc_info:
            FamilyRegistry().register(name, StripeFamily())

        assert exc_info.value.error_code == 'invalid_gateway_name'

    def test_register_duplicate_name(self, registry):
        """Test names are unique regardless of case"""
        with pytest.raises(GatewayException) as exc_info:
            registry.register('STRIPE', StripeFamily())

        assert exc_info.value.error_code == 'duplicate_gateway'

    def test_register_after_freeze(self, registry):
        """Test a frozen registry is read-only"""
        registry.freeze()

        with pytest.raises(GatewayException) as exc_info:
            registry.register('other', StripeFamily())

        assert registry.is_frozen is True
        assert exc_info.value.error_code == 'registry_frozen'
        assert 'other' not in registry

    def test_frozen_registry_still_resolves(self, registry):
        """Test freezing does not affect lookups"""
        registry.freeze()

        assert isinstance(registry.resolve('stripe'), StripeFamily)

    def test_registries_are_independent(self, registry):
        """Test registries do not share state"""
        other = FamilyRegistry()

        assert len(registry) == 3
        assert len(other) == 0
        assert 'stripe' not in other

    def test_names_are_sorted(self, registry):
        """Test names() lists registered providers"""
        assert registry.names() == ['mercadopago', 'pagseguro', 'stripe']

    def test_contains_non_string(self, registry):
        """Test membership check with a non-string"""
        assert None not in registry


class TestBuildRegistry:
    """Tests for building registries from configuration"""

    def test_build_from_settings(self):
        """Test the configured families are registered and the registry is frozen"""
        registry = build_registry()

        assert registry.names() == ['mercadopago', 'pagseguro', 'stripe']
        assert registry.is_frozen is True
        assert isinstance(registry.resolve('pagseguro'), PagSeguroFamily)

    def test_build_from_explicit_config(self):
        """Test building from a config mapping"""
        registry = build_registry({'visa': 'payments.gateways.stripe_gateway.StripeFamily'})

        assert registry.names() == ['visa']
        assert isinstance(registry.resolve('VISA'), StripeFamily)

    def test_build_with_unimportable_path(self):
        """Test error when a configured family cannot be imported"""
        with pytest.raises(GatewayException) as exc_info:
            build_registry({'ghost': 'payments.gateways.ghost_gateway.GhostFamily'})

        assert exc_info.value.error_code == 'gateway_config_invalid'
        assert exc_info.value.provider == 'ghost'

    def test_build_with_non_family_path(self):
        """Test error when a configured path is not a GatewayFamily"""
        with pytest.raises(GatewayException) as exc_info:
            build_registry({'bad': 'payments.gateways.base.PaymentResult'})

        assert exc_info.value.error_code == 'gateway_config_invalid'

    @override_settings(PAYMENT_GATEWAY_FAMILIES={})
    def test_build_with_empty_settings(self):
        """Test an empty configuration gives an empty registry"""
        registry = build_registry()

        assert len(registry) == 0


class TestDefaultRegistry:
    """Tests for the project-wide registry helpers"""

    def test_default_registry_is_built_once(self):
        """Test the default registry is cached and frozen"""
        registry = get_default_registry()

        assert get_default_registry() is registry
        assert registry.is_frozen is True

    def test_get_family_explicit(self):
        """Test getting a family by name"""
        assert isinstance(get_family('stripe'), StripeFamily)
        assert get_family('STRIPE') is get_family('stripe')

    @override_settings(DEFAULT_PAYMENT_GATEWAY='mercadopago')
    def test_get_family_uses_default(self):
        """Test getting a family without a name uses the default setting"""
        assert isinstance(get_family(), MercadoPagoFamily)

    def test_get_family_with_explicit_registry(self, registry):
        """Test get_family searches the given registry"""
        assert get_family('stripe', registry=registry) is registry.resolve('stripe')

    def test_get_family_unknown(self):
        """Test unsupported gateway fails fast with no fallback"""
        with pytest.raises(UnsupportedProviderError):
            get_family('unknown')

    def test_list_available_gateways(self):
        """Test listing registered gateways"""
        assert list_available_gateways() == ['mercadopago', 'pagseguro', 'stripe']

    def test_list_available_gateways_custom_registry(self):
        """Test listing gateways of a given registry"""
        assert list_available_gateways(FamilyRegistry()) == []

    def test_default_families_are_gateway_families(self):
        """Test every default entry is a GatewayFamily instance"""
        registry = get_default_registry()

        for name in registry.names():
            assert isinstance(registry.resolve(name), GatewayFamily)
