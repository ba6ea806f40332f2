import pytest

from multigateway.payments.gateway import (
    GatewayBundle,
    GatewayConfigError,
    GatewayId,
    MercadoPagoGateway,
    PagSeguroGateway,
    StripeGateway,
    available_gateways,
    get_gateway,
    register_gateway,
)
from multigateway.payments.gateway.base import GatewayFamily
from multigateway.payments.gateway.components import FamilyLogger, FamilyProcessor, FamilyValidator
from multigateway.payments.gateway.factory import unregister_gateway
from multigateway.payments.gateway.families import MERCADOPAGO, PAGSEGURO, STRIPE, FamilyGateway
from multigateway.payments.sinks import ConsoleSink


@pytest.mark.parametrize(
    "identifier, expected_cls",
    [
        (GatewayId.PAGSEGURO, PagSeguroGateway),
        ("mercadopago", MercadoPagoGateway),
        ("  Stripe ", StripeGateway),
    ],
)
def test_get_gateway_by_identifier(identifier, expected_cls):
    assert isinstance(get_gateway(identifier), expected_cls)


@pytest.mark.parametrize("identifier", list(GatewayId))
def test_bundle_members_share_family(identifier, sink):
    gateway = get_gateway(identifier, sink=sink)
    bundle = gateway.bundle()
    assert bundle.validator.family == bundle.processor.family == bundle.logger.family
    assert bundle.family == gateway.family
    assert bundle.family.id == identifier.value


@pytest.mark.parametrize("identifier", ["unknown", "", "paypal", 42])
def test_unknown_gateway_is_config_error(identifier):
    with pytest.raises(GatewayConfigError):
        get_gateway(identifier)


def test_config_error_is_value_error():
    with pytest.raises(ValueError, match="unknown"):
        get_gateway("unknown")


def test_default_gateway_from_env(monkeypatch):
    monkeypatch.delenv("PAYMENT_GATEWAY", raising=False)
    assert isinstance(get_gateway(), PagSeguroGateway)
    monkeypatch.setenv("PAYMENT_GATEWAY", "stripe")
    assert isinstance(get_gateway(), StripeGateway)
    monkeypatch.setenv("PAYMENT_GATEWAY", "unknown")
    with pytest.raises(GatewayConfigError):
        get_gateway()


def test_default_sink_is_console():
    assert isinstance(get_gateway("pagseguro").sink, ConsoleSink)


def test_available_gateways():
    assert available_gateways() == ["mercadopago", "pagseguro", "stripe"]


def test_mixed_bundle_is_rejected(sink):
    with pytest.raises(GatewayConfigError, match="mistura"):
        GatewayBundle(
            validator=FamilyValidator(PAGSEGURO, sink),
            processor=FamilyProcessor(STRIPE, sink),
            logger=FamilyLogger(MERCADOPAGO, sink),
        )


def test_bundle_rejects_object_without_operation(sink):
    class NotALogger:
        family = PAGSEGURO

    with pytest.raises(GatewayConfigError, match="GatewayLogger"):
        GatewayBundle(
            validator=FamilyValidator(PAGSEGURO, sink),
            processor=FamilyProcessor(PAGSEGURO, sink),
            logger=NotALogger(),
        )


PIX = GatewayFamily(id="pixfake", display_name="PixFake", reference_prefix="PIX-")


class PixFakeGateway(FamilyGateway):
    family = PIX


class BrokenGateway(FamilyGateway):
    family = PIX

    def get_logger(self):
        return FamilyLogger(STRIPE, self.sink)


@pytest.fixture
def pix_registered():
    register_gateway("pixfake", PixFakeGateway)
    yield
    unregister_gateway("pixfake")


def test_register_gateway(pix_registered, sink):
    assert "pixfake" in available_gateways()
    gateway = get_gateway("PixFake", sink=sink)
    assert gateway.bundle().family is PIX


def test_register_rejects_mismatched_components():
    with pytest.raises(GatewayConfigError):
        register_gateway("pixfake", BrokenGateway)
    assert "pixfake" not in available_gateways()


def test_register_rejects_non_gateway():
    class Nothing:
        def __init__(self, sink=None, reference_generator=None, clock=None):
            pass

    with pytest.raises(GatewayConfigError, match="PaymentGatewayProtocol"):
        register_gateway("nothing", Nothing)


def test_builtin_gateway_cannot_be_unregistered():
    with pytest.raises(GatewayConfigError):
        unregister_gateway("stripe")


@pytest.mark.parametrize("identifier", ["stripe", " PagSeguro ", GatewayId.MERCADOPAGO])
def test_register_cannot_replace_builtin(identifier):
    with pytest.raises(GatewayConfigError, match="embutido"):
        register_gateway(identifier, PagSeguroGateway)
    assert isinstance(get_gateway("stripe"), StripeGateway)
    assert get_gateway("mercadopago").bundle().family is MERCADOPAGO


def test_register_identifier_must_match_family():
    with pytest.raises(GatewayConfigError, match="não corresponde"):
        register_gateway("paypal", StripeGateway)
    assert "paypal" not in available_gateways()


def test_bundle_rejects_families_sharing_id(sink):
    clone = GatewayFamily(id="pagseguro", display_name="PagSeguro", reference_prefix="OUTRO-")
    with pytest.raises(GatewayConfigError, match="mistura"):
        GatewayBundle(
            validator=FamilyValidator(PAGSEGURO, sink),
            processor=FamilyProcessor(clone, sink),
            logger=FamilyLogger(PAGSEGURO, sink),
        )
