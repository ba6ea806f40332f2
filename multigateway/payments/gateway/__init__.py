"""Gateways de pagamento (interfaces base + famílias simuladas + factory)."""

from multigateway.payments.gateway.base import (
    GatewayBundle,
    GatewayConfigError,
    GatewayFamily,
    GatewayId,
    PaymentGatewayProtocol,
    PaymentRequest,
)
from multigateway.payments.gateway.families import (
    MERCADOPAGO,
    PAGSEGURO,
    STRIPE,
    MercadoPagoGateway,
    PagSeguroGateway,
    StripeGateway,
)
from multigateway.payments.gateway.factory import (
    available_gateways,
    get_gateway,
    register_gateway,
)

__all__ = [
    "GatewayBundle",
    "GatewayConfigError",
    "GatewayFamily",
    "GatewayId",
    "MERCADOPAGO",
    "MercadoPagoGateway",
    "PAGSEGURO",
    "PagSeguroGateway",
    "PaymentGatewayProtocol",
    "PaymentRequest",
    "STRIPE",
    "StripeGateway",
    "available_gateways",
    "get_gateway",
    "register_gateway",
]
