"""Gateways simulados (PagSeguro, MercadoPago, Stripe) — sem API externa."""

from datetime import datetime
from typing import Callable, Optional

from multigateway.payments.gateway.base import (
    GatewayBundle,
    GatewayFamily,
    GatewayId,
    LogSink,
    ReferenceGenerator,
)
from multigateway.payments.gateway.components import (
    FamilyLogger,
    FamilyProcessor,
    FamilyValidator,
)
from multigateway.payments.sinks import ConsoleSink

PAGSEGURO = GatewayFamily(
    id=GatewayId.PAGSEGURO.value,
    display_name="PagSeguro",
    reference_prefix="PAGSEG-",
)
MERCADOPAGO = GatewayFamily(
    id=GatewayId.MERCADOPAGO.value,
    display_name="MercadoPago",
    reference_prefix="MP-",
    card_prefix="5",
)
STRIPE = GatewayFamily(
    id=GatewayId.STRIPE.value,
    display_name="Stripe",
    reference_prefix="STRIPE-",
    card_prefix="4",
    currency_symbol="$",
)


class FamilyGateway:
    """Fábrica dos componentes de uma família; subclasses só definem `family`."""

    family: GatewayFamily

    def __init__(
        self,
        sink: Optional[LogSink] = None,
        reference_generator: Optional[ReferenceGenerator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.sink = sink or ConsoleSink()
        self._reference_generator = reference_generator
        self._clock = clock

    def get_validator(self) -> FamilyValidator:
        return FamilyValidator(self.family, self.sink)

    def get_processor(self) -> FamilyProcessor:
        return FamilyProcessor(self.family, self.sink, self._reference_generator)

    def get_logger(self) -> FamilyLogger:
        return FamilyLogger(self.family, self.sink, self._clock)

    def bundle(self) -> GatewayBundle:
        return GatewayBundle(
            validator=self.get_validator(),
            processor=self.get_processor(),
            logger=self.get_logger(),
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.family.display_name}>"


class PagSeguroGateway(FamilyGateway):
    family = PAGSEGURO


class MercadoPagoGateway(FamilyGateway):
    family = MERCADOPAGO


class StripeGateway(FamilyGateway):
    family = STRIPE
