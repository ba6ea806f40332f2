"""Factory do gateway de pagamento (retorna implementação conforme identificador ou config)."""

import logging
import os
from datetime import datetime
from typing import Callable, Optional

from multigateway.payments.gateway.base import (
    GatewayConfigError,
    GatewayId,
    LogSink,
    PaymentGatewayProtocol,
    ReferenceGenerator,
)
from multigateway.payments.gateway.families import (
    MercadoPagoGateway,
    PagSeguroGateway,
    StripeGateway,
)
from multigateway.payments.sinks import MemorySink

logger = logging.getLogger(__name__)

DEFAULT_GATEWAY = GatewayId.PAGSEGURO.value

_gateways: dict[str, type] = {
    GatewayId.PAGSEGURO.value: PagSeguroGateway,
    GatewayId.MERCADOPAGO.value: MercadoPagoGateway,
    GatewayId.STRIPE.value: StripeGateway,
}


def _normalize(identifier: GatewayId | str) -> str:
    if isinstance(identifier, GatewayId):
        return identifier.value
    if not isinstance(identifier, str):
        raise GatewayConfigError(f"Gateway de pagamento desconhecido: {identifier!r}")
    return identifier.strip().lower()


def configured_gateway_name() -> str:
    """Identificador lido de PAYMENT_GATEWAY (default pagseguro)."""
    return (os.getenv("PAYMENT_GATEWAY") or DEFAULT_GATEWAY).strip().lower() or DEFAULT_GATEWAY


def available_gateways() -> list[str]:
    return sorted(_gateways)


def get_gateway(
    identifier: GatewayId | str | None = None,
    sink: Optional[LogSink] = None,
    reference_generator: Optional[ReferenceGenerator] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> PaymentGatewayProtocol:
    """
    Retorna o gateway do identificador informado (ou de PAYMENT_GATEWAY).
    Identificador desconhecido levanta GatewayConfigError: nunca devolve bundle parcial.
    """
    name = configured_gateway_name() if identifier is None else _normalize(identifier)
    gateway_cls = _gateways.get(name)
    if gateway_cls is None:
        raise GatewayConfigError(
            f"Gateway de pagamento desconhecido: {name!r} (use: {', '.join(available_gateways())})"
        )
    logger.debug("Gateway selecionado: %s", name)
    return gateway_cls(sink=sink, reference_generator=reference_generator, clock=clock)


def register_gateway(identifier: str, gateway_cls: type) -> None:
    """
    Registra um novo gateway (plugins/extensões).
    A classe é instanciada uma vez e o bundle verificado antes de aceitar;
    o identificador precisa ser o id da família do gateway.
    """
    name = _normalize(identifier)
    if not name:
        raise GatewayConfigError("Identificador de gateway vazio")
    if name in {g.value for g in GatewayId}:
        raise GatewayConfigError(f"Gateway embutido não pode ser substituído: {name}")
    try:
        probe = gateway_cls(sink=MemorySink())
    except TypeError as e:
        raise GatewayConfigError(
            f"{gateway_cls.__name__} não aceita sink/reference_generator/clock: {e}"
        ) from e
    if not isinstance(probe, PaymentGatewayProtocol):
        raise GatewayConfigError(f"{gateway_cls.__name__} não implementa PaymentGatewayProtocol")
    if probe.family.id != name:
        raise GatewayConfigError(
            f"Identificador {name!r} não corresponde à família {probe.family.id!r} de {gateway_cls.__name__}"
        )
    bundle = probe.bundle()
    if bundle.family != probe.family:
        raise GatewayConfigError(
            f"{gateway_cls.__name__} declara {probe.family.id} mas cria componentes de {bundle.family.id}"
        )
    _gateways[name] = gateway_cls
    logger.info("Gateway registrado: %s (%s)", name, gateway_cls.__name__)


def unregister_gateway(identifier: str) -> None:
    """Remove um gateway registrado (não remove os embutidos)."""
    name = _normalize(identifier)
    if name in {g.value for g in GatewayId}:
        raise GatewayConfigError(f"Gateway embutido não pode ser removido: {name}")
    _gateways.pop(name, None)
