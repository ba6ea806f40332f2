"""Serviço de pagamento: valida, processa e registra usando o bundle de um único gateway."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from multigateway.payments.gateway.base import (
    GatewayBundle,
    PaymentGatewayProtocol,
    PaymentRequest,
)

logger = logging.getLogger(__name__)


class PaymentStatus(str, Enum):
    APPROVED = "approved"
    INVALID_CARD = "invalid_card"


@dataclass
class PaymentResult:
    """Resultado de um pagamento (aprovado com referência ou cartão recusado)."""

    gateway: str
    status: PaymentStatus
    reference: Optional[str] = None
    message: str = ""

    @property
    def approved(self) -> bool:
        return self.status is PaymentStatus.APPROVED


class PaymentService:
    """Serviço síncrono; cada chamada usa um bundle novo do gateway (sem estado compartilhado)."""

    def __init__(self, gateway: Optional[PaymentGatewayProtocol] = None):
        from multigateway.payments.gateway.factory import get_gateway
        self._gateway = gateway or get_gateway()

    @property
    def gateway(self) -> PaymentGatewayProtocol:
        return self._gateway

    def process_payment(self, amount: Decimal | int | float | str, card_number: Optional[str]) -> PaymentResult:
        """
        Valida o cartão, processa a transação e registra a referência.
        Cartão inválido encerra o fluxo: processador e logger não são chamados.
        """
        request = PaymentRequest(amount=amount, card_number=card_number)
        return self.process(request)

    def process(self, request: PaymentRequest) -> PaymentResult:
        bundle: GatewayBundle = self._gateway.bundle()
        name = bundle.family.display_name

        if not bundle.validator.validate_card(request.card_number):
            message = f"Cartão inválido para {name}"
            self._gateway.sink.write(message)
            logger.info("Pagamento recusado (%s): cartão inválido", name)
            return PaymentResult(gateway=name, status=PaymentStatus.INVALID_CARD, message=message)

        reference = bundle.processor.process_transaction(request.amount, request.card_number)
        message = f"Transação processada: {reference}"
        bundle.logger.log(message)
        logger.info("Pagamento aprovado (%s): %s", name, reference)
        return PaymentResult(
            gateway=name,
            status=PaymentStatus.APPROVED,
            reference=reference,
            message=message,
        )
