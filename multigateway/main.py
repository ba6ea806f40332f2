"""Entrypoint: demonstração do sistema de pagamentos com os três gateways."""

import logging
import os
from decimal import Decimal

from dotenv import load_dotenv

from multigateway.payments.gateway.base import GatewayConfigError, GatewayId
from multigateway.payments.gateway.factory import available_gateways, get_gateway
from multigateway.payments.service import PaymentResult, PaymentService

logger = logging.getLogger(__name__)

DEMO_PAYMENTS = [
    (GatewayId.PAGSEGURO, Decimal("150.00"), "1234567890123456"),
    (GatewayId.MERCADOPAGO, Decimal("200.00"), "5234567890123456"),
    (GatewayId.STRIPE, Decimal("300.00"), "4234567890123456"),
]


def _configure_logging() -> None:
    level_name = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=level,
    )


def _selected_payments() -> list[tuple[GatewayId, Decimal, str]]:
    """Filtra a demo por PAYMENT_GATEWAY, se definido."""
    raw = (os.getenv("PAYMENT_GATEWAY") or "").strip().lower()
    if not raw:
        return list(DEMO_PAYMENTS)
    selected = [p for p in DEMO_PAYMENTS if p[0].value == raw]
    if not selected:
        raise GatewayConfigError(
            f"Gateway de pagamento desconhecido: {raw!r} (use: {', '.join(available_gateways())})"
        )
    return selected


def run_demo() -> list[PaymentResult]:
    print("=== Sistema de Pagamentos ===\n")
    results = []
    for i, (gateway_id, amount, card_number) in enumerate(_selected_payments()):
        if i:
            print()
        service = PaymentService(get_gateway(gateway_id))
        results.append(service.process_payment(amount, card_number))
    return results


def main() -> None:
    load_dotenv()
    _configure_logging()
    try:
        results = run_demo()
    except GatewayConfigError as e:
        logger.error("Configuração inválida: %s", e)
        raise SystemExit(str(e)) from e
    approved = sum(1 for r in results if r.approved)
    logger.info("Demo concluída: %s/%s pagamentos aprovados", approved, len(results))


if __name__ == "__main__":
    main()
