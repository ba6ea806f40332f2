"""Componentes genéricos (validador, processador, logger) parametrizados pela família."""

import logging
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

from multigateway.payments.gateway.base import GatewayFamily, LogSink, ReferenceGenerator

logger = logging.getLogger(__name__)

CARD_NUMBER_LENGTH = 16
REFERENCE_SUFFIX_LENGTH = 8
LOG_TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"


def default_reference_generator() -> str:
    return uuid.uuid4().hex


class FamilyValidator:
    """Valida tamanho (16) e, se a família exigir, o primeiro dígito do cartão."""

    def __init__(self, family: GatewayFamily, sink: LogSink):
        self.family = family
        self._sink = sink

    def validate_card(self, card_number: Optional[str]) -> bool:
        self._sink.write(f"{self.family.display_name}: Validando cartão...")
        if not card_number:
            logger.debug("%s: cartão vazio", self.family.display_name)
            return False
        if len(card_number) != CARD_NUMBER_LENGTH:
            return False
        if self.family.card_prefix and not card_number.startswith(self.family.card_prefix):
            return False
        return True


class FamilyProcessor:
    """Processamento simulado: sempre aprova e gera referência com o prefixo da família."""

    def __init__(
        self,
        family: GatewayFamily,
        sink: LogSink,
        reference_generator: Optional[ReferenceGenerator] = None,
    ):
        self.family = family
        self._sink = sink
        self._generate = reference_generator or default_reference_generator

    def process_transaction(self, amount: Decimal, card_number: str) -> str:
        self._sink.write(
            f"{self.family.display_name}: Processando {self.family.currency_symbol}{amount}..."
        )
        suffix = self._generate()[:REFERENCE_SUFFIX_LENGTH]
        if len(suffix) != REFERENCE_SUFFIX_LENGTH:
            raise ValueError(
                f"Gerador de referência retornou {suffix!r}; esperado ao menos {REFERENCE_SUFFIX_LENGTH} caracteres"
            )
        reference = f"{self.family.reference_prefix}{suffix}"
        logger.debug("%s: referência gerada %s", self.family.display_name, reference)
        return reference


class FamilyLogger:
    """Escreve "[<Família> Log] <timestamp>: <mensagem>" no sink."""

    def __init__(
        self,
        family: GatewayFamily,
        sink: LogSink,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.family = family
        self._sink = sink
        self._clock = clock or datetime.now

    def log(self, message: str) -> None:
        timestamp = self._clock().strftime(LOG_TIMESTAMP_FORMAT)
        self._sink.write(f"[{self.family.display_name} Log] {timestamp}: {message}")
