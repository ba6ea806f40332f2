"""Interfaces base dos gateways: componentes, família e bundle (Abstract Factory)."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Callable, Optional, Protocol, runtime_checkable


class GatewayConfigError(ValueError):
    """Gateway desconhecido ou bundle com componentes de famílias diferentes."""


class GatewayId(str, Enum):
    PAGSEGURO = "pagseguro"
    MERCADOPAGO = "mercadopago"
    STRIPE = "stripe"


@dataclass(frozen=True)
class GatewayFamily:
    """Descreve uma família de gateway: nome, prefixos e moeda."""

    id: str
    display_name: str
    reference_prefix: str
    card_prefix: Optional[str] = None  # None = qualquer primeiro dígito
    currency_symbol: str = "R$ "  # símbolo já inclui o espaço, se houver


@dataclass(frozen=True)
class PaymentRequest:
    """Pedido de pagamento (valor + número do cartão), não persistido."""

    amount: Decimal
    card_number: Optional[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))


def to_decimal(amount: Decimal | int | float | str) -> Decimal:
    """Converte o valor em Decimal; float passa por str() para não herdar ruído binário."""
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, bool):
        raise ValueError(f"Valor inválido: {amount!r}")
    if isinstance(amount, float):
        amount = str(amount)
    try:
        return Decimal(amount)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Valor inválido: {amount!r}") from e


class LogSink(Protocol):
    """Destino das linhas exibidas ao usuário (console, memória, logging)."""

    def write(self, line: str) -> None:
        ...


ReferenceGenerator = Callable[[], str]


@runtime_checkable
class CardValidator(Protocol):
    family: GatewayFamily

    def validate_card(self, card_number: Optional[str]) -> bool:
        """True se o cartão é aceito por esta família."""
        ...


@runtime_checkable
class TransactionProcessor(Protocol):
    family: GatewayFamily

    def process_transaction(self, amount: Decimal, card_number: str) -> str:
        """Processa (simulado) e retorna a referência da transação."""
        ...


@runtime_checkable
class GatewayLogger(Protocol):
    family: GatewayFamily

    def log(self, message: str) -> None:
        """Registra uma linha com timestamp e nome da família."""
        ...


@dataclass(frozen=True)
class GatewayBundle:
    """Trio validador/processador/logger de uma única família."""

    validator: CardValidator
    processor: TransactionProcessor
    logger: GatewayLogger

    def __post_init__(self) -> None:
        checks = (
            ("validator", self.validator, CardValidator),
            ("processor", self.processor, TransactionProcessor),
            ("logger", self.logger, GatewayLogger),
        )
        for role, component, protocol in checks:
            if not isinstance(component, protocol):
                raise GatewayConfigError(
                    f"Componente {role} ({type(component).__name__}) não implementa {protocol.__name__}"
                )
        families = {c.family for _, c, _ in checks}
        if len(families) != 1:
            raise GatewayConfigError(
                f"Bundle mistura famílias de gateway: {', '.join(sorted(f.id for f in families))}"
            )

    @property
    def family(self) -> GatewayFamily:
        return self.validator.family


@runtime_checkable
class PaymentGatewayProtocol(Protocol):
    """Abstract factory: cria os componentes compatíveis de um gateway."""

    family: GatewayFamily
    sink: LogSink

    def get_validator(self) -> CardValidator:
        ...

    def get_processor(self) -> TransactionProcessor:
        ...

    def get_logger(self) -> GatewayLogger:
        ...

    def bundle(self) -> GatewayBundle:
        """Retorna o trio já verificado (mesma família)."""
        ...
