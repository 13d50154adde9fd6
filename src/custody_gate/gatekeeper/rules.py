"""Переиспользуемые правила проверки примитивов.

- check_address: наличие и каноническая длина Address
- check_distinct: попарное различие идентификаторов
- check_coin: деноминация и знак суммы
- check_entity: имя и роль юридического лица

Все правила - чистые функции входных данных и PolicyConfig.
"""

from custody_gate.core.domain.address import Address
from custody_gate.core.domain.coin import Coin
from custody_gate.core.domain.entity import LegalEntity
from custody_gate.gatekeeper.config import PolicyConfig
from custody_gate.gatekeeper.results import FailureCode, ValidationResult


_OK = ValidationResult.accept()


def check_address(raw: bytes | None, config: PolicyConfig, field: str = "address") -> ValidationResult:
    """Проверка идентификатора.

    Args:
        raw: сырые байты (None = отсутствует)
        config: политика (каноническая длина)
        field: имя поля для сообщения

    Returns:
        INVALID_ADDRESS если отсутствует или длина != config.address_length
    """
    try:
        Address.parse(raw, config.address_length)
    except ValueError as e:
        return ValidationResult.reject(FailureCode.INVALID_ADDRESS, f"{field}: {e}")
    return _OK


def check_distinct(named: list[tuple[str, bytes | None]]) -> ValidationResult:
    """Попарное различие идентификаторов.

    Отсутствующие (None/пустые) поля не сравниваются.

    Args:
        named: список (имя поля, байты) в фиксированном порядке

    Returns:
        INVALID_ADDRESS для первой совпавшей пары
    """
    present = [(name, raw) for name, raw in named if raw]
    for i, (name_a, raw_a) in enumerate(present):
        for name_b, raw_b in present[i + 1:]:
            if raw_a == raw_b:
                return ValidationResult.reject(
                    FailureCode.INVALID_ADDRESS,
                    f"{name_a} and {name_b} must differ",
                )
    return _OK


def check_coin(coin: Coin | None, allow_negative: bool = False) -> ValidationResult:
    """Проверка суммы.

    Args:
        coin: сумма
        allow_negative: True для settlement-дельт (знак не ограничен)

    Returns:
        INVALID_AMOUNT если сумма отсутствует, деноминация пустая или
        (при allow_negative=False) amount <= 0
    """
    if coin is None:
        return ValidationResult.reject(FailureCode.INVALID_AMOUNT, "amount is missing")

    if not coin.denom:
        return ValidationResult.reject(FailureCode.INVALID_AMOUNT, "amount denom is empty")

    if not allow_negative and not coin.is_positive():
        return ValidationResult.reject(
            FailureCode.INVALID_AMOUNT,
            f"amount must be positive: {coin.amount}",
        )

    return _OK


def check_entity(entity: LegalEntity | None, config: PolicyConfig) -> ValidationResult:
    """Проверка юридического лица.

    Returns:
        INVALID_ENTITY если имя пустое после strip() или роль вне таксономии
    """
    if entity is None:
        return ValidationResult.reject(FailureCode.INVALID_ENTITY, "entity is missing")

    if not entity.name.strip():
        return ValidationResult.reject(FailureCode.INVALID_ENTITY, "entity name is blank")

    if entity.entity_type not in config.entity_types:
        return ValidationResult.reject(
            FailureCode.INVALID_ENTITY,
            f"unknown entity type: {entity.entity_type!r}",
        )

    return _OK
