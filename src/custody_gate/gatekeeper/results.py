"""Результаты валидации намерений.

Стабильная числовая таксономия отказов (ABCI-style codes) потребляется
клиентами и SDK для отображения ошибок пользователю. Ожидаемые отказы
политики - это значения ValidationResult, а не исключения.
"""

from dataclasses import dataclass
from enum import IntEnum


# =============================================================================
# FAILURE CODES
# =============================================================================


class FailureCode(IntEnum):
    """Код отказа (стабильные числовые значения)."""

    OK = 0
    INVALID_ADDRESS = 101
    INVALID_AMOUNT = 102
    INVALID_PUBKEY = 103
    INVALID_ENTITY = 104
    SELF_CREATE = 105
    SELF_FREEZE = 106


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ValidationResult:
    """Результат проверки намерения.

    accepted=True ⇔ code == FailureCode.OK.
    """

    accepted: bool
    code: FailureCode
    message: str

    @classmethod
    def accept(cls, message: str = "") -> "ValidationResult":
        return cls(accepted=True, code=FailureCode.OK, message=message)

    @classmethod
    def reject(cls, code: FailureCode, message: str) -> "ValidationResult":
        if code == FailureCode.OK:
            raise ValueError("reject() requires a failure code")
        return cls(accepted=False, code=code, message=message)
