"""IntentGatekeeper - единая точка допуска намерений.

Фиксированный реестр: класс намерения → (валидатор, signer derivation).
Поиск по точному типу: одинаковый вердикт на всех участниках, без
зависимости от порядка итерации.

Контракт для слоя применения состояния:
- validate(intent) → ValidationResult; при отказе намерение отбрасывается
  (без частичного применения и без повторов)
- signers(intent) → упорядоченный набор Address
- admit(intent) → AdmissionDecision (результат + подписанты)
"""

import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from custody_gate.core.domain.address import Address
from custody_gate.core.domain.intents import (
    BaseCreateUserMsg,
    BaseFreezeAccountMsg,
    CreateAdminMsg,
    CreateAssetAccountMsg,
    CreateOperatorMsg,
    DepositMsg,
    FreezeAdminMsg,
    FreezeOperatorMsg,
    Intent,
    SettleMsg,
    WithdrawMsg,
)
from custody_gate.gatekeeper.config import PolicyConfig
from custody_gate.gatekeeper.results import ValidationResult
from custody_gate.gatekeeper.signers import (
    admin_creator_signers,
    creator_signers,
    freeze_signers,
    operator_signers,
)
from custody_gate.gatekeeper.validators import (
    BaseCreateUserValidator,
    CreateAdminValidator,
    DepositValidator,
    FreezeAccountValidator,
    SettleValidator,
    WithdrawValidator,
)

logger = logging.getLogger(__name__)


SignerFn = Callable[[Intent, PolicyConfig], tuple[Address, ...]]


class IntentValidator(Protocol):
    def evaluate(self, msg: Intent) -> ValidationResult:
        """Вердикт по намерению (первое нарушенное правило)."""


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class AdmissionDecision:
    """Решение о допуске намерения."""

    result: ValidationResult
    signers: tuple[Address, ...]

    @property
    def admitted(self) -> bool:
        return self.result.accepted


# =============================================================================
# GATEKEEPER
# =============================================================================


class IntentGatekeeper:
    """Диспетчер валидации и signer derivation по виду намерения."""

    def __init__(self, config: PolicyConfig | None = None):
        """
        Args:
            config: политика (опционально, используется default)
        """
        self.config = config or PolicyConfig()

        deposit = DepositValidator(self.config)
        settle = SettleValidator(self.config)
        withdraw = WithdrawValidator(self.config)
        create_user = BaseCreateUserValidator(self.config)
        create_admin = CreateAdminValidator(self.config)
        freeze = FreezeAccountValidator(self.config)

        self._registry: dict[type, tuple[IntentValidator, SignerFn]] = {
            DepositMsg: (deposit, operator_signers),
            SettleMsg: (settle, operator_signers),
            WithdrawMsg: (withdraw, operator_signers),
            BaseCreateUserMsg: (create_user, creator_signers),
            CreateAssetAccountMsg: (create_user, creator_signers),
            CreateOperatorMsg: (create_user, creator_signers),
            CreateAdminMsg: (create_admin, admin_creator_signers),
            BaseFreezeAccountMsg: (freeze, freeze_signers),
            FreezeAdminMsg: (freeze, freeze_signers),
            FreezeOperatorMsg: (freeze, freeze_signers),
        }

    def supported_types(self) -> list[str]:
        return sorted(cls.intent_type for cls in self._registry)

    def _lookup(self, intent: Intent) -> tuple[IntentValidator, SignerFn]:
        entry = self._registry.get(type(intent))
        if entry is None:
            raise TypeError(f"unsupported intent kind: {type(intent).__name__}")
        return entry

    def validate(self, intent: Intent) -> ValidationResult:
        """Структурная проверка и проверка политики.

        Raises:
            TypeError: если вид намерения не зарегистрирован
        """
        validator, _ = self._lookup(intent)
        result = validator.evaluate(intent)

        if result.accepted:
            logger.debug("intent %s accepted", intent.intent_type)
        else:
            logger.debug(
                "intent %s rejected: code=%s (%d) %s",
                intent.intent_type,
                result.code.name,
                int(result.code),
                result.message,
            )
        return result

    def signers(self, intent: Intent) -> tuple[Address, ...]:
        """Подписанты, чьё разрешение требует намерение.

        Raises:
            TypeError: если вид намерения не зарегистрирован
            ValueError: если идентификатор подписанта некорректен
        """
        _, signer_fn = self._lookup(intent)
        return signer_fn(intent, self.config)

    def admit(self, intent: Intent) -> AdmissionDecision:
        """Валидация, затем (только при допуске) signer derivation."""
        result = self.validate(intent)
        if not result.accepted:
            return AdmissionDecision(result=result, signers=())
        return AdmissionDecision(result=result, signers=self.signers(intent))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


_DEFAULT_GATEKEEPER = IntentGatekeeper()


def validate_intent(intent: Intent) -> ValidationResult:
    """Валидация намерения с политикой по умолчанию."""
    return _DEFAULT_GATEKEEPER.validate(intent)


def required_signers(intent: Intent) -> tuple[Address, ...]:
    """Подписанты намерения с политикой по умолчанию."""
    return _DEFAULT_GATEKEEPER.signers(intent)
