"""Валидатор заморозки учётной записи (BaseFreezeAccountMsg и производные).

Порядок проверок:
1. Формат admin
2. Формат target
3. admin == target → SELF_FREEZE
"""

from custody_gate.core.domain.intents import BaseFreezeAccountMsg
from custody_gate.gatekeeper.config import PolicyConfig
from custody_gate.gatekeeper.results import FailureCode, ValidationResult
from custody_gate.gatekeeper.rules import check_address


class FreezeAccountValidator:
    """Правила заморозки: администратор действует над целевой записью."""

    def __init__(self, config: PolicyConfig | None = None):
        self.config = config or PolicyConfig()

    def evaluate(self, msg: BaseFreezeAccountMsg) -> ValidationResult:
        result = check_address(msg.admin, self.config, "admin")
        if not result.accepted:
            return result

        result = check_address(msg.target, self.config, "target")
        if not result.accepted:
            return result

        if msg.admin == msg.target:
            return ValidationResult.reject(FailureCode.SELF_FREEZE, "admin cannot freeze itself")

        return ValidationResult.accept(f"{msg.intent_type} accepted")
