"""Валидатор вывода ценностей (Withdraw).

Порядок проверок:
1. Сумма строго положительная
2. Формат sender, recipient
3. sender != recipient (независимо от operator)
4. Формат operator
5. operator отличен от sender и recipient
"""

from custody_gate.core.domain.intents import WithdrawMsg
from custody_gate.gatekeeper.config import PolicyConfig
from custody_gate.gatekeeper.results import ValidationResult
from custody_gate.gatekeeper.rules import check_address, check_coin, check_distinct


class WithdrawValidator:
    """Правила WithdrawMsg."""

    def __init__(self, config: PolicyConfig | None = None):
        self.config = config or PolicyConfig()

    def evaluate(self, msg: WithdrawMsg) -> ValidationResult:
        """Оценка намерения вывода.

        Args:
            msg: намерение вывода

        Returns:
            ValidationResult (INVALID_AMOUNT / INVALID_ADDRESS / accept)
        """
        # 1. Сумма
        result = check_coin(msg.amount, allow_negative=False)
        if not result.accepted:
            return result

        # 2. Контрагенты
        for field, raw in (("sender", msg.sender), ("recipient", msg.recipient)):
            result = check_address(raw, self.config, field)
            if not result.accepted:
                return result

        # 3. sender != recipient
        result = check_distinct([("sender", msg.sender), ("recipient", msg.recipient)])
        if not result.accepted:
            return result

        # 4-5. Оператор - третий, отдельный участник
        result = check_address(msg.operator, self.config, "operator")
        if not result.accepted:
            return result

        result = check_distinct(
            [("operator", msg.operator), ("sender", msg.sender), ("recipient", msg.recipient)]
        )
        if not result.accepted:
            return result

        return ValidationResult.accept(f"withdraw accepted: {msg.amount}")
