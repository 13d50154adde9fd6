"""Валидаторы трёхсторонних переводов: Deposit и Settle.

Порядок проверок (первое нарушенное правило определяет код):
1. Сумма (пустое намерение → INVALID_AMOUNT)
2. Формат operator, sender, recipient (по порядку)
3. Попарное различие operator, sender, recipient

Различие Deposit/Settle - только в знаке суммы:
- Deposit: строго положительная сумма (ввод в периметр хранения)
- Settle: знаковая дельта, допускается отрицательная и нулевая
"""

from custody_gate.core.domain.intents import DepositMsg, SettleMsg
from custody_gate.gatekeeper.config import PolicyConfig
from custody_gate.gatekeeper.results import ValidationResult
from custody_gate.gatekeeper.rules import check_address, check_coin, check_distinct


class ThreePartyTransferValidator:
    """Общие правила operator/sender/recipient + сумма."""

    allow_negative: bool = False

    def __init__(self, config: PolicyConfig | None = None):
        """
        Args:
            config: политика (опционально, используется default)
        """
        self.config = config or PolicyConfig()

    def evaluate(self, msg: DepositMsg | SettleMsg) -> ValidationResult:
        # 1. Сумма
        result = check_coin(msg.amount, allow_negative=self.allow_negative)
        if not result.accepted:
            return result

        # 2. Формат идентификаторов
        parties = [
            ("operator", msg.operator),
            ("sender", msg.sender),
            ("recipient", msg.recipient),
        ]
        for field, raw in parties:
            result = check_address(raw, self.config, field)
            if not result.accepted:
                return result

        # 3. Попарное различие
        result = check_distinct(parties)
        if not result.accepted:
            return result

        return ValidationResult.accept(
            f"{msg.intent_type} accepted: {msg.amount}"
        )


class DepositValidator(ThreePartyTransferValidator):
    """Deposit: сумма строго положительная."""

    allow_negative = False


class SettleValidator(ThreePartyTransferValidator):
    """Settle: знак суммы не ограничен (неттинг)."""

    allow_negative = True
