"""Signer derivation - чьё разрешение требует намерение.

Чистая функция на вид намерения. Вызывается только для допущенных
намерений: некорректный идентификатор здесь - ошибка вызывающей стороны
(ValueError из Address.parse), а не отказ политики.

- Deposit / Settle / Withdraw → (operator,)
- Create* → (creator,)
- Freeze* → (admin,) - подпись target никогда не требуется
"""

from custody_gate.core.domain.address import Address
from custody_gate.core.domain.intents import (
    BaseCreateUserMsg,
    BaseFreezeAccountMsg,
    CreateAdminMsg,
    DepositMsg,
    SettleMsg,
    WithdrawMsg,
)
from custody_gate.gatekeeper.config import PolicyConfig


def operator_signers(
    msg: DepositMsg | SettleMsg | WithdrawMsg, config: PolicyConfig
) -> tuple[Address, ...]:
    return (Address.parse(msg.operator, config.address_length),)


def creator_signers(msg: BaseCreateUserMsg, config: PolicyConfig) -> tuple[Address, ...]:
    return (Address.parse(msg.creator, config.address_length),)


def admin_creator_signers(msg: CreateAdminMsg, config: PolicyConfig) -> tuple[Address, ...]:
    return creator_signers(msg.create_user, config)


def freeze_signers(msg: BaseFreezeAccountMsg, config: PolicyConfig) -> tuple[Address, ...]:
    """Единственный подписант заморозки - администратор."""
    return (Address.parse(msg.admin, config.address_length),)
