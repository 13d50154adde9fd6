"""
Domain models and value objects.

Contains identity and value primitives (Address, PubKey, Coin), the legal
entity taxonomy and the transaction-intent models.
"""

from custody_gate.core.domain.address import ADDRESS_LENGTH, MAX_ADDRESS_LENGTH, Address, PubKey
from custody_gate.core.domain.coin import Coin
from custody_gate.core.domain.entity import LegalEntity, LegalEntityType
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

__all__ = [
    # Primitives
    "ADDRESS_LENGTH",
    "MAX_ADDRESS_LENGTH",
    "Address",
    "PubKey",
    "Coin",
    # Legal entity
    "LegalEntity",
    "LegalEntityType",
    # Intents
    "Intent",
    "DepositMsg",
    "SettleMsg",
    "WithdrawMsg",
    "BaseCreateUserMsg",
    "CreateAssetAccountMsg",
    "CreateOperatorMsg",
    "CreateAdminMsg",
    "BaseFreezeAccountMsg",
    "FreezeAdminMsg",
    "FreezeOperatorMsg",
]
