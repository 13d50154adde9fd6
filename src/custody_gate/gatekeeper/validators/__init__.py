"""Validators - по одному валидатору на вид намерения.

- DepositValidator / SettleValidator: трёхсторонние переводы
- WithdrawValidator: вывод
- BaseCreateUserValidator: create-user (asset account, operator)
- CreateAdminValidator: create-user + юридическое лицо
- FreezeAccountValidator: заморозка (admin, operator)
"""

from .create_user import BaseCreateUserValidator, CreateAdminValidator
from .freeze_account import FreezeAccountValidator
from .transfer import DepositValidator, SettleValidator, ThreePartyTransferValidator
from .withdraw import WithdrawValidator

__all__ = [
    "ThreePartyTransferValidator",
    "DepositValidator",
    "SettleValidator",
    "WithdrawValidator",
    "BaseCreateUserValidator",
    "CreateAdminValidator",
    "FreezeAccountValidator",
]
