"""
Intents - Предложения изменить состояние реестра

Immutable Pydantic модели (frozen=True). Каждое намерение создаётся один
раз из полей вызывающей стороны, проходит ровно одну проверку в gatekeeper
и либо допускается дальше, либо отбрасывается с категорией отказа.

Поля-идентификаторы хранятся как сырые байты (bytes | None): некорректная
длина или отсутствие поля - это вердикт валидатора (INVALID_ADDRESS),
а не исключение при создании модели.

Виды:
- DepositMsg, SettleMsg, WithdrawMsg - движение ценностей
- BaseCreateUserMsg, CreateAssetAccountMsg, CreateOperatorMsg, CreateAdminMsg
  - создание учётных записей
- BaseFreezeAccountMsg, FreezeAdminMsg, FreezeOperatorMsg - заморозка
"""

from typing import ClassVar

from pydantic import BaseModel, Field

from custody_gate.core.domain.address import PubKey
from custody_gate.core.domain.coin import Coin
from custody_gate.core.domain.entity import LegalEntity


class Intent(BaseModel):
    """Базовый класс намерения."""

    intent_type: ClassVar[str] = "intent"

    model_config = {"frozen": True, "extra": "forbid"}


# =============================================================================
# VALUE TRANSFER
# =============================================================================


class DepositMsg(Intent):
    """
    Депозит: ввод ценностей в периметр хранения по инструкции оператора.

    Сумма строго положительная; operator, sender, recipient попарно различны.
    """

    intent_type: ClassVar[str] = "deposit"

    operator: bytes | None = Field(None, description="Оператор, инструктирующий депозит")
    sender: bytes | None = Field(None, description="Отправитель")
    recipient: bytes | None = Field(None, description="Получатель")
    amount: Coin = Field(default_factory=Coin, description="Сумма депозита")


class SettleMsg(Intent):
    """
    Settlement: сверка обязательств двух контрагентов по инструкции оператора.

    Сумма - знаковая дельта (неттинг), может быть отрицательной или нулевой.
    """

    intent_type: ClassVar[str] = "settle"

    operator: bytes | None = Field(None, description="Оператор, инструктирующий settlement")
    sender: bytes | None = Field(None, description="Отправитель")
    recipient: bytes | None = Field(None, description="Получатель")
    amount: Coin = Field(default_factory=Coin, description="Дельта settlement")


class WithdrawMsg(Intent):
    """Вывод ценностей из периметра хранения."""

    intent_type: ClassVar[str] = "withdraw"

    sender: bytes | None = Field(None, description="Отправитель")
    recipient: bytes | None = Field(None, description="Получатель")
    operator: bytes | None = Field(None, description="Оператор")
    amount: Coin = Field(default_factory=Coin, description="Сумма вывода")


# =============================================================================
# ACCOUNT CREATION
# =============================================================================


class BaseCreateUserMsg(Intent):
    """
    Создатель предлагает новую учётную запись для публичного ключа.

    Переиспользуется без изменений в CreateAssetAccountMsg, CreateOperatorMsg
    и (композицией) в CreateAdminMsg.
    """

    intent_type: ClassVar[str] = "create_user"

    creator: bytes | None = Field(None, description="Address создателя")
    pub_key: PubKey | None = Field(None, description="Публичный ключ новой учётной записи")


class CreateAssetAccountMsg(BaseCreateUserMsg):
    """Создание счёта активов (контракт базового create-user)."""

    intent_type: ClassVar[str] = "create_asset_account"


class CreateOperatorMsg(BaseCreateUserMsg):
    """Создание учётной записи оператора (контракт базового create-user)."""

    intent_type: ClassVar[str] = "create_operator"


class CreateAdminMsg(Intent):
    """
    Создание администратора юридического лица.

    Явная композиция: create-user намерение + юридическое лицо.
    """

    intent_type: ClassVar[str] = "create_admin"

    create_user: BaseCreateUserMsg = Field(
        default_factory=BaseCreateUserMsg, description="Создатель и публичный ключ"
    )
    entity: LegalEntity = Field(default_factory=LegalEntity, description="Юридическое лицо")


# =============================================================================
# FREEZE
# =============================================================================


class BaseFreezeAccountMsg(Intent):
    """Администратор замораживает целевую учётную запись."""

    intent_type: ClassVar[str] = "freeze_account"

    admin: bytes | None = Field(None, description="Address администратора")
    target: bytes | None = Field(None, description="Address замораживаемой учётной записи")


class FreezeAdminMsg(BaseFreezeAccountMsg):
    intent_type: ClassVar[str] = "freeze_admin"


class FreezeOperatorMsg(BaseFreezeAccountMsg):
    intent_type: ClassVar[str] = "freeze_operator"
