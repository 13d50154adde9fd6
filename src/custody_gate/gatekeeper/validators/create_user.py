"""Валидаторы создания учётных записей.

BaseCreateUserValidator - правила create-user (первое нарушение побеждает):
1. pub_key отсутствует → INVALID_PUBKEY
2. creator отсутствует / неверной длины → INVALID_ADDRESS
3. creator == pub_key.address(address_length) → SELF_CREATE (создатель предлагает себя)

CreateAssetAccountMsg и CreateOperatorMsg используют базовый контракт без
дополнений. CreateAdminValidator - явная композиция: сначала create-user
(код отказа пробрасывается без изменений), затем юридическое лицо.
SELF_CREATE проверяется раньше INVALID_ENTITY.
"""

from custody_gate.core.domain.intents import BaseCreateUserMsg, CreateAdminMsg
from custody_gate.gatekeeper.config import PolicyConfig
from custody_gate.gatekeeper.results import FailureCode, ValidationResult
from custody_gate.gatekeeper.rules import check_address, check_entity


class BaseCreateUserValidator:
    """Правила create-user (creator + pub_key)."""

    def __init__(self, config: PolicyConfig | None = None):
        self.config = config or PolicyConfig()

    def evaluate(self, msg: BaseCreateUserMsg) -> ValidationResult:
        # 1. Публичный ключ
        if msg.pub_key is None or msg.pub_key.is_empty():
            return ValidationResult.reject(FailureCode.INVALID_PUBKEY, "pub_key is missing")

        # 2. Создатель
        result = check_address(msg.creator, self.config, "creator")
        if not result.accepted:
            return result

        # 3. Самосоздание
        if msg.pub_key.address(self.config.address_length).raw == msg.creator:
            return ValidationResult.reject(
                FailureCode.SELF_CREATE,
                "creator cannot create an account for its own pub_key",
            )

        return ValidationResult.accept(f"{msg.intent_type} accepted")


class CreateAdminValidator:
    """Правила CreateAdminMsg: create-user, затем юридическое лицо."""

    def __init__(self, config: PolicyConfig | None = None):
        self.config = config or PolicyConfig()
        self._create_user = BaseCreateUserValidator(self.config)

    def evaluate(self, msg: CreateAdminMsg) -> ValidationResult:
        result = self._create_user.evaluate(msg.create_user)
        if not result.accepted:
            return result

        result = check_entity(msg.entity, self.config)
        if not result.accepted:
            return result

        return ValidationResult.accept(
            f"create_admin accepted: {msg.entity.name.strip()} ({msg.entity.entity_type})"
        )
