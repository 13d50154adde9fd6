"""Тесты для валидаторов учётных записей: create-user, asset account, operator,
admin, freeze.

Покрытие:
- INVALID_PUBKEY → INVALID_ADDRESS → SELF_CREATE (порядок create-user)
- CreateAdmin: код create-user пробрасывается, SELF_CREATE раньше INVALID_ENTITY
- Freeze: INVALID_ADDRESS, SELF_FREEZE
"""

import pytest

from custody_gate.core.domain import (
    BaseCreateUserMsg,
    BaseFreezeAccountMsg,
    CreateAdminMsg,
    CreateAssetAccountMsg,
    CreateOperatorMsg,
    FreezeAdminMsg,
    FreezeOperatorMsg,
    LegalEntity,
    LegalEntityType,
    PubKey,
)
from custody_gate.gatekeeper import FailureCode, PolicyConfig
from custody_gate.gatekeeper.validators import (
    BaseCreateUserValidator,
    CreateAdminValidator,
    FreezeAccountValidator,
)


LONG = b"hefkuhwqekufghwqekufgwqekufgkwuqgfkugfkuwgek"


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def pub() -> PubKey:
    """Публичный ключ новой учётной записи."""
    return PubKey(key=b"\x11" * 32)


@pytest.fixture
def addr() -> bytes:
    """Address создателя (производный от другого ключа)."""
    return PubKey(key=b"\x22" * 32).address().raw


@pytest.fixture
def valid_entity() -> LegalEntity:
    return LegalEntity(name="CH", entity_type=LegalEntityType.CLEARING_HOUSE.value)


# =============================================================================
# BASE CREATE USER
# =============================================================================


class TestBaseCreateUser:
    def test_nil_pubkey(self, pub):
        msg = BaseCreateUserMsg(creator=pub.address().raw)
        assert BaseCreateUserValidator().evaluate(msg).code == FailureCode.INVALID_PUBKEY

    def test_empty_pubkey(self, addr):
        msg = BaseCreateUserMsg(creator=addr, pub_key=PubKey())
        assert BaseCreateUserValidator().evaluate(msg).code == FailureCode.INVALID_PUBKEY

    def test_nil_pubkey_wins_over_missing_creator(self):
        assert BaseCreateUserValidator().evaluate(BaseCreateUserMsg()).code == FailureCode.INVALID_PUBKEY

    @pytest.mark.parametrize(
        "creator",
        [None, b"", b"foo", LONG],
        ids=["nil address", "empty address", "short address", "long address"],
    )
    def test_invalid_creator(self, pub, creator):
        msg = BaseCreateUserMsg(creator=creator, pub_key=pub)
        assert BaseCreateUserValidator().evaluate(msg).code == FailureCode.INVALID_ADDRESS

    def test_self_create(self, pub):
        msg = BaseCreateUserMsg(creator=pub.address().raw, pub_key=pub)
        result = BaseCreateUserValidator().evaluate(msg)

        assert result.accepted is False
        assert result.code == FailureCode.SELF_CREATE

    def test_good_to_go(self, addr, pub):
        msg = BaseCreateUserMsg(creator=addr, pub_key=pub)
        assert BaseCreateUserValidator().evaluate(msg).accepted is True

    def test_self_create_injected_address_length(self, pub):
        """Производный Address берёт длину из PolicyConfig."""
        validator = BaseCreateUserValidator(PolicyConfig(address_length=32))
        msg = BaseCreateUserMsg(creator=pub.address(32).raw, pub_key=pub)
        result = validator.evaluate(msg)

        assert result.code == FailureCode.SELF_CREATE

    def test_default_length_creator_under_longer_policy(self, pub):
        """20-байтовый Address не проходит проверку длины при address_length=32."""
        validator = BaseCreateUserValidator(PolicyConfig(address_length=32))
        msg = BaseCreateUserMsg(creator=pub.address().raw, pub_key=pub)
        assert validator.evaluate(msg).code == FailureCode.INVALID_ADDRESS

    def test_other_creator_under_shorter_policy(self, pub):
        validator = BaseCreateUserValidator(PolicyConfig(address_length=8))
        creator = PubKey(key=b"\x22" * 32).address(8).raw
        msg = BaseCreateUserMsg(creator=creator, pub_key=pub)
        assert validator.evaluate(msg).accepted is True


class TestCreateAssetAccountAndOperator:
    """Контракт create-user без дополнительных правил."""

    @pytest.mark.parametrize("msg_cls", [CreateAssetAccountMsg, CreateOperatorMsg])
    def test_ok(self, msg_cls, addr, pub):
        msg = msg_cls(creator=addr, pub_key=pub)
        result = BaseCreateUserValidator().evaluate(msg)

        assert result.accepted is True
        assert msg.intent_type in result.message

    @pytest.mark.parametrize("msg_cls", [CreateAssetAccountMsg, CreateOperatorMsg])
    def test_creator_is_nil(self, msg_cls, pub):
        msg = msg_cls(pub_key=pub)
        assert BaseCreateUserValidator().evaluate(msg).code == FailureCode.INVALID_ADDRESS

    @pytest.mark.parametrize("msg_cls", [CreateAssetAccountMsg, CreateOperatorMsg])
    def test_same_creator_and_account(self, msg_cls, pub):
        msg = msg_cls(creator=pub.address().raw, pub_key=pub)
        assert BaseCreateUserValidator().evaluate(msg).code == FailureCode.SELF_CREATE


# =============================================================================
# CREATE ADMIN
# =============================================================================


class TestCreateAdmin:
    def test_nil_pubkey(self, valid_entity):
        msg = CreateAdminMsg(create_user=BaseCreateUserMsg(), entity=valid_entity)
        assert CreateAdminValidator().evaluate(msg).code == FailureCode.INVALID_PUBKEY

    def test_invalid_creator_propagated(self, pub, valid_entity):
        msg = CreateAdminMsg(
            create_user=BaseCreateUserMsg(creator=b"short", pub_key=pub),
            entity=valid_entity,
        )
        assert CreateAdminValidator().evaluate(msg).code == FailureCode.INVALID_ADDRESS

    def test_invalid_entity_type(self, addr, pub):
        msg = CreateAdminMsg(
            create_user=BaseCreateUserMsg(creator=addr, pub_key=pub),
            entity=LegalEntity(name="CH", entity_type="invalid"),
        )
        assert CreateAdminValidator().evaluate(msg).code == FailureCode.INVALID_ENTITY

    def test_empty_entity_name(self, addr, pub):
        msg = CreateAdminMsg(
            create_user=BaseCreateUserMsg(creator=addr, pub_key=pub),
            entity=LegalEntity(name="    ", entity_type="ch"),
        )
        assert CreateAdminValidator().evaluate(msg).code == FailureCode.INVALID_ENTITY

    def test_self_create(self, pub, valid_entity):
        msg = CreateAdminMsg(
            create_user=BaseCreateUserMsg(creator=pub.address().raw, pub_key=pub),
            entity=valid_entity,
        )
        assert CreateAdminValidator().evaluate(msg).code == FailureCode.SELF_CREATE

    def test_self_create_injected_address_length(self, pub, valid_entity):
        validator = CreateAdminValidator(PolicyConfig(address_length=16))
        msg = CreateAdminMsg(
            create_user=BaseCreateUserMsg(creator=pub.address(16).raw, pub_key=pub),
            entity=valid_entity,
        )
        assert validator.evaluate(msg).code == FailureCode.SELF_CREATE

    def test_self_create_before_invalid_entity(self, pub):
        """SELF_CREATE проверяется раньше юридического лица."""
        msg = CreateAdminMsg(
            create_user=BaseCreateUserMsg(creator=pub.address().raw, pub_key=pub),
            entity=LegalEntity(name=" ", entity_type="invalid"),
        )
        assert CreateAdminValidator().evaluate(msg).code == FailureCode.SELF_CREATE

    def test_ok(self, addr, pub, valid_entity):
        msg = CreateAdminMsg(
            create_user=BaseCreateUserMsg(creator=addr, pub_key=pub),
            entity=valid_entity,
        )
        result = CreateAdminValidator().evaluate(msg)

        assert result.accepted is True
        assert result.code == FailureCode.OK

    @pytest.mark.parametrize("entity_type", ["cus", "gcm", "icm"])
    def test_other_roles_ok(self, addr, pub, entity_type):
        msg = CreateAdminMsg(
            create_user=BaseCreateUserMsg(creator=addr, pub_key=pub),
            entity=LegalEntity(name="Member", entity_type=entity_type),
        )
        assert CreateAdminValidator().evaluate(msg).accepted is True


# =============================================================================
# FREEZE
# =============================================================================


class TestFreezeAccount:
    @pytest.fixture
    def addr1(self) -> bytes:
        return PubKey(key=b"\x01" * 32).address().raw

    @pytest.fixture
    def addr2(self) -> bytes:
        return PubKey(key=b"\x02" * 32).address().raw

    def test_empty_msg(self):
        assert FreezeAccountValidator().evaluate(BaseFreezeAccountMsg()).code == FailureCode.INVALID_ADDRESS

    def test_empty_target(self, addr1):
        msg = BaseFreezeAccountMsg(admin=addr1)
        assert FreezeAccountValidator().evaluate(msg).code == FailureCode.INVALID_ADDRESS

    def test_short_admin(self, addr2):
        msg = BaseFreezeAccountMsg(admin=b"foo", target=addr2)
        assert FreezeAccountValidator().evaluate(msg).code == FailureCode.INVALID_ADDRESS

    def test_self_freeze(self, addr1):
        msg = BaseFreezeAccountMsg(admin=addr1, target=addr1)
        assert FreezeAccountValidator().evaluate(msg).code == FailureCode.SELF_FREEZE

    @pytest.mark.parametrize("msg_cls", [BaseFreezeAccountMsg, FreezeAdminMsg, FreezeOperatorMsg])
    def test_ok(self, msg_cls, addr1, addr2):
        msg = msg_cls(admin=addr1, target=addr2)
        assert FreezeAccountValidator().evaluate(msg).accepted is True
