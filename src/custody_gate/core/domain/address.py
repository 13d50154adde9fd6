"""
Address / PubKey - Идентификаторы участников реестра

Address - непрозрачный идентификатор фиксированной длины, производный от
публичного ключа. Единственный допустимый способ получить Address из сырых
байтов - Address.parse() с проверкой канонической длины.

PubKey - непрозрачный публичный ключ. Криптографическая проверка здесь
не выполняется, только наличие.
"""

import hashlib
from dataclasses import dataclass
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# CONSTANTS
# =============================================================================

# Каноническая длина идентификатора (байты)
ADDRESS_LENGTH: Final[int] = 20

# Предел длины производного Address: размер SHA-256 digest
MAX_ADDRESS_LENGTH: Final[int] = hashlib.sha256().digest_size


# =============================================================================
# ADDRESS
# =============================================================================


@dataclass(frozen=True)
class Address:
    """
    Идентификатор участника фиксированной длины.

    Immutable value object: равенство и хэш по значению байтов.
    Длина проверяется на границе (Address.parse), дальше по коду
    Address считается корректным.
    """

    raw: bytes

    def __post_init__(self):
        if not isinstance(self.raw, bytes):
            raise TypeError(f"Address expects bytes, got {type(self.raw).__name__}")
        if not self.raw:
            raise ValueError("Address cannot be empty")

    @classmethod
    def parse(cls, raw: bytes | None, length: int = ADDRESS_LENGTH) -> "Address":
        """
        Конструктор с проверкой канонической длины.

        Args:
            raw: Сырые байты идентификатора (None = отсутствует)
            length: Каноническая длина

        Returns:
            Address

        Raises:
            ValueError: Если идентификатор отсутствует или длина неверна
        """
        if raw is None or len(raw) == 0:
            raise ValueError("address is missing")
        if len(raw) != length:
            raise ValueError(f"address length {len(raw)} != {length}")
        return cls(bytes(raw))

    def hex(self) -> str:
        return self.raw.hex()

    def __len__(self) -> int:
        return len(self.raw)

    def __str__(self) -> str:
        return self.raw.hex().upper()


# =============================================================================
# PUBKEY
# =============================================================================


class PubKey(BaseModel):
    """
    Публичный ключ участника.

    Инвариант - только наличие байтов ключа. Address выводится как первые
    length байтов SHA-256 от ключа (по умолчанию ADDRESS_LENGTH).
    """

    key: bytes = Field(b"", description="Байты публичного ключа")

    model_config = {"frozen": True}

    def is_empty(self) -> bool:
        return len(self.key) == 0

    def address(self, length: int = ADDRESS_LENGTH) -> Address:
        """
        Address, производный от ключа.

        Args:
            length: Каноническая длина Address (1..MAX_ADDRESS_LENGTH)

        Raises:
            ValueError: Если ключ пустой или длина вне диапазона
        """
        if self.is_empty():
            raise ValueError("cannot derive address from empty pubkey")
        if not 0 < length <= MAX_ADDRESS_LENGTH:
            raise ValueError(f"address length {length} outside 1..{MAX_ADDRESS_LENGTH}")
        digest = hashlib.sha256(self.key).digest()
        return Address(digest[:length])
