"""Policy configuration - константы политики, внедряемые в валидаторы.

Каноническая длина Address и таксономия юридических лиц передаются
явно, без глобального состояния: один и тот же экземпляр PolicyConfig
на всех участниках даёт одинаковые вердикты.
"""

from dataclasses import dataclass, field

from custody_gate.core.domain.address import ADDRESS_LENGTH, MAX_ADDRESS_LENGTH
from custody_gate.core.domain.entity import LegalEntityType


def _default_entity_types() -> frozenset[str]:
    return frozenset(t.value for t in LegalEntityType)


@dataclass(frozen=True)
class PolicyConfig:
    """Конфигурация политики gatekeeper.

    Attributes:
        address_length: каноническая длина Address (байты)
        entity_types: допустимые роли юридических лиц
    """

    address_length: int = ADDRESS_LENGTH
    entity_types: frozenset[str] = field(default_factory=_default_entity_types)

    def __post_init__(self):
        if self.address_length <= 0:
            raise ValueError(f"address_length must be positive: {self.address_length}")
        if self.address_length > MAX_ADDRESS_LENGTH:
            raise ValueError(f"address_length exceeds derivable length {MAX_ADDRESS_LENGTH}: {self.address_length}")
        if not self.entity_types:
            raise ValueError("entity_types cannot be empty")
