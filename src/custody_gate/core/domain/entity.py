"""
LegalEntity - Юридическое лицо, привязанное к учётной записи администратора

Закрытая таксономия ролей:
- ch  - ClearingHouse
- cus - Custodian
- gcm - GeneralClearingMember
- icm - IndividualClearingMember
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class LegalEntityType(str, Enum):
    """Роль юридического лица"""

    CLEARING_HOUSE = "ch"
    CUSTODIAN = "cus"
    GENERAL_CLEARING_MEMBER = "gcm"
    INDIVIDUAL_CLEARING_MEMBER = "icm"


# =============================================================================
# LEGAL ENTITY MODEL
# =============================================================================


class LegalEntity(BaseModel):
    """
    Юридическое лицо.

    entity_type хранится как строка: значения вне таксономии должны
    доходить до валидатора и отклоняться им с кодом INVALID_ENTITY.
    """

    name: str = Field("", description="Наименование юридического лица")
    entity_type: str = Field("", description="Роль (см. LegalEntityType)")

    model_config = {"frozen": True}

    def known_type(self) -> LegalEntityType | None:
        """Роль из таксономии или None для неизвестного значения."""
        try:
            return LegalEntityType(self.entity_type)
        except ValueError:
            return None
