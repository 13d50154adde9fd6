"""
Coin - Денежная величина (деноминация + знаковое количество)

Знак amount зависит от контекста: депозит и вывод требуют строго
положительной суммы, settlement допускает отрицательные дельты (неттинг).
Проверка знака выполняется валидаторами gatekeeper, а не моделью.
"""

from pydantic import BaseModel, Field


class Coin(BaseModel):
    """Денежная величина."""

    denom: str = Field("", description="Деноминация (например, 'ATM')")
    amount: int = Field(0, description="Количество (может быть отрицательным для settlement)")

    model_config = {"frozen": True}

    def is_positive(self) -> bool:
        return self.amount > 0

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"
