"""
NumberSnapshot — модель внешнего представления числа

Immutable Pydantic модель для обмена и хранения: основание плюс десятичное
значение. Полная совместимость с JSON Schema
(ringnum/core/contracts/schema/number_snapshot.json).
"""

from pydantic import BaseModel, Field, field_validator

from ringnum.core.config import MIN_BASE
from ringnum.core.domain.number_list import NumberList
from ringnum.core.math.decimal_arithmetic import strip_leading_zeros


class NumberSnapshot(BaseModel):
    """
    Снапшот числа: base + DecimalString.

    Immutable модель (frozen=True). Пустой NumberList сохраняется как "0".
    """

    base: int = Field(..., ge=MIN_BASE, description="Основание системы счисления")
    decimal: str = Field(
        ...,
        min_length=1,
        pattern=r"^[0-9]+$",
        description="Десятичное значение без знака",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("decimal")
    @classmethod
    def normalize_decimal(cls, v: str) -> str:
        """Нормализация: ведущие нули отбрасываются."""
        return strip_leading_zeros(v)

    @classmethod
    def from_number(cls, number: NumberList) -> "NumberSnapshot":
        return cls(base=number.base, decimal=number.to_decimal_string())

    def to_number(self) -> NumberList:
        """Восстановление NumberList в основании снапшота."""
        return NumberList.from_decimal(self.decimal, self.base)
