"""
BigUIntSnapshot — сериализуемый снапшот беззнакового целого

Immutable Pydantic модель: внутреннее представление (radix + limbs) вместе
с десятичной записью. Полная совместимость с JSON Schema
(src/core/contracts/schema/biguint.json).
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.decimal_codec import format_decimal
from src.core.math.limb_arithmetic import RADIX, is_canonical


class BigUIntSnapshot(BaseModel):
    """
    Снапшот значения BigUInt.

    Проверки:
    - radix совпадает с основанием представления
    - limbs в каноническом виде, каждый limb в [0, RADIX)
    - decimal совпадает с десятичной записью limbs

    Immutable модель (frozen=True).
    """

    radix: int = Field(RADIX, description="Основание представления limbs")
    limbs: list[int] = Field(
        default_factory=list, description="Limbs, младший первым; пустой список = 0"
    )
    decimal: str = Field(
        ..., pattern=r"^(0|[1-9][0-9]*)$", description="Каноническая десятичная запись"
    )

    model_config = {"frozen": True}

    @field_validator("radix")
    @classmethod
    def validate_radix(cls, v: int) -> int:
        """Только основание 10^9"""
        if v != RADIX:
            raise ValueError(f"radix must be {RADIX}, got {v}")
        return v

    @field_validator("limbs")
    @classmethod
    def validate_limbs_canonical(cls, v: list[int]) -> list[int]:
        """Канонический вид и диапазон limbs"""
        if not is_canonical(v):
            raise ValueError(
                f"limbs must be in [0, {RADIX}) with a non-zero most significant limb"
            )
        return v

    @model_validator(mode="after")
    def validate_decimal_matches_limbs(self) -> "BigUIntSnapshot":
        """Десятичная запись должна соответствовать limbs"""
        expected = format_decimal(self.limbs)
        if self.decimal != expected:
            raise ValueError(f"decimal {self.decimal!r} does not match limbs ({expected!r})")
        return self
