"""
Contract Validation Module

Проверка сериализованных BigUInt: JSON Schema (структура) и
BigUIntSnapshot (канонический вид, согласованность decimal и limbs).
"""

from .validators import (
    BigUIntValidator,
    load_biguint_schema,
    validate_biguint_payload,
)

__all__ = [
    "BigUIntValidator",
    "load_biguint_schema",
    "validate_biguint_payload",
]
