"""
Domain models and value objects.

Contains the BigUInt value type and its serializable snapshot.
"""

from src.core.domain.snapshot import BigUIntSnapshot
from src.core.domain.biguint import BigUInt, power, power_eq

__all__ = [
    # Value type
    "BigUInt",
    "power",
    "power_eq",
    # Snapshot model
    "BigUIntSnapshot",
]
