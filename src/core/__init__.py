"""
Core arithmetic primitives, value types, and serialization contracts.

This package is self-contained: limb arithmetic and long division in
src.core.math, the BigUInt value type in src.core.domain, and JSON
contract validation in src.core.contracts.
"""
