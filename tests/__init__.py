"""
Test suite for biguint-core

Contains:
- tests/unit/          : Unit tests for limb arithmetic, long division,
                         decimal codec, BigUInt, snapshots and contracts
"""
