"""
Test suite for bignat

Contains:
- tests/unit/          : Unit tests for limb primitives, BigNat, Maybe and invariant checks
"""
