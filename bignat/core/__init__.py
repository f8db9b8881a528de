"""
Core domain models, limb primitives, and invariants.

This module contains the value model of big natural numbers, independent
of any arithmetic layered on top of it.
"""
