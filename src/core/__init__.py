"""
Core domain models, mathematical primitives, and input contracts.

This module contains the immutable complex-number value type, the pure
numeric functions it is built from, and the parsing/rendering contracts
of its constructor.
"""
