"""
Test suite for complex-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
