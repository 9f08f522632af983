"""
Test suite for numcore

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Hypothesis property tests for numerical invariants
"""
