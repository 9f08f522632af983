"""
Core value types, mathematical primitives, and contracts.

This module contains the foundational building blocks; none of them hold
state or depend on external systems.
"""
