"""
Core numeric primitives, value objects, and invariants.

This module contains the foundational building blocks: capability
predicates, fixed-width integral representations, generic numeric
functions, and the rational number value type.
"""
