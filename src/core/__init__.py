"""
Core domain models, integer primitives, display helpers and contracts.

This module contains the building blocks of the numeric pipeline; none of
them hold state or touch external systems.
"""
