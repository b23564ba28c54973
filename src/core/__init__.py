"""
Core numeric primitives and contracts.

This module contains the exact fraction type, its decimal domain and the
text contract used to exchange fractions with other components.
"""
