"""
Core numeric primitives, domain models, and contracts.

This module contains the foundational building blocks of the counter:
the mixed-radix counter itself, the unsigned widths its digits are drawn
from, and the serializable state around it.
"""
