"""
Complex value type над capability Real.
"""

from numerics.core.complex.complex import Complex
from numerics.core.complex.division import (
    divide,
    divide_each,
    is_well_scaled,
    reciprocal,
    rescaled_divide,
)
from numerics.core.complex.roots import root_of_unity

__all__ = [
    # Type
    "Complex",
    # Division
    "divide",
    "divide_each",
    "is_well_scaled",
    "reciprocal",
    "rescaled_divide",
    # Helpers
    "root_of_unity",
]
