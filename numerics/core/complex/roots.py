"""
Roots of Unity

k-й корень степени n из единицы: exp(2πik / n).
"""

import math
from typing import Final

from numerics.core.complex.complex import Complex
from numerics.core.contracts.preconditions import precondition, precondition_in_range
from numerics.core.functions.real import Real
from numerics.core.precision.binary_float import Float64

# Четверти оборота: k / n кратно 1/4 → точные значения без cos/sin
_QUARTER_TURNS: Final[tuple[tuple[int, int], ...]] = ((1, 0), (0, 1), (-1, 0), (0, -1))


def root_of_unity(k: int, n: int, real_type: Real = Float64) -> Complex:
    """
    k-й корень степени n из единицы.

    Args:
        k: Номер корня, 0 <= k < n
        n: Степень (>= 1)
        real_type: Точность результата

    Returns:
        exp(2πik / n); кратные четверти оборота точны

    Raises:
        PreconditionViolation: если n < 1 или k вне [0, n)

    Examples:
        >>> root_of_unity(0, 4)
        Complex(1.0, 0.0)
        >>> root_of_unity(1, 4)
        Complex(0.0, 1.0)
    """
    precondition(n >= 1, f"n must be positive, got {n}")
    precondition_in_range(k, "k", 0, n)

    quarter, remainder = divmod(4 * k, n)
    if remainder == 0:
        real, imaginary = _QUARTER_TURNS[quarter]
        return Complex(real, imaginary, real_type)

    phase = real_type.cast(2.0 * math.pi * k / n)
    return Complex(real_type.cos(phase), real_type.sin(phase), real_type)
