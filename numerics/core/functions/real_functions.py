"""
RealFunctions — Функции, определённые только над вещественными числами

Уточняет ElementaryFunctions операциями, которые не имеют смысла над
произвольным полем: atan2, hypot, erf/erfc, exp2/exp10, log2/log10 и
семейство gamma.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. atan2(y, x) ∈ (-π, π], знак нуля определяет полуплоскость:
   atan2(0, -1) = π, atan2(-0, -1) = -π
2. hypot(x, y) не переполняется, если конечен sqrt(x² + y²)
3. sign_gamma определён даже когда gamma переполняется или обнуляется
"""

from enum import IntEnum
from typing import Protocol, TypeVar, runtime_checkable

from numerics.core.functions.elementary import ElementaryFunctions

T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class Sign(IntEnum):
    """Знак floating-point значения (знаковый бит)"""

    PLUS = 1
    MINUS = -1


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class RealFunctions(ElementaryFunctions[T], Protocol[T]):
    """
    Capability: вещественные специальные функции.
    """

    @classmethod
    def atan2(cls, y: T, x: T) -> T:
        """Угол точки (x, y) в (-π, π] по четырёхквадрантному соглашению."""
        ...

    @classmethod
    def hypot(cls, x: T, y: T) -> T:
        """
        sqrt(x² + y²) без промежуточного overflow/underflow.

        hypot(±inf, NaN) = +inf: бесконечность доминирует над NaN.
        """
        ...

    @classmethod
    def erf(cls, x: T) -> T: ...

    @classmethod
    def erfc(cls, x: T) -> T: ...

    @classmethod
    def exp2(cls, x: T) -> T: ...

    @classmethod
    def exp10(cls, x: T) -> T: ...

    @classmethod
    def log2(cls, x: T) -> T: ...

    @classmethod
    def log10(cls, x: T) -> T: ...

    @classmethod
    def gamma(cls, x: T) -> T:
        """Γ(x). gamma(±0) = ±inf, gamma(отрицательное целое) = NaN."""
        ...

    @classmethod
    def log_gamma(cls, x: T) -> T:
        """log|Γ(x)|, +inf в полюсах."""
        ...

    @classmethod
    def sign_gamma(cls, x: T) -> Sign:
        """Знак Γ(x), отделён от gamma, т.к. сама gamma может переполниться."""
        ...
