"""
Real — Полная capability конкретной floating-point точности

Объединяет RealFunctions с примитивами, которые каждая точность
поставляет нативно: упорядочивание, знаковый бит, классификация,
ulp, двоичный экспонент, масштабирование степенью двойки и точная
конверсия из целых.

Именно против Real следует писать обобщённые алгоритмы (Complex и т.п.).
"""

from typing import Protocol, TypeVar, runtime_checkable

from numerics.core.functions.real_functions import RealFunctions, Sign
from numerics.core.precision.formats import FloatFormat

T = TypeVar("T")


@runtime_checkable
class Real(RealFunctions[T], Protocol[T]):
    """
    Capability: floating-point точность целиком.

    Реализуется только конкретными точностями (Float32, Float64).
    """

    format: FloatFormat

    # Constants
    pi: T  # округлено к нулю
    zero: T
    one: T
    infinity: T
    nan: T
    greatest_finite: T
    least_normal: T
    least_nonzero: T
    ulp_of_one: T

    # Construction

    @classmethod
    def cast(cls, x: float) -> T:
        """Округление произвольного вещественного числа в эту точность."""
        ...

    @classmethod
    def exactly(cls, n: int) -> T | None:
        """
        Точная конверсия целого.

        Returns:
            Значение, если n представимо точно, иначе None
        """
        ...

    # Ordering and sign

    @classmethod
    def minimum(cls, x: T, y: T) -> T: ...

    @classmethod
    def maximum(cls, x: T, y: T) -> T: ...

    @classmethod
    def sign(cls, x: T) -> Sign: ...

    @classmethod
    def magnitude_of(cls, x: T) -> T: ...

    # Classification

    @classmethod
    def is_finite(cls, x: T) -> bool: ...

    @classmethod
    def is_infinite(cls, x: T) -> bool: ...

    @classmethod
    def is_nan(cls, x: T) -> bool: ...

    @classmethod
    def is_zero(cls, x: T) -> bool: ...

    @classmethod
    def is_normal(cls, x: T) -> bool: ...

    @classmethod
    def is_subnormal(cls, x: T) -> bool: ...

    # Spacing and scaling

    @classmethod
    def ulp(cls, x: T) -> T: ...

    @classmethod
    def exponent(cls, x: T) -> int:
        """floor(log2|x|) с учётом subnormal значений."""
        ...

    @classmethod
    def scalb(cls, x: T, n: int) -> T:
        """x * 2^n с одним округлением."""
        ...
