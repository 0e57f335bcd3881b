"""
ElementaryFunctions — Базовый уровень иерархии capabilities

Экспоненты, логарифмы, тригонометрические и гиперболические функции,
степени и корни над floating-point-подобным значением.

Conformer — это класс, чьи classmethods принимают и возвращают значения
одной точности (Float64.exp(x)), а не методы самих значений. Так же позже
сможет conform и Complex, не ломая существующие вызовы.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции тотальны: domain error → NaN, полюс → ±inf, overflow → ±inf
2. Исключения для floating-point domain errors не выбрасываются
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class ElementaryFunctions(Protocol[T]):
    """
    Capability: элементарные трансцендентные функции.

    Минимальный набор, корректно определённый над произвольным полем
    (в т.ч. над комплексными числами).
    """

    # Exponential / logarithmic

    @classmethod
    def exp(cls, x: T) -> T:
        """e^x."""
        ...

    @classmethod
    def exp_minus_one(cls, x: T) -> T:
        """e^x - 1, точнее композиции exp(x) - 1 вблизи нуля."""
        ...

    @classmethod
    def log(cls, x: T) -> T:
        """Натуральный логарифм. log(0) = -inf, log(x < 0) = NaN."""
        ...

    @classmethod
    def log_one_plus(cls, x: T) -> T:
        """ln(1 + x), точнее композиции log(1 + x) вблизи нуля."""
        ...

    # Trigonometric

    @classmethod
    def cos(cls, x: T) -> T: ...

    @classmethod
    def sin(cls, x: T) -> T: ...

    @classmethod
    def tan(cls, x: T) -> T: ...

    @classmethod
    def acos(cls, x: T) -> T: ...

    @classmethod
    def asin(cls, x: T) -> T: ...

    @classmethod
    def atan(cls, x: T) -> T: ...

    # Hyperbolic

    @classmethod
    def cosh(cls, x: T) -> T: ...

    @classmethod
    def sinh(cls, x: T) -> T: ...

    @classmethod
    def tanh(cls, x: T) -> T: ...

    @classmethod
    def acosh(cls, x: T) -> T: ...

    @classmethod
    def asinh(cls, x: T) -> T: ...

    @classmethod
    def atanh(cls, x: T) -> T: ...

    # Powers and roots

    @classmethod
    def pow(cls, x: T, y: T) -> T:
        """x^y для вещественного показателя (x < 0 с нецелым y → NaN)."""
        ...

    @classmethod
    def pow_int(cls, x: T, n: int) -> T:
        """x^n для целого показателя, определено и для отрицательных x."""
        ...

    @classmethod
    def sqrt(cls, x: T) -> T: ...

    @classmethod
    def root(cls, x: T, n: int) -> T:
        """
        Вещественный корень степени n.

        Для отрицательного x определён только при нечётном n, иначе NaN.
        """
        ...
