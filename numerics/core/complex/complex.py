"""
Complex — Комплексное число над capability Real

Immutable значение (real, imaginary) одной точности (Float32 или Float64).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Zero: значение равно нулю iff обе компоненты == 0, знак нуля не важен
2. Infinity: любая не-конечная компонента (±inf или NaN в любой кодировке)
   делает значение единственной canonical точкой бесконечности;
   все такие значения равны между собой (но не inf/NaN встроенных типов)
3. Прочие значения — различные конечные точки плоскости, равенство
   покомпонентное и точное
4. Значения неизменяемы: операции возвращают новые экземпляры

Умножение намеренно наивное: (ac - bd) + (ad + bc)i без разбора
комбинаций inf/NaN. Любой не-конечный операнд даёт canonical infinity,
более тонкие различия (как в C Annex G) не сохраняются.

Элементарные функции над Complex (exp, log, тригонометрия) пока не
реализованы; тип может позже реализовать ElementaryFunctions через
classmethods, не ломая существующих вызовов.
"""

import math
import numbers
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from numerics.core.complex import division
from numerics.core.functions.real import Real
from numerics.core.precision.binary_float import (
    Float64,
    ieee_semantics,
    real_type_of,
)


def _infer_real_type(real: Any, imaginary: Any) -> Real:
    # Python int/float не фиксируют точность (как в NEP 50): решают
    # numpy скаляры, при конфликте берётся более широкая точность
    components = (real, imaginary)
    real_types = [real_type_of(component) for component in components]
    candidates = [
        real_type
        for real_type, component in zip(real_types, components)
        if isinstance(component, np.generic)
    ]
    if not candidates:
        return Float64
    return max(candidates, key=lambda real_type: real_type.format.precision)


def _as_float_pair(value: Any) -> tuple[float, float] | None:
    if isinstance(value, Complex):
        return float(value.real), float(value.imaginary)
    if isinstance(value, numbers.Complex):
        return float(value.real), float(value.imag)
    return None


# =============================================================================
# COMPLEX
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class Complex:
    """
    Комплексное число real + imaginary·i.

    Args:
        real: Вещественная часть
        imaginary: Мнимая часть (default: 0)
        real_type: Точность (Float32/Float64); по умолчанию выводится из
            компонент: numpy.float32 → Float32, иначе Float64

    Examples:
        >>> z = Complex(2.0, 3.0)
        >>> str(z)
        '(2.0, 3.0)'
        >>> Complex(1.0, 1.0) * Complex(0.0, 2.0)
        Complex(-2.0, 2.0)
        >>> Complex(math.inf, 0.0) == Complex(0.0, -math.nan)
        True
    """

    real: Any
    imaginary: Any = 0.0
    real_type: Real = field(default=None)

    def __post_init__(self) -> None:
        real_type = self.real_type
        if real_type is None:
            real_type = _infer_real_type(self.real, self.imaginary)

        object.__setattr__(self, "real_type", real_type)
        object.__setattr__(self, "real", real_type.cast(self.real))
        object.__setattr__(self, "imaginary", real_type.cast(self.imaginary))

    @classmethod
    def _make(cls, real: Any, imaginary: Any, real_type: Real) -> "Complex":
        # Компоненты уже в точности real_type: без повторного cast
        z = object.__new__(cls)
        object.__setattr__(z, "real", real)
        object.__setattr__(z, "imaginary", imaginary)
        object.__setattr__(z, "real_type", real_type)
        return z

    # =========================================================================
    # NAMED VALUES
    # =========================================================================

    @classmethod
    def zero(cls, real_type: Real = Float64) -> "Complex":
        return cls._make(real_type.zero, real_type.zero, real_type)

    @classmethod
    def one(cls, real_type: Real = Float64) -> "Complex":
        return cls._make(real_type.one, real_type.zero, real_type)

    @classmethod
    def i(cls, real_type: Real = Float64) -> "Complex":
        """Мнимая единица (0, 1)."""
        return cls._make(real_type.zero, real_type.one, real_type)

    @classmethod
    def infinity(cls, real_type: Real = Float64) -> "Complex":
        """Canonical точка бесконечности, представлена как (inf, 0)."""
        return cls._make(real_type.infinity, real_type.zero, real_type)

    @classmethod
    def from_polar(
        cls,
        length: Any,
        phase: Any,
        real_type: Real | None = None,
    ) -> "Complex | None":
        """
        Построение из полярной формы length·(cos(phase) + i·sin(phase)).

        Args:
            length: Модуль (>= 0)
            phase: Аргумент в радианах
            real_type: Точность (по умолчанию выводится из аргументов)

        Returns:
            Complex, либо None если length < 0 или аргумент не конечен

        Examples:
            >>> Complex.from_polar(2.0, 0.0)
            Complex(2.0, 0.0)
            >>> Complex.from_polar(-1.0, 0.0) is None
            True
        """
        if real_type is None:
            real_type = _infer_real_type(length, phase)

        length = real_type.cast(length)
        phase = real_type.cast(phase)
        if not real_type.is_finite(length) or not real_type.is_finite(phase):
            return None
        if length < 0:
            return None

        return cls._make(
            length * real_type.cos(phase),
            length * real_type.sin(phase),
            real_type,
        )

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    @property
    def is_finite(self) -> bool:
        """Обе компоненты конечны (иначе это canonical infinity)."""
        return self.real_type.is_finite(self.real) and self.real_type.is_finite(
            self.imaginary
        )

    @property
    def is_zero(self) -> bool:
        return self.real == 0 and self.imaginary == 0

    @property
    def is_normal(self) -> bool:
        """Конечно и хотя бы одна компонента нормальна."""
        return self.is_finite and (
            self.real_type.is_normal(self.real)
            or self.real_type.is_normal(self.imaginary)
        )

    @property
    def is_subnormal(self) -> bool:
        return self.is_finite and not self.is_normal and not self.is_zero

    # =========================================================================
    # DERIVED VIEWS
    # =========================================================================

    @property
    def magnitude(self) -> Any:
        """Infinity norm max(|real|, |imaginary|); inf для не-конечных."""
        if not self.is_finite:
            return self.real_type.infinity
        return max(abs(self.real), abs(self.imaginary))

    @property
    def length(self) -> Any:
        """Евклидова норма через hypot (без промежуточного overflow)."""
        if not self.is_finite:
            return self.real_type.infinity
        return self.real_type.hypot(self.real, self.imaginary)

    @property
    @ieee_semantics
    def length_squared(self) -> Any:
        """real² + imaginary², может переполниться/обнулиться."""
        return self.real * self.real + self.imaginary * self.imaginary

    @property
    def phase(self) -> Any:
        """
        Аргумент atan2(imaginary, real) в (-π, π].

        Для нуля и бесконечности направление не определено → NaN.
        """
        if not self.is_finite or self.is_zero:
            return self.real_type.nan
        return self.real_type.atan2(self.imaginary, self.real)

    @property
    def polar(self) -> tuple[Any, Any]:
        """(length, phase)."""
        return self.length, self.phase

    @property
    def conjugate(self) -> "Complex":
        return self._make(self.real, -self.imaginary, self.real_type)

    @property
    def reciprocal(self) -> "Complex | None":
        """
        1 / self, если умножение на него безопасно заменяет деление.

        None для значений у края диапазона: тогда делить напрямую.
        """
        return division.reciprocal(self)

    # =========================================================================
    # SCALAR OPERATIONS
    # =========================================================================

    @ieee_semantics
    def multiplied_by(self, scalar: Any) -> "Complex":
        """Умножение обеих компонент на вещественное число."""
        scalar = self.real_type.cast(scalar)
        return self._make(self.real * scalar, self.imaginary * scalar, self.real_type)

    @ieee_semantics
    def divided_by(self, scalar: Any) -> "Complex":
        """
        Деление обеих компонент на вещественное число.

        Деление на ноль даёт canonical infinity (как и z / 0).
        """
        scalar = self.real_type.cast(scalar)
        if scalar == 0:
            return self.infinity(self.real_type)
        return self._make(self.real / scalar, self.imaginary / scalar, self.real_type)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def _coerce(self, other: Any) -> "Complex | None":
        if isinstance(other, Complex):
            if other.real_type is not self.real_type:
                raise TypeError(
                    f"cannot mix Complex over {self.real_type.__name__} "
                    f"and {other.real_type.__name__}"
                )
            return other
        if isinstance(other, numbers.Complex):
            return Complex(other.real, other.imag, self.real_type)
        return None

    def __neg__(self) -> "Complex":
        return self._make(-self.real, -self.imaginary, self.real_type)

    def __pos__(self) -> "Complex":
        return self

    @ieee_semantics
    def __add__(self, other: Any) -> "Complex":
        w = self._coerce(other)
        if w is None:
            return NotImplemented
        return self._make(
            self.real + w.real, self.imaginary + w.imaginary, self.real_type
        )

    __radd__ = __add__

    @ieee_semantics
    def __sub__(self, other: Any) -> "Complex":
        w = self._coerce(other)
        if w is None:
            return NotImplemented
        return self._make(
            self.real - w.real, self.imaginary - w.imaginary, self.real_type
        )

    def __rsub__(self, other: Any) -> "Complex":
        w = self._coerce(other)
        if w is None:
            return NotImplemented
        return w - self

    @ieee_semantics
    def __mul__(self, other: Any) -> "Complex":
        if isinstance(other, numbers.Real):
            return self.multiplied_by(other)

        w = self._coerce(other)
        if w is None:
            return NotImplemented

        a, b = self.real, self.imaginary
        c, d = w.real, w.imaginary
        return self._make(a * c - b * d, a * d + b * c, self.real_type)

    __rmul__ = __mul__

    @ieee_semantics
    def __truediv__(self, other: Any) -> "Complex":
        if isinstance(other, numbers.Real):
            return self.divided_by(other)

        w = self._coerce(other)
        if w is None:
            return NotImplemented
        return division.divide(self, w)

    @ieee_semantics
    def __rtruediv__(self, other: Any) -> "Complex":
        z = self._coerce(other)
        if z is None:
            return NotImplemented
        return division.divide(z, self)

    # =========================================================================
    # EQUALITY AND CONVERSIONS
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        try:
            theirs = _as_float_pair(other)
        except OverflowError:
            # целое вне диапазона float не равно ни одному значению
            return False
        if theirs is None:
            return NotImplemented

        mine = (float(self.real), float(self.imaginary))
        mine_finite = math.isfinite(mine[0]) and math.isfinite(mine[1])
        theirs_finite = math.isfinite(theirs[0]) and math.isfinite(theirs[1])

        if mine_finite and theirs_finite:
            # 0.0 == -0.0: все нули равны
            return mine[0] == theirs[0] and mine[1] == theirs[1]
        if not isinstance(other, Complex):
            # canonical infinity существует только среди Complex:
            # hash(nan) и hash(complex(inf, 1.0)) не равны hash(infinity)
            return False
        return not mine_finite and not theirs_finite

    def __hash__(self) -> int:
        if not self.is_finite:
            return hash(math.inf)
        # совпадает с hash(complex) и hash(float) для равных значений
        return hash(complex(float(self.real), float(self.imaginary)))

    def __bool__(self) -> bool:
        return not self.is_zero

    def __abs__(self) -> Any:
        return self.length

    def __complex__(self) -> complex:
        return complex(float(self.real), float(self.imaginary))

    def __str__(self) -> str:
        return f"({self.real}, {self.imaginary})"

    def __repr__(self) -> str:
        if self.real_type is Float64:
            return f"Complex({self.real}, {self.imaginary})"
        return (
            f"Complex({self.real}, {self.imaginary}, "
            f"real_type={self.real_type.__name__})"
        )
