"""
BinaryFloat — Реализация capability Real для двоичных IEEE 754 точностей

Точности:
- Float32: значения numpy.float32
- Float64: значения Python float

Все функции выполняются numpy ufuncs внутри numpy.errstate(all="ignore"):
IEEE-результат (NaN, ±inf, ±0) и есть ответ, предупреждения не нужны.
Функции, которых нет в numpy (erf, erfc, gamma, lgamma), вычисляются через
math в binary64; ValueError/OverflowError из math переводятся в IEEE-результат.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не выбрасывает исключение на floating-point domain error
2. Результат всегда имеет тип значений своей точности
3. FloatFormat класса совпадает с numpy.finfo его dtype (проверка при определении)
4. pi округлено к нулю (угол pi не попадает в чужой квадрант)
"""

import logging
import math
import numbers
from typing import Any, Callable, ClassVar, Final

import numpy as np

from numerics.core.contracts.preconditions import precondition
from numerics.core.functions.real_functions import Sign
from numerics.core.precision.formats import FLOAT32, FLOAT64, FloatFormat

logger = logging.getLogger(__name__)

# Ограничение сдвига для scalb: за этими пределами результат уже 0 или inf
# для любой поддерживаемой точности
SCALB_SHIFT_LIMIT: Final[int] = 1 << 16

# Тип значения → реализация Real
_REAL_TYPES: dict[type, type["BinaryFloat"]] = {}


def ieee_semantics(func: Callable) -> Callable:
    """Выполнение func с отключёнными numpy floating-point предупреждениями."""
    return np.errstate(all="ignore")(func)


# =============================================================================
# BASE IMPLEMENTATION
# =============================================================================


class BinaryFloat:
    """
    Общая реализация Real над numpy dtype.

    Подкласс задаёт dtype (numpy скаляр для вычислений), _box (тип значений
    точности, который видит пользователь) и format.
    """

    dtype: ClassVar[type[np.floating]]
    format: ClassVar[FloatFormat]
    _box: ClassVar[Callable[[Any], Any]]

    pi: ClassVar[Any]
    zero: ClassVar[Any]
    one: ClassVar[Any]
    infinity: ClassVar[Any]
    nan: ClassVar[Any]
    greatest_finite: ClassVar[Any]
    least_normal: ClassVar[Any]
    least_nonzero: ClassVar[Any]
    ulp_of_one: ClassVar[Any]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        finfo = np.finfo(cls.dtype)
        if (
            finfo.nmant != cls.format.significand_bits
            or finfo.nexp != cls.format.exponent_bits
        ):
            raise TypeError(
                f"{cls.__name__}: format {cls.format.name} does not match "
                f"{np.dtype(cls.dtype).name} (nmant={finfo.nmant}, nexp={finfo.nexp})"
            )

        cls.zero = cls.cast(0.0)
        cls.one = cls.cast(1.0)
        cls.infinity = cls.cast(math.inf)
        cls.nan = cls.cast(math.nan)
        cls.greatest_finite = cls._box(finfo.max)
        cls.least_normal = cls._box(finfo.smallest_normal)
        cls.least_nonzero = cls._box(finfo.smallest_subnormal)
        cls.ulp_of_one = cls._box(finfo.eps)
        cls.pi = cls._pi_toward_zero()

        _REAL_TYPES[cls.dtype] = cls
        _REAL_TYPES[type(cls.zero)] = cls
        logger.debug("registered real type %s (%s)", cls.__name__, cls.format.name)

    @classmethod
    def _pi_toward_zero(cls) -> Any:
        # math.pi сам по себе меньше π; если округление в точность ушло
        # выше него, значит и выше π
        candidate = cls.cast(math.pi)
        if float(candidate) > math.pi:
            candidate = cls._box(np.nextafter(cls.dtype(candidate), cls.dtype(0.0)))
        return candidate

    @classmethod
    @ieee_semantics
    def _apply(cls, ufunc: np.ufunc, *args: Any) -> Any:
        return cls._box(ufunc(*[cls.dtype(arg) for arg in args]))

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    @ieee_semantics
    def cast(cls, x: Any) -> Any:
        """
        Округление вещественного числа в точность (IEEE: overflow → ±inf).

        Examples:
            >>> Float64.cast(10 ** 400)
            inf
        """
        try:
            value = cls.dtype(x)
        except OverflowError:
            value = cls.dtype(-math.inf if x < 0 else math.inf)
        return cls._box(value)

    @classmethod
    @ieee_semantics
    def exactly(cls, n: int) -> Any | None:
        """
        Точная конверсия целого числа.

        Args:
            n: Целое произвольной величины

        Returns:
            Значение точности, если n представимо точно, иначе None

        Examples:
            >>> Float64.exactly(2 ** 53)
            9007199254740992.0
            >>> Float64.exactly(2 ** 53 + 1) is None
            True
        """
        if not isinstance(n, numbers.Integral):
            raise TypeError(f"exactly() expects an integer, got {type(n).__name__}")

        n = int(n)
        try:
            value = cls.dtype(float(n))
        except OverflowError:
            return None

        if not math.isfinite(value) or int(value) != n:
            return None
        return cls._box(value)

    # =========================================================================
    # ELEMENTARY FUNCTIONS
    # =========================================================================

    @classmethod
    def exp(cls, x: Any) -> Any:
        return cls._apply(np.exp, x)

    @classmethod
    def exp_minus_one(cls, x: Any) -> Any:
        return cls._apply(np.expm1, x)

    @classmethod
    def log(cls, x: Any) -> Any:
        return cls._apply(np.log, x)

    @classmethod
    def log_one_plus(cls, x: Any) -> Any:
        return cls._apply(np.log1p, x)

    @classmethod
    def cos(cls, x: Any) -> Any:
        return cls._apply(np.cos, x)

    @classmethod
    def sin(cls, x: Any) -> Any:
        return cls._apply(np.sin, x)

    @classmethod
    def tan(cls, x: Any) -> Any:
        return cls._apply(np.tan, x)

    @classmethod
    def acos(cls, x: Any) -> Any:
        return cls._apply(np.arccos, x)

    @classmethod
    def asin(cls, x: Any) -> Any:
        return cls._apply(np.arcsin, x)

    @classmethod
    def atan(cls, x: Any) -> Any:
        return cls._apply(np.arctan, x)

    @classmethod
    def cosh(cls, x: Any) -> Any:
        return cls._apply(np.cosh, x)

    @classmethod
    def sinh(cls, x: Any) -> Any:
        return cls._apply(np.sinh, x)

    @classmethod
    def tanh(cls, x: Any) -> Any:
        return cls._apply(np.tanh, x)

    @classmethod
    def acosh(cls, x: Any) -> Any:
        return cls._apply(np.arccosh, x)

    @classmethod
    def asinh(cls, x: Any) -> Any:
        return cls._apply(np.arcsinh, x)

    @classmethod
    def atanh(cls, x: Any) -> Any:
        return cls._apply(np.arctanh, x)

    @classmethod
    def pow(cls, x: Any, y: Any) -> Any:
        return cls._apply(np.power, x, y)

    @classmethod
    @ieee_semantics
    def pow_int(cls, x: Any, n: int) -> Any:
        """
        x^n для целого n.

        Чётность берётся из самого n: float(n) для больших n теряет младший
        бит, и знак результата для отрицательного x был бы неверным.

        Examples:
            >>> Float64.pow_int(-2.0, 3)
            -8.0
        """
        magnitude = np.power(cls.dtype(abs(x)), cls.dtype(cls.cast(n)))
        if n % 2 == 1 and cls.sign(x) is Sign.MINUS:
            magnitude = -magnitude
        return cls._box(magnitude)

    @classmethod
    def sqrt(cls, x: Any) -> Any:
        return cls._apply(np.sqrt, x)

    @classmethod
    @ieee_semantics
    def root(cls, x: Any, n: int) -> Any:
        """
        Вещественный корень степени n.

        Args:
            x: Подкоренное значение
            n: Степень корня (ненулевое целое; отрицательное → 1 / root)

        Returns:
            x^(1/n); для x < 0 при чётном n → NaN

        Raises:
            PreconditionViolation: если n == 0

        Examples:
            >>> Float64.root(-8.0, 3)
            -2.0
        """
        precondition(n != 0, "root degree must be non-zero")

        if n == 2:
            return cls.sqrt(x)
        if n == 3:
            return cls._apply(np.cbrt, x)

        value = cls.dtype(x)
        if value < 0 and n % 2 == 0:
            return cls.nan

        magnitude = np.power(np.abs(value), cls.dtype(1) / cls.dtype(n))
        return cls._box(np.copysign(magnitude, value))

    # =========================================================================
    # REAL FUNCTIONS
    # =========================================================================

    @classmethod
    def atan2(cls, y: Any, x: Any) -> Any:
        return cls._apply(np.arctan2, y, x)

    @classmethod
    @ieee_semantics
    def hypot(cls, x: Any, y: Any) -> Any:
        """
        sqrt(x² + y²) без промежуточного overflow/underflow.

        Алгоритм:
            big = max(|x|, |y|), e = exponent(big)
            u = big * 2^-e ∈ [1, 2), v = small * 2^-e
            hypot = sqrt(u² + v²) * 2^e

        Масштабирование степенью двойки точное, поэтому сохраняется
        точность наивной формулы там, где она не переполняется.

        Examples:
            >>> Float64.hypot(3.0, 4.0)
            5.0
            >>> Float64.hypot(1e300, 1e300) < Float64.infinity
            True
        """
        a = abs(cls.dtype(x))
        b = abs(cls.dtype(y))

        if np.isinf(a) or np.isinf(b):
            return cls.infinity
        if np.isnan(a) or np.isnan(b):
            return cls.nan

        big, small = (a, b) if a >= b else (b, a)
        if big == 0:
            return cls.zero

        e = cls.exponent(big)
        u = np.ldexp(big, -e)
        v = np.ldexp(small, -e)
        return cls._box(np.ldexp(np.sqrt(u * u + v * v), e))

    @classmethod
    @ieee_semantics
    def erf(cls, x: Any) -> Any:
        return cls.cast(math.erf(float(x)))

    @classmethod
    @ieee_semantics
    def erfc(cls, x: Any) -> Any:
        return cls.cast(math.erfc(float(x)))

    @classmethod
    def exp2(cls, x: Any) -> Any:
        return cls._apply(np.exp2, x)

    @classmethod
    @ieee_semantics
    def exp10(cls, x: Any) -> Any:
        return cls._box(np.power(cls.dtype(10), cls.dtype(x)))

    @classmethod
    def log2(cls, x: Any) -> Any:
        return cls._apply(np.log2, x)

    @classmethod
    def log10(cls, x: Any) -> Any:
        return cls._apply(np.log10, x)

    @classmethod
    def gamma(cls, x: Any) -> Any:
        """
        Γ(x) по соглашениям C99.

        - gamma(±0) = ±inf
        - gamma(отрицательное целое) = NaN, gamma(-inf) = NaN
        - overflow → inf со знаком sign_gamma(x)

        Examples:
            >>> Float64.gamma(5.0)
            24.0
        """
        value = float(x)
        if value == 0:
            return cls.cast(math.copysign(math.inf, value))

        try:
            result = math.gamma(value)
        except ValueError:
            result = math.nan
        except OverflowError:
            result = math.inf * int(cls.sign_gamma(x))
        return cls.cast(result)

    @classmethod
    def log_gamma(cls, x: Any) -> Any:
        """log|Γ(x)|; в полюсах и при overflow → +inf."""
        try:
            result = math.lgamma(float(x))
        except (ValueError, OverflowError):
            result = math.inf
        return cls.cast(result)

    @classmethod
    def sign_gamma(cls, x: Any) -> Sign:
        """
        Знак Γ(x).

        На интервале (-k-1, -k) знак Γ равен (-1)^(k+1): отрицателен, когда
        floor(x) нечётен. Для полюсов и NaN возвращается PLUS, для ±0 —
        знак нуля.

        Examples:
            >>> Float64.sign_gamma(-0.5)
            <Sign.MINUS: -1>
            >>> Float64.sign_gamma(-1.5)
            <Sign.PLUS: 1>
        """
        value = float(x)
        if math.isnan(value) or value > 0 or math.isinf(value):
            return Sign.PLUS
        if value == 0:
            return cls.sign(x)

        floor = math.floor(value)
        if floor == value:
            return Sign.PLUS
        return Sign.MINUS if floor % 2 else Sign.PLUS

    # =========================================================================
    # ORDERING AND SIGN
    # =========================================================================

    @classmethod
    def minimum(cls, x: Any, y: Any) -> Any:
        """Меньшее из x, y; NaN распространяется, -0 < +0."""
        if math.isnan(x) or math.isnan(y):
            return cls.nan
        if x == y:
            return x if cls.sign(x) is Sign.MINUS else y
        return x if x < y else y

    @classmethod
    def maximum(cls, x: Any, y: Any) -> Any:
        """Большее из x, y; NaN распространяется, +0 > -0."""
        if math.isnan(x) or math.isnan(y):
            return cls.nan
        if x == y:
            return y if cls.sign(x) is Sign.MINUS else x
        return x if x > y else y

    @classmethod
    def sign(cls, x: Any) -> Sign:
        """Знаковый бит (в т.ч. для -0 и -NaN)."""
        return Sign.MINUS if math.copysign(1.0, float(x)) < 0 else Sign.PLUS

    @classmethod
    def magnitude_of(cls, x: Any) -> Any:
        return abs(x)

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    @classmethod
    def is_finite(cls, x: Any) -> bool:
        return math.isfinite(x)

    @classmethod
    def is_infinite(cls, x: Any) -> bool:
        return math.isinf(x)

    @classmethod
    def is_nan(cls, x: Any) -> bool:
        return math.isnan(x)

    @classmethod
    def is_zero(cls, x: Any) -> bool:
        return x == 0

    @classmethod
    def is_normal(cls, x: Any) -> bool:
        return math.isfinite(x) and abs(x) >= cls.least_normal

    @classmethod
    def is_subnormal(cls, x: Any) -> bool:
        return x != 0 and abs(x) < cls.least_normal

    # =========================================================================
    # SPACING AND SCALING
    # =========================================================================

    @classmethod
    def ulp(cls, x: Any) -> Any:
        """
        Расстояние от |x| до следующего по величине значения той же бинады.

        ulp(0) = least_nonzero, ulp(±inf) = ulp(NaN) = NaN.
        """
        if not math.isfinite(x):
            return cls.nan
        if x == 0:
            return cls.least_nonzero

        e = max(cls.exponent(x), cls.format.min_exponent)
        return cls.scalb(cls.one, e - cls.format.significand_bits)

    @classmethod
    def exponent(cls, x: Any) -> int:
        """
        Двоичный экспонент floor(log2|x|), корректный и для subnormal.

        Raises:
            PreconditionViolation: для нуля и не-конечных значений

        Examples:
            >>> Float64.exponent(Float64.least_nonzero)
            -1074
        """
        precondition(
            math.isfinite(x) and x != 0,
            f"exponent is undefined for {x!r}",
        )
        return math.frexp(float(x))[1] - 1

    @classmethod
    @ieee_semantics
    def scalb(cls, x: Any, n: int) -> Any:
        """x * 2^n с одним округлением; overflow → ±inf, underflow → ±0."""
        shift = max(-SCALB_SHIFT_LIMIT, min(SCALB_SHIFT_LIMIT, int(n)))
        return cls._box(np.ldexp(cls.dtype(x), shift))


# =============================================================================
# PRECISIONS
# =============================================================================


class Float32(BinaryFloat):
    """binary32: значения numpy.float32."""

    dtype = np.float32
    format = FLOAT32
    _box = np.float32


class Float64(BinaryFloat):
    """binary64: значения Python float."""

    dtype = np.float64
    format = FLOAT64
    _box = float


def real_type_of(value: Any) -> type[BinaryFloat]:
    """
    Реализация Real для значения.

    numpy.float32 → Float32; прочие вещественные (float, int, numpy.float64,
    Fraction, ...) → Float64.

    Raises:
        TypeError: если value не вещественное число
    """
    for klass in type(value).__mro__:
        real_type = _REAL_TYPES.get(klass)
        if real_type is not None:
            return real_type

    if isinstance(value, numbers.Real):
        return Float64

    raise TypeError(f"{type(value).__name__} is not a real number")
