"""
Complex Division — Устойчивое деление и reciprocal fast path

Деление z / w, z = a + bi, w = c + di:

1. Fast path: оба операнда well-scaled (|exponent(magnitude)| <= L,
   L = FloatFormat.well_scaled_exponent_limit). Учебная формула
       z / w = ((ac + bd) + (bc - ad)i) / (c² + d²)
   с настоящим делением на c² + d² (не умножением на обратное) не
   переполняется и не теряет точность.

2. Robust path (метод Смита с масштабированием степенями двойки):
       - операнд с |x|∞ >= 2^emax делится на 2 (сумма двух слагаемых
         не переполняется), с |x|∞ < 2 * least_normal / eps умножается
         на 2 / eps²; z и w масштабируются независимо, сдвиг s копится
       - опорной берётся бо́льшая по модулю компонента делителя
         (|d| <= |c|, иначе роли c и d меняются через сопряжение):
             r = d / c,  t = c + d * r
             z / w = ((a + b * r) + (b - a * r)i) / t
       - r ушёл в underflow: a + d * (b / c) вместо a + b * r
         (метод Baudin–Smith), малая компонента делителя не теряется
       - результат * 2^s одним scalb

   Деление на t настоящее, не умножение на 1 / t. При s == 0 сдвиг не
   добавляет округлений; при s != 0 subnormal частное округляется ещё
   раз в scalb.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. w == 0 → infinity (в т.ч. 0 / 0)
2. z не конечно → infinity; w не конечно (z конечно) → zero
3. (m, m) / (2m, m) == (0.6, 0.2) точно, m = least_nonzero
4. reciprocal присутствует только когда умножение на него не хуже деления
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from numerics.core.precision.binary_float import ieee_semantics

if TYPE_CHECKING:
    from numerics.core.complex.complex import Complex


# =============================================================================
# SCALING CHECK
# =============================================================================


def is_well_scaled(z: "Complex") -> bool:
    """
    Проверка, что z далёк от краёв диапазона точности.

    Для well-scaled операндов произведения компонент и их суммы нормальны
    и конечны, наивные формулы безопасны.

    Args:
        z: Проверяемое значение

    Returns:
        True если z конечно, ненулевое и |exponent(|z|∞)| <= L
    """
    if not z.is_finite or z.is_zero:
        return False

    real_type = z.real_type
    limit = real_type.format.well_scaled_exponent_limit
    return abs(real_type.exponent(z.magnitude)) <= limit


# =============================================================================
# DIVISION
# =============================================================================


def divide(z: "Complex", w: "Complex") -> "Complex":
    """
    z / w: fast path для well-scaled операндов, иначе rescaled_divide.

    Args:
        z: Делимое
        w: Делитель (той же точности)

    Returns:
        Частное (canonical infinity при w == 0)
    """
    if is_well_scaled(w) and (z.is_zero or is_well_scaled(z)):
        a, b = z.real, z.imaginary
        c, d = w.real, w.imaginary
        denominator = c * c + d * d
        return z._make(
            (a * c + b * d) / denominator,
            (b * c - a * d) / denominator,
            z.real_type,
        )

    return rescaled_divide(z, w)


def _smith_real_part(
    a: Any, b: Any, c: Any, d: Any, ratio: Any, denominator: Any
) -> Any:
    # Re((a + bi) / (c + di)) при |d| <= |c|, ratio = d / c,
    # denominator = c + d * ratio
    if ratio != 0:
        b_ratio = b * ratio
        if b_ratio != 0:
            return (a + b_ratio) / denominator
        return a / denominator + (b / denominator) * ratio
    # ratio ушёл в underflow: d * (b / c) вместо (b * d) / c
    if d == 0:
        return a / denominator
    return (a + d * (b / c)) / denominator


@ieee_semantics
def rescaled_divide(z: "Complex", w: "Complex") -> "Complex":
    """
    Деление с масштабированием степенями двойки и методом Смита.

    Корректно для любых операндов, включая subnormal, близкие к overflow
    и с компонентами на противоположных краях диапазона. Медленнее fast
    path на несколько exponent/scalb и сравнений.

    Examples:
        >>> m = Float64.least_nonzero  # doctest: +SKIP
        >>> rescaled_divide(Complex(m, m), Complex(2 * m, m))  # doctest: +SKIP
        Complex(0.6, 0.2)
    """
    real_type = z.real_type

    if w.is_zero:
        return z.infinity(real_type)
    if not z.is_finite:
        return z.infinity(real_type)
    if not w.is_finite or z.is_zero:
        return z.zero(real_type)

    fmt = real_type.format
    a, b = z.real, z.imaginary
    c, d = w.real, w.imaginary
    shift = 0

    # z / w = (z * 2^-p) / (w * 2^-q) * 2^(p - q)
    ez = real_type.exponent(z.magnitude)
    ew = real_type.exponent(w.magnitude)
    if ez >= fmt.max_exponent:
        a, b = real_type.scalb(a, -1), real_type.scalb(b, -1)
        shift += 1
    elif ez < fmt.small_operand_exponent:
        a = real_type.scalb(a, fmt.rescale_exponent)
        b = real_type.scalb(b, fmt.rescale_exponent)
        shift -= fmt.rescale_exponent
    if ew >= fmt.max_exponent:
        c, d = real_type.scalb(c, -1), real_type.scalb(d, -1)
        shift -= 1
    elif ew < fmt.small_operand_exponent:
        c = real_type.scalb(c, fmt.rescale_exponent)
        d = real_type.scalb(d, fmt.rescale_exponent)
        shift += fmt.rescale_exponent

    if abs(d) <= abs(c):
        ratio = d / c
        denominator = c + d * ratio
        real = _smith_real_part(a, b, c, d, ratio, denominator)
        imaginary = _smith_real_part(b, -a, c, d, ratio, denominator)
    else:
        # z / w = conj(conj(z) * i / (conj(w) * i)): опорной становится d
        ratio = c / d
        denominator = d + c * ratio
        real = _smith_real_part(b, a, d, c, ratio, denominator)
        imaginary = -_smith_real_part(a, -b, d, c, ratio, denominator)

    if shift == 0:
        return z._make(real, imaginary, real_type)
    # subnormal частное при shift != 0 округляется второй раз в scalb
    return z._make(
        real_type.scalb(real, shift),
        real_type.scalb(imaginary, shift),
        real_type,
    )


# =============================================================================
# RECIPROCAL
# =============================================================================


def reciprocal(w: "Complex") -> "Complex | None":
    """
    1 / w, если умножение на него эквивалентно делению на w.

    Returns:
        - infinity для w == 0, zero для не-конечного w
        - 1 / w для well-scaled w
        - None иначе (|w| у края диапазона: 1 / w переполнится или
          потеряет точность, нужно делить напрямую)
    """
    real_type = w.real_type

    if w.is_zero:
        return w.infinity(real_type)
    if not w.is_finite:
        return w.zero(real_type)
    if not is_well_scaled(w):
        return None

    c, d = w.real, w.imaginary
    denominator = c * c + d * d
    return w._make(c / denominator, -d / denominator, real_type)


def divide_each(dividends: Iterable["Complex"], divisor: "Complex") -> list["Complex"]:
    """
    Деление набора значений на один делитель.

    Если reciprocal делителя присутствует, он вычисляется один раз и
    каждое значение умножается на него; иначе каждое делится напрямую.

    Args:
        dividends: Делимые (той же точности, что divisor)
        divisor: Общий делитель

    Returns:
        Список частных в порядке dividends
    """
    inverse = divisor.reciprocal
    if inverse is None:
        return [z / divisor for z in dividends]
    return [z * inverse for z in dividends]
