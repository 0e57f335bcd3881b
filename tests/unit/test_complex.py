"""
Тесты для Complex — комплексное значение над Real

Проверяет:
1. Построение, вывод точности, immutability, текстовое представление
2. Canonical zero и infinity: равенство и hash
3. Арифметику: сложение, умножение, операции со скалярами
4. Производные величины: magnitude, length, phase, conjugate, polar
5. from_polar: отказ на некорректных аргументах
6. Float32: точность сохраняется через операции
"""

import dataclasses
import math

import numpy as np
import pytest

from numerics.core.complex.complex import Complex
from numerics.core.precision.binary_float import Float32, Float64


# =============================================================================
# ТЕСТЫ: Construction and rendering
# =============================================================================


class TestConstruction:
    """Тесты построения Complex."""

    def test_components_cast_to_precision(self) -> None:
        """int → float для Float64"""
        z = Complex(1, 2)
        assert z.real_type is Float64
        assert type(z.real) is float and type(z.imaginary) is float
        assert z.real == 1.0 and z.imaginary == 2.0

    def test_imaginary_defaults_to_zero(self) -> None:
        """Complex(x) — вещественная ось"""
        assert Complex(3.0) == Complex(3.0, 0.0)

    def test_float32_inferred_from_numpy_scalar(self) -> None:
        """numpy.float32 компонента задаёт точность"""
        z = Complex(np.float32(1.0), 2.0)
        assert z.real_type is Float32
        assert type(z.imaginary) is np.float32

    def test_explicit_real_type(self) -> None:
        """Явная точность округляет компоненты"""
        z = Complex(0.1, 0.2, Float32)
        assert type(z.real) is np.float32
        assert z.real == np.float32(0.1)

    def test_non_real_component_rejected(self) -> None:
        """Строка вместо числа → TypeError"""
        with pytest.raises(TypeError):
            Complex("1.0", 0.0)

    def test_frozen(self) -> None:
        """Значение immutable"""
        z = Complex(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            z.real = 5.0

    def test_named_values(self) -> None:
        """zero, one, i, infinity"""
        assert Complex.zero() == Complex(0.0, 0.0)
        assert Complex.one() == Complex(1.0, 0.0)
        assert Complex.i() == Complex(0.0, 1.0)
        assert not Complex.infinity().is_finite
        assert Complex.i(Float32).real_type is Float32


class TestRendering:
    """Тесты str/repr."""

    def test_str(self) -> None:
        """str → (re, im)"""
        assert str(Complex(2.0, 3.0)) == "(2.0, 3.0)"
        assert str(Complex(-1.5, 0.0)) == "(-1.5, 0.0)"

    def test_str_float32(self) -> None:
        """Float32 выводится так же"""
        assert str(Complex(np.float32(2.0), np.float32(3.0))) == "(2.0, 3.0)"

    def test_repr(self) -> None:
        """repr указывает точность, если это не Float64"""
        assert repr(Complex(2.0, 3.0)) == "Complex(2.0, 3.0)"
        assert (
            repr(Complex(2.0, 3.0, Float32))
            == "Complex(2.0, 3.0, real_type=Float32)"
        )


# =============================================================================
# ТЕСТЫ: Canonical equality
# =============================================================================


class TestCanonicalEquality:
    """Тесты canonical zero/infinity."""

    def test_all_zeros_equal(self) -> None:
        """Знак нуля не важен"""
        assert Complex(0.0, -0.0) == Complex(-0.0, 0.0)
        assert hash(Complex(0.0, -0.0)) == hash(Complex(-0.0, 0.0))
        assert Complex(-0.0, -0.0).is_zero

    def test_all_infinities_equal(self) -> None:
        """Любая не-конечная компонента → одна точка бесконечности"""
        infinities = [
            Complex(math.inf, 0.0),
            Complex(-math.inf, 2.0),
            Complex(0.0, math.nan),
            Complex(math.nan, math.nan),
            Complex(1.0, -math.inf),
        ]
        for z in infinities:
            for w in infinities:
                assert z == w
                assert hash(z) == hash(w)

    def test_nan_value_equals_itself(self) -> None:
        """NaN компонента не ломает рефлексивность"""
        z = Complex(math.nan, 1.0)
        assert z == z

    def test_infinity_differs_from_finite(self) -> None:
        """inf ≠ конечное значение"""
        assert Complex(math.inf, 0.0) != Complex(Float64.greatest_finite, 0.0)
        assert Complex(math.inf, 0.0) != Complex.zero()

    def test_set_collapses_canonical_values(self) -> None:
        """В множестве остаются один ноль и одна бесконечность"""
        values = {
            Complex(0.0, 0.0),
            Complex(-0.0, 0.0),
            Complex(math.inf, 0.0),
            Complex(math.nan, 1.0),
        }
        assert len(values) == 2

    def test_finite_values_compare_exactly(self) -> None:
        """Конечные значения равны покомпонентно"""
        assert Complex(1.0, 2.0) == Complex(1.0, 2.0)
        assert Complex(1.0, 2.0) != Complex(2.0, 1.0)
        assert Complex(1.0, 2.0) != Complex(1.0, math.nextafter(2.0, 3.0))


class TestMixedEquality:
    """Сравнение с другими числами."""

    def test_equal_to_builtin_numbers(self) -> None:
        """Сравнение с int/float/complex и совпадение hash"""
        assert Complex(2.0, 0.0) == 2
        assert Complex(2.0, 0.0) == 2.0
        assert Complex(1.0, 2.0) == 1 + 2j
        assert hash(Complex(2.0, 0.0)) == hash(2.0)
        assert hash(Complex(1.0, 2.0)) == hash(1 + 2j)

    def test_non_finite_builtin_numbers(self) -> None:
        """inf/NaN встроенных типов не равны canonical infinity"""
        assert Complex(math.nan, 0.0) != complex(math.inf, 1.0)
        assert Complex(math.nan, 0.0) != math.nan
        assert Complex(math.nan, 0.0) != complex(math.nan, 0.0)
        assert Complex(math.inf, 0.0) != math.inf
        assert Complex.infinity() != np.float32(math.nan)

    def test_equal_implies_equal_hash(self) -> None:
        """a == b → hash(a) == hash(b) для конечных и не-конечных значений"""
        pairs = [
            (Complex(2.0, 0.0), 2.0),
            (Complex(-0.0, 0.0), 0),
            (Complex(1.0, -3.0), complex(1.0, -3.0)),
            (Complex(math.nan, 0.0), Complex(math.inf, 1.0)),
            (Complex(np.float32(0.5), np.float32(0.0)), 0.5),
        ]
        for left, right in pairs:
            assert left == right
            assert hash(left) == hash(right)

    def test_canonical_infinity_in_set(self) -> None:
        """Все не-конечные Complex схлопываются в один элемент множества"""
        values = {Complex(math.nan, 0.0), Complex(0.0, -math.inf), Complex.infinity()}
        assert len(values) == 1

    def test_huge_integer_is_not_equal(self) -> None:
        """Целое вне диапазона float → не равно, без исключения"""
        assert Complex(1.0, 0.0) != 10**400

    def test_unrelated_type(self) -> None:
        """Строка не равна"""
        assert Complex(1.0, 0.0) != "1"

    def test_cross_precision(self) -> None:
        """Сравнение разных точностей по значению"""
        assert Complex(np.float32(0.5), np.float32(0.25)) == Complex(0.5, 0.25)
        assert Complex(np.float32(0.1), np.float32(0.0)) != Complex(0.1, 0.0)


# =============================================================================
# ТЕСТЫ: Arithmetic
# =============================================================================


class TestArithmetic:
    """Тесты операторов."""

    def test_i_squared(self) -> None:
        """i² = -1"""
        assert Complex.i() * Complex.i() == Complex(-1.0, 0.0)

    def test_multiplication(self) -> None:
        """(1 + i)(2i) = -2 + 2i"""
        assert Complex(1.0, 1.0) * Complex(0.0, 2.0) == Complex(-2.0, 2.0)

    def test_addition_and_subtraction(self) -> None:
        """Покомпонентно"""
        z = Complex(1.0, 2.0)
        w = Complex(0.5, -1.0)
        assert z + w == Complex(1.5, 1.0)
        assert z - w == Complex(0.5, 3.0)
        assert -z == Complex(-1.0, -2.0)
        assert +z is z

    def test_builtin_operands(self) -> None:
        """Встроенные числа с обеих сторон"""
        z = Complex(1.0, 2.0)
        assert 1 + z == Complex(2.0, 2.0)
        assert z + (1 + 1j) == Complex(2.0, 3.0)
        assert 5 - z == Complex(4.0, -2.0)
        assert z - 1 == Complex(0.0, 2.0)
        assert 1 / Complex(0.0, 1.0) == Complex(0.0, -1.0)

    def test_scalar_multiplication(self) -> None:
        """Скаляр масштабирует обе компоненты"""
        z = Complex(1.0, 2.0)
        assert z * 2 == Complex(2.0, 4.0)
        assert 2 * z == Complex(2.0, 4.0)
        assert z.multiplied_by(0.5) == Complex(0.5, 1.0)

    def test_scalar_division(self) -> None:
        """Деление на скаляр, на ноль → infinity"""
        assert Complex(2.0, 4.0) / 2 == Complex(1.0, 2.0)
        assert Complex(2.0, 4.0).divided_by(4.0) == Complex(0.5, 1.0)
        assert Complex(2.0, 4.0) / 0 == Complex.infinity()

    def test_mixed_precisions_rejected(self) -> None:
        """Float32 и Float64 не смешиваются"""
        with pytest.raises(TypeError, match="cannot mix"):
            Complex(np.float32(1.0), np.float32(0.0)) + Complex(1.0, 0.0)

    def test_infinity_propagates(self) -> None:
        """Не-конечный операнд даёт infinity"""
        infinity = Complex.infinity()
        assert infinity * Complex(1.0, 1.0) == infinity
        assert infinity * Complex.zero() == infinity
        assert Complex(math.nan, 0.0) + Complex(1.0, 1.0) == infinity

    def test_overflow_to_infinity(self) -> None:
        """Произведение за пределами диапазона"""
        big = Complex(1e200, 1e200)
        assert not (big * big).is_finite


# =============================================================================
# ТЕСТЫ: Derived views
# =============================================================================


class TestDerivedViews:
    """Тесты magnitude, length, phase и т.д."""

    def test_length_and_magnitude(self) -> None:
        """|3 + 4i| = 5, infinity norm = 4"""
        z = Complex(3.0, -4.0)
        assert z.length == 5.0
        assert abs(z) == 5.0
        assert z.magnitude == 4.0
        assert z.length_squared == 25.0

    def test_length_without_overflow(self) -> None:
        """length конечен там, где length_squared переполняется"""
        z = Complex(1e300, 1e300)
        assert math.isfinite(z.length)
        assert z.length_squared == math.inf

    def test_infinity_views(self) -> None:
        """Для infinity length и magnitude = inf"""
        z = Complex(math.nan, 1.0)
        assert z.length == math.inf
        assert z.magnitude == math.inf

    def test_phase(self) -> None:
        """atan2 со знаком нуля на отрицательной оси"""
        assert Complex(0.0, 1.0).phase == pytest.approx(math.pi / 2)
        assert Complex(-1.0, 0.0).phase == math.pi
        assert Complex(-1.0, -0.0).phase == -math.pi

    def test_phase_undefined(self) -> None:
        """Фаза нуля и бесконечности — NaN"""
        assert math.isnan(Complex.zero().phase)
        assert math.isnan(Complex.infinity().phase)

    def test_conjugate(self) -> None:
        """conj(a + bi) = a - bi"""
        assert Complex(1.0, 2.0).conjugate == Complex(1.0, -2.0)

    def test_polar(self) -> None:
        """(length, phase)"""
        length, phase = Complex(0.0, 2.0).polar
        assert length == 2.0
        assert phase == pytest.approx(math.pi / 2)

    def test_conversions(self) -> None:
        """complex() и bool()"""
        assert complex(Complex(1.0, 2.0)) == 1 + 2j
        assert not Complex(0.0, -0.0)
        assert Complex(0.0, 1.0)


class TestClassification:
    """Тесты is_finite/is_zero/is_normal/is_subnormal."""

    def test_normal(self) -> None:
        """Хотя бы одна нормальная компонента"""
        z = Complex(Float64.least_nonzero, 1.0)
        assert z.is_finite
        assert z.is_normal
        assert not z.is_subnormal

    def test_subnormal(self) -> None:
        """Обе компоненты subnormal или ноль"""
        z = Complex(Float64.least_nonzero, 0.0)
        assert z.is_subnormal
        assert not z.is_normal

    def test_zero_and_infinity(self) -> None:
        """Ноль и infinity не normal и не subnormal"""
        for z in (Complex.zero(), Complex.infinity()):
            assert not z.is_normal
            assert not z.is_subnormal
        assert not Complex.infinity().is_finite


# =============================================================================
# ТЕСТЫ: from_polar
# =============================================================================


class TestFromPolar:
    """Тесты from_polar(length, phase)."""

    def test_axes(self) -> None:
        """Фаза 0 и π/2"""
        assert Complex.from_polar(2.0, 0.0) == Complex(2.0, 0.0)

        z = Complex.from_polar(1.0, math.pi / 2)
        assert z.real == pytest.approx(0.0, abs=1e-16)
        assert z.imaginary == 1.0

    def test_round_trip(self) -> None:
        """from_polar(*z.polar) ≈ z"""
        z = Complex(-3.0, 4.0)
        w = Complex.from_polar(*z.polar)
        assert complex(w) == pytest.approx(complex(z), rel=1e-15)

    def test_zero_length(self) -> None:
        """length = 0 → ноль"""
        assert Complex.from_polar(0.0, 1.0).is_zero

    def test_invalid_arguments_return_none(self) -> None:
        """Отрицательная длина или не-конечный аргумент → None"""
        assert Complex.from_polar(-1.0, 0.0) is None
        assert Complex.from_polar(math.inf, 0.0) is None
        assert Complex.from_polar(1.0, math.nan) is None
        assert Complex.from_polar(math.nan, 0.0) is None

    def test_float32(self) -> None:
        """Точность выводится из аргументов"""
        z = Complex.from_polar(np.float32(2.0), np.float32(0.0))
        assert z.real_type is Float32
        assert z == Complex(2.0, 0.0)


# =============================================================================
# ТЕСТЫ: Float32
# =============================================================================


class TestFloat32Complex:
    """Complex над binary32."""

    def test_arithmetic_keeps_precision(self) -> None:
        """Компоненты остаются numpy.float32"""
        z = Complex(np.float32(1.0), np.float32(2.0))
        w = z * z + z
        assert w.real_type is Float32
        assert type(w.real) is np.float32
        assert w == Complex(-2.0, 6.0)

    def test_float32_overflow(self) -> None:
        """3e38 * 2 переполняет binary32"""
        z = Complex(np.float32(3e38), np.float32(0.0))
        assert not (z * 2).is_finite
        assert (z * 2) == Complex.infinity()

    def test_float32_length_squared_overflow(self) -> None:
        """1e30² вне binary32, но length конечен"""
        z = Complex(np.float32(1e30), np.float32(0.0))
        assert z.length_squared == np.inf
        assert np.isfinite(z.length)
