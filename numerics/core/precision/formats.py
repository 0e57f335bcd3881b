"""
FloatFormat — Описание двоичного IEEE 754 формата

Immutable Pydantic модель с параметрами формата (ширина экспоненты и
мантиссы) и производными границами экспонент. Используется для выбора
порогов масштабирования в алгоритмах Complex.

Точности:
- FLOAT32 (binary32, single precision)
- FLOAT64 (binary64, double precision)

Half precision намеренно не описана.
"""

from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# CONSTANTS
# =============================================================================

# Запас (в двоичных порядках) между well-scaled диапазоном и половиной
# диапазона экспонент: сумма двух произведений well-scaled значений
# должна оставаться нормальной и конечной
WELL_SCALED_EXPONENT_MARGIN: Final[int] = 2


# =============================================================================
# MODEL
# =============================================================================


class FloatFormat(BaseModel):
    """
    Параметры двоичного floating-point формата.

    significand_bits — число явно хранимых бит мантиссы (без скрытого бита).
    """

    name: str = Field(..., min_length=1, description="Имя формата (binary64 и т.п.)")
    exponent_bits: int = Field(..., ge=2, description="Ширина поля экспоненты")
    significand_bits: int = Field(..., ge=1, description="Явные биты мантиссы")

    model_config = {"frozen": True}

    @property
    def bit_width(self) -> int:
        """Полная ширина формата: знак + экспонента + мантисса."""
        return 1 + self.exponent_bits + self.significand_bits

    @property
    def precision(self) -> int:
        """Точность в битах, включая скрытый бит."""
        return self.significand_bits + 1

    @property
    def max_exponent(self) -> int:
        """emax: экспонента наибольшего конечного значения."""
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def min_exponent(self) -> int:
        """emin: экспонента наименьшего нормального значения."""
        return 1 - self.max_exponent

    @property
    def min_subnormal_exponent(self) -> int:
        """Экспонента наименьшего положительного subnormal значения."""
        return self.min_exponent - self.significand_bits

    @property
    def well_scaled_exponent_limit(self) -> int:
        """
        Граница L well-scaled диапазона: |exponent(x)| <= L.

        Для x, y с такими экспонентами x*y и x*y + z*w нормальны и конечны.
        """
        return self.max_exponent // 2 - WELL_SCALED_EXPONENT_MARGIN

    @property
    def small_operand_exponent(self) -> int:
        """
        Порог малого операнда деления: 2^порог = 2 * least_normal / eps.

        Операнды с |x|∞ ниже порога поднимаются на 2^rescale_exponent.
        """
        return self.min_exponent + self.significand_bits + 1

    @property
    def rescale_exponent(self) -> int:
        """Сдвиг для малых операндов деления: 2^k = 2 / eps²."""
        return 2 * self.significand_bits + 1


# =============================================================================
# STANDARD FORMATS
# =============================================================================

FLOAT32: Final[FloatFormat] = FloatFormat(
    name="binary32", exponent_bits=8, significand_bits=23
)
FLOAT64: Final[FloatFormat] = FloatFormat(
    name="binary64", exponent_bits=11, significand_bits=52
)
