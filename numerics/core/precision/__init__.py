"""
Конкретные floating-point точности, реализующие capability Real.
"""

from numerics.core.precision.binary_float import (
    BinaryFloat,
    Float32,
    Float64,
    real_type_of,
)
from numerics.core.precision.formats import (
    FLOAT32,
    FLOAT64,
    WELL_SCALED_EXPONENT_MARGIN,
    FloatFormat,
)

__all__ = [
    # Formats
    "FLOAT32",
    "FLOAT64",
    "WELL_SCALED_EXPONENT_MARGIN",
    "FloatFormat",
    # Real implementations
    "BinaryFloat",
    "Float32",
    "Float64",
    "real_type_of",
]
