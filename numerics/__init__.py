"""
numerics — Capability hierarchy for real math and a robust Complex type

Иерархия ElementaryFunctions ⊂ RealFunctions ⊂ Real, реализованная для
binary32 (Float32) и binary64 (Float64), и Complex над Real с
canonical равенством и устойчивым делением.

Examples:
    >>> from numerics import Complex, Float64
    >>> m = Float64.least_nonzero
    >>> Complex(m, m) / Complex(2 * m, m)
    Complex(0.6, 0.2)
"""

from numerics.core.complex import (
    Complex,
    divide_each,
    is_well_scaled,
    root_of_unity,
)
from numerics.core.contracts import PreconditionViolation
from numerics.core.functions import ElementaryFunctions, Real, RealFunctions, Sign
from numerics.core.precision import (
    FLOAT32,
    FLOAT64,
    Float32,
    Float64,
    FloatFormat,
    real_type_of,
)

__version__ = "0.1.0"

__all__ = [
    # Capabilities
    "ElementaryFunctions",
    "RealFunctions",
    "Real",
    "Sign",
    # Precisions
    "FLOAT32",
    "FLOAT64",
    "FloatFormat",
    "Float32",
    "Float64",
    "real_type_of",
    # Complex
    "Complex",
    "divide_each",
    "is_well_scaled",
    "root_of_unity",
    # Errors
    "PreconditionViolation",
]
