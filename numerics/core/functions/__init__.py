"""
Capability hierarchy: ElementaryFunctions ⊂ RealFunctions ⊂ Real.
"""

from numerics.core.functions.elementary import ElementaryFunctions
from numerics.core.functions.real import Real
from numerics.core.functions.real_functions import RealFunctions, Sign

__all__ = [
    "ElementaryFunctions",
    "RealFunctions",
    "Real",
    "Sign",
]
