"""
Contract Checks Module

Fail-fast проверки preconditions для numerics.
"""

from .preconditions import (
    PreconditionViolation,
    precondition,
    precondition_in_range,
)

__all__ = [
    # Exceptions
    "PreconditionViolation",
    # Functions
    "precondition",
    "precondition_in_range",
]
