"""
Core math modules

Value-типы Angle, Complex, ComplexVector и общие численные примитивы.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    FULL_TURN_DEGREES,
    STRAIGHT_ANGLE_DEGREES,
    UNITARY_TOLERANCE,
    # Exceptions
    ContractViolation,
    DimensionMismatch,
    ZeroVectorNormalization,
    # Contract checks
    require_equal,
    # IEEE-754 helpers
    ieee_cos,
    ieee_divide,
    ieee_fmod,
    ieee_sin,
    # Rendering
    format_float,
)

# Angle
from src.core.math.angle import Angle, AngleUnit

# Complex
from src.core.math.complex import Complex, ComplexParseError, ParseErrorKind

# ComplexVector
from src.core.math.vector import ComplexVector

__all__ = [
    # Constants
    "FULL_TURN_DEGREES",
    "STRAIGHT_ANGLE_DEGREES",
    "UNITARY_TOLERANCE",
    # Exceptions
    "ContractViolation",
    "DimensionMismatch",
    "ZeroVectorNormalization",
    # Contract checks
    "require_equal",
    # IEEE-754 helpers
    "ieee_cos",
    "ieee_divide",
    "ieee_fmod",
    "ieee_sin",
    # Rendering
    "format_float",
    # Angle
    "Angle",
    "AngleUnit",
    # Complex
    "Complex",
    "ComplexParseError",
    "ParseErrorKind",
    # ComplexVector
    "ComplexVector",
]
