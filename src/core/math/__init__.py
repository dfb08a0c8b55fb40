"""
Core math modules для комплексных чисел

Чистые функции над парами (re, im) с гарантией численной устойчивости.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPSILON,
    MAGNITUDE_DIRECT_LIMIT,
    MAGNITUDE_UNDERFLOW_LIMIT,
    # Types
    ComplexPair,
    # NaN/Inf checks
    has_nan,
    heaviside,
    is_valid_float,
    is_within_epsilon,
    # IEEE-754 wrappers
    ieee_cos,
    ieee_cosh,
    ieee_divide,
    ieee_exp,
    ieee_log,
    ieee_pow,
    ieee_sin,
    ieee_sinh,
    ieee_sqrt,
)

# Stable-Magnitude Kernel
from src.core.math.magnitude import argument, log_magnitude, magnitude

# Core Arithmetic
from src.core.math.arithmetic import (
    DivisionByZero,
    add,
    conjugate,
    div,
    inverse,
    mul,
    neg,
    sign,
    sub,
)

# Transcendental Functions
from src.core.math.transcendental import exp, log, pow, sqrt

# Trigonometry
from src.core.math.trigonometry import (
    acos,
    asin,
    atan,
    cos,
    cosh,
    sin,
    sinh,
    tan,
    tanh,
)

# Rounding / Comparison
from src.core.math.rounding import ceil, equals, floor, round_half_up

__all__ = [
    # Numerical Safeguards: Epsilon constants
    "EPSILON",
    "MAGNITUDE_DIRECT_LIMIT",
    "MAGNITUDE_UNDERFLOW_LIMIT",
    # Numerical Safeguards: Types
    "ComplexPair",
    # Numerical Safeguards: NaN/Inf checks
    "has_nan",
    "heaviside",
    "is_valid_float",
    "is_within_epsilon",
    # Numerical Safeguards: IEEE-754 wrappers
    "ieee_cos",
    "ieee_cosh",
    "ieee_divide",
    "ieee_exp",
    "ieee_log",
    "ieee_pow",
    "ieee_sin",
    "ieee_sinh",
    "ieee_sqrt",
    # Magnitude
    "argument",
    "log_magnitude",
    "magnitude",
    # Arithmetic: Exceptions
    "DivisionByZero",
    # Arithmetic: Functions
    "add",
    "conjugate",
    "div",
    "inverse",
    "mul",
    "neg",
    "sign",
    "sub",
    # Transcendental
    "exp",
    "log",
    "pow",
    "sqrt",
    # Trigonometry
    "acos",
    "asin",
    "atan",
    "cos",
    "cosh",
    "sin",
    "sinh",
    "tan",
    "tanh",
    # Rounding: Functions
    "ceil",
    "equals",
    "floor",
    "round_half_up",
]
