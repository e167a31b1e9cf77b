"""
Core math modules для ray tracer

Математические примитивы: 4-компонентный tuple и численные защиты.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPSILON,
    # Epsilon comparisons
    is_equal,
    is_valid_float,
    # Utilities
    clamp,
    clamp_channel,
    round_half_away,
    # Validation
    validate_positive,
)

# Tuple Algebra
from src.core.math.tuples import (
    BLACK,
    BLUE,
    GREEN,
    RED,
    WHITE,
    Tuple,
    TupleKind,
    color,
    point,
    vector,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPSILON",
    # Numerical Safeguards — Epsilon comparisons
    "is_equal",
    "is_valid_float",
    # Numerical Safeguards — Utilities
    "clamp",
    "clamp_channel",
    "round_half_away",
    # Numerical Safeguards — Validation
    "validate_positive",
    # Tuple — Types
    "Tuple",
    "TupleKind",
    # Tuple — Constructors
    "color",
    "point",
    "vector",
    # Tuple — Named colors
    "BLACK",
    "BLUE",
    "GREEN",
    "RED",
    "WHITE",
]
