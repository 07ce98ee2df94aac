"""
Core math modules для mlkit

Теоретико-числовые функции и guard-предикаты для валидации входов.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Predicates
    is_integer_value,
    is_number,
    is_sequence,
    is_valid_float,
    # Validation
    validate_callable,
    validate_integer,
    validate_level,
    validate_non_negative_int,
    validate_number,
    validate_positive_int,
    validate_sequence,
    validate_weights,
)

# Number Theory
from src.core.math.number_theory import (
    euler_phi,
    gcd,
)

__all__ = [
    # Numerical Safeguards — Predicates
    "is_integer_value",
    "is_number",
    "is_sequence",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_callable",
    "validate_integer",
    "validate_level",
    "validate_non_negative_int",
    "validate_number",
    "validate_positive_int",
    "validate_sequence",
    "validate_weights",
    # Number Theory
    "euler_phi",
    "gcd",
]
