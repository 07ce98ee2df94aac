"""
Numerical Safeguards — Предикаты и валидация входов

Модуль содержит guard-функции, которые используют все функции mlkit
на входе:
- Проверки типов: число, целое значение, последовательность
- Валидация параметров с понятным сообщением об ошибке (включая уровень вложенности)
- Валидация векторов весов для взвешенной выборки

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не считается числом (True не является ни 1, ни целым)
2. str/bytes никогда не считаются последовательностью
3. NaN/Inf не проходят валидацию числовых параметров
4. Невалидный вход → InputShapeError / DegenerateInputError, никогда не молчаливый fallback
"""

import math
from collections.abc import Sequence
from numbers import Integral, Real
from typing import Any

from src.core.errors import DegenerateInputError, InputShapeError

# =============================================================================
# ПРЕДИКАТЫ ТИПОВ
# =============================================================================


def is_number(value: Any) -> bool:
    """
    Проверка, является ли значение вещественным числом (int/float, не bool).

    Examples:
        >>> is_number(3)
        True
        >>> is_number(2.5)
        True
        >>> is_number(True)
        False
        >>> is_number("3")
        False
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def is_valid_float(value: Any) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если value — число и оно finite
    """
    return is_number(value) and math.isfinite(value)


def is_integer_value(value: Any) -> bool:
    """
    Проверка, является ли значение целым числом.

    Целыми считаются int и конечные float с нулевой дробной частью.

    Examples:
        >>> is_integer_value(9)
        True
        >>> is_integer_value(9.0)
        True
        >>> is_integer_value(9.5)
        False
        >>> is_integer_value(False)
        False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, Integral):
        return True
    return isinstance(value, float) and math.isfinite(value) and value.is_integer()


def is_sequence(value: Any) -> bool:
    """
    Проверка, является ли значение упорядоченной последовательностью (list/tuple).

    Строки и bytes — скаляры: flatten и map_level не разбирают их на символы.
    """
    return isinstance(value, (list, tuple))


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_number(value: Any, name: str) -> None:
    """
    Валидация, что значение — конечное число.

    Raises:
        InputShapeError: Если value не число, bool, NaN или Inf
    """
    if not is_valid_float(value):
        raise InputShapeError(f"{name} must be a finite number, got {value!r}")


def validate_integer(value: Any, name: str) -> int:
    """
    Валидация целого значения.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value, приведённое к int

    Raises:
        InputShapeError: Если value не целое
    """
    if not is_integer_value(value):
        raise InputShapeError(f"{name} must be an integer, got {value!r}")
    return int(value)


def validate_non_negative_int(value: Any, name: str) -> int:
    """
    Валидация, что значение — целое ≥ 0.

    Raises:
        InputShapeError: Если value не целое
        DegenerateInputError: Если value < 0
    """
    result = validate_integer(value, name)
    if result < 0:
        raise DegenerateInputError(f"{name} must be non-negative, got {value!r}")
    return result


def validate_positive_int(value: Any, name: str) -> int:
    """
    Валидация, что значение — целое ≥ 1.

    Raises:
        InputShapeError: Если value не целое
        DegenerateInputError: Если value ≤ 0
    """
    result = validate_integer(value, name)
    if result <= 0:
        raise DegenerateInputError(f"{name} must be positive, got {value!r}")
    return result


def validate_level(value: Any, name: str = "level") -> int | float:
    """
    Валидация уровня вложенности: целое ≥ 0 или math.inf (все уровни).

    Returns:
        int, либо math.inf

    Raises:
        InputShapeError: Если value не целое и не math.inf
        DegenerateInputError: Если value < 0
    """
    if value == math.inf:
        return math.inf
    return validate_non_negative_int(value, name)


def validate_sequence(value: Any, name: str) -> None:
    """Валидация, что значение — list или tuple."""
    if not is_sequence(value):
        raise InputShapeError(
            f"{name} must be a list or tuple, got {type(value).__name__}"
        )


def validate_callable(value: Any, name: str) -> None:
    """Валидация, что значение можно вызвать."""
    if not callable(value):
        raise InputShapeError(f"{name} must be callable, got {value!r}")


def validate_weights(weights: Sequence[Any]) -> float:
    """
    Валидация вектора весов для взвешенной выборки.

    Веса не обязаны суммироваться в 1: нормализация неявная через total.

    Args:
        weights: Последовательность весов

    Returns:
        Суммарный вес

    Raises:
        InputShapeError: Если вес отрицательный, NaN или Inf
        DegenerateInputError: Если суммарный вес равен нулю
    """
    total = 0.0
    for i, w in enumerate(weights):
        if not is_valid_float(w) or w < 0:
            raise InputShapeError(
                f"weights[{i}] must be a finite non-negative number, got {w!r}"
            )
        total += w

    if total <= 0:
        raise DegenerateInputError("total weight must be positive")

    return total

