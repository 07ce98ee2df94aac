"""
Number Theory — Теоретико-числовые функции

Функции:
- gcd: наибольший общий делитель набора целых (алгоритм Евклида)
- euler_phi: функция Эйлера φ(n) (пробное деление до √n)

Вычисления над int точные (произвольная точность). float с нулевой
дробной частью принимаются: gcd сохраняет их тип, euler_phi приводит к int.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(a, 0) = a, gcd(0, b) = b, иначе gcd(b, a mod b)
2. Модуль — floored (знак делителя), как оператор % в Python
3. Нецелый вход → InputShapeError с предупреждением в лог
"""

import logging
from typing import Any

from src.core.errors import DegenerateInputError, InputShapeError
from src.core.math.numerical_safeguards import is_integer_value

logger = logging.getLogger(__name__)


# =============================================================================
# GCD
# =============================================================================


def _gcd_pair(a: int, b: int) -> int:
    while True:
        if a == 0:
            return b
        if b == 0:
            return a
        a, b = b, a % b


def gcd(*values: int) -> int:
    """
    Наибольший общий делитель всех values.

    Попарная свёртка слева: gcd(gcd(gcd(n1, n2), n3), ...).
    Единственное значение возвращается без изменений (в том числе отрицательное).

    Args:
        *values: Одно или более целых

    Returns:
        НОД

    Raises:
        InputShapeError: Нет аргументов или аргумент не целый

    Examples:
        >>> gcd(12, 18, 30)
        6
        >>> gcd(7)
        7
        >>> gcd(0, 5)
        5
    """
    if not values:
        raise InputShapeError("gcd requires at least one value")
    for v in values:
        if not is_integer_value(v):
            raise InputShapeError(f"gcd values must be integers, got {v!r}")

    if len(values) == 1:
        return values[0]

    result = _gcd_pair(values[0], values[1])
    for v in values[2:]:
        result = _gcd_pair(result, v)
    return result


# =============================================================================
# EULER PHI
# =============================================================================


def euler_phi(n: Any) -> int:
    """
    Функция Эйлера φ(n): количество k ∈ [1, n], взаимно простых с n.

    Алгоритм: пробное деление i = 2, 3, ... пока i² ≤ n. Для каждого
    простого делителя p: result -= result // p, и все множители p
    удаляются из рабочей копии n. Остаток > 1 после цикла — простой
    делитель, к нему применяется та же поправка.

    T/S: O(√n), O(1)

    Raises:
        InputShapeError: n не целое (с предупреждением в лог)
        DegenerateInputError: n < 1

    Examples:
        >>> euler_phi(1)
        1
        >>> euler_phi(9)
        6
        >>> euler_phi(36)
        12
    """
    if not is_integer_value(n):
        logger.warning("euler_phi: must be an integer, got %r", n)
        raise InputShapeError(f"euler_phi argument must be an integer, got {n!r}")

    n = int(n)
    if n < 1:
        raise DegenerateInputError(f"euler_phi argument must be positive, got {n}")

    result = n
    i = 2
    while i * i <= n:
        if n % i == 0:
            result -= result // i
            while n % i == 0:
                n //= i
        i += 1

    if n > 1:
        result -= result // n

    return result
