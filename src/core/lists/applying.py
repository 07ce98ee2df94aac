"""
Applying Functions to Lists — Применение функции к элементам

map_level применяет f к каждому элементу на уровнях 1..level
вложенной последовательности, изменяя её in-place.
"""

from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, Final

from src.core.errors import InputShapeError
from src.core.math.numerical_safeguards import (
    is_sequence,
    validate_callable,
    validate_level,
    validate_sequence,
)

# Уровень map_level по умолчанию
DEFAULT_MAP_LEVEL: Final[int] = 1


def _map_in_place(
    f: Callable[[Any], Any], t: MutableSequence[Any], level: float
) -> MutableSequence[Any]:
    for i, v in enumerate(t):
        if is_sequence(v):
            if level - 1 == 0:
                continue
            # tuple нельзя изменить in-place: заменяем списком
            target = v if isinstance(v, MutableSequence) else list(v)
            t[i] = _map_in_place(f, target, level - 1)
        else:
            t[i] = f(v)
    return t


def map_level(
    f: Callable[[Any], Any],
    t: Sequence[Any],
    level: float = DEFAULT_MAP_LEVEL,
) -> Sequence[Any]:
    """
    Применение f к каждому элементу t до уровня level.

    Для каждого элемента верхнего уровня: вложенная последовательность
    обрабатывается рекурсивно с уровнем level − 1, прочие элементы
    заменяются на f(v). На исчерпанном уровне вложенные
    последовательности остаются без изменений.

    Args:
        f: Функция одного аргумента
        t: Последовательность (мутирует in-place)
        level: Глубина (default: 1; 0 — t без изменений; math.inf — все уровни)

    Returns:
        Тот же объект t

    Raises:
        InputShapeError: f не callable; t неизменяемая при level > 0
        DegenerateInputError: level < 0

    Examples:
        >>> map_level(lambda x: x * 10, [1, [2, 3], 4])
        [10, [2, 3], 40]
        >>> map_level(lambda x: x * 10, [1, [2, 3], 4], 2)
        [10, [20, 30], 40]
        >>> map_level(lambda x: x * 10, [1, [2, [3]]], math.inf)
        [10, [20, [30]]]
    """
    validate_callable(f, "f")
    validate_sequence(t, "t")
    depth = validate_level(level)

    if depth == 0:
        return t

    if not isinstance(t, MutableSequence):
        raise InputShapeError(
            f"t must be a mutable sequence for level > 0, got {type(t).__name__}"
        )

    return _map_in_place(f, t, depth)
