"""
Elements of Lists — Удаление и выбор элементов

Функции:
- drop: t без элементов, заданных счётчиком или структурной спецификацией
- delete_duplicates: t без повторов (первое вхождение сохраняется)
- random_choice: равномерный, множественный или взвешенный случайный выбор

Позиции 1-based. Входная последовательность никогда не мутирует.
"""

import logging
from collections.abc import Sequence
from typing import Any, Optional

from src.core.errors import DegenerateInputError, InputShapeError
from src.core.lists.specs import IndexSpec
from src.core.math.numerical_safeguards import (
    is_integer_value,
    is_sequence,
    validate_non_negative_int,
    validate_sequence,
    validate_weights,
)
from src.core.random_source import RandomSource, resolve_random_source

logger = logging.getLogger(__name__)


# =============================================================================
# DROP
# =============================================================================


def drop(t: Sequence[Any], index: Any) -> list[Any]:
    """
    t с удалёнными элементами.

    Формы index:
        n > 0       — без первых n элементов
        n < 0       — без последних |n| элементов
        n == 0      — копия t
        (n,)        — без элемента на позиции n
        (m, n)      — без позиций m..n включительно
        (m, n, s)   — без позиций p ∈ [m, n], для которых (p - m) mod s == 0

    Позиции за пределами t просто ничего не исключают (не ошибка).

    Raises:
        InputShapeError: t не последовательность; index не целое и не спецификация
        DegenerateInputError: нулевой шаг s

    Examples:
        >>> drop([1, 2, 3, 4, 5], 2)
        [3, 4, 5]
        >>> drop([1, 2, 3, 4, 5], -2)
        [1, 2, 3]
        >>> drop([1, 2, 3, 4, 5], (2, 4))
        [1, 5]
        >>> drop([1, 2, 3, 4, 5, 6, 7], (1, 7, 3))
        [2, 3, 5, 6]
    """
    validate_sequence(t, "t")

    if is_integer_value(index):
        count = int(index)
        if count >= 0:
            return list(t[count:])
        return list(t[: max(len(t) + count, 0)])

    spec = IndexSpec.parse(index)
    return [v for position, v in enumerate(t, start=1) if not spec.excludes(position)]


# =============================================================================
# DELETE DUPLICATES
# =============================================================================


def delete_duplicates(t: Sequence[Any]) -> list[Any]:
    """
    Удаление повторов с сохранением первого вхождения и порядка.

    Hashable элементы отслеживаются через set (O(1)), unhashable
    (вложенные списки) — сравнением на равенство (O(k)).

    Examples:
        >>> delete_duplicates([3, 1, 3, 2, 1])
        [3, 1, 2]
        >>> delete_duplicates([[1], [2], [1]])
        [[1], [2]]
    """
    validate_sequence(t, "t")

    seen_hashable: set[Any] = set()
    seen_unhashable: list[Any] = []
    unique = []
    for v in t:
        try:
            if v in seen_hashable:
                continue
            seen_hashable.add(v)
        except TypeError:
            if v in seen_unhashable:
                continue
            seen_unhashable.append(v)
        unique.append(v)
    return unique


# =============================================================================
# RANDOM CHOICE
# =============================================================================


def _pick(t: Sequence[Any], rng: RandomSource) -> Any:
    return t[rng.next_int(len(t)) - 1]


def _weighted_pick(t: Sequence[Any], weights: Sequence[Any], rng: RandomSource) -> Any:
    """
    Один взвешенный выбор.

    r ∈ [0, total); из r последовательно вычитаются веса, выбирается
    элемент, на котором r становится < 0. Элементы с нулевым весом
    никогда не выбираются.
    """
    total_weight = validate_weights(weights)
    random_weight = rng.next_float() * total_weight

    for v, w in zip(t, weights):
        random_weight -= w
        if random_weight < 0:
            return v

    # Округление float может оставить random_weight ≈ 0 после последнего веса
    for v, w in zip(reversed(t), reversed(weights)):
        if w > 0:
            return v
    raise DegenerateInputError("total weight must be positive")


def random_choice(
    t: Sequence[Any],
    spec: Any = None,
    rng: Optional[RandomSource] = None,
) -> Any:
    """
    Псевдослучайный выбор из t.

    - random_choice(t): один равномерно выбранный элемент
    - random_choice(t, n): список из n независимых равномерных выборов (с возвращением)
    - random_choice(t, weights): один выбор с вероятностью, пропорциональной весу.
      Веса не обязаны суммироваться в 1.

    Args:
        t: Непустая последовательность значений
        spec: None, счётчик n ≥ 0 или последовательность весов длины len(t)
        rng: Источник случайности (default: процессный)

    Raises:
        InputShapeError: длины t и weights различаются; spec неверного типа
        DegenerateInputError: t пуст; все веса нулевые; n < 0

    Examples:
        >>> random_choice(["a", "b", "c"], [0, 0, 1])
        'c'
    """
    validate_sequence(t, "t")
    if len(t) == 0:
        raise DegenerateInputError("t must be non-empty")

    source = resolve_random_source(rng)

    if spec is None:
        return _pick(t, source)

    if is_integer_value(spec):
        count = validate_non_negative_int(spec, "n")
        return [_pick(t, source) for _ in range(count)]

    if is_sequence(spec):
        if len(t) != len(spec):
            logger.warning(
                "random_choice: size of t and weights must be equal (%d != %d)",
                len(t),
                len(spec),
            )
            raise InputShapeError(
                f"size of t and weights must be equal: {len(t)} != {len(spec)}"
            )
        return _weighted_pick(t, spec, source)

    raise InputShapeError(f"spec must be None, a count or a weight sequence, got {spec!r}")
