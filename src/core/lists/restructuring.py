"""
Rearranging & Restructuring Lists — Перестройка списков

Функции:
- flatten: раскрытие вложенных последовательностей до заданного уровня
- partition: разбиение на непересекающиеся группы длины n
- riffle: чередование элементов t1 и t2
- shuffle: n последовательных проходов Fisher–Yates in-place

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. flatten/partition/riffle не мутируют вход и возвращают новый list
2. shuffle мутирует t и возвращает тот же объект
3. Обход вложенности строго позиционный (depth-first, слева направо)
"""

from collections.abc import MutableSequence, Sequence
from typing import Any, Final, Optional

from src.core.errors import DegenerateInputError, InputShapeError
from src.core.math.numerical_safeguards import (
    is_sequence,
    validate_level,
    validate_non_negative_int,
    validate_positive_int,
    validate_sequence,
)
from src.core.random_source import RandomSource, resolve_random_source

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Уровень flatten по умолчанию
DEFAULT_LEVEL: Final[int] = 1

# Размер группы partition по умолчанию
DEFAULT_PARTITION_SIZE: Final[int] = 1

# Количество проходов shuffle по умолчанию
DEFAULT_SHUFFLE_PASSES: Final[int] = 1


# =============================================================================
# FLATTEN
# =============================================================================


def flatten(t: Sequence[Any], level: float = DEFAULT_LEVEL) -> Sequence[Any]:
    """
    Раскрытие вложенных последовательностей до уровня level.

    level == 0 возвращает t без изменений (тот же объект). Иначе
    вложенные последовательности раскрываются, пока не исчерпан
    уровень (минус один за каждый пересечённый уровень вложенности);
    после этого оставшиеся вложенные последовательности добавляются целиком.

    Args:
        t: Последовательность (возможно вложенная)
        level: Глубина раскрытия (default: 1; math.inf — полностью)

    Examples:
        >>> flatten([1, [2, [3, [4]]]])
        [1, 2, [3, [4]]]
        >>> flatten([1, [2, [3, [4]]]], 2)
        [1, 2, 3, [4]]
        >>> flatten([1, [2, [3, [4]]]], math.inf)
        [1, 2, 3, 4]
    """
    validate_sequence(t, "t")
    level = validate_level(level)

    if level == 0:
        return t

    result: list[Any] = []

    def _flatten(items: Sequence[Any], remaining: float) -> None:
        for v in items:
            if is_sequence(v) and remaining > 0:
                _flatten(v, remaining - 1)
            else:
                result.append(v)

    _flatten(t, level)
    return result


# =============================================================================
# PARTITION
# =============================================================================


def partition(t: Sequence[Any], n: int = DEFAULT_PARTITION_SIZE) -> list[list[Any]]:
    """
    Разбиение t на непересекающиеся группы длины n.

    Последняя группа содержит остаток (длина ≤ n), если len(t) не кратна n.

    Raises:
        InputShapeError: n не целое
        DegenerateInputError: n ≤ 0

    Examples:
        >>> partition([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    validate_sequence(t, "t")
    size = validate_positive_int(n, "n")
    return [list(t[i : i + size]) for i in range(0, len(t), size)]


# =============================================================================
# RIFFLE
# =============================================================================


def riffle(t1: Sequence[Any], t2: Sequence[Any]) -> list[Any]:
    """
    Чередование элементов t1 и t2.

    Индексы t2 циклически повторяются, если t2 короче t1. Завершающий
    элемент t2 отбрасывается: длина результата 2·len(t1) − 1.

    Raises:
        DegenerateInputError: t1 или t2 пусты

    Examples:
        >>> riffle([1, 2, 3], [10])
        [1, 10, 2, 10, 3]
        >>> riffle([1, 2, 3], [10, 20])
        [1, 10, 2, 20, 3]
    """
    validate_sequence(t1, "t1")
    validate_sequence(t2, "t2")
    if len(t1) == 0:
        raise DegenerateInputError("t1 must be non-empty")
    if len(t2) == 0:
        raise DegenerateInputError("t2 must be non-empty")

    result = []
    for i, v in enumerate(t1):
        result.append(v)
        result.append(t2[i % len(t2)])
    result.pop()
    return result


# =============================================================================
# SHUFFLE
# =============================================================================


def shuffle(
    t: MutableSequence[Any],
    n: int = DEFAULT_SHUFFLE_PASSES,
    rng: Optional[RandomSource] = None,
) -> MutableSequence[Any]:
    """
    n последовательных проходов Fisher–Yates in-place.

    Каждый проход: для j от len(t) до 2 выбирается k ∈ [1, j]
    и позиции j, k меняются местами. Повторные проходы статистически
    избыточны, но сохраняют последовательность обращений к rng.

    Args:
        t: Изменяемая последовательность (мутирует)
        n: Количество проходов (default: 1; 0 — без изменений)
        rng: Источник случайности (default: процессный)

    Returns:
        Тот же объект t

    Raises:
        InputShapeError: t неизменяемая; n не целое
        DegenerateInputError: n < 0
    """
    if not isinstance(t, MutableSequence):
        raise InputShapeError(
            f"t must be a mutable sequence, got {type(t).__name__}"
        )
    passes = validate_non_negative_int(n, "n")
    source = resolve_random_source(rng)

    for _ in range(passes):
        for j in range(len(t), 1, -1):
            k = source.next_int(j)
            t[j - 1], t[k - 1] = t[k - 1], t[j - 1]
    return t
