"""
Random Source — Инжектируемый генератор псевдослучайных чисел

Все рандомизированные функции (shuffle, random_choice) получают случайность
только через RandomSource. Источник можно передать явно (воспроизводимость
в тестах), иначе используется процессный экземпляр по умолчанию.

Интерфейс источника:
- next_int(upper)  → равномерное целое из [1, upper]
- next_float()     → равномерное float из [0, 1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Глобальное состояние модуля random не используется
2. Одинаковый seed → одинаковая последовательность значений
3. Вызовы одного источника сериализованы через Lock (безопасно делить между потоками)
"""

import random
import threading
from typing import Optional

from src.core.errors import DegenerateInputError
from src.core.math.numerical_safeguards import validate_integer


class RandomSource:
    """
    Потокобезопасный источник случайных чисел поверх random.Random.

    Examples:
        >>> rng = RandomSource(seed=42)
        >>> 1 <= rng.next_int(6) <= 6
        True
        >>> 0.0 <= rng.next_float() < 1.0
        True
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def seed(self, seed: Optional[int]) -> None:
        """Пересев генератора (атомарно относительно других вызовов)."""
        with self._lock:
            self._rng.seed(seed)

    def next_int(self, upper: int) -> int:
        """
        Равномерное целое из [1, upper] включительно.

        Args:
            upper: Верхняя граница (≥ 1)

        Raises:
            DegenerateInputError: Если upper < 1 (пустой диапазон)
        """
        upper = validate_integer(upper, "upper")
        if upper < 1:
            raise DegenerateInputError(f"upper must be >= 1, got {upper}")

        with self._lock:
            return self._rng.randint(1, upper)

    def next_float(self) -> float:
        """Равномерное float из [0, 1)."""
        with self._lock:
            return self._rng.random()


# Глобальный экземпляр источника
_DEFAULT_SOURCE = RandomSource()


def default_random_source() -> RandomSource:
    """Процессный источник, используемый при rng=None."""
    return _DEFAULT_SOURCE


def seed_default_random_source(seed: Optional[int]) -> None:
    """Пересев процессного источника по умолчанию."""
    _DEFAULT_SOURCE.seed(seed)


def resolve_random_source(rng: Optional[RandomSource]) -> RandomSource:
    """Явно переданный источник или процессный по умолчанию."""
    return rng if rng is not None else _DEFAULT_SOURCE
