"""
Общие фикстуры unit-тестов.

ScriptedRandomSource выдаёт заранее заданные значения вместо случайных,
чтобы тесты shuffle и random_choice проверяли точные перестановки.
"""

from collections import deque

import pytest

from src.core.random_source import RandomSource


class ScriptedRandomSource:
    """Источник с заранее заданными ответами next_int / next_float."""

    def __init__(self, ints=(), floats=()):
        self._ints = deque(ints)
        self._floats = deque(floats)
        self.int_calls: list[int] = []

    def next_int(self, upper: int) -> int:
        self.int_calls.append(upper)
        value = self._ints.popleft()
        assert 1 <= value <= upper, f"scripted {value} outside [1, {upper}]"
        return value

    def next_float(self) -> float:
        return self._floats.popleft()


@pytest.fixture
def scripted():
    """Фабрика ScriptedRandomSource."""
    return ScriptedRandomSource


@pytest.fixture
def seeded_rng() -> RandomSource:
    """Детерминированный источник с фиксированным seed."""
    return RandomSource(seed=20240601)
