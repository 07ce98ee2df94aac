"""
Тесты для модуля Rearranging & Restructuring Lists

Проверяет:
1. flatten: уровни раскрытия, порядок обхода, level = 0
2. partition: группы и остаток, реконструкция исходной последовательности
3. riffle: чередование с циклическим t2
4. shuffle: точные перестановки Fisher–Yates, сохранение мультимножества
"""

import math
import random

import pytest

from src.core.errors import DegenerateInputError, InputShapeError
from src.core.lists.restructuring import flatten, partition, riffle, shuffle
from src.core.random_source import RandomSource

# =============================================================================
# FLATTEN
# =============================================================================


def _leaves(t):
    """Эталонный depth-first обход листьев."""
    for v in t:
        if isinstance(v, (list, tuple)):
            yield from _leaves(v)
        else:
            yield v


def _depth(t) -> int:
    return 1 + max((_depth(v) for v in t if isinstance(v, (list, tuple))), default=0)


class TestFlatten:
    """Тесты для flatten"""

    @pytest.fixture
    def nested(self) -> list:
        return [1, [2, [3, [4, 5]]], (6, 7), "ab", [[8]]]

    def test_default_level_one(self, nested: list) -> None:
        assert flatten(nested) == [1, 2, [3, [4, 5]], 6, 7, "ab", [8]]

    def test_level_two(self, nested: list) -> None:
        assert flatten(nested, 2) == [1, 2, 3, [4, 5], 6, 7, "ab", 8]

    def test_full_flatten(self, nested: list) -> None:
        expected = [1, 2, 3, 4, 5, 6, 7, "ab", 8]
        assert flatten(nested, 3) == expected
        assert flatten(nested, math.inf) == expected

    def test_level_zero_returns_same_object(self, nested: list) -> None:
        assert flatten(nested, 0) is nested

    def test_strings_not_split(self) -> None:
        assert flatten(["abc", ["de"]], math.inf) == ["abc", "de"]

    def test_empty_nested(self) -> None:
        assert flatten([[], [[]], 1]) == [[], 1]
        assert flatten([[], [[]], 1], 2) == [1]

    def test_input_not_mutated(self, nested: list) -> None:
        snapshot = [1, [2, [3, [4, 5]]], (6, 7), "ab", [[8]]]
        flatten(nested, math.inf)
        assert nested == snapshot

    def test_leaves_in_depth_first_order(self) -> None:
        """При level ≥ глубины результат — все листья в depth-first порядке"""
        rnd = random.Random(7)

        def build(depth: int) -> list:
            items = []
            for _ in range(rnd.randint(0, 4)):
                if depth > 0 and rnd.random() < 0.4:
                    items.append(build(depth - 1))
                else:
                    items.append(rnd.randint(0, 99))
            return items

        for _ in range(50):
            t = build(4)
            assert flatten(t, _depth(t)) == list(_leaves(t))

    def test_negative_level_rejected(self) -> None:
        with pytest.raises(DegenerateInputError):
            flatten([1, [2]], -1)

    def test_bad_level_rejected(self) -> None:
        with pytest.raises(InputShapeError):
            flatten([1, [2]], 1.5)

    def test_non_sequence_rejected(self) -> None:
        with pytest.raises(InputShapeError):
            flatten({1: [2]})


# =============================================================================
# PARTITION
# =============================================================================


class TestPartition:
    """Тесты для partition"""

    def test_even_split(self) -> None:
        assert partition([1, 2, 3, 4], 2) == [[1, 2], [3, 4]]

    def test_remainder_group(self) -> None:
        assert partition([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]

    def test_default_size_one(self) -> None:
        assert partition(["a", "b"]) == [["a"], ["b"]]

    def test_size_larger_than_sequence(self) -> None:
        assert partition([1, 2], 5) == [[1, 2]]

    def test_empty(self) -> None:
        assert partition([], 3) == []

    def test_tuple_groups_are_lists(self) -> None:
        assert partition((1, 2, 3), 2) == [[1, 2], [3]]

    def test_reconstruction_property(self) -> None:
        """Конкатенация групп восстанавливает t; все группы длины n, кроме последней"""
        t = list(range(23))
        for n in range(1, 26):
            groups = partition(t, n)
            assert [v for g in groups for v in g] == t
            assert all(len(g) == n for g in groups[:-1])
            assert 1 <= len(groups[-1]) <= n

    def test_non_positive_size_rejected(self) -> None:
        with pytest.raises(DegenerateInputError):
            partition([1, 2], 0)
        with pytest.raises(DegenerateInputError):
            partition([1, 2], -2)

    def test_non_integer_size_rejected(self) -> None:
        with pytest.raises(InputShapeError):
            partition([1, 2], 1.5)


# =============================================================================
# RIFFLE
# =============================================================================


class TestRiffle:
    """Тесты для riffle"""

    def test_single_separator(self) -> None:
        assert riffle([1, 2, 3], [10]) == [1, 10, 2, 10, 3]

    def test_cycling_separator(self) -> None:
        assert riffle([1, 2, 3], [10, 20]) == [1, 10, 2, 20, 3]

    def test_equal_lengths(self) -> None:
        """Последний элемент t2 отбрасывается"""
        assert riffle(["a1", "a2", "a3"], ["b1", "b2", "b3"]) == ["a1", "b1", "a2", "b2", "a3"]

    def test_longer_t2(self) -> None:
        assert riffle([1, 2], [10, 20, 30]) == [1, 10, 2]

    def test_single_element_t1(self) -> None:
        assert riffle([1], [10]) == [1]

    def test_result_length(self) -> None:
        for n in range(1, 10):
            assert len(riffle(list(range(n)), [0, 1, 2])) == 2 * n - 1

    def test_empty_t2_rejected(self) -> None:
        with pytest.raises(DegenerateInputError, match="t2 must be non-empty"):
            riffle([1, 2], [])

    def test_empty_t1_rejected(self) -> None:
        with pytest.raises(DegenerateInputError, match="t1 must be non-empty"):
            riffle([], [1])


# =============================================================================
# SHUFFLE
# =============================================================================


class TestShuffle:
    """Тесты для shuffle"""

    def test_fisher_yates_swaps(self, scripted) -> None:
        """j = 3 → k = 1 (swap 3↔1), j = 2 → k = 2 (без обмена)"""
        rng = scripted(ints=[1, 2])
        t = [1, 2, 3]
        assert shuffle(t, rng=rng) == [3, 2, 1]
        assert rng.int_calls == [3, 2]

    def test_multiple_passes(self, scripted) -> None:
        """Каждый проход перемешивает результат предыдущего"""
        rng = scripted(ints=[1, 2, 1, 1])
        t = ["a", "b", "c"]
        # проход 1: [c, b, a]; проход 2: swap 3↔1 → [a, b, c], swap 2↔1 → [b, a, c]
        assert shuffle(t, 2, rng=rng) == ["b", "a", "c"]
        assert rng.int_calls == [3, 2, 3, 2]

    def test_returns_same_object(self, seeded_rng: RandomSource) -> None:
        t = [1, 2, 3, 4]
        assert shuffle(t, rng=seeded_rng) is t

    def test_zero_passes_is_noop(self, scripted) -> None:
        rng = scripted()
        t = [1, 2, 3]
        assert shuffle(t, 0, rng=rng) == [1, 2, 3]
        assert rng.int_calls == []

    def test_short_sequences(self, scripted) -> None:
        rng = scripted()
        assert shuffle([], rng=rng) == []
        assert shuffle([1], rng=rng) == [1]
        assert rng.int_calls == []

    def test_preserves_multiset(self, seeded_rng: RandomSource) -> None:
        """Любое число проходов сохраняет мультимножество элементов"""
        original = [5, 1, 1, 3, 9, 9, 9, 0, -2]
        for n in range(1, 6):
            t = list(original)
            shuffle(t, n, rng=seeded_rng)
            assert sorted(t) == sorted(original)

    def test_reproducible_with_seed(self) -> None:
        a = shuffle(list(range(20)), 3, rng=RandomSource(seed=1))
        b = shuffle(list(range(20)), 3, rng=RandomSource(seed=1))
        assert a == b

    def test_all_permutations_reachable(self, seeded_rng: RandomSource) -> None:
        seen = {tuple(shuffle([1, 2, 3], rng=seeded_rng)) for _ in range(600)}
        assert len(seen) == 6

    def test_immutable_rejected(self, seeded_rng: RandomSource) -> None:
        with pytest.raises(InputShapeError, match="mutable sequence"):
            shuffle((1, 2, 3), rng=seeded_rng)

    def test_negative_passes_rejected(self, seeded_rng: RandomSource) -> None:
        with pytest.raises(DegenerateInputError):
            shuffle([1, 2], -1, rng=seeded_rng)
