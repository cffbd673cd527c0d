"""Tests for the product code allocator."""

from __future__ import annotations

import random

import pytest

from src.exceptions import AllocationExhaustedException
from src.modules.product.allocator import allocate, format_product_code, is_product_code


class ScriptedRandom:
    """Random source that replays a fixed sequence of draws."""

    def __init__(self, values):
        self._values = iter(values)
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        value = next(self._values)
        assert a <= value <= b
        return value


class CountingRandom(random.Random):
    def __init__(self, seed: int = 0) -> None:
        super().__init__(seed)
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        return super().randint(a, b)


def _all_codes(space_size: int) -> set[str]:
    return {format_product_code(n) for n in range(1, space_size + 1)}


class TestFormatProductCode:
    @pytest.mark.parametrize(
        "number,expected",
        [(1, "#LT001"), (42, "#LT042"), (999, "#LT999")],
    )
    def test_zero_pads_to_three_digits(self, number, expected):
        assert format_product_code(number) == expected

    @pytest.mark.parametrize("number", [0, -1, 1000])
    def test_out_of_range_rejected(self, number):
        with pytest.raises(ValueError):
            format_product_code(number)

    def test_is_product_code(self):
        assert is_product_code("#LT007")
        assert not is_product_code("LT007")
        assert not is_product_code("#LT0007")
        assert not is_product_code("")


class TestAllocate:
    def test_empty_set_succeeds_on_first_draw(self):
        rng = CountingRandom(seed=1)
        code = allocate(set(), rng=rng)

        assert is_product_code(code)
        assert rng.calls == 1

    def test_default_space_stays_in_range(self):
        for _ in range(200):
            code = allocate(set())
            assert "#LT001" <= code <= "#LT999"

    def test_skips_taken_codes(self):
        rng = ScriptedRandom([3, 3, 8])
        code = allocate({"#LT003"}, rng=rng)

        assert code == "#LT008"
        assert rng.calls == 3

    def test_result_never_in_existing(self):
        existing = _all_codes(999) - {"#LT500", "#LT501", "#LT502"}
        rng = CountingRandom(seed=7)
        for _ in range(20):
            try:
                code = allocate(existing, max_attempts=50, rng=rng)
            except AllocationExhaustedException:
                continue
            assert code not in existing

    def test_full_space_exhausts_after_exactly_max_attempts(self):
        rng = CountingRandom(seed=3)

        with pytest.raises(AllocationExhaustedException) as exc_info:
            allocate(_all_codes(20), max_attempts=7, space_size=20, rng=rng)

        assert rng.calls == 7
        assert exc_info.value.attempts == 7
        assert exc_info.value.status_code == 503

    def test_single_code_space_taken(self):
        with pytest.raises(AllocationExhaustedException):
            allocate({"#LT001"}, max_attempts=1, space_size=1)

    def test_finds_the_single_missing_code(self):
        existing = _all_codes(999) - {"#LT417"}
        rng = ScriptedRandom([12, 998, 5, 417])

        code = allocate(existing, max_attempts=50, rng=rng)

        assert code == "#LT417"
        assert rng.calls == 4

    def test_fixed_sequence_is_reproducible(self):
        first = [allocate({"#LT002"}, rng=ScriptedRandom([2, 9])) for _ in range(3)]
        assert first == ["#LT009"] * 3

        a = random.Random(99)
        b = random.Random(99)
        assert [allocate(set(), rng=a) for _ in range(10)] == [
            allocate(set(), rng=b) for _ in range(10)
        ]

    def test_accepts_any_collection(self):
        code = allocate(["#LT001"], space_size=2, rng=ScriptedRandom([1, 2]))
        assert code == "#LT002"

    @pytest.mark.parametrize("max_attempts", [0, -3])
    def test_non_positive_attempts_rejected(self, max_attempts):
        with pytest.raises(ValueError, match="max_attempts"):
            allocate(set(), max_attempts=max_attempts)

    @pytest.mark.parametrize("space_size", [0, 1000])
    def test_space_size_bounds(self, space_size):
        with pytest.raises(ValueError, match="space_size"):
            allocate(set(), space_size=space_size)
