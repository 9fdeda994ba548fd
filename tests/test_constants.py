import pytest

from blockfall.constants import (
    BASE_DROP_INTERVAL,
    DROP_INTERVAL_DECREMENT,
    MIN_DROP_INTERVAL,
    drop_interval,
)


def test_first_level_uses_base_interval():
    assert drop_interval(1) == BASE_DROP_INTERVAL


def test_interval_never_below_minimum():
    assert drop_interval(100) == MIN_DROP_INTERVAL
    assert all(drop_interval(level) >= MIN_DROP_INTERVAL for level in range(1, 50))


def test_interval_is_non_increasing():
    intervals = [drop_interval(level) for level in range(1, 30)]
    assert intervals == sorted(intervals, reverse=True)


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5])
def test_consecutive_levels_differ_by_decrement(level):
    assert drop_interval(level) - drop_interval(level + 1) == DROP_INTERVAL_DECREMENT