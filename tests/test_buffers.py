import pytest

from acidvoice.buffers import (
    circular_shift,
    clip_buffer,
    max_abs,
    max_index,
    mean,
    median,
    min_index,
    normalize,
    remove_mean,
)

DATA = [3.0, -7.5, 2.0, 9.25, -1.0, 0.5]


@pytest.mark.parametrize("shift", [-8, -3, -1, 0, 1, 2, 5, 13])
def test_circular_shift_round_trip(shift):
    shifted = circular_shift(DATA, shift)
    assert sorted(shifted) == sorted(DATA)
    assert circular_shift(shifted, -shift) == DATA


def test_circular_shift_direction():
    assert circular_shift(DATA, 1)[0] == DATA[-1]
    assert circular_shift(DATA, -1)[-1] == DATA[0]


def test_circular_shift_wraps_by_length():
    assert circular_shift(DATA, len(DATA)) == DATA
    assert circular_shift(DATA, len(DATA) + 2) == circular_shift(DATA, 2)
    assert circular_shift(DATA, -(2 * len(DATA) + 1)) == circular_shift(DATA, -1)
    assert circular_shift([], 3) == []


def test_clip_buffer():
    clipped = clip_buffer(DATA, -2.0, 4.0)
    assert all(-2.0 <= v <= 4.0 for v in clipped)
    assert [v for v in clipped if -2.0 < v < 4.0] == [v for v in DATA if -2.0 < v < 4.0]
    assert clipped[1] == -2.0
    assert clipped[3] == 4.0


def test_max_abs():
    assert max_abs(DATA) == 9.25
    assert max_abs([-11.0, 4.0]) == 11.0
    assert max_abs([]) == 0


def test_indices_take_first_occurrence():
    assert max_index([3, 1, 3]) == 0
    assert min_index([1, 5, 1]) == 0
    assert max_index(DATA) == 3
    assert min_index(DATA) == 1


@pytest.mark.parametrize("func", [max_index, min_index, mean, median])
def test_empty_buffer_raises(func):
    with pytest.raises(ValueError):
        func([])


def test_mean_of_constant_buffer():
    assert mean([2.5] * 7) == 2.5


def test_median():
    assert median([3, 1, 2]) == 2
    assert median([4.0, 1.0, 3.0, 2.0]) == pytest.approx((2.0 + 3.0) / 2)


def test_remove_mean_zero_sum():
    result = remove_mean(DATA)
    assert sum(result) == pytest.approx(0.0, abs=1e-12)
    assert mean(result) == pytest.approx(0.0, abs=1e-12)
    diffs = [a - b for a, b in zip(DATA, result)]
    assert all(d == pytest.approx(diffs[0]) for d in diffs)


def test_normalize_sets_peak():
    result = normalize(DATA, 0.8)
    assert max_abs(result) == pytest.approx(0.8)
    assert max_index(result) == max_index(DATA)


def test_normalize_all_zero_raises():
    with pytest.raises(ValueError):
        normalize([0.0, 0.0], 1.0)