import pytest

from chartkit.sequence import LinearSeq, linear_range, linear_range_with_step


def test_linear_range_ascending():
    assert linear_range(1.0, 5.0) == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_linear_range_length_and_ends():
    values = linear_range(1.0, 50.0)
    assert len(values) == 50
    assert values[0] == 1.0
    assert values[-1] == 50.0


def test_descending_is_reverse_of_ascending():
    assert linear_range(10.0, -10.0) == list(reversed(linear_range(-10.0, 10.0)))


def test_with_step_values_are_evenly_spaced():
    values = linear_range_with_step(0.0, 10.0, 2.5)
    assert values[0] == 0.0
    assert values[-1] == 10.0
    gaps = {b - a for a, b in zip(values, values[1:])}
    assert gaps == {2.5}


def test_single_value_when_start_equals_end():
    assert linear_range(3.0, 3.0) == [3.0]


def test_len_matches_values_and_iteration():
    seq = LinearSeq(start=2.0, end=20.0, step=3.0)
    assert len(seq) == len(seq.values())
    assert list(seq) == seq.values()
    assert seq.value_at(1) == 5.0


def test_default_step_is_one():
    seq = LinearSeq(start=0.0, end=4.0)
    assert seq.step == 1.0
    assert len(seq) == 5


@pytest.mark.parametrize("step", [0.0, -1.0])
def test_non_positive_step_rejected(step):
    with pytest.raises(ValueError):
        LinearSeq(0.0, 1.0, step)