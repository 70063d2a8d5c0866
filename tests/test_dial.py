"""Property tests for the dial arithmetic."""

from __future__ import annotations

import math

from hypothesis import given
from hypothesis import strategies as st
import pytest

from watchface.dial import (
    degrees_to_millis,
    label_amplifier,
    label_text,
    mark_degrees,
    scrub_angle,
)
from watchface.utils import circular_distance

ANGLES = st.floats(
    min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False
)


@given(ANGLES)
def test_degrees_to_millis_is_six_degrees_per_second(v: float) -> None:
    ms = degrees_to_millis(v)
    assert isinstance(ms, int)
    assert ms >= 0
    assert ms == int(abs(v) / 6 * 1000)


@pytest.mark.parametrize(
    ("degrees", "expected"),
    ((0.0, 0), (6.0, 1000), (-6.0, 1000), (360.0, 60000), (-0.0059, 0), (1.0, 166)),
)
def test_degrees_to_millis_examples(degrees: float, expected: int) -> None:
    assert degrees_to_millis(degrees) == expected


@given(ANGLES, st.integers(min_value=0, max_value=11))
def test_label_amplifier_emphasises_only_nearby_mark(sweep: float, mark: int) -> None:
    degrees = mark_degrees(mark)
    near = circular_distance(sweep % 360, degrees) <= 5
    assert label_amplifier(sweep, degrees) == (1.2 if near else 1.0)


@pytest.mark.parametrize(
    ("sweep", "label_degrees", "expected"),
    (
        (0.0, 0.0, 1.2),
        (5.0, 0.0, 1.2),
        (5.5, 0.0, 1.0),
        (-3.0, 0.0, 1.2),  # wraps to 357°
        (-60.0, 300.0, 1.2),
        (-62.0, 300.0, 1.2),
        (92.0, 90.0, 1.2),
        (100.0, 90.0, 1.0),
        (725.0, 0.0, 1.2),
    ),
)
def test_label_amplifier_examples(
    sweep: float, label_degrees: float, expected: float
) -> None:
    assert label_amplifier(sweep, label_degrees) == expected


def test_label_amplifier_custom_emphasis() -> None:
    assert label_amplifier(30.0, 30.0, emphasis=1.5) == 1.5


@pytest.mark.parametrize(
    ("mark", "text"),
    ((0, "60"), (1, "55"), (2, "50"), (6, "30"), (11, "5")),
)
def test_label_text_counts_down_from_sixty(mark: int, text: str) -> None:
    assert label_text(mark) == text


def test_label_texts_follow_five_minute_steps() -> None:
    assert [label_text(m) for m in range(12)] == [
        str(60 - 5 * m) for m in range(12)
    ]


def test_scrub_from_zero() -> None:
    assert scrub_angle(0.0, 100.0) == -50.0


@given(ANGLES, st.floats(min_value=-1e4, max_value=1e4, allow_nan=False))
def test_scrub_result_lies_in_half_open_turn(current: float, delta: float) -> None:
    result = scrub_angle(current, delta)
    assert -360.0 < result <= 0.0
    expected = math.fmod(-abs(current + delta * 0.5), 360.0)
    assert result == expected


def test_scrub_wraps_past_a_full_turn() -> None:
    assert scrub_angle(-350.0, -30.0) == pytest.approx(-5.0)


def test_scrub_loses_direction_once_sum_changes_sign() -> None:
    # Preserved behaviour: dragging right from -10 by 40 px does not move
    # the needle forward, because abs() folds +10 back onto -10.
    assert scrub_angle(-10.0, 40.0) == pytest.approx(-10.0)
    assert scrub_angle(-10.0, -40.0) == pytest.approx(-30.0)
