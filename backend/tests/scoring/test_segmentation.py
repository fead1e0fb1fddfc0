import pytest

from tenpin.exceptions import InvalidPinCount
from tenpin.scoring import (
    Frame,
    FrameKind,
    current_frame,
    is_complete,
    pins_standing,
    segment,
)

REGRESSION_ROLLS = [1, 4, 4, 5, 6, 4, 5, 5, 10, 0, 1, 7, 3, 6, 4, 10, 2, 8, 6]
NINE_OPEN_FRAMES = [0, 0] * 9


def test_regression_game_segments_into_ten_frames():
    frames = segment(REGRESSION_ROLLS)
    assert len(frames) == 10
    assert [f.kind for f in frames] == [
        FrameKind.NORMAL,
        FrameKind.NORMAL,
        FrameKind.SPARE,
        FrameKind.SPARE,
        FrameKind.STRIKE,
        FrameKind.NORMAL,
        FrameKind.SPARE,
        FrameKind.SPARE,
        FrameKind.STRIKE,
        FrameKind.TENTH,
    ]
    assert frames[8].is_strike
    assert frames[9] == Frame.tenth(2, 8, 6)
    assert is_complete(frames)


def test_perfect_game_segments():
    frames = segment([10] * 12)
    assert frames[:9] == (Frame.classify(10),) * 9
    assert frames[9] == Frame.tenth(10, 10, 10)


def test_gutter_and_spare_games_segment():
    assert segment([0] * 20)[9] == Frame.tenth(0, 0)
    spares = segment([5] * 21)
    assert all(f.is_spare for f in spares[:9])
    assert spares[9] == Frame.tenth(5, 5, 5)


def test_segment_is_pure_and_idempotent():
    rolls = list(REGRESSION_ROLLS)
    assert segment(rolls) == segment(rolls)
    assert rolls == REGRESSION_ROLLS


@pytest.mark.parametrize(
    "rolls, count",
    [
        ([], 0),
        ([3], 1),
        ([3, 4], 1),
        ([3, 4, 5], 2),
        ([10], 1),
        ([10, 3], 2),
        ([10, 10, 10], 3),
    ],
)
def test_partial_games_keep_balls_already_thrown(rolls, count):
    frames = segment(rolls)
    assert len(frames) == count
    assert not is_complete(frames)


def test_frame_cut_off_after_first_ball_is_emitted():
    frames = segment([10, 3])
    assert frames == (Frame.classify(10), Frame.classify(3))
    assert frames[1].kind is FrameKind.NORMAL
    assert not frames[1].is_complete


def test_tenth_frame_emitted_before_it_is_finished():
    frames = segment(NINE_OPEN_FRAMES + [10])
    assert len(frames) == 10
    assert frames[9] == Frame.tenth(10)
    assert not is_complete(frames)


@pytest.mark.parametrize("first, second", [(10, 0), (0, 10), (5, 5), (10, 10), (9, 1)])
def test_tenth_frame_takes_third_roll_after_strike_or_spare(first, second):
    frames = segment(NINE_OPEN_FRAMES + [first, second, 0])
    assert frames[9].rolls == (first, second, 0)
    assert is_complete(frames)


@pytest.mark.parametrize("first, second", [(0, 0), (3, 4), (9, 0)])
def test_tenth_frame_never_consumes_third_roll_when_open(first, second):
    frames = segment(NINE_OPEN_FRAMES + [first, second, 7])
    assert frames[9].rolls == (first, second)
    assert is_complete(frames)


@pytest.mark.parametrize(
    "rolls",
    [
        [11],
        [-1],
        [7, 5],
        [0, 0, 3, 8],
        NINE_OPEN_FRAMES + [6, 5],
        NINE_OPEN_FRAMES + [10, 7, 5],
    ],
)
def test_rejects_impossible_pin_counts(rolls):
    with pytest.raises(InvalidPinCount):
        segment(rolls)


def test_invalid_roll_is_reported_by_position():
    with pytest.raises(InvalidPinCount) as exc:
        segment([4, 7])
    assert "roll #2" in exc.value.detail
    assert exc.value.code == "invalid_pin_count"


def test_fresh_rack_after_spare_or_double_in_tenth():
    assert segment(NINE_OPEN_FRAMES + [5, 5, 10])[9].label == "5 / X"
    assert segment(NINE_OPEN_FRAMES + [10, 10, 10])[9].label == "X X X"


@pytest.mark.parametrize(
    "rolls, expected",
    [
        ([], 1),
        ([3], 1),
        ([3, 4], 2),
        ([10], 2),
        (NINE_OPEN_FRAMES, 10),
        (NINE_OPEN_FRAMES + [10, 10], 10),
        (NINE_OPEN_FRAMES + [3, 4], None),
        ([10] * 12, None),
    ],
)
def test_current_frame(rolls, expected):
    assert current_frame(rolls) == expected


@pytest.mark.parametrize(
    "rolls, expected",
    [
        ([], 10),
        ([3], 7),
        ([3, 4], 10),
        ([10], 10),
        (NINE_OPEN_FRAMES + [10], 10),
        (NINE_OPEN_FRAMES + [10, 7], 3),
        (NINE_OPEN_FRAMES + [10, 10], 10),
        (NINE_OPEN_FRAMES + [3], 7),
        (NINE_OPEN_FRAMES + [3, 7], 10),
        (NINE_OPEN_FRAMES + [3, 4], 0),
        ([10] * 12, 0),
    ],
)
def test_pins_standing(rolls, expected):
    assert pins_standing(rolls) == expected
