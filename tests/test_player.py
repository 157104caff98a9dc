import pytest

from tenpin.frame import GameOverError, InvalidRollError
from tenpin.player import Player


def test_name_is_kept():
    assert Player("Vijay").name == "Vijay"


def test_score_starts_at_zero():
    player = Player("Vijay")
    assert player.score() == 0
    assert not player.is_game_complete()


@pytest.mark.parametrize(
    "rolls, expected",
    [
        ([4], 4),
        ([3, 6], 9),
        ([5, 5, 4] + [0] * 17, 18),
        ([10, 3, 4] + [0] * 16, 24),
        ([10, 10, 5, 2] + [0] * 14, 10 + 10 + 5 + 10 + 5 + 2 + 5 + 2),
        ([10] * 12, 300),
        ([3, 4] * 9 + [5, 5, 7], 9 * 7 + 17),
        ([4, 4] * 9 + [10, 7, 2], 9 * 8 + 10 + 7 + 2),
        ([1, 1] * 9 + [10, 10, 10], 9 * 2 + 30),
        ([0] * 20, 0),
        ([4] * 20, 80),
    ],
)
def test_scores(rolls, expected):
    player = Player("Vijay")
    for pins in rolls:
        player.roll(pins)
    assert player.score() == expected


@pytest.mark.parametrize("pins", [-2, 11])
def test_invalid_pins(pins):
    player = Player("Vijay")
    with pytest.raises(InvalidRollError):
        player.roll(pins)


def test_frame_cannot_exceed_ten_pins():
    player = Player("Vijay")
    player.roll(6)
    with pytest.raises(InvalidRollError):
        player.roll(5)


@pytest.mark.parametrize(
    "rolls, extra",
    [
        ([3, 4] * 9 + [5, 3], 2),
        ([4, 4] * 9 + [10, 10, 10], 1),
        ([10] * 12, 10),
        ([1, 1] * 9 + [4, 6, 8], 1),
        ([4, 4] * 9 + [6, 3], 1),
    ],
)
def test_rolls_after_end(rolls, extra):
    player = Player("Vijay")
    for pins in rolls:
        player.roll(pins)
    assert player.is_game_complete()
    with pytest.raises(GameOverError):
        player.roll(extra)


def test_frames_follow_rolls():
    player = Player("Vijay")
    player.roll(10)
    player.roll(3)
    assert [f.rolls for f in player.frames] == [(10,), (3,)]