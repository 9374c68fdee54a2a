import math

import pytest

from homepanel.matrix import (
    ARROW_PATTERN,
    BLANK_PATTERN,
    NUM_PIXELS,
    TV_PATTERN,
    green_frame,
    red_frame,
    rgb_word,
)


def test_rgb_word_places_green_in_top_byte():
    assert rgb_word(0.0, 0.0, 1.0) == 0xFF000000


def test_rgb_word_places_red_in_second_byte():
    assert rgb_word(0.0, 1.0, 0.0) == 0x00FF0000


def test_rgb_word_places_blue_in_third_byte():
    assert rgb_word(1.0, 0.0, 0.0) == 0x0000FF00


def test_rgb_word_channels_combine():
    combined = rgb_word(1.0, 1.0, 1.0)
    assert combined == rgb_word(1.0, 0.0, 0.0) | rgb_word(0.0, 1.0, 0.0) | rgb_word(0.0, 0.0, 1.0)


def test_rgb_word_low_byte_is_always_zero():
    for level in (0.0, 0.1, 0.5, 1.0):
        assert rgb_word(level, level, level) & 0xFF == 0


@pytest.mark.parametrize("level", [-0.1, 1.5, math.nan])
def test_rgb_word_rejects_out_of_range(level):
    with pytest.raises(ValueError):
        rgb_word(0.0, 0.0, level)


def test_green_frame_reverses_pattern():
    pattern = [0.0] * NUM_PIXELS
    pattern[0] = 1.0
    frame = green_frame(pattern)
    assert len(frame) == NUM_PIXELS
    assert frame[-1] == rgb_word(0.0, 0.0, 1.0)
    assert all(word == 0 for word in frame[:-1])


def test_red_frame_reverses_pattern():
    pattern = [0.0] * NUM_PIXELS
    pattern[0] = 1.0
    frame = red_frame(pattern)
    assert frame[-1] == rgb_word(0.0, 1.0, 0.0)
    assert all(word == 0 for word in frame[:-1])


def test_blank_frame_is_dark():
    assert green_frame(BLANK_PATTERN) == [0] * NUM_PIXELS
    assert red_frame(BLANK_PATTERN) == [0] * NUM_PIXELS


def test_green_frame_only_uses_green_byte():
    for word in green_frame(TV_PATTERN):
        assert word & 0x00FFFFFF == 0


def test_red_frame_only_uses_red_byte():
    for word in red_frame(ARROW_PATTERN):
        assert word & 0xFF00FFFF == 0


def test_frame_lit_count_matches_pattern():
    lit = sum(1 for level in TV_PATTERN if level > 0)
    assert sum(1 for word in green_frame(TV_PATTERN) if word) == lit


@pytest.mark.parametrize("size", [0, 24, 26])
def test_frame_rejects_wrong_size(size):
    with pytest.raises(ValueError):
        green_frame([0.0] * size)
    with pytest.raises(ValueError):
        red_frame([0.0] * size)