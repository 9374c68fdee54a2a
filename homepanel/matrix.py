"""Colour words for the 5x5 WS2812 LED matrix."""

NUM_PIXELS = 25

ARROW_PATTERN = (
    0.0, 0.0, 0.0, 0.0, 0.0,
    0.1, 0.0, 0.0, 0.0, 0.0,
    0.0, 0.0, 0.0, 0.1, 0.0,
    0.0, 0.0, 0.1, 0.0, 0.1,
    0.0, 0.1, 0.0, 0.0, 0.0,
)

BLANK_PATTERN = (0.0,) * NUM_PIXELS

TV_PATTERN = (
    0.0, 0.0, 0.0, 0.0, 0.0,
    0.0, 0.1, 0.0, 0.1, 0.0,
    0.0, 0.0, 0.0, 0.0, 0.0,
    0.1, 0.0, 0.0, 0.0, 0.1,
    0.1, 0.1, 0.1, 0.1, 0.1,
)


def _channel(level):
    if not 0.0 <= level <= 1.0:
        raise ValueError(f"colour level must lie between 0 and 1, got {level!r}")
    return int(level * 255)


def rgb_word(blue, red, green):
    """Pack channel levels in 0..1 into a GRB word as the matrix expects it."""
    return (_channel(green) << 24) | (_channel(red) << 16) | (_channel(blue) << 8)


def _frame(pattern, colour):
    levels = tuple(pattern)
    if len(levels) != NUM_PIXELS:
        raise ValueError(f"a pattern needs {NUM_PIXELS} levels, got {len(levels)}")
    return [colour(level) for level in reversed(levels)]


def green_frame(pattern):
    """Return the words that draw ``pattern`` in green, in the order they are shifted out."""
    return _frame(pattern, lambda level: rgb_word(0.0, 0.0, level))


def red_frame(pattern):
    """Return the words that draw ``pattern`` in red, in the order they are shifted out."""
    return _frame(pattern, lambda level: rgb_word(0.0, level, 0.0))