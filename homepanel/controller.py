"""Home state and the request commands that change it."""

import logging
import struct
import threading
from dataclasses import dataclass

from homepanel.matrix import BLANK_PATTERN, TV_PATTERN, green_frame

LED_GREEN_PIN = 11
LED_BLUE_PIN = 12
LED_RED_PIN = 13

ADC_BITS = 12

_log = logging.getLogger(__name__)


def _f32(value):
    return struct.unpack("f", struct.pack("f", value))[0]


def temperature_from_raw(raw):
    """Convert a 12-bit reading of the internal sensor into degrees Celsius."""
    if not 0 <= raw < (1 << ADC_BITS):
        raise ValueError(f"raw reading must be a {ADC_BITS}-bit value, got {raw!r}")
    factor = _f32(3.3 / (1 << ADC_BITS))
    volts = _f32(_f32(raw * factor) - _f32(0.706))
    return _f32(27.0 - _f32(volts / _f32(0.001721)))


@dataclass
class HomeState:
    """What is switched on."""

    light1: bool = False
    light2: bool = False
    light3: bool = False
    tv: bool = False
    onboard_led: bool = False


def _label(on):
    return "ON" if on else "OFF"


class HomeController:
    """Applies request commands to the lights, the onboard LED and the TV matrix.

    ``set_pin(pin, value)`` drives a GPIO, ``set_onboard_led(value)`` drives the
    radio chip's LED and ``push_matrix(words)`` shifts colour words into the matrix.
    """

    def __init__(self, set_pin, set_onboard_led, push_matrix):
        self._set_pin = set_pin
        self._set_onboard_led = set_onboard_led
        self._push_matrix = push_matrix
        self._lock = threading.Lock()
        self.state = HomeState()
        for pin in (LED_BLUE_PIN, LED_GREEN_PIN, LED_RED_PIN):
            set_pin(pin, False)
        set_onboard_led(False)
        self._routes = (
            ("GET /luz3_on", lambda: self._light("light3", LED_BLUE_PIN, True)),
            ("GET /luz3_off", lambda: self._light("light3", LED_BLUE_PIN, False)),
            ("GET /luz1_on", lambda: self._light("light1", LED_GREEN_PIN, True)),
            ("GET /luz1_off", lambda: self._light("light1", LED_GREEN_PIN, False)),
            ("GET /luz2_on", lambda: self._light("light2", LED_RED_PIN, True)),
            ("GET /luz2_off", lambda: self._light("light2", LED_RED_PIN, False)),
            ("GET /on", lambda: self._onboard(True)),
            ("GET /off", lambda: self._onboard(False)),
            ("GET /tv_on", lambda: self._tv(True)),
            ("GET /tv_off", lambda: self._tv(False)),
        )

    def _light(self, name, pin, on):
        self._set_pin(pin, on)
        setattr(self.state, name, on)

    def _onboard(self, on):
        self._set_onboard_led(on)
        self.state.onboard_led = on

    def _tv(self, on):
        _log.info("Command received: TV %s", _label(on))
        self._push_matrix(green_frame(TV_PATTERN if on else BLANK_PATTERN))
        self.state.tv = on

    def handle_request(self, request):
        """Apply the first command found in ``request``; return its path or None."""
        with self._lock:
            for needle, action in self._routes:
                if needle in request:
                    action()
                    return needle[len("GET "):]
        return None

    def render_status(self, display):
        """Draw the four status rows on an SSD1306 and send the frame."""
        with self._lock:
            rows = (
                ("Luz 1 - ", self.state.light1),
                ("Luz 2 - ", self.state.light2),
                ("Luz 3 - ", self.state.light3),
                ("TV - ", self.state.tv),
            )
        display.divide_into_four_rows()
        for row, (caption, on) in enumerate(rows):
            y = 4 + 16 * row
            display.draw_string_scaled(caption, 4, y, 0.9)
            display.draw_string_scaled(_label(on), 68, y, 0.9)
        display.send_data()