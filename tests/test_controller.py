import pytest

from homepanel.controller import (
    LED_BLUE_PIN,
    LED_GREEN_PIN,
    LED_RED_PIN,
    HomeController,
    HomeState,
    temperature_from_raw,
)
from homepanel.matrix import BLANK_PATTERN, TV_PATTERN, green_frame
from homepanel.ssd1306 import SSD1306


class Recorder:
    def __init__(self):
        self.pins = []
        self.onboard = []
        self.frames = []

    def set_pin(self, pin, value):
        self.pins.append((pin, value))

    def set_onboard_led(self, value):
        self.onboard.append(value)

    def push_matrix(self, words):
        self.frames.append(list(words))

    def clear(self):
        self.pins.clear()
        self.onboard.clear()
        self.frames.clear()


@pytest.fixture
def rig():
    recorder = Recorder()
    controller = HomeController(recorder.set_pin, recorder.set_onboard_led, recorder.push_matrix)
    return recorder, controller


def test_construction_turns_everything_off():
    recorder = Recorder()
    controller = HomeController(recorder.set_pin, recorder.set_onboard_led, recorder.push_matrix)
    assert sorted(recorder.pins) == sorted(
        [(LED_BLUE_PIN, False), (LED_GREEN_PIN, False), (LED_RED_PIN, False)]
    )
    assert recorder.onboard == [False]
    assert controller.state == HomeState()


@pytest.mark.parametrize(
    "path, pin, field",
    [
        ("/luz1_on", LED_GREEN_PIN, "light1"),
        ("/luz2_on", LED_RED_PIN, "light2"),
        ("/luz3_on", LED_BLUE_PIN, "light3"),
    ],
)
def test_light_on_and_off(rig, path, pin, field):
    recorder, controller = rig
    recorder.clear()
    assert controller.handle_request(f"GET {path} HTTP/1.1\r\n") == path
    assert recorder.pins == [(pin, True)]
    assert getattr(controller.state, field) is True
    off_path = path.replace("_on", "_off")
    assert controller.handle_request(f"GET {off_path} HTTP/1.1\r\n") == off_path
    assert recorder.pins == [(pin, True), (pin, False)]
    assert getattr(controller.state, field) is False


def test_onboard_led(rig):
    recorder, controller = rig
    recorder.clear()
    assert controller.handle_request("GET /on HTTP/1.1") == "/on"
    assert controller.handle_request("GET /off HTTP/1.1") == "/off"
    assert recorder.onboard == [True, False]
    assert recorder.pins == []


def test_tv_pushes_frames(rig):
    recorder, controller = rig
    recorder.clear()
    assert controller.handle_request("GET /tv_on HTTP/1.1") == "/tv_on"
    assert controller.state.tv is True
    assert controller.handle_request("GET /tv_off HTTP/1.1") == "/tv_off"
    assert controller.state.tv is False
    assert recorder.frames == [green_frame(TV_PATTERN), green_frame(BLANK_PATTERN)]


def test_unknown_request_does_nothing(rig):
    recorder, controller = rig
    recorder.clear()
    assert controller.handle_request("GET /favicon.ico HTTP/1.1") is None
    assert recorder.pins == [] and recorder.onboard == [] and recorder.frames == []
    assert controller.state == HomeState()


def test_first_matching_command_wins(rig):
    recorder, controller = rig
    recorder.clear()
    assert controller.handle_request("GET /luz1_on GET /luz3_on") == "/luz3_on"
    assert recorder.pins == [(LED_BLUE_PIN, True)]
    assert controller.state.light1 is False


def test_temperature_near_reference_point():
    assert abs(temperature_from_raw(876) - 27.0) < 0.5


def test_temperature_falls_as_reading_rises():
    readings = [temperature_from_raw(raw) for raw in (0, 500, 876, 2000, 4095)]
    assert readings == sorted(readings, reverse=True)


@pytest.mark.parametrize("raw", [-1, 4096])
def test_temperature_rejects_out_of_range(raw):
    with pytest.raises(ValueError):
        temperature_from_raw(raw)


def _display():
    writes = []
    return SSD1306(lambda address, data: writes.append((address, data))), writes


def test_render_status_sends_frame(rig):
    _, controller = rig
    display, writes = _display()
    controller.render_status(display)
    assert writes[-1] == (display.address, display.buffer())
    assert display.get_pixel(0, 0) is True
    assert display.get_pixel(127, 63) is True


def test_render_status_reflects_state(rig):
    _, controller = rig
    display_off, _ = _display()
    controller.render_status(display_off)
    again, _ = _display()
    controller.render_status(again)
    assert again.buffer() == display_off.buffer()

    controller.handle_request("GET /luz1_on")
    display_on, _ = _display()
    controller.render_status(display_on)
    assert display_on.buffer() != display_off.buffer()