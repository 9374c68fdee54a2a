"""Frame buffer and drawing routines for an SSD1306 OLED over I2C."""

import math
import struct
from enum import IntEnum

from homepanel.font import ascii_glyph, compact_glyph

WIDTH = 128
HEIGHT = 64
DEFAULT_ADDRESS = 0x3C

_DATA_PREFIX = 0x40
_COMMAND_PREFIX = 0x80


class Command(IntEnum):
    """SSD1306 command opcodes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


def _f32(value):
    """Round a number to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _u8(value):
    return int(value) & 0xFF


class SSD1306:
    """An SSD1306 display whose bytes go out through a ``write(address, data)`` callable."""

    def __init__(self, write, width=WIDTH, height=HEIGHT, address=DEFAULT_ADDRESS, external_vcc=False):
        self._write = write
        self.width = _u8(width)
        self.height = _u8(height)
        self.pages = self.height // 8
        self.address = address
        self.external_vcc = external_vcc
        self._ram = bytearray(self.pages * self.width + 1)
        self._ram[0] = _DATA_PREFIX

    def buffer(self):
        """Return the frame as sent over the bus, control byte first."""
        return bytes(self._ram)

    def _locate(self, x, y):
        x, y = _u8(x), _u8(y)
        index = (y >> 3) + (x << 3) + 1
        if index >= len(self._ram):
            raise IndexError(f"pixel ({x}, {y}) lies outside the display buffer")
        return index, 1 << (y & 0b111)

    def get_pixel(self, x, y):
        index, mask = self._locate(x, y)
        return bool(self._ram[index] & mask)

    def config(self):
        """Send the power-up command sequence."""
        for command in (
            Command.SET_DISP | 0x00,
            Command.SET_MEM_ADDR, 0x01,
            Command.SET_DISP_START_LINE | 0x00,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_MUX_RATIO, HEIGHT - 1,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_COM_PIN_CFG, 0x12,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_DISP | 0x01,
        ):
            self.command(command)

    def command(self, command):
        self._write(self.address, bytes([_COMMAND_PREFIX, _u8(command)]))

    def send_data(self):
        """Push the whole frame buffer to the display."""
        for command in (
            Command.SET_COL_ADDR, 0, self.width - 1,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self.command(command)
        self._write(self.address, bytes(self._ram))

    def pixel(self, x, y, value):
        index, mask = self._locate(x, y)
        if value:
            self._ram[index] |= mask
        else:
            self._ram[index] &= ~mask & 0xFF

    def fill(self, value):
        for y in range(self.height):
            for x in range(self.width):
                self.pixel(x, y, value)

    def rect(self, top, left, width, height, value, fill):
        top, left, width, height = _u8(top), _u8(left), _u8(width), _u8(height)
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, top + height - 1, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(left + width - 1, y, value)
        if fill:
            for x in range(left + 1, left + width - 1):
                for y in range(top + 1, top + height - 1):
                    self.pixel(x, y, value)

    def line(self, x0, y0, x1, y1, value):
        x0, y0, x1, y1 = _u8(x0), _u8(y0), _u8(x1), _u8(y1)
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def hline(self, x0, x1, y, value):
        for x in range(_u8(x0), _u8(x1) + 1):
            self.pixel(x, y, value)

    def vline(self, x, y0, y1, value):
        for y in range(_u8(y0), _u8(y1) + 1):
            self.pixel(x, y, value)

    def draw_char(self, char, x, y):
        """Draw a character from the compact font, overwriting its 8x8 cell."""
        for i, column in enumerate(compact_glyph(char)):
            for j in range(8):
                self.pixel(x + i, y + j, column & (1 << j))

    def draw_char_scaled(self, char, x, y, scale):
        """Draw a character from the ASCII font, setting only lit pixels."""
        scale = _f32(scale)
        repeat = math.ceil(scale) if scale > 0 else 0
        for i, column in enumerate(ascii_glyph(char)):
            column_offset = int(_f32(i * scale))
            for j in range(8):
                if not column & (1 << j):
                    continue
                row_offset = int(_f32(j * scale))
                for dx in range(repeat):
                    for dy in range(repeat):
                        self.pixel(x + column_offset + dx, y + row_offset + dy, True)

    def draw_string_scaled(self, text, x, y, scale):
        size = int(_f32(8 * _f32(scale)))
        x, y = _u8(x), _u8(y)
        for char in text:
            self.draw_char_scaled(char, x, y, scale)
            x = _u8(x + size)
            if x + size >= self.width:
                x = 0
                y = _u8(y + size)
            if y + size >= self.height:
                break

    def draw_string(self, text, x, y):
        x, y = _u8(x), _u8(y)
        for char in text:
            self.draw_char(char, x, y)
            x = _u8(x + 8)
            if x + 8 >= self.width:
                x = 0
                y = _u8(y + 8)
            if y + 8 >= self.height:
                break

    def draw_square(self, x, y):
        for i in range(8):
            for j in range(8):
                self.pixel(x + i, y + j, True)

    def draw_ohmmeter_template(self):
        """Draw the resistance-meter screen and send it."""
        self.fill(False)
        self.rect(2, 2, self.width - 4, self.height - 4, True, False)
        self.draw_string("OHMIMETRO", 32, 8)
        self.hline(10, self.width - 10, 20, True)
        self.draw_string("RESISTOR:", 10, 30)
        self.draw_string("1.5K", 80, 30)
        self.hline(20, 40, 50, True)
        self.hline(85, 105, 50, True)
        self.rect(40, 45, 45, 10, True, False)
        self.vline(50, 45, 55, True)
        self.vline(60, 45, 55, True)
        self.vline(70, 45, 55, True)
        self.hline(10, self.width - 10, self.height - 15, True)
        self.draw_string("MEDIR", 50, self.height - 10)
        self.send_data()

    def draw_traffic_light_template(self):
        """Draw the traffic-light screen header and send it."""
        self.fill(False)
        self.rect(3, 3, 122, 58, True, False)
        self.draw_string_scaled("Semaforo inteligente", 3, 6, 0.8)
        self.hline(10, 118, 16, True)
        self.hline(10, 118, 26, True)
        self.send_data()

    def divide_into_four_rows(self):
        """Clear, frame the screen, split it into four rows and send it."""
        self.fill(False)
        self.rect(0, 0, self.width, self.height, True, False)
        spacing = self.height // 4
        for i in range(1, 4):
            self.hline(0, self.width - 1, i * spacing, True)
        self.send_data()