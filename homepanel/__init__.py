"""Home control panel: lights and TV over HTTP, with drawing for an SSD1306 display and an LED matrix."""

__version__ = "0.1.0"
__all__ = ["controller", "font", "matrix", "server", "ssd1306"]