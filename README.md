# homepanel

A small home control panel. It serves a control page with buttons for three
lights and a TV and keeps track of what is switched on. It can also draw that
state into a frame buffer for a 128x64 SSD1306 OLED display and build the
colour words for a 5x5 RGB LED matrix.

The package has no runtime dependencies. Everything that would touch hardware
(GPIO pins, the on-board LED, the LED matrix and the display bus) is a plain
callable that you pass in.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the panel

```
homepanel
```

starts a threaded TCP server that answers with the control page. Options:

| Option       | Default   | Meaning                                           |
|--------------|-----------|---------------------------------------------------|
| `--host`     | `0.0.0.0` | address to listen on                              |
| `--port`     | `80`      | TCP port                                          |
| `--adc-raw`  | `876`     | 12-bit sensor reading whose temperature is shown  |

Run `homepanel --help` for the same list. The server stops on Ctrl+C.

Each chunk of data a client sends is treated as one request: the first command
path found in it is applied, and the reply is the control page with the
temperature at the bottom. The server keeps answering until the client closes
the connection. Replies are cut to 1023 bytes.

Commands are found by looking for `GET <path>` anywhere in the request, tried
in this order; the first match wins:

| Path         | Effect                                    |
|--------------|-------------------------------------------|
| `/luz3_on`   | light 3 (pin 12) on                       |
| `/luz3_off`  | light 3 off                               |
| `/luz1_on`   | light 1 (pin 11) on                       |
| `/luz1_off`  | light 1 off                               |
| `/luz2_on`   | light 2 (pin 13) on                       |
| `/luz2_off`  | light 2 off                               |
| `/on`        | on-board LED on                           |
| `/off`       | on-board LED off                          |
| `/tv_on`     | TV on, pushes a face pattern in green     |
| `/tv_off`    | TV off, pushes a blank pattern            |

## What the command does not do

The `homepanel` command drives no hardware. Pin changes, on-board LED changes
and matrix frames are only written to the log, the temperature is always the
one computed from `--adc-raw`, and nothing is drawn on a display. To drive real
devices, build a `HomeController` with your own callables and pass it to
`serve`.

## Using it as a library

```python
from homepanel.controller import HomeController, temperature_from_raw
from homepanel.server import serve
from homepanel.ssd1306 import SSD1306

controller = HomeController(
    set_pin=lambda pin, value: ...,      # drive a GPIO
    set_onboard_led=lambda value: ...,   # drive the on-board LED
    push_matrix=lambda words: ...,       # shift 25 colour words into the matrix
)
controller.handle_request("GET /luz1_on HTTP/1.1")   # returns "/luz1_on"
controller.state.light1                              # True

display = SSD1306(lambda address, data: ...)         # write bytes to the I2C bus
display.config()
controller.render_status(display)

server = serve(controller, "127.0.0.1", 8080, lambda: temperature_from_raw(876))
with server:
    server.serve_forever()
```

### `homepanel.controller`

- `HomeState` — a dataclass with `light1`, `light2`, `light3`, `tv` and
  `onboard_led`, all `False` at first.
- `HomeController(set_pin, set_onboard_led, push_matrix)` — switches all
  three light pins and the on-board LED off when created. `handle_request`
  applies the first command found and returns its path, or `None` if there is
  none. `render_status(display)` clears the display into four framed rows,
  writes `Luz 1 - `, `Luz 2 - `, `Luz 3 - `, `TV - ` followed by `ON` or `OFF`,
  and sends the frame.
- `temperature_from_raw(raw)` — turns a 12-bit reading of the internal
  temperature sensor into degrees Celsius, in single precision; raises
  `ValueError` outside 0–4095.

### `homepanel.server`

- `render_page(temperature)` — the full HTTP response text of the control page.
- `build_response(controller, request, read_temperature)` — applies a request
  (`str` or `bytes`) and returns the response bytes.
- `serve(controller, host, port, read_temperature)` — returns a bound threaded
  server; call `serve_forever` on it.
- `HomeRequestHandler` — the request handler that server uses.
- `main(argv=None)` — the `homepanel` command.

### `homepanel.ssd1306`

`SSD1306(write, width=128, height=64, address=0x3C, external_vcc=False)` is a
frame buffer. Commands and the frame go out through `write(address, data)`.

- `config()`, `command(command)`, `send_data()` — bus traffic; `Command` lists
  the opcodes.
- `pixel`, `get_pixel`, `fill`, `rect`, `line`, `hline`, `vline`,
  `draw_square` — drawing. A pixel outside the buffer raises `IndexError`.
- `draw_char` and `draw_string` use the compact font and overwrite each 8x8
  cell; `draw_char_scaled` and `draw_string_scaled` use the ASCII font at a
  scale and only set lit pixels. Strings wrap to the left edge and stop at the
  bottom of the display.
- `divide_into_four_rows`, `draw_ohmmeter_template`,
  `draw_traffic_light_template` — ready-made screens, each sent when drawn.
- `buffer()` — the frame as sent, starting with the `0x40` control byte.

### `homepanel.matrix`

- `rgb_word(blue, red, green)` — packs levels in 0..1 into a GRB word;
  raises `ValueError` outside that range.
- `green_frame(pattern)` and `red_frame(pattern)` — the 25 words for a
  25-level pattern, last pixel first. `ARROW_PATTERN`, `BLANK_PATTERN` and
  `TV_PATTERN` are included.

### `homepanel.font`

- `ascii_glyph(char)` — eight column bytes for printable ASCII; other
  characters give a blank glyph.
- `compact_glyph(char)` — the compact glyph for digits and letters; other
  characters give a blank glyph.

Both raise `ValueError` unless given exactly one character.