"""HTTP front end that serves the control page and applies its commands."""

import argparse
import logging
import socketserver
import threading

from homepanel.controller import HomeController, temperature_from_raw

RESPONSE_LIMIT = 1023
DEFAULT_PORT = 80

_log = logging.getLogger(__name__)

_PAGE = (
    "HTTP/1.1 200 OK\r\n"
    "Content-Type: text/html\r\n"
    "\r\n"
    "<!DOCTYPE html>"
    "<html>"
    "<head>"
    "<title>Controle</title>"
    "<style>"
    "body{{font-family:Arial;text-align:center;margin:15px;}}"
    ".btn{{display:inline-block;padding:8px 12px;margin:4px;border:none;border-radius:4px;"
    "color:white;text-decoration:none;font-size:14px;}}"
    ".l1{{background:#4CAF50;}}.l2{{background:#F44336;}}.l3{{background:#2196F3;}}"
    ".tv{{background:#9C27B0;}}.off{{background:#607D8B;}}"
    "</style>"
    "</head>"
    "<body>"
    "<h2>Controle Residencial</h2>"
    "<div><a href='/luz1_on' class='btn l1'>Luz 1 ON</a>"
    "<a href='/luz1_off' class='btn off'>OFF</a></div>"
    "<div><a href='/luz2_on' class='btn l2'>Luz 2 ON</a>"
    "<a href='/luz2_off' class='btn off'>OFF</a></div>"
    "<div><a href='/luz3_on' class='btn l3'>Luz 3 ON</a>"
    "<a href='/luz3_off' class='btn off'>OFF</a></div>"
    "<div><a href='/tv_on' class='btn tv'>TV ON</a>"
    "<a href='/tv_off' class='btn off'>OFF</a></div>"
    "<p>Temp: {temperature:.2f}\u00b0C</p>"
    "</body>"
    "</html>"
)


def render_page(temperature):
    """Return the full HTTP response text for the control page."""
    return _PAGE.format(temperature=temperature)


def build_response(controller, request, read_temperature):
    """Apply a raw request to ``controller`` and return the response bytes."""
    if isinstance(request, bytes):
        request = request.decode("utf-8", errors="replace")
    _log.info("Request: %s", request)
    controller.handle_request(request)
    return render_page(read_temperature()).encode("utf-8")[:RESPONSE_LIMIT]


class HomeRequestHandler(socketserver.BaseRequestHandler):
    """Answers every segment a client sends until it closes the connection."""

    def handle(self):
        while data := self.request.recv(4096):
            self.request.sendall(
                build_response(self.server.controller, data, self.server.read_temperature)
            )


class _HomeServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, address, controller, read_temperature):
        self.controller = controller
        self.read_temperature = read_temperature
        super().__init__(address, HomeRequestHandler)


def serve(controller, host, port, read_temperature):
    """Bind a server for ``controller``; the caller runs ``serve_forever`` on it."""
    return _HomeServer((host, port), controller, read_temperature)


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Serve the home control panel.")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="TCP port")
    parser.add_argument(
        "--adc-raw", type=int, default=876, help="12-bit sensor reading to report"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Run the control panel server until interrupted."""
    args = _parse_args(argv)
    temperature_from_raw(args.adc_raw)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    controller = HomeController(
        lambda pin, value: _log.info("GPIO %d -> %s", pin, "on" if value else "off"),
        lambda value: _log.info("Onboard LED -> %s", "on" if value else "off"),
        lambda words: _log.info("Matrix <- %s", " ".join(f"{word:08x}" for word in words)),
    )
    server = serve(controller, args.host, args.port, lambda: temperature_from_raw(args.adc_raw))
    with server:
        host, port = server.server_address[:2]
        _log.info("Listening on %s:%d", host, port)
        worker = threading.Thread(target=server.serve_forever, daemon=True)
        worker.start()
        try:
            worker.join()
        except KeyboardInterrupt:
            server.shutdown()
    return 0