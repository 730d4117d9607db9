"""HTTP server that answers every request with a Lissajous animation."""

from __future__ import annotations

import argparse
import io
import json
import logging
import re
import sys
from collections.abc import Sequence
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlsplit

from .lissajous import DEFAULT_CYCLES, FOUR_COLORS, GREEN_INDEX, lissajous

__all__ = ["LissajousHandler", "LissajousServer", "make_server", "main"]

DEFAULT_PORT = 8000

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_log = logging.getLogger(__name__)


def _atoi(text: str) -> int:
    quoted = json.dumps(text, ensure_ascii=False)
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"strconv.Atoi: parsing {quoted}: invalid syntax")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"strconv.Atoi: parsing {quoted}: value out of range")
    return value


class LissajousServer(ThreadingHTTPServer):
    """Threaded server remembering the cycle count last asked for."""

    daemon_threads = True

    def __init__(self, address: tuple[str, int], cycles: int = DEFAULT_CYCLES) -> None:
        super().__init__(address, LissajousHandler)
        self.cycles = cycles


class LissajousHandler(BaseHTTPRequestHandler):
    """Serve a GIF; a 'cycles' query parameter changes the cycle count for good."""

    server: LissajousServer

    def do_GET(self) -> None:
        query = parse_qs(urlsplit(self.path).query, keep_blank_values=True)
        if "cycles" in query:
            try:
                self.server.cycles = _atoi(query["cycles"][0])
            except ValueError as exc:
                self.server.cycles = 0
                self._send_text(HTTPStatus.BAD_REQUEST, f"{exc}\n")
                return

        buffer = io.BytesIO()
        lissajous(buffer, self.server.cycles, GREEN_INDEX, FOUR_COLORS)
        body = buffer.getvalue()
        self.send_response(HTTPStatus.OK)
        self.send_header("Content-Type", "image/gif")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def _send_text(self, status: HTTPStatus, text: str) -> None:
        body = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("X-Content-Type-Options", "nosniff")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        """Send request logs to the module logger instead of stderr."""
        _log.info("%s - %s", self.address_string(), format % args)


def make_server(port: int = DEFAULT_PORT) -> LissajousServer:
    """Create a server listening on every interface at port."""
    return LissajousServer(("", port))


def main(argv: Sequence[str] | None = None) -> int:
    """Serve Lissajous animations until interrupted."""
    parser = argparse.ArgumentParser(prog="lissajous-server")
    parser.add_argument("-port", "--port", type=int, default=DEFAULT_PORT, help="http port")
    args = parser.parse_args(argv)
    try:
        server = make_server(args.port)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    sys.exit(main())