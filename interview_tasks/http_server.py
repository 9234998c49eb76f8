"""HTTP front end for a key-value store that counts put and get requests."""

from __future__ import annotations

import argparse
import json
import logging
import signal
import threading
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import urlsplit

from interview_tasks.kv_store import KeyValueStore

log = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8080


def _decode_fields(body: bytes | str, names: tuple[str, ...]) -> dict[str, str]:
    """Decode the first JSON value of ``body`` as an object with string fields."""
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    data, _ = json.JSONDecoder().raw_decode(text.lstrip())
    data = {} if data is None else data
    if not isinstance(data, dict):
        raise ValueError("request body must be a JSON object")
    fields = {name: data.get(name) or "" for name in names}
    if not all(isinstance(value, str) for value in fields.values()):
        raise ValueError("fields must be strings")
    return fields


class CacheService:
    """Request handling for the store; each method returns (status, payload)."""

    def __init__(self, store: KeyValueStore | None = None) -> None:
        self.store = store if store is not None else KeyValueStore()
        self._lock = threading.Lock()
        self._put_count = 0
        self._get_count = 0

    def put_object(self, body: bytes | str) -> tuple[HTTPStatus, Any]:
        try:
            fields = _decode_fields(body, ("key", "value"))
        except ValueError:
            return HTTPStatus.BAD_REQUEST, None
        with self._lock:
            self._put_count += 1
        self.store.put(fields["key"], fields["value"])
        return HTTPStatus.OK, "success"

    def get_object(self, body: bytes | str) -> tuple[HTTPStatus, Any]:
        try:
            fields = _decode_fields(body, ("key",))
        except ValueError:
            return HTTPStatus.BAD_REQUEST, None
        with self._lock:
            self._get_count += 1
        try:
            return HTTPStatus.OK, self.store.get(fields["key"])
        except KeyError:
            return HTTPStatus.BAD_REQUEST, None

    def get_counter(self) -> tuple[HTTPStatus, int]:
        with self._lock:
            return HTTPStatus.OK, self._get_count

    def put_counter(self) -> tuple[HTTPStatus, int]:
        with self._lock:
            return HTTPStatus.OK, self._put_count


_ROUTES = {
    "/put": ("POST", CacheService.put_object),
    "/get": ("POST", CacheService.get_object),
    "/get-counter": ("GET", lambda service, body: service.get_counter()),
    "/put-counter": ("GET", lambda service, body: service.put_counter()),
}


class _Handler(BaseHTTPRequestHandler):
    service: CacheService

    def do_GET(self) -> None:
        self._dispatch("GET")

    def do_POST(self) -> None:
        self._dispatch("POST")

    def log_message(self, format: str, *args: Any) -> None:
        log.debug(format, *args)

    def _dispatch(self, method: str) -> None:
        route = _ROUTES.get(urlsplit(self.path).path)
        if route is None:
            self._send(HTTPStatus.NOT_FOUND, None)
        elif route[0] != method:
            self._send(HTTPStatus.METHOD_NOT_ALLOWED, None)
        else:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length > 0 else b""
            self._send(*route[1](self.service, body))

    def _send(self, status: HTTPStatus, payload: Any) -> None:
        data = b"" if payload is None else (json.dumps(payload) + "\n").encode()
        self.send_response(status)
        self.send_header("Content-Length", str(len(data)))
        self.end_headers()
        self.wfile.write(data)


def make_server(
    service: CacheService, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT
) -> ThreadingHTTPServer:
    """Create (but do not start) a threaded HTTP server bound to ``service``."""
    handler = type("CacheHandler", (_Handler,), {"service": service})
    server = ThreadingHTTPServer((host, port), handler)
    server.daemon_threads = True
    return server


def start_server(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Serve until interrupted by SIGINT or SIGTERM."""
    server = make_server(CacheService(), host, port)
    if threading.current_thread() is threading.main_thread():
        signal.signal(signal.SIGTERM, signal.default_int_handler)
    log.info("Starting HTTP server on %s:%d", host, port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
    log.info("Have a nice day!")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Key-value store over HTTP.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    start_server(args.host, args.port)
    return 0