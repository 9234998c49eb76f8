"""Fixed-window request rate limiter and a small HTTP endpoint guarded by it."""

from __future__ import annotations

import threading
import time
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Callable, TypeVar

R = TypeVar("R")

WINDOW_SEC = 1.0


class TooManyRequestsError(Exception):
    """Raised when the limit for the current window has been reached."""

    def __init__(self, message: str = "too many requests") -> None:
        super().__init__(message)


class RateLimiter:
    """Allows at most ``limit`` calls per window of ``window`` seconds."""

    def __init__(
        self,
        limit: int,
        window: float = WINDOW_SEC,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if window <= 0:
            raise ValueError("window must be positive")
        self.limit = limit
        self.window = window
        self._clock = clock
        self._count = 0
        self._expires_at = clock() + window
        self._lock = threading.Lock()

    def process(self, func: Callable[[], R]) -> R:
        """Run ``func`` if the quota allows it; raise TooManyRequestsError if not."""
        with self._lock:
            now = self._clock()
            if now > self._expires_at:
                self._count = 0
                self._expires_at = now + self.window
            if self._count >= self.limit:
                raise TooManyRequestsError()
            self._count += 1
            return func()


class _Handler(BaseHTTPRequestHandler):
    limiter: RateLimiter

    def log_message(self, format: str, *args: Any) -> None:
        pass

    def do_GET(self) -> None:
        if self.path.split("?", 1)[0] != "/request":
            status = HTTPStatus.NOT_FOUND
        else:
            try:
                self.limiter.process(lambda: None)
                status = HTTPStatus.OK
            except TooManyRequestsError:
                status = HTTPStatus.TOO_MANY_REQUESTS
            except Exception:
                status = HTTPStatus.INTERNAL_SERVER_ERROR
        self.send_response(status)
        self.send_header("Content-Length", "0")
        self.end_headers()

    do_POST = do_GET


def make_server(limit: int, port: int | str) -> ThreadingHTTPServer:
    """Create (but do not start) a server whose ``/request`` is rate limited."""
    handler = type("RateLimitedHandler", (_Handler,), {"limiter": RateLimiter(limit)})
    server = ThreadingHTTPServer(("", int(port)), handler)
    server.daemon_threads = True
    return server


def serve(limit: int, port: int | str) -> None:
    """Serve the rate-limited endpoint until interrupted."""
    try:
        server = make_server(limit, port)
    except OSError as err:
        print(err)
        return
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()