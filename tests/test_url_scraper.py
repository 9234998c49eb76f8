import socket
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from interview_tasks.url_scraper import check_url, scrape_urls


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/ok":
            self._reply(200)
        elif self.path == "/missing":
            self._reply(404)
        elif self.path == "/error":
            self._reply(500)
        elif self.path == "/redirect":
            self.send_response(302)
            self.send_header("Location", "/ok")
            self.send_header("Content-Length", "0")
            self.end_headers()
        elif self.path == "/slow":
            time.sleep(1.0)
            self._reply(200)
        else:
            self._reply(404)

    def _reply(self, status):
        self.send_response(status)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="module")
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def closed_port_url():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return f"http://127.0.0.1:{port}/"


def test_check_url_ok(base_url):
    url = f"{base_url}/ok"
    assert check_url(url) == f"{url} url - ok"


def test_check_url_not_found(base_url):
    url = f"{base_url}/missing"
    assert check_url(url) == f"{url} url - not ok"


def test_check_url_follows_redirect(base_url):
    url = f"{base_url}/redirect"
    assert check_url(url) == f"{url} url - ok"


def test_check_url_timeout(base_url):
    url = f"{base_url}/slow"
    assert check_url(url, timeout=0.2) == f"{url} url - not ok"


def test_check_url_refused(closed_port_url):
    assert check_url(closed_port_url) == f"{closed_port_url} url - not ok"


def test_check_url_invalid():
    assert check_url("not a url") == "not a url url - not ok"


def test_scrape_urls(base_url, closed_port_url):
    expected = {
        f"{base_url}/ok": f"{base_url}/ok url - ok",
        f"{base_url}/missing": f"{base_url}/missing url - not ok",
        f"{base_url}/error": f"{base_url}/error url - not ok",
        f"{base_url}/redirect": f"{base_url}/redirect url - ok",
        closed_port_url: f"{closed_port_url} url - not ok",
        "not a url": "not a url url - not ok",
    }
    started = time.monotonic()
    assert scrape_urls(list(expected), num_workers=3, timeout=1.0) == expected
    assert time.monotonic() - started < 2.0


def test_scrape_urls_collapses_duplicates(base_url):
    url = f"{base_url}/ok"
    assert scrape_urls([url, url], num_workers=2) == {url: f"{url} url - ok"}


def test_scrape_urls_requires_a_worker():
    with pytest.raises(ValueError):
        scrape_urls(["not a url"], num_workers=0)