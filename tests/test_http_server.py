import json
import threading
import urllib.error
import urllib.request
from concurrent.futures import ThreadPoolExecutor
from http import HTTPStatus

import pytest

from interview_tasks.http_server import CacheService, make_server


@pytest.fixture
def running():
    service = CacheService()
    server = make_server(service, "127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield service, f"http://{host}:{port}"
    server.shutdown()
    server.server_close()
    thread.join()


def _request(url, data=None, method=None):
    req = urllib.request.Request(
        url, data=data, method=method, headers={"Content-Type": "application/json"}
    )
    try:
        with urllib.request.urlopen(req, timeout=5) as resp:
            return resp.status, resp.read()
    except urllib.error.HTTPError as err:
        return err.code, err.read()


def test_concurrent_puts_counted_and_bad_get_rejected(running):
    _, base = running
    body = b'{\n "key": "key",\n "value": "value"\n }'
    with ThreadPoolExecutor(max_workers=20) as pool:
        results = list(pool.map(lambda _: _request(f"{base}/put", body), range(100)))
    assert all(status == 200 for status, _ in results)
    assert results[0][1] == b'"success"\n'

    status, payload = _request(f"{base}/put-counter")
    assert status == 200
    assert json.loads(payload) == 100

    bad = json.dumps('\n "key": "key",\n ').encode()
    status, payload = _request(f"{base}/get", bad)
    assert status == 400
    assert payload == b""


def test_get_round_trip_and_counter(running):
    _, base = running
    _request(f"{base}/put", b'{"key": "k", "value": "v"}')
    status, payload = _request(f"{base}/get", b'{"key": "k"}')
    assert (status, json.loads(payload)) == (200, "v")
    status, payload = _request(f"{base}/get", b'{"key": "missing"}')
    assert status == 400
    status, payload = _request(f"{base}/get-counter")
    assert json.loads(payload) == 2


def test_routing_errors(running):
    _, base = running
    assert _request(f"{base}/nowhere")[0] == 404
    assert _request(f"{base}/put", method="GET")[0] == 405
    assert _request(f"{base}/put-counter", b"{}", method="POST")[0] == 405


def test_service_put_rejects_invalid_json():
    service = CacheService()
    assert service.put_object(b"not json") == (HTTPStatus.BAD_REQUEST, None)
    assert service.put_object(b"") == (HTTPStatus.BAD_REQUEST, None)
    assert service.put_object(b'{"key": 1, "value": "v"}')[0] == HTTPStatus.BAD_REQUEST
    assert service.put_counter() == (HTTPStatus.OK, 0)


def test_service_missing_fields_default_to_empty():
    service = CacheService()
    assert service.put_object(b'{"value": "v"}') == (HTTPStatus.OK, "success")
    assert service.get_object(b"{}") == (HTTPStatus.OK, "v")
    assert service.put_counter() == (HTTPStatus.OK, 1)
    assert service.get_counter() == (HTTPStatus.OK, 1)


def test_service_missing_key_counts_get():
    service = CacheService()
    assert service.get_object('{"key": "nope"}') == (HTTPStatus.BAD_REQUEST, None)
    assert service.get_counter() == (HTTPStatus.OK, 1)