import httpx
import pytest
import requests

from cadastro_obras.infrastructure.adapters.http.httpx_client import HttpTemporaryError, HttpxClient
from cadastro_obras.infrastructure.adapters.http.requests_client import RequestsHttpClient


@pytest.fixture(autouse=True)
def no_backoff(monkeypatch):
    monkeypatch.setattr(HttpxClient._send_with_retry.retry, "sleep", lambda seconds: None)


def test_httpx_client_sends_json_to_base_url():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, str(request.url), request.content))
        return httpx.Response(201, json={"id": 1})

    client = HttpxClient(base_url="https://backend.test", transport=httpx.MockTransport(handler))
    resp = client.post("/empresas", json={"numero": "00001"})
    assert resp.status_code == 201
    assert resp.json() == {"id": 1}
    assert seen[0][0] == "POST"
    assert seen[0][1] == "https://backend.test/empresas"
    assert b'"numero"' in seen[0][2]


def test_httpx_client_returns_4xx_untouched():
    transport = httpx.MockTransport(lambda r: httpx.Response(409, json={"detail": "duplicado"}))
    resp = HttpxClient(base_url="https://backend.test", transport=transport).delete("/obras/1")
    assert resp.is_error
    assert resp.json()["detail"] == "duplicado"


def test_httpx_client_retries_5xx_then_gives_up():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(503)

    client = HttpxClient(base_url="https://backend.test", transport=httpx.MockTransport(handler))
    with pytest.raises(HttpTemporaryError):
        client.get("/empresas")
    assert len(calls) == 3


def test_httpx_client_sends_post_once_on_5xx():
    calls = []

    def handler(request):
        calls.append(request.method)
        return httpx.Response(503)

    client = HttpxClient(base_url="https://backend.test", transport=httpx.MockTransport(handler))
    with pytest.raises(HttpTemporaryError):
        client.post("/empresas", json={"numero": "00001"})
    with pytest.raises(HttpTemporaryError):
        client.put("/empresas/1", json={"numero": "00001"})
    assert calls == ["POST", "PUT"]


def test_httpx_client_retries_delete():
    calls = []

    def handler(request):
        calls.append(request.method)
        return httpx.Response(204) if len(calls) == 2 else httpx.Response(502)

    client = HttpxClient(base_url="https://backend.test", transport=httpx.MockTransport(handler))
    assert client.delete("/obras/1").status_code == 204
    assert calls == ["DELETE", "DELETE"]


def test_httpx_client_recovers_after_transient_error():
    answers = [httpx.ConnectError("down"), httpx.Response(200, json=[])]

    def handler(request):
        nxt = answers.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt

    client = HttpxClient(base_url="https://backend.test", transport=httpx.MockTransport(handler))
    assert client.get("/empresas").json() == []


class _FakeSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response


def _requests_response(status, body):
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.url = "https://backend.test/empresas"
    return resp


def test_requests_client_joins_base_url():
    client = RequestsHttpClient(base_url="https://backend.test/")
    client.session = _FakeSession(_requests_response(200, b"[]"))
    resp = client.put("empresas/1", json={"nome": "Alfa"})
    method, url, kwargs = client.session.calls[0]
    assert (method, url) == ("PUT", "https://backend.test/empresas/1")
    assert kwargs["json"] == {"nome": "Alfa"}
    assert resp.json() == []


def test_requests_client_maps_failures():
    client = RequestsHttpClient(base_url="https://backend.test")
    client.session = _FakeSession(error=requests.ConnectionError("down"))
    with pytest.raises(HttpTemporaryError):
        client.get("/empresas")
    client.session = _FakeSession(_requests_response(500, b""))
    with pytest.raises(HttpTemporaryError):
        client.get("/empresas")
