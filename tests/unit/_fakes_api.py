from __future__ import annotations
import json
from dataclasses import replace

from cadastro_obras.application.ports.http_client_port import HttpResponse


class FakeGateway:
    """In-memory stand-in for the empresas/obras backend."""
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.empresas: dict[str, object] = {}
        self.obras: dict[str, object] = {}
        self.calls: list[tuple] = []
        self._next = 0
    def _id(self) -> str:
        self._next += 1
        return str(self._next)
    def _maybe_fail(self):
        if self.error:
            raise self.error
    def list_empresas(self):
        self.calls.append(("list_empresas",))
        self._maybe_fail()
        return list(self.empresas.values())
    def create_empresa(self, empresa):
        self.calls.append(("create_empresa", empresa))
        self._maybe_fail()
        created = replace(empresa, id=self._id())
        self.empresas[created.id] = created
        return created
    def update_empresa(self, empresa_id, empresa):
        self.calls.append(("update_empresa", empresa_id, empresa))
        self._maybe_fail()
        self.empresas[empresa_id] = replace(empresa, id=empresa_id)
        return self.empresas[empresa_id]
    def delete_empresa(self, empresa_id):
        self.calls.append(("delete_empresa", empresa_id))
        self._maybe_fail()
        self.empresas.pop(empresa_id, None)
    def list_obras(self, empresa_id):
        self.calls.append(("list_obras", empresa_id))
        self._maybe_fail()
        return [o for o in self.obras.values() if o.empresa_id == empresa_id]
    def create_obra(self, empresa_id, obra):
        self.calls.append(("create_obra", empresa_id, obra))
        self._maybe_fail()
        created = replace(obra, id=self._id(), empresa_id=empresa_id)
        self.obras[created.id] = created
        return created
    def update_obra(self, obra_id, obra):
        self.calls.append(("update_obra", obra_id, obra))
        self._maybe_fail()
        stored = self.obras.get(obra_id)
        empresa_id = stored.empresa_id if stored is not None else obra.empresa_id
        self.obras[obra_id] = replace(obra, id=obra_id, empresa_id=empresa_id)
        return self.obras[obra_id]
    def delete_obra(self, obra_id):
        self.calls.append(("delete_obra", obra_id))
        self._maybe_fail()
        self.obras.pop(obra_id, None)


def json_response(status: int, body=None, text: str | None = None) -> HttpResponse:
    if text is None:
        text = "" if body is None else json.dumps(body)
    return HttpResponse(status, text, "http://backend.test", {"content-type": "application/json"})


class FakeHttp:
    """Records requests and answers with queued HttpResponse objects (or raises queued exceptions)."""
    def __init__(self, *responses) -> None:
        self.responses = list(responses)
        self.requests: list[tuple[str, str, object]] = []
    def request(self, method, url, *, json=None, headers=None):
        self.requests.append((method, url, json))
        nxt = self.responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt
    def get(self, url, *, headers=None):
        return self.request("GET", url, headers=headers)
    def post(self, url, *, json=None, headers=None):
        return self.request("POST", url, json=json, headers=headers)
    def put(self, url, *, json=None, headers=None):
        return self.request("PUT", url, json=json, headers=headers)
    def delete(self, url, *, headers=None):
        return self.request("DELETE", url, headers=headers)
