from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol
import json


class HttpResponse:
    def __init__(
        self,
        status_code: int,
        text: str,
        url: str,
        headers: Mapping[str, str],
        *,
        raw: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.text = text
        self.url = url
        self.headers = dict(headers)
        self._raw = raw

    @property
    def is_error(self) -> bool:
        return self.status_code >= 400

    def json(self) -> Any:
        """Decoded body; raises ValueError when it is not JSON."""
        if self._raw is not None and hasattr(self._raw, "json"):
            return self._raw.json()
        return json.loads(self.text)


class HttpClientPort(Protocol):
    """Minimal JSON HTTP client abstraction used by the cadastro gateway."""

    def request(
        self,
        method: str,
        url: str,
        *,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse: ...
    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> HttpResponse: ...
    def post(
        self, url: str, *, json: Any | None = None, headers: Mapping[str, str] | None = None
    ) -> HttpResponse: ...
    def put(
        self, url: str, *, json: Any | None = None, headers: Mapping[str, str] | None = None
    ) -> HttpResponse: ...
    def delete(self, url: str, *, headers: Mapping[str, str] | None = None) -> HttpResponse: ...
