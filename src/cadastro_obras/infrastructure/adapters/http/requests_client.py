from __future__ import annotations

import logging
from typing import Mapping, Any
import requests

from cadastro_obras.application.ports.http_client_port import HttpClientPort, HttpResponse
from cadastro_obras.infrastructure.adapters.http.httpx_client import HttpTemporaryError

logger = logging.getLogger(__name__)


class RequestsHttpClient(HttpClientPort):
    """HTTP client adapter backed by a persistent requests.Session.

    - No retries: a transport failure or 5xx raises HttpTemporaryError at once
    - Relative URLs are joined to ``base_url``
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        default_headers: Mapping[str, str] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if default_headers:
            self.session.headers.update(dict(default_headers))

    def _log(self, msg: str) -> None:
        logger.debug("[RequestsHttpClient] %s", msg)

    def _url(self, url: str) -> str:
        if url.startswith(("http://", "https://")) or not self.base_url:
            return url
        return f"{self.base_url}/{url.lstrip('/')}"

    def request(
        self,
        method: str,
        url: str,
        *,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        full_url = self._url(url)
        self._log(f"{method} {full_url}")
        try:
            resp = self.session.request(method, full_url, json=json, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, full_url, e)
            raise HttpTemporaryError(str(e)) from e
        self._log(f"{method} {full_url} -> {resp.status_code}")
        if resp.status_code >= 500:
            raise HttpTemporaryError(f"{method} {full_url} -> {resp.status_code}")
        return HttpResponse(resp.status_code, resp.text, str(resp.url), resp.headers)

    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return self.request("GET", url, headers=headers)

    def post(self, url: str, *, json: Any | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return self.request("POST", url, json=json, headers=headers)

    def put(self, url: str, *, json: Any | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return self.request("PUT", url, json=json, headers=headers)

    def delete(self, url: str, *, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return self.request("DELETE", url, headers=headers)
