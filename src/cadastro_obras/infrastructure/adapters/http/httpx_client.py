from __future__ import annotations
from typing import Mapping, Any
import logging
import httpx
from tenacity import retry, stop_after_attempt, wait_exponential_jitter, retry_if_exception_type
from cadastro_obras.application.ports.http_client_port import HttpClientPort, HttpResponse

logger = logging.getLogger(__name__)

# POST/PUT are never resent
RETRIED_METHODS = frozenset({"GET", "DELETE"})


class HttpTemporaryError(Exception):
    pass


class HttpxClient(HttpClientPort):
    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """HTTP client adapter backed by a persistent httpx.Client.

        - Sends and receives JSON
        - Retries GET/DELETE on transport errors and 5xx answers (3 attempts, jittered backoff)
        - POST/PUT are sent exactly once
        - 4xx answers are returned untouched so callers can read ``detail``

        Args:
            base_url (str, optional): Prefix for relative URLs. Defaults to "".
            timeout (float, optional): Timeout for requests. Defaults to 10.0.
            transport (httpx.BaseTransport | None, optional): Custom transport, used by tests.
        """
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={
                "Accept": "application/json",
                "User-Agent": "cadastro-obras/0.1 httpx",
            },
            transport=transport,
        )

    def _log(self, msg: str) -> None:
        logger.debug("[HttpxClient] %s", msg)

    def request(self, method: str, url: str, *, json: Any | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse:
        """Sends one request.

        Args:
            method (str): HTTP verb.
            url (str): Absolute URL or path relative to ``base_url``.
            json (Any | None, optional): JSON body. Defaults to None.
            headers (Mapping[str, str] | None, optional): Extra headers. Defaults to None.

        Returns:
            HttpResponse: Response from the server.

        Raises:
            HttpTemporaryError: transport failure or 5xx (after the retry budget for GET/DELETE).
        """
        if method.upper() in RETRIED_METHODS:
            return self._send_with_retry(method, url, json=json, headers=headers)
        return self._send(method, url, json=json, headers=headers)

    @retry(reraise=True, stop=stop_after_attempt(3), wait=wait_exponential_jitter(initial=1, max=8), retry=retry_if_exception_type(HttpTemporaryError))
    def _send_with_retry(self, method: str, url: str, *, json: Any | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return self._send(method, url, json=json, headers=headers)

    def _send(self, method: str, url: str, *, json: Any | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse:
        self._log(f"{method} {url}")
        try:
            resp = self._client.request(method, url, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise HttpTemporaryError(str(e)) from e
        self._log(f"{method} {url} -> {resp.status_code}")
        if resp.status_code >= 500:
            logger.warning("%s %s -> %s", method, url, resp.status_code)
            raise HttpTemporaryError(f"{method} {url} -> {resp.status_code}")
        return HttpResponse(resp.status_code, resp.text, str(resp.url), resp.headers, raw=resp)

    def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return self.request("GET", url, headers=headers)

    def post(self, url: str, *, json: Any | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return self.request("POST", url, json=json, headers=headers)

    def put(self, url: str, *, json: Any | None = None, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return self.request("PUT", url, json=json, headers=headers)

    def delete(self, url: str, *, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return self.request("DELETE", url, headers=headers)

    def close(self) -> None:
        self._client.close()
