from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from cadastro_obras.application.dtos.empresa_dto import EmpresaDTO
from cadastro_obras.application.dtos.obra_dto import ObraDTO
from cadastro_obras.application.errors import ApiConnectionError, CadastroApiError
from cadastro_obras.application.ports.cadastro_api_port import EmpresaGatewayPort, ObraGatewayPort
from cadastro_obras.application.ports.http_client_port import HttpClientPort, HttpResponse
from cadastro_obras.domain.entities.empresa import Empresa
from cadastro_obras.domain.entities.obra import Obra
from cadastro_obras.infrastructure.adapters.http.httpx_client import HttpTemporaryError

logger = logging.getLogger(__name__)


class CadastroApiClient(EmpresaGatewayPort, ObraGatewayPort):
    """
    Cliente do backend REST de empresas e obras.

    Respostas de erro com JSON ``{"detail": "..."}`` viram ``CadastroApiError``;
    qualquer outro formato, ou falha de transporte, vira ``ApiConnectionError``.
    """

    def __init__(self, http: HttpClientPort) -> None:
        self.http = http

    # ---------- plumbing ----------
    def _send(self, method: str, path: str, payload: dict[str, Any] | None = None) -> Any:
        try:
            resp = self.http.request(method, path, json=payload)
        except HttpTemporaryError as e:
            raise ApiConnectionError() from e
        if resp.is_error:
            raise self._error_from(resp)
        if not resp.text.strip():
            return None
        try:
            return resp.json()
        except ValueError:
            logger.warning("%s %s returned a non-JSON body", method, path)
            return None

    @staticmethod
    def _error_from(resp: HttpResponse) -> Exception:
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("detail"), str):
            return CadastroApiError(body["detail"], resp.status_code)
        logger.warning("Unexpected error body from %s (status %s)", resp.url, resp.status_code)
        return ApiConnectionError()

    @staticmethod
    def _as_list(data: Any) -> list[dict[str, Any]]:
        if not isinstance(data, list):
            return []
        return [item for item in data if isinstance(item, dict)]

    @staticmethod
    def _as_record(data: Any, fallback: dict[str, Any]) -> dict[str, Any]:
        # some backends answer 201/204 without echoing the record
        if isinstance(data, dict):
            return {**fallback, **data}
        return fallback

    # ---------- empresas ----------
    def _empresa_from(self, data: Any, sent: Empresa, empresa_id: str | None) -> Empresa:
        payload = EmpresaDTO.from_domain(sent).to_payload()
        if empresa_id is not None:
            payload["id"] = empresa_id
        record = self._as_record(data, payload)
        try:
            return EmpresaDTO.from_payload(record).to_domain()
        except ValueError as e:
            logger.warning("Backend echoed a malformed empresa (%s); keeping the submitted one", e)
            return replace(sent, id=EmpresaDTO.from_payload(record).id)

    def list_empresas(self) -> Sequence[Empresa]:
        empresas: list[Empresa] = []
        for item in self._as_list(self._send("GET", "/empresas")):
            try:
                empresas.append(EmpresaDTO.from_payload(item).to_domain())
            except ValueError as e:
                logger.warning("Skipping malformed empresa %s: %s", item.get("id"), e)
        return empresas

    def create_empresa(self, empresa: Empresa) -> Empresa:
        data = self._send("POST", "/empresas", EmpresaDTO.from_domain(empresa).to_payload())
        return self._empresa_from(data, empresa, None)

    def update_empresa(self, empresa_id: str, empresa: Empresa) -> Empresa:
        data = self._send("PUT", f"/empresas/{empresa_id}", EmpresaDTO.from_domain(empresa).to_payload())
        return self._empresa_from(data, empresa, empresa_id)

    def delete_empresa(self, empresa_id: str) -> None:
        self._send("DELETE", f"/empresas/{empresa_id}")

    # ---------- obras ----------
    def _obra_from(self, data: Any, sent: Obra, empresa_id: str | None, obra_id: str | None) -> Obra:
        payload: dict[str, Any] = ObraDTO.from_domain(sent).to_payload()
        if obra_id is not None:
            payload["id"] = obra_id
        record = self._as_record(data, payload)
        dto = ObraDTO.from_payload(record, empresa_id=empresa_id)
        try:
            return dto.to_domain()
        except ValueError as e:
            logger.warning("Backend echoed a malformed obra (%s); keeping the submitted one", e)
            return replace(sent, id=dto.id, empresa_id=dto.empresa_id)

    def list_obras(self, empresa_id: str) -> Sequence[Obra]:
        obras: list[Obra] = []
        for item in self._as_list(self._send("GET", f"/empresas/{empresa_id}/obras")):
            try:
                obras.append(ObraDTO.from_payload(item, empresa_id=empresa_id).to_domain())
            except ValueError as e:
                logger.warning("Skipping malformed obra %s: %s", item.get("id"), e)
        return obras

    def create_obra(self, empresa_id: str, obra: Obra) -> Obra:
        data = self._send("POST", f"/empresas/{empresa_id}/obras", ObraDTO.from_domain(obra).to_payload())
        return self._obra_from(data, obra, empresa_id, None)

    def update_obra(self, obra_id: str, obra: Obra) -> Obra:
        data = self._send("PUT", f"/obras/{obra_id}", ObraDTO.from_domain(obra).to_payload())
        return self._obra_from(data, obra, obra.empresa_id, obra_id)

    def delete_obra(self, obra_id: str) -> None:
        self._send("DELETE", f"/obras/{obra_id}")
