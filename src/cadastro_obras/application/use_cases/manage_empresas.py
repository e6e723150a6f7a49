from __future__ import annotations

import logging

from cadastro_obras.application.dtos.cadastro_result import ERROR, INVALID, OK, CadastroResult
from cadastro_obras.application.errors import ApiConnectionError, CadastroApiError, CadastroError
from cadastro_obras.application.ports.cadastro_api_port import EmpresaGatewayPort
from cadastro_obras.application.use_cases.validate_cadastro_form import validate_empresa_form

logger = logging.getLogger(__name__)


def _error_result(action: str, exc: CadastroError) -> CadastroResult:
    if isinstance(exc, CadastroApiError):
        logger.warning("%s empresa rejected (%s): %s", action, exc.status_code, exc.detail)
        return CadastroResult(ERROR, f"Erro ao {action} empresa: {exc.detail}")
    logger.error("%s empresa failed: %s", action, exc)
    message = exc.message if isinstance(exc, ApiConnectionError) else str(exc)
    return CadastroResult(ERROR, f"Erro ao {action} empresa. {message}")


class ListarEmpresasUseCase:
    def __init__(self, gateway: EmpresaGatewayPort) -> None:
        self.gateway = gateway

    def execute(self) -> CadastroResult:
        try:
            empresas = list(self.gateway.list_empresas())
        except CadastroError as e:
            return _error_result("listar", e)
        if not empresas:
            return CadastroResult(OK, "Nenhuma empresa cadastrada ainda.", data=[])
        return CadastroResult(OK, f"{len(empresas)} empresa(s) cadastrada(s).", data=empresas)


class CadastrarEmpresaUseCase:
    """Validates the form and POSTs it; the backend is not called on invalid input."""

    def __init__(self, gateway: EmpresaGatewayPort) -> None:
        self.gateway = gateway

    def execute(self, numero: str, nome: str, documento: str) -> CadastroResult:
        form = validate_empresa_form(numero, nome, documento)
        if not form.ok:
            return CadastroResult(INVALID, "Corrija os campos destacados.", errors=form.errors)
        try:
            created = self.gateway.create_empresa(form.record)
        except CadastroError as e:
            return _error_result("cadastrar", e)
        logger.info("Empresa %s cadastrada (documento %s)", created.numero, created.documento.masked)
        return CadastroResult(OK, "Empresa cadastrada com sucesso!", data=created)


class AtualizarEmpresaUseCase:
    def __init__(self, gateway: EmpresaGatewayPort) -> None:
        self.gateway = gateway

    def execute(self, empresa_id: str, numero: str, nome: str, documento: str) -> CadastroResult:
        form = validate_empresa_form(numero, nome, documento, empresa_id=empresa_id)
        if not form.ok:
            return CadastroResult(INVALID, "Corrija os campos destacados.", errors=form.errors)
        try:
            updated = self.gateway.update_empresa(empresa_id, form.record)
        except CadastroError as e:
            return _error_result("atualizar", e)
        logger.info("Empresa %s atualizada", empresa_id)
        return CadastroResult(OK, "Empresa atualizada com sucesso!", data=updated)


class ExcluirEmpresaUseCase:
    def __init__(self, gateway: EmpresaGatewayPort) -> None:
        self.gateway = gateway

    def execute(self, empresa_id: str) -> CadastroResult:
        try:
            self.gateway.delete_empresa(empresa_id)
        except CadastroError as e:
            return _error_result("excluir", e)
        logger.info("Empresa %s excluída", empresa_id)
        return CadastroResult(OK, "Empresa excluída com sucesso!")
