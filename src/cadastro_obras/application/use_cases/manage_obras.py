from __future__ import annotations

import logging

from cadastro_obras.application.dtos.cadastro_result import ERROR, INVALID, OK, CadastroResult
from cadastro_obras.application.errors import ApiConnectionError, CadastroApiError, CadastroError
from cadastro_obras.application.ports.cadastro_api_port import ObraGatewayPort
from cadastro_obras.application.use_cases.validate_cadastro_form import validate_obra_form

logger = logging.getLogger(__name__)


def _error_result(action: str, exc: CadastroError) -> CadastroResult:
    if isinstance(exc, CadastroApiError):
        logger.warning("%s obra rejected (%s): %s", action, exc.status_code, exc.detail)
        return CadastroResult(ERROR, f"Erro ao {action} obra: {exc.detail}")
    logger.error("%s obra failed: %s", action, exc)
    message = exc.message if isinstance(exc, ApiConnectionError) else str(exc)
    return CadastroResult(ERROR, f"Erro ao {action} obra. {message}")


class ListarObrasUseCase:
    def __init__(self, gateway: ObraGatewayPort) -> None:
        self.gateway = gateway

    def execute(self, empresa_id: str) -> CadastroResult:
        try:
            obras = list(self.gateway.list_obras(empresa_id))
        except CadastroError as e:
            return _error_result("listar", e)
        if not obras:
            return CadastroResult(OK, "Nenhuma obra cadastrada para esta empresa.", data=[])
        return CadastroResult(OK, f"{len(obras)} obra(s) cadastrada(s).", data=obras)


class CadastrarObraUseCase:
    def __init__(self, gateway: ObraGatewayPort) -> None:
        self.gateway = gateway

    def execute(
        self, empresa_id: str, numero: str, nome: str, bloco: str, endereco: str
    ) -> CadastroResult:
        form = validate_obra_form(numero, nome, bloco, endereco, empresa_id=empresa_id)
        if not form.ok:
            return CadastroResult(INVALID, "Corrija os campos destacados.", errors=form.errors)
        try:
            created = self.gateway.create_obra(empresa_id, form.record)
        except CadastroError as e:
            return _error_result("cadastrar", e)
        logger.info("Obra %s cadastrada na empresa %s", created.numero, empresa_id)
        return CadastroResult(OK, "Obra cadastrada com sucesso!", data=created)


class AtualizarObraUseCase:
    def __init__(self, gateway: ObraGatewayPort) -> None:
        self.gateway = gateway

    def execute(
        self, obra_id: str, numero: str, nome: str, bloco: str, endereco: str
    ) -> CadastroResult:
        form = validate_obra_form(numero, nome, bloco, endereco, obra_id=obra_id)
        if not form.ok:
            return CadastroResult(INVALID, "Corrija os campos destacados.", errors=form.errors)
        try:
            updated = self.gateway.update_obra(obra_id, form.record)
        except CadastroError as e:
            return _error_result("atualizar", e)
        logger.info("Obra %s atualizada", obra_id)
        return CadastroResult(OK, "Obra atualizada com sucesso!", data=updated)


class ExcluirObraUseCase:
    def __init__(self, gateway: ObraGatewayPort) -> None:
        self.gateway = gateway

    def execute(self, obra_id: str) -> CadastroResult:
        try:
            self.gateway.delete_obra(obra_id)
        except CadastroError as e:
            return _error_result("excluir", e)
        logger.info("Obra %s excluída", obra_id)
        return CadastroResult(OK, "Obra excluída com sucesso!")
