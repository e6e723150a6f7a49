from __future__ import annotations

import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from cadastro_obras.application.use_cases.evaluate_documento_input import EvaluateDocumentoInputUseCase
from cadastro_obras.domain.value_objects.documento import format_for_display, normalize
from cadastro_obras.presentation.api.metrics import documento_validations

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/documentos", tags=["documentos"])

_evaluate = EvaluateDocumentoInputUseCase()


class DocumentoRequest(BaseModel):
    documento: str = Field("", description="CPF ou CNPJ, com ou sem máscara")


@router.post("/validar")
def validar(body: DocumentoRequest) -> dict[str, str | bool | None]:
    state = _evaluate.execute(body.documento)
    kind = state.kind.value if state.kind else "EMPTY"
    documento_validations.labels(kind=kind, status=state.status.value).inc()
    logger.debug("documento %s -> %s", kind, state.status.value)
    return {**state.as_dict(), "valido": state.status.value == "VALID"}


@router.post("/formatar")
def formatar(body: DocumentoRequest) -> dict[str, str]:
    digits = normalize(body.documento)
    return {"documento": digits, "exibicao": format_for_display(digits)}
