from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cadastro_obras.domain.services.document_validator import DocumentValidator
from cadastro_obras.domain.value_objects.documento import CPF_LENGTH, DocumentKind

MSG_CPF_INCOMPLETE = "Digite 11 dígitos para CPF ou continue para CNPJ."
MSG_CNPJ_INCOMPLETE = "Digite 14 dígitos para CNPJ."
MSG_TOO_LONG = "O documento deve ter no máximo 14 dígitos."


class DocumentoFieldStatus(str, Enum):
    EMPTY = "EMPTY"
    INCOMPLETE = "INCOMPLETE"
    VALID = "VALID"
    INVALID = "INVALID"


@dataclass(frozen=True)
class DocumentoFieldState:
    status: DocumentoFieldStatus
    digits: str
    display: str
    kind: DocumentKind | None
    message: str = ""

    def as_dict(self) -> dict[str, str | None]:
        return {
            "status": self.status.value,
            "documento": self.digits,
            "exibicao": self.display,
            "tipo": self.kind.value if self.kind else None,
            "mensagem": self.message,
        }


class EvaluateDocumentoInputUseCase:
    """Re-evaluates the CPF/CNPJ field from scratch on every keystroke."""

    def __init__(self, validator: DocumentValidator | None = None) -> None:
        self.validator = validator or DocumentValidator()

    def execute(self, raw: str | None) -> DocumentoFieldState:
        v = self.validator
        digits = v.normalize(raw)
        display = v.format_for_display(digits)
        if not digits:
            return DocumentoFieldState(DocumentoFieldStatus.EMPTY, digits, display, None)

        kind = v.classify(digits)
        if kind is DocumentKind.TOO_LONG:
            return DocumentoFieldState(DocumentoFieldStatus.INVALID, digits, display, kind, MSG_TOO_LONG)
        if kind is DocumentKind.INCOMPLETE:
            # up to 11 digits the user may still be typing a CPF
            message = MSG_CPF_INCOMPLETE if len(digits) < CPF_LENGTH else MSG_CNPJ_INCOMPLETE
            return DocumentoFieldState(DocumentoFieldStatus.INCOMPLETE, digits, display, kind, message)

        result = v.validate(digits)
        if result.valid:
            return DocumentoFieldState(DocumentoFieldStatus.VALID, digits, display, kind)
        return DocumentoFieldState(
            DocumentoFieldStatus.INVALID, digits, display, kind, v.message_for(result, kind)
        )
