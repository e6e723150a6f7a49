from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cadastro_obras.domain.entities.empresa import Empresa
from cadastro_obras.domain.entities.obra import MAX_BLOCO_LENGTH, Obra
from cadastro_obras.domain.services.document_validator import DocumentValidator
from cadastro_obras.domain.value_objects.documento import DocumentNumber, normalize
from cadastro_obras.domain.value_objects.numero_empresa import NumeroEmpresa
from cadastro_obras.domain.value_objects.numero_obra import NumeroObra

NUMERO_EMPRESA_SIZE = 5
NUMERO_OBRA_SIZE = 4


@dataclass(frozen=True)
class FormValidation:
    errors: dict[str, str] = field(default_factory=dict)
    record: Any = None

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_documento(documento: str | None) -> str | None:
    """Returns the error message for the documento field, or None when valid."""
    validator = DocumentValidator()
    digits = validator.normalize(documento)
    result = validator.validate(digits)
    if result.valid:
        return None
    return validator.message_for(result, validator.classify(digits))


def validate_empresa_form(
    numero: str | None, nome: str | None, documento: str | None, *, empresa_id: str | None = None
) -> FormValidation:
    errors: dict[str, str] = {}
    numero_digits = normalize(numero)
    if len(numero_digits) != NUMERO_EMPRESA_SIZE:
        errors["numero"] = "O número deve ter 5 dígitos."
    nome_clean = (nome or "").strip()
    if not nome_clean:
        errors["nome"] = "Informe o nome da empresa."
    doc_error = validate_documento(documento)
    if doc_error:
        errors["documento"] = doc_error
    if errors:
        return FormValidation(errors)

    empresa = Empresa(
        numero=NumeroEmpresa(numero_digits),
        nome=nome_clean,
        documento=DocumentNumber.parse(documento),
        id=empresa_id,
    )
    return FormValidation(record=empresa)


def validate_obra_form(
    numero: str | None,
    nome: str | None,
    bloco: str | None,
    endereco: str | None,
    *,
    empresa_id: str | None = None,
    obra_id: str | None = None,
) -> FormValidation:
    errors: dict[str, str] = {}
    numero_digits = normalize(numero)
    if len(numero_digits) != NUMERO_OBRA_SIZE:
        errors["numero"] = "O número da obra deve ter 4 dígitos."
    nome_clean = (nome or "").strip()
    if not nome_clean:
        errors["nome"] = "Informe o nome da obra."
    bloco_clean = (bloco or "").strip()
    if len(bloco_clean) > MAX_BLOCO_LENGTH:
        errors["bloco"] = "O bloco deve ter no máximo 3 caracteres."
    endereco_clean = (endereco or "").strip()
    if not endereco_clean:
        errors["endereco"] = "Informe o endereço da obra."
    if errors:
        return FormValidation(errors)

    obra = Obra(
        numero=NumeroObra(numero_digits),
        nome=nome_clean,
        bloco=bloco_clean,
        endereco=endereco_clean,
        empresa_id=empresa_id,
        id=obra_id,
    )
    return FormValidation(record=obra)
