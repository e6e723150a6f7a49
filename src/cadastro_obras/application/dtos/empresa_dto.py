from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from cadastro_obras.domain.entities.empresa import Empresa
from cadastro_obras.domain.value_objects.documento import DocumentNumber, format_for_display
from cadastro_obras.domain.value_objects.numero_empresa import NumeroEmpresa


def _optional_id(value: Any) -> str | None:
    return None if value is None else str(value)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass(frozen=True)
class EmpresaDTO:
    numero: str
    nome: str
    documento: str
    id: str | None = None

    @classmethod
    def from_domain(cls, empresa: Empresa) -> "EmpresaDTO":
        return cls(
            numero=str(empresa.numero),
            nome=empresa.nome,
            documento=str(empresa.documento),
            id=empresa.id,
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "EmpresaDTO":
        return cls(
            numero=_text(payload.get("numero")),
            nome=_text(payload.get("nome")),
            documento=_text(payload.get("documento")),
            id=_optional_id(payload.get("id")),
        )

    def to_domain(self) -> Empresa:
        """Raises ValueError when the record does not hold a valid numero/documento."""
        return Empresa(
            numero=NumeroEmpresa(self.numero),
            nome=self.nome,
            documento=DocumentNumber.parse(self.documento),
            id=self.id,
        )

    def to_payload(self) -> dict[str, str]:
        # documento always travels digit-only
        return {"numero": self.numero, "nome": self.nome, "documento": self.documento}


def render_empresa_line(empresa: Empresa) -> str:
    return f"{empresa.numero} - {empresa.nome} - {format_for_display(str(empresa.documento))}"
