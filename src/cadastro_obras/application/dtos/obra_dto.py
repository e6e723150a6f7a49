from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from cadastro_obras.domain.entities.obra import Obra
from cadastro_obras.domain.value_objects.numero_obra import NumeroObra


@dataclass(frozen=True)
class ObraDTO:
    numero: str
    nome: str
    bloco: str
    endereco: str
    empresa_id: str | None = None
    id: str | None = None

    @classmethod
    def from_domain(cls, obra: Obra) -> "ObraDTO":
        return cls(
            numero=str(obra.numero),
            nome=obra.nome,
            bloco=obra.bloco,
            endereco=obra.endereco,
            empresa_id=obra.empresa_id,
            id=obra.id,
        )

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], empresa_id: str | None = None) -> "ObraDTO":
        raw_empresa = payload.get("empresa_id", empresa_id)
        raw_id = payload.get("id")
        return cls(
            numero=str(payload.get("numero", "")),
            nome=str(payload.get("nome") or ""),
            bloco=str(payload.get("bloco") or ""),
            endereco=str(payload.get("endereco") or ""),
            empresa_id=None if raw_empresa is None else str(raw_empresa),
            id=None if raw_id is None else str(raw_id),
        )

    def to_domain(self) -> Obra:
        return Obra(
            numero=NumeroObra(self.numero),
            nome=self.nome,
            bloco=self.bloco,
            endereco=self.endereco,
            empresa_id=self.empresa_id,
            id=self.id,
        )

    def to_payload(self) -> dict[str, str]:
        return {
            "numero": self.numero,
            "nome": self.nome,
            "bloco": self.bloco,
            "endereco": self.endereco,
        }


def render_obra_line(obra: Obra) -> str:
    bloco = f" (bloco {obra.bloco})" if obra.bloco else ""
    return f"{obra.numero} - {obra.nome}{bloco} - {obra.endereco}"
