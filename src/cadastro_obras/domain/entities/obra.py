from dataclasses import dataclass

from cadastro_obras.domain.value_objects.numero_obra import NumeroObra

MAX_BLOCO_LENGTH = 3


@dataclass(frozen=True)
class Obra:
    numero: NumeroObra
    nome: str
    bloco: str
    endereco: str
    empresa_id: str | None = None
    id: str | None = None

    def __post_init__(self) -> None:
        if len(self.bloco) > MAX_BLOCO_LENGTH:
            raise ValueError("O bloco deve ter no máximo 3 caracteres.")
