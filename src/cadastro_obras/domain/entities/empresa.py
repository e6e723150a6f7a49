from dataclasses import dataclass

from cadastro_obras.domain.value_objects.documento import DocumentKind, DocumentNumber
from cadastro_obras.domain.value_objects.numero_empresa import NumeroEmpresa


@dataclass(frozen=True)
class Empresa:
    numero: NumeroEmpresa
    nome: str
    documento: DocumentNumber
    id: str | None = None

    def __post_init__(self) -> None:
        if self.documento.kind not in (DocumentKind.CPF, DocumentKind.CNPJ):
            raise ValueError("Informe CPF (11) ou CNPJ (14) dígitos.")
