from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from cadastro_obras.domain.entities.empresa import Empresa
from cadastro_obras.domain.entities.obra import Obra


class EmpresaGatewayPort(Protocol):
    """Backend REST resource ``/empresas``.

    Implementations raise ``CadastroApiError`` or ``ApiConnectionError``.
    """

    def list_empresas(self) -> Sequence[Empresa]: ...
    def create_empresa(self, empresa: Empresa) -> Empresa: ...
    def update_empresa(self, empresa_id: str, empresa: Empresa) -> Empresa: ...
    def delete_empresa(self, empresa_id: str) -> None: ...


class ObraGatewayPort(Protocol):
    """Backend REST resources ``/empresas/{id}/obras`` and ``/obras``."""

    def list_obras(self, empresa_id: str) -> Sequence[Obra]: ...
    def create_obra(self, empresa_id: str, obra: Obra) -> Obra: ...
    def update_obra(self, obra_id: str, obra: Obra) -> Obra: ...
    def delete_obra(self, obra_id: str) -> None: ...
