from __future__ import annotations


class CadastroError(Exception):
    """Base for failures talking to the cadastro backend."""


class CadastroApiError(CadastroError):
    """Backend answered with an error body carrying a ``detail`` message."""

    def __init__(self, detail: str, status_code: int) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class ApiConnectionError(CadastroError):
    """Transport failure or an error response without a usable ``detail``."""

    def __init__(self, message: str = "Falha de conexão com o servidor.") -> None:
        super().__init__(message)
        self.message = message
