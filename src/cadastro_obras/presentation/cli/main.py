import typer
from cadastro_obras.application.dtos.cadastro_result import CadastroResult
from cadastro_obras.application.dtos.empresa_dto import render_empresa_line
from cadastro_obras.application.dtos.obra_dto import render_obra_line
from cadastro_obras.application.use_cases.evaluate_documento_input import (
    DocumentoFieldStatus,
    EvaluateDocumentoInputUseCase,
)
from cadastro_obras.application.use_cases.manage_empresas import (
    AtualizarEmpresaUseCase,
    CadastrarEmpresaUseCase,
    ExcluirEmpresaUseCase,
    ListarEmpresasUseCase,
)
from cadastro_obras.application.use_cases.manage_obras import (
    AtualizarObraUseCase,
    CadastrarObraUseCase,
    ExcluirObraUseCase,
    ListarObrasUseCase,
)
from cadastro_obras.config import configure_logging, settings
from cadastro_obras.domain.value_objects.documento import format_for_display, normalize
from cadastro_obras.infrastructure.adapters.api.cadastro_api_client import CadastroApiClient
from cadastro_obras.infrastructure.adapters.http.httpx_client import HttpxClient

app = typer.Typer(help="Cadastro de empresas e obras")
documento_app = typer.Typer(help="Validação e formatação de CPF/CNPJ")
empresas_app = typer.Typer(help="Empresas cadastradas no backend")
obras_app = typer.Typer(help="Obras de uma empresa")
app.add_typer(documento_app, name="documento")
app.add_typer(empresas_app, name="empresas")
app.add_typer(obras_app, name="obras")


def _gateway() -> CadastroApiClient:
    return CadastroApiClient(http=HttpxClient(base_url=settings.api_url, timeout=settings.http_timeout))


def _finish(result: CadastroResult) -> None:
    for field, message in result.errors.items():
        typer.echo(f"{field}: {message}", err=True)
    if not result.ok:
        typer.echo(result.message, err=True)
        raise typer.Exit(code=1)
    typer.echo(result.message)


@app.callback()
def main(log_level: str = typer.Option(settings.log_level, "--log-level", help="DEBUG, INFO, WARNING...")) -> None:
    configure_logging(log_level)


# ---------- documento ----------
@documento_app.command("validar")
def validar_documento(raw: str = typer.Argument(..., help="CPF ou CNPJ, com ou sem máscara")) -> None:
    state = EvaluateDocumentoInputUseCase().execute(raw)
    typer.echo(f"{state.display} [{state.status.value}]")
    if state.message:
        typer.echo(state.message)
    if state.status is not DocumentoFieldStatus.VALID:
        raise typer.Exit(code=1)


@documento_app.command("formatar")
def formatar_documento(raw: str) -> None:
    typer.echo(format_for_display(normalize(raw)))


# ---------- empresas ----------
@empresas_app.command("listar")
def listar_empresas() -> None:
    result = ListarEmpresasUseCase(_gateway()).execute()
    if result.ok:
        for empresa in result.data:
            typer.echo(f"[{empresa.id}] {render_empresa_line(empresa)}")
    _finish(result)


@empresas_app.command("cadastrar")
def cadastrar_empresa(
    numero: str = typer.Option(..., "--numero", "-n", help="5 dígitos"),
    nome: str = typer.Option(..., "--nome"),
    documento: str = typer.Option(..., "--documento", "-d", help="CPF ou CNPJ"),
) -> None:
    _finish(CadastrarEmpresaUseCase(_gateway()).execute(numero, nome, documento))


@empresas_app.command("atualizar")
def atualizar_empresa(
    empresa_id: str,
    numero: str = typer.Option(..., "--numero", "-n"),
    nome: str = typer.Option(..., "--nome"),
    documento: str = typer.Option(..., "--documento", "-d"),
) -> None:
    _finish(AtualizarEmpresaUseCase(_gateway()).execute(empresa_id, numero, nome, documento))


@empresas_app.command("excluir")
def excluir_empresa(empresa_id: str) -> None:
    _finish(ExcluirEmpresaUseCase(_gateway()).execute(empresa_id))


# ---------- obras ----------
@obras_app.command("listar")
def listar_obras(empresa_id: str) -> None:
    result = ListarObrasUseCase(_gateway()).execute(empresa_id)
    if result.ok:
        for obra in result.data:
            typer.echo(f"[{obra.id}] {render_obra_line(obra)}")
    _finish(result)


@obras_app.command("cadastrar")
def cadastrar_obra(
    empresa_id: str,
    numero: str = typer.Option(..., "--numero", "-n", help="4 dígitos"),
    nome: str = typer.Option(..., "--nome"),
    bloco: str = typer.Option("", "--bloco", "-b", help="até 3 caracteres"),
    endereco: str = typer.Option(..., "--endereco", "-e"),
) -> None:
    _finish(CadastrarObraUseCase(_gateway()).execute(empresa_id, numero, nome, bloco, endereco))


@obras_app.command("atualizar")
def atualizar_obra(
    obra_id: str,
    numero: str = typer.Option(..., "--numero", "-n"),
    nome: str = typer.Option(..., "--nome"),
    bloco: str = typer.Option("", "--bloco", "-b"),
    endereco: str = typer.Option(..., "--endereco", "-e"),
) -> None:
    _finish(AtualizarObraUseCase(_gateway()).execute(obra_id, numero, nome, bloco, endereco))


@obras_app.command("excluir")
def excluir_obra(obra_id: str) -> None:
    _finish(ExcluirObraUseCase(_gateway()).execute(obra_id))


if __name__ == "__main__":
    app()
