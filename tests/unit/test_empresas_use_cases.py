from cadastro_obras.application.errors import ApiConnectionError, CadastroApiError
from cadastro_obras.application.use_cases.manage_empresas import (
    AtualizarEmpresaUseCase,
    CadastrarEmpresaUseCase,
    ExcluirEmpresaUseCase,
    ListarEmpresasUseCase,
)
from tests.unit._fakes_api import FakeGateway


def test_cadastrar_empresa_sends_digit_only_documento():
    gw = FakeGateway()
    res = CadastrarEmpresaUseCase(gw).execute("00001", "Construtora Alfa", "111.444.777-35")
    assert res.ok
    assert res.message == "Empresa cadastrada com sucesso!"
    _, sent = gw.calls[0]
    assert sent.documento == "11144477735"
    assert res.data.id == "1"


def test_cadastrar_empresa_invalid_never_calls_backend():
    gw = FakeGateway()
    res = CadastrarEmpresaUseCase(gw).execute("00001", "Alfa", "11144477736")
    assert res.status == "INVALID"
    assert res.errors == {"documento": "CPF inválido."}
    assert gw.calls == []


def test_api_error_detail_becomes_message():
    gw = FakeGateway(error=CadastroApiError("Documento já cadastrado", 409))
    res = CadastrarEmpresaUseCase(gw).execute("00001", "Alfa", "11222333000181")
    assert res.status == "ERROR"
    assert res.message == "Erro ao cadastrar empresa: Documento já cadastrado"


def test_connection_error_becomes_generic_message():
    gw = FakeGateway(error=ApiConnectionError())
    res = ListarEmpresasUseCase(gw).execute()
    assert res.status == "ERROR"
    assert "Falha de conexão com o servidor." in res.message


def test_listar_empresas():
    gw = FakeGateway()
    assert ListarEmpresasUseCase(gw).execute().message == "Nenhuma empresa cadastrada ainda."
    CadastrarEmpresaUseCase(gw).execute("00001", "Alfa", "11222333000181")
    res = ListarEmpresasUseCase(gw).execute()
    assert res.ok
    assert [e.nome for e in res.data] == ["Alfa"]


def test_atualizar_and_excluir_empresa():
    gw = FakeGateway()
    created = CadastrarEmpresaUseCase(gw).execute("00001", "Alfa", "11222333000181").data
    res = AtualizarEmpresaUseCase(gw).execute(created.id, "00002", "Alfa SA", "11444777000161")
    assert res.ok
    assert gw.empresas[created.id].numero == "00002"
    assert ExcluirEmpresaUseCase(gw).execute(created.id).message == "Empresa excluída com sucesso!"
    assert gw.empresas == {}


def test_atualizar_empresa_validates_first():
    gw = FakeGateway()
    res = AtualizarEmpresaUseCase(gw).execute("1", "1", "Alfa", "11222333000181")
    assert res.status == "INVALID"
    assert "numero" in res.errors
    assert gw.calls == []
