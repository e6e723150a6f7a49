from cadastro_obras.application.use_cases.validate_cadastro_form import (
    validate_empresa_form,
    validate_obra_form,
)
from cadastro_obras.domain.entities.empresa import Empresa
from cadastro_obras.domain.entities.obra import Obra


def test_valid_empresa_form_builds_record():
    form = validate_empresa_form("00001", "  Construtora Alfa Ltda ", "11.222.333/0001-81")
    assert form.ok
    assert isinstance(form.record, Empresa)
    assert form.record.nome == "Construtora Alfa Ltda"
    assert form.record.documento == "11222333000181"


def test_empresa_form_collects_every_error():
    form = validate_empresa_form("123", "", "123")
    assert not form.ok
    assert form.errors == {
        "numero": "O número deve ter 5 dígitos.",
        "nome": "Informe o nome da empresa.",
        "documento": "Informe CPF (11) ou CNPJ (14) dígitos.",
    }
    assert form.record is None


def test_empresa_form_checksum_messages():
    assert validate_empresa_form("00001", "A", "11144477736").errors == {"documento": "CPF inválido."}
    assert validate_empresa_form("00001", "A", "11222333000182").errors == {"documento": "CNPJ inválido."}
    assert validate_empresa_form("00001", "A", "11111111111").errors == {"documento": "CPF inválido."}


def test_valid_obra_form():
    form = validate_obra_form("0001", "Residencial Sol", "A1", "Rua das Flores, 10", empresa_id="7")
    assert form.ok
    assert isinstance(form.record, Obra)
    assert form.record.empresa_id == "7"
    assert form.record.bloco == "A1"


def test_obra_form_errors():
    form = validate_obra_form("12345", " ", "ABCD", "")
    assert form.errors == {
        "numero": "O número da obra deve ter 4 dígitos.",
        "nome": "Informe o nome da obra.",
        "bloco": "O bloco deve ter no máximo 3 caracteres.",
        "endereco": "Informe o endereço da obra.",
    }


def test_obra_bloco_is_optional():
    assert validate_obra_form("0002", "Galpão", None, "Av. Central").ok


def test_numero_with_extra_digits_is_rejected_not_truncated():
    assert validate_empresa_form("000012", "A", "11144477735").errors == {"numero": "O número deve ter 5 dígitos."}
    assert validate_obra_form("00012", "Sol", "", "Rua 1").errors == {"numero": "O número da obra deve ter 4 dígitos."}
    assert validate_empresa_form("00-001", "A", "11144477735").record.numero == "00001"


def test_documento_of_intermediate_length_asks_for_cpf_or_cnpj():
    assert validate_empresa_form("00001", "A", "1114447773500").errors == {
        "documento": "Informe CPF (11) ou CNPJ (14) dígitos."
    }
