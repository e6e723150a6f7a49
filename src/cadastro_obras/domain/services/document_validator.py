"""Validação dos dígitos verificadores de CPF e CNPJ.

Todas as funções são predicados puros: nunca levantam exceção, qualquer
entrada malformada resulta em ``False`` ou ``ValidationResult`` inválido.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cadastro_obras.domain.value_objects.documento import (
    CNPJ_LENGTH,
    CPF_LENGTH,
    DocumentKind,
    classify,
    format_for_display,
    normalize,
)


class InvalidReason(str, Enum):
    MALFORMED_LENGTH = "MALFORMED_LENGTH"
    CHECKSUM_MISMATCH = "CHECKSUM_MISMATCH"
    DEGENERATE_SEQUENCE = "DEGENERATE_SEQUENCE"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    reason: InvalidReason | None = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(True)

    @classmethod
    def invalid(cls, reason: InvalidReason) -> "ValidationResult":
        return cls(False, reason)

    def __bool__(self) -> bool:
        return self.valid


def _is_ascii_digits(value: str) -> bool:
    # str.isdigit() also accepts superscripts and other scripts' digits
    return value.isascii() and value.isdigit()


def _cpf_check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    r = (total * 10) % 11
    return 0 if r in (10, 11) else r


def _cnpj_check_digit(base: str) -> int:
    total = 0
    weight = 2
    for d in reversed(base):
        total += int(d) * weight
        weight = 2 if weight == 9 else weight + 1
    r = total % 11
    return 0 if r < 2 else 11 - r


def _shape(digits: str, size: int) -> InvalidReason | None:
    if not isinstance(digits, str) or len(digits) != size or not _is_ascii_digits(digits):
        return InvalidReason.MALFORMED_LENGTH
    if digits == digits[0] * size:
        return InvalidReason.DEGENERATE_SEQUENCE
    return None


def validate_cpf(digits: str) -> ValidationResult:
    reason = _shape(digits, CPF_LENGTH)
    if reason:
        return ValidationResult.invalid(reason)
    if _cpf_check_digit(digits[:9]) != int(digits[9]):
        return ValidationResult.invalid(InvalidReason.CHECKSUM_MISMATCH)
    if _cpf_check_digit(digits[:10]) != int(digits[10]):
        return ValidationResult.invalid(InvalidReason.CHECKSUM_MISMATCH)
    return ValidationResult.ok()


def validate_cnpj(digits: str) -> ValidationResult:
    reason = _shape(digits, CNPJ_LENGTH)
    if reason:
        return ValidationResult.invalid(reason)
    base = digits[:12]
    dig1 = _cnpj_check_digit(base)
    dig2 = _cnpj_check_digit(base + str(dig1))
    if not digits.endswith(f"{dig1}{dig2}"):
        return ValidationResult.invalid(InvalidReason.CHECKSUM_MISMATCH)
    return ValidationResult.ok()


def is_valid_cpf(digits: str) -> bool:
    return validate_cpf(digits).valid


def is_valid_cnpj(digits: str) -> bool:
    return validate_cnpj(digits).valid


def validate(digits: str) -> ValidationResult:
    """Valida um documento já normalizado conforme o seu comprimento."""
    if not isinstance(digits, str):
        return ValidationResult.invalid(InvalidReason.MALFORMED_LENGTH)
    kind = classify(digits)
    if kind is DocumentKind.CPF:
        return validate_cpf(digits)
    if kind is DocumentKind.CNPJ:
        return validate_cnpj(digits)
    return ValidationResult.invalid(InvalidReason.MALFORMED_LENGTH)


_MESSAGES = {
    (DocumentKind.CPF, InvalidReason.CHECKSUM_MISMATCH): "CPF inválido.",
    (DocumentKind.CPF, InvalidReason.DEGENERATE_SEQUENCE): "CPF inválido.",
    (DocumentKind.CNPJ, InvalidReason.CHECKSUM_MISMATCH): "CNPJ inválido.",
    (DocumentKind.CNPJ, InvalidReason.DEGENERATE_SEQUENCE): "CNPJ inválido.",
}


class DocumentValidator:
    """Fachada sem estado sobre as funções deste módulo.

    Pode ser compartilhada entre threads: não guarda nenhum atributo mutável.
    """

    normalize = staticmethod(normalize)
    classify = staticmethod(classify)
    format_for_display = staticmethod(format_for_display)
    is_valid_cpf = staticmethod(is_valid_cpf)
    is_valid_cnpj = staticmethod(is_valid_cnpj)
    validate = staticmethod(validate)

    @staticmethod
    def message_for(result: ValidationResult, kind: DocumentKind) -> str:
        if result.valid:
            return ""
        if result.reason is InvalidReason.MALFORMED_LENGTH:
            return "Informe CPF (11) ou CNPJ (14) dígitos."
        return _MESSAGES.get((kind, result.reason), "Documento inválido.")
