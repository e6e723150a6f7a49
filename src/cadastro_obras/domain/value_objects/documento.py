from __future__ import annotations

import re
from enum import Enum

CPF_LENGTH = 11
CNPJ_LENGTH = 14

_NON_DIGITS = re.compile(r"[^0-9]")


class DocumentKind(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"
    INCOMPLETE = "INCOMPLETE"
    TOO_LONG = "TOO_LONG"


def normalize(raw: str | None) -> str:
    """Keeps only ASCII digits: '123.456.789-09' -> '12345678909'."""
    return _NON_DIGITS.sub("", raw or "")


def classify(digits: str) -> DocumentKind:
    size = len(digits)
    if size == CPF_LENGTH:
        return DocumentKind.CPF
    if size == CNPJ_LENGTH:
        return DocumentKind.CNPJ
    if size > CNPJ_LENGTH:
        return DocumentKind.TOO_LONG
    return DocumentKind.INCOMPLETE


def format_for_display(digits: str) -> str:
    """Applies the CPF/CNPJ mask; partial input is returned unchanged."""
    if len(digits) == CPF_LENGTH:
        return f"{digits[0:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:11]}"
    if len(digits) == CNPJ_LENGTH:
        return f"{digits[0:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:14]}"
    return digits


class DocumentNumber(str):
    """Value Object para CPF/CNPJ (somente dígitos, qualquer comprimento)."""

    def __new__(cls, value: str) -> "DocumentNumber":
        if _NON_DIGITS.search(value):
            raise ValueError("Documento deve conter apenas dígitos")
        return str.__new__(cls, value)

    @classmethod
    def parse(cls, raw: str | None) -> "DocumentNumber":
        return cls(normalize(raw))

    @property
    def kind(self) -> DocumentKind:
        return classify(self)

    @property
    def formatted(self) -> str:
        return format_for_display(str(self))

    @property
    def masked(self) -> str:
        """Form used in logs: only the two check digits are kept."""
        if len(self) <= 2:
            return "*" * len(self)
        return "*" * (len(self) - 2) + self[-2:]
