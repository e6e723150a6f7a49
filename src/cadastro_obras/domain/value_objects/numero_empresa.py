class NumeroEmpresa(str):
    """Value Object para o número da empresa (5 dígitos)."""
    def __new__(cls, value: str) -> "NumeroEmpresa":
        if not (value.isascii() and value.isdigit() and len(value) == 5):
            raise ValueError("O número deve ter 5 dígitos.")
        return str.__new__(cls, value)
