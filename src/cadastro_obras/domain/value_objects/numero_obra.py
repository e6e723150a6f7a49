class NumeroObra(str):
    """Value Object para o número da obra (4 dígitos)."""
    def __new__(cls, value: str) -> "NumeroObra":
        if not (value.isascii() and value.isdigit() and len(value) == 4):
            raise ValueError("O número da obra deve ter 4 dígitos.")
        return str.__new__(cls, value)
