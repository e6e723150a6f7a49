from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

OK = "OK"
INVALID = "INVALID"
ERROR = "ERROR"


@dataclass(frozen=True)
class CadastroResult:
    status: str  # "OK" | "INVALID" | "ERROR"
    message: str
    errors: dict[str, str] = field(default_factory=dict)
    data: Any = None

    @property
    def ok(self) -> bool:
        return self.status == OK
