"""
Contract: Geo Oracle

Serviço externo que mapeia um endereço de rede para um código de país
aproximado (ex: ip-api.com).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class OracleAnswer:
    """Resposta do oracle."""
    status: str                      # "success" | "fail"
    country_code: str | None = None  # ISO alpha-2, ex: "FR"

    @property
    def conclusive(self) -> bool:
        return self.status == "success" and bool(self.country_code)


class IGeoOracle(ABC):
    """
    Port: Geo Oracle
    """

    @abstractmethod
    async def lookup(self, address: str) -> OracleAnswer:
        """
        Resolve o país de um endereço.

        Raises:
            UpstreamDegraded: rede, timeout ou payload inválido.
        """
        ...
