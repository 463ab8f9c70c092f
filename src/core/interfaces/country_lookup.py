"""
Contract: Country Lookup

Tabela em memória de países, indexada pelo código ISO.
"""

from abc import ABC, abstractmethod

from src.core.entities.country import CountryRecord


class ICountryLookup(ABC):
    """
    Port: Country Lookup

    Diferencia "sem dados" (DataUnavailable) de "sem match" (None).
    """

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        ...

    @abstractmethod
    def ensure_loaded(self) -> None:
        """Carrega sob demanda. Raises DataUnavailable se falhar."""
        ...

    @abstractmethod
    def get(self, code: str) -> CountryRecord | None:
        """Busca por código. Raises DataUnavailable se não carregada."""
        ...
