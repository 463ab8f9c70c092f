"""
Contract: Dataset Source

Origem do payload bruto do dataset de referência (lista de países).
"""

from abc import ABC, abstractmethod


class IDatasetSource(ABC):
    """
    Port: Dataset Source

    Implementação pode ser S3, filesystem local, etc.
    """

    @abstractmethod
    def fetch(self) -> bytes:
        """
        Lê o payload completo.

        Raises:
            UpstreamDegraded: se a leitura falhar.
        """
        ...

    def describe(self) -> str:
        """Localização legível (para logs)."""
        return self.__class__.__name__
