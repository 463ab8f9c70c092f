"""
Contract: Edge Signer

Assina uma URL de recurso para ser verificada no edge (CDN) antes de
servir o conteúdo. Implementação padrão: CloudFront canned policy.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class IEdgeSigner(ABC):
    """
    Port: Edge Signer

    A credencial (key-pair id + chave privada) pertence à implementação;
    o use case só conhece a URL e a expiração.
    """

    key_pair_id: str

    @abstractmethod
    def sign(self, url: str, expires_at: datetime) -> str:
        """
        Gera a URL assinada.

        Args:
            url: URL canônica do recurso.
            expires_at: Instante (UTC) a partir do qual o edge recusa a URL.

        Returns:
            URL com a assinatura na query string.

        Raises:
            SigningFailure: se a primitiva de assinatura falhar.
        """
        ...
