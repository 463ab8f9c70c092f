"""
Contract: Storage Presigner

Gera URLs pré-assinadas cuja validade é checada pelo próprio
storage (S3/MinIO) no momento do download.
"""

from abc import ABC, abstractmethod


class IStoragePresigner(ABC):
    """
    Port: Storage Presigner

    Não verifica se o objeto existe; isso fica para o storage no fetch.
    """

    @abstractmethod
    def presign_get(self, bucket: str, key: str, expires_in: int) -> str:
        """
        Assina um GET de objeto.

        Args:
            bucket: Bucket de origem.
            key: Chave do objeto.
            expires_in: Validade em segundos.

        Returns:
            URL pré-assinada.

        Raises:
            SigningFailure: se a assinatura falhar.
        """
        ...
