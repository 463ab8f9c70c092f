"""
Use Case: Issue Grant

Transforma (chave do recurso, credencial, TTL) em uma URL de redirect
válida até um instante fixo. Duas estratégias:

  - IssueSignedUrlUseCase     → CloudFront (assinatura por policy, edge)
  - IssuePresignedUrlUseCase  → S3 (request pré-assinado, storage)

Janela de validade: [issued_at, issued_at + ttl_seconds]. Sem revogação.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

from src.core.entities.grant import (
    AccessGrant,
    Strategy,
    build_resource_url,
    normalize_resource_key,
)
from src.core.errors import ConfigurationError
from src.core.interfaces.edge_signer import IEdgeSigner
from src.core.interfaces.storage_presigner import IStoragePresigner

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class _GrantUseCase:
    """Base: TTL fixo (configuração, nunca do request) + relógio injetável."""

    strategy: Strategy

    def __init__(self, ttl_seconds: int, clock: Clock | None = None):
        if ttl_seconds <= 0:
            raise ConfigurationError("Grant TTL must be a positive number of seconds.")
        self._ttl = int(ttl_seconds)
        self._clock = clock or utc_now

    @property
    def ttl_seconds(self) -> int:
        return self._ttl

    def _window(self) -> tuple[datetime, datetime]:
        # Expiração assinada é em segundos inteiros de epoch
        issued_at = self._clock().replace(microsecond=0)
        return issued_at, issued_at + timedelta(seconds=self._ttl)


class IssueSignedUrlUseCase(_GrantUseCase):
    """
    Use Case: grant assinado por policy (CloudFront).

    Não faz chamada de rede; só lê a credencial já carregada no signer.
    """

    strategy = Strategy.CLOUDFRONT

    def __init__(
        self,
        base_domain: str,
        signer: IEdgeSigner,
        ttl_seconds: int = 60,
        clock: Clock | None = None,
    ):
        super().__init__(ttl_seconds, clock)
        if not base_domain:
            raise ConfigurationError("CloudFront base domain is not configured.")
        self._base_domain = base_domain
        self._signer = signer

    def issue(self, resource_key: str | None) -> AccessGrant:
        """
        1. Normaliza a chave
        2. Monta a URL canônica
        3. Calcula a expiração (now + ttl)
        4. Assina (url, expires_at, key_pair_id)
        """
        key = normalize_resource_key(resource_key)
        url = build_resource_url(self._base_domain, key)
        issued_at, expires_at = self._window()

        signed_url = self._signer.sign(url, expires_at)

        logger.info(f"Issued CloudFront grant for '{key}' (expires {expires_at.isoformat()})")
        return AccessGrant(
            resource_url=signed_url,
            issued_at=issued_at,
            expires_at=expires_at,
            strategy=self.strategy,
            resource_key=key,
        )


class IssuePresignedUrlUseCase(_GrantUseCase):
    """
    Use Case: grant pré-assinado pelo storage (S3).

    Sem checagem de existência do objeto: evita um round trip extra;
    o storage responde 403/404 no fetch se a chave não existir.
    """

    strategy = Strategy.S3_PRESIGNED

    def __init__(
        self,
        bucket: str,
        presigner: IStoragePresigner,
        ttl_seconds: int = 60,
        clock: Clock | None = None,
    ):
        super().__init__(ttl_seconds, clock)
        if not bucket:
            raise ConfigurationError("Storage bucket is not configured.")
        self._bucket = bucket
        self._presigner = presigner

    def issue(self, resource_key: str | None) -> AccessGrant:
        key = normalize_resource_key(resource_key)
        issued_at, expires_at = self._window()

        url = self._presigner.presign_get(self._bucket, key, self._ttl)

        logger.info(f"Issued S3 presigned grant for '{key}' (expires {expires_at.isoformat()})")
        return AccessGrant(
            resource_url=url,
            issued_at=issued_at,
            expires_at=expires_at,
            strategy=self.strategy,
            resource_key=key,
        )
