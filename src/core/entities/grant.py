"""
Entity: Access Grant

Autorização temporária para buscar UM recurso, codificada como URL assinada.
Modelo puro, sem dependência de framework, AWS ou crypto.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from src.core.errors import InvalidArgument


class Strategy(str, Enum):
    CLOUDFRONT = "cloudfront"        # assinada por policy, verificada no edge
    S3_PRESIGNED = "s3"              # pré-assinada, verificada pelo storage


@dataclass(frozen=True)
class SigningCredential:
    """
    Credencial de assinatura (key-pair id + chave privada PEM).

    Carregada uma vez no startup. A chave nunca aparece no repr.
    """
    key_pair_id: str
    private_key: bytes = field(repr=False)

    def is_complete(self) -> bool:
        return bool(self.key_pair_id) and bool(self.private_key)


@dataclass(frozen=True)
class AccessGrant:
    """Grant efêmero: construído por request, nunca persistido."""
    resource_url: str
    issued_at: datetime
    expires_at: datetime
    strategy: Strategy
    resource_key: str = ""

    @property
    def ttl_seconds(self) -> int:
        return int((self.expires_at - self.issued_at).total_seconds())


def normalize_resource_key(raw: str | None) -> str:
    """
    Normaliza a chave do recurso.

    Remove as barras iniciais (`/a/b` e `a/b` são a mesma chave) para
    que a URL final nunca tenha `//` depois do domínio.

    Raises:
        InvalidArgument: chave vazia.
    """
    key = (raw or "").strip().lstrip("/")
    if not key:
        raise InvalidArgument("The resource key must not be empty.")
    return key


def build_resource_url(base_domain: str, key: str) -> str:
    """`base_domain + "/" + key`, sem barra dupla na junção."""
    return f"{base_domain.rstrip('/')}/{key}"
