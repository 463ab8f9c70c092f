"""
Errors: taxonomia de falhas do serviço.

Cada erro carrega um `code` curto (legível por máquina) e o `status_code`
HTTP equivalente. A camada de API traduz para o corpo `{error, message}`.
Mensagens nunca devem conter material de chave.
"""


class GrantServiceError(Exception):
    """Base de todos os erros do serviço."""

    code: str = "internal_error"
    status_code: int = 500

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}


class ConfigurationError(GrantServiceError):
    """Configuração ausente/inválida. Fatal no startup."""

    code = "configuration_error"
    status_code = 500


class InvalidArgument(GrantServiceError):
    """Parâmetro de request ausente ou malformado (corrigível pelo cliente)."""

    code = "invalid_argument"
    status_code = 400


class SigningFailure(GrantServiceError):
    """Primitiva de assinatura falhou."""

    code = "Signed URL generation failed"
    status_code = 500


class DataUnavailable(GrantServiceError):
    """Dataset de referência nunca foi carregado com sucesso."""

    code = "Country data unavailable"
    status_code = 503


class UpstreamDegraded(GrantServiceError):
    """Chamada externa (oracle, storage) falhou de forma transitória."""

    code = "upstream_degraded"
    status_code = 502
