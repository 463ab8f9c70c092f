"""
Application Settings.

Centraliza toda configuração via .env / variáveis de ambiente.
Lida uma vez no startup; sem hot reload.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configurações carregadas de variáveis de ambiente."""

    # --- App ---
    env: str = "development"
    debug: bool = False
    api_host: str = "0.0.0.0"
    api_port: int = 5000
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # --- Grants ---
    grant_ttl_seconds: int = Field(default=60, ge=1, le=3600)
    grant_query_param: Literal["file", "name"] = "file"
    languages_grant_strategy: Literal["cloudfront", "s3"] = "cloudfront"

    # --- CloudFront ---
    cloudfront_languages_domain: str = ""
    cloudfront_countries_domain: str = ""
    cloudfront_key_pair_id: str = ""
    cloudfront_private_key_path: str = "./cloudfront-private-key.pem"
    cloudfront_private_key_content: str = Field(default="", repr=False)

    # --- S3 ---
    region: str = ""
    languages_bucket: str = ""
    s3_endpoint_url: str = ""

    # --- Country dataset ---
    countries_dataset_bucket: str = ""
    countries_dataset_key: str = "countries.json"
    countries_dataset_path: str = ""
    dataset_retry_seconds: float = Field(default=30.0, ge=0)

    # --- Geo oracle ---
    geo_oracle_url: str = "http://ip-api.com/json"
    geo_oracle_timeout_seconds: float = Field(default=3.0, gt=0, le=30)
    geo_cache_ttl_seconds: float = Field(default=0.0, ge=0)
    geo_cache_max_entries: int = Field(default=1024, ge=1)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    def missing_required(self) -> list[str]:
        """Nomes (nunca valores) das variáveis obrigatórias ausentes."""
        missing = []
        if self.languages_grant_strategy == "cloudfront":
            if not self.cloudfront_languages_domain:
                missing.append("CLOUDFRONT_LANGUAGES_DOMAIN")
        else:
            if not self.languages_bucket:
                missing.append("LANGUAGES_BUCKET")
            if not self.region:
                missing.append("REGION")
        if not self.cloudfront_countries_domain:
            missing.append("CLOUDFRONT_COUNTRIES_DOMAIN")
        if not self.cloudfront_key_pair_id:
            missing.append("CLOUDFRONT_KEY_PAIR_ID")
        if not self.countries_dataset_path and not self.countries_dataset_bucket:
            missing.append("COUNTRIES_DATASET_BUCKET or COUNTRIES_DATASET_PATH")
        return missing


@lru_cache
def get_settings() -> Settings:
    """Singleton de settings."""
    return Settings()
