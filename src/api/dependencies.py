"""
Service container.

Builds every use case with its concrete adapters from Settings, once,
at startup. The container lives on `app.state.container`; routes read it
from the request instead of module-level singletons.
"""

import logging
from dataclasses import dataclass

from fastapi import Request

from src.config.settings import Settings
from src.core.errors import ConfigurationError, DataUnavailable
from src.core.interfaces.dataset_source import IDatasetSource
from src.core.use_cases.issue_grant import IssuePresignedUrlUseCase, IssueSignedUrlUseCase
from src.core.use_cases.resolve_country import ResolveCountryUseCase
from src.infrastructure.data import CountryTable
from src.infrastructure.geo.ip_api_oracle import IpApiGeoOracle
from src.infrastructure.signing.cloudfront_signer import CloudFrontEdgeSigner, load_signing_credential
from src.infrastructure.storage.s3_storage import (
    LocalFileDatasetSource,
    S3DatasetSource,
    S3StoragePresigner,
    make_s3_client,
)

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """Process-lifetime owner of the use cases and the two caches."""
    settings: Settings
    languages_issuer: IssueSignedUrlUseCase | IssuePresignedUrlUseCase
    countries_issuer: IssueSignedUrlUseCase
    country_table: CountryTable
    resolver: ResolveCountryUseCase

    def warm_up(self) -> None:
        """Load the country table before serving traffic. Failure is not fatal."""
        try:
            self.country_table.ensure_loaded()
        except DataUnavailable:
            logger.warning("Country table warm-up failed; /country will answer 503 until a load succeeds")


def _dataset_source(settings: Settings) -> IDatasetSource:
    if settings.countries_dataset_path:
        return LocalFileDatasetSource(settings.countries_dataset_path)
    client = make_s3_client(settings.region, settings.s3_endpoint_url)
    return S3DatasetSource(client, settings.countries_dataset_bucket, settings.countries_dataset_key)


def build_container(settings: Settings) -> Container:
    """
    Validate settings and wire the adapters.

    Raises:
        ConfigurationError: required values missing or the key is unusable.
    """
    missing = settings.missing_required()
    if missing:
        raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")

    credential = load_signing_credential(
        key_pair_id=settings.cloudfront_key_pair_id,
        private_key_content=settings.cloudfront_private_key_content,
        private_key_path=settings.cloudfront_private_key_path,
    )
    signer = CloudFrontEdgeSigner(credential)
    ttl = settings.grant_ttl_seconds

    if settings.languages_grant_strategy == "s3":
        presigner = S3StoragePresigner(make_s3_client(settings.region, settings.s3_endpoint_url))
        languages_issuer = IssuePresignedUrlUseCase(settings.languages_bucket, presigner, ttl_seconds=ttl)
    else:
        languages_issuer = IssueSignedUrlUseCase(
            settings.cloudfront_languages_domain, signer, ttl_seconds=ttl
        )

    countries_issuer = IssueSignedUrlUseCase(settings.cloudfront_countries_domain, signer, ttl_seconds=ttl)

    table = CountryTable(_dataset_source(settings), retry_after_seconds=settings.dataset_retry_seconds)
    resolver = ResolveCountryUseCase(
        table=table,
        oracle=IpApiGeoOracle(settings.geo_oracle_url, timeout=settings.geo_oracle_timeout_seconds),
        cache_ttl_seconds=settings.geo_cache_ttl_seconds,
        cache_max_entries=settings.geo_cache_max_entries,
    )

    logger.info(
        f"Container ready (languages={settings.languages_grant_strategy}, ttl={ttl}s, "
        f"key_pair_id={credential.key_pair_id})"
    )
    return Container(
        settings=settings,
        languages_issuer=languages_issuer,
        countries_issuer=countries_issuer,
        country_table=table,
        resolver=resolver,
    )


def get_container(request: Request) -> Container:
    return request.app.state.container
