import json
from datetime import datetime, timezone

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from src.config.settings import Settings
from src.core.entities.grant import SigningCredential
from src.core.errors import UpstreamDegraded
from src.core.interfaces.dataset_source import IDatasetSource
from src.core.interfaces.geo_oracle import IGeoOracle, OracleAnswer
from src.infrastructure.signing.cloudfront_signer import CloudFrontEdgeSigner

FRANCE = {"code": "FR", "dial_code": "+33", "name": "France", "flag": "🇫🇷"}
COUNTRIES = [
    FRANCE,
    {"code": "BR", "dial_code": "+55", "name": "Brazil", "flag": "🇧🇷"},
    {"code": "IE", "dial_code": "+353", "name": "Ireland", "flag": "🇮🇪"},
]


class FixedClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now


class FakeOracle(IGeoOracle):
    def __init__(self, answer: OracleAnswer | None = None, error: Exception | None = None):
        self.answer = answer or OracleAnswer(status="fail")
        self.error = error
        self.calls: list[str] = []

    async def lookup(self, address: str) -> OracleAnswer:
        self.calls.append(address)
        if self.error is not None:
            raise self.error
        return self.answer


class FakeDatasetSource(IDatasetSource):
    def __init__(self, payload: bytes | None = None, fail: bool = False):
        self.payload = payload if payload is not None else json.dumps(COUNTRIES).encode()
        self.fail = fail
        self.fetches = 0

    def fetch(self) -> bytes:
        self.fetches += 1
        if self.fail:
            raise UpstreamDegraded("dataset unreachable")
        return self.payload


@pytest.fixture(scope="session")
def rsa_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_pem(rsa_key) -> bytes:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )


@pytest.fixture()
def credential(rsa_pem) -> SigningCredential:
    return SigningCredential(key_pair_id="K2JCJMDEHXQW5F", private_key=rsa_pem)


@pytest.fixture()
def edge_signer(credential) -> CloudFrontEdgeSigner:
    return CloudFrontEdgeSigner(credential)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 3, 1, 12, 0, 0, 250000, tzinfo=timezone.utc))


@pytest.fixture()
def dataset_file(tmp_path):
    path = tmp_path / "countries.json"
    path.write_text(json.dumps(COUNTRIES), encoding="utf-8")
    return path


@pytest.fixture()
def settings(rsa_pem, dataset_file) -> Settings:
    return Settings(
        _env_file=None,
        cloudfront_languages_domain="https://d111111abcdef8.cloudfront.net",
        cloudfront_countries_domain="https://d222222abcdef8.cloudfront.net/",
        cloudfront_key_pair_id="K2JCJMDEHXQW5F",
        cloudfront_private_key_content=rsa_pem.decode("utf-8"),
        countries_dataset_path=str(dataset_file),
        grant_ttl_seconds=60,
    )
