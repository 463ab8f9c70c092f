"""
Adapter: CloudFront Edge Signer

Concrete IEdgeSigner using botocore's CloudFrontSigner (canned policy)
with an RSA key parsed by `cryptography`.

The PEM is parsed once, when the signer is built at startup, so a bad
key fails the process instead of the first request.
"""

import logging
from datetime import datetime
from pathlib import Path

from botocore.signers import CloudFrontSigner
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from src.core.entities.grant import SigningCredential
from src.core.errors import ConfigurationError, SigningFailure
from src.core.interfaces.edge_signer import IEdgeSigner

logger = logging.getLogger(__name__)


def load_signing_credential(
    key_pair_id: str,
    private_key_content: str = "",
    private_key_path: str | Path | None = None,
) -> SigningCredential:
    """
    Build the SigningCredential from inline PEM content or a PEM file.

    Inline content wins over the path.

    Raises:
        ConfigurationError: key-pair id or key material missing/unreadable.
    """
    if not key_pair_id:
        raise ConfigurationError("CLOUDFRONT_KEY_PAIR_ID is not set.")

    if private_key_content:
        pem = private_key_content.encode("utf-8")
    elif private_key_path:
        try:
            pem = Path(private_key_path).read_bytes()
        except OSError as e:
            raise ConfigurationError(
                f"Could not read private key from {private_key_path}: {e.strerror}"
            ) from None
    else:
        raise ConfigurationError("No CloudFront private key configured.")

    credential = SigningCredential(key_pair_id=key_pair_id, private_key=pem)
    if not credential.is_complete():
        raise ConfigurationError("CloudFront private key is empty.")
    return credential


class CloudFrontEdgeSigner(IEdgeSigner):
    """Signs CloudFront URLs with a canned policy (RSA-SHA1, PKCS#1 v1.5)."""

    def __init__(self, credential: SigningCredential):
        if not credential.is_complete():
            raise ConfigurationError("CloudFront signing credential is incomplete.")
        self.key_pair_id = credential.key_pair_id
        self._private_key = self._parse_key(credential.private_key)
        self._signer = CloudFrontSigner(self.key_pair_id, self._rsa_sign)

    @staticmethod
    def _parse_key(pem: bytes) -> rsa.RSAPrivateKey:
        try:
            key = serialization.load_pem_private_key(pem, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm):
            # The parser message may quote the PEM; never forward it
            raise ConfigurationError("CloudFront private key is not a valid PEM RSA key.") from None
        if not isinstance(key, rsa.RSAPrivateKey):
            raise ConfigurationError("CloudFront private key must be an RSA key.")
        return key

    def _rsa_sign(self, message: bytes) -> bytes:
        # CloudFront only verifies SHA1 signatures for key pairs
        return self._private_key.sign(message, padding.PKCS1v15(), hashes.SHA1())

    def sign(self, url: str, expires_at: datetime) -> str:
        try:
            return self._signer.generate_presigned_url(url, date_less_than=expires_at)
        except Exception as e:
            logger.error(f"Error generating CloudFront signed URL: {type(e).__name__}")
            raise SigningFailure("Failed to generate CloudFront signed URL.") from e
