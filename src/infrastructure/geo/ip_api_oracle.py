"""
Adapter: ip-api.com Geo Oracle

Public IPs   → GET {base_url}/{ip}?fields=status,countryCode
Private/local (127.x, 10.x, 192.168.x, ::1, 'testclient', ...)
             → answered locally with status "fail", no HTTP call.

Network errors, timeouts and bad JSON raise UpstreamDegraded; the use
case turns that into the default record.
"""

import ipaddress
import logging

import httpx

from src.core.errors import UpstreamDegraded
from src.core.interfaces.geo_oracle import IGeoOracle, OracleAnswer

logger = logging.getLogger(__name__)

DEFAULT_ORACLE_URL = "http://ip-api.com/json"


def is_private_address(address: str) -> bool:
    """True for private/loopback/link-local addresses and non-IP strings."""
    if address in ("", "testclient", "localhost"):
        return True
    try:
        ip = ipaddress.ip_address(address)
    except ValueError:
        return True
    return ip.is_private or ip.is_loopback or ip.is_link_local or ip.is_reserved


class IpApiGeoOracle(IGeoOracle):
    """IGeoOracle backed by the ip-api.com JSON endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_ORACLE_URL,
        timeout: float = 3.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def lookup(self, address: str) -> OracleAnswer:
        if is_private_address(address):
            return OracleAnswer(status="fail")

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                res = await client.get(
                    f"{self._base_url}/{address}",
                    params={"fields": "status,countryCode"},
                )
                res.raise_for_status()
                data = res.json()
        except (httpx.HTTPError, ValueError) as e:
            raise UpstreamDegraded(f"Geo oracle request failed: {type(e).__name__}") from e

        if not isinstance(data, dict):
            raise UpstreamDegraded("Geo oracle returned an unexpected payload.")

        code = data.get("countryCode")
        return OracleAnswer(
            status=str(data.get("status", "fail")),
            country_code=code.upper() if isinstance(code, str) and code else None,
        )
