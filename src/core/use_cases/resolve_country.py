"""
Use Case: Resolve Country

Endereço de rede → oracle de geolocalização → tabela de referência.

Falhas:
  - oracle falhou / timeout / status != success  → default {dial_code: "+1"}
  - código sem match na tabela                   → default {dial_code: "+1"}
  - tabela nunca carregada                       → DataUnavailable (erro)
"""

import asyncio
import logging
import time
from typing import Callable

from src.core.entities.country import DEFAULT_GEO_RESULT, GeoResult
from src.core.errors import UpstreamDegraded
from src.core.interfaces.country_lookup import ICountryLookup
from src.core.interfaces.geo_oracle import IGeoOracle, OracleAnswer

logger = logging.getLogger(__name__)


class ResolveCountryUseCase:
    """
    Use Case: resolve o país de quem chama.

    Cache opcional por endereço (cache_ttl_seconds > 0) guarda só a
    resposta conclusiva do oracle; a busca na tabela roda sempre.
    Entradas expiradas saem a cada inserção; acima de cache_max_entries
    a mais antiga é descartada.
    """

    def __init__(
        self,
        table: ICountryLookup,
        oracle: IGeoOracle,
        cache_ttl_seconds: float = 0.0,
        cache_max_entries: int = 1024,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._table = table
        self._oracle = oracle
        self._cache_ttl = cache_ttl_seconds
        self._cache_max = max(1, cache_max_entries)
        self._clock = clock
        self._cache: dict[str, tuple[OracleAnswer, float]] = {}

    async def execute(self, remote_address: str | None) -> GeoResult:
        """
        1. Garante a tabela carregada (load síncrono se necessário)
        2. Consulta o oracle
        3. Busca o código na tabela
        """
        if not self._table.is_ready:
            await asyncio.to_thread(self._table.ensure_loaded)

        answer = await self._ask_oracle(remote_address or "")
        if not answer.conclusive:
            return DEFAULT_GEO_RESULT

        record = self._table.get(answer.country_code)
        if record is None:
            logger.info(f"No country record for code '{answer.country_code}', using default")
            return DEFAULT_GEO_RESULT
        return GeoResult(record=record)

    async def _ask_oracle(self, address: str) -> OracleAnswer:
        cached = self._cached(address)
        if cached is not None:
            return cached

        try:
            answer = await self._oracle.lookup(address)
        except UpstreamDegraded as e:
            logger.warning(f"Geo oracle degraded, using default: {e}")
            return OracleAnswer(status="fail")

        if self._cache_ttl > 0 and answer.conclusive:
            self._remember(address, answer)
        return answer

    def _remember(self, address: str, answer: OracleAnswer) -> None:
        now = self._clock()
        for key in [k for k, (_, expires) in self._cache.items() if expires <= now]:
            del self._cache[key]
        self._cache.pop(address, None)
        # Oldest insertion first
        while len(self._cache) >= self._cache_max:
            del self._cache[next(iter(self._cache))]
        self._cache[address] = (answer, now + self._cache_ttl)

    def _cached(self, address: str) -> OracleAnswer | None:
        if self._cache_ttl <= 0:
            return None
        entry = self._cache.get(address)
        if entry is None:
            return None
        answer, expires = entry
        if expires <= self._clock():
            self._cache.pop(address, None)
            return None
        return answer
