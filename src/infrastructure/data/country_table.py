"""
Country reference table.

Parses the country-code dataset (a JSON list of
`{code, name, dial_code, flag}` entries) and keeps it in memory,
keyed by upper-cased ISO code, for the lifetime of the process.

Lifecycle:
    UNLOADED → LOADING → READY
                       ↘ FAILED (explicit empty table)

READY never goes back to UNLOADED. A FAILED table fails fast with
DataUnavailable until `retry_after_seconds` have passed, then the next
`ensure_loaded()` tries again. `reload()` forces a fresh load; a failed
reload keeps the previously loaded data.

Concurrent loads are tolerated. Fetch and parse run unlocked; installing
the result is a locked compare-and-set, and a failure never replaces a
table that is already READY.
"""
import json
import logging
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from src.core.entities.country import CountryRecord
from src.core.errors import DataUnavailable
from src.core.interfaces.country_lookup import ICountryLookup
from src.core.interfaces.dataset_source import IDatasetSource

logger = logging.getLogger(__name__)


class LoadState(str, Enum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass
class ParsedDataset:
    """Result of parsing a raw dataset payload."""
    records: Dict[str, CountryRecord] = field(default_factory=dict)
    skipped: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)


def parse_country_dataset(payload: bytes) -> ParsedDataset:
    """
    Parse the raw dataset bytes.

    Rows without a `code` or `dial_code` are skipped. Codes are unique:
    the first row for a code wins, later duplicates are skipped.

    Raises:
        ValueError: payload is not a JSON list.
    """
    data = json.loads(payload)
    if not isinstance(data, list):
        raise ValueError(f"Country dataset must be a JSON list, got {type(data).__name__}")

    parsed = ParsedDataset()
    for i, row in enumerate(data):
        if not isinstance(row, dict) or not row.get("code") or not row.get("dial_code"):
            parsed.skipped.append(f"row {i}: missing code or dial_code")
            continue
        record = CountryRecord.from_dict(row)
        if record.code in parsed.records:
            parsed.skipped.append(f"row {i}: duplicate code {record.code}")
            continue
        parsed.records[record.code] = record
    return parsed


class CountryTable(ICountryLookup):
    """Process-lifetime cache of the country dataset."""

    def __init__(
        self,
        source: IDatasetSource,
        retry_after_seconds: float = 30.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._source = source
        self._retry_after = retry_after_seconds
        self._clock = clock
        self._records: Optional[Dict[str, CountryRecord]] = None
        self._state = LoadState.UNLOADED
        self._failed_at: Optional[float] = None
        self._lock = threading.Lock()

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state == LoadState.READY

    def __len__(self) -> int:
        return len(self._records or {})

    def ensure_loaded(self) -> None:
        """
        Make sure the table is READY, loading it synchronously if needed.

        Raises:
            DataUnavailable: the load failed (now or within the retry window).
        """
        if self._state == LoadState.READY:
            return
        if self._state == LoadState.FAILED and not self._retry_due():
            raise DataUnavailable("Country reference data could not be loaded.")
        if not self._load() and self._state != LoadState.READY:
            # A concurrent load may have succeeded while this one failed
            raise DataUnavailable("Country reference data could not be loaded.")

    def reload(self) -> bool:
        """Force a fresh load. Returns True if new data was installed."""
        return self._load()

    def get(self, code: str) -> Optional[CountryRecord]:
        """
        Look up a record by ISO code (case-insensitive).

        Raises:
            DataUnavailable: table is not READY.
        """
        if self._state != LoadState.READY or self._records is None:
            raise DataUnavailable("Country reference data is not loaded.")
        return self._records.get(code.strip().upper())

    def _retry_due(self) -> bool:
        if self._failed_at is None:
            return True
        return self._clock() - self._failed_at >= self._retry_after

    def _load(self) -> bool:
        with self._lock:
            if self._state != LoadState.READY:
                self._state = LoadState.LOADING

        try:
            parsed = parse_country_dataset(self._source.fetch())
        except Exception as e:
            logger.error(f"Failed to load country dataset from {self._source.describe()}: {e!r}")
            with self._lock:
                # Never overwrite a table that reached READY in the meantime
                if self._state != LoadState.READY:
                    self._records = {}
                    self._state = LoadState.FAILED
                    self._failed_at = self._clock()
            return False

        if parsed.skipped:
            logger.warning(f"Skipped {len(parsed.skipped)} country rows: {parsed.skipped[:5]}")
        with self._lock:
            self._records = parsed.records
            self._state = LoadState.READY
            self._failed_at = None
        logger.info(f"Loaded {len(parsed)} countries from {self._source.describe()}")
        return True
