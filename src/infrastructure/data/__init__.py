from .country_table import (
    CountryTable,
    LoadState,
    ParsedDataset,
    parse_country_dataset,
)

__all__ = [
    "CountryTable",
    "LoadState",
    "ParsedDataset",
    "parse_country_dataset",
]
