"""
Entity: Country

Registro de país do dataset de referência e o resultado da geolocalização.
"""

from dataclasses import dataclass

DEFAULT_DIAL_CODE = "+1"


@dataclass(frozen=True)
class CountryRecord:
    """Entrada do dataset, indexada pelo código ISO."""
    code: str
    name: str
    dial_code: str
    flag: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "CountryRecord":
        return cls(
            code=str(data["code"]).strip().upper(),
            name=str(data.get("name", "")),
            dial_code=str(data["dial_code"]),
            flag=str(data.get("flag", "")),
        )

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "dial_code": self.dial_code,
            "flag": self.flag,
        }


@dataclass(frozen=True)
class GeoResult:
    """Projeção de um CountryRecord, ou o default `{dial_code: "+1"}`."""
    record: CountryRecord | None = None

    @property
    def matched(self) -> bool:
        return self.record is not None

    @property
    def dial_code(self) -> str:
        return self.record.dial_code if self.record else DEFAULT_DIAL_CODE

    def to_dict(self) -> dict:
        if self.record is None:
            return {"dial_code": DEFAULT_DIAL_CODE}
        return self.record.to_dict()


DEFAULT_GEO_RESULT = GeoResult()
