"""
Pydantic schemas: response models para a API.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    message: str


class CountryResponse(BaseModel):
    dial_code: str
    code: str | None = None
    name: str | None = None
    flag: str | None = None


class HealthResponse(BaseModel):
    status: str
    message: str
    country_table: str


class RouteInfo(BaseModel):
    method: str
    path: str
    description: str


class ApiInfoResponse(BaseModel):
    message: str
    version: str
    routes: list[RouteInfo]
