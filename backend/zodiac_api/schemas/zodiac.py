"""Zodiac Schemas - Pydantic models for the API boundary.

Invariants:
    - Wire format is camelCase (dateOfBirth, zodiacSign); Python side is snake_case
    - CalculateRequest accepts ANY JSON value per field: type and content rules
      live in core/validate_input so every violation is reported together

Design Decisions:
    - Aliases over renamed attributes: populate_by_name lets tests and services
      build models with either spelling
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CalculateRequest(_CamelModel):
    """POST /api/calculate body."""
    name: Any = None
    date_of_birth: Any = Field(None, alias="dateOfBirth")


class SignResultOut(_CamelModel):
    name: str
    date_of_birth: str = Field(alias="dateOfBirth")
    zodiac_sign: str = Field(alias="zodiacSign")


class CalculateResponse(BaseModel):
    success: bool = True
    result: SignResultOut


class EntryOut(_CamelModel):
    id: str
    name: str
    date_of_birth: str = Field(alias="dateOfBirth")
    zodiac_sign: str = Field(alias="zodiacSign")
    timestamp: str


class EntriesResponse(BaseModel):
    success: bool = True
    entries: list[EntryOut]


class MonthDay(BaseModel):
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)


class SignProfileOut(BaseModel):
    sign: str
    symbol: str
    description: str
    element: str
    start: MonthDay
    end: MonthDay


class SignsResponse(BaseModel):
    success: bool = True
    signs: list[SignProfileOut]


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
    details: list[str] | None = None
