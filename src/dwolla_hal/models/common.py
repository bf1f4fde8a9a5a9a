from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Shared config for plain (link-less) wire objects.
WIRE_CONFIG = ConfigDict(populate_by_name=True, extra="ignore")

MetaData = Dict[str, Any]


class Amount(BaseModel):
    value: str = ""
    currency: str = ""

    model_config = WIRE_CONFIG

    def __str__(self) -> str:
        return f"{self.value} {self.currency}"


class Address(BaseModel):
    address1: str = ""
    address2: Optional[str] = None
    address3: Optional[str] = None
    city: str = ""
    state_province_region: str = Field(default="", alias="stateProvinceRegion")
    postal_code: Optional[str] = Field(default=None, alias="postalCode")
    country: str = ""

    model_config = WIRE_CONFIG


class Passport(BaseModel):
    number: str = ""
    country: str = ""

    model_config = WIRE_CONFIG


class Clearing(BaseModel):
    source: Optional[str] = None
    destination: Optional[str] = None

    model_config = WIRE_CONFIG


class AddendaValues(BaseModel):
    values: List[str] = Field(default_factory=list)

    model_config = WIRE_CONFIG


class Addenda(BaseModel):
    addenda: Optional[AddendaValues] = None

    model_config = WIRE_CONFIG


class ACHDetails(BaseModel):
    source: Optional[Addenda] = None
    destination: Optional[Addenda] = None

    model_config = WIRE_CONFIG


def parse_created(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp as sent by the API ('...Z' included)."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


__all__ = [
    "WIRE_CONFIG",
    "MetaData",
    "Amount",
    "Address",
    "Passport",
    "Clearing",
    "AddendaValues",
    "Addenda",
    "ACHDetails",
    "parse_created",
]
