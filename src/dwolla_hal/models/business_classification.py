from __future__ import annotations

from typing import ClassVar, Dict, List

from pydantic import BaseModel, Field

from dwolla_hal.core.hal import Collection, Resource

from .common import WIRE_CONFIG


class IndustryClassification(BaseModel):
    id: str
    name: str = ""

    model_config = WIRE_CONFIG


class BusinessClassification(Resource):
    id: str
    name: str = ""
    embedded: Dict[str, List[IndustryClassification]] = Field(
        default_factory=dict, alias="_embedded"
    )

    @property
    def industry_classifications(self) -> List[IndustryClassification]:
        return self.embedded.get("industry-classifications", [])


class BusinessClassifications(Collection[BusinessClassification]):
    embedded_relation: ClassVar[str] = "business-classifications"


__all__ = [
    "IndustryClassification",
    "BusinessClassification",
    "BusinessClassifications",
]
