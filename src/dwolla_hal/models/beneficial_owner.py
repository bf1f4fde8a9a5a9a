from __future__ import annotations

from enum import Enum
from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from dwolla_hal.core.hal import Collection, Resource

from .common import WIRE_CONFIG, Address, Passport


class BeneficialOwnerStatus(str, Enum):
    DOCUMENT = "document"
    INCOMPLETE = "incomplete"
    VERIFIED = "verified"


class CertificationStatus(str, Enum):
    UNCERTIFIED = "uncertified"
    RECERTIFY = "recertify"
    CERTIFIED = "certified"


class BeneficialOwnerRequest(BaseModel):
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    date_of_birth: Optional[str] = Field(default=None, alias="dateOfBirth")
    ssn: Optional[str] = None
    address: Optional[Address] = None
    passport: Optional[Passport] = None

    model_config = WIRE_CONFIG


class BeneficialOwner(Resource):
    id: str
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    address: Optional[Address] = None
    passport: Optional[Passport] = None
    verification_status: Optional[str] = Field(
        default=None, alias="verificationStatus"
    )
    created: Optional[str] = None

    async def update(self, body: BeneficialOwnerRequest) -> "BeneficialOwner":
        link = self.require_link("self")
        return await self.client.post(link.href, body, model=BeneficialOwner)

    async def remove(self) -> None:
        link = self.require_link("remove")
        await self.client.delete(link.href)


class BeneficialOwners(Collection[BeneficialOwner]):
    embedded_relation: ClassVar[str] = "beneficial-owners"


class BeneficialOwnership(Resource):
    status: Optional[str] = None

    @property
    def can_certify(self) -> bool:
        return self.has_link("certify")


__all__ = [
    "BeneficialOwnerStatus",
    "CertificationStatus",
    "BeneficialOwnerRequest",
    "BeneficialOwner",
    "BeneficialOwners",
    "BeneficialOwnership",
]
