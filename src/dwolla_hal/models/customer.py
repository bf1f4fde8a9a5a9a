from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, BinaryIO, ClassVar, Dict, Optional, Union

from pydantic import BaseModel, Field

from dwolla_hal.core.client import idempotency_headers
from dwolla_hal.core.hal import Collection, Resource

from .beneficial_owner import (
    BeneficialOwner,
    BeneficialOwnerRequest,
    BeneficialOwners,
    BeneficialOwnership,
    CertificationStatus,
)
from .common import WIRE_CONFIG, Address, Passport, parse_created
from .document import Document, Documents
from .funding_source import (
    FundingSource,
    FundingSourceRequest,
    FundingSources,
    FundingSourceToken,
)
from .kba import KBA
from .mass_payment import MassPayments
from .transfer import Transfers


class CustomerStatus(str, Enum):
    DEACTIVATED = "deactivated"
    DOCUMENT = "document"
    REACTIVATED = "reactivated"
    RETRY = "retry"
    SUSPENDED = "suspended"
    UNVERIFIED = "unverified"
    VERIFIED = "verified"


class CustomerType(str, Enum):
    BUSINESS = "business"
    PERSONAL = "personal"
    RECEIVE_ONLY = "receive-only"
    UNVERIFIED = "unverified"


class Controller(BaseModel):
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    title: Optional[str] = None
    date_of_birth: Optional[str] = Field(default=None, alias="dateOfBirth")
    ssn: Optional[str] = None
    address: Optional[Address] = None
    passport: Optional[Passport] = None

    model_config = WIRE_CONFIG


class CustomerRequest(BaseModel):
    """
    Customer create/update body. Kept apart from ``Customer`` because the
    API accepts fields it never returns (ssn, ipAddress, ...).
    """

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    ip_address: Optional[str] = Field(default=None, alias="ipAddress")
    correlation_id: Optional[str] = Field(default=None, alias="correlationId")
    type: Optional[str] = None
    status: Optional[str] = None
    date_of_birth: Optional[str] = Field(default=None, alias="dateOfBirth")
    ssn: Optional[str] = None
    phone: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = Field(default=None, alias="postalCode")
    business_classification: Optional[str] = Field(
        default=None, alias="businessClassification"
    )
    business_type: Optional[str] = Field(default=None, alias="businessType")
    business_name: Optional[str] = Field(default=None, alias="businessName")
    doing_business_as: Optional[str] = Field(default=None, alias="doingBusinessAs")
    ein: Optional[str] = None
    website: Optional[str] = None
    controller: Optional[Controller] = None

    model_config = WIRE_CONFIG


class IAVToken(Resource):
    token: str = ""


class Customer(Resource):
    id: str
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    created: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = Field(default=None, alias="postalCode")
    phone: Optional[str] = None
    business_name: Optional[str] = Field(default=None, alias="businessName")
    business_type: Optional[str] = Field(default=None, alias="businessType")
    correlation_id: Optional[str] = Field(default=None, alias="correlationId")
    controller: Optional[Controller] = None

    @property
    def created_at(self) -> Optional[datetime]:
        return parse_created(self.created)

    @property
    def display_name(self) -> str:
        if self.business_name:
            return self.business_name
        return " ".join(p for p in (self.first_name, self.last_name) if p)

    # --- Capabilities (link presence) ---

    @property
    def can_send(self) -> bool:
        return self.has_link("send")

    @property
    def can_receive(self) -> bool:
        return self.has_link("receive")

    @property
    def needs_retry_verification(self) -> bool:
        return self.has_link("retry-verification")

    @property
    def needs_beneficial_owners(self) -> bool:
        return self.has_link("verify-beneficial-owners")

    @property
    def needs_business_document(self) -> bool:
        return self.has_link("verify-business-with-document")

    @property
    def needs_controller_document(self) -> bool:
        return self.has_link("verify-with-document")

    @property
    def needs_controller_and_business_document(self) -> bool:
        return self.has_link("verify-controller-and-business-with-document")

    # --- Lifecycle ---

    async def update(
        self, body: CustomerRequest, idempotency_key: Optional[str] = None
    ) -> "Customer":
        link = self.require_link("self")
        return await self.client.post(
            link.href,
            body,
            headers=idempotency_headers(idempotency_key),
            model=Customer,
        )

    async def _change_status(self, relation: str, status: CustomerStatus) -> "Customer":
        link = self.require_link(relation)
        return await self.client.post(
            link.href, CustomerRequest(status=status.value), model=Customer
        )

    async def deactivate(self) -> "Customer":
        return await self._change_status("deactivate", CustomerStatus.DEACTIVATED)

    async def reactivate(self) -> "Customer":
        return await self._change_status("reactivate", CustomerStatus.REACTIVATED)

    async def suspend(self) -> "Customer":
        return await self._change_status("suspend", CustomerStatus.SUSPENDED)

    # --- Beneficial ownership ---

    async def certify_beneficial_ownership(self) -> None:
        link = self.require_link("certify-beneficial-ownership")
        await self.client.post(
            link.href, {"status": CertificationStatus.CERTIFIED.value}
        )

    async def retrieve_beneficial_ownership(self) -> BeneficialOwnership:
        self.require_link("beneficial-owners")
        link = self.require_link("self")
        return await self.client.get(
            f"{link.href}/beneficial-ownership", model=BeneficialOwnership
        )

    async def create_beneficial_owner(
        self, body: BeneficialOwnerRequest
    ) -> BeneficialOwner:
        link = self.require_link("beneficial-owners")
        return await self.client.post(link.href, body, model=BeneficialOwner)

    async def list_beneficial_owners(self) -> BeneficialOwners:
        return await self._follow("beneficial-owners", BeneficialOwners)

    # --- Funding sources ---

    async def create_funding_source(
        self, body: FundingSourceRequest, idempotency_key: Optional[str] = None
    ) -> FundingSource:
        link = self.require_link("funding-sources")
        return await self.client.post(
            link.href,
            body,
            headers=idempotency_headers(idempotency_key),
            model=FundingSource,
        )

    async def list_funding_sources(
        self, removed: Optional[bool] = None
    ) -> FundingSources:
        params = None
        if removed is not None:
            params = {"removed": "true" if removed else "false"}
        return await self._follow("funding-sources", FundingSources, params=params)

    async def create_funding_source_token(self) -> FundingSourceToken:
        link = self.require_link("self")
        return await self.client.post(
            f"{link.href}/funding-sources-token", model=FundingSourceToken
        )

    async def retrieve_iav_token(self) -> IAVToken:
        link = self.require_link("self")
        return await self.client.post(f"{link.href}/iav-token", model=IAVToken)

    # --- Verification ---

    async def initiate_kba(self) -> KBA:
        link = self.require_link("self")
        return await self.client.post(f"{link.href}/kba", model=KBA)

    async def create_document(
        self,
        *,
        document_type: str,
        file: Union[BinaryIO, bytes],
        file_name: str,
        content_type: Optional[str] = None,
    ) -> Document:
        link = self.require_link("self")
        return await self.client.upload(
            f"{link.href}/documents",
            document_type=document_type,
            file=file,
            file_name=file_name,
            content_type=content_type,
            model=Document,
        )

    async def list_documents(self) -> Documents:
        link = self.require_link("self")
        return await self.client.get(f"{link.href}/documents", model=Documents)

    # --- Payments ---

    async def list_transfers(self, params: Optional[Dict[str, Any]] = None) -> Transfers:
        return await self._follow("transfers", Transfers, params=params)

    async def list_mass_payments(
        self, params: Optional[Dict[str, Any]] = None
    ) -> MassPayments:
        return await self._follow("mass-payments", MassPayments, params=params)


class Customers(Collection[Customer]):
    embedded_relation: ClassVar[str] = "customers"


__all__ = [
    "CustomerStatus",
    "CustomerType",
    "Controller",
    "CustomerRequest",
    "IAVToken",
    "Customer",
    "Customers",
]
