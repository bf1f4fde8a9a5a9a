from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, Field

from dwolla_hal.core.errors import HALErrorDetail
from dwolla_hal.core.hal import Collection, Link, Resource

from .common import WIRE_CONFIG, ACHDetails, Amount, Clearing, MetaData, parse_created
from .funding_source import FundingSource
from .transfer import Transfer

if TYPE_CHECKING:
    from .customer import Customer


class MassPaymentStatus(str, Enum):
    DEFERRED = "deferred"
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETE = "complete"
    CANCELLED = "cancelled"


class MassPaymentItemStatus(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class MassPaymentItemRequest(BaseModel):
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
    amount: Amount
    metadata: Optional[MetaData] = None
    correlation_id: Optional[str] = Field(default=None, alias="correlationId")

    model_config = WIRE_CONFIG


class MassPaymentRequest(BaseModel):
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
    items: List[MassPaymentItemRequest] = Field(default_factory=list)
    status: Optional[str] = None
    ach_details: Optional[ACHDetails] = Field(default=None, alias="achDetails")
    clearing: Optional[Clearing] = None
    metadata: Optional[MetaData] = None
    correlation_id: Optional[str] = Field(default=None, alias="correlationId")

    model_config = WIRE_CONFIG


class MassPaymentItem(Resource):
    id: str
    status: Optional[str] = None
    amount: Optional[Amount] = None
    metadata: Optional[MetaData] = None
    correlation_id: Optional[str] = Field(default=None, alias="correlationId")
    embedded: Dict[str, List[HALErrorDetail]] = Field(
        default_factory=dict, alias="_embedded"
    )

    @property
    def errors(self) -> List[HALErrorDetail]:
        """Why the item failed, when it did."""
        return self.embedded.get("errors", [])

    async def retrieve_destination(self) -> "Customer":
        from .customer import Customer

        return await self._follow("destination", Customer)

    async def retrieve_mass_payment(self) -> "MassPayment":
        return await self._follow("mass-payment", MassPayment)

    async def retrieve_transfer(self) -> Transfer:
        return await self._follow("transfer", Transfer)


class MassPaymentItems(Collection[MassPaymentItem]):
    embedded_relation: ClassVar[str] = "items"


class MassPayment(Resource):
    id: str
    status: Optional[str] = None
    created: Optional[str] = None
    ach_details: Optional[ACHDetails] = Field(default=None, alias="achDetails")
    clearing: Optional[Clearing] = None
    metadata: Optional[MetaData] = None
    total: Optional[Amount] = None
    total_fees: Optional[Amount] = Field(default=None, alias="totalFees")
    correlation_id: Optional[str] = Field(default=None, alias="correlationId")

    @property
    def created_at(self) -> Optional[datetime]:
        return parse_created(self.created)

    async def list_items(
        self, params: Optional[Dict[str, Any]] = None
    ) -> MassPaymentItems:
        return await self._follow("items", MassPaymentItems, params=params)

    async def retrieve_item(self, item_id: str) -> MassPaymentItem:
        return await self.client.get(
            f"mass-payment-items/{item_id}", model=MassPaymentItem
        )

    async def retrieve_source(self) -> FundingSource:
        return await self._follow("source", FundingSource)


class MassPayments(Collection[MassPayment]):
    embedded_relation: ClassVar[str] = "mass-payments"


__all__ = [
    "MassPaymentStatus",
    "MassPaymentItemStatus",
    "MassPaymentItemRequest",
    "MassPaymentRequest",
    "MassPaymentItem",
    "MassPaymentItems",
    "MassPayment",
    "MassPayments",
]
