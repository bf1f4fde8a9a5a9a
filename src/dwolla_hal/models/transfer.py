from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, Field

from dwolla_hal.core.hal import Collection, Link, Resource

from .common import WIRE_CONFIG, ACHDetails, Amount, Clearing, MetaData, parse_created
from .funding_source import FundingSource


class TransferStatus(str, Enum):
    CANCELLED = "cancelled"
    FAILED = "failed"
    PENDING = "pending"
    PROCESSED = "processed"
    RECLAIMED = "reclaimed"


class TransferFailureCode(str, Enum):
    """ACH return codes reported on failed transfers."""

    INSUFFICIENT_FUNDS = "R01"
    BANK_ACCOUNT_CLOSED = "R02"
    NO_ACCOUNT = "R03"
    INVALID_BANK_ACCOUNT_NUMBER_STRUCTURE = "R04"
    UNAUTHORIZED_DEBIT_TO_CONSUMER_ACCOUNT = "R05"
    RETURNED_PER_ODFI_REQUEST = "R06"
    AUTHORIZATION_REVOKED_BY_CUSTOMER = "R07"
    PAYMENT_STOPPED = "R08"
    UNCOLLECTED_FUNDS = "R09"
    CUSTOMER_ADVISES_NOT_AUTHORIZED = "R10"
    BANK_ACCOUNT_FROZEN = "R16"
    NON_TRANSACTION_ACCOUNT = "R20"
    CREDIT_ENTRY_REFUSED_BY_RECEIVER = "R23"
    CORPORATE_CUSTOMER_ADVISES_NOT_AUTHORIZED = "R29"


class TransferRequest(BaseModel):
    """
    Body for initiating a transfer. ``links`` must carry ``source`` and
    ``destination``; use ``TransferRequest.between`` to build them.
    """

    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")
    amount: Amount
    metadata: Optional[MetaData] = None
    clearing: Optional[Clearing] = None
    ach_details: Optional[ACHDetails] = Field(default=None, alias="achDetails")
    correlation_id: Optional[str] = Field(default=None, alias="correlationId")

    model_config = WIRE_CONFIG

    @classmethod
    def between(
        cls, source: Resource, destination: Resource, amount: Amount, **kwargs: Any
    ) -> "TransferRequest":
        return cls(
            links={
                "source": Link(href=source.require_link("self").href),
                "destination": Link(href=destination.require_link("self").href),
            },
            amount=amount,
            **kwargs,
        )


class TransferFailure(Resource):
    code: Optional[str] = None
    description: Optional[str] = None
    explanation: Optional[str] = None
    created: Optional[str] = None

    @property
    def created_at(self) -> Optional[datetime]:
        return parse_created(self.created)


class Transfer(Resource):
    id: str
    status: Optional[str] = None
    amount: Optional[Amount] = None
    created: Optional[str] = None
    clearing: Optional[Clearing] = None
    metadata: Optional[MetaData] = None
    correlation_id: Optional[str] = Field(default=None, alias="correlationId")
    individual_ach_id: Optional[str] = Field(default=None, alias="individualAchId")

    @property
    def created_at(self) -> Optional[datetime]:
        return parse_created(self.created)

    @property
    def can_cancel(self) -> bool:
        return self.has_link("cancel")

    async def cancel(self) -> "Transfer":
        """Cancel a pending transfer. Only possible while it has a cancel link."""
        link = self.require_link("cancel")
        return await self.client.post(
            link.href, {"status": TransferStatus.CANCELLED.value}, model=Transfer
        )

    async def retrieve_failure(self) -> TransferFailure:
        return await self._follow("failure", TransferFailure)

    async def list_fees(self) -> "TransferFees":
        return await self._follow("fees", TransferFees)

    async def retrieve_source(self) -> FundingSource:
        return await self._follow("source", FundingSource)

    async def retrieve_destination(self) -> FundingSource:
        return await self._follow("destination", FundingSource)


class TransferFees(Collection[Transfer]):
    embedded_relation: ClassVar[str] = "fees"


class Transfers(Collection[Transfer]):
    embedded_relation: ClassVar[str] = "transfers"


__all__ = [
    "TransferStatus",
    "TransferFailureCode",
    "TransferRequest",
    "TransferFailure",
    "Transfer",
    "TransferFees",
    "Transfers",
]
