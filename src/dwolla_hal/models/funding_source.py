from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, Field

from dwolla_hal.core.client import idempotency_headers
from dwolla_hal.core.hal import Collection, Resource

from .common import WIRE_CONFIG, Amount, parse_created

if TYPE_CHECKING:
    from .customer import Customer


class FundingSourceStatus(str, Enum):
    UNVERIFIED = "unverified"
    VERIFIED = "verified"


class FundingSourceType(str, Enum):
    BANK = "bank"
    BALANCE = "balance"


class BankAccountType(str, Enum):
    CHECKING = "checking"
    SAVINGS = "savings"


class MicroDepositStatus(str, Enum):
    PENDING = "pending"
    PROCESSED = "processed"
    FAILED = "failed"


class FundingSourceRequest(BaseModel):
    routing_number: Optional[str] = Field(default=None, alias="routingNumber")
    account_number: Optional[str] = Field(default=None, alias="accountNumber")
    bank_account_type: Optional[str] = Field(default=None, alias="bankAccountType")
    # Arbitrary nickname, 50 characters or less.
    name: Optional[str] = None
    channels: Optional[List[str]] = None
    removed: Optional[bool] = None
    plaid_token: Optional[str] = Field(default=None, alias="plaidToken")

    model_config = WIRE_CONFIG


class MicroDepositRequest(BaseModel):
    amount1: Amount
    amount2: Amount

    model_config = WIRE_CONFIG


class MicroDeposit(Resource):
    created: Optional[str] = None
    status: Optional[str] = None
    failure: Optional[Dict[str, Any]] = None

    @property
    def created_at(self) -> Optional[datetime]:
        return parse_created(self.created)


class FundingSourceBalance(Resource):
    balance: Optional[Amount] = None
    total: Optional[Amount] = None
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")


class FundingSourceToken(Resource):
    token: str = ""


class FundingSource(Resource):
    id: str
    status: Optional[str] = None
    type: Optional[str] = None
    bank_account_type: Optional[str] = Field(default=None, alias="bankAccountType")
    name: Optional[str] = None
    created: Optional[str] = None
    balance: Optional[Amount] = None
    removed: bool = False
    channels: List[str] = Field(default_factory=list)
    bank_name: Optional[str] = Field(default=None, alias="bankName")
    fingerprint: Optional[str] = None

    @property
    def created_at(self) -> Optional[datetime]:
        return parse_created(self.created)

    # --- Capabilities (link presence) ---

    @property
    def can_transfer_send(self) -> bool:
        return self.has_link("transfer-send")

    @property
    def can_transfer_receive(self) -> bool:
        return self.has_link("transfer-receive")

    @property
    def can_transfer_from_balance(self) -> bool:
        return self.has_link("transfer-from-balance")

    @property
    def can_transfer_to_balance(self) -> bool:
        return self.has_link("transfer-to-balance")

    @property
    def failed_verification_micro_deposits(self) -> bool:
        return self.has_link("failed-verification-micro-deposits")

    # --- Operations ---

    async def retrieve_customer(self) -> "Customer":
        from .customer import Customer

        return await self._follow("customer", Customer)

    async def retrieve_balance(self) -> FundingSourceBalance:
        return await self._follow("balance", FundingSourceBalance)

    async def initiate_micro_deposits(
        self, idempotency_key: Optional[str] = None
    ) -> MicroDeposit:
        link = self.require_link("initiate-micro-deposits")
        return await self.client.post(
            link.href,
            headers=idempotency_headers(idempotency_key),
            model=MicroDeposit,
        )

    async def retrieve_micro_deposits(self) -> MicroDeposit:
        return await self._follow("verify-micro-deposits", MicroDeposit)

    async def verify_micro_deposits(
        self, body: MicroDepositRequest, idempotency_key: Optional[str] = None
    ) -> None:
        """
        Confirm the two micro-deposit amounts. Raises
        DwollaTryAgainLaterError while the deposits have not settled yet.
        """
        link = self.require_link("verify-micro-deposits")
        await self.client.post(
            link.href, body, headers=idempotency_headers(idempotency_key)
        )

    async def update(
        self, body: FundingSourceRequest, idempotency_key: Optional[str] = None
    ) -> "FundingSource":
        link = self.require_link("self")
        return await self.client.post(
            link.href,
            body,
            headers=idempotency_headers(idempotency_key),
            model=FundingSource,
        )

    async def remove(self) -> "FundingSource":
        link = self.require_link("remove")
        return await self.client.post(
            link.href, FundingSourceRequest(removed=True), model=FundingSource
        )


class FundingSources(Collection[FundingSource]):
    embedded_relation: ClassVar[str] = "funding-sources"


__all__ = [
    "FundingSourceStatus",
    "FundingSourceType",
    "BankAccountType",
    "MicroDepositStatus",
    "FundingSourceRequest",
    "MicroDepositRequest",
    "MicroDeposit",
    "FundingSourceBalance",
    "FundingSourceToken",
    "FundingSource",
    "FundingSources",
]
