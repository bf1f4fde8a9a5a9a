from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field

from dwolla_hal.core.client import idempotency_headers
from dwolla_hal.core.hal import Resource

from .funding_source import FundingSource, FundingSourceRequest, FundingSources
from .mass_payment import MassPayments
from .transfer import Transfers


class Account(Resource):
    """The master account the credentials belong to."""

    id: str
    name: Optional[str] = None
    timezone_offset: Optional[float] = Field(default=None, alias="timezoneOffset")
    type: Optional[str] = None

    async def create_funding_source(
        self, body: FundingSourceRequest, idempotency_key: Optional[str] = None
    ) -> FundingSource:
        return await self.client.post(
            "funding-sources",
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

    async def list_transfers(self, params: Optional[Dict[str, Any]] = None) -> Transfers:
        return await self._follow("transfers", Transfers, params=params)

    async def list_mass_payments(
        self, params: Optional[Dict[str, Any]] = None
    ) -> MassPayments:
        link = self.require_link("self")
        return await self.client.get(
            f"{link.href}/mass-payments", params=params, model=MassPayments
        )


__all__ = ["Account"]
