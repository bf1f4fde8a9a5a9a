from __future__ import annotations

from typing import Optional

from dwolla_hal.core.client import DwollaClient, idempotency_headers
from dwolla_hal.models.funding_source import FundingSource, FundingSourceRequest

from ._paths import resource_path


async def retrieve_funding_source(
    client: DwollaClient, funding_source_id: str
) -> FundingSource:
    return await client.get(
        resource_path("funding-sources", funding_source_id), model=FundingSource
    )


async def update_funding_source(
    client: DwollaClient,
    funding_source_id: str,
    body: FundingSourceRequest,
    *,
    idempotency_key: Optional[str] = None,
) -> FundingSource:
    return await client.post(
        resource_path("funding-sources", funding_source_id),
        body,
        headers=idempotency_headers(idempotency_key),
        model=FundingSource,
    )


async def remove_funding_source(
    client: DwollaClient, funding_source_id: str
) -> FundingSource:
    """Soft-delete: the funding source is kept with ``removed`` set."""
    return await client.post(
        resource_path("funding-sources", funding_source_id),
        {"removed": True},
        model=FundingSource,
    )
