from __future__ import annotations

from typing import Optional

from dwolla_hal.core.client import DwollaClient, idempotency_headers
from dwolla_hal.models.beneficial_owner import BeneficialOwner, BeneficialOwnerRequest

from ._paths import resource_path


async def retrieve_beneficial_owner(
    client: DwollaClient, owner_id: str
) -> BeneficialOwner:
    return await client.get(
        resource_path("beneficial-owners", owner_id), model=BeneficialOwner
    )


async def update_beneficial_owner(
    client: DwollaClient,
    owner_id: str,
    body: BeneficialOwnerRequest,
    *,
    idempotency_key: Optional[str] = None,
) -> BeneficialOwner:
    return await client.post(
        resource_path("beneficial-owners", owner_id),
        body,
        headers=idempotency_headers(idempotency_key),
        model=BeneficialOwner,
    )


async def remove_beneficial_owner(client: DwollaClient, owner_id: str) -> None:
    await client.delete(resource_path("beneficial-owners", owner_id))
