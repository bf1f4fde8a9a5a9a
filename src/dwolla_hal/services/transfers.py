from __future__ import annotations

from typing import Optional

from dwolla_hal.core.client import DwollaClient, idempotency_headers
from dwolla_hal.models.transfer import Transfer, TransferFailure, TransferRequest

from ._paths import resource_path


async def create_transfer(
    client: DwollaClient,
    body: TransferRequest,
    *,
    idempotency_key: Optional[str] = None,
) -> Transfer:
    """
    Initiate a transfer. Pass an ``idempotency_key`` so a retried request
    cannot move money twice.
    """
    return await client.post(
        "transfers",
        body,
        headers=idempotency_headers(idempotency_key),
        model=Transfer,
    )


async def retrieve_transfer(client: DwollaClient, transfer_id: str) -> Transfer:
    return await client.get(resource_path("transfers", transfer_id), model=Transfer)


async def retrieve_transfer_failure(
    client: DwollaClient, transfer_id: str
) -> TransferFailure:
    path = resource_path("transfers", transfer_id)
    return await client.get(f"{path}/failure", model=TransferFailure)
