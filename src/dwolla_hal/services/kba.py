from __future__ import annotations

from dwolla_hal.core.client import DwollaClient
from dwolla_hal.models.kba import KBA

from ._paths import resource_path


async def retrieve_kba(client: DwollaClient, kba_id: str) -> KBA:
    """KBA questions for a session started with ``Customer.initiate_kba``."""
    return await client.get(resource_path("kba", kba_id), model=KBA)
