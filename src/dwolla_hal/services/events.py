from __future__ import annotations

from typing import Optional

from dwolla_hal.core.client import DwollaClient
from dwolla_hal.models.event import Event, Events

from ._paths import page_params, resource_path


async def list_events(
    client: DwollaClient,
    *,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> Events:
    params = page_params(limit=limit, offset=offset)
    return await client.get("events", params=params or None, model=Events)


async def retrieve_event(client: DwollaClient, event_id: str) -> Event:
    return await client.get(resource_path("events", event_id), model=Event)
