from __future__ import annotations

from dwolla_hal.core.client import DwollaClient
from dwolla_hal.models.webhook import Webhook

from ._paths import resource_path


async def retrieve_webhook(client: DwollaClient, webhook_id: str) -> Webhook:
    return await client.get(resource_path("webhooks", webhook_id), model=Webhook)
