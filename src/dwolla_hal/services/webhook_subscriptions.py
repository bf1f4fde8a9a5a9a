from __future__ import annotations

from typing import Optional

from dwolla_hal.core.client import DwollaClient, idempotency_headers
from dwolla_hal.models.webhook import WebhookSubscription, WebhookSubscriptions

from ._paths import resource_path


async def create_webhook_subscription(
    client: DwollaClient,
    url: str,
    secret: str,
    *,
    idempotency_key: Optional[str] = None,
) -> WebhookSubscription:
    """Subscribe ``url`` to webhooks signed with ``secret``."""
    if not url:
        raise ValueError("url must be provided.")
    if not secret:
        raise ValueError("secret must be provided.")
    return await client.post(
        "webhook-subscriptions",
        {"url": url, "secret": secret},
        headers=idempotency_headers(idempotency_key),
        model=WebhookSubscription,
    )


async def list_webhook_subscriptions(client: DwollaClient) -> WebhookSubscriptions:
    return await client.get("webhook-subscriptions", model=WebhookSubscriptions)


async def retrieve_webhook_subscription(
    client: DwollaClient, subscription_id: str
) -> WebhookSubscription:
    return await client.get(
        resource_path("webhook-subscriptions", subscription_id),
        model=WebhookSubscription,
    )


async def remove_webhook_subscription(
    client: DwollaClient, subscription_id: str
) -> None:
    await client.delete(resource_path("webhook-subscriptions", subscription_id))
