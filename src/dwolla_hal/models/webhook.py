from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import Field

from dwolla_hal.core.hal import Collection, Resource


class Webhook(Resource):
    id: str
    topic: Optional[str] = None
    account_id: Optional[str] = Field(default=None, alias="accountId")
    event_id: Optional[str] = Field(default=None, alias="eventId")
    subscription_id: Optional[str] = Field(default=None, alias="subscriptionId")
    attempts: List[Dict[str, Any]] = Field(default_factory=list)

    async def retry(self) -> None:
        link = self.require_link("retries")
        await self.client.post(link.href)


class Webhooks(Collection[Webhook]):
    embedded_relation: ClassVar[str] = "webhooks"


class WebhookSubscription(Resource):
    id: str
    url: Optional[str] = None
    paused: bool = False
    created: Optional[str] = None

    async def update(self, paused: bool) -> "WebhookSubscription":
        link = self.require_link("self")
        return await self.client.post(
            link.href, {"paused": paused}, model=WebhookSubscription
        )

    async def remove(self) -> None:
        link = self.require_link("self")
        await self.client.delete(link.href)

    async def list_webhooks(self, params: Optional[Dict[str, Any]] = None) -> Webhooks:
        return await self._follow("webhooks", Webhooks, params=params)


class WebhookSubscriptions(Collection[WebhookSubscription]):
    embedded_relation: ClassVar[str] = "webhook-subscriptions"


__all__ = [
    "Webhook",
    "Webhooks",
    "WebhookSubscription",
    "WebhookSubscriptions",
]
