from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, Optional

from pydantic import Field

from dwolla_hal.core.hal import Collection, Resource

from .common import parse_created


class EventTopic(str, Enum):
    BANK_TRANSFER_CREATED = "bank_transfer_created"
    BANK_TRANSFER_CREATION_FAILED = "bank_transfer_creation_failed"
    BANK_TRANSFER_CANCELLED = "bank_transfer_cancelled"
    BANK_TRANSFER_FAILED = "bank_transfer_failed"
    BANK_TRANSFER_COMPLETED = "bank_transfer_completed"
    TRANSFER_CREATED = "transfer_created"
    TRANSFER_CANCELLED = "transfer_cancelled"
    TRANSFER_FAILED = "transfer_failed"
    TRANSFER_COMPLETED = "transfer_completed"
    CUSTOMER_BANK_TRANSFER_CREATED = "customer_bank_transfer_created"
    CUSTOMER_BANK_TRANSFER_CREATION_FAILED = "customer_bank_transfer_creation_failed"
    CUSTOMER_BANK_TRANSFER_CANCELLED = "customer_bank_transfer_cancelled"
    CUSTOMER_BANK_TRANSFER_FAILED = "customer_bank_transfer_failed"
    CUSTOMER_BANK_TRANSFER_COMPLETED = "customer_bank_transfer_completed"
    CUSTOMER_TRANSFER_CREATED = "customer_transfer_created"
    CUSTOMER_TRANSFER_CANCELLED = "customer_transfer_cancelled"
    CUSTOMER_TRANSFER_FAILED = "customer_transfer_failed"
    CUSTOMER_TRANSFER_COMPLETED = "customer_transfer_completed"
    FUNDING_SOURCE_ADDED = "funding_source_added"
    FUNDING_SOURCE_REMOVED = "funding_source_removed"
    FUNDING_SOURCE_VERIFIED = "funding_source_verified"
    CUSTOMER_CREATED = "customer_created"
    CUSTOMER_SUSPENDED = "customer_suspended"
    CUSTOMER_ACTIVATED = "customer_activated"
    CUSTOMER_DEACTIVATED = "customer_deactivated"
    CUSTOMER_VERIFIED = "customer_verified"
    CUSTOMER_FUNDING_SOURCE_ADDED = "customer_funding_source_added"
    CUSTOMER_FUNDING_SOURCE_REMOVED = "customer_funding_source_removed"
    CUSTOMER_FUNDING_SOURCE_VERIFIED = "customer_funding_source_verified"
    CUSTOMER_FUNDING_SOURCE_UPDATED = "customer_funding_source_updated"


class Event(Resource):
    id: str
    created: Optional[str] = None
    topic: Optional[str] = None
    resource_id: Optional[str] = Field(default=None, alias="resourceId")

    @property
    def created_at(self) -> Optional[datetime]:
        return parse_created(self.created)

    async def retrieve_resource(self) -> Dict[str, Any]:
        """
        The resource the event is about, as raw JSON: its type depends on
        the topic.
        """
        link = self.require_link("resource")
        return await self.client.get(link.href)


class Events(Collection[Event]):
    embedded_relation: ClassVar[str] = "events"


__all__ = ["EventTopic", "Event", "Events"]
