from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from pydantic import Field

from dwolla_hal.core.hal import Collection, Resource

from .common import parse_created


class DocumentType(str, Enum):
    PASSPORT = "passport"
    LICENSE = "license"
    ID_CARD = "idCard"
    OTHER = "other"


class DocumentStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"


class Document(Resource):
    id: str
    status: Optional[str] = None
    type: Optional[str] = None
    created: Optional[str] = None
    failure_reason: Optional[str] = Field(default=None, alias="failureReason")
    all_failure_reasons: List[Dict[str, Any]] = Field(
        default_factory=list, alias="allFailureReasons"
    )

    @property
    def created_at(self) -> Optional[datetime]:
        return parse_created(self.created)


class Documents(Collection[Document]):
    embedded_relation: ClassVar[str] = "documents"


__all__ = ["DocumentType", "DocumentStatus", "Document", "Documents"]
