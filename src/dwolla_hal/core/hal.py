"""
HAL+JSON resource model.

Every API object is a ``Resource``: a set of named links plus, once it has
been returned by ``DwollaClient``, a reference back to that client so its
methods can follow those links. What a resource can do is decided by the
server: an operation is available only while its relation is present.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .errors import MissingLinkError, UnboundResourceError

if TYPE_CHECKING:
    from .client import DwollaClient

T = TypeVar("T", bound=BaseModel)


class Link(BaseModel):
    href: str
    type: Optional[str] = None
    resource_type: Optional[str] = Field(default=None, alias="resource-type")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class Resource(BaseModel):
    links: Dict[str, Link] = Field(default_factory=dict, alias="_links")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    _client: Any = PrivateAttr(default=None)

    @property
    def client(self) -> "DwollaClient":
        if self._client is None:
            raise UnboundResourceError(
                f"{type(self).__name__} is not bound to a client"
            )
        return self._client

    def link(self, relation: str) -> Optional[Link]:
        return self.links.get(relation)

    def has_link(self, relation: str) -> bool:
        return relation in self.links

    def require_link(self, relation: str) -> Link:
        """
        Return the link for ``relation`` or raise ``MissingLinkError``.
        A missing relation means the resource does not currently allow the
        operation; nothing is sent to the API.
        """
        link = self.links.get(relation)
        if link is None:
            raise MissingLinkError(relation, type(self).__name__)
        return link

    def link_href(self, relation: str) -> Optional[str]:
        link = self.link(relation)
        return link.href if link else None

    def link_id(self, relation: str) -> Optional[str]:
        return id_from_href(self.link_href(relation))

    async def _follow(
        self,
        relation: str,
        model: type[T],
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> T:
        link = self.require_link(relation)
        return await self.client.get(link.href, params=params, model=model)


class Collection(Resource, Generic[T]):
    """A list response: ``total`` plus typed elements under ``_embedded``."""

    embedded_relation: ClassVar[str] = ""

    total: int = 0
    embedded: Dict[str, List[T]] = Field(default_factory=dict, alias="_embedded")

    @property
    def items(self) -> List[T]:
        return self.embedded.get(self.embedded_relation, [])


class Root(Resource):
    pass


def attach_client(obj: Any, client: "DwollaClient") -> Any:
    """Bind ``client`` to ``obj`` and every resource nested inside it."""
    if isinstance(obj, Resource):
        obj._client = client
    if isinstance(obj, BaseModel):
        for name in type(obj).model_fields:
            attach_client(getattr(obj, name), client)
    elif isinstance(obj, (list, tuple)):
        for item in obj:
            attach_client(item, client)
    elif isinstance(obj, dict):
        for item in obj.values():
            attach_client(item, client)
    return obj


# --- Raw payload helpers ---


def get_link(payload: Dict[str, Any], relation: str) -> Optional[Dict[str, Any]]:
    """
    Safely retrieves a link object from the _links dictionary.
    """
    if not payload or "_links" not in payload:
        return None
    return payload["_links"].get(relation)


def get_link_href(payload: Dict[str, Any], relation: str) -> Optional[str]:
    """
    Example: get_link_href(customer_json, 'funding-sources')
        -> 'https://api.dwolla.com/customers/abc/funding-sources'
    """
    link = get_link(payload, relation)
    return link.get("href") if link else None


def get_embedded(payload: Dict[str, Any], relation: str) -> Optional[List[Any]]:
    """
    Example: get_embedded(customers_json, 'customers') -> [{...}, {...}]
    """
    if not payload or "_embedded" not in payload:
        return None
    return payload["_embedded"].get(relation)


def id_from_href(href: Optional[str]) -> Optional[str]:
    """
    Extracts the trailing identifier from a resource URL. Useful for webhook
    payloads that only carry hrefs.
    Example: 'https://api.dwolla.com/transfers/15c6bcce' -> '15c6bcce'
    """
    if not href:
        return None
    segment = href.rstrip("/").rsplit("/", 1)[-1]
    if not segment or segment == href.rstrip("/"):
        return None
    return segment


__all__ = [
    "Link",
    "Resource",
    "Collection",
    "Root",
    "attach_client",
    "get_link",
    "get_link_href",
    "get_embedded",
    "id_from_href",
]
