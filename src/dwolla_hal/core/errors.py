"""Error types raised by the Dwolla client."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

EXPIRED_ACCESS_TOKEN = "ExpiredAccessToken"
VALIDATION_ERROR = "ValidationError"
TRY_AGAIN_LATER = "TryAgainLater"
NOT_FOUND = "NotFound"


class HALErrorDetail(BaseModel):
    """A single embedded error, e.g. one failed field of a validation error."""

    code: Optional[str] = None
    message: Optional[str] = None
    path: Optional[str] = None
    links: Dict[str, Any] = Field(default_factory=dict, alias="_links")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("links", mode="before")
    @classmethod
    def empty_when_null(cls, value: Any) -> Any:
        return _as_map(value)


class HALErrorBody(BaseModel):
    code: Optional[str] = None
    message: Optional[str] = None
    path: Optional[str] = None
    links: Dict[str, Any] = Field(default_factory=dict, alias="_links")
    embedded: Dict[str, Any] = Field(default_factory=dict, alias="_embedded")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("links", "embedded", mode="before")
    @classmethod
    def empty_when_null(cls, value: Any) -> Any:
        return _as_map(value)

    @classmethod
    def decode(cls, payload: Dict[str, Any]) -> "HALErrorBody":
        """
        Decode an error payload without ever failing.

        A body the model rejects still keeps its code, message and path so
        the error can be classified.
        """
        try:
            return cls.model_validate(payload)
        except ValidationError:
            return cls(
                code=_as_text(payload.get("code")),
                message=_as_text(payload.get("message")),
                path=_as_text(payload.get("path")),
            )

    def embedded_errors(self) -> List[HALErrorDetail]:
        raw = self.embedded.get("errors")
        if not isinstance(raw, list):
            return []
        details = []
        for e in raw:
            if not isinstance(e, dict):
                continue
            try:
                details.append(HALErrorDetail.model_validate(e))
            except ValidationError:
                details.append(
                    HALErrorDetail(
                        code=_as_text(e.get("code")),
                        message=_as_text(e.get("message")),
                        path=_as_text(e.get("path")),
                    )
                )
        return details


def _as_map(value: Any) -> Any:
    # Servers send null for absent _links/_embedded.
    return {} if value is None else value


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    return str(value)


class DwollaClientError(Exception):
    """Base error for client failures."""


class DwollaTransportError(DwollaClientError):
    """Network, timeout or TLS failure talking to the API."""


class DwollaParseError(DwollaClientError):
    pass


class DwollaModelValidationError(DwollaClientError):
    pass


class DwollaAuthError(DwollaClientError):
    def __init__(
        self,
        error: str,
        description: str = "",
        *,
        status_code: Optional[int] = None,
    ):
        super().__init__(f"[{error}] {description}".rstrip())
        self.error = error
        self.description = description
        self.status_code = status_code


class DwollaHALError(DwollaClientError):
    """A failure reported by the API in a HAL error body."""

    def __init__(
        self,
        *,
        status_code: int,
        code: Optional[str],
        message: str,
        path: Optional[str] = None,
        links: Optional[Dict[str, Any]] = None,
        embedded: Optional[Dict[str, Any]] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        super().__init__(f"[{code}] {message}")
        self.status_code = status_code
        self.code = code
        self.message = message
        self.path = path
        self.links = links or {}
        self.embedded = embedded or {}
        self.method = method
        self.url = url

    @classmethod
    def from_body(
        cls,
        body: HALErrorBody,
        *,
        status_code: int,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> "DwollaHALError":
        return cls(
            status_code=status_code,
            code=body.code,
            message=body.message or "request failed",
            path=body.path,
            links=body.links,
            embedded=body.embedded,
            method=method,
            url=url,
        )


class DwollaValidationError(DwollaHALError):
    """Validation failure with one embedded error per offending field."""

    def __init__(self, *, errors: Optional[List[HALErrorDetail]] = None, **kwargs):
        super().__init__(**kwargs)
        self.errors: List[HALErrorDetail] = list(errors or [])

    @classmethod
    def from_body(
        cls,
        body: HALErrorBody,
        *,
        status_code: int,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ) -> "DwollaValidationError":
        return cls(
            errors=body.embedded_errors(),
            status_code=status_code,
            code=body.code,
            message=body.message or "validation failed",
            path=body.path,
            links=body.links,
            embedded=body.embedded,
            method=method,
            url=url,
        )

    def field_errors(self) -> Dict[str, List[str]]:
        """Group messages by the path of the field they refer to."""
        grouped: Dict[str, List[str]] = {}
        for err in self.errors:
            grouped.setdefault(err.path or "", []).append(err.message or "")
        return grouped


class DwollaTryAgainLaterError(DwollaHALError):
    """
    The request was accepted but the server has not finished processing it,
    e.g. micro-deposits that have not yet settled. Callers may poll.
    """


class MissingLinkError(DwollaClientError):
    """A resource does not carry the relation needed for an operation."""

    def __init__(self, relation: str, resource: Optional[str] = None):
        where = f" on {resource}" if resource else ""
        super().__init__(f"No {relation} resource link{where}")
        self.relation = relation
        self.resource = resource


class UnboundResourceError(DwollaClientError):
    """A resource was used for link following without an attached client."""


__all__ = [
    "EXPIRED_ACCESS_TOKEN",
    "VALIDATION_ERROR",
    "TRY_AGAIN_LATER",
    "NOT_FOUND",
    "HALErrorBody",
    "HALErrorDetail",
    "DwollaClientError",
    "DwollaTransportError",
    "DwollaParseError",
    "DwollaModelValidationError",
    "DwollaAuthError",
    "DwollaHALError",
    "DwollaValidationError",
    "DwollaTryAgainLaterError",
    "MissingLinkError",
    "UnboundResourceError",
]
