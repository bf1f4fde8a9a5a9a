from __future__ import annotations

from typing import Optional

from pydantic import Field

from dwolla_hal.core.hal import Resource


class OnDemandAuthorization(Resource):
    """Authorization text to show a user before debiting them on demand."""

    body_text: Optional[str] = Field(default=None, alias="bodyText")
    button_text: Optional[str] = Field(default=None, alias="buttonText")


__all__ = ["OnDemandAuthorization"]
