"""Async client for the Dwolla HAL+JSON API."""

from . import services
from .core import (
    DwollaAuthError,
    DwollaClient,
    DwollaClientError,
    DwollaHALError,
    DwollaModelValidationError,
    DwollaParseError,
    DwollaTransportError,
    DwollaTryAgainLaterError,
    DwollaValidationError,
    Environment,
    Link,
    MissingLinkError,
    Resource,
    Root,
    Token,
    UnboundResourceError,
    VERSION,
    create_client_from_env,
)
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all

__version__ = VERSION

__all__ = [
    "__version__",
    "DwollaClient",
    "Environment",
    "Token",
    "create_client_from_env",
    "services",
    "Link",
    "Resource",
    "Root",
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
    *_models_all,
]
