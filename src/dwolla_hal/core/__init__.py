"""Transport, authentication and HAL primitives for dwolla-hal."""

from .auth import Token, TokenManager
from .client import (
    HAL_JSON,
    HEADER_IDEMPOTENCY,
    MAX_TOKEN_RETRIES,
    VERSION,
    ClientToken,
    DwollaClient,
    idempotency_headers,
)
from .config import (
    Environment,
    EnvironmentURLs,
    create_client_from_env,
    load_env_config,
    resolve_environment,
)
from .errors import (
    EXPIRED_ACCESS_TOKEN,
    NOT_FOUND,
    TRY_AGAIN_LATER,
    VALIDATION_ERROR,
    DwollaAuthError,
    DwollaClientError,
    DwollaHALError,
    DwollaModelValidationError,
    DwollaParseError,
    DwollaTransportError,
    DwollaTryAgainLaterError,
    DwollaValidationError,
    HALErrorBody,
    HALErrorDetail,
    MissingLinkError,
    UnboundResourceError,
)
from .hal import (
    Collection,
    Link,
    Resource,
    Root,
    attach_client,
    get_embedded,
    get_link,
    get_link_href,
    id_from_href,
)

__all__ = [
    # Client
    "DwollaClient",
    "ClientToken",
    "HAL_JSON",
    "HEADER_IDEMPOTENCY",
    "MAX_TOKEN_RETRIES",
    "VERSION",
    "idempotency_headers",
    # Auth
    "Token",
    "TokenManager",
    # Config
    "Environment",
    "EnvironmentURLs",
    "resolve_environment",
    "load_env_config",
    "create_client_from_env",
    # Exceptions
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
    # HAL
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
