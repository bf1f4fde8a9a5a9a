import asyncio
import logging
import mimetypes
import time
from typing import Any, BinaryIO, Callable, Dict, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from .auth import Token, TokenManager
from .config import Environment, EnvironmentURLs, load_env_config, resolve_environment
from .errors import (
    EXPIRED_ACCESS_TOKEN,
    TRY_AGAIN_LATER,
    VALIDATION_ERROR,
    DwollaHALError,
    DwollaModelValidationError,
    DwollaParseError,
    DwollaTransportError,
    DwollaTryAgainLaterError,
    DwollaValidationError,
    HALErrorBody,
)
from .hal import Resource, Root, attach_client
from .observability import log_event

T = TypeVar("T", bound=BaseModel)

VERSION = "0.1.0"
USER_AGENT = f"dwolla-hal-python/{VERSION}"
HAL_JSON = "application/vnd.dwolla.v1.hal+json"
HEADER_IDEMPOTENCY = "Idempotency-Key"

# A call that fails with an expired token is re-authenticated and retried
# at most this many times.
MAX_TOKEN_RETRIES = 1

Headers = Optional[Mapping[str, str]]
Params = Optional[Mapping[str, Any]]


class ClientToken(BaseModel):
    token: str = ""


def idempotency_headers(key: Optional[str]) -> Optional[Dict[str, str]]:
    return {HEADER_IDEMPOTENCY: key} if key else None


class DwollaClient:
    """
    Async client for the Dwolla HAL+JSON API.
    - Owns the bearer token (refreshed on demand) and the cached API root
    - Four verbs: get, post, upload, delete
    - Decodes into Resource models and binds them to this client so they
      can follow their own links
    """

    def __init__(
        self,
        *,
        key: str,
        secret: str,
        environment: Union[Environment, str] = Environment.SANDBOX,
        timeout_seconds: float = 30.0,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        key = key or ""
        secret = secret or ""

        if not key:
            raise ValueError("key must be provided.")
        if not secret:
            raise ValueError("secret must be provided.")

        self.environment = environment
        self.urls: EnvironmentURLs = resolve_environment(environment)
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("dwolla_hal.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=timeout_seconds,
        )
        self.auth = TokenManager(
            key=key,
            secret=secret,
            token_url=self.urls.token_url,
            http=self.http,
        )

        self._root: Optional[Root] = None
        self._root_lock = asyncio.Lock()

    @classmethod
    def from_env(cls, **kwargs) -> "DwollaClient":
        key, secret, environment = load_env_config()
        kwargs.setdefault("environment", environment)
        return cls(key=key, secret=secret, **kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "DwollaClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # --- Environment ---

    @property
    def api_url(self) -> str:
        return self.urls.api_url

    @property
    def auth_url(self) -> str:
        return self.urls.auth_url

    @property
    def token_url(self) -> str:
        return self.urls.token_url

    def build_api_url(self, path: str) -> str:
        """
        Link targets already on the API origin are used as-is; anything else
        is treated as a path on that origin.
        """
        path = path or ""
        if path.startswith(self.api_url):
            return path
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.api_url}{path}"

    # --- Token ---

    @property
    def token(self) -> Optional[Token]:
        return self.auth.token

    @token.setter
    def token(self, value: Optional[Token]) -> None:
        self.auth.token = value

    async def request_token(self) -> Token:
        return await self.auth.request_token()

    async def ensure_token(self) -> Token:
        return await self.auth.ensure_token()

    # --- Root ---

    @property
    def cached_root(self) -> Optional[Root]:
        return self._root

    @cached_root.setter
    def cached_root(self, root: Optional[Root]) -> None:
        """Pre-seed the root cache, e.g. to avoid the root fetch in tests."""
        self._root = attach_client(root, self) if root is not None else None

    async def root(self) -> Root:
        """The API root, fetched once per client."""
        if self._root is not None:
            return self._root
        async with self._root_lock:
            if self._root is None:
                self._root = await self.get("", model=Root)
            return self._root

    # --- Verbs ---

    async def get(
        self,
        path: str,
        *,
        params: Params = None,
        headers: Headers = None,
        model: Optional[Type[T]] = None,
    ) -> Any:
        """
        GET a resource. Returns the decoded ``model`` (bound to this client)
        or the raw JSON dict when no model is given.
        """
        resp = await self._dispatch("GET", path, params=params, headers=headers)
        payload = self._safe_json(resp)
        self._raise_if_pending(resp, payload)
        return self._decode(payload, model)

    async def post(
        self,
        path: str,
        body: Any = None,
        *,
        headers: Headers = None,
        model: Optional[Type[T]] = None,
    ) -> Any:
        """
        POST ``body`` (a model or plain dict). When the API answers with a
        Location header the created resource is fetched and returned instead
        of the POST response body.
        """
        wire_body = _to_wire(body)

        def build() -> Dict[str, Any]:
            if wire_body is None:
                return {}
            return {"json": wire_body}

        resp = await self._dispatch(
            "POST",
            path,
            headers=headers,
            content_headers={"Content-Type": HAL_JSON},
            build_body=build,
            validation=True,
        )
        return await self._materialize(resp, model)

    async def upload(
        self,
        path: str,
        *,
        document_type: str,
        file: Union[BinaryIO, bytes],
        file_name: str,
        content_type: Optional[str] = None,
        model: Optional[Type[T]] = None,
    ) -> Any:
        """
        Multipart upload of ``file`` with a ``documentType`` field.
        Seekable streams are rewound if the call has to be retried;
        other streams are read into memory first.
        """
        ctype = (
            content_type
            or mimetypes.guess_type(file_name)[0]
            or "application/octet-stream"
        )
        doc_type = str(getattr(document_type, "value", document_type))

        source: Union[BinaryIO, bytes] = file
        if not isinstance(source, (bytes, bytearray)) and not _is_seekable(source):
            source = source.read()
        start_pos = None if isinstance(source, (bytes, bytearray)) else source.tell()

        def build() -> Dict[str, Any]:
            if start_pos is not None:
                source.seek(start_pos)
            return {
                "files": {"file": (file_name, source, ctype)},
                "data": {"documentType": doc_type},
            }

        resp = await self._dispatch(
            "POST",
            path,
            content_headers={"Cache-Control": "no-cache"},
            build_body=build,
            validation=True,
        )
        return await self._materialize(resp, model)

    async def delete(
        self,
        path: str,
        *,
        params: Params = None,
        headers: Headers = None,
    ) -> None:
        await self._dispatch("DELETE", path, params=params, headers=headers)

    # --- Utility endpoints ---

    async def sandbox_simulations(self) -> None:
        """Process pending sandbox bank transfers."""
        await self.post("sandbox-simulations")

    async def create_client_token(
        self, action: str, customer: Optional[Resource] = None
    ) -> ClientToken:
        body: Dict[str, Any] = {"action": action}
        if customer is not None:
            link = customer.require_link("self")
            body["_links"] = {"customer": {"href": link.href}}
        return await self.post("client-tokens", body, model=ClientToken)

    # --- Internals ---

    async def _dispatch(
        self,
        method: str,
        path: str,
        *,
        params: Params = None,
        headers: Headers = None,
        content_headers: Optional[Dict[str, str]] = None,
        build_body: Optional[Callable[[], Dict[str, Any]]] = None,
        validation: bool = False,
    ) -> httpx.Response:
        """
        Authenticated request with error classification.
        - Returns the response for status <= 299
        - Raises DwollaHALError (or DwollaValidationError) otherwise
        - An expired token is refreshed and the call retried, once
        """
        url = self.build_api_url(path)
        token = await self.auth.ensure_token()
        attempt = 0

        while True:
            req_headers = httpx.Headers(headers or {})
            if content_headers:
                req_headers.update(content_headers)
            req_headers["Accept"] = HAL_JSON
            req_headers["Authorization"] = f"Bearer {token.access_token}"

            resp = await self._send(
                method,
                url,
                params=params,
                headers=req_headers,
                attempt=attempt,
                **(build_body() if build_body else {}),
            )

            if resp.status_code <= 299:
                return resp

            error = self._to_hal_error(resp, method=method, validation=validation)
            if error.code == EXPIRED_ACCESS_TOKEN and attempt < MAX_TOKEN_RETRIES:
                self.log.info(
                    "dwolla.token_expired",
                    extra={
                        "method": method,
                        "url": url,
                        "code": error.code,
                        "attempt": attempt,
                    },
                )
                token = await self.auth.refresh_rejected(token)
                attempt += 1
                continue

            raise error

    async def _send(
        self,
        method: str,
        url: str,
        *,
        attempt: int,
        **kwargs: Any,
    ) -> httpx.Response:
        start = time.perf_counter()
        try:
            resp = await self.http.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            log_event(
                "api_call",
                method=method,
                url=url,
                status="exception",
                error_type=type(exc).__name__,
                attempt=attempt,
            )
            raise DwollaTransportError(
                f"Network/timeout error calling {method} {url}: {exc}"
            ) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        self.log.debug(
            "dwolla.request",
            extra={
                "method": method,
                "url": str(resp.request.url),
                "status": resp.status_code,
                "duration_ms": duration_ms,
                "attempt": attempt,
            },
        )
        log_event(
            "api_call",
            method=method,
            url=url,
            status=resp.status_code,
            duration_ms=duration_ms,
            attempt=attempt,
        )
        return resp

    async def _materialize(
        self, resp: httpx.Response, model: Optional[Type[T]]
    ) -> Any:
        # Creation answers 201 + Location; return the canonical representation.
        location = resp.headers.get("Location")
        if location:
            return await self.get(location, model=model)

        payload = self._safe_json(resp)
        self._raise_if_pending(resp, payload)
        return self._decode(payload, model)

    def _decode(self, payload: Dict[str, Any], model: Optional[Type[T]]) -> Any:
        if model is None:
            return payload
        try:
            obj = model.model_validate(payload)
        except ValidationError as exc:
            raise DwollaModelValidationError(
                f"Response did not match model {model.__name__}: {exc}"
            ) from exc
        return attach_client(obj, self)

    def _raise_if_pending(self, resp: httpx.Response, payload: Dict[str, Any]) -> None:
        if resp.status_code == 202 and payload.get("code") == TRY_AGAIN_LATER:
            raise DwollaTryAgainLaterError.from_body(
                HALErrorBody.decode(payload),
                status_code=resp.status_code,
                method=resp.request.method,
                url=str(resp.request.url),
            )

    def _safe_json(self, resp: httpx.Response) -> Dict[str, Any]:
        # Handle empty responses (200 with no body, 204 No Content, etc.)
        if not resp.content:
            return {}

        try:
            data = resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise DwollaParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

        if not isinstance(data, dict):
            raise DwollaParseError(
                f"Expected top-level JSON object from "
                f"{resp.request.method} {resp.request.url}, "
                f"got {type(data).__name__}"
            )
        return data

    def _to_hal_error(
        self, resp: httpx.Response, *, method: str, validation: bool
    ) -> DwollaHALError:
        url = str(resp.request.url)
        try:
            parsed = resp.json()
        except ValueError:
            parsed = None

        if not isinstance(parsed, dict):
            message = (resp.text or "")[:500] or "request failed"
            return DwollaHALError(
                status_code=resp.status_code,
                code=None,
                message=message,
                method=method,
                url=url,
            )

        body = HALErrorBody.decode(parsed)

        if validation and body.code == VALIDATION_ERROR:
            return DwollaValidationError.from_body(
                body, status_code=resp.status_code, method=method, url=url
            )
        return DwollaHALError.from_body(
            body, status_code=resp.status_code, method=method, url=url
        )


def _to_wire(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    return body


def _is_seekable(stream: Any) -> bool:
    seekable = getattr(stream, "seekable", None)
    return bool(seekable and seekable())


__all__ = [
    "DwollaClient",
    "ClientToken",
    "HAL_JSON",
    "HEADER_IDEMPOTENCY",
    "MAX_TOKEN_RETRIES",
    "USER_AGENT",
    "VERSION",
    "idempotency_headers",
]
