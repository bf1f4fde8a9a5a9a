"""OAuth2 client-credentials token lifecycle."""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import DwollaAuthError, DwollaTransportError
from .observability import log_event


class Token(BaseModel):
    access_token: str = ""
    expires_in: int = 0
    token_type: str = ""
    # Only present on failed exchanges.
    error: Optional[str] = None
    error_description: Optional[str] = None
    issued_at: Optional[datetime] = None

    model_config = ConfigDict(extra="ignore")

    @property
    def expired(self) -> bool:
        if self.issued_at is None:
            return True
        elapsed = (datetime.now(timezone.utc) - self.issued_at).total_seconds()
        return elapsed >= self.expires_in


class TokenManager:
    """
    Acquires and caches the bearer token for one set of credentials.
    Refreshes are serialized so concurrent callers share one exchange.
    """

    def __init__(
        self,
        *,
        key: str,
        secret: str,
        token_url: str,
        http: httpx.AsyncClient,
        logger: Optional[logging.Logger] = None,
    ):
        self.token_url = token_url
        self.http = http
        self.log = logger or logging.getLogger("dwolla_hal.auth")
        self._auth = httpx.BasicAuth(key, secret)
        self._lock = asyncio.Lock()
        self._token: Optional[Token] = None

    @property
    def token(self) -> Optional[Token]:
        return self._token

    @token.setter
    def token(self, value: Optional[Token]) -> None:
        self._token = value

    async def request_token(self) -> Token:
        """Exchange the client credentials for a new token."""
        async with self._lock:
            return await self._exchange()

    async def ensure_token(self) -> Token:
        token = self._token
        if token is not None and not token.expired:
            return token
        async with self._lock:
            # Another caller may have refreshed while we waited.
            token = self._token
            if token is not None and not token.expired:
                return token
            return await self._exchange()

    async def refresh_rejected(self, rejected: Optional[Token]) -> Token:
        """Replace a token the API rejected, unless that already happened."""
        async with self._lock:
            current = self._token
            if current is not None and current is not rejected and not current.expired:
                return current
            return await self._exchange()

    async def _exchange(self) -> Token:
        start = time.perf_counter()
        try:
            resp = await self.http.post(
                self.token_url,
                content=b"grant_type=client_credentials",
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                auth=self._auth,
            )
        except httpx.HTTPError as exc:
            raise DwollaTransportError(
                f"Network/timeout error requesting token from {self.token_url}: {exc}"
            ) from exc

        duration_ms = int((time.perf_counter() - start) * 1000)
        log_event(
            "token_refresh",
            logger=self.log,
            status=resp.status_code,
            duration_ms=duration_ms,
        )

        try:
            token = Token.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise DwollaAuthError(
                "invalid_response",
                f"token endpoint returned an unreadable body (HTTP {resp.status_code})",
                status_code=resp.status_code,
            ) from exc

        if token.error:
            raise DwollaAuthError(
                token.error,
                token.error_description or "",
                status_code=resp.status_code,
            )
        if resp.status_code > 299 or not token.access_token:
            raise DwollaAuthError(
                "invalid_response",
                f"token endpoint returned HTTP {resp.status_code} without a token",
                status_code=resp.status_code,
            )

        self._token = token.model_copy(
            update={"issued_at": datetime.now(timezone.utc)}
        )
        return self._token


__all__ = ["Token", "TokenManager"]
