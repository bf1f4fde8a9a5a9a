import json
from pathlib import Path

import pytest
import respx
from httpx import Response

from dwolla_hal import DwollaClient

API = "https://api-sandbox.dwolla.com"
FIXTURES = Path(__file__).resolve().parent / "fixtures"

TOKEN_BODY = {
    "access_token": "sandbox-token",
    "token_type": "bearer",
    "expires_in": 3600,
}


@pytest.fixture
def load_fixture():
    def _load(name: str) -> dict:
        return json.loads((FIXTURES / name).read_text())

    return _load


@pytest.fixture
def api():
    """respx router on the sandbox origin with the token endpoint mocked."""
    with respx.mock(base_url=API, assert_all_called=False) as router:
        router.post("/token", name="token").mock(
            return_value=Response(200, json=TOKEN_BODY)
        )
        yield router


@pytest.fixture
def client(api):
    return DwollaClient(key="sandbox-key", secret="sandbox-secret")
