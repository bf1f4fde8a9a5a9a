import json

import httpx
import pytest
from httpx import Response

from dwolla_hal.core.client import (
    HAL_JSON,
    USER_AGENT,
    ClientToken,
    DwollaClient,
)
from dwolla_hal.core.errors import (
    NOT_FOUND,
    DwollaHALError,
    DwollaModelValidationError,
    DwollaParseError,
    DwollaTransportError,
    DwollaValidationError,
    MissingLinkError,
)
from dwolla_hal.core.hal import Root
from dwolla_hal.models import Customer


@pytest.mark.asyncio
async def test_get_sends_hal_accept_bearer_and_user_agent(client, api, load_fixture):
    route = api.get("/customers/9da3aa7c-2524-430b-a34b-3efa5ae1b8a3").mock(
        return_value=Response(200, json=load_fixture("customer.json"))
    )

    async with client:
        customer = await client.get(
            "customers/9da3aa7c-2524-430b-a34b-3efa5ae1b8a3", model=Customer
        )

    assert customer.first_name == "Jane"
    sent = route.calls[0].request.headers
    assert sent["Accept"] == HAL_JSON
    assert sent["Authorization"] == "Bearer sandbox-token"
    assert sent["User-Agent"] == USER_AGENT


@pytest.mark.asyncio
async def test_get_without_model_returns_raw_dict(client, api):
    api.get("/events").mock(return_value=Response(200, json={"total": 0}))

    async with client:
        data = await client.get("/events")

    assert data == {"total": 0}


@pytest.mark.asyncio
async def test_get_passes_query_params(client, api):
    route = api.get("/customers").mock(return_value=Response(200, json={"total": 0}))

    async with client:
        await client.get("customers", params={"limit": 10, "search": "jane"})

    url = route.calls[0].request.url
    assert url.params["limit"] == "10"
    assert url.params["search"] == "jane"


@pytest.mark.asyncio
async def test_idempotency_key_header_is_sent(client, api):
    route = api.post("/transfers").mock(return_value=Response(200, json={}))

    async with client:
        await client.post(
            "transfers", {"amount": {}}, headers={"Idempotency-Key": "abc-123"}
        )

    assert route.calls[0].request.headers["Idempotency-Key"] == "abc-123"


@pytest.mark.asyncio
async def test_post_serializes_model_by_alias_without_nones(client, api):
    from dwolla_hal.models import CustomerRequest

    route = api.post("/customers").mock(return_value=Response(200, json={}))

    async with client:
        await client.post(
            "customers", CustomerRequest(first_name="Jane", last_name="Merchant")
        )

    req = route.calls[0].request
    assert req.headers["Content-Type"] == HAL_JSON
    assert json.loads(req.content) == {"firstName": "Jane", "lastName": "Merchant"}


@pytest.mark.asyncio
async def test_not_found_raises_hal_error(client, api):
    api.get("/customers/missing").mock(
        return_value=Response(
            404, json={"code": "NotFound", "message": "The requested resource was not found."}
        )
    )

    async with client:
        with pytest.raises(DwollaHALError) as exc:
            await client.get("customers/missing")

    assert exc.value.status_code == 404
    assert exc.value.code == NOT_FOUND
    assert "not found" in str(exc.value)


@pytest.mark.asyncio
async def test_validation_code_on_get_is_plain_hal_error(client, api, load_fixture):
    api.get("/customers").mock(
        return_value=Response(400, json=load_fixture("validation_error.json"))
    )

    async with client:
        with pytest.raises(DwollaHALError) as exc:
            await client.get("customers")

    assert not isinstance(exc.value, DwollaValidationError)


@pytest.mark.asyncio
async def test_non_json_error_body_keeps_text(client, api):
    api.get("/customers").mock(return_value=Response(502, text="Bad Gateway"))

    async with client:
        with pytest.raises(DwollaHALError) as exc:
            await client.get("customers")

    assert exc.value.code is None
    assert exc.value.status_code == 502
    assert "Bad Gateway" in exc.value.message


@pytest.mark.asyncio
async def test_non_json_success_body_raises_parse_error(client, api):
    api.get("/customers").mock(return_value=Response(200, text="<html>oops</html>"))

    async with client:
        with pytest.raises(DwollaParseError):
            await client.get("customers")


@pytest.mark.asyncio
async def test_top_level_list_raises_parse_error(client, api):
    api.get("/customers").mock(return_value=Response(200, json=[1, 2]))

    async with client:
        with pytest.raises(DwollaParseError):
            await client.get("customers")


@pytest.mark.asyncio
async def test_model_mismatch_raises_model_validation_error(client, api):
    api.get("/customers/x").mock(return_value=Response(200, json={"firstName": "Jane"}))

    async with client:
        with pytest.raises(DwollaModelValidationError):
            await client.get("customers/x", model=Customer)


@pytest.mark.asyncio
async def test_transport_error_is_wrapped(client, api):
    api.get("/customers").mock(side_effect=httpx.ConnectError("boom"))

    async with client:
        with pytest.raises(DwollaTransportError) as exc:
            await client.get("customers")

    assert isinstance(exc.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_delete_returns_none(client, api):
    route = api.delete("/webhook-subscriptions/abc").mock(return_value=Response(200))

    async with client:
        result = await client.delete("webhook-subscriptions/abc")

    assert result is None
    assert route.called


@pytest.mark.asyncio
async def test_root_is_fetched_once(client, api, load_fixture):
    route = api.get("/").mock(return_value=Response(200, json=load_fixture("root.json")))

    async with client:
        first = await client.root()
        second = await client.root()

    assert first is second
    assert route.call_count == 1
    assert first.has_link("account")


@pytest.mark.asyncio
async def test_preseeded_root_makes_no_network_call(client, api, load_fixture):
    route = api.get("/").mock(return_value=Response(200, json=load_fixture("root.json")))
    client.cached_root = Root.model_validate(load_fixture("root.json"))

    async with client:
        root = await client.root()

    assert not route.called
    assert root.client is client


@pytest.mark.asyncio
async def test_create_client_token_links_customer(client, api, load_fixture):
    route = api.post("/client-tokens").mock(
        return_value=Response(200, json={"token": "4adF858jPeQ9RnojMHdqSD2KwsvmhO7Ti7cI5woOiBGCpH5krY"})
    )
    customer = Customer.model_validate(load_fixture("customer.json"))

    async with client:
        result = await client.create_client_token("customer.update", customer)

    assert isinstance(result, ClientToken)
    assert result.token.startswith("4adF")
    body = json.loads(route.calls[0].request.content)
    assert body["action"] == "customer.update"
    assert body["_links"]["customer"]["href"].endswith(
        "/customers/9da3aa7c-2524-430b-a34b-3efa5ae1b8a3"
    )


@pytest.mark.asyncio
async def test_create_client_token_requires_customer_self_link(client, api):
    route = api.post("/client-tokens").mock(return_value=Response(200, json={}))
    customer = Customer(id="abc")

    async with client:
        with pytest.raises(MissingLinkError):
            await client.create_client_token("customer.update", customer)

    assert not route.called


@pytest.mark.asyncio
async def test_sandbox_simulations_posts(client, api):
    route = api.post("/sandbox-simulations").mock(
        return_value=Response(200, json={"total": 0})
    )

    async with client:
        await client.sandbox_simulations()

    assert route.called


def test_build_api_url_accepts_paths_and_hrefs():
    client = DwollaClient(key="k", secret="s")
    assert client.build_api_url("customers") == "https://api-sandbox.dwolla.com/customers"
    assert client.build_api_url("/customers") == "https://api-sandbox.dwolla.com/customers"
    assert (
        client.build_api_url("https://api-sandbox.dwolla.com/transfers/1")
        == "https://api-sandbox.dwolla.com/transfers/1"
    )


def test_production_environment_urls():
    client = DwollaClient(key="k", secret="s", environment="production")
    assert client.api_url == "https://api.dwolla.com"
    assert client.token_url == "https://api.dwolla.com/token"
    assert client.auth_url == "https://www.dwolla.com/oauth/v2/authenticate"


@pytest.mark.parametrize("key,secret", [("", "s"), ("k", ""), (None, "s")])
def test_credentials_are_required(key, secret):
    with pytest.raises(ValueError):
        DwollaClient(key=key, secret=secret)
