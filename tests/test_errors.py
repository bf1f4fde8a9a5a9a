import pytest
from httpx import Response

from dwolla_hal.core.errors import (
    TRY_AGAIN_LATER,
    VALIDATION_ERROR,
    DwollaAuthError,
    DwollaHALError,
    DwollaTryAgainLaterError,
    DwollaValidationError,
    HALErrorBody,
    MissingLinkError,
)
from dwolla_hal.core.hal import attach_client
from dwolla_hal.models import (
    Amount,
    CustomerRequest,
    FundingSource,
    MicroDepositRequest,
)

TRY_LATER = {
    "code": "TryAgainLater",
    "message": "Micro-deposits have not settled to destination bank. A Customer can verify these amounts after micro-deposits have processed to their bank.",
}


@pytest.mark.asyncio
async def test_post_validation_error_carries_every_field_error(client, api, load_fixture):
    api.post("/customers").mock(
        return_value=Response(400, json=load_fixture("validation_error.json"))
    )

    async with client:
        with pytest.raises(DwollaValidationError) as exc:
            await client.post("customers", CustomerRequest(email="j@x.net"))

    err = exc.value
    assert err.code == VALIDATION_ERROR
    assert err.status_code == 400
    assert [e.path for e in err.errors] == ["/firstName", "/lastName", "/email"]
    assert err.field_errors()["/email"] == [
        "A customer with the specified email already exists."
    ]
    assert err.method == "POST"


@pytest.mark.asyncio
async def test_verify_micro_deposits_before_settlement_is_soft_failure(
    client, api, load_fixture
):
    api.post("/funding-sources/49dbaa24-1580-4b1c-8b58-24e26656fa31/micro-deposits").mock(
        return_value=Response(202, json=TRY_LATER)
    )
    source = attach_client(
        FundingSource.model_validate(load_fixture("funding_source.json")), client
    )

    async with client:
        with pytest.raises(DwollaTryAgainLaterError) as exc:
            await source.verify_micro_deposits(
                MicroDepositRequest(
                    amount1=Amount(value="0.03", currency="USD"),
                    amount2=Amount(value="0.09", currency="USD"),
                )
            )

    assert exc.value.code == TRY_AGAIN_LATER
    assert exc.value.status_code == 202
    assert isinstance(exc.value, DwollaHALError)


@pytest.mark.asyncio
async def test_get_pending_resource_is_soft_failure(client, api):
    api.get("/funding-sources/abc/micro-deposits").mock(
        return_value=Response(202, json=TRY_LATER)
    )

    async with client:
        with pytest.raises(DwollaTryAgainLaterError):
            await client.get("funding-sources/abc/micro-deposits")


@pytest.mark.asyncio
async def test_plain_202_is_success(client, api):
    api.post("/sandbox-simulations").mock(return_value=Response(202, json={"total": 1}))

    async with client:
        data = await client.post("sandbox-simulations")

    assert data == {"total": 1}


def test_hal_error_from_body_keeps_links_and_path():
    body = HALErrorBody.model_validate(
        {
            "code": "InvalidResourceState",
            "message": "Resource cannot be modified.",
            "path": "/status",
            "_links": {"about": {"href": "https://developers.dwolla.com"}},
        }
    )
    err = DwollaHALError.from_body(body, status_code=400, method="POST", url="u")

    assert str(err) == "[InvalidResourceState] Resource cannot be modified."
    assert err.path == "/status"
    assert "about" in err.links


def test_validation_error_without_embedded_errors_is_empty():
    body = HALErrorBody(code=VALIDATION_ERROR, message="bad")
    err = DwollaValidationError.from_body(body, status_code=400)
    assert err.errors == []
    assert err.field_errors() == {}


def test_missing_link_error_names_relation_and_resource():
    err = MissingLinkError("cancel", "Transfer")
    assert str(err) == "No cancel resource link on Transfer"
    assert err.relation == "cancel"


def test_auth_error_message_without_description():
    assert str(DwollaAuthError("invalid_client")) == "[invalid_client]"


@pytest.mark.asyncio
async def test_null_embedded_keeps_error_code(client, api):
    api.get("/transfers/missing").mock(
        return_value=Response(
            404,
            json={"code": "NotFound", "message": "The requested resource was not found.", "_embedded": None},
        )
    )

    async with client:
        with pytest.raises(DwollaHALError) as exc:
            await client.get("transfers/missing")

    assert exc.value.code == "NotFound"
    assert exc.value.embedded == {}


@pytest.mark.asyncio
async def test_null_links_still_classifies_validation_error(client, api):
    api.post("/customers").mock(
        return_value=Response(
            400,
            json={
                "code": "ValidationError",
                "message": "Validation error(s) present.",
                "_links": None,
                "_embedded": {
                    "errors": [
                        {"code": "Required", "message": "FirstName required.", "path": "/firstName", "_links": None}
                    ]
                },
            },
        )
    )

    async with client:
        with pytest.raises(DwollaValidationError) as exc:
            await client.post("customers", CustomerRequest(email="j@x.net"))

    assert exc.value.field_errors() == {"/firstName": ["FirstName required."]}


@pytest.mark.asyncio
async def test_pending_body_with_null_links_is_soft_failure(client, api):
    api.get("/funding-sources/abc/micro-deposits").mock(
        return_value=Response(202, json={**TRY_LATER, "_links": None})
    )

    async with client:
        with pytest.raises(DwollaTryAgainLaterError) as exc:
            await client.get("funding-sources/abc/micro-deposits")

    assert exc.value.code == TRY_AGAIN_LATER


@pytest.mark.asyncio
async def test_pending_body_off_shape_is_soft_failure(client, api):
    api.get("/funding-sources/abc/micro-deposits").mock(
        return_value=Response(
            202, json={**TRY_LATER, "_links": ["unexpected"], "_embedded": "oops"}
        )
    )

    async with client:
        with pytest.raises(DwollaTryAgainLaterError) as exc:
            await client.get("funding-sources/abc/micro-deposits")

    assert exc.value.message == TRY_LATER["message"]


def test_decode_keeps_code_when_body_is_off_shape():
    body = HALErrorBody.decode(
        {"code": "NotFound", "message": 404, "path": "/id", "_links": "nope"}
    )

    assert body.code == "NotFound"
    assert body.message == "404"
    assert body.path == "/id"
    assert body.links == {}
