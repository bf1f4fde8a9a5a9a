from __future__ import annotations

from dwolla_hal.core.client import DwollaClient
from dwolla_hal.models.on_demand_authorization import OnDemandAuthorization

from ._paths import resource_path


async def create_on_demand_authorization(
    client: DwollaClient,
) -> OnDemandAuthorization:
    return await client.post(
        "on-demand-authorizations", model=OnDemandAuthorization
    )


async def retrieve_on_demand_authorization(
    client: DwollaClient, authorization_id: str
) -> OnDemandAuthorization:
    return await client.get(
        resource_path("on-demand-authorizations", authorization_id),
        model=OnDemandAuthorization,
    )
