from __future__ import annotations

from typing import Optional

from dwolla_hal.core.client import DwollaClient, idempotency_headers
from dwolla_hal.models.customer import Customer, CustomerRequest, Customers

from ._paths import page_params, resource_path


async def create_customer(
    client: DwollaClient,
    body: CustomerRequest,
    *,
    idempotency_key: Optional[str] = None,
) -> Customer:
    """
    Create a customer. The API answers with a Location header; the created
    customer is fetched and returned.
    """
    return await client.post(
        "customers",
        body,
        headers=idempotency_headers(idempotency_key),
        model=Customer,
    )


async def list_customers(
    client: DwollaClient,
    *,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
    search: Optional[str] = None,
    status: Optional[str] = None,
    email: Optional[str] = None,
) -> Customers:
    params = page_params(
        limit=limit, offset=offset, search=search, status=status, email=email
    )
    return await client.get("customers", params=params or None, model=Customers)


async def retrieve_customer(client: DwollaClient, customer_id: str) -> Customer:
    return await client.get(resource_path("customers", customer_id), model=Customer)


async def update_customer(
    client: DwollaClient,
    customer_id: str,
    body: CustomerRequest,
    *,
    idempotency_key: Optional[str] = None,
) -> Customer:
    return await client.post(
        resource_path("customers", customer_id),
        body,
        headers=idempotency_headers(idempotency_key),
        model=Customer,
    )
