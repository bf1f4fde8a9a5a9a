from __future__ import annotations

from typing import Optional

from dwolla_hal.core.client import DwollaClient, idempotency_headers
from dwolla_hal.models.mass_payment import MassPayment, MassPaymentRequest

from ._paths import resource_path


async def create_mass_payment(
    client: DwollaClient,
    body: MassPaymentRequest,
    *,
    idempotency_key: Optional[str] = None,
) -> MassPayment:
    return await client.post(
        "mass-payments",
        body,
        headers=idempotency_headers(idempotency_key),
        model=MassPayment,
    )


async def retrieve_mass_payment(
    client: DwollaClient, mass_payment_id: str
) -> MassPayment:
    return await client.get(
        resource_path("mass-payments", mass_payment_id), model=MassPayment
    )


async def update_mass_payment(
    client: DwollaClient,
    mass_payment_id: str,
    status: str,
    *,
    idempotency_key: Optional[str] = None,
) -> MassPayment:
    """
    Move a deferred mass payment on: ``pending`` starts it, ``cancelled``
    drops it.
    """
    return await client.post(
        resource_path("mass-payments", mass_payment_id),
        {"status": str(getattr(status, "value", status))},
        headers=idempotency_headers(idempotency_key),
        model=MassPayment,
    )
