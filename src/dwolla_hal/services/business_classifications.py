from __future__ import annotations

from dwolla_hal.core.client import DwollaClient
from dwolla_hal.models.business_classification import (
    BusinessClassification,
    BusinessClassifications,
)

from ._paths import resource_path


async def list_business_classifications(
    client: DwollaClient,
) -> BusinessClassifications:
    return await client.get(
        "business-classifications", model=BusinessClassifications
    )


async def retrieve_business_classification(
    client: DwollaClient, classification_id: str
) -> BusinessClassification:
    return await client.get(
        resource_path("business-classifications", classification_id),
        model=BusinessClassification,
    )
