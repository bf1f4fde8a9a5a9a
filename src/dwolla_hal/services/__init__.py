"""
Entry points addressed by id or path. Everything else is reached by
following links from the resources these return.
"""

from . import (
    accounts,
    beneficial_owners,
    business_classifications,
    customers,
    events,
    funding_sources,
    kba,
    mass_payments,
    on_demand_authorizations,
    transfers,
    webhook_subscriptions,
    webhooks,
)

__all__ = [
    "accounts",
    "beneficial_owners",
    "business_classifications",
    "customers",
    "events",
    "funding_sources",
    "kba",
    "mass_payments",
    "on_demand_authorizations",
    "transfers",
    "webhook_subscriptions",
    "webhooks",
]
