from __future__ import annotations

from dwolla_hal.core.client import DwollaClient
from dwolla_hal.models.account import Account


async def retrieve_account(client: DwollaClient) -> Account:
    """The master account, located through the root's ``account`` link."""
    root = await client.root()
    link = root.require_link("account")
    return await client.get(link.href, model=Account)
