from __future__ import annotations


def resource_path(collection: str, ident: str) -> str:
    """
    Path for a resource addressed by id. A full href (as found in webhook
    payloads or links) is passed through unchanged.
    Example: resource_path("transfers", "15c6bcce") -> "transfers/15c6bcce"
    """
    ident = (ident or "").strip()
    if not ident:
        raise ValueError(f"An id is required to address {collection}.")
    if ident.startswith(("http://", "https://")):
        return ident
    return f"{collection}/{ident.strip('/')}"


def page_params(**values) -> dict:
    """Query parameters with unset values dropped."""
    return {k: v for k, v in values.items() if v is not None}
