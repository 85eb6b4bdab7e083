"""Paths the checkout redirects to. Checkout routes live under API_PREFIX."""

from urllib.parse import urlencode

API_PREFIX = "/api/v1"


def search_path() -> str:
    return "/search"


def listing_path(listing_id: str) -> str:
    return f"/listings/{listing_id}"


def initiate_order_path(listing_id: str, **query: str | None) -> str:
    path = f"{API_PREFIX}/listings/{listing_id}/initiate"
    params = {key: value for key, value in query.items() if value is not None}
    return f"{path}?{urlencode(params)}" if params else path


def initiated_order_path(listing_id: str) -> str:
    return f"{API_PREFIX}/listings/{listing_id}/initiated"


def transaction_op_status_path(process_token: str) -> str:
    return f"/transactions/op_status/{process_token}"
