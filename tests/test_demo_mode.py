import pytest
from fastapi.testclient import TestClient

from checkout.infrastructure.in_memory.community_query import InMemoryCommunityQuery
from checkout.infrastructure.in_memory.demo_data import (
    DEMO_BUYER_ID,
    DEMO_COMMUNITY_ID,
    seed_demo_data,
)
from checkout.infrastructure.in_memory.listing_query import InMemoryListingQuery
from checkout.infrastructure.in_memory.payment_service import StubPaymentService
from checkout.infrastructure.in_memory.person_query import InMemoryPersonQuery
from checkout.main import app

DEMO_HEADERS = {"X-Community-Id": DEMO_COMMUNITY_ID, "X-Person-Id": DEMO_BUYER_ID}


@pytest.mark.asyncio
async def test_seed_demo_data():
    listing_query = InMemoryListingQuery()
    person_query = InMemoryPersonQuery()
    community_query = InMemoryCommunityQuery()
    payment_service = StubPaymentService()

    seed_demo_data(listing_query, person_query, community_query, payment_service)

    assert await community_query.get(DEMO_COMMUNITY_ID) is not None
    assert await person_query.get(DEMO_BUYER_ID, DEMO_COMMUNITY_ID) is not None
    listing = await listing_query.get("demo-booking", DEMO_COMMUNITY_ID)
    assert listing.is_booking
    assert await payment_service.can_receive_payment(DEMO_COMMUNITY_ID, listing.author_id)


def test_fresh_app_serves_demo_preview():
    # Sin overrides: usa el bundle in-memory por defecto
    with TestClient(app, follow_redirects=False) as client:
        response = client.get(
            "/api/v1/listings/demo-item/initiate",
            params={"delivery": "shipping", "quantity": "3"},
            headers=DEMO_HEADERS,
        )

    assert response.status_code == 200
    body = response.json()
    assert body["price_break_down"]["subtotal"]["amount"] == "60.00"
    assert body["price_break_down"]["shipping_price"]["amount"] == "9.00"
    assert body["price_break_down"]["total"]["amount"] == "69.00"


def test_fresh_app_commits_demo_booking():
    with TestClient(app, follow_redirects=False) as client:
        response = client.post(
            "/api/v1/listings/demo-booking/initiated",
            json={"start_on": "2024-01-01", "end_on": "2024-01-02"},
            headers=DEMO_HEADERS,
        )

    assert response.status_code == 303
    assert response.headers["location"].startswith("https://www.sandbox.paypal.com/checkoutnow")
