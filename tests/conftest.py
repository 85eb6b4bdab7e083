"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Snapshots de comunidad, anuncios y personas
- Colaboradores in-memory (queries y servicio de pagos stub)
- Cliente HTTP de prueba (FastAPI TestClient) con override de dependencias
"""

from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from checkout.api.dependencies import get_collaborators
from checkout.application.dtos.checkout_dto import RequestContext
from checkout.domain.entities.community import CommunitySnapshot
from checkout.domain.entities.listing import ListingSnapshot
from checkout.domain.entities.person import PersonSnapshot
from checkout.domain.value_objects.money import Money
from checkout.infrastructure.circuit_breaker import payment_breaker
from checkout.infrastructure.in_memory.community_query import InMemoryCommunityQuery
from checkout.infrastructure.in_memory.listing_query import InMemoryListingQuery
from checkout.infrastructure.in_memory.payment_service import StubPaymentService
from checkout.infrastructure.in_memory.person_query import InMemoryPersonQuery
from checkout.main import app

COMMUNITY_ID = "c1"
AUTHOR_ID = "author-1"
BUYER_ID = "buyer-1"


def usd(amount: str) -> Money:
    return Money(amount=Decimal(amount), currency_code="USD")


# ============================================================================
# DATOS DE PRUEBA
# ============================================================================

@pytest.fixture
def community() -> CommunitySnapshot:
    return CommunitySnapshot(
        id=COMMUNITY_ID,
        country="us",
        payment_gateway="paypal",
        wide_logo_url="https://cdn.example.com/logo.png",
    )


@pytest.fixture
def author() -> PersonSnapshot:
    return PersonSnapshot(
        id=AUTHOR_ID,
        community_id=COMMUNITY_ID,
        username="jsmith",
        given_name="John",
        family_name="Smith",
    )


@pytest.fixture
def buyer() -> PersonSnapshot:
    return PersonSnapshot(id=BUYER_ID, community_id=COMMUNITY_ID, username="buyer")


@pytest.fixture
def item_listing() -> ListingSnapshot:
    """Anuncio por unidad con envío escalonado (10 + 5 por unidad adicional)."""
    return ListingSnapshot(
        id="L1",
        community_id=COMMUNITY_ID,
        author_id=AUTHOR_ID,
        title="Vintage lamp",
        price=usd("20.00"),
        unit_type="unit",
        shipping_price=usd("10.00"),
        shipping_price_additional=usd("5.00"),
        require_shipping_address=True,
        pickup_enabled=True,
    )


@pytest.fixture
def booking_listing() -> ListingSnapshot:
    """Anuncio por día con recogida únicamente."""
    return ListingSnapshot(
        id="L2",
        community_id=COMMUNITY_ID,
        author_id=AUTHOR_ID,
        title="Mountain bike",
        price=usd("20.00"),
        unit_type="day",
        pickup_enabled=True,
    )


@pytest.fixture
def context(community) -> RequestContext:
    return RequestContext(community=community, current_user_id=BUYER_ID)


@pytest.fixture
def xhr_context(community) -> RequestContext:
    return RequestContext(community=community, current_user_id=BUYER_ID, is_xhr=True)


# ============================================================================
# COLABORADORES IN-MEMORY
# ============================================================================

@pytest.fixture
def collaborators(community, author, buyer, item_listing, booking_listing):
    return {
        "listing_query": InMemoryListingQuery([item_listing, booking_listing]),
        "person_query": InMemoryPersonQuery([author, buyer]),
        "community_query": InMemoryCommunityQuery([community]),
        "payment_service": StubPaymentService(payment_accounts={(COMMUNITY_ID, AUTHOR_ID)}),
    }


@pytest.fixture(autouse=True)
def reset_payment_breaker():
    """El circuit breaker es global: cada test empieza con el circuito cerrado."""
    payment_breaker.close()
    yield
    payment_breaker.close()


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================

@pytest.fixture
def client(collaborators) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient con override de colaboradores.
    Usa los datos in-memory del test en lugar del bundle global.
    """
    app.dependency_overrides[get_collaborators] = lambda: collaborators

    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client

    # Limpiar overrides
    app.dependency_overrides.clear()


@pytest.fixture
def buyer_headers() -> dict[str, str]:
    return {"X-Community-Id": COMMUNITY_ID, "X-Person-Id": BUYER_ID}


@pytest.fixture
def xhr_headers(buyer_headers) -> dict[str, str]:
    return {**buyer_headers, "X-Requested-With": "XMLHttpRequest"}
