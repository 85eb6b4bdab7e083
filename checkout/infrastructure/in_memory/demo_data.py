"""Datos de demostración para el modo in-memory (desarrollo local)."""

from decimal import Decimal

from checkout.domain.entities.community import CommunitySnapshot
from checkout.domain.entities.listing import ListingSnapshot
from checkout.domain.entities.person import PersonSnapshot
from checkout.domain.value_objects.money import Money
from checkout.infrastructure.in_memory.community_query import InMemoryCommunityQuery
from checkout.infrastructure.in_memory.listing_query import InMemoryListingQuery
from checkout.infrastructure.in_memory.payment_service import StubPaymentService
from checkout.infrastructure.in_memory.person_query import InMemoryPersonQuery

DEMO_COMMUNITY_ID = "demo"
DEMO_AUTHOR_ID = "demo-author"
DEMO_BUYER_ID = "demo-buyer"


def seed_demo_data(
    listing_query: InMemoryListingQuery,
    person_query: InMemoryPersonQuery,
    community_query: InMemoryCommunityQuery,
    payment_service: StubPaymentService,
) -> None:
    """
    Carga una comunidad con PayPal, un vendedor con cuenta de pago, un comprador
    y dos anuncios: uno por unidad con envío y uno por día con recogida.
    """
    community_query.add(
        CommunitySnapshot(id=DEMO_COMMUNITY_ID, country="US", payment_gateway="paypal")
    )
    person_query.add(
        PersonSnapshot(
            id=DEMO_AUTHOR_ID,
            community_id=DEMO_COMMUNITY_ID,
            username="demo_seller",
            given_name="Dana",
            family_name="Seller",
        )
    )
    person_query.add(
        PersonSnapshot(id=DEMO_BUYER_ID, community_id=DEMO_COMMUNITY_ID, username="demo_buyer")
    )
    payment_service.payment_accounts.add((DEMO_COMMUNITY_ID, DEMO_AUTHOR_ID))

    listing_query.add(
        ListingSnapshot(
            id="demo-item",
            community_id=DEMO_COMMUNITY_ID,
            author_id=DEMO_AUTHOR_ID,
            title="Demo desk lamp",
            price=Money(amount=Decimal("20.00"), currency_code="USD"),
            unit_type="unit",
            shipping_price=Money(amount=Decimal("5.00"), currency_code="USD"),
            shipping_price_additional=Money(amount=Decimal("2.00"), currency_code="USD"),
            require_shipping_address=True,
            pickup_enabled=True,
        )
    )
    listing_query.add(
        ListingSnapshot(
            id="demo-booking",
            community_id=DEMO_COMMUNITY_ID,
            author_id=DEMO_AUTHOR_ID,
            title="Demo kayak rental",
            price=Money(amount=Decimal("35.00"), currency_code="USD"),
            unit_type="day",
            pickup_enabled=True,
        )
    )
