"""Implementaciones in-memory para desarrollo y testing."""

from checkout.infrastructure.in_memory.community_query import InMemoryCommunityQuery
from checkout.infrastructure.in_memory.demo_data import seed_demo_data
from checkout.infrastructure.in_memory.listing_query import InMemoryListingQuery
from checkout.infrastructure.in_memory.payment_service import StubPaymentService
from checkout.infrastructure.in_memory.person_query import InMemoryPersonQuery

__all__ = [
    # Queries
    "InMemoryListingQuery",
    "InMemoryPersonQuery",
    "InMemoryCommunityQuery",
    # Gateways
    "StubPaymentService",
    # Datos de demostración
    "seed_demo_data",
]
