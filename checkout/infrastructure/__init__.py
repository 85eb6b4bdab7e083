"""
Capa de Infraestructura - Checkout de marketplace.

Esta capa contiene las implementaciones concretas de los puertos (interfaces).
Incluye consultas SQL de solo lectura, el cliente HTTP del servicio de pagos
e implementaciones in-memory.

Estructura:
- db/: Tablas y consultas SQL (anuncios, personas, comunidades)
- gateways/: Adaptadores para servicios externos (servicio de pagos)
- in_memory/: Implementaciones in-memory para desarrollo y testing
"""

from checkout.infrastructure.db.queries.community_query_sql import CommunityQuerySQL
from checkout.infrastructure.db.queries.listing_query_sql import ListingQuerySQL
from checkout.infrastructure.db.queries.person_query_sql import PersonQuerySQL
from checkout.infrastructure.gateways.payment_service_http import PaymentServiceHTTP
from checkout.infrastructure.in_memory import (
    InMemoryCommunityQuery,
    InMemoryListingQuery,
    InMemoryPersonQuery,
    StubPaymentService,
)

__all__ = [
    # Database - Queries SQL
    "ListingQuerySQL",
    "PersonQuerySQL",
    "CommunityQuerySQL",
    # Gateways
    "PaymentServiceHTTP",
    # In-Memory Implementations
    "InMemoryListingQuery",
    "InMemoryPersonQuery",
    "InMemoryCommunityQuery",
    "StubPaymentService",
]
