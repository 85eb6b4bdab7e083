"""Interfaces (Puertos) de la capa de aplicación."""

from checkout.application.interfaces.community_query import CommunityQuery
from checkout.application.interfaces.listing_query import ListingQuery
from checkout.application.interfaces.payment_service import PaymentService, TransactionResponse
from checkout.application.interfaces.person_query import PersonQuery

__all__ = [
    # Queries
    "ListingQuery",
    "PersonQuery",
    "CommunityQuery",
    # Gateways
    "PaymentService",
    "TransactionResponse",
]
