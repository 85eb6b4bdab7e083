"""Entidades del dominio de checkout."""

from checkout.domain.entities.community import CommunitySnapshot
from checkout.domain.entities.listing import ListingSnapshot
from checkout.domain.entities.person import PersonSnapshot
from checkout.domain.entities.transaction import (
    BookingFields,
    GatewayFields,
    PreauthTransactionRequest,
)

__all__ = [
    "CommunitySnapshot",
    "ListingSnapshot",
    "PersonSnapshot",
    # Transaction
    "PreauthTransactionRequest",
    "GatewayFields",
    "BookingFields",
]
