"""
Capa de Aplicación - Checkout de marketplace.

Esta capa contiene los casos de uso, DTOs e interfaces (puertos).
Orquesta la normalización, validación y cálculo de precios y define los
contratos con los servicios externos.

Estructura:
- use_cases/: Vista previa (initiate), confirmación (initiated) y guardas
- dtos/: Data Transfer Objects
- interfaces/: Puertos (contratos para adaptadores)
- normalization.py, validation.py, pricing.py: Pipeline de checkout
"""

from checkout.application.dtos import (
    AuthorView,
    CheckoutJson,
    CheckoutRedirect,
    PreviewViewModel,
    PriceBreakDown,
    RequestContext,
)
from checkout.application.interfaces import (
    CommunityQuery,
    ListingQuery,
    PaymentService,
    PersonQuery,
    TransactionResponse,
)
from checkout.application.result import Error, Success, run_chain

__all__ = [
    # DTOs
    "RequestContext",
    "PriceBreakDown",
    "AuthorView",
    "PreviewViewModel",
    "CheckoutRedirect",
    "CheckoutJson",
    # Interfaces - Queries
    "ListingQuery",
    "PersonQuery",
    "CommunityQuery",
    # Interfaces - Gateways
    "PaymentService",
    "TransactionResponse",
    # Result
    "Success",
    "Error",
    "run_chain",
]
