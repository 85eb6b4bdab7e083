"""DTOs de la capa de aplicación."""

from checkout.application.dtos.checkout_dto import (
    AuthorView,
    CheckoutJson,
    CheckoutOutcome,
    CheckoutRedirect,
    PreviewViewModel,
    PriceBreakDown,
    RequestContext,
)

__all__ = [
    "RequestContext",
    "PriceBreakDown",
    "AuthorView",
    "PreviewViewModel",
    "CheckoutRedirect",
    "CheckoutJson",
    "CheckoutOutcome",
]
