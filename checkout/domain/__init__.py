"""
Capa de Dominio - Checkout de marketplace.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.
Incluye entidades, value objects y excepciones de dominio.

Estructura:
- entities/: Vistas de solo lectura (ListingSnapshot, PersonSnapshot, etc.)
  y la solicitud de transacción
- value_objects/: Objetos de valor inmutables (Money, BookingPeriod, totales)
- errors.py: Códigos de error y excepciones del dominio
- constants.py: Constantes del dominio
"""

from checkout.domain.entities import (
    BookingFields,
    CommunitySnapshot,
    GatewayFields,
    ListingSnapshot,
    PersonSnapshot,
    PreauthTransactionRequest,
)
from checkout.domain.errors import (
    CannotMessageSelfError,
    DomainError,
    ErrorCode,
    GuardError,
    InvalidDateRangeError,
    InvalidMoneyError,
    InvalidParamsError,
    ListingClosedError,
    ListingNotFoundError,
    NotAuthorizedToViewError,
    PaymentDetailsMissingError,
    UnknownErrorCodeError,
)
from checkout.domain.value_objects import (
    BookingPeriod,
    DeliveryMethod,
    ItemTotal,
    Money,
    OrderTotal,
    ShippingTotal,
)

__all__ = [
    # Entities
    "CommunitySnapshot",
    "ListingSnapshot",
    "PersonSnapshot",
    "PreauthTransactionRequest",
    "GatewayFields",
    "BookingFields",
    # Value Objects
    "BookingPeriod",
    "DeliveryMethod",
    "Money",
    "ItemTotal",
    "ShippingTotal",
    "OrderTotal",
    # Errors
    "ErrorCode",
    "DomainError",
    "GuardError",
    "ListingNotFoundError",
    "ListingClosedError",
    "CannotMessageSelfError",
    "NotAuthorizedToViewError",
    "PaymentDetailsMissingError",
    "InvalidParamsError",
    "InvalidDateRangeError",
    "InvalidMoneyError",
    "UnknownErrorCodeError",
]
