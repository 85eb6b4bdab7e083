"""DTOs del flujo de checkout."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from checkout.domain.entities.community import CommunitySnapshot
from checkout.domain.entities.listing import ListingSnapshot
from checkout.domain.value_objects.delivery_method import DeliveryMethod
from checkout.domain.value_objects.money import Money


@dataclass(frozen=True)
class RequestContext:
    """
    Estado de la petición que el checkout recibe explícitamente.

    Attributes:
        community: Comunidad (tenant) de la petición.
        current_user_id: Comprador autenticado.
        is_xhr: True si el cliente espera JSON en lugar de redirecciones.
    """

    community: CommunitySnapshot
    current_user_id: str
    is_xhr: bool = False


@dataclass(frozen=True)
class PriceBreakDown:
    """Desglose de precio mostrado en la vista previa."""

    booking: bool
    quantity: int
    start_on: date | None
    end_on: date | None
    duration: int
    listing_price: Money
    unit_type_label: str | None
    selector_label: str | None
    subtotal: Money | None
    shipping_price: Money | None
    total: Money


@dataclass(frozen=True)
class AuthorView:
    id: str
    username: str
    display_name: str


@dataclass(frozen=True)
class PreviewViewModel:
    """Datos de la vista previa (paso 1); no crea ninguna transacción."""

    listing: ListingSnapshot
    author: AuthorView | None
    start_on: date | None
    end_on: date | None
    delivery_method: DeliveryMethod | None
    quantity: int | None
    action_button_tr_key: str | None
    expiration_period: int | None
    form_action: str
    country_code: str | None
    price_break_down: PriceBreakDown


@dataclass(frozen=True)
class CheckoutRedirect:
    """Respuesta para navegadores: redirección con mensaje flash opcional."""

    location: str
    flash_error: str | None = None


@dataclass(frozen=True)
class CheckoutJson:
    """Respuesta para clientes programáticos (XHR)."""

    body: dict[str, Any] = field(default_factory=dict)


CheckoutOutcome = CheckoutRedirect | CheckoutJson
