"""Entidad ListingSnapshot - vista de solo lectura de un anuncio."""

from dataclasses import dataclass

from checkout.domain.constants import BOOKING_UNIT_TYPES, LISTING_PRIVACY_PUBLIC
from checkout.domain.entities.person import PersonSnapshot
from checkout.domain.value_objects.money import Money


@dataclass(frozen=True)
class ListingSnapshot:
    """
    Anuncio tal como lo entrega el servicio de consulta de anuncios.

    El checkout nunca lo modifica.
    """

    # Identificadores
    id: str
    community_id: str
    author_id: str
    title: str

    # Precio
    price: Money
    unit_type: str | None = None
    unit_tr_key: str | None = None
    unit_selector_tr_key: str | None = None
    action_button_tr_key: str | None = None

    # Entrega
    shipping_price: Money | None = None
    shipping_price_additional: Money | None = None
    require_shipping_address: bool = False
    pickup_enabled: bool = False

    # Estado
    open: bool = True
    privacy: str = LISTING_PRIVACY_PUBLIC

    # === Propiedades ===

    @property
    def is_booking(self) -> bool:
        """Verifica si el anuncio se cobra por día (requiere fechas)."""
        return self.unit_type in BOOKING_UNIT_TYPES

    @property
    def shipping_enabled(self) -> bool:
        return self.require_shipping_address

    @property
    def closed(self) -> bool:
        return not self.open

    @property
    def currency_code(self) -> str:
        return self.price.currency_code

    def visible_to(self, viewer: PersonSnapshot | None) -> bool:
        """
        Verifica si el anuncio es visible para una persona.

        Los anuncios privados solo son visibles para miembros de la comunidad.
        """
        if self.privacy == LISTING_PRIVACY_PUBLIC:
            return True
        return viewer is not None and viewer.community_id == self.community_id
