"""Entidad CommunitySnapshot - marketplace (tenant) actual."""

from dataclasses import dataclass
from datetime import datetime

from checkout.domain.constants import NAME_DISPLAY_FIRST_NAME_WITH_INITIAL


@dataclass(frozen=True)
class CommunitySnapshot:
    """
    Configuración de la comunidad relevante para el checkout.

    Attributes:
        payment_gateway: Pasarela configurada (ej: "paypal") o None.
        transaction_agreement_in_use: Si el comprador debe aceptar el contrato.
        wide_logo_url: URL base del logo ancho, si existe.
        logo_updated_at: Última actualización del logo (cache buster).
    """

    id: str
    name_display_type: str = NAME_DISPLAY_FIRST_NAME_WITH_INITIAL
    country: str | None = None
    transaction_agreement_in_use: bool = False
    payment_gateway: str | None = None
    wide_logo_url: str | None = None
    logo_updated_at: datetime | None = None

    def wide_logo(self, timestamp: bool = True) -> str | None:
        """
        URL del logo ancho.

        Con timestamp=True se añade el parámetro cache buster; PayPal rechaza
        URLs de imagen con ese parámetro, por eso se desactiva para la pasarela.
        """
        if not self.wide_logo_url:
            return None
        if timestamp and self.logo_updated_at:
            return f"{self.wide_logo_url}?{int(self.logo_updated_at.timestamp())}"
        return self.wide_logo_url
