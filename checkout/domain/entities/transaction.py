"""Entidad PreauthTransactionRequest - solicitud de transacción con preautorización."""

from dataclasses import dataclass
from datetime import date
from typing import Any

from checkout.domain.constants import PAYMENT_PROCESS_PREAUTHORIZE
from checkout.domain.value_objects.delivery_method import DeliveryMethod
from checkout.domain.value_objects.money import Money


@dataclass(frozen=True)
class GatewayFields:
    """Datos específicos de la pasarela para el flujo de redirección."""

    success_url: str
    cancel_url: str
    merchant_brand_logo_url: str | None = None


@dataclass(frozen=True)
class BookingFields:
    start_on: date | None = None
    end_on: date | None = None


@dataclass(frozen=True)
class PreauthTransactionRequest:
    """
    Solicitud inmutable que el checkout entrega al servicio de pagos.

    El precio de envío solo viaja cuando la entrega es por envío.
    """

    # Identificadores
    community_id: str
    listing_id: str
    listing_title: str
    starter_id: str
    listing_author_id: str

    # Precio
    listing_quantity: int
    unit_price: Money
    unit_type: str | None
    unit_tr_key: str | None
    unit_selector_tr_key: str | None

    # Mensaje y pago
    content: str | None
    payment_gateway: str
    gateway_fields: GatewayFields
    booking_fields: BookingFields = BookingFields()
    delivery_method: DeliveryMethod | None = None
    shipping_price: Money | None = None
    payment_process: str = PAYMENT_PROCESS_PREAUTHORIZE

    def __post_init__(self) -> None:
        if self.delivery_method is not DeliveryMethod.SHIPPING and self.shipping_price is not None:
            object.__setattr__(self, "shipping_price", None)

    def to_payload(self) -> dict[str, Any]:
        """Serializa la solicitud al formato del servicio de pagos."""
        transaction: dict[str, Any] = {
            "community_id": self.community_id,
            "listing_id": self.listing_id,
            "listing_title": self.listing_title,
            "starter_id": self.starter_id,
            "listing_author_id": self.listing_author_id,
            "listing_quantity": self.listing_quantity,
            "unit_type": self.unit_type,
            "unit_price_cents": self.unit_price.to_cents(),
            "unit_price_currency": self.unit_price.currency_code,
            "unit_tr_key": self.unit_tr_key,
            "unit_selector_tr_key": self.unit_selector_tr_key,
            "content": self.content,
            "payment_gateway": self.payment_gateway,
            "payment_process": self.payment_process,
            "booking_fields": {
                "start_on": self.booking_fields.start_on.isoformat()
                if self.booking_fields.start_on
                else None,
                "end_on": self.booking_fields.end_on.isoformat()
                if self.booking_fields.end_on
                else None,
            },
            "delivery_method": self.delivery_method.value if self.delivery_method else None,
        }
        if self.shipping_price is not None:
            transaction["shipping_price_cents"] = self.shipping_price.to_cents()

        return {
            "transaction": transaction,
            "gateway_fields": {
                "merchant_brand_logo_url": self.gateway_fields.merchant_brand_logo_url,
                "success_url": self.gateway_fields.success_url,
                "cancel_url": self.gateway_fields.cancel_url,
            },
        }
