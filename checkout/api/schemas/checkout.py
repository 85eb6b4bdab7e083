from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer

from checkout.domain.value_objects.delivery_method import DeliveryMethod


class InitiatedOrderForm(BaseModel):
    """Commit form. Values arrive untyped; the use case normalizes them."""

    model_config = ConfigDict(extra="ignore")

    message: Any = None
    delivery: Any = None
    start_on: Any = None
    end_on: Any = None
    quantity: Any = None
    contract_agreed: Any = None


class MoneyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    amount: Decimal
    currency_code: str

    @field_serializer("amount")
    def serialize_amount(self, value: Decimal) -> str:
        return format(value, ".2f")


class ListingSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    author_id: str
    price: MoneyOut
    unit_type: str | None = None
    require_shipping_address: bool
    pickup_enabled: bool


class AuthorSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    display_name: str


class PriceBreakDownOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    booking: bool
    quantity: int
    start_on: date | None = None
    end_on: date | None = None
    duration: int
    listing_price: MoneyOut
    unit_type_label: str | None = None
    selector_label: str | None = None
    subtotal: MoneyOut | None = None
    shipping_price: MoneyOut | None = None
    total: MoneyOut


class PreviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    listing: ListingSummary
    author: AuthorSummary | None = None
    start_on: date | None = None
    end_on: date | None = None
    delivery_method: DeliveryMethod | None = None
    quantity: int | None = None
    action_button_tr_key: str | None = None
    expiration_period: int | None = None
    form_action: str
    country_code: str | None = None
    price_break_down: PriceBreakDownOut
