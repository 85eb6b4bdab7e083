"""
Order pricing shared by the preview and commit steps.

Both steps must call these functions with the same inputs so the total the
buyer previews is the total sent to the payment service.
"""

from checkout.application.dtos.checkout_dto import PriceBreakDown
from checkout.application.normalization import TransactionParams
from checkout.application.view_helpers import (
    selector_label_from_listing,
    unit_label_from_listing,
)
from checkout.domain.entities.listing import ListingSnapshot
from checkout.domain.value_objects.booking_period import BookingPeriod
from checkout.domain.value_objects.delivery_method import DeliveryMethod
from checkout.domain.value_objects.money import Money
from checkout.domain.value_objects.totals import ItemTotal, OrderTotal, ShippingTotal


def calculate_quantity(params: TransactionParams, is_booking: bool) -> int:
    """Booking listings are priced per day; everything else per unit."""
    if is_booking:
        return BookingPeriod(start_on=params.start_on, end_on=params.end_on).days
    return params.quantity or 1


def build_shipping_total(
    listing: ListingSnapshot,
    quantity: int,
    delivery: DeliveryMethod | None,
) -> ShippingTotal:
    if delivery is not DeliveryMethod.SHIPPING:
        return ShippingTotal.none(listing.currency_code, quantity=quantity)
    return ShippingTotal(
        initial=listing.shipping_price,
        additional=listing.shipping_price_additional,
        quantity=quantity,
        currency_code=listing.currency_code,
    )


def build_order_total(
    listing: ListingSnapshot,
    quantity: int,
    delivery: DeliveryMethod | None,
) -> OrderTotal:
    return OrderTotal(
        item_total=ItemTotal(unit_price=listing.price, quantity=quantity),
        shipping_total=build_shipping_total(listing, quantity, delivery),
    )


def show_subtotal(order_total: OrderTotal) -> bool:
    return order_total.total != order_total.item_total.unit_price


def show_shipping_price(delivery: DeliveryMethod | None) -> bool:
    return delivery is DeliveryMethod.SHIPPING


def subtotal_to_show(order_total: OrderTotal) -> Money | None:
    if show_subtotal(order_total):
        return order_total.item_total.total
    return None


def shipping_price_to_show(
    delivery: DeliveryMethod | None,
    shipping_total: ShippingTotal,
) -> Money | None:
    if show_shipping_price(delivery):
        return shipping_total.total
    return None


def price_break_down(
    listing: ListingSnapshot,
    params: TransactionParams,
    quantity: int,
    order_total: OrderTotal,
) -> PriceBreakDown:
    return PriceBreakDown(
        booking=listing.is_booking,
        quantity=quantity,
        start_on=params.start_on,
        end_on=params.end_on,
        duration=quantity,
        listing_price=listing.price,
        unit_type_label=unit_label_from_listing(listing),
        selector_label=selector_label_from_listing(listing),
        subtotal=subtotal_to_show(order_total),
        shipping_price=shipping_price_to_show(params.delivery, order_total.shipping_total),
        total=order_total.total,
    )
