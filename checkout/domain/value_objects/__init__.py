"""Value Objects del dominio de checkout."""

from checkout.domain.value_objects.booking_period import BookingPeriod
from checkout.domain.value_objects.delivery_method import DeliveryMethod
from checkout.domain.value_objects.money import Money
from checkout.domain.value_objects.totals import ItemTotal, OrderTotal, ShippingTotal

__all__ = [
    "BookingPeriod",
    "DeliveryMethod",
    "Money",
    "ItemTotal",
    "ShippingTotal",
    "OrderTotal",
]
