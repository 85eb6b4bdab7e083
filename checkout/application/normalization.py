"""Maps raw request fields into typed, defaulted transaction params."""

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any, Mapping

from checkout.domain.constants import BOOKING_DATE_FORMAT, CONTRACT_AGREED_MARKER
from checkout.domain.errors import InvalidParamsError
from checkout.domain.value_objects.delivery_method import DeliveryMethod


@dataclass(frozen=True)
class TransactionParams:
    delivery: DeliveryMethod | None = None
    start_on: date | None = None
    end_on: date | None = None
    message: str | None = None
    quantity: int | None = None
    contract_agreed: bool = False


def parse_booking_date(value: Any) -> date | None:
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), BOOKING_DATE_FORMAT).date()
    except ValueError:
        return None


def stringify_booking_date(value: date | None) -> str | None:
    if value is None:
        return None
    return value.strftime(BOOKING_DATE_FORMAT)


def _parse_quantity(value: Any) -> int | None:
    # Only integers and integer strings; 2.5 or True are not quantities
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        quantity = int(value)
    except ValueError:
        return None
    return quantity if quantity >= 1 else None


def _parse_delivery(value: Any) -> DeliveryMethod | None:
    if value is None:
        return None
    try:
        return DeliveryMethod.parse(str(value))
    except ValueError as exc:
        raise InvalidParamsError(field="delivery", value=str(value)) from exc


def normalize_params(raw: Mapping[str, Any]) -> TransactionParams:
    """
    Builds TransactionParams from raw request fields.

    Unparseable dates and quantities become None; only an unknown
    delivery method is rejected here.

    Raises:
        InvalidParamsError: delivery is set but is not shipping or pickup.
    """
    message = raw.get("message")
    return TransactionParams(
        delivery=_parse_delivery(raw.get("delivery")),
        start_on=parse_booking_date(raw.get("start_on")),
        end_on=parse_booking_date(raw.get("end_on")),
        message=str(message) if message is not None else None,
        quantity=_parse_quantity(raw.get("quantity")),
        contract_agreed=raw.get("contract_agreed") == CONTRACT_AGREED_MARKER,
    )


def add_defaults(
    params: TransactionParams,
    shipping_enabled: bool,
    pickup_enabled: bool,
) -> TransactionParams:
    """
    Injects the delivery method the listing allows when the buyer sent none.

    With both methods enabled nothing is injected, so a missing choice is
    caught later by validation.
    """
    if params.delivery is not None:
        return params
    if shipping_enabled and not pickup_enabled:
        return replace(params, delivery=DeliveryMethod.SHIPPING)
    if pickup_enabled and not shipping_enabled:
        return replace(params, delivery=DeliveryMethod.PICKUP)
    if not shipping_enabled and not pickup_enabled:
        return replace(params, delivery=None)
    return params
