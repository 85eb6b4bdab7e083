from datetime import date

import pytest

from checkout.application.normalization import (
    TransactionParams,
    add_defaults,
    normalize_params,
    parse_booking_date,
    stringify_booking_date,
)
from checkout.domain.errors import InvalidParamsError
from checkout.domain.value_objects.delivery_method import DeliveryMethod


def test_normalize_full_params():
    params = normalize_params(
        {
            "delivery": "shipping",
            "start_on": "2024-01-01",
            "end_on": "2024-01-03",
            "message": "Hello",
            "quantity": "3",
            "contract_agreed": "1",
        }
    )

    assert params == TransactionParams(
        delivery=DeliveryMethod.SHIPPING,
        start_on=date(2024, 1, 1),
        end_on=date(2024, 1, 3),
        message="Hello",
        quantity=3,
        contract_agreed=True,
    )


def test_normalize_empty_params():
    assert normalize_params({}) == TransactionParams()


@pytest.mark.parametrize("raw", ["", "abc", "0", "-2", "1.5", 2.5, True, [3]])
def test_invalid_quantity_is_dropped(raw):
    assert normalize_params({"quantity": raw}).quantity is None


def test_integer_quantity_from_json_body():
    assert normalize_params({"quantity": 4}).quantity == 4


def test_unparseable_dates_become_none():
    params = normalize_params({"start_on": "01/02/2024", "end_on": ""})
    assert params.start_on is None
    assert params.end_on is None


def test_contract_agreed_requires_marker():
    assert normalize_params({"contract_agreed": "yes"}).contract_agreed is False


@pytest.mark.parametrize("raw", [1, True, "true", None])
def test_contract_agreed_only_for_literal_marker(raw):
    assert normalize_params({"contract_agreed": raw}).contract_agreed is False


def test_non_string_dates_become_none():
    params = normalize_params({"start_on": 20240101, "end_on": ["2024-01-03"]})
    assert params.start_on is None
    assert params.end_on is None


def test_blank_delivery_is_absent():
    assert normalize_params({"delivery": ""}).delivery is None


def test_unknown_delivery_is_rejected():
    with pytest.raises(InvalidParamsError) as exc_info:
        normalize_params({"delivery": "drone"})
    assert exc_info.value.field == "delivery"
    assert exc_info.value.value == "drone"


def test_booking_date_round_trip():
    assert stringify_booking_date(parse_booking_date("2024-02-29")) == "2024-02-29"
    assert stringify_booking_date(None) is None


# === add_defaults ===


def test_defaults_shipping_only_listing():
    params = add_defaults(TransactionParams(), shipping_enabled=True, pickup_enabled=False)
    assert params.delivery is DeliveryMethod.SHIPPING


def test_defaults_pickup_only_listing():
    params = add_defaults(TransactionParams(), shipping_enabled=False, pickup_enabled=True)
    assert params.delivery is DeliveryMethod.PICKUP


def test_defaults_leave_choice_open_when_both_enabled():
    params = add_defaults(TransactionParams(), shipping_enabled=True, pickup_enabled=True)
    assert params.delivery is None


def test_defaults_keep_buyer_choice():
    params = add_defaults(
        TransactionParams(delivery=DeliveryMethod.PICKUP),
        shipping_enabled=True,
        pickup_enabled=False,
    )
    # The disallowed choice is kept so validation can reject it
    assert params.delivery is DeliveryMethod.PICKUP
