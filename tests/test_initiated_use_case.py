from dataclasses import replace
from decimal import Decimal

import pytest

from checkout.application.dtos.checkout_dto import CheckoutJson, CheckoutRedirect, PreviewViewModel
from checkout.application.normalization import TransactionParams
from checkout.application.use_cases.guards import CheckoutGuards
from checkout.application.use_cases.initiate_transaction import InitiateTransactionUseCase
from checkout.application.use_cases.initiated_transaction import InitiatedTransactionUseCase
from checkout.domain.errors import ErrorCode, UnknownErrorCodeError
from checkout.domain.value_objects.delivery_method import DeliveryMethod
from checkout.domain.value_objects.money import Money

SUCCESS_URL = "http://localhost:8000/paypal_service/checkout_orders/success"
CANCEL_URL = "http://localhost:8000/paypal_service/checkout_orders/cancel"


def usd(amount: str) -> Money:
    return Money(amount=Decimal(amount), currency_code="USD")


@pytest.fixture
def payment_service(collaborators):
    return collaborators["payment_service"]


@pytest.fixture
def use_case(collaborators, payment_service) -> InitiatedTransactionUseCase:
    guards = CheckoutGuards(
        listing_query=collaborators["listing_query"],
        person_query=collaborators["person_query"],
        payment_service=payment_service,
    )
    return InitiatedTransactionUseCase(
        guards=guards,
        payment_service=payment_service,
        success_url=SUCCESS_URL,
        cancel_url=CANCEL_URL,
    )


@pytest.fixture
def agreement_context(context):
    return replace(context, community=replace(context.community, transaction_agreement_in_use=True))


@pytest.mark.asyncio
async def test_browser_commit_redirects_to_gateway(use_case, payment_service, context):
    outcome = await use_case.execute(
        "L1", {"delivery": "shipping", "quantity": "3", "message": "Hi!"}, context
    )

    assert isinstance(outcome, CheckoutRedirect)
    assert outcome.location.startswith("https://www.sandbox.paypal.com/checkoutnow?token=EC-")
    assert outcome.flash_error is None

    request, use_async = payment_service.created[0]
    assert use_async is False
    assert request.listing_quantity == 3
    assert request.unit_price == usd("20.00")
    assert request.shipping_price == usd("20.00")
    assert request.delivery_method is DeliveryMethod.SHIPPING
    assert request.content == "Hi!"
    assert request.starter_id == "buyer-1"
    assert request.payment_gateway == "paypal"
    assert request.payment_process == "preauthorize"


@pytest.mark.asyncio
async def test_gateway_fields(use_case, payment_service, context):
    await use_case.execute("L1", {"delivery": "pickup"}, context)

    request, _ = payment_service.created[0]
    assert request.gateway_fields.success_url == SUCCESS_URL
    assert request.gateway_fields.cancel_url == f"{CANCEL_URL}?listing_id=L1"
    assert request.gateway_fields.merchant_brand_logo_url == "https://cdn.example.com/logo.png"
    assert request.shipping_price is None


@pytest.mark.asyncio
async def test_booking_commit_sends_dates_and_days(use_case, payment_service, context):
    await use_case.execute("L2", {"start_on": "2024-01-01", "end_on": "2024-01-03"}, context)

    request, _ = payment_service.created[0]
    assert request.listing_quantity == 3
    assert request.booking_fields.start_on.isoformat() == "2024-01-01"
    assert request.booking_fields.end_on.isoformat() == "2024-01-03"
    assert request.delivery_method is DeliveryMethod.PICKUP


@pytest.mark.asyncio
async def test_xhr_commit_returns_redirect_url(use_case, payment_service, xhr_context):
    payment_service.redirect_base_url = "https://gateway.test/pay"
    payment_service_async = payment_service.create_preauth_transaction

    async def _sync_gateway(request, use_async=False):
        return await payment_service_async(request, use_async=False)

    payment_service.create_preauth_transaction = _sync_gateway

    outcome = await use_case.execute("L1", {"delivery": "pickup"}, xhr_context)

    assert isinstance(outcome, CheckoutJson)
    assert outcome.body["redirect_url"].startswith("https://gateway.test/pay?token=")


@pytest.mark.asyncio
async def test_xhr_commit_async_gateway_returns_op_status(use_case, payment_service, xhr_context):
    outcome = await use_case.execute("L1", {"delivery": "pickup"}, xhr_context)

    _, use_async = payment_service.created[0]
    assert use_async is True
    assert isinstance(outcome, CheckoutJson)
    assert outcome.body["op_status_url"].startswith("/transactions/op_status/")
    assert outcome.body["op_error_msg"] == (
        "An error occurred with the payment service. Please try again."
    )


@pytest.mark.asyncio
async def test_gateway_failure_goes_back_to_preview(use_case, payment_service, context):
    payment_service.fail_with = "declined"

    outcome = await use_case.execute("L1", {"delivery": "pickup"}, context)

    assert outcome == CheckoutRedirect(
        location="/api/v1/listings/L1/initiate",
        flash_error="An error occurred with the payment service. Please try again.",
    )


@pytest.mark.asyncio
async def test_gateway_failure_xhr(use_case, payment_service, xhr_context):
    payment_service.fail_with = "declined"

    outcome = await use_case.execute("L1", {"delivery": "pickup"}, xhr_context)

    assert outcome == CheckoutJson(
        body={"error_msg": "An error occurred with the payment service. Please try again."}
    )


# === Validation errors ===


@pytest.mark.asyncio
async def test_missing_agreement_preserves_dates(use_case, payment_service, agreement_context):
    outcome = await use_case.execute(
        "L2", {"start_on": "2024-01-01", "end_on": "2024-01-03"}, agreement_context
    )

    assert outcome == CheckoutRedirect(
        location="/api/v1/listings/L2/initiate?start_on=2024-01-01&end_on=2024-01-03",
        flash_error="You need to accept the transaction agreement.",
    )
    assert payment_service.created == []


@pytest.mark.asyncio
async def test_agreement_accepted(use_case, payment_service, agreement_context):
    outcome = await use_case.execute(
        "L1", {"delivery": "pickup", "contract_agreed": "1"}, agreement_context
    )

    assert isinstance(outcome, CheckoutRedirect)
    assert len(payment_service.created) == 1


@pytest.mark.asyncio
async def test_end_before_start_redirects_to_listing(use_case, payment_service, context):
    outcome = await use_case.execute(
        "L2", {"start_on": "2024-01-03", "end_on": "2024-01-01"}, context
    )

    assert outcome == CheckoutRedirect(
        location="/listings/L2", flash_error="The end date can't be before the start date."
    )
    assert payment_service.created == []


@pytest.mark.asyncio
async def test_missing_delivery_xhr(use_case, xhr_context):
    outcome = await use_case.execute("L1", {}, xhr_context)

    assert outcome == CheckoutJson(body={"error_msg": "Please select a delivery method."})


def test_unhandled_error_code_raises(use_case, item_listing):
    with pytest.raises(UnknownErrorCodeError):
        use_case._error_target(ErrorCode.LISTING_CLOSED, item_listing, TransactionParams())


@pytest.mark.asyncio
async def test_every_commit_creates_a_transaction(use_case, payment_service, context):
    await use_case.execute("L1", {"delivery": "pickup"}, context)
    await use_case.execute("L1", {"delivery": "pickup"}, context)

    assert len(payment_service.created) == 2


@pytest.mark.asyncio
async def test_commit_charges_what_the_preview_showed(
    use_case, collaborators, payment_service, booking_listing, context
):
    collaborators["listing_query"].add(
        replace(
            booking_listing,
            id="L3",
            shipping_price=usd("5"),
            shipping_price_additional=usd("2"),
            require_shipping_address=True,
            pickup_enabled=False,
        )
    )
    preview_use_case = InitiateTransactionUseCase(
        guards=CheckoutGuards(
            listing_query=collaborators["listing_query"],
            person_query=collaborators["person_query"],
            payment_service=payment_service,
        ),
        person_query=collaborators["person_query"],
    )
    raw_params = {"start_on": "2024-01-01", "end_on": "2024-01-03"}

    preview = await preview_use_case.execute("L3", raw_params, context)
    await use_case.execute("L3", raw_params, context)

    assert isinstance(preview, PreviewViewModel)
    request, _ = payment_service.created[0]
    breakdown = preview.price_break_down

    assert breakdown.duration == request.listing_quantity == 3
    assert breakdown.shipping_price == request.shipping_price == usd("9")
    assert breakdown.listing_price == request.unit_price
    assert breakdown.subtotal == usd("60")
    assert breakdown.total == usd("69")
