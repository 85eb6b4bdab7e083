import logging
from typing import Any, Mapping

from checkout.application.dtos.checkout_dto import (
    CheckoutJson,
    CheckoutOutcome,
    CheckoutRedirect,
    RequestContext,
)
from checkout.application.interfaces.payment_service import PaymentService, TransactionResponse
from checkout.application.messages import error_message
from checkout.application.normalization import (
    TransactionParams,
    add_defaults,
    normalize_params,
    stringify_booking_date,
)
from checkout.application.paths import (
    initiate_order_path,
    listing_path,
    transaction_op_status_path,
)
from checkout.application.pricing import build_shipping_total, calculate_quantity
from checkout.application.use_cases.guards import CheckoutGuards
from checkout.application.validation import validate_initiated_params
from checkout.domain.entities.listing import ListingSnapshot
from checkout.domain.entities.transaction import (
    BookingFields,
    GatewayFields,
    PreauthTransactionRequest,
)
from checkout.domain.errors import ErrorCode, UnknownErrorCodeError
from checkout.domain.value_objects.delivery_method import DeliveryMethod


def render_error_response(is_xhr: bool, error_msg: str | None, path: str) -> CheckoutOutcome:
    if is_xhr:
        return CheckoutJson(body={"error_msg": error_msg})
    return CheckoutRedirect(location=path, flash_error=error_msg)


class InitiatedTransactionUseCase:
    """
    Commit step: validates again, prices the order exactly like the preview
    and asks the payment service to create a preauthorized transaction.

    Not idempotent: every successful call creates a new transaction.
    """

    def __init__(
        self,
        guards: CheckoutGuards,
        payment_service: PaymentService,
        success_url: str,
        cancel_url: str,
    ) -> None:
        self._guards = guards
        self._payment_service = payment_service
        self._success_url = success_url
        self._cancel_url = cancel_url
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        listing_id: str,
        raw_params: Mapping[str, Any],
        context: RequestContext,
    ) -> CheckoutOutcome:
        listing = await self._guards.load_listing(listing_id, context)

        tx_params = add_defaults(
            normalize_params(raw_params),
            shipping_enabled=listing.require_shipping_address,
            pickup_enabled=listing.pickup_enabled,
        )
        is_booking = listing.is_booking

        validation_result = validate_initiated_params(
            tx_params,
            is_booking=is_booking,
            shipping_enabled=listing.require_shipping_address,
            pickup_enabled=listing.pickup_enabled,
            transaction_agreement_in_use=context.community.transaction_agreement_in_use,
        )
        if not validation_result.success:
            self._logger.info(
                "Transaction request rejected",
                extra={"listing_id": listing.id, "code": validation_result.code.value},
            )
            error_msg, path = self._error_target(validation_result.code, listing, tx_params)
            return render_error_response(context.is_xhr, error_msg, path)

        quantity = calculate_quantity(tx_params, is_booking=is_booking)
        shipping_total = build_shipping_total(listing, quantity, tx_params.delivery)

        request = PreauthTransactionRequest(
            community_id=context.community.id,
            listing_id=listing.id,
            listing_title=listing.title,
            starter_id=context.current_user_id,
            listing_author_id=listing.author_id,
            listing_quantity=quantity,
            unit_price=listing.price,
            unit_type=listing.unit_type,
            unit_tr_key=listing.unit_tr_key,
            unit_selector_tr_key=listing.unit_selector_tr_key,
            content=tx_params.message,
            payment_gateway=context.community.payment_gateway,
            gateway_fields=GatewayFields(
                merchant_brand_logo_url=context.community.wide_logo(timestamp=False),
                success_url=self._success_url,
                cancel_url=f"{self._cancel_url}?listing_id={listing.id}",
            ),
            booking_fields=BookingFields(start_on=tx_params.start_on, end_on=tx_params.end_on),
            delivery_method=tx_params.delivery,
            shipping_price=(
                shipping_total.total if tx_params.delivery is DeliveryMethod.SHIPPING else None
            ),
        )

        tx_response = await self._payment_service.create_preauth_transaction(
            request, use_async=context.is_xhr
        )
        return self._handle_tx_response(tx_response, listing, context)

    def _error_target(
        self,
        code: ErrorCode,
        listing: ListingSnapshot,
        tx_params: TransactionParams,
    ) -> tuple[str, str]:
        if code in (
            ErrorCode.DATES_MISSING,
            ErrorCode.END_CANT_BE_BEFORE_START,
            ErrorCode.DELIVERY_METHOD_MISSING,
        ):
            return error_message(code), listing_path(listing.id)
        if code is ErrorCode.AGREEMENT_MISSING:
            return error_message(code), initiate_order_path(
                listing.id,
                start_on=stringify_booking_date(tx_params.start_on),
                end_on=stringify_booking_date(tx_params.end_on),
            )
        raise UnknownErrorCodeError(code.value)

    def _handle_tx_response(
        self,
        tx_response: TransactionResponse,
        listing: ListingSnapshot,
        context: RequestContext,
    ) -> CheckoutOutcome:
        generic_error = error_message(ErrorCode.PAYMENT_GATEWAY_GENERIC_ERROR)

        if not tx_response.success:
            self._logger.warning(
                "Preauthorized transaction could not be created",
                extra={
                    "listing_id": listing.id,
                    "error_code": tx_response.error_code,
                    "error_message": tx_response.error_message,
                },
            )
            return render_error_response(
                context.is_xhr, generic_error, initiate_order_path(listing.id)
            )

        self._logger.info(
            "Preauthorized transaction created",
            extra={
                "listing_id": listing.id,
                "transaction_id": tx_response.transaction_id,
                "async": tx_response.redirect_url is None,
            },
        )
        if tx_response.redirect_url:
            if context.is_xhr:
                return CheckoutJson(body={"redirect_url": tx_response.redirect_url})
            return CheckoutRedirect(location=tx_response.redirect_url)

        return CheckoutJson(
            body={
                "op_status_url": transaction_op_status_path(tx_response.process_token),
                "op_error_msg": generic_error,
            }
        )
