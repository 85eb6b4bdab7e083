import logging
from typing import Any, Mapping

from checkout.application.dtos.checkout_dto import (
    AuthorView,
    CheckoutRedirect,
    PreviewViewModel,
    RequestContext,
)
from checkout.application.interfaces.person_query import PersonQuery
from checkout.application.messages import error_message
from checkout.application.normalization import add_defaults, normalize_params
from checkout.application.paths import initiated_order_path, listing_path
from checkout.application.pricing import build_order_total, calculate_quantity, price_break_down
from checkout.application.use_cases.guards import CheckoutGuards
from checkout.application.validation import validate_initiate_params
from checkout.application.view_helpers import valid_country_code
from checkout.domain.constants import AUTHORIZATION_EXPIRATION_DAYS


class InitiateTransactionUseCase:
    """Preview step: validates the request and computes totals. Creates nothing."""

    def __init__(
        self,
        guards: CheckoutGuards,
        person_query: PersonQuery,
    ) -> None:
        self._guards = guards
        self._person_query = person_query
        self._logger = logging.getLogger(__name__)

    async def execute(
        self,
        listing_id: str,
        raw_params: Mapping[str, Any],
        context: RequestContext,
    ) -> PreviewViewModel | CheckoutRedirect:
        listing = await self._guards.load_listing(listing_id, context)

        tx_params = add_defaults(
            normalize_params(raw_params),
            shipping_enabled=listing.require_shipping_address,
            pickup_enabled=listing.pickup_enabled,
        )
        is_booking = listing.is_booking

        validation_result = validate_initiate_params(
            tx_params,
            is_booking=is_booking,
            shipping_enabled=listing.require_shipping_address,
            pickup_enabled=listing.pickup_enabled,
        )
        if not validation_result.success:
            self._logger.info(
                "Transaction preview rejected",
                extra={"listing_id": listing.id, "code": validation_result.code.value},
            )
            return CheckoutRedirect(
                location=listing_path(listing.id),
                flash_error=error_message(validation_result.code),
            )

        quantity = calculate_quantity(tx_params, is_booking=is_booking)
        order_total = build_order_total(listing, quantity, tx_params.delivery)
        community = context.community

        return PreviewViewModel(
            listing=listing,
            author=await self._author_view(listing.author_id, context),
            start_on=tx_params.start_on,
            end_on=tx_params.end_on,
            delivery_method=tx_params.delivery,
            quantity=tx_params.quantity,
            action_button_tr_key=listing.action_button_tr_key,
            expiration_period=AUTHORIZATION_EXPIRATION_DAYS.get(community.payment_gateway),
            form_action=initiated_order_path(listing.id),
            country_code=valid_country_code(community.country),
            price_break_down=price_break_down(listing, tx_params, quantity, order_total),
        )

    async def _author_view(self, author_id: str, context: RequestContext) -> AuthorView | None:
        community = context.community
        author = await self._person_query.get(author_id, community.id)
        if author is None:
            return None
        return AuthorView(
            id=author.id,
            username=author.username,
            display_name=author.display_name(community.name_display_type),
        )
