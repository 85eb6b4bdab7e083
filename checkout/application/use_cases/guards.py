import logging

from checkout.application.dtos.checkout_dto import RequestContext
from checkout.application.interfaces.listing_query import ListingQuery
from checkout.application.interfaces.payment_service import PaymentService
from checkout.application.interfaces.person_query import PersonQuery
from checkout.application.paths import listing_path, search_path
from checkout.domain.entities.listing import ListingSnapshot
from checkout.domain.errors import (
    CannotMessageSelfError,
    ListingClosedError,
    ListingNotFoundError,
    NotAuthorizedToViewError,
    PaymentDetailsMissingError,
)


class CheckoutGuards:
    """
    Preconditions shared by the preview and commit steps.

    Checks run in a fixed order and the first failure is raised as a
    GuardError carrying the path the buyer is sent back to.
    """

    def __init__(
        self,
        listing_query: ListingQuery,
        person_query: PersonQuery,
        payment_service: PaymentService,
    ) -> None:
        self._listing_query = listing_query
        self._person_query = person_query
        self._payment_service = payment_service
        self._logger = logging.getLogger(__name__)

    async def load_listing(self, listing_id: str, context: RequestContext) -> ListingSnapshot:
        community = context.community
        listing = await self._listing_query.get(listing_id, community.id)
        if listing is None:
            raise ListingNotFoundError(listing_id=listing_id, community_id=community.id)

        if listing.closed:
            raise ListingClosedError(listing_id=listing.id, redirect_to=search_path())

        if listing.author_id == context.current_user_id:
            raise CannotMessageSelfError(
                person_id=context.current_user_id, redirect_to=search_path()
            )

        viewer = await self._person_query.get(context.current_user_id, community.id)
        if not listing.visible_to(viewer):
            raise NotAuthorizedToViewError(
                listing_id=listing.id,
                person_id=context.current_user_id,
                redirect_to=search_path(),
            )

        await self._ensure_can_receive_payment(listing, context)
        return listing

    async def _ensure_can_receive_payment(
        self, listing: ListingSnapshot, context: RequestContext
    ) -> None:
        community = context.community
        ready = bool(community.payment_gateway) and await self._payment_service.can_receive_payment(
            community_id=community.id, author_id=listing.author_id
        )
        if not ready:
            self._logger.info(
                "Listing author cannot receive payments",
                extra={
                    "community_id": community.id,
                    "listing_id": listing.id,
                    "author_id": listing.author_id,
                    "payment_gateway": community.payment_gateway,
                },
            )
            raise PaymentDetailsMissingError(
                author_id=listing.author_id, redirect_to=listing_path(listing.id)
            )
