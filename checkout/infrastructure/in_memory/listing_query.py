from typing import Iterable

from checkout.application.interfaces.listing_query import ListingQuery
from checkout.domain.entities.listing import ListingSnapshot


class InMemoryListingQuery(ListingQuery):
    def __init__(self, listings: Iterable[ListingSnapshot] = ()) -> None:
        self._by_id: dict[str, ListingSnapshot] = {}
        for listing in listings:
            self.add(listing)

    def add(self, listing: ListingSnapshot) -> None:
        self._by_id[listing.id] = listing

    async def get(self, listing_id: str, community_id: str) -> ListingSnapshot | None:
        listing = self._by_id.get(listing_id)
        if listing is None or listing.community_id != community_id:
            return None
        return listing
