from checkout.domain.entities.listing import ListingSnapshot


class ListingQuery:
    async def get(self, listing_id: str, community_id: str) -> ListingSnapshot | None:
        raise NotImplementedError
