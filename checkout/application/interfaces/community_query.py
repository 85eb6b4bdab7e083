from checkout.domain.entities.community import CommunitySnapshot


class CommunityQuery:
    async def get(self, community_id: str) -> CommunitySnapshot | None:
        raise NotImplementedError
