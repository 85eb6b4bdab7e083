from typing import Iterable

from checkout.application.interfaces.community_query import CommunityQuery
from checkout.domain.entities.community import CommunitySnapshot


class InMemoryCommunityQuery(CommunityQuery):
    def __init__(self, communities: Iterable[CommunitySnapshot] = ()) -> None:
        self._by_id: dict[str, CommunitySnapshot] = {}
        for community in communities:
            self.add(community)

    def add(self, community: CommunitySnapshot) -> None:
        self._by_id[community.id] = community

    async def get(self, community_id: str) -> CommunitySnapshot | None:
        return self._by_id.get(community_id)
