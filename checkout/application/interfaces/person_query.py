from checkout.domain.entities.person import PersonSnapshot


class PersonQuery:
    async def get(self, person_id: str, community_id: str) -> PersonSnapshot | None:
        """Returns the person only when they are a member of the community."""
        raise NotImplementedError
