from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from checkout.application.interfaces.person_query import PersonQuery
from checkout.domain.entities.person import PersonSnapshot
from checkout.infrastructure.db.tables import community_memberships, people

MEMBERSHIP_ACCEPTED = "accepted"


class PersonQuerySQL(PersonQuery):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, person_id: str, community_id: str) -> PersonSnapshot | None:
        stmt = (
            select(people)
            .join(community_memberships, community_memberships.c.person_id == people.c.id)
            .where(people.c.id == person_id)
            .where(community_memberships.c.community_id == community_id)
            .where(community_memberships.c.status == MEMBERSHIP_ACCEPTED)
            .limit(1)
        )
        row = (await self._session.execute(stmt)).mappings().first()
        if not row:
            return None
        return PersonSnapshot(
            id=row["id"],
            community_id=community_id,
            username=row["username"],
            given_name=row["given_name"],
            family_name=row["family_name"],
        )
