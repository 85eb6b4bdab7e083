from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from checkout.application.interfaces.community_query import CommunityQuery
from checkout.domain.entities.community import CommunitySnapshot
from checkout.infrastructure.db.tables import communities


class CommunityQuerySQL(CommunityQuery):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, community_id: str) -> CommunitySnapshot | None:
        stmt = select(communities).where(communities.c.id == community_id).limit(1)
        row = (await self._session.execute(stmt)).mappings().first()
        if not row:
            return None
        return CommunitySnapshot(
            id=row["id"],
            name_display_type=row["name_display_type"],
            country=row["country"],
            transaction_agreement_in_use=bool(row["transaction_agreement_in_use"]),
            payment_gateway=row["payment_gateway"],
            wide_logo_url=row["wide_logo_url"],
            logo_updated_at=row["logo_updated_at"],
        )
