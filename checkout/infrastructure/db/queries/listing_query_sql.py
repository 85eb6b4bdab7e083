from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from checkout.application.interfaces.listing_query import ListingQuery
from checkout.domain.entities.listing import ListingSnapshot
from checkout.domain.value_objects.money import Money
from checkout.infrastructure.db.tables import listings


class ListingQuerySQL(ListingQuery):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, listing_id: str, community_id: str) -> ListingSnapshot | None:
        stmt = (
            select(listings)
            .where(listings.c.id == listing_id)
            .where(listings.c.community_id == community_id)
            .limit(1)
        )
        row = (await self._session.execute(stmt)).mappings().first()
        if not row:
            return None

        currency = row["currency"]

        def _money(value) -> Money | None:
            return Money(amount=value, currency_code=currency) if value is not None else None

        return ListingSnapshot(
            id=row["id"],
            community_id=row["community_id"],
            author_id=row["author_id"],
            title=row["title"],
            price=Money(amount=row["price"], currency_code=currency),
            unit_type=row["unit_type"],
            unit_tr_key=row["unit_tr_key"],
            unit_selector_tr_key=row["unit_selector_tr_key"],
            action_button_tr_key=row["action_button_tr_key"],
            shipping_price=_money(row["shipping_price"]),
            shipping_price_additional=_money(row["shipping_price_additional"]),
            require_shipping_address=bool(row["require_shipping_address"]),
            pickup_enabled=bool(row["pickup_enabled"]),
            open=bool(row["open"]),
            privacy=row["privacy"],
        )
