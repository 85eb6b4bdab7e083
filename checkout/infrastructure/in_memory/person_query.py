from typing import Iterable

from checkout.application.interfaces.person_query import PersonQuery
from checkout.domain.entities.person import PersonSnapshot


class InMemoryPersonQuery(PersonQuery):
    def __init__(self, people: Iterable[PersonSnapshot] = ()) -> None:
        self._by_key: dict[tuple[str, str], PersonSnapshot] = {}
        for person in people:
            self.add(person)

    def add(self, person: PersonSnapshot) -> None:
        self._by_key[(person.id, person.community_id)] = person

    async def get(self, person_id: str, community_id: str) -> PersonSnapshot | None:
        return self._by_key.get((person_id, community_id))
