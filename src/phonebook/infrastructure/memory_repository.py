"""In-memory implementation of PersonRepository (no DB)."""

import logging
import threading
from collections.abc import Iterable

from phonebook.application.ports import IdGenerator
from phonebook.domain import Person
from phonebook.infrastructure.ids import SequentialIdGenerator
from phonebook.infrastructure.schema import PersonSchema

logger = logging.getLogger(__name__)

SAMPLE_PEOPLE = (
    Person(id="1", name="Arto Hellas", number="040-123456"),
    Person(id="2", name="Ada Lovelace", number="39-44-5323523"),
    Person(id="3", name="Dan Abramov", number="12-43-234345"),
    Person(id="4", name="Mary Poppendieck", number="39-23-6423122"),
)


class InMemoryPersonRepository:
    """Stores persons in memory. Order preserved by insertion.
    Every id ever issued or seeded is remembered so a deleted id is never handed out again.
    """

    def __init__(
        self,
        initial: Iterable[Person] = (),
        *,
        id_generator: IdGenerator | None = None,
        schema: PersonSchema | None = None,
    ) -> None:
        self._ids = id_generator or SequentialIdGenerator()
        self._schema = schema or PersonSchema()
        self._lock = threading.Lock()
        self._by_id: dict[str, Person] = {}
        self._order: list[str] = []
        self._issued: set[str] = set()
        for person in initial:
            person_id = self._ids.parse(person.id)
            self._schema.validate(name=person.name, number=person.number)
            if person_id in self._by_id:
                raise ValueError(f"Duplicate seed id: {person_id}")
            self._by_id[person_id] = Person(
                id=person_id, name=person.name, number=person.number
            )
            self._order.append(person_id)
            self._issued.add(person_id)

    def _fresh_id(self) -> str:
        person_id = self._ids.new_id()
        while person_id in self._issued:
            person_id = self._ids.new_id()
        self._issued.add(person_id)
        return person_id

    def list_all(self) -> list[Person]:
        with self._lock:
            return [self._by_id[pid] for pid in self._order]

    def get_by_id(self, person_id: str) -> Person | None:
        key = self._ids.parse(person_id)
        with self._lock:
            return self._by_id.get(key)

    def insert(self, name: str, number: str) -> Person:
        self._schema.validate(name=name, number=number)
        with self._lock:
            person = Person(id=self._fresh_id(), name=name, number=number)
            self._by_id[person.id] = person
            self._order.append(person.id)
        logger.debug("Inserted person id=%s", person.id)
        return person

    def update_by_id(
        self,
        person_id: str,
        *,
        name: str | None = None,
        number: str | None = None,
    ) -> Person | None:
        key = self._ids.parse(person_id)
        self._schema.validate(name=name, number=number)
        with self._lock:
            current = self._by_id.get(key)
            if current is None:
                return None
            updated = Person(
                id=current.id,
                name=name if name is not None else current.name,
                number=number if number is not None else current.number,
            )
            self._by_id[key] = updated
        logger.debug("Updated person id=%s", key)
        return updated

    def delete_by_id(self, person_id: str) -> bool:
        key = self._ids.parse(person_id)
        with self._lock:
            if self._by_id.pop(key, None) is None:
                return False
            self._order.remove(key)
        logger.debug("Deleted person id=%s", key)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._by_id)
