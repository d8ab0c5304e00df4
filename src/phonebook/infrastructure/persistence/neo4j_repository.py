"""Neo4j implementation of PersonRepository.
Graph: one (:Person {id, name, number, created_at}) node per record; no relationships.
Ids come from the injected generator (UUID4 by default) so restarts never reissue an id.
"""

import logging
from datetime import datetime, timezone

from phonebook.application.ports import IdGenerator
from phonebook.domain import Person
from phonebook.infrastructure.ids import UuidIdGenerator
from phonebook.infrastructure.schema import PersonSchema

logger = logging.getLogger(__name__)

_CONSTRAINT_QUERY = """
CREATE CONSTRAINT person_id_unique IF NOT EXISTS
FOR (p:Person) REQUIRE p.id IS UNIQUE
"""

_LIST_QUERY = """
MATCH (p:Person)
RETURN p
ORDER BY p.created_at, p.id
"""

_GET_QUERY = """
MATCH (p:Person {id: $id})
RETURN p
"""

_INSERT_QUERY = """
CREATE (p:Person {
    id: $id,
    name: $name,
    number: $number,
    created_at: $created_at
})
RETURN p
"""

_UPDATE_QUERY = """
MATCH (p:Person {id: $id})
SET p.name = coalesce($name, p.name),
    p.number = coalesce($number, p.number),
    p.updated_at = $updated_at
RETURN p
"""

_DELETE_QUERY = """
MATCH (p:Person {id: $id})
DETACH DELETE p
RETURN count(p) AS deleted
"""

_COUNT_QUERY = """
MATCH (p:Person)
RETURN count(p) AS cnt
"""


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def ensure_person_constraint(driver) -> None:
    """Create unique constraint on Person(id) if missing."""
    with driver.session() as session:
        session.run(_CONSTRAINT_QUERY)


class Neo4jPersonRepository:
    """Stores person records as Person nodes in Neo4j."""

    def __init__(
        self,
        driver: object,
        *,
        id_generator: IdGenerator | None = None,
        schema: PersonSchema | None = None,
    ) -> None:
        self._driver = driver
        self._ids = id_generator or UuidIdGenerator()
        self._schema = schema or PersonSchema()

    def list_all(self) -> list[Person]:
        with self._driver.session() as session:
            result = session.run(_LIST_QUERY)
            return [_record_to_person(rec) for rec in result]

    def get_by_id(self, person_id: str) -> Person | None:
        key = self._ids.parse(person_id)
        with self._driver.session() as session:
            record = session.run(_GET_QUERY, id=key).single()
        if not record:
            return None
        return _record_to_person(record)

    def insert(self, name: str, number: str) -> Person:
        self._schema.validate(name=name, number=number)
        with self._driver.session() as session:
            record = session.run(
                _INSERT_QUERY,
                id=self._ids.new_id(),
                name=name,
                number=number,
                created_at=_now_iso(),
            ).single()
        if not record:
            raise RuntimeError("insert: expected one result")
        person = _record_to_person(record)
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
        with self._driver.session() as session:
            record = session.run(
                _UPDATE_QUERY,
                id=key,
                name=name,
                number=number,
                updated_at=_now_iso(),
            ).single()
        if not record:
            return None
        logger.debug("Updated person id=%s", key)
        return _record_to_person(record)

    def delete_by_id(self, person_id: str) -> bool:
        key = self._ids.parse(person_id)
        with self._driver.session() as session:
            record = session.run(_DELETE_QUERY, id=key).single()
        deleted = bool(record and record["deleted"])
        if deleted:
            logger.debug("Deleted person id=%s", key)
        return deleted

    def count(self) -> int:
        with self._driver.session() as session:
            record = session.run(_COUNT_QUERY).single()
        return record["cnt"] if record else 0


def _record_to_person(record) -> Person:
    p = record["p"]
    return Person(id=p["id"], name=p["name"], number=p["number"])
