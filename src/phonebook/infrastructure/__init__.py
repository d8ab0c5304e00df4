"""Infrastructure layer: concrete implementations of application ports."""

from phonebook.infrastructure.ids import SequentialIdGenerator, UuidIdGenerator
from phonebook.infrastructure.memory_repository import (
    SAMPLE_PEOPLE,
    InMemoryPersonRepository,
)
from phonebook.infrastructure.persistence.neo4j_repository import (
    Neo4jPersonRepository,
    ensure_person_constraint,
)
from phonebook.infrastructure.schema import PersonSchema

__all__ = [
    "SAMPLE_PEOPLE",
    "InMemoryPersonRepository",
    "Neo4jPersonRepository",
    "PersonSchema",
    "SequentialIdGenerator",
    "UuidIdGenerator",
    "ensure_person_constraint",
]
