"""
Phonebook core: clean-architecture layout.

- domain: the Person entity. No outer dependencies.
- application: write resolver, PersonService, ports (PersonRepository, IdGenerator), DTOs, errors.
- infrastructure: adapters (InMemoryPersonRepository, Neo4jPersonRepository), id strategies, schema.
"""

from phonebook.application import (
    Candidate,
    Insert,
    MalformedIdentifier,
    PersonCreated,
    PersonNotFound,
    PersonRepository,
    PersonService,
    PersonUpdated,
    PhonebookError,
    Rejected,
    StructuralValidationFailure,
    Update,
    resolve_write,
)
from phonebook.domain import Person
from phonebook.infrastructure import InMemoryPersonRepository, Neo4jPersonRepository

__all__ = [
    "Candidate",
    "InMemoryPersonRepository",
    "Insert",
    "MalformedIdentifier",
    "Neo4jPersonRepository",
    "Person",
    "PersonCreated",
    "PersonNotFound",
    "PersonRepository",
    "PersonService",
    "PersonUpdated",
    "PhonebookError",
    "Rejected",
    "StructuralValidationFailure",
    "Update",
    "resolve_write",
]
