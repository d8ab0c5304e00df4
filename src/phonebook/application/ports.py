"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from phonebook.domain import Person


class IdGenerator(Protocol):
    """Produces record ids and checks raw ids against the same format."""

    def new_id(self) -> str:
        """Return an id that has not been produced before."""
        ...

    def parse(self, raw_id: str) -> str:
        """Return the canonical form of raw_id. Raises MalformedIdentifier."""
        ...


class PersonRepository(Protocol):
    """Persists person records keyed by a store-assigned id.

    Id-taking methods raise MalformedIdentifier for ids of the wrong shape;
    writes raise StructuralValidationFailure for fields the schema refuses.
    """

    def list_all(self) -> list[Person]:
        """Return all records in insertion order."""
        ...

    def get_by_id(self, person_id: str) -> Person | None:
        """Return the record with the given id, or None."""
        ...

    def insert(self, name: str, number: str) -> Person:
        """Store a new record under a fresh id and return it."""
        ...

    def update_by_id(
        self,
        person_id: str,
        *,
        name: str | None = None,
        number: str | None = None,
    ) -> Person | None:
        """Overwrite the given fields. Returns the updated record, or None if absent."""
        ...

    def delete_by_id(self, person_id: str) -> bool:
        """Remove the record. Returns True if one was removed; absence is not an error."""
        ...

    def count(self) -> int:
        """Return the number of stored records."""
        ...
