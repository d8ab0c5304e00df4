"""Person listing, lookup, upsert, edit and removal over a PersonRepository."""

import logging

from phonebook.application.dto import (
    Candidate,
    Insert,
    PersonCreated,
    PersonNotFound,
    PersonUpdated,
    Rejected,
)
from phonebook.application.ports import PersonRepository
from phonebook.application.resolver import resolve_edit, resolve_write
from phonebook.domain import Person

logger = logging.getLogger(__name__)


class PersonService:
    """Reads a snapshot, asks the resolver for a decision, then performs the one write.

    Nothing guards the gap between snapshot and write: concurrent writers can
    still insert the same name twice or overwrite each other (last write wins).
    """

    def __init__(self, repository: PersonRepository) -> None:
        self._repo = repository

    def list_persons(self) -> list[Person]:
        return self._repo.list_all()

    def get_person(self, person_id: str) -> Person | None:
        return self._repo.get_by_id(person_id)

    def count_persons(self) -> int:
        return self._repo.count()

    def submit(
        self, candidate: Candidate
    ) -> PersonCreated | PersonUpdated | PersonNotFound | Rejected:
        """Create a person, or update the number of the person with the same name."""
        outcome = resolve_write(candidate, self._repo.list_all())
        if isinstance(outcome, Rejected):
            logger.info("Write rejected: %s", outcome.reason)
            return outcome
        if isinstance(outcome, Insert):
            person = self._repo.insert(candidate.name, candidate.number)
            logger.info("Added %s (id=%s)", person.name, person.id)
            return PersonCreated(person=person)

        updated = self._repo.update_by_id(
            outcome.person_id,
            name=outcome.candidate.name,
            number=outcome.candidate.number,
        )
        if updated is None:
            # Removed between the snapshot and the write.
            return PersonNotFound(person_id=outcome.person_id)
        logger.info("Updated number of %s (id=%s)", updated.name, updated.id)
        return PersonUpdated(person=updated)

    def edit(
        self,
        person_id: str,
        *,
        name: str | None = None,
        number: str | None = None,
    ) -> PersonUpdated | PersonNotFound | Rejected:
        """Overwrite the given fields of an existing person."""
        target = self._repo.get_by_id(person_id)
        if target is None:
            return PersonNotFound(person_id=person_id)

        outcome = resolve_edit(
            target, Candidate(name=name, number=number), self._repo.list_all()
        )
        if isinstance(outcome, Rejected):
            logger.info("Edit of %s rejected: %s", person_id, outcome.reason)
            return outcome

        updated = self._repo.update_by_id(
            target.id,
            name=outcome.candidate.name,
            number=outcome.candidate.number,
        )
        if updated is None:
            return PersonNotFound(person_id=person_id)
        return PersonUpdated(person=updated)

    def remove(self, person_id: str) -> bool:
        """Delete a person. Returns False if there was nothing to delete."""
        removed = self._repo.delete_by_id(person_id)
        if removed:
            logger.info("Removed person id=%s", person_id)
        return removed
