"""Application DTOs: write candidates, resolver outcomes and service results."""

from dataclasses import dataclass

from phonebook.domain import Person


@dataclass(frozen=True)
class Candidate:
    """Name/number pair submitted by a client, not yet validated."""

    name: str | None = None
    number: str | None = None


@dataclass(frozen=True)
class Insert:
    """No record carries the candidate's name: store it under a fresh id."""

    candidate: Candidate


@dataclass(frozen=True)
class Update:
    """Overwrite the record with person_id in place; its id is kept."""

    person_id: str
    candidate: Candidate


@dataclass(frozen=True)
class Rejected:
    reason: str


@dataclass(frozen=True)
class PersonCreated:
    person: Person


@dataclass(frozen=True)
class PersonUpdated:
    person: Person


@dataclass(frozen=True)
class PersonNotFound:
    person_id: str
