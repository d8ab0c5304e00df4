"""Write decisions for person records.

Pure functions over a snapshot of existing records: they return an outcome and
leave storing it to the caller. Checks run in a fixed order: a missing number
is reported before a missing name, so a candidate lacking both is rejected
with "number is missing".
"""

from collections.abc import Iterable

from phonebook.application.dto import Candidate, Insert, Rejected, Update
from phonebook.domain import Person

NUMBER_MISSING = "number is missing"
NAME_MISSING = "name is missing"
NOTHING_TO_UPDATE = "name or number is required"
NAME_NOT_UNIQUE = "name must be unique"


def _find_by_name(existing: Iterable[Person], name: str) -> Person | None:
    for person in existing:
        if person.name == name:
            return person
    return None


def resolve_write(
    candidate: Candidate, existing: Iterable[Person]
) -> Insert | Update | Rejected:
    """Decide whether a submitted name/number pair is inserted, updated or rejected.

    Names match exactly (case-sensitive, no trimming). A name that is already
    stored with a different number updates that record; the same name with the
    same number is rejected.
    """
    if not candidate.number:
        return Rejected(reason=NUMBER_MISSING)
    if not candidate.name:
        return Rejected(reason=NAME_MISSING)

    match = _find_by_name(existing, candidate.name)
    if match is None:
        return Insert(candidate=candidate)
    if match.number != candidate.number:
        return Update(person_id=match.id, candidate=candidate)
    return Rejected(
        reason=f"{candidate.name} is already added to phonebook with exact same number"
    )


def resolve_edit(
    target: Person, changes: Candidate, existing: Iterable[Person]
) -> Update | Rejected:
    """Decide a partial update of target. Fields left as None keep their value."""
    if changes.name is None and changes.number is None:
        return Rejected(reason=NOTHING_TO_UPDATE)
    if changes.number is not None and not changes.number:
        return Rejected(reason=NUMBER_MISSING)
    if changes.name is not None and not changes.name:
        return Rejected(reason=NAME_MISSING)

    merged = Candidate(
        name=changes.name if changes.name is not None else target.name,
        number=changes.number if changes.number is not None else target.number,
    )
    if merged.name != target.name:
        clash = _find_by_name(
            (p for p in existing if p.id != target.id), merged.name
        )
        if clash is not None:
            return Rejected(reason=NAME_NOT_UNIQUE)
    return Update(person_id=target.id, candidate=merged)
