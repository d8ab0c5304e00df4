"""Unit tests for PersonService. In-memory repo only."""

import pytest

from phonebook.application import (
    Candidate,
    MalformedIdentifier,
    PersonCreated,
    PersonNotFound,
    PersonService,
    PersonUpdated,
    Rejected,
    StructuralValidationFailure,
)
from phonebook.domain import Person
from phonebook.infrastructure import InMemoryPersonRepository

ARTO = Person(id="1", name="Arto Hellas", number="040-123456")


def _service(*seed: Person) -> PersonService:
    return PersonService(repository=InMemoryPersonRepository(seed))


def test_new_name_creates_person_with_fresh_id() -> None:
    service = _service(ARTO)
    result = service.submit(Candidate(name="Ada Lovelace", number="39-44-5323523"))
    assert isinstance(result, PersonCreated)
    assert result.person.name == "Ada Lovelace"
    assert result.person.id != "1"

    listed = service.list_persons()
    assert len(listed) == 2
    assert len({p.id for p in listed}) == 2
    assert service.count_persons() == 2


def test_existing_name_new_number_updates_in_place() -> None:
    service = _service(ARTO)
    result = service.submit(Candidate(name="Arto Hellas", number="111-111"))
    assert isinstance(result, PersonUpdated)
    assert result.person == Person(id="1", name="Arto Hellas", number="111-111")
    assert service.list_persons() == [result.person]


def test_identical_submission_rejected_without_mutation() -> None:
    service = _service(ARTO)
    result = service.submit(Candidate(name="Arto Hellas", number="040-123456"))
    assert isinstance(result, Rejected)
    assert result.reason == "Arto Hellas is already added to phonebook with exact same number"
    assert service.list_persons() == [ARTO]


def test_missing_number_rejected() -> None:
    service = _service()
    result = service.submit(Candidate(name="X"))
    assert result == Rejected(reason="number is missing")
    assert service.count_persons() == 0


def test_schema_failure_propagates() -> None:
    service = _service()
    with pytest.raises(StructuralValidationFailure) as exc:
        service.submit(Candidate(name="Al", number="040-123456"))
    assert exc.value.field == "name"
    assert service.count_persons() == 0


def test_get_person() -> None:
    service = _service(ARTO)
    assert service.get_person("1") == ARTO
    assert service.get_person("99") is None


def test_get_person_malformed_id_raises() -> None:
    service = _service(ARTO)
    with pytest.raises(MalformedIdentifier):
        service.get_person("not-an-id")


def test_edit_updates_number() -> None:
    service = _service(ARTO)
    result = service.edit("1", number="050-7654321")
    assert isinstance(result, PersonUpdated)
    assert result.person.number == "050-7654321"
    assert result.person.name == "Arto Hellas"
    assert service.get_person("1").number == "050-7654321"


def test_edit_unknown_person_not_found() -> None:
    service = _service(ARTO)
    result = service.edit("42", number="050-7654321")
    assert result == PersonNotFound(person_id="42")


def test_edit_rename_clash_rejected() -> None:
    service = _service(ARTO, Person(id="2", name="Ada Lovelace", number="39-44-5323523"))
    result = service.edit("2", name="Arto Hellas")
    assert result == Rejected(reason="name must be unique")
    assert service.get_person("2").name == "Ada Lovelace"


def test_remove_is_idempotent() -> None:
    service = _service(ARTO)
    assert service.remove("1") is True
    assert service.remove("1") is False
    assert service.remove("1") is False
    assert service.count_persons() == 0


def test_deleted_id_not_reused() -> None:
    service = _service()
    first = service.submit(Candidate(name="Ada Lovelace", number="39-44-5323523"))
    assert isinstance(first, PersonCreated)
    service.remove(first.person.id)

    second = service.submit(Candidate(name="Ada Lovelace", number="39-44-5323523"))
    assert isinstance(second, PersonCreated)
    assert second.person.id != first.person.id


def test_update_target_vanished_reports_not_found() -> None:
    """If the matched record is deleted between snapshot and write, nothing is created."""

    class VanishingRepository(InMemoryPersonRepository):
        def update_by_id(self, person_id, *, name=None, number=None):
            self.delete_by_id(person_id)
            return super().update_by_id(person_id, name=name, number=number)

    service = PersonService(VanishingRepository([ARTO]))
    result = service.submit(Candidate(name="Arto Hellas", number="111-111"))
    assert result == PersonNotFound(person_id="1")
    assert service.count_persons() == 0
