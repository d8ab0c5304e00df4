"""Tests for InMemoryPersonRepository, id strategies and the field schema."""

import uuid

import pytest

from phonebook.application import MalformedIdentifier, StructuralValidationFailure
from phonebook.domain import Person
from phonebook.infrastructure import (
    SAMPLE_PEOPLE,
    InMemoryPersonRepository,
    PersonSchema,
    SequentialIdGenerator,
    UuidIdGenerator,
)


def test_insert_list_get_preserve_order() -> None:
    repo = InMemoryPersonRepository()
    first = repo.insert("Arto Hellas", "040-123456")
    second = repo.insert("Ada Lovelace", "39-44-5323523")
    assert (first.id, second.id) == ("1", "2")
    assert repo.list_all() == [first, second]
    assert repo.get_by_id("2") == second
    assert repo.count() == 2


def test_seeded_ids_are_skipped_by_generator() -> None:
    repo = InMemoryPersonRepository(SAMPLE_PEOPLE)
    assert repo.count() == 4
    created = repo.insert("Grace Hopper", "555-0100")
    assert created.id == "5"


def test_duplicate_seed_ids_refused() -> None:
    with pytest.raises(ValueError):
        InMemoryPersonRepository(
            [
                Person(id="1", name="Arto Hellas", number="040-123456"),
                Person(id="1", name="Ada Lovelace", number="39-44-5323523"),
            ]
        )


def test_update_by_id_partial_and_missing() -> None:
    repo = InMemoryPersonRepository(SAMPLE_PEOPLE)
    updated = repo.update_by_id("1", number="111-111")
    assert updated == Person(id="1", name="Arto Hellas", number="111-111")
    assert repo.list_all()[0] == updated
    assert repo.update_by_id("99", number="111-111") is None


def test_delete_by_id() -> None:
    repo = InMemoryPersonRepository(SAMPLE_PEOPLE)
    assert repo.delete_by_id("2") is True
    assert repo.delete_by_id("2") is False
    assert [p.id for p in repo.list_all()] == ["1", "3", "4"]


def test_malformed_ids_raise() -> None:
    repo = InMemoryPersonRepository(SAMPLE_PEOPLE)
    for raw in ("abc", "-1", "0", "1.5", ""):
        with pytest.raises(MalformedIdentifier):
            repo.get_by_id(raw)
    with pytest.raises(MalformedIdentifier):
        repo.delete_by_id("abc")
    with pytest.raises(MalformedIdentifier):
        repo.update_by_id("abc", number="111-111")


def test_very_long_numeric_id_is_malformed() -> None:
    repo = InMemoryPersonRepository(SAMPLE_PEOPLE)
    huge = "9" * 5000
    with pytest.raises(MalformedIdentifier):
        repo.get_by_id(huge)
    with pytest.raises(MalformedIdentifier):
        repo.update_by_id(huge, number="111-111")
    with pytest.raises(MalformedIdentifier):
        repo.delete_by_id(huge)


def test_leading_zero_ids_are_malformed() -> None:
    repo = InMemoryPersonRepository(SAMPLE_PEOPLE)
    for raw in ("01", "001", "00"):
        with pytest.raises(MalformedIdentifier):
            repo.get_by_id(raw)
    assert repo.get_by_id("1").name == "Arto Hellas"


def test_schema_rejects_short_fields() -> None:
    repo = InMemoryPersonRepository()
    with pytest.raises(StructuralValidationFailure) as exc:
        repo.insert("Ab", "040-123456")
    assert exc.value.field == "name"
    assert "shorter than the minimum allowed length (3)" in exc.value.message

    with pytest.raises(StructuralValidationFailure) as exc:
        repo.insert("Arto Hellas", "123")
    assert exc.value.field == "number"
    assert repo.count() == 0


def test_custom_schema() -> None:
    repo = InMemoryPersonRepository(schema=PersonSchema(name_min_length=1, number_min_length=1))
    assert repo.insert("X", "1").name == "X"


def test_sequential_generator_parse() -> None:
    ids = SequentialIdGenerator()
    assert ids.parse("7") == "7"
    assert ids.parse("120") == "120"
    with pytest.raises(MalformedIdentifier):
        ids.parse("007")
    assert ids.parse("9" * 19) == "9" * 19
    with pytest.raises(MalformedIdentifier):
        ids.parse("9" * 20)
    assert [ids.new_id(), ids.new_id()] == ["1", "2"]
    with pytest.raises(ValueError):
        SequentialIdGenerator(start=0)


def test_uuid_generator() -> None:
    ids = UuidIdGenerator()
    new = ids.new_id()
    assert uuid.UUID(new).version == 4
    assert ids.parse(new.upper()) == new
    with pytest.raises(MalformedIdentifier):
        ids.parse("5c41c90e84d891c15dfa3431")


def test_repository_with_uuid_ids() -> None:
    repo = InMemoryPersonRepository(id_generator=UuidIdGenerator())
    person = repo.insert("Arto Hellas", "040-123456")
    assert repo.get_by_id(person.id) == person
    with pytest.raises(MalformedIdentifier):
        repo.get_by_id("1")
