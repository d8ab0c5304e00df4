"""Domain entity: Person."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    """
    A phonebook entry. The id is assigned by the store and never changes;
    name and number may be overwritten in place.
    """

    id: str
    name: str
    number: str

    def __post_init__(self):
        if not self.id:
            raise ValueError("Person id must be non-empty.")
        if not self.name:
            raise ValueError("Person name must be non-empty.")
        if not self.number:
            raise ValueError("Person number must be non-empty.")

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "number": self.number}
