"""Domain layer: the Person entity. No dependencies on outer layers."""

from phonebook.domain.entities import Person

__all__ = ["Person"]
