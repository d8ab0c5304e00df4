"""Application layer: resolver, service, ports, DTOs and errors. Depends only on domain."""

from phonebook.application.dto import (
    Candidate,
    Insert,
    PersonCreated,
    PersonNotFound,
    PersonUpdated,
    Rejected,
    Update,
)
from phonebook.application.errors import (
    MalformedIdentifier,
    PhonebookError,
    StructuralValidationFailure,
)
from phonebook.application.person_service import PersonService
from phonebook.application.ports import IdGenerator, PersonRepository
from phonebook.application.resolver import resolve_edit, resolve_write

__all__ = [
    "Candidate",
    "IdGenerator",
    "Insert",
    "MalformedIdentifier",
    "PersonCreated",
    "PersonNotFound",
    "PersonRepository",
    "PersonService",
    "PersonUpdated",
    "PhonebookError",
    "Rejected",
    "StructuralValidationFailure",
    "Update",
    "resolve_edit",
    "resolve_write",
]
