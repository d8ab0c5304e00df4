"""Field constraints the stores enforce on every write."""

from dataclasses import dataclass

from phonebook.application.errors import StructuralValidationFailure

NAME_MIN_LENGTH = 3
NUMBER_MIN_LENGTH = 6


@dataclass(frozen=True)
class PersonSchema:
    name_min_length: int = NAME_MIN_LENGTH
    number_min_length: int = NUMBER_MIN_LENGTH

    def validate(self, *, name: str | None = None, number: str | None = None) -> None:
        """Check the given fields; None means the field is not being written."""
        if name is not None:
            self._check("name", name, self.name_min_length)
        if number is not None:
            self._check("number", number, self.number_min_length)

    @staticmethod
    def _check(field: str, value: str, min_length: int) -> None:
        if not isinstance(value, str):
            raise StructuralValidationFailure(
                f"Person validation failed: {field}: must be text", field=field
            )
        if len(value) < min_length:
            raise StructuralValidationFailure(
                f"Person validation failed: {field}: `{value}` is shorter than "
                f"the minimum allowed length ({min_length})",
                field=field,
            )
