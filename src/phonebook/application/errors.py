"""Store-level errors. Resolver rejections are values, not exceptions."""


class PhonebookError(Exception):
    """Base class for errors raised by person repositories."""


class MalformedIdentifier(PhonebookError):
    """The id does not match the store's identifier format."""

    def __init__(self, raw_id: object) -> None:
        super().__init__(f"malformatted id: {raw_id!r}")
        self.raw_id = raw_id


class StructuralValidationFailure(PhonebookError):
    """The store refused a write because a field breaks its schema."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
