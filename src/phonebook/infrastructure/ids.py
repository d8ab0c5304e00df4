"""Id strategies for person records: sequential integers or UUID4 strings."""

import itertools
import uuid

from phonebook.application.errors import MalformedIdentifier

# Longer digit strings cannot come from a counter and are refused as malformed.
MAX_SEQUENTIAL_ID_DIGITS = 19


class SequentialIdGenerator:
    """Issues "1", "2", ... from start. Accepts positive decimal integers in canonical form."""

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("start must be a positive integer")
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return str(next(self._counter))

    def parse(self, raw_id: str) -> str:
        """Return raw_id unchanged if it is a canonical id; "01" is not an alias of "1"."""
        raw = str(raw_id)
        if (
            not raw.isascii()
            or not raw.isdigit()
            or raw.startswith("0")
            or len(raw) > MAX_SEQUENTIAL_ID_DIGITS
        ):
            raise MalformedIdentifier(raw_id)
        return raw


class UuidIdGenerator:
    """Issues random UUID4 strings. Accepts any UUID, normalized to canonical form."""

    def new_id(self) -> str:
        return str(uuid.uuid4())

    def parse(self, raw_id: str) -> str:
        try:
            return str(uuid.UUID(str(raw_id)))
        except ValueError as e:
            raise MalformedIdentifier(raw_id) from e
