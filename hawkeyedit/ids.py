"""Node identifiers and their textual (UUID) form."""

from __future__ import annotations

import random
import uuid

#: Every node identifier is a multiple of this stride, so the block of
#: identifiers following a node id is free for that node's pins.
ID_STRIDE_BITS = 6
ID_STRIDE = 1 << ID_STRIDE_BITS

_RANDOM_BITS = 56
_UUID_LIMIT = 1 << 128


class IdProvider:
    """Hands out unique node identifiers, each followed by a free block for pins."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)
        self._issued: set[int] = set()

    def next(self) -> int:
        """Return a fresh identifier never returned before by this provider."""
        while True:
            number = self._random.randrange(1, 1 << _RANDOM_BITS) << ID_STRIDE_BITS
            if number not in self._issued:
                self._issued.add(number)
                return number


def number_to_uuid_string(number: int) -> str:
    """Format an identifier as a canonical hyphenated UUID string."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"identifier must be an integer, not {type(number).__name__}")
    if not 0 <= number < _UUID_LIMIT:
        raise ValueError(f"identifier {number} does not fit in 128 bits")
    return str(uuid.UUID(int=number))


def uuid_string_to_number(text: str) -> int:
    """Parse a UUID string back into the identifier it encodes."""
    if not isinstance(text, str):
        raise TypeError(f"UUID must be a string, not {type(text).__name__}")
    try:
        return uuid.UUID(text).int
    except ValueError as exc:
        raise ValueError(f"not a valid UUID string: {text!r}") from exc