"""Process-wide unique token generation for launch names."""

from __future__ import annotations

import itertools
import secrets
import threading
from collections.abc import Callable

TokenGenerator = Callable[[], str]

_PREFIX_BITS = 53


class UniqueTokenGenerator:  # pylint: disable=too-few-public-methods
    """Thread-safe generator of ``<random prefix>-<counter>`` tokens.

    The prefix is drawn once per generator; the counter never repeats, so
    tokens stay unique for the generator's lifetime without remembering them.
    """

    def __init__(self, prefix: int | None = None) -> None:
        self._prefix = secrets.randbits(_PREFIX_BITS) if prefix is None else prefix
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            sequence = next(self._counter)
        return f"{self._prefix}-{sequence}"


_DEFAULT_GENERATOR = UniqueTokenGenerator()


def generate_unique_token() -> str:
    """Return a token not issued before by this process."""
    return _DEFAULT_GENERATOR()
