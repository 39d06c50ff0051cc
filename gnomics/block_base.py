"""State common to every block: identity, initialisation flag and RNG."""

from __future__ import annotations

import itertools
import random
import threading

_id_lock = threading.Lock()
_next_id = itertools.count()


def _new_id() -> int:
    with _id_lock:
        return next(_next_id)


class BlockBase:
    """Unique id, initialisation flag and a seeded random number generator."""

    __slots__ = ("_id", "_initialized", "_rng")

    def __init__(self, seed: int) -> None:
        self._id = _new_id()
        self._initialized = False
        self._rng = random.Random(seed)

    @property
    def id(self) -> int:
        """Identifier unique to this instance."""
        return self._id

    @property
    def initialized(self) -> bool:
        """Whether the owning block has been initialised."""
        return self._initialized

    @initialized.setter
    def initialized(self, flag: bool) -> None:
        self._initialized = bool(flag)

    @property
    def rng(self) -> random.Random:
        """The seeded random number generator."""
        return self._rng

    def __repr__(self) -> str:
        return f"BlockBase(id={self._id}, initialized={self._initialized})"