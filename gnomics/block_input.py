"""Block input that concatenates the outputs of child blocks."""

from __future__ import annotations

import itertools
import sys
import threading
from dataclasses import dataclass
from typing import Protocol

from gnomics.bitarray import BitArray
from gnomics.bitops import bitarray_copy_words

_id_lock = threading.Lock()
_next_id = itertools.count()


def _new_id() -> int:
    with _id_lock:
        return next(_next_id)


class ChildOutput(Protocol):
    """What a block input needs from a child's output history."""

    state: BitArray

    def num_t(self) -> int: ...

    def has_changed_at(self, time: int) -> bool: ...

    def get_bitarray(self, time: int) -> BitArray: ...


@dataclass(frozen=True)
class _Connection:
    child: ChildOutput
    time: int
    word_offset: int
    word_size: int


class BlockInput:
    """Concatenation of child outputs, copied lazily on ``pull``.

    Connecting a child only records where its words go; data is copied during
    ``pull`` and only for children whose output changed at the connected time.
    """

    __slots__ = ("state", "_connections", "_id")

    def __init__(self) -> None:
        self.state = BitArray(0)
        self._connections: list[_Connection] = []
        self._id = _new_id()

    def add_child(self, child: ChildOutput, time: int) -> None:
        """Connect ``child`` read ``time`` steps back (0 is the current step)."""
        num_t = child.num_t()
        if not 0 <= time < num_t:
            raise ValueError(
                f"time offset {time} out of bounds for child with num_t={num_t}"
            )
        if self._connections:
            last = self._connections[-1]
            word_offset = last.word_offset + last.word_size
        else:
            word_offset = 0
        self._connections.append(
            _Connection(child, time, word_offset, child.state.num_words())
        )
        self.state.resize(self.state.num_bits() + child.state.num_bits())

    def pull(self) -> None:
        """Copy the words of every changed child into ``state``."""
        for conn in self._connections:
            if not conn.child.has_changed_at(conn.time):
                continue
            bitarray_copy_words(
                self.state,
                conn.child.get_bitarray(conn.time),
                conn.word_offset,
                0,
                conn.word_size,
            )

    def children_changed(self) -> bool:
        """Whether any child changed at its connected time."""
        return any(conn.child.has_changed_at(conn.time) for conn in self._connections)

    def clear(self) -> None:
        """Set every bit of ``state`` to 0."""
        self.state.clear_all()

    def num_children(self) -> int:
        """Number of connected children."""
        return len(self._connections)

    def num_bits(self) -> int:
        """Total number of bits in the concatenated state."""
        return self.state.num_bits()

    @property
    def id(self) -> int:
        """Identifier unique to this instance."""
        return self._id

    def memory_usage(self) -> int:
        """Estimated memory footprint in bytes."""
        return (
            sys.getsizeof(self)
            + self.state.memory_usage()
            + sys.getsizeof(self._connections)
            + sum(sys.getsizeof(conn) for conn in self._connections)
        )

    def __repr__(self) -> str:
        return (
            f"BlockInput(id={self._id}, children={len(self._connections)}, "
            f"num_bits={self.state.num_bits()})"
        )