"""Fixed-length bit array with 32-bit word-level access."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

BITS_PER_WORD = 32
BYTES_PER_WORD = BITS_PER_WORD // 8
WORD_MAX = (1 << BITS_PER_WORD) - 1


def _num_words_for(n: int) -> int:
    return (n + BITS_PER_WORD - 1) // BITS_PER_WORD


class BitArray:
    """A fixed number of bits, all zero on creation, indexed from 0.

    Bits are grouped into 32-bit words, least significant bit first, so bit
    ``b`` lives in word ``b // 32`` at position ``b % 32``.
    """

    __slots__ = ("_n", "_bits")

    def __init__(self, n: int = 0) -> None:
        if n < 0:
            raise ValueError(f"number of bits must be >= 0, got {n}")
        self._n = n
        self._bits = 0

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    def resize(self, n: int) -> None:
        """Change the size to ``n`` bits; every bit is cleared."""
        if n < 0:
            raise ValueError(f"number of bits must be >= 0, got {n}")
        self._n = n
        self._bits = 0

    def erase(self) -> None:
        """Drop all bits, leaving an empty array."""
        self._n = 0
        self._bits = 0

    def __len__(self) -> int:
        return self._n

    def num_bits(self) -> int:
        """Total number of bits."""
        return self._n

    def num_words(self) -> int:
        """Number of 32-bit words needed to hold the bits."""
        return _num_words_for(self._n)

    @property
    def _mask(self) -> int:
        return (1 << self._n) - 1

    def _check_index(self, b: int) -> None:
        if not 0 <= b < self._n:
            raise IndexError(f"bit index {b} out of bounds (length: {self._n})")

    def _range_mask(self, beg: int, length: int) -> int:
        if beg < 0 or length < 0 or beg + length > self._n:
            raise IndexError(
                f"range [{beg}, {beg + length}) out of bounds (length: {self._n})"
            )
        return ((1 << length) - 1) << beg

    # ------------------------------------------------------------------
    # Single bits
    # ------------------------------------------------------------------

    def set_bit(self, b: int) -> None:
        """Set bit ``b`` to 1."""
        self._check_index(b)
        self._bits |= 1 << b

    def get_bit(self, b: int) -> int:
        """Return bit ``b`` as 0 or 1."""
        self._check_index(b)
        return (self._bits >> b) & 1

    def clear_bit(self, b: int) -> None:
        """Set bit ``b`` to 0."""
        self._check_index(b)
        self._bits &= ~(1 << b)

    def toggle_bit(self, b: int) -> None:
        """Flip bit ``b``."""
        self._check_index(b)
        self._bits ^= 1 << b

    def assign_bit(self, b: int, val: int) -> None:
        """Set bit ``b`` to 1 if ``val`` is positive, otherwise to 0."""
        if val > 0:
            self.set_bit(b)
        else:
            self.clear_bit(b)

    # ------------------------------------------------------------------
    # Ranges
    # ------------------------------------------------------------------

    def set_range(self, beg: int, length: int) -> None:
        """Set bits ``[beg, beg + length)`` to 1."""
        self._bits |= self._range_mask(beg, length)

    def clear_range(self, beg: int, length: int) -> None:
        """Set bits ``[beg, beg + length)`` to 0."""
        self._bits &= ~self._range_mask(beg, length)

    def toggle_range(self, beg: int, length: int) -> None:
        """Flip bits ``[beg, beg + length)``."""
        self._bits ^= self._range_mask(beg, length)

    # ------------------------------------------------------------------
    # Whole array
    # ------------------------------------------------------------------

    def set_all(self) -> None:
        """Set every bit to 1."""
        self._bits = self._mask

    def clear_all(self) -> None:
        """Set every bit to 0."""
        self._bits = 0

    def toggle_all(self) -> None:
        """Flip every bit."""
        self._bits ^= self._mask

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def set_bits(self, vals: Sequence[int]) -> None:
        """Clear the array, then set bit ``i`` wherever ``vals[i] > 0``."""
        if len(vals) > self._n:
            raise ValueError(
                f"{len(vals)} values given for an array of {self._n} bits"
            )
        bits = 0
        for i, val in enumerate(vals):
            if val > 0:
                bits |= 1 << i
        self._bits = bits

    def set_acts(self, idxs: Iterable[int]) -> None:
        """Clear the array, then set the listed bits; out-of-range indices are ignored."""
        bits = 0
        for idx in idxs:
            if 0 <= idx < self._n:
                bits |= 1 << idx
        self._bits = bits

    def get_bits(self) -> list[int]:
        """Return every bit as a list of 0s and 1s."""
        return [(self._bits >> i) & 1 for i in range(self._n)]

    def _iter_acts(self) -> Iterator[int]:
        remaining = self._bits
        while remaining:
            lowest = remaining & -remaining
            yield lowest.bit_length() - 1
            remaining ^= lowest

    def get_acts(self) -> list[int]:
        """Return the indices of the set bits in ascending order."""
        return list(self._iter_acts())

    # ------------------------------------------------------------------
    # Counting
    # ------------------------------------------------------------------

    def num_set(self) -> int:
        """Number of bits that are 1."""
        return self._bits.bit_count()

    def num_cleared(self) -> int:
        """Number of bits that are 0."""
        return self._n - self.num_set()

    def num_similar(self, other: BitArray) -> int:
        """Number of bits set in both arrays."""
        if self.num_words() != other.num_words():
            raise ValueError("BitArrays must have same word count")
        return (self._bits & other._bits).bit_count()

    # ------------------------------------------------------------------
    # Word access
    # ------------------------------------------------------------------

    def words(self) -> list[int]:
        """Return the bits as a list of 32-bit words."""
        bits = self._bits
        return [
            (bits >> (i * BITS_PER_WORD)) & WORD_MAX for i in range(self.num_words())
        ]

    def set_words(self, offset: int, words: Sequence[int]) -> None:
        """Overwrite the words starting at word ``offset`` with ``words``."""
        count = len(words)
        if offset < 0 or offset + count > self.num_words():
            raise IndexError(
                f"words [{offset}, {offset + count}) out of bounds "
                f"(word count: {self.num_words()})"
            )
        if count == 0:
            return
        shift = offset * BITS_PER_WORD
        value = 0
        for i, word in enumerate(words):
            value |= (word & WORD_MAX) << (i * BITS_PER_WORD)
        region = ((1 << (count * BITS_PER_WORD)) - 1) << shift
        self._bits = ((self._bits & ~region) | (value << shift)) & self._mask

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    def memory_usage(self) -> int:
        """Estimated memory footprint in bytes."""
        return sys.getsizeof(self) + self.num_words() * BYTES_PER_WORD

    def copy(self) -> BitArray:
        """Return an independent copy."""
        result = BitArray(self._n)
        result._bits = self._bits
        return result

    def __copy__(self) -> BitArray:
        return self.copy()

    def _binary(self, other: object, op) -> BitArray:
        if not isinstance(other, BitArray):
            return NotImplemented
        if self._n != other._n:
            raise ValueError("BitArrays must have same size")
        result = BitArray(self._n)
        result._bits = op(self._bits, other._bits) & self._mask
        return result

    def __and__(self, other: object) -> BitArray:
        return self._binary(other, lambda a, b: a & b)

    def __or__(self, other: object) -> BitArray:
        return self._binary(other, lambda a, b: a | b)

    def __xor__(self, other: object) -> BitArray:
        return self._binary(other, lambda a, b: a ^ b)

    def __invert__(self) -> BitArray:
        result = self.copy()
        result.toggle_all()
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitArray):
            return NotImplemented
        return self._n == other._n and self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BitArray(num_bits={self._n}, acts={self.get_acts()})"