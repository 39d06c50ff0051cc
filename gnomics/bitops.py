"""Searching, randomising and word-copying operations on bit arrays."""

from __future__ import annotations

import math
import random
from bisect import bisect_left

from gnomics.bitarray import BitArray


def _first_act_in(acts: list[int], lo: int, hi: int) -> int | None:
    pos = bisect_left(acts, lo)
    if pos < len(acts) and acts[pos] < hi:
        return acts[pos]
    return None


def find_next_set_bit_range(ba: BitArray, beg: int, length: int) -> int | None:
    """Return the first set bit in ``[beg, beg + length)``, wrapping past the end.

    Positions at or beyond the end of the array continue from bit 0.
    Returns ``None`` when no bit in the range is set.
    """
    n = ba.num_bits()
    if not 0 <= beg < n:
        raise IndexError(f"bit index {beg} out of bounds (length: {n})")
    if not 0 < length <= n:
        raise ValueError(f"range length must be in 1..={n}, got {length}")
    acts = ba.get_acts()
    end = beg + length
    if end <= n:
        return _first_act_in(acts, beg, end)
    found = _first_act_in(acts, beg, n)
    if found is not None:
        return found
    return _first_act_in(acts, 0, end - n)


def find_next_set_bit(ba: BitArray, beg: int) -> int | None:
    """Return the first set bit at or after ``beg``, or ``None`` if there is none."""
    n = ba.num_bits()
    if n == 0:
        return None
    if not 0 <= beg < n:
        raise IndexError(f"bit index {beg} out of bounds (length: {n})")
    return find_next_set_bit_range(ba, beg, n - beg)


def random_shuffle(ba: BitArray, rng: random.Random) -> None:
    """Randomly permute all bits of ``ba`` in place."""
    bits = ba.get_bits()
    rng.shuffle(bits)
    ba.set_bits(bits)


def random_set_num(ba: BitArray, rng: random.Random, num: int) -> None:
    """Clear ``ba`` and then set exactly ``num`` randomly chosen bits."""
    n = ba.num_bits()
    if not 0 <= num <= n:
        raise ValueError(f"cannot set {num} bits in an array of {n} bits")
    ba.set_acts(rng.sample(range(n), num))


def random_set_pct(ba: BitArray, rng: random.Random, pct: float) -> None:
    """Clear ``ba`` and set ``round(pct * num_bits)`` randomly chosen bits."""
    if not 0.0 <= pct <= 1.0:
        raise ValueError(f"pct must be in [0.0, 1.0], got {pct}")
    # Halves round away from zero.
    num = math.floor(ba.num_bits() * pct + 0.5)
    random_set_num(ba, rng, num)


def bitarray_copy_words(
    dst: BitArray,
    src: BitArray,
    dst_word_offset: int,
    src_word_offset: int,
    num_words: int,
) -> None:
    """Copy ``num_words`` 32-bit words from ``src`` into ``dst``."""
    if num_words < 0:
        raise ValueError(f"num_words must be >= 0, got {num_words}")
    src_end = src_word_offset + num_words
    if src_word_offset < 0 or src_end > src.num_words():
        raise IndexError(
            f"source words [{src_word_offset}, {src_end}) out of bounds "
            f"(word count: {src.num_words()})"
        )
    dst.set_words(dst_word_offset, src.words()[src_word_offset:src_end])