"""Sparse distributed representation building blocks: bit arrays, bit operations, block inputs and the block lifecycle."""

__version__ = "1.0.0"

__all__ = ["bitarray", "bitops", "block", "block_base", "block_input"]