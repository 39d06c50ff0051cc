# gnomics

Building blocks for computational neuroscience models based on sparse
distributed representations. The package has no dependencies beyond the
standard library.

## Modules

- `gnomics.bitarray.BitArray`: a fixed-length bit array, all zero on
  creation. It offers single-bit operations (`set_bit`, `get_bit`,
  `clear_bit`, `toggle_bit`, `assign_bit`), range operations (`set_range`,
  `clear_range`, `toggle_range`), whole-array operations (`set_all`,
  `clear_all`, `toggle_all`, `resize`, `erase`), conversions (`set_bits`,
  `get_bits`, `set_acts`, `get_acts`), counting (`num_set`, `num_cleared`,
  `num_similar`) and the operators `&`, `|`, `^`, `~` and `==`. Bits are
  grouped into 32-bit words, least significant bit first; `words()` reads
  them and `set_words(offset, words)` overwrites them. Out-of-range bit
  indices raise `IndexError`; arrays of different sizes in a binary operation
  raise `ValueError`.
- `gnomics.bitops`: functions on bit arrays. `find_next_set_bit` and
  `find_next_set_bit_range` search for a set bit, wrapping past the end and
  returning `None` when nothing is found. `random_shuffle`, `random_set_num`
  and `random_set_pct` take a `random.Random` so results are reproducible.
  `bitarray_copy_words` copies whole words from one array into another.
- `gnomics.block_base.BlockBase`: state shared by blocks: a unique `id`, an
  `initialized` flag that can be set, and `rng`, a `random.Random` seeded
  from the constructor argument.
- `gnomics.block.Block`: an abstract base class for computational blocks,
  with the lifecycle `init`, `step`, `pull`, `compute`, `store`, `learn`,
  `clear`, `save`, `load`, `memory_usage` and `output`. `execute(learn_flag)`
  runs step → pull → compute → store, then `learn` when `learn_flag` is true.
  `init` and `learn` do nothing by default; the rest must be provided.
- `gnomics.block_input.BlockInput`: joins the outputs of child blocks into
  one `state` bit array. `add_child(child, time)` records only where the
  child's words go; `pull()` copies only children whose output changed at the
  connected time, and `children_changed()` tells a block whether it may skip
  its computation. A time offset outside the child's history raises
  `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from gnomics.bitarray import BitArray

ba = BitArray(1024)
ba.set_bit(5)
ba.set_bit(10)
assert ba.num_set() == 2
assert ba.get_acts() == [5, 10]

other = BitArray(1024)
other.set_range(8, 4)
assert (ba & other).get_acts() == [10]
assert ba.num_similar(other) == 1
```

```python
import random

from gnomics.bitarray import BitArray
from gnomics.bitops import random_set_num

ba = BitArray(1024)
random_set_num(ba, random.Random(0), 100)
assert ba.num_set() == 100
```

A child connected to a `BlockInput` must have a `state` bit array and the
methods `num_t()`, `has_changed_at(time)` and `get_bitarray(time)`:

```python
from gnomics.bitarray import BitArray
from gnomics.block_input import BlockInput


class FixedOutput:
    def __init__(self, num_bits):
        self.state = BitArray(num_bits)
        self.changed = True

    def num_t(self):
        return 2

    def has_changed_at(self, time):
        return self.changed

    def get_bitarray(self, time):
        return self.state


child = FixedOutput(32)
child.state.set_bit(5)

block_input = BlockInput()
block_input.add_child(child, 0)
block_input.pull()
assert block_input.state.get_acts() == [5]
```

## What the package does not do

The package provides no output-history class: anything passed to
`BlockInput.add_child` must supply its own history and change tracking, as
in the example above. It contains no concrete blocks (encoders, poolers,
classifiers or learners); `Block` only defines the lifecycle, and `save` and
`load` are left for subclasses to implement, so there is no built-in storage
format. There is no command-line program.