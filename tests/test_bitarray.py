import pytest
from hypothesis import given
from hypothesis import strategies as st

from gnomics.bitarray import BitArray


def test_new():
    ba = BitArray(1024)
    assert ba.num_bits() == 1024
    assert len(ba) == 1024
    assert ba.num_words() == 32
    assert ba.num_set() == 0


def test_num_words_rounds_up():
    assert BitArray(33).num_words() == 2
    assert BitArray(32).num_words() == 1
    assert BitArray(0).num_words() == 0


def test_set_get_bit():
    ba = BitArray(32)
    assert ba.get_bit(5) == 0
    ba.set_bit(5)
    assert ba.get_bit(5) == 1
    ba.clear_bit(5)
    assert ba.get_bit(5) == 0


def test_toggle_bit():
    ba = BitArray(32)
    ba.toggle_bit(7)
    assert ba.get_bit(7) == 1
    ba.toggle_bit(7)
    assert ba.get_bit(7) == 0


def test_assign_bit():
    ba = BitArray(32)
    ba.assign_bit(3, 1)
    assert ba.get_bit(3) == 1
    ba.assign_bit(3, 0)
    assert ba.get_bit(3) == 0
    ba.assign_bit(3, 7)
    assert ba.get_bit(3) == 1


@pytest.mark.parametrize("index", [32, 100, -1])
def test_bit_out_of_bounds(index):
    ba = BitArray(32)
    with pytest.raises(IndexError):
        ba.set_bit(index)
    with pytest.raises(IndexError):
        ba.get_bit(index)


def test_range_operations():
    ba = BitArray(32)
    ba.set_range(2, 8)
    assert ba.num_set() == 8
    assert ba.get_acts() == [2, 3, 4, 5, 6, 7, 8, 9]

    ba.clear_range(4, 4)
    assert ba.num_set() == 4
    assert ba.get_acts() == [2, 3, 8, 9]

    ba.toggle_range(2, 8)
    assert ba.get_acts() == [4, 5, 6, 7]


def test_range_out_of_bounds():
    ba = BitArray(32)
    with pytest.raises(IndexError):
        ba.set_range(30, 5)


def test_bulk_operations():
    ba = BitArray(32)
    ba.set_all()
    assert ba.num_set() == 32

    ba.clear_all()
    assert ba.num_set() == 0

    ba.set_bit(0)
    ba.set_bit(31)
    ba.toggle_all()
    assert ba.num_set() == 30


def test_toggle_all_respects_length():
    ba = BitArray(40)
    ba.toggle_all()
    assert ba.num_set() == 40
    assert ba.words() == [0xFFFFFFFF, 0xFF]


def test_set_acts():
    ba = BitArray(32)
    ba.set_acts([2, 4, 6, 8])
    assert ba.num_set() == 4
    assert ba.get_acts() == [2, 4, 6, 8]


def test_set_acts_ignores_out_of_range_and_clears_first():
    ba = BitArray(16)
    ba.set_bit(1)
    ba.set_acts([3, 16, 100])
    assert ba.get_acts() == [3]


def test_set_bits():
    ba = BitArray(8)
    ba.set_bits([0, 1, 0, 1, 0, 1, 0, 1])
    assert ba.get_acts() == [1, 3, 5, 7]


def test_set_bits_too_many_values():
    ba = BitArray(4)
    with pytest.raises(ValueError):
        ba.set_bits([1, 1, 1, 1, 1])


def test_get_bits():
    ba = BitArray(8)
    ba.set_acts([1, 3, 5, 7])
    assert ba.get_bits() == [0, 1, 0, 1, 0, 1, 0, 1]


def test_num_cleared():
    ba = BitArray(20)
    ba.set_range(0, 5)
    assert ba.num_cleared() == 15


def test_num_similar():
    ba0 = BitArray(32)
    ba1 = BitArray(32)
    ba0.set_range(4, 8)
    ba1.set_range(6, 10)
    assert ba0.num_similar(ba1) == 6


def test_num_similar_word_count_mismatch():
    with pytest.raises(ValueError):
        BitArray(32).num_similar(BitArray(64))


def test_bitwise_and():
    ba0 = BitArray(32)
    ba1 = BitArray(32)
    ba0.set_bit(2)
    ba0.set_bit(3)
    ba1.set_bit(1)
    ba1.set_bit(3)
    result = ba0 & ba1
    assert result.num_set() == 1
    assert result.get_acts() == [3]


def test_bitwise_or():
    ba0 = BitArray(32)
    ba1 = BitArray(32)
    ba0.set_bit(2)
    ba0.set_bit(3)
    ba1.set_bit(1)
    ba1.set_bit(3)
    result = ba0 | ba1
    assert result.num_set() == 3
    assert result.get_acts() == [1, 2, 3]


def test_bitwise_xor():
    ba0 = BitArray(32)
    ba1 = BitArray(32)
    ba0.set_bit(2)
    ba0.set_bit(3)
    ba1.set_bit(1)
    ba1.set_bit(3)
    result = ba0 ^ ba1
    assert result.num_set() == 2
    assert result.get_acts() == [1, 2]


def test_bitwise_not():
    ba = BitArray(32)
    ba.set_bit(2)
    ba.set_bit(3)
    result = ~ba
    assert result.num_set() == 30
    assert ba.num_set() == 2


def test_bitwise_size_mismatch():
    with pytest.raises(ValueError):
        BitArray(32) & BitArray(33)


def test_equality():
    ba0 = BitArray(32)
    ba1 = BitArray(32)
    ba0.set_bit(5)
    ba1.set_bit(5)
    assert ba0 == ba1
    ba1.set_bit(10)
    assert not ba0 == ba1


def test_equality_depends_on_length():
    assert not BitArray(32) == BitArray(33)


def test_copy_is_independent():
    ba = BitArray(16)
    ba.set_bit(4)
    dup = ba.copy()
    dup.set_bit(5)
    assert ba.get_acts() == [4]
    assert dup.get_acts() == [4, 5]


def test_words():
    ba = BitArray(64)
    ba.set_range(0, 4)
    ba.set_bit(32)
    assert ba.words() == [0xF, 0x1]


def test_set_words_places_data_at_offset():
    src = BitArray(128)
    dst = BitArray(256)
    src.set_range(0, 64)
    dst.set_words(2, src.words()[0:2])
    assert dst.words()[2] == src.words()[0]
    assert dst.words()[3] == src.words()[1]
    assert dst.get_acts() == list(range(64, 128))


def test_set_words_overwrites_region_only():
    ba = BitArray(96)
    ba.set_all()
    ba.set_words(1, [0])
    assert ba.words() == [0xFFFFFFFF, 0, 0xFFFFFFFF]


def test_set_words_masks_beyond_length():
    ba = BitArray(40)
    ba.set_words(1, [0xFFFFFFFF])
    assert ba.num_set() == 8


def test_set_words_out_of_bounds():
    ba = BitArray(64)
    with pytest.raises(IndexError):
        ba.set_words(1, [0, 0])


def test_resize():
    ba = BitArray(32)
    ba.set_all()
    assert ba.num_set() == 32
    ba.resize(64)
    assert ba.num_bits() == 64
    assert ba.num_set() == 0


def test_erase():
    ba = BitArray(32)
    ba.set_all()
    ba.erase()
    assert ba.num_bits() == 0
    assert ba.num_words() == 0


def test_memory_usage():
    ba = BitArray(1024)
    assert ba.memory_usage() >= 128


def test_repr_lists_acts():
    ba = BitArray(8)
    ba.set_acts([1, 6])
    assert repr(ba) == "BitArray(num_bits=8, acts=[1, 6])"


@given(st.integers(min_value=1, max_value=300).flatmap(
    lambda n: st.tuples(st.just(n), st.sets(st.integers(0, n - 1)))
))
def test_acts_round_trip(data):
    n, acts = data
    ba = BitArray(n)
    ba.set_acts(sorted(acts))
    assert ba.get_acts() == sorted(acts)
    assert ba.num_set() == len(acts)
    assert ba.num_set() + ba.num_cleared() == n


@given(st.lists(st.integers(0, 1), min_size=1, max_size=200))
def test_bits_round_trip(vals):
    ba = BitArray(len(vals))
    ba.set_bits(vals)
    assert ba.get_bits() == vals


@given(st.lists(st.integers(0, 1), min_size=1, max_size=200))
def test_words_round_trip(vals):
    ba = BitArray(len(vals))
    ba.set_bits(vals)
    other = BitArray(len(vals))
    other.set_words(0, ba.words())
    assert other == ba


@given(st.lists(st.integers(0, 1), min_size=1, max_size=200))
def test_double_invert_is_identity(vals):
    ba = BitArray(len(vals))
    ba.set_bits(vals)
    assert ~~ba == ba
    assert (ba & ~ba).num_set() == 0
    assert (ba | ~ba).num_set() == len(vals)