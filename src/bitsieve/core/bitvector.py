"""Packed bit vector stored in fixed-width machine words.

A BitVector holds one flag per bit. Bit ``i`` lives in word ``i >> shift`` at
position ``i & mask``, where the (mask, shift) pair comes from the word width
chosen at construction time:

    width   mask    shift   storage
    16      0xF     4       uint16
    32      0x1F    5       uint32
    64      0x3F    6       uint64
    128     0x7F    7       Python int (numpy has no uint128)

Capacity is always a whole number of words, so ``size()`` can exceed the
number of bits requested by up to ``width - 1``.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from bitsieve.core.errors import IndexOutOfRange


@dataclass(frozen=True)
class WordLayout:
    """Index arithmetic for one storage word width.

    Attributes:
        bits: Word width in bits.
        mask: Selects the bit-within-word part of an index.
        shift: Converts a bit index to a word index.
        dtype: numpy dtype of the backing array.
        full: Word value with every bit set.
    """

    bits: int
    mask: int
    shift: int
    dtype: np.dtype
    full: int

    @property
    def word_bytes(self) -> int:
        return self.bits >> 3


def _make_layout(bits: int, dtype: np.dtype) -> WordLayout:
    shift = bits.bit_length() - 1
    return WordLayout(
        bits=bits,
        mask=bits - 1,
        shift=shift,
        dtype=dtype,
        full=(1 << bits) - 1,
    )


WORD_LAYOUTS: dict[int, WordLayout] = {
    16: _make_layout(16, np.dtype("<u2")),
    32: _make_layout(32, np.dtype("<u4")),
    64: _make_layout(64, np.dtype("<u8")),
    128: _make_layout(128, np.dtype(object)),
}

NATIVE_WORD_BITS = np.dtype(np.intp).itemsize * 8


def word_layout(bits: int | None = None) -> WordLayout:
    """Look up the layout for a word width.

    Args:
        bits: Word width (16, 32, 64 or 128). None selects the native width.

    Returns:
        The matching WordLayout.

    Raises:
        ValueError: If the width is not supported.
    """
    if bits is None:
        bits = NATIVE_WORD_BITS
    try:
        return WORD_LAYOUTS[bits]
    except KeyError:
        raise ValueError(
            f"Unsupported word width: {bits}. Available: {sorted(WORD_LAYOUTS)}"
        ) from None


class BitVector:
    """Resizable array of 0/1 values packed into machine words.

    Args:
        size: Number of bits to hold. Rounded up to whole words; all bits
            start at 0.
        word_bits: Storage word width. Defaults to the native pointer width.
    """

    def __init__(self, size: int = 0, word_bits: int | None = None):
        self._layout = word_layout(word_bits)
        self._words = self._allocate(self._words_for(_check_size(size)))

    def _words_for(self, size: int) -> int:
        return (size + self._layout.mask) >> self._layout.shift

    def _allocate(self, n_words: int) -> np.ndarray:
        return np.zeros(n_words, dtype=self._layout.dtype)

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if index < 0 or index >= self.size():
            raise IndexOutOfRange(
                f"bit index {index} out of range (size: {self.size()})"
            )
        return index

    @property
    def layout(self) -> WordLayout:
        return self._layout

    @property
    def word_bits(self) -> int:
        return self._layout.bits

    @property
    def word_count(self) -> int:
        return len(self._words)

    def size(self) -> int:
        """Return the bit capacity (word count times word width)."""
        return len(self._words) << self._layout.shift

    def resize(self, new_size: int) -> int:
        """Change capacity, keeping existing bits where possible.

        Words present both before and after are copied; new words start at
        zero. If the word count does not change the storage is left untouched.

        Args:
            new_size: Number of bits to hold.

        Returns:
            The new capacity, which may exceed new_size.
        """
        n_words = self._words_for(_check_size(new_size))
        old = self._words
        if n_words == len(old):
            return self.size()

        words = self._allocate(n_words)
        keep = min(n_words, len(old))
        words[:keep] = old[:keep]
        self._words = words
        return self.size()

    def clear(self) -> None:
        """Set every bit to 0."""
        self._words.fill(0)

    def set_all(self) -> None:
        """Set every bit to 1, padding bits in the last word included."""
        self._words.fill(self._layout.full)

    def exists(self, index: int) -> bool:
        return 0 <= operator.index(index) < self.size()

    def get(self, index: int) -> int:
        """Return the bit at index as 0 or 1.

        Raises:
            IndexOutOfRange: If index is negative or >= size().
        """
        index = self._check_index(index)
        word = int(self._words[index >> self._layout.shift])
        return (word >> (index & self._layout.mask)) & 1

    def set(self, index: int, value: object = 1) -> None:
        """Set the bit at index to 1, or to 0 when value is falsy.

        Raises:
            IndexOutOfRange: If index is negative or >= size().
        """
        if not value:
            self.unset(index)
            return
        index = self._check_index(index)
        w = index >> self._layout.shift
        self._words[w] = int(self._words[w]) | (1 << (index & self._layout.mask))

    def unset(self, index: int) -> None:
        """Zero the bit at index. The position itself stays addressable.

        Raises:
            IndexOutOfRange: If index is negative or >= size().
        """
        index = self._check_index(index)
        w = index >> self._layout.shift
        self._words[w] = int(self._words[w]) & ~(1 << (index & self._layout.mask))

    def flip(self, index: int) -> None:
        """Toggle the bit at index.

        Raises:
            IndexOutOfRange: If index is negative or >= size().
        """
        index = self._check_index(index)
        w = index >> self._layout.shift
        self._words[w] = int(self._words[w]) ^ (1 << (index & self._layout.mask))

    def _raw_bytes(self) -> bytes:
        if self._layout.dtype.kind == "O":
            nbytes = self._layout.word_bytes
            return b"".join(int(w).to_bytes(nbytes, "little") for w in self._words)
        return self._words.tobytes()

    def to_numpy(self) -> np.ndarray:
        """Unpack into a boolean array of length size(), bit i at position i."""
        raw = np.frombuffer(self._raw_bytes(), dtype=np.uint8)
        return np.unpackbits(raw, bitorder="little").astype(bool)

    def count(self) -> int:
        """Number of bits set to 1."""
        return int(self.to_numpy().sum())

    def iterator(self) -> BitVectorIterator:
        return BitVectorIterator(self)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> BitVectorIterator:
        return self.iterator()

    def __getitem__(self, index: int) -> int:
        return self.get(index)

    def __setitem__(self, index: int, value: object) -> None:
        self.set(index, value)

    def __repr__(self) -> str:
        return (
            f"BitVector(size={self.size()}, word_bits={self.word_bits}, "
            f"set={self.count()})"
        )


class BitVectorIterator:
    """Seekable cursor over a BitVector.

    Iterating yields bit values from position 0 up to ``size() - 1``. Starting
    a new ``for`` loop rewinds the cursor. Reads and writes go through the
    vector, so they follow the same bounds rules as direct access.
    """

    def __init__(self, vector: BitVector):
        self._vector = vector
        self._pos = 0

    def rewind(self) -> None:
        self._pos = 0

    def valid(self) -> bool:
        return self._pos < self._vector.size()

    def key(self) -> int:
        return self._pos

    def current(self) -> int:
        return self._vector.get(self._pos)

    def seek(self, position: int) -> None:
        """Move the cursor to position.

        Raises:
            IndexOutOfRange: If position is not within [0, size()).
        """
        position = operator.index(position)
        if position < 0 or position >= self._vector.size():
            raise IndexOutOfRange(f"Seek to illegal index {position}")
        self._pos = position

    def exists(self, index: int) -> bool:
        return self._vector.exists(index)

    def get(self, index: int) -> int:
        return self._vector.get(index)

    def set(self, index: int, value: object = 1) -> None:
        self._vector.set(index, value)

    def unset(self, index: int) -> None:
        self._vector.unset(index)

    def __getitem__(self, index: int) -> int:
        return self._vector.get(index)

    def __setitem__(self, index: int, value: object) -> None:
        self._vector.set(index, value)

    def __iter__(self) -> Iterator[int]:
        self.rewind()
        return self

    def __next__(self) -> int:
        if not self.valid():
            raise StopIteration
        value = self.current()
        self._pos += 1
        return value


def _check_size(size: int) -> int:
    size = operator.index(size)
    if size < 0:
        raise ValueError(f"Size must be >= 0, got {size}")
    return size
