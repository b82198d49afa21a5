"""
Gray code value object

A Code is the ordered, cyclic sequence of all 2^w words of width w.
Words live in a width-parameterized numpy container; only the low
w bits of each element are meaningful.
"""

import numpy as np
from typing import Sequence, Union

from .errors import DegenerateCode, InvalidWidth

# Widest word the unsigned containers below can hold
MAX_CONTAINER_WIDTH = 32


def word_dtype(width: int) -> np.dtype:
    """Smallest unsigned dtype that holds a word of the given width"""
    if width <= 8:
        return np.dtype(np.uint8)
    if width <= 16:
        return np.dtype(np.uint16)
    return np.dtype(np.uint32)


def check_width(width, max_width: int = MAX_CONTAINER_WIDTH) -> int:
    """Return width unchanged or raise InvalidWidth"""
    if isinstance(width, (bool, np.bool_)) or not isinstance(width, (int, np.integer)):
        raise InvalidWidth(f"Width must be an integer, got {width!r}")
    if width < 1 or width > min(max_width, MAX_CONTAINER_WIDTH):
        raise InvalidWidth(
            f"Width {width} outside supported range [1, {min(max_width, MAX_CONTAINER_WIDTH)}]"
        )
    return int(width)


class Code:
    """Immutable cyclic Gray code of a fixed width"""

    def __init__(self, words: Union[np.ndarray, Sequence[int]], width: int):
        """
        Wrap a sequence of words

        Args:
            words: The 2^width codewords in cyclic order
            width: Number of meaningful bits per word

        Length and word range are checked here; call validate() for the
        Gray-code invariants.
        """
        self.width = check_width(width)
        try:
            values = np.asarray(words, dtype=np.int64)
        except OverflowError:
            raise DegenerateCode(f"Word outside [0, 2^{width})") from None
        if values.ndim != 1 or values.size != (1 << self.width):
            raise DegenerateCode(
                f"A {self.width}-bit code needs {1 << self.width} words, got {values.size}"
            )
        if values.min() < 0 or values.max() >= (1 << self.width):
            raise DegenerateCode(f"Word outside [0, 2^{self.width})")
        words = values.astype(word_dtype(self.width))
        words.flags.writeable = False
        self._words = words

    @classmethod
    def from_transitions(cls, transitions: Union[np.ndarray, Sequence[int]],
                         width: int) -> 'Code':
        """
        Build a code starting at word 0 from its transition sequence

        Args:
            transitions: transitions[i] is the bit flipped between word i and word i+1
            width: Code width

        Returns:
            Code whose first word is 0
        """
        width = check_width(width)
        dtype = word_dtype(width)
        transitions = np.asarray(transitions, dtype=np.int64)
        if transitions.size and (transitions.min() < 0 or transitions.max() >= width):
            raise DegenerateCode(f"Transition bit outside [0, {width})")

        deltas = np.left_shift(dtype.type(1), transitions.astype(dtype))
        if deltas.size and np.bitwise_xor.reduce(deltas) != 0:
            raise DegenerateCode("Transition sequence does not return to its start word")

        words = np.zeros(transitions.size, dtype=dtype)
        words[1:] = np.bitwise_xor.accumulate(deltas[:-1])
        return cls(words, width)

    @property
    def words(self) -> np.ndarray:
        """Read-only array of codewords"""
        return self._words

    @property
    def length(self) -> int:
        return self._words.size

    def __len__(self) -> int:
        return self._words.size

    def __getitem__(self, index):
        return self._words[index]

    def __iter__(self):
        return iter(self._words.tolist())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Code):
            return NotImplemented
        return self.width == other.width and np.array_equal(self._words, other._words)

    def __hash__(self):
        return hash((self.width, self._words.tobytes()))

    def __repr__(self) -> str:
        return f"Code(width={self.width}, length={self.length})"

    def flips(self) -> np.ndarray:
        """flips[i] = words[i] XOR words[i-1], index 0 compared with the last word"""
        return self._words ^ np.roll(self._words, 1)

    @property
    def transitions(self) -> np.ndarray:
        """
        Bit index changed between word i and word i+1 (cyclic)

        Only meaningful for a valid code.
        """
        steps = self._words ^ np.roll(self._words, -1)
        return np.rint(np.log2(steps.astype(np.float64))).astype(np.int64)

    @property
    def bit_planes(self) -> np.ndarray:
        """(width, length) matrix of 0/1 values, row j holds bit j of every word"""
        shifts = np.arange(self.width, dtype=self._words.dtype)[:, None]
        return ((self._words[None, :] >> shifts) & 1).astype(np.uint8)

    def rotated(self, offset: int) -> 'Code':
        """New code whose index 0 is this code's index `offset`"""
        return Code(np.roll(self._words, -offset), self.width)

    def validate(self) -> 'Code':
        """
        Check the Gray-code invariants

        Returns:
            self, so builders can chain the call

        Raises:
            DegenerateCode: if the words repeat or some adjacent pair is
                not one bit apart
        """
        if np.unique(self._words).size != self._words.size:
            raise DegenerateCode("Codewords are not pairwise distinct")

        steps = self.flips()
        single = (steps != 0) & ((steps & (steps - 1)) == 0)
        if not np.all(single):
            bad = int(np.flatnonzero(~single)[0])
            raise DegenerateCode(
                f"Words {(bad - 1) % self.length} and {bad} do not differ in exactly one bit"
            )
        return self
