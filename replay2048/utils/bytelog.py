"""Append-only byte log backing the action and placement histories."""

from collections.abc import Iterator

from numpy import concatenate, ndarray, uint8, zeros

from replay2048.config import HISTORY_EXPAND_LENGTH


class ByteLog:
    """
    Growable sequence of bytes.

    Storage is a preallocated ``uint8`` array extended by blocks of ``expand_length`` bytes when
    full, so appends are amortized.

    Parameters
    ----------
    expand_length : int, optional
        Size of each storage block (default is 1024).
    """

    def __init__(self, expand_length: int = HISTORY_EXPAND_LENGTH):
        if expand_length <= 0:
            raise ValueError(f"expand_length must be positive, got {expand_length}.")
        self._expand_length = expand_length
        self._buffer: ndarray = zeros(expand_length, dtype=uint8)
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        return iter(self._buffer[: self._count].tolist())

    def __getitem__(self, index: int | slice):
        if isinstance(index, slice):
            return self._buffer[: self._count][index].tolist()
        if not -self._count <= index < self._count:
            raise IndexError(f"Index {index} out of range for a log of {self._count} bytes.")
        return int(self._buffer[index % self._count])

    @property
    def capacity(self) -> int:
        """Number of bytes the log can hold before growing."""
        return len(self._buffer)

    def append(self, code: int) -> None:
        """
        Add one byte at the end of the log.

        Raises
        ------
        ValueError
            If the value doesn't fit in a byte.
        """
        if not 0 <= code <= 0xFF:
            raise ValueError(f"A log entry must fit in a byte, got {code}.")
        if self._count == len(self._buffer):
            self._buffer = concatenate([self._buffer, zeros(self._expand_length, dtype=uint8)])
        self._buffer[self._count] = code
        self._count += 1

    def tobytes(self) -> bytes:
        """Copy of the logged bytes."""
        return self._buffer[: self._count].tobytes()
