"""Forward-only, bounds-checked reads over an in-memory buffer."""

from .errors import UnexpectedEof


class ByteCursor:
    """Owns a byte buffer and a read offset that only moves forward.

    ``take`` is the only way to get bytes out of the buffer, so it is the only
    place bounds are checked.
    """

    def __init__(self, data: bytes):
        self._buffer = memoryview(bytes(data)).toreadonly()
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._buffer) - self._position

    def peek(self, n: int) -> memoryview:
        """Up to *n* bytes from the current offset, without consuming them."""
        if n < 0:
            raise ValueError(f"cannot peek a negative number of bytes: {n}")
        return self._buffer[self._position:self._position + n]

    def take(self, n: int) -> memoryview:
        """Return the next *n* bytes and advance past them.

        Raises:
            UnexpectedEof: fewer than *n* bytes remain.
        """
        if n < 0:
            raise ValueError(f"cannot take a negative number of bytes: {n}")
        if n > self.remaining:
            raise UnexpectedEof(self._position, n, self.remaining)
        view = self._buffer[self._position:self._position + n]
        self._position += n
        return view
