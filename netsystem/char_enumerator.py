"""A resettable cursor over the characters of a string."""


class CharEnumerator:
    """Walks the first ``length`` characters of ``chars`` one at a time.

    ``move_next`` advances the cursor, ``current`` reads the character under
    it, and ``reset`` returns to the position before the first character.
    """

    __slots__ = ("_chars", "_length", "_index", "_current")

    def __init__(self, chars, length=None):
        if length is None:
            length = 0 if chars is None else len(chars)
        if chars is None and length > 0:
            raise TypeError("chars must not be None")
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        if chars is not None and length > len(chars):
            raise ValueError("length exceeds the number of characters")
        self._chars = chars
        self._length = length
        self._index = -1
        self._current = None

    @property
    def current(self):
        """The character at the current position."""
        if self._index < 0:
            raise RuntimeError("Enumeration not started.")
        if self._index >= self._length:
            raise RuntimeError("Enumeration has ended.")
        return self._current

    def move_next(self):
        """Advance to the next character; return False once past the end."""
        if self._index < self._length - 1:
            self._index += 1
            self._current = self._chars[self._index]
            return True
        self._index = self._length
        return False

    def reset(self):
        """Return to the position before the first character."""
        self._index = -1
        self._current = None

    def __iter__(self):
        while self.move_next():
            yield self._current