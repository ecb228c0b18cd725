"""A fixed-length array with bounds-checked access and block copy/clear."""

from operator import index as _as_index


class Array:
    """A sequence whose length is fixed when it is created.

    New and cleared slots hold ``factory()`` when a factory is given,
    otherwise ``None``. Negative indices are rejected rather than counted
    from the end.
    """

    __slots__ = ("_items", "_factory")

    def __init__(self, length=0, factory=None):
        length = _as_index(length)
        if length < 0:
            raise ValueError(f"length must not be negative: {length}")
        self._factory = factory
        self._items = [self._blank() for _ in range(length)]

    def _blank(self):
        return self._factory() if self._factory is not None else None

    @classmethod
    def from_items(cls, items):
        """Create an array holding a copy of ``items``."""
        if items is None:
            raise TypeError("items must not be None")
        array = cls()
        array._items = list(items)
        return array

    def _check(self, index):
        index = _as_index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for array of length {len(self._items)}")
        return index

    def __getitem__(self, index):
        return self._items[self._check(index)]

    def __setitem__(self, index, value):
        self._items[self._check(index)] = value

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"Array({self._items!r})"


def _check_count(name, value):
    value = _as_index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")
    return value


def copy(source, source_index, destination, destination_index, count):
    """Copy ``count`` elements of ``source`` into ``destination``."""
    source_index = _check_count("source_index", source_index)
    destination_index = _check_count("destination_index", destination_index)
    count = _check_count("count", count)
    if source_index + count > len(source):
        raise ValueError("source_index + count exceeds the length of source")
    if destination_index + count > len(destination):
        raise ValueError("destination_index + count exceeds the length of destination")
    if count == 0:
        return
    chunk = source._items[source_index:source_index + count]
    destination._items[destination_index:destination_index + count] = chunk


def clear(array, index, count):
    """Reset ``count`` elements of ``array`` from ``index`` to their blank value."""
    index = _check_count("index", index)
    count = _check_count("count", count)
    if index + count > len(array):
        raise ValueError("index + count exceeds the length of the array")
    for position in range(index, index + count):
        array._items[position] = array._blank()