"""
Generic ordered container with linear-scan membership lookup.
"""

from typing import Generic, Iterable, Iterator, NamedTuple, TypeVar

T = TypeVar("T")


class Membership(NamedTuple):
    """
    Outcome of Container.contains().

    ``found`` is authoritative. When it is False, ``index`` is 0 and carries
    no meaning, so never infer absence from the index.
    """

    found: bool
    index: int = 0


class Container(Generic[T]):
    """
    Ordered, growable sequence of values.

    Insertion order is preserved and duplicates are allowed. Values are only
    ever appended; there is no removal operation.

    Examples:
        c = Container[str]()
        c.add("a")
        c.add("b")
        c.contains("b")   # Membership(found=True, index=1)
        c.contains("z")   # Membership(found=False, index=0)
    """

    def __init__(self, values: Iterable[T] = ()):
        self._data: list[T] = list(values)

    @property
    def data(self) -> tuple[T, ...]:
        """Read-only snapshot of the elements."""
        return tuple(self._data)

    @property
    def mutable_data(self) -> list[T]:
        """
        The underlying list.

        Changes made through it (insert, reorder, erase) are visible to the
        container.
        """
        return self._data

    def add(self, value: T) -> None:
        self._data.append(value)

    def contains(self, value: T) -> Membership:
        """Return (True, i) for the first element equal to value, else (False, 0)."""
        for i, item in enumerate(self._data):
            if item == value:
                return Membership(True, i)
        return Membership(False)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Container({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Container):
            return self._data == other._data
        return False

    __hash__ = None  # type: ignore[assignment]
