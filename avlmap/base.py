from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional, Tuple


class OrderedMap(ABC):
    """Abstract base class representing a map kept in ascending key order."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of entries in the map."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Generate an iteration of the map's keys in order."""
        pass

    @abstractmethod
    def insert(self, key: Any, value: Any) -> Optional[Any]:
        """Insert or replace (key, value); return the old value, or None."""
        pass

    @abstractmethod
    def get(self, key: Any) -> Optional[Any]:
        """Return the value associated with key, or None."""
        pass

    @abstractmethod
    def contains_key(self, key: Any) -> bool:
        """Return True if key is present in the map."""
        pass

    @abstractmethod
    def remove(self, key: Any) -> Optional[Any]:
        """Remove the entry for key and return its value, or None."""
        pass

    @abstractmethod
    def height(self) -> int:
        """Return the height of the underlying structure (0 when empty)."""
        pass

    @abstractmethod
    def iter(self) -> Iterator[Tuple[Any, Any]]:
        """Return a fresh iterator of (key, value) pairs in ascending key order."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""
        pass

    def is_empty(self) -> bool:
        """Return True if the map is empty."""
        return len(self) == 0

    def put(self, key: Any, value: Any) -> Optional[Any]:
        return self.insert(key, value)

    def keys(self) -> Iterable[Any]:
        for key, _ in self.iter():
            yield key

    def values(self) -> Iterable[Any]:
        """Generate an iteration of the map's values in key order."""
        for _, value in self.iter():
            yield value

    def items(self) -> Iterable[Tuple[Any, Any]]:
        yield from self.iter()

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: Any) -> Any:
        if not self.contains_key(key):
            raise KeyError(key)
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert(key, value)

    def __delitem__(self, key: Any) -> None:
        if not self.contains_key(key):
            raise KeyError(key)
        self.remove(key)

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.iter())
        return f"{type(self).__name__}({{{body}}})"
