from dataclasses import dataclass
from typing import Iterator

from .debug import render_table
from .shared import printf_err


DEFAULT_CAPACITY = 4
DEFAULT_LOAD_FACTOR = 2.0
DEFAULT_GROWTH_FACTOR = 2


_debug_trace_rehash = False


def set_debug_trace_rehash(b: bool):
    global _debug_trace_rehash
    _debug_trace_rehash = b


@dataclass
class Entry:
    key: str
    next: "Entry | None"


Bucket = Entry | None


def hash_string(key: str, capacity: int) -> int:
    hash = 0
    for ch in key:
        hash += ord(ch)
    return hash % capacity


def is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: object) -> bool:
    return is_int(value) or isinstance(value, float)


def iter_chain(head: Bucket) -> Iterator[Entry]:
    entry = head
    while entry is not None:
        yield entry
        entry = entry.next


class ChainedHashTable:
    # new entries are prepended, so every chain reads most-recent-first

    buckets: list[Bucket]
    load_factor: float
    growth_factor: int
    count: int

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        load_factor: float = DEFAULT_LOAD_FACTOR,
        growth_factor: int = DEFAULT_GROWTH_FACTOR,
    ) -> None:
        if not (is_int(capacity) and capacity > 0):
            capacity = DEFAULT_CAPACITY
        if not (is_number(load_factor) and load_factor > 1.0):
            load_factor = DEFAULT_LOAD_FACTOR
        if not (is_int(growth_factor) and growth_factor > 1):
            growth_factor = DEFAULT_GROWTH_FACTOR

        self.buckets = [None for _ in range(capacity)]
        self.load_factor = load_factor
        self.growth_factor = growth_factor
        self.count = 0

    @property
    def capacity(self) -> int:
        return len(self.buckets)

    def insert(self, key: str):
        index = hash_string(key, self.capacity)
        self.buckets[index] = Entry(key, self.buckets[index])
        self.count += 1

        if self.current_load() > self.load_factor:
            self._rehash()

    def _rehash(self):
        old_buckets = self.buckets
        old_count = self.count
        self.buckets = [None for _ in range(len(old_buckets) * self.growth_factor)]
        # reinsertion below counts every key again
        self.count = 0

        if _debug_trace_rehash:
            printf_err(
                "rehash: {0:d} -> {1:d} buckets, {2:d} entries\n",
                len(old_buckets),
                self.capacity,
                old_count,
            )

        # insert() may grow the table again; each pass multiplies capacity
        for head in old_buckets:
            for entry in iter_chain(head):
                self.insert(entry.key)

    def unique_insert(self, key: str) -> bool:
        if self.contains(key):
            return False
        self.insert(key)
        return True

    def contains(self, key: str) -> bool:
        index = hash_string(key, self.capacity)
        for entry in iter_chain(self.buckets[index]):
            if entry.key == key:
                return True
        return False

    def is_empty(self) -> bool:
        return self.count == 0

    def size(self) -> int:
        return self.count

    def current_load(self) -> float:
        return self.count / self.capacity

    def to_array(self) -> list[str]:
        return list(self)

    def stats(self) -> list[int]:
        return [sum(1 for _ in iter_chain(head)) for head in self.buckets]

    def clear(self):
        self.buckets = [None for _ in range(self.capacity)]
        self.count = 0

    def render(self) -> str:
        return render_table(self)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __iter__(self) -> Iterator[str]:
        for head in self.buckets:
            for entry in iter_chain(head):
                yield entry.key

    def __str__(self) -> str:
        return self.render()
