from dataclasses import dataclass
import logging

from .hashing import probe
from .prime import next_prime


logger = logging.getLogger(__name__)


INITIAL_BASE_SIZE = 50

# load factor bounds, in percent of size
MAX_LOAD = 70
MIN_LOAD = 10


@dataclass
class Item:
    key: str
    value: str


@dataclass(frozen=True)
class Empty:
    pass


@dataclass
class Occupied:
    item: Item


@dataclass(frozen=True)
class Deleted:
    pass


Slot = Empty | Occupied | Deleted


@dataclass(frozen=True)
class NotFound:
    pass


class TableError(Exception):
    pass


class TableFreedError(TableError):
    pass


@dataclass
class HashTable:
    base_size: int
    size: int
    count: int
    slots: list[Slot]
    min_base_size: int
    freed: bool

    def __init__(
        self, base_size: int = INITIAL_BASE_SIZE, min_base_size: int | None = None
    ) -> None:
        if base_size < 1:
            raise ValueError(f"base size must be positive, got {base_size}")

        self.base_size = base_size
        self.min_base_size = base_size if min_base_size is None else min_base_size
        self.size = next_prime(base_size)
        self.count = 0
        self.slots = [Empty() for _ in range(self.size)]
        self.freed = False

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: str) -> bool:
        self._check_alive()
        return self._find(key) is not None

    def load(self) -> int:
        self._check_alive()
        return self.count * 100 // self.size

    def insert(self, key: str, value: str) -> None:
        self._check_alive()
        if (self.count + 1) * 100 // self.size > MAX_LOAD:
            self._resize(self._grown_base_size())

        tombstone: int | None = None
        target: int | None = None
        for index in probe(key, self.size):
            match self.slots[index]:
                case Occupied(item) if item.key == key:
                    item.value = value
                    return
                case Deleted():
                    if tombstone is None:
                        tombstone = index
                case Empty():
                    target = index
                    break

        # reuse the first tombstone on the way, the key is not further along
        if tombstone is not None:
            target = tombstone
        if target is None:
            raise TableError(f"no free slot for {key!r} in table of size {self.size}")

        self.slots[target] = Occupied(Item(key, value))
        self.count += 1

    def search(self, key: str) -> str | NotFound:
        self._check_alive()
        index = self._find(key)
        if index is None:
            return NotFound()

        slot = self.slots[index]
        assert isinstance(slot, Occupied)
        return slot.item.value

    def delete(self, key: str) -> None:
        self._check_alive()
        index = self._find(key)
        if index is None:
            return

        self.slots[index] = Deleted()
        self.count -= 1

        if self.count * 100 // self.size < MIN_LOAD:
            self._resize(self.base_size // 2)

    def free(self) -> None:
        self.slots = []
        self.count = 0
        self.size = 0
        self.freed = True

    def _find(self, key: str) -> int | None:
        for index in probe(key, self.size):
            match self.slots[index]:
                case Empty():
                    return None
                case Occupied(item) if item.key == key:
                    return index
        return None

    def _grown_base_size(self) -> int:
        # doubling can land on the same prime for tiny tables
        base_size = self.base_size * 2
        while next_prime(base_size) <= self.size:
            base_size *= 2
        return base_size

    def _resize(self, base_size: int):
        if base_size < self.min_base_size:
            logger.debug(
                "ignoring resize to base size %d, below minimum %d",
                base_size,
                self.min_base_size,
            )
            return

        resized = HashTable(base_size, min_base_size=self.min_base_size)
        for slot in self.slots:
            if isinstance(slot, Occupied):
                resized._place(slot.item)

        logger.debug(
            "resized table from %d to %d slots holding %d items",
            self.size,
            resized.size,
            resized.count,
        )
        self.base_size = resized.base_size
        self.size = resized.size
        self.count = resized.count
        self.slots = resized.slots

    def _place(self, item: Item):
        # only valid on a table without tombstones that does not hold item.key
        for index in probe(item.key, self.size):
            if isinstance(self.slots[index], Empty):
                self.slots[index] = Occupied(item)
                self.count += 1
                return
        raise TableError(f"no free slot for {item.key!r} in table of size {self.size}")

    def _check_alive(self):
        if self.freed:
            raise TableFreedError("table used after free()")


def new_table(base_size: int = INITIAL_BASE_SIZE) -> HashTable:
    return HashTable(base_size)
