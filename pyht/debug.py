from .shared import printf
from .table import Deleted, Empty, HashTable, Occupied


def dump_table(table: HashTable, name: str):
    printf(
        "== {0:s} (count {1:d}, size {2:d}, base {3:d}) ==\n",
        name,
        table.count,
        table.size,
        table.base_size,
    )

    for index, slot in enumerate(table.slots):
        match slot:
            case Empty():
                continue
            case Deleted():
                printf("{0:04d} <deleted>\n", index)
            case Occupied(item):
                printf("{0:04d} {1:s} = {2:s}\n", index, item.key, item.value)
            case _:
                raise Exception("Wrong slot type", type(slot), slot)
