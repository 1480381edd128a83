from typing import TYPE_CHECKING

from .shared import printf, sprintf

if TYPE_CHECKING:
    from .table import ChainedHashTable


def render_table(table: "ChainedHashTable") -> str:
    parts = [
        sprintf(
            "== table: {0:d} buckets, {1:d} keys ==\n",
            table.capacity,
            table.size(),
        ),
        sprintf(
            "load {0:.2f}, rehash above {1:.2f}\n",
            table.current_load(),
            table.load_factor,
        ),
    ]

    for index, head in enumerate(table.buckets):
        parts.append(sprintf("Bucket[{0:02d}]:", index))
        if head is None:
            parts.append(" -- empty --")

        entry = head
        while entry is not None:
            parts.append(sprintf("  --> {0:s}", entry.key))
            entry = entry.next
        parts.append("\n")

    return "".join(parts)


def print_table(table: "ChainedHashTable"):
    printf("{0:s}", render_table(table))
