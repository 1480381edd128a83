import sys

from .debug import print_table
from .shared import printf, printf_err
from .table import ChainedHashTable


def run_command(table: ChainedHashTable, line: str):
    line = line.strip()
    if not line:
        return

    if line.startswith("?"):
        printf("{0:s}\n", "yes" if table.contains(line[1:]) else "no")
        return

    match line:
        case ":stats":
            printf("{0}\n", table.stats())
        case ":list":
            printf("{0}\n", table.to_array())
        case ":clear":
            table.clear()
        case ":show":
            print_table(table)
        case _ if line.startswith(":"):
            printf_err("Unknown command '{0:s}'\n", line)
        case _:
            printf("{0:s}\n", "added" if table.unique_insert(line) else "already here")


def repl(table: ChainedHashTable):
    while True:
        try:
            inpt = input()
        except EOFError:
            return
        run_command(table, inpt)


def run_file(table: ChainedHashTable, filepath: str):
    try:
        with open(filepath) as fp:
            lines = fp.read().splitlines()
    except OSError as e:
        printf_err("Could not read '{0:s}': {1:s}\n", filepath, e.strerror or str(e))
        sys.exit(74)

    for line in lines:
        key = line.strip()
        if key:
            table.insert(key)

    print_table(table)


def main():
    table = ChainedHashTable()

    if len(sys.argv) == 1:
        repl(table)
    elif len(sys.argv) == 2:
        run_file(table, sys.argv[1])
    else:
        printf("Usage: hammock [path]\n")
        sys.exit(64)
