from dataclasses import dataclass
import logging.config
import sys

from .config import LOGGING
from .debug import dump_table
from .shared import printf, printf_err
from .table import HashTable, NotFound, new_table


COMMANDS = ("set", "get", "del", "dump", "stats")


@dataclass(frozen=True)
class CommandOk:
    pass


@dataclass(frozen=True)
class CommandError:
    pass


CommandResult = CommandOk | CommandError


def execute(table: HashTable, line: str) -> CommandResult:
    words = line.split()
    if not words or words[0].startswith("#"):
        return CommandOk()

    match words:
        case ["set", key, value]:
            table.insert(key, value)
        case ["get", key]:
            value = table.search(key)
            if isinstance(value, NotFound):
                printf("(not found)\n")
            else:
                printf("{0:s}\n", value)
        case ["del", key]:
            table.delete(key)
        case ["dump"]:
            dump_table(table, "table")
        case ["stats"]:
            printf("{0:d} {1:d} {2:d}%\n", table.count, table.size, table.load())
        case [command, *_] if command in COMMANDS:
            printf_err("Wrong number of arguments to '{0:s}'.\n", command)
            return CommandError()
        case [command, *_]:
            printf_err("Unknown command '{0:s}'.\n", command)
            return CommandError()
    return CommandOk()


def repl(table: HashTable):
    while True:
        try:
            line = input()
        except EOFError:
            break
        execute(table, line)


def run_file(table: HashTable, filepath: str):
    with open(filepath) as fp:
        for line in fp:
            if isinstance(execute(table, line), CommandError):
                sys.exit(65)


def main():
    logging.config.dictConfig(LOGGING)

    table = new_table()
    try:
        if len(sys.argv) == 1:
            repl(table)
        elif len(sys.argv) == 2:
            run_file(table, sys.argv[1])
        else:
            printf("Usage: pyht [path]\n")
            sys.exit(64)
    finally:
        table.free()


if __name__ == "__main__":
    main()
