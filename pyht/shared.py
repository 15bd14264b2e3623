import sys
from typing import Any, TextIO


def fprintf(stream: TextIO, format: str, *args: Any):
    stream.write(format.format(*args))


def printf(format: str, *args: Any):
    fprintf(sys.stdout, format, *args)


def printf_err(format: str, *args: Any):
    fprintf(sys.stderr, format, *args)
