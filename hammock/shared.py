import sys
from typing import Any, TextIO


def sprintf(format: str, *args: Any) -> str:
    return format.format(*args)


def fprintf(stream: TextIO, format: str, *args: Any):
    stream.write(sprintf(format, *args))


def printf(format: str, *args: Any):
    fprintf(sys.stdout, format, *args)


def printf_err(format: str, *args: Any):
    # resolved per call so redirected streams are honoured
    fprintf(sys.stderr, format, *args)
