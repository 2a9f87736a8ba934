"""
Byte Sources
============

Scoped acquisition of the byte sources handed to the decoders.

A source is one of:
    - a filesystem path (str or os.PathLike): opened here, closed on exit
    - bytes / bytearray / memoryview: wrapped in an in-memory stream
    - an open binary file object: read as-is, left open for the caller
"""

import io
import os
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Union

from sprite_codec.errors import StreamOpenError


Source = Union[str, "os.PathLike[str]", bytes, bytearray, memoryview, BinaryIO]


@contextmanager
def open_source(source: Source, failure_message: str) -> Iterator[BinaryIO]:
    """
    Open a byte source for sequential reading.

    Args:
        source: Path, raw bytes, or binary file object
        failure_message: Message for the StreamOpenError raised when a
            path cannot be opened

    Yields:
        Binary stream positioned at its current offset

    Raises:
        StreamOpenError: If a path cannot be opened
        TypeError: If the source is of an unsupported type
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        yield io.BytesIO(bytes(source))
        return

    if isinstance(source, (str, os.PathLike)):
        try:
            stream = open(source, "rb")
        except OSError as e:
            raise StreamOpenError(f"{failure_message}: {os.fspath(source)}") from e
        with stream:
            yield stream
        return

    if hasattr(source, "read"):
        yield source
        return

    raise TypeError(f"Unsupported byte source type: {type(source).__name__}")


def read_all(source: Source, failure_message: str) -> bytes:
    """Read every remaining byte of `source`."""
    with open_source(source, failure_message) as stream:
        return stream.read()
