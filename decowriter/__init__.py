"""decowriter: add a prefix and a suffix to each line written to a byte sink."""

from .writer import DecoratingWriter, TERMINATOR
from .sink import ChannelSink, resolve_flush
from .exceptions import (
    DecoWriterError,
    SinkWriteError,
    ShortWriteError,
    SinkFlushError
)

__all__ = [
    "DecoratingWriter",
    "TERMINATOR",
    "ChannelSink",
    "resolve_flush",
    "DecoWriterError",
    "SinkWriteError",
    "ShortWriteError",
    "SinkFlushError"
]
__version__ = "0.1.0"
