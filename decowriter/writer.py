"""Writer that adds a prefix and a suffix to each line written through it."""

import logging
from typing import Iterable, Optional

from .exceptions import DecoWriterError, ShortWriteError, SinkFlushError, SinkWriteError
from .sink import nop, resolve_flush

logger = logging.getLogger(__name__)

TERMINATOR = b"\n"


def _to_bytes(data) -> bytes:
    # memoryview() rejects str and int, which bytes() would take
    if isinstance(data, bytes):
        return data
    return memoryview(data).tobytes()


class _EmitFailed(Exception):
    """Internal: a single sink write failed after accepting ``accepted`` bytes."""

    def __init__(self, accepted: int, requested: int, cause: Optional[Exception]) -> None:
        super().__init__(accepted, requested, cause)
        self.accepted = accepted
        self.requested = requested
        self.cause = cause


class DecoratingWriter:
    """Wraps a byte sink and decorates every line written through it.

    A line is zero or more non-newline bytes followed by a newline. The prefix
    is written before the first byte of a line and the suffix just before its
    newline. Bytes without a trailing newline get a prefix but no suffix yet,
    so a single line may be split across several write calls.

    The writer uses the sink directly and never buffers; wrap the sink in a
    buffered writer when that matters. The sink is not owned and is never
    closed here.
    """

    def __init__(self, sink, prefix: Optional[bytes] = b"", suffix: Optional[bytes] = b"") -> None:
        """Initialize the writer.

        Args:
            sink: Object with write(bytes); flush() is used when present
            prefix: Bytes written at the start of each line (copied)
            suffix: Bytes written before each newline (copied)
        """
        self._sink = sink
        self._flush = resolve_flush(sink)
        self._prefix = _to_bytes(prefix) if prefix is not None else b""
        self._suffix = (_to_bytes(suffix) if suffix is not None else b"") + TERMINATOR
        self._at_line_start = True
        self._written = 0
        logger.debug(f"Decorating {sink!r} (flush supported: {self._flush is not nop})")

    @property
    def sink(self):
        return self._sink

    @property
    def prefix(self) -> bytes:
        return self._prefix

    @property
    def suffix(self) -> bytes:
        return self._suffix[:-1]

    @property
    def written(self) -> int:
        """Total bytes accepted by the sink, prefixes and suffixes included."""
        return self._written

    def writable(self) -> bool:
        return True

    def _emit(self, chunk: bytes) -> int:
        """Hand chunk to the sink and count what it accepted.

        The running total is updated before any failure is raised.
        """
        try:
            accepted = self._sink.write(chunk)
        except Exception as e:
            accepted = getattr(e, "characters_written", 0)
            self._written += accepted
            raise _EmitFailed(accepted, len(chunk), e) from e

        if accepted is None:
            accepted = len(chunk)
        self._written += accepted
        if accepted < len(chunk):
            raise _EmitFailed(accepted, len(chunk), None)
        return accepted

    def write(self, data) -> int:
        """Write data to the sink, adding the prefix and suffix to each line.

        Args:
            data: Bytes-like object; may be empty or end mid-line

        Returns:
            Number of bytes of data processed, not counting prefixes or
            suffixes. Always len(data) when no exception is raised.

        Raises:
            TypeError: If data is not bytes-like
            SinkWriteError: If the sink fails; ``consumed`` says how much of
                data was processed
            SinkFlushError: If the flush after a successful write fails
        """
        buf = _to_bytes(data)
        if not buf:
            return 0

        consumed = 0
        pos = 0
        end = len(buf)
        try:
            while pos < end:
                if self._at_line_start:
                    self._emit(self._prefix)
                    self._at_line_start = False

                i = buf.find(TERMINATOR, pos)
                stop = end if i == -1 else i
                try:
                    consumed += self._emit(buf[pos:stop])
                except _EmitFailed as e:
                    consumed += e.accepted
                    raise
                if i == -1:
                    break

                # the newline counts as consumed even if the suffix write fails
                consumed += 1
                self._emit(self._suffix)
                pos = i + 1
                self._at_line_start = True
        except _EmitFailed as e:
            message = f"Sink write failed after {consumed} of {end} input bytes: {e.cause or 'short write'}"
            if isinstance(e.cause, DecoWriterError):
                # already logged by the nested writer
                logger.debug(message)
            else:
                logger.error(message)
            if e.cause is None:
                raise ShortWriteError(e.accepted, e.requested, consumed) from None
            raise SinkWriteError(f"Sink write failed: {e.cause}", consumed) from e.cause

        try:
            self._flush()
        except Exception as e:
            logger.error("Sink flush failed: %s", e)
            raise SinkFlushError(f"Sink flush failed: {e}", consumed) from e
        return consumed

    def writelines(self, lines: Iterable[bytes]) -> None:
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        """Flush the sink if it supports flushing; errors propagate unchanged."""
        self._flush()

    def __enter__(self) -> "DecoratingWriter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None:
            self.flush()

    def __repr__(self) -> str:
        return (
            f"DecoratingWriter(prefix={self._prefix!r}, suffix={self.suffix!r}, "
            f"written={self._written})"
        )
