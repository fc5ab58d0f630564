"""Custom exceptions for decowriter package."""


class DecoWriterError(Exception):
    """Base exception for decorating writer errors.

    ``consumed`` is the number of caller input bytes processed before the
    failure. Decoration bytes are never part of it.
    """

    def __init__(self, message: str, consumed: int = 0) -> None:
        super().__init__(message)
        self.consumed = consumed

    @property
    def characters_written(self) -> int:
        # Same name as BlockingIOError so writers can be nested.
        return self.consumed


class SinkWriteError(DecoWriterError):
    """Raised when the underlying sink fails while prefix, payload or suffix is written."""
    pass


class ShortWriteError(SinkWriteError):
    """Raised when the sink accepts fewer bytes than offered without raising."""

    def __init__(self, accepted: int, requested: int, consumed: int = 0) -> None:
        super().__init__(
            f"short write: sink accepted {accepted} of {requested} bytes", consumed
        )
        self.accepted = accepted
        self.requested = requested


class SinkFlushError(DecoWriterError):
    """Raised when flushing the sink fails after a successful write.

    Every input byte was processed, so ``consumed`` is the full input length.
    """
    pass
