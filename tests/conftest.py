"""Shared pytest fixtures for decowriter tests."""

import pytest
from unittest.mock import Mock

import paramiko


class RecordingSink:
    """Sink that keeps everything written and counts flush calls."""

    def __init__(self):
        self.data = bytearray()
        self.writes = 0
        self.flushes = 0

    def write(self, p):
        self.writes += 1
        self.data += p
        return len(p)

    def flush(self):
        self.flushes += 1

    def getvalue(self) -> bytes:
        return bytes(self.data)


class LimitSink:
    """Sink that accepts up to ``limit`` bytes in total, then fails.

    The write that crosses the limit takes what still fits and either raises
    BlockingIOError (``mode="raise"``) or returns the short count.
    """

    def __init__(self, limit: int, mode: str = "raise"):
        self.limit = limit
        self.mode = mode
        self.data = bytearray()
        self.flushes = 0

    def write(self, p):
        x = len(p)
        if self.limit < x:
            n = self.limit
            self.limit = 0
            self.data += p[:n]
            if self.mode == "raise":
                raise BlockingIOError(11, "limit reached", n)
            return n
        self.limit -= x
        self.data += p
        return x

    def flush(self):
        self.flushes += 1


class WriteOnlySink:
    """Sink without a flush method."""

    def __init__(self):
        self.data = bytearray()

    def write(self, p):
        self.data += p
        return len(p)


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def write_only_sink():
    return WriteOnlySink()


@pytest.fixture
def mock_channel():
    """Mock paramiko channel whose sends accept everything."""
    channel = Mock(spec=paramiko.Channel)
    channel.send.side_effect = lambda data: len(data)
    channel.send_stderr.side_effect = lambda data: len(data)
    return channel
