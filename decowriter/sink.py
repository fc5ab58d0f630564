"""Sink helpers: flush capability detection and a paramiko channel adapter."""

import errno
import logging
import socket
from typing import Callable, Literal

import paramiko

logger = logging.getLogger(__name__)

StreamName = Literal["stdout", "stderr"]


def nop() -> None:
    return None


def resolve_flush(sink) -> Callable[[], None]:
    """Return the sink's bound flush method, or a no-op if it has none."""
    flush = getattr(sink, "flush", None)
    if callable(flush):
        return flush
    return nop


class ChannelSink:
    """
    Adapts a paramiko Channel to the write(bytes) -> int sink interface.
    Data goes out on the channel's stdout or stderr stream. There is no flush;
    paramiko hands every send to the transport straight away.
    """
    def __init__(self, channel: paramiko.Channel, stream: StreamName = "stdout") -> None:
        if stream not in ("stdout", "stderr"):
            raise ValueError(f"Unknown stream: {stream!r}")
        self.channel = channel
        self.stream = stream
        self._send = channel.send_stderr if stream == "stderr" else channel.send

    def write(self, data: bytes) -> int:
        """Send all of data unless the channel stops taking bytes.

        Returns:
            Number of bytes sent. Less than len(data) when the channel
            reported 0 bytes sent (window or channel closed).

        Raises:
            BlockingIOError: If a send times out; characters_written holds
                the bytes sent before the timeout.
        """
        view = memoryview(data)
        sent = 0
        while sent < len(view):
            try:
                n = self._send(view[sent:])
            except socket.timeout as e:
                logger.warning(f"Channel send timed out after {sent} of {len(data)} bytes")
                raise BlockingIOError(errno.EAGAIN, "channel send timed out", sent) from e
            if n == 0:
                logger.warning(f"Channel closed after {sent} of {len(data)} bytes")
                break
            sent += n
        return sent

    def __repr__(self) -> str:
        return f"ChannelSink(channel={self.channel!r}, stream={self.stream!r})"
