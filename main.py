"""Example usage of decowriter package."""

import logging
import sys

from decowriter import DecoratingWriter


def main():
    """Decorate a few lines written to stdout."""
    logging.basicConfig(level=logging.INFO)

    w = DecoratingWriter(sys.stdout.buffer, b">>", b"<<")
    w.write(b"hello")
    w.write(b" world\n")
    w.write(b"hello\n")
    w.write(b"world")
    sys.stdout.buffer.write(b"\n")
    sys.stdout.buffer.flush()

    print(f"total: {w.written}")


if __name__ == "__main__":
    main()
