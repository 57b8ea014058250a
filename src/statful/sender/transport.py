"""Line transport implementations for statful-client.

A transport receives fully encoded protocol lines and ships them to a
destination.  Network delivery is left to transports provided by the
application; the ones shipped here write locally.

Shipped in this module
----------------------
- Transport         — ABC for all transports
- ConsoleTransport  — prints each line to stdout
- FileTransport     — appends lines to a file
- MemoryTransport   — keeps lines in a list (useful in tests)
- NullTransport     — discards everything
"""
from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from pathlib import Path

from statful.schema.errors import TransportError


class Transport(ABC):
    """Abstract base class for line transports."""

    @abstractmethod
    def send(self, line: str) -> None:
        """Deliver one encoded line (without trailing newline)."""

    @abstractmethod
    def flush(self) -> None:
        """Ensure all buffered lines have been written to the destination."""


class ConsoleTransport(Transport):
    """Transport that prints each line to stdout.

    Primarily useful for local development and debugging.
    """

    def send(self, line: str) -> None:
        print(line)

    def flush(self) -> None:
        """No-op — stdout is line-buffered."""


class FileTransport(Transport):
    """Transport that appends each line to a text file.

    Parameters
    ----------
    file_path:
        Path to the output file.  Will be created if it does not exist.
    """

    def __init__(self, file_path: str | Path) -> None:
        self._path = Path(file_path)

    @property
    def path(self) -> Path:
        return self._path

    def send(self, line: str) -> None:
        """Append *line* to the file.

        Raises
        ------
        TransportError
            If the file cannot be written.
        """
        try:
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except OSError as exc:
            raise TransportError(
                f"Failed to write metric line to {self._path}: {exc}",
                context={"path": str(self._path)},
            ) from exc

    def flush(self) -> None:
        """No-op — file handle is closed after each line."""


class MemoryTransport(Transport):
    """Thread-safe transport that records every line in memory.

    Examples
    --------
    >>> transport = MemoryTransport()
    >>> transport.send("requests 1")
    >>> transport.lines
    ['requests 1']
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        """Snapshot of the lines sent so far."""
        with self._lock:
            return list(self._lines)

    def send(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)

    def flush(self) -> None:
        """No-op."""

    def clear(self) -> None:
        with self._lock:
            self._lines.clear()

    def __repr__(self) -> str:
        with self._lock:
            count = len(self._lines)
        return f"MemoryTransport(lines={count})"


class NullTransport(Transport):
    """Transport that silently discards every line."""

    def send(self, line: str) -> None:
        """Discard *line* without side effects."""

    def flush(self) -> None:
        """No-op."""
