"""
In-memory source adapter
"""
from typing import Iterable, Iterator

from record_deduper.adapters.base import LineSource
from record_deduper.common.exceptions import ReadError


class IterableSource(LineSource):
    """Source adapter over any iterable of strings"""

    def __init__(self, lines: Iterable[str], strip_newlines: bool = True):
        """
        Initialize source

        Args:
            lines: Records to serve
            strip_newlines: Remove a trailing line terminator from each item
        """
        super().__init__({'strip_newlines': strip_newlines})
        self._lines = lines
        self.strip_newlines = strip_newlines

    def connect(self) -> None:
        self._connected = True

    def read(self) -> Iterator[str]:
        if not self._connected:
            raise ReadError("Not connected. Call connect() first.")
        for line in self._lines:
            yield line.rstrip('\r\n') if self.strip_newlines else line

    def close(self) -> None:
        self._connected = False
