"""
In-memory sink adapter
"""
from typing import List

from record_deduper.adapters.base import LineSink
from record_deduper.common.exceptions import WriteError


class ListSink(LineSink):
    """Collects written records in a list"""

    def __init__(self):
        super().__init__({})
        self.lines: List[str] = []

    def connect(self) -> None:
        self._connected = True

    def write(self, line: str) -> None:
        if not self._connected:
            raise WriteError("Not connected. Call connect() first.")
        self.lines.append(line)
        self.written += 1

    def close(self) -> None:
        self._connected = False
