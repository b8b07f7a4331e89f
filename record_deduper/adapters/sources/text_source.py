"""
Text file source adapter, one record per line
"""
from pathlib import Path
from typing import IO, Iterator, Optional

from record_deduper.adapters.base import LineSource
from record_deduper.common.exceptions import ReadError


class TextFileSource(LineSource):
    """Source adapter for line-oriented text files"""

    def __init__(self, file_path: str, encoding: str = "utf-8", **kwargs):
        """
        Initialize text source

        Args:
            file_path: Path to input file
            encoding: File encoding (default: 'utf-8')
            **kwargs: Additional configuration
        """
        super().__init__({'file_path': file_path, 'encoding': encoding, **kwargs})

        self.file_path = Path(file_path)
        self.encoding = encoding
        self._handle: Optional[IO[str]] = None
        self.lines_read = 0

    def connect(self) -> None:
        """Open the file for reading"""
        if not self.file_path.exists():
            raise ReadError(f"Input file not found: {self.file_path}")

        if not self.file_path.is_file():
            raise ReadError(f"Path is not a file: {self.file_path}")

        try:
            # Only \n ends a record; a lone \r is data
            self._handle = open(self.file_path, 'r', encoding=self.encoding, newline='\n')
        except OSError as e:
            raise ReadError(f"Could not open input file {self.file_path}: {e}") from e

        self._connected = True
        self.logger.info(f"Opened input file: {self.file_path}")

    def read(self) -> Iterator[str]:
        """
        Read lines from the file

        Yields:
            str: Each line without its line terminator
        """
        if not self._connected:
            raise ReadError("Not connected. Call connect() first.")

        try:
            for line in self._handle:
                self.lines_read += 1
                yield _strip_terminator(line)
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(
                f"Error reading {self.file_path} after line {self.lines_read}: {e}"
            ) from e

        self.logger.info(f"Read {self.lines_read} lines from {self.file_path}")

    def close(self) -> None:
        """Close the file"""
        if self._handle is not None:
            self._handle.close()
            self._handle = None
        self._connected = False


def _strip_terminator(line: str) -> str:
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line
