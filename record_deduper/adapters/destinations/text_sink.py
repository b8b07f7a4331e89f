"""
Text file sink, one record per line
"""
import os
import tempfile
from pathlib import Path
from typing import IO, Optional

from record_deduper.adapters.base import LineSink
from record_deduper.common.exceptions import WriteError


class TextFileSink(LineSink):
    """
    Destination adapter writing one record per line

    With atomic=True (default) records go to a temporary file next to the
    target, which replaces the target on commit/close. A rollback, or
    leaving the context manager with an exception, deletes the temporary
    file and leaves any previous target untouched.
    """

    def __init__(self, file_path: str, encoding: str = "utf-8", atomic: bool = True, **kwargs):
        """
        Initialize text sink

        Args:
            file_path: Path to output file (overwritten if it exists)
            encoding: File encoding (default: 'utf-8')
            atomic: Write through a temporary file (default: True)
            **kwargs: Additional configuration
        """
        super().__init__({
            'file_path': file_path,
            'encoding': encoding,
            'atomic': atomic,
            **kwargs
        })

        self.file_path = Path(file_path)
        self.encoding = encoding
        self.atomic = atomic

        self._handle: Optional[IO[str]] = None
        self._temp_file: Optional[Path] = None

    def connect(self) -> None:
        """Create the output directory and open the (temporary) file"""
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)

            if self.atomic:
                fd, temp_name = tempfile.mkstemp(
                    prefix=f".{self.file_path.name}.",
                    suffix='.tmp',
                    dir=str(self.file_path.parent)
                )
                self._temp_file = Path(temp_name)
                self._handle = os.fdopen(fd, 'w', encoding=self.encoding, newline='')
                self.begin_transaction()
            else:
                self._handle = open(self.file_path, 'w', encoding=self.encoding, newline='')

        except OSError as e:
            raise WriteError(f"Could not open output file {self.file_path}: {e}") from e

        self.written = 0
        self._connected = True
        self.logger.info(f"Will write records to: {self.file_path}")

    def write(self, line: str) -> None:
        """Write a record followed by a newline"""
        if not self._connected:
            raise WriteError("Not connected. Call connect() first.")

        try:
            self._handle.write(f"{line}\n")
        except (OSError, UnicodeEncodeError) as e:
            raise WriteError(f"Failed to write to {self.file_path}: {e}") from e
        self.written += 1

    def commit(self) -> None:
        """Move the temporary file into place"""
        if self._transaction_active:
            try:
                self._handle.close()
                self._handle = None
                os.replace(self._temp_file, self.file_path)
                self._temp_file = None
            except OSError as e:
                self.logger.error(f"Error during commit: {e}")
                self.rollback()
                raise WriteError(f"Failed to commit {self.file_path}: {e}") from e

            self.logger.info(f"Wrote {self.written} records to {self.file_path}")

        super().commit()

    def rollback(self) -> None:
        """Discard the temporary file"""
        if self._transaction_active:
            if self._handle is not None:
                self._handle.close()
                self._handle = None

            if self._temp_file and self._temp_file.exists():
                try:
                    self._temp_file.unlink()
                    self.logger.debug("Temp file deleted (rollback)")
                except OSError as e:
                    self.logger.warning(f"Failed to delete temp file: {e}")
            self._temp_file = None

        super().rollback()

    def close(self) -> None:
        """Finalize pending output and close"""
        if self._transaction_active:
            self.commit()
        elif self._handle is not None:
            try:
                self._handle.close()
            except OSError as e:
                raise WriteError(f"Failed to close {self.file_path}: {e}") from e
            self._handle = None
            self.logger.info(f"Wrote {self.written} records to {self.file_path}")

        self._connected = False
