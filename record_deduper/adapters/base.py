"""
Base adapter interfaces for line sources and sinks
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator

from record_deduper.common.logging import get_logger


class LineSource(ABC):
    """Abstract base class for anything that yields raw records"""

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize adapter with configuration

        Args:
            config: Adapter-specific configuration
        """
        self.config = config
        self._connected = False
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def connect(self) -> None:
        """
        Open the underlying source

        Raises:
            ReadError: If the source cannot be opened
        """
        pass

    @abstractmethod
    def read(self) -> Iterator[str]:
        """
        Read records from source

        Yields:
            str: One record, trailing newline stripped

        Raises:
            ReadError: If reading fails
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close and cleanup resources"""
        pass

    def __iter__(self) -> Iterator[str]:
        return self.read()

    def __enter__(self):
        """Context manager entry"""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        self.close()


class LineSink(ABC):
    """Abstract base class for anything that consumes classified records"""

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize adapter with configuration

        Args:
            config: Adapter-specific configuration
        """
        self.config = config
        self._connected = False
        self._transaction_active = False
        self.written = 0
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def connect(self) -> None:
        """
        Open the underlying sink

        Raises:
            WriteError: If the sink cannot be opened
        """
        pass

    @abstractmethod
    def write(self, line: str) -> None:
        """
        Append one record

        Args:
            line: Record text, without newline

        Raises:
            WriteError: If writing fails
        """
        pass

    def begin_transaction(self) -> None:
        """Begin a transaction (if supported)"""
        self._transaction_active = True
        self.logger.debug("Transaction started")

    def commit(self) -> None:
        """Commit transaction"""
        self._transaction_active = False
        self.logger.debug("Transaction committed")

    def rollback(self) -> None:
        """Rollback transaction"""
        self._transaction_active = False
        self.logger.debug("Transaction rolled back")

    @abstractmethod
    def close(self) -> None:
        """Close and cleanup resources"""
        pass

    def __enter__(self):
        """Context manager entry"""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit"""
        if exc_type and self._transaction_active:
            self.rollback()
        self.close()
