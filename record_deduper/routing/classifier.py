"""
Classifier

Single sequential pass over records: the first record carrying a given
composite key is unique, every later one is a duplicate. Memory use is
one set of distinct keys; outputs are buffered only by the array entry
point.
"""
import logging
import time
from enum import Enum
from typing import Iterable, Iterator, Optional, Set, Tuple

from record_deduper.adapters.base import LineSink
from record_deduper.common.exceptions import ReadError, WriteError
from record_deduper.common.logging import get_logger
from record_deduper.common.models import (
    Classification,
    ClassificationResult,
    ClassificationStats,
    ExtractionShortage,
    Record,
)
from record_deduper.keys.extractor import FieldExtractor, ShortageCallback
from record_deduper.keys.registry import KeyRegistry
from record_deduper.keys.transformer import KEY_SEPARATOR, KeyTransformer


class ClassifierState(Enum):
    """Lifecycle of the classifier's most recent run"""
    IDLE = "idle"
    STREAMING = "streaming"
    DONE = "done"


class Classifier:
    """Partition records into unique and duplicate, first seen wins"""

    def __init__(
        self,
        registry: Optional[KeyRegistry] = None,
        on_shortage: Optional[ShortageCallback] = None,
        key_separator: str = KEY_SEPARATOR,
    ):
        """
        Initialize classifier

        Args:
            registry: Key definitions; an empty registry keys on the whole line
            on_shortage: Subscriber for ExtractionShortage diagnostics
            key_separator: Character appended after each composite key value
        """
        self.registry = registry if registry is not None else KeyRegistry()
        self.on_shortage = on_shortage
        self.transformer = KeyTransformer(key_separator)
        self.state = ClassifierState.IDLE
        self.stats = ClassificationStats()
        self.logger = get_logger(self.__class__.__name__)

    def classify(self, records: Iterable[str]) -> ClassificationResult:
        """
        Classify an in-memory sequence of records

        Args:
            records: Raw records in input order

        Returns:
            ClassificationResult with unique and duplicate records in input order
        """
        result = ClassificationResult()
        for record, outcome in self._route(records):
            if outcome is Classification.UNIQUE:
                result.unique.append(record)
            else:
                result.duplicate.append(record)

        result.stats = self.stats
        return result

    def classify_stream(
        self,
        line_source: Iterable[str],
        unique_sink: LineSink,
        duplicate_sink: LineSink,
    ) -> ClassificationStats:
        """
        Classify records from a source straight into two sinks

        Args:
            line_source: Yields raw records, newline already stripped
            unique_sink: Receives first occurrences via write(line)
            duplicate_sink: Receives later occurrences via write(line)

        Returns:
            Statistics for the run

        Raises:
            ReadError: If the source fails; the run is aborted
            WriteError: If a sink fails; the run is aborted
        """
        for record, outcome in self._route(_read_lines(line_source)):
            sink = unique_sink if outcome is Classification.UNIQUE else duplicate_sink
            try:
                sink.write(record.line)
            except OSError as e:
                raise WriteError(f"Failed to write record {record.position}: {e}") from e

        return self.stats

    def compute_key(self, line: str) -> str:
        """Composite key of a single line under the current key definitions"""
        extractor = FieldExtractor.from_registry(self.registry)
        return self._key(Record(line=line, position=1), extractor)

    def _key(self, record: Record, extractor: FieldExtractor) -> str:
        if not extractor.specs:
            return record.line
        return self.transformer.compose(extractor.extract(record))

    def _route(self, lines: Iterable[str]) -> Iterator[Tuple[Record, Classification]]:
        # Specs are snapshotted here and stay fixed for the whole run
        extractor = FieldExtractor.from_registry(self.registry, self._shortage)
        seen: Set[str] = set()
        debug = self.logger.isEnabledFor(logging.DEBUG)

        self.stats = ClassificationStats()
        self.state = ClassifierState.STREAMING
        start = time.time()
        self.logger.info(
            f"Classifying with {len(extractor.specs)} key(s)"
            if extractor.specs else "Classifying on whole records"
        )

        try:
            for position, line in enumerate(lines, start=1):
                record = Record(line=line, position=position)
                key = self._key(record, extractor)
                if debug:
                    self.logger.debug(f"Record {position} key: {key!r}")

                self.stats.records_processed += 1
                if key in seen:
                    self.stats.duplicate_count += 1
                    yield record, Classification.DUPLICATE
                else:
                    seen.add(key)
                    self.stats.unique_count += 1
                    yield record, Classification.UNIQUE
        finally:
            self.stats.distinct_keys = len(seen)
            self.stats.duration_seconds = time.time() - start
            self.state = ClassifierState.DONE

        self.logger.info(
            f"Classified {self.stats.records_processed} records: "
            f"{self.stats.unique_count} unique, {self.stats.duplicate_count} duplicate, "
            f"{self.stats.shortage_count} short"
        )

    def _shortage(self, event: ExtractionShortage) -> None:
        self.stats.shortage_count += 1
        if self.on_shortage is not None:
            self.on_shortage(event)


def _read_lines(source: Iterable[str]) -> Iterator[str]:
    """Iterate a source, reporting low-level I/O failures as ReadError"""
    iterator = iter(source)
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except OSError as e:
            raise ReadError(f"Error reading records: {e}") from e
        yield line
