"""
Data models for record_deduper
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Union

import pandas as pd


class ExtractionMode(Enum):
    """How key fields are located inside a record"""
    DELIMITED = "delimited"
    FIXED_WIDTH = "fixed_width"


@dataclass(frozen=True)
class Delimited:
    """Select a separator-delimited field, optionally truncated"""
    field_number: int  # 1-based
    key_length: Optional[int] = None

    @property
    def mode(self) -> ExtractionMode:
        return ExtractionMode.DELIMITED


@dataclass(frozen=True)
class FixedWidth:
    """Select a fixed character window"""
    start_pos: int  # 1-based
    length: int

    @property
    def mode(self) -> ExtractionMode:
        return ExtractionMode.FIXED_WIDTH


@dataclass(frozen=True)
class KeySpecification:
    """One configured rule contributing to a record's dedup key"""
    ordinal: int
    extraction: Union[Delimited, FixedWidth]
    ignore_case: bool = False
    ignore_whitespace: bool = False
    alias: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze a private copy so later edits to the caller's dict cannot leak in
        object.__setattr__(self, 'alias', MappingProxyType(dict(self.alias)))

    @property
    def mode(self) -> ExtractionMode:
        return self.extraction.mode

    @property
    def key_length(self) -> Optional[int]:
        if isinstance(self.extraction, FixedWidth):
            return self.extraction.length
        return self.extraction.key_length

    def describe(self) -> str:
        """Short human readable form, used in log messages"""
        if isinstance(self.extraction, FixedWidth):
            where = f"start_pos={self.extraction.start_pos} length={self.extraction.length}"
        else:
            where = f"field_number={self.extraction.field_number}"
            if self.extraction.key_length:
                where += f" key_length={self.extraction.key_length}"
        return f"key #{self.ordinal} ({where})"


@dataclass(frozen=True)
class Record:
    """A raw line of text and its 1-based position in the input"""
    line: str
    position: int


@dataclass(frozen=True)
class ExtractionShortage:
    """
    Diagnostic event: a record could not supply every key field

    Key extraction for the record stopped at `ordinal`; the record was
    still keyed from the fields extracted before it.
    """
    position: int
    ordinal: int
    specification: KeySpecification
    reason: str


class Classification(Enum):
    """Routing outcome for a single record"""
    UNIQUE = "unique"
    DUPLICATE = "duplicate"


@dataclass
class ClassificationStats:
    """Statistics for one classification run"""
    records_processed: int = 0
    unique_count: int = 0
    duplicate_count: int = 0
    shortage_count: int = 0
    distinct_keys: int = 0
    duration_seconds: float = 0.0


@dataclass
class ClassificationResult:
    """Unique and duplicate records of an in-memory classification run"""

    unique: List[Record] = field(default_factory=list)
    duplicate: List[Record] = field(default_factory=list)
    stats: ClassificationStats = field(default_factory=ClassificationStats)

    @property
    def unique_lines(self) -> List[str]:
        return [record.line for record in self.unique]

    @property
    def duplicate_lines(self) -> List[str]:
        return [record.line for record in self.duplicate]

    def __iter__(self) -> Iterator[List[str]]:
        # Allows: uniques, dupes = classifier.classify(lines)
        yield self.unique_lines
        yield self.duplicate_lines

    def to_dataframe(self) -> pd.DataFrame:
        """
        Interleave both outputs back into input order

        Returns:
            DataFrame with columns position, record, status
        """
        rows = [
            {'position': r.position, 'record': r.line, 'status': Classification.UNIQUE.value}
            for r in self.unique
        ]
        rows.extend(
            {'position': r.position, 'record': r.line, 'status': Classification.DUPLICATE.value}
            for r in self.duplicate
        )
        df = pd.DataFrame(rows, columns=['position', 'record', 'status'])
        return df.sort_values('position', kind='stable').reset_index(drop=True)


@dataclass
class DedupeResult:
    """Result of a file-oriented dedupe run"""

    success: bool
    input_path: str
    unique_path: str
    duplicate_path: str

    stats: ClassificationStats = field(default_factory=ClassificationStats)

    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration_seconds: float = 0.0

    errors: List[str] = field(default_factory=list)
