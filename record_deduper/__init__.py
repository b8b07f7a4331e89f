"""
record_deduper: split text records into unique and duplicate records.

Duplicates are defined by configurable keys: whole lines, delimited
fields or fixed width columns, optionally ignoring case, surrounding
whitespace, and treating aliases (Bob => Robert) as equal.
"""
from record_deduper.common.exceptions import (
    DeduperError,
    ConfigurationError,
    ReadError,
    WriteError,
)
from record_deduper.common.models import (
    ClassificationResult,
    ClassificationStats,
    DedupeResult,
    ExtractionShortage,
    KeySpecification,
    Record,
)
from record_deduper.keys.registry import KeyRegistry
from record_deduper.routing.classifier import Classifier
from record_deduper.orchestration.deduper import Deduper
from record_deduper.orchestration.naming import output_paths

__version__ = "0.1.0"

__all__ = [
    'Deduper',
    'Classifier',
    'KeyRegistry',
    'KeySpecification',
    'Record',
    'ClassificationResult',
    'ClassificationStats',
    'DedupeResult',
    'ExtractionShortage',
    'output_paths',
    'DeduperError',
    'ConfigurationError',
    'ReadError',
    'WriteError',
]
