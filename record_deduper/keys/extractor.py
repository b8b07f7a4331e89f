"""
Field extractor

Pulls the raw key values out of a record, one per KeySpecification in
ordinal order. A record that cannot satisfy a specification (missing or
empty field, line too short) is a shortage: extraction stops there, the
values gathered so far are returned and a diagnostic event is emitted.
"""
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from record_deduper.common.exceptions import ConfigurationError
from record_deduper.common.logging import get_logger
from record_deduper.common.models import (
    Delimited,
    ExtractionShortage,
    KeySpecification,
    Record,
)
from record_deduper.keys.registry import KeyRegistry, Separator
from record_deduper.keys.splitter import FieldSplitter

ExtractedField = Tuple[KeySpecification, str]
ShortageCallback = Callable[[ExtractionShortage], None]


class FieldExtractor:
    """Extract key field values from raw records"""

    def __init__(
        self,
        specs: Iterable[KeySpecification],
        separator: Optional[Separator] = None,
        on_shortage: Optional[ShortageCallback] = None,
    ):
        """
        Initialize extractor

        Args:
            specs: Key specifications, in ordinal order
            separator: Field separator for delimited specifications
            on_shortage: Called with an ExtractionShortage for every short record
        """
        self.specs: Tuple[KeySpecification, ...] = tuple(specs)
        self.on_shortage = on_shortage
        self.logger = get_logger(self.__class__.__name__)

        needs_splitter = any(isinstance(s.extraction, Delimited) for s in self.specs)
        if needs_splitter and separator is None:
            raise ConfigurationError("Delimited keys require a field separator")
        self.splitter = FieldSplitter(separator) if needs_splitter else None

    @classmethod
    def from_registry(
        cls,
        registry: KeyRegistry,
        on_shortage: Optional[ShortageCallback] = None
    ) -> 'FieldExtractor':
        """Snapshot a registry's current specifications"""
        return cls(registry.specs, registry.field_separator, on_shortage)

    def extract(self, record: Record) -> List[ExtractedField]:
        """
        Extract key values from one record

        Args:
            record: Input record

        Returns:
            (specification, raw value) pairs for every specification
            satisfied before the first shortage
        """
        fields = self.splitter.split(record.line) if self.splitter else None

        extracted: List[ExtractedField] = []
        for spec in self.specs:
            if isinstance(spec.extraction, Delimited):
                value, reason = _delimited_value(fields, spec.extraction)
            else:
                value, reason = _fixed_width_value(record.line, spec)

            if reason:
                self._report_shortage(record, spec, reason)
                break
            extracted.append((spec, value))

        return extracted

    def _report_shortage(self, record: Record, spec: KeySpecification, reason: str) -> None:
        self.logger.warning(
            f"Record {record.position}: {reason}; {spec.describe()} and later keys skipped"
        )
        if self.on_shortage is not None:
            self.on_shortage(ExtractionShortage(
                position=record.position,
                ordinal=spec.ordinal,
                specification=spec,
                reason=reason,
            ))


def _delimited_value(fields: Sequence[str], extraction: Delimited) -> Tuple[str, Optional[str]]:
    index = extraction.field_number - 1
    if index >= len(fields):
        return "", (
            f"record has {len(fields)} fields, field {extraction.field_number} requested"
        )

    value = fields[index]
    if value == "":
        return "", f"field {extraction.field_number} is empty"

    if extraction.key_length:
        value = value[:extraction.key_length]
    return value, None


def _fixed_width_value(line: str, spec: KeySpecification) -> Tuple[str, Optional[str]]:
    start = spec.extraction.start_pos - 1
    end = start + spec.extraction.length
    if len(line) < end:
        return "", f"record is {len(line)} characters long, key needs {end}"
    return line[start:end], None
