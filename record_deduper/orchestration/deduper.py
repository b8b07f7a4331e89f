"""
Deduper facade

Wires the key registry, classifier and file adapters together behind a
small fluent API.
"""
from datetime import datetime
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union

from record_deduper.adapters.base import LineSink
from record_deduper.adapters.destinations.text_sink import TextFileSink
from record_deduper.adapters.sources.text_source import TextFileSource
from record_deduper.common.config import Config, get_config
from record_deduper.common.exceptions import ConfigurationError, DeduperError
from record_deduper.common.logging import get_logger
from record_deduper.common.models import (
    ClassificationResult,
    ClassificationStats,
    DedupeResult,
)
from record_deduper.keys.extractor import ShortageCallback
from record_deduper.keys.registry import KeyRegistry, Separator
from record_deduper.orchestration.naming import output_paths
from record_deduper.routing.classifier import Classifier


class Deduper:
    """
    Split text records into unique and duplicate records

    Example:
        nick_names = {'Bob': 'Robert', 'Rob': 'Robert'}
        result = (Deduper()
            .set_field_separator(' ')
            .add_key(field_number=2, alias=nick_names)
            .add_key(field_number=3)
            .dedupe_file("names.txt"))

    With no keys added, whole lines are compared.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        on_shortage: Optional[ShortageCallback] = None
    ):
        """
        Initialize deduper

        Args:
            config: Ambient settings (output suffixes, encoding); defaults
                to the global configuration
            on_shortage: Subscriber for ExtractionShortage diagnostics
        """
        self.config = config or get_config()
        self.logger = get_logger("Deduper")
        self.registry = KeyRegistry()
        self.classifier = Classifier(self.registry, on_shortage=on_shortage)

        self.result: Optional[DedupeResult] = None

    def set_field_separator(self, token: Separator) -> 'Deduper':
        """
        Switch to delimited records split on token

        Args:
            token: Literal separator or compiled regex

        Returns:
            self for chaining

        Raises:
            ConfigurationError: If the separator is rejected
        """
        self.registry.set_field_separator(token)
        return self

    def add_key(
        self,
        field_number: Optional[int] = None,
        start_pos: Optional[int] = None,
        key_length: Optional[int] = None,
        ignore_case: bool = False,
        ignore_whitespace: bool = False,
        alias: Optional[Mapping[str, str]] = None,
    ) -> 'Deduper':
        """
        Add a key definition (see KeyRegistry.add_key)

        Returns:
            self for chaining

        Raises:
            ConfigurationError: If the key is rejected
        """
        spec = self.registry.add_key(
            field_number=field_number,
            start_pos=start_pos,
            key_length=key_length,
            ignore_case=ignore_case,
            ignore_whitespace=ignore_whitespace,
            alias=alias,
        )
        self.logger.info(f"Key added: {spec.describe()}")
        return self

    def classify(self, records: Iterable[str]) -> ClassificationResult:
        """Classify an in-memory sequence of records"""
        return self.classifier.classify(records)

    def classify_stream(
        self,
        line_source: Iterable[str],
        unique_sink: LineSink,
        duplicate_sink: LineSink,
    ) -> ClassificationStats:
        """Classify records from a source into two connected sinks"""
        return self.classifier.classify_stream(line_source, unique_sink, duplicate_sink)

    def dedupe_file(
        self,
        input_path: Union[str, Path],
        unique_path: Optional[Union[str, Path]] = None,
        duplicate_path: Optional[Union[str, Path]] = None,
    ) -> DedupeResult:
        """
        Split a file into a file of unique and a file of duplicate records

        Output paths default to <name>_uniqs<ext> and <name>_dupes<ext>
        beside the input. Existing outputs are overwritten; the input is
        never modified.

        Args:
            input_path: File to dedupe
            unique_path: Override for the unique output
            duplicate_path: Override for the duplicate output

        Returns:
            DedupeResult (also stored on self.result)

        Raises:
            ConfigurationError: If an output path would overwrite the input
            ReadError: If the input cannot be read
            WriteError: If an output cannot be written
        """
        default_unique, default_duplicate = output_paths(
            input_path,
            unique_suffix=self.config.get('output.unique_suffix'),
            duplicate_suffix=self.config.get('output.duplicate_suffix'),
        )
        unique_path = Path(unique_path) if unique_path else default_unique
        duplicate_path = Path(duplicate_path) if duplicate_path else default_duplicate

        encoding = self.config.get('io.encoding', 'utf-8')
        atomic = self.config.get_bool('output.atomic', True)

        result = DedupeResult(
            success=False,
            input_path=str(input_path),
            unique_path=str(unique_path),
            duplicate_path=str(duplicate_path),
            start_time=datetime.now()
        )
        self.logger.info(f"Deduping {input_path} -> {unique_path}, {duplicate_path}")

        try:
            _check_distinct(Path(input_path), unique_path, duplicate_path)

            with TextFileSource(str(input_path), encoding=encoding) as source, \
                    TextFileSink(str(unique_path), encoding=encoding, atomic=atomic) as uniques, \
                    TextFileSink(str(duplicate_path), encoding=encoding, atomic=atomic) as dupes:
                result.stats = self.classifier.classify_stream(source, uniques, dupes)

            result.success = True
            self.logger.info(
                f"Dedupe complete: {result.stats.unique_count} unique, "
                f"{result.stats.duplicate_count} duplicate records"
            )

        except DeduperError as e:
            result.errors.append(str(e))
            self.logger.error(f"Dedupe of {input_path} failed: {e}")
            raise

        finally:
            result.end_time = datetime.now()
            result.duration_seconds = (result.end_time - result.start_time).total_seconds()
            self.result = result

        return result


def _check_distinct(input_path: Path, unique_path: Path, duplicate_path: Path) -> None:
    resolved = [p.resolve() for p in (input_path, unique_path, duplicate_path)]
    if resolved[0] in resolved[1:]:
        raise ConfigurationError(f"Output path would overwrite the input file: {input_path}")
    if resolved[1] == resolved[2]:
        raise ConfigurationError(
            f"Unique and duplicate outputs must differ: {unique_path}"
        )
