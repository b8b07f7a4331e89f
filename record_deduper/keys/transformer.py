"""
Key transformer

Normalizes extracted values and assembles the composite key.
"""
from typing import Iterable

from record_deduper.common.models import KeySpecification
from record_deduper.keys.extractor import ExtractedField

# Appended after every value; readable in debug output, not escaped
KEY_SEPARATOR = ":"


class KeyTransformer:
    """Apply alias, case and whitespace rules and build composite keys"""

    def __init__(self, separator: str = KEY_SEPARATOR):
        self.separator = separator

    @staticmethod
    def transform_value(spec: KeySpecification, value: str) -> str:
        """
        Normalize one extracted value

        Order is fixed: alias substitution (exact, case-sensitive), then
        case folding, then trimming of surrounding whitespace.

        Args:
            spec: Specification the value was extracted for
            value: Raw extracted value

        Returns:
            Normalized value
        """
        value = spec.alias.get(value, value)
        if spec.ignore_case:
            value = value.lower()
        if spec.ignore_whitespace:
            value = value.strip()
        return value

    def compose(self, fields: Iterable[ExtractedField]) -> str:
        """Concatenate transformed values, each followed by the separator"""
        return ''.join(
            f"{self.transform_value(spec, value)}{self.separator}"
            for spec, value in fields
        )
