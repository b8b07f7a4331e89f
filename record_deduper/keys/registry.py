"""
Key specification registry

Holds the ordered list of key definitions for a deduper and enforces
that all of them use one extraction mode. Without a field separator the
registry is in fixed-width mode; setting a separator switches it to
delimited mode.
"""
from typing import List, Mapping, Optional, Pattern, Tuple, Union

from record_deduper.common.exceptions import ConfigurationError
from record_deduper.common.logging import get_logger
from record_deduper.common.models import (
    Delimited,
    ExtractionMode,
    FixedWidth,
    KeySpecification,
)

Separator = Union[str, Pattern[str]]


class KeyRegistry:
    """Ordered, mode-consistent collection of KeySpecification"""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)
        self._separator: Optional[Separator] = None
        self._specs: List[KeySpecification] = []

    @property
    def field_separator(self) -> Optional[Separator]:
        return self._separator

    @property
    def mode(self) -> ExtractionMode:
        if self._separator is None:
            return ExtractionMode.FIXED_WIDTH
        return ExtractionMode.DELIMITED

    @property
    def specs(self) -> Tuple[KeySpecification, ...]:
        """Accepted specifications in ordinal order"""
        return tuple(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def set_field_separator(self, token: Separator) -> 'KeyRegistry':
        """
        Declare delimited mode and the separator used to split records

        Args:
            token: Literal separator (any length) or compiled regex

        Returns:
            self for chaining

        Raises:
            ConfigurationError: If the token is empty, or fixed-width keys
                were already accepted
        """
        if isinstance(token, str):
            if token == "":
                self._reject("Field separator must not be empty")
        elif not hasattr(token, 'match') or not getattr(token, 'pattern', None):
            self._reject(
                f"Field separator must be a string or compiled regex, got {token!r}"
            )

        if any(spec.mode is ExtractionMode.FIXED_WIDTH for spec in self._specs):
            self._reject(
                "Cannot set a field separator after fixed width keys were added"
            )

        self._separator = token
        self.logger.debug(f"Field separator set to {token!r}")
        return self

    def add_key(
        self,
        field_number: Optional[int] = None,
        start_pos: Optional[int] = None,
        key_length: Optional[int] = None,
        ignore_case: bool = False,
        ignore_whitespace: bool = False,
        alias: Optional[Mapping[str, str]] = None,
    ) -> KeySpecification:
        """
        Append a key definition with the next ordinal

        Exactly one of field_number (delimited mode) or start_pos
        (fixed-width mode, key_length required) must be given. A rejected
        call leaves the registry unchanged.

        Args:
            field_number: 1-based field to use as (part of) the key
            start_pos: 1-based character position where the key starts
            key_length: Key width for start_pos, or truncation for field_number
            ignore_case: Fold the value to lower case
            ignore_whitespace: Strip leading and trailing whitespace
            alias: Exact, case-sensitive raw -> canonical value mapping

        Returns:
            The new KeySpecification

        Raises:
            ConfigurationError: If the options are inconsistent with each
                other or with the registry's mode
        """
        if field_number is not None and start_pos is not None:
            self._reject("Specify either field_number or start_pos, not both")

        if field_number is not None:
            if self.mode is not ExtractionMode.DELIMITED:
                self._reject("Cannot use field_number on fixed width lines")
            _check_positive('field_number', field_number, self._reject)
            if key_length is not None:
                _check_positive('key_length', key_length, self._reject)
            extraction = Delimited(field_number=field_number, key_length=key_length)

        elif start_pos is not None:
            if self.mode is not ExtractionMode.FIXED_WIDTH:
                self._reject("Cannot use start_pos on character separated records")
            _check_positive('start_pos', start_pos, self._reject)
            if key_length is None:
                self._reject(f"No key_length defined for start_pos: {start_pos}")
            _check_positive('key_length', key_length, self._reject)
            extraction = FixedWidth(start_pos=start_pos, length=key_length)

        else:
            self._reject("add_key requires field_number or start_pos")

        if alias is not None:
            if not isinstance(alias, Mapping):
                self._reject(f"alias must be a mapping, got {type(alias).__name__}")
            for raw, canonical in alias.items():
                if not isinstance(raw, str) or not isinstance(canonical, str):
                    self._reject(f"alias entries must map str to str: {raw!r} -> {canonical!r}")

        spec = KeySpecification(
            ordinal=len(self._specs) + 1,
            extraction=extraction,
            ignore_case=bool(ignore_case),
            ignore_whitespace=bool(ignore_whitespace),
            alias=alias or {},
        )
        self._specs.append(spec)
        self.logger.debug(f"Added {spec.describe()}")
        return spec

    def _reject(self, message: str) -> None:
        self.logger.warning(message)
        raise ConfigurationError(message)


def _check_positive(name, value, reject) -> None:
    # bool is an int subclass but never a sensible position
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        reject(f"{name} must be a positive integer, got {value!r}")
