"""
Delimited field splitter

Splits one line into fields on a literal or regex separator while
honouring quoting and backslash escapes. An apostrophe between two word
characters (O'Brien, don't) is data, not a quote.
"""
from typing import List, Pattern, Union

from record_deduper.common.exceptions import ConfigurationError


class FieldSplitter:
    """Quote-aware splitter for separator-delimited records"""

    def __init__(
        self,
        separator: Union[str, Pattern[str]],
        quote_chars: str = "\"'",
        escape_char: str = "\\",
    ):
        """
        Initialize splitter

        Args:
            separator: Literal separator token or compiled regex
            quote_chars: Characters that open/close a quoted section
            escape_char: Character that makes the next character literal
                ('' disables escaping)
        """
        if isinstance(separator, str) and not separator:
            raise ConfigurationError("Field separator must not be empty")

        self.separator = separator
        self.quote_chars = quote_chars
        self.escape_char = escape_char
        self._special = set(quote_chars)
        if escape_char:
            self._special.add(escape_char)

    def split(self, line: str) -> List[str]:
        """
        Split a line into its fields

        Args:
            line: Raw record, without trailing newline

        Returns:
            List of field values (quotes and escapes removed, not trimmed)
        """
        if isinstance(self.separator, str) and not self._special.intersection(line):
            return line.split(self.separator)
        return self._scan(line)

    def _scan(self, line: str) -> List[str]:
        fields: List[str] = []
        current: List[str] = []
        quote = None
        i = 0
        n = len(line)

        while i < n:
            ch = line[i]

            if self.escape_char and ch == self.escape_char and i + 1 < n:
                current.append(line[i + 1])
                i += 2
                continue

            if quote is not None:
                if ch == quote:
                    if i + 1 < n and line[i + 1] == quote:
                        # Doubled quote inside a quoted section
                        current.append(quote)
                        i += 2
                        continue
                    if not _is_apostrophe(line, i):
                        quote = None
                        i += 1
                        continue
                current.append(ch)
                i += 1
                continue

            width = self._separator_width(line, i)
            if width:
                fields.append(''.join(current))
                current = []
                i += width
                continue

            if ch in self.quote_chars and not _is_apostrophe(line, i):
                quote = ch
                i += 1
                continue

            current.append(ch)
            i += 1

        # An unterminated quote runs to end of line
        fields.append(''.join(current))
        return fields

    def _separator_width(self, line: str, i: int) -> int:
        """Length of the separator starting at i, 0 if there is none"""
        if isinstance(self.separator, str):
            return len(self.separator) if line.startswith(self.separator, i) else 0

        match = self.separator.match(line, i)
        if match and match.end() > i:
            return match.end() - i
        return 0


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == '_'


def _is_apostrophe(line: str, i: int) -> bool:
    return (
        line[i] == "'"
        and 0 < i < len(line) - 1
        and _is_word_char(line[i - 1])
        and _is_word_char(line[i + 1])
    )
