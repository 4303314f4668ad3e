"""Front-matter header parsing for event documents.

A document carries its fields in a block delimited by ``---`` lines::

    ---
    title: Standup
    type: recurring
    daysOfWeek: [M, W, F]
    ---
    free-form body, ignored

Each header line is ``key: value`` split on the first colon. The only
list-valued field is ``daysOfWeek``, which may be written inline
(``[M, W, F]``) or as a block of ``- X`` lines. This is deliberately not a
YAML parser: no quoting, escaping or nesting.
"""

import logging
import string
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union

from eventagenda.config.constants import HEADER_DELIMITER, LIST_FIELDS
from eventagenda.exceptions.errors import (
    FieldShapeError,
    HeaderParseError,
    MissingFieldError,
)

logger = logging.getLogger(__name__)

# Leading characters stripped from a block list item
_LIST_MARKER_CHARS = string.whitespace + "-"


@dataclass(frozen=True)
class ScalarValue:
    """A single header value, kept as written (leading whitespace removed)."""

    text: str


@dataclass(frozen=True)
class ListValue:
    """An ordered list of header items."""

    items: Tuple[str, ...]


FieldValue = Union[ScalarValue, ListValue]


class FieldMapping:
    """Field name to value mapping produced from one document header."""

    def __init__(self, values: Optional[Dict[str, FieldValue]] = None):
        self._values: Dict[str, FieldValue] = dict(values or {})

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldMapping):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"FieldMapping({self._values!r})"

    def keys(self):
        return self._values.keys()

    def get(self, name: str) -> Optional[FieldValue]:
        return self._values.get(name)

    def set(self, name: str, value: FieldValue) -> None:
        if name in self._values:
            logger.debug("Duplicate header key '%s'; last value wins", name)
        self._values[name] = value

    def scalar(self, name: str) -> str:
        """Return the scalar text of a required field.

        Raises:
            MissingFieldError: If the field is absent.
            FieldShapeError: If the field holds a list.
        """
        value = self._values.get(name)
        if value is None:
            raise MissingFieldError(name)
        if not isinstance(value, ScalarValue):
            raise FieldShapeError(name, expected="scalar")
        return value.text

    def items(self, name: str) -> Tuple[str, ...]:
        """Return the items of a required list field.

        Raises:
            MissingFieldError: If the field is absent.
            FieldShapeError: If the field holds a scalar.
        """
        value = self._values.get(name)
        if value is None:
            raise MissingFieldError(name)
        if not isinstance(value, ListValue):
            raise FieldShapeError(name, expected="list")
        return value.items

    def has_scalar(self, name: str, text: str) -> bool:
        """True if the field is present, scalar, and exactly equal to ``text``."""
        return self._values.get(name) == ScalarValue(text)


def parse_header(text: str) -> FieldMapping:
    """Parse the delimited header block of a document.

    Args:
        text: Full document text.

    Returns:
        The header fields. Empty if the document has no opening delimiter.

    Raises:
        HeaderParseError: If a header line has no colon, or an inline
            ``daysOfWeek`` list is missing a bracket.
    """
    mapping = FieldMapping()
    lines = text.splitlines()
    in_header = False
    index = 0

    while index < len(lines):
        line = lines[index]
        index += 1

        if line == HEADER_DELIMITER:
            if in_header:
                break
            in_header = True
            continue

        if not in_header:
            continue

        key, sep, value = line.partition(":")
        if not sep:
            raise HeaderParseError("expected 'key: value'", line_number=index, line=line)

        if key in LIST_FIELDS:
            if value.strip():
                items = _parse_inline_list(value, index, line)
            else:
                items, index = _consume_block_list(lines, index)
            mapping.set(key, ListValue(tuple(items)))
        else:
            mapping.set(key, ScalarValue(value.lstrip()))

    return mapping


def _parse_inline_list(value: str, line_number: int, line: str) -> List[str]:
    """Split ``[a, b, c]`` into its items."""
    start = value.find("[")
    if start < 0:
        raise HeaderParseError("Cannot find opening [ on list", line_number=line_number, line=line)
    end = value.find("]", start + 1)
    if end < 0:
        raise HeaderParseError("Cannot find closing ] on list", line_number=line_number, line=line)

    inner = value[start + 1:end]
    if not inner.strip():
        return []
    return [item.strip() for item in inner.split(",")]


def _consume_block_list(lines: List[str], index: int) -> Tuple[List[str], int]:
    """Collect the run of ``- item`` lines starting at ``index``.

    Returns:
        The items and the index of the first line after the run.
    """
    items = []
    while index < len(lines):
        candidate = lines[index]
        # A "---" line closes the header; it is never a list item
        if candidate == HEADER_DELIMITER or not candidate.lstrip().startswith("-"):
            break
        items.append(candidate.lstrip(_LIST_MARKER_CHARS).strip())
        index += 1
    return items, index
