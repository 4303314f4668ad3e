"""Event document enumeration and reading."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Union

from eventagenda.exceptions.errors import DocumentReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventDocument:
    """Raw text of one event document and where it came from."""

    path: Path
    text: str


def list_document_paths(directory: Union[str, Path]) -> list:
    """List the regular files in ``directory``, sorted by name.

    Subdirectories are skipped.

    Raises:
        DocumentReadError: If the directory cannot be listed.
    """
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise DocumentReadError(directory, e) from e
    return [entry for entry in entries if entry.is_file()]


def read_document(path: Union[str, Path]) -> EventDocument:
    """Read one document as UTF-8 text.

    Raises:
        DocumentReadError: If the file cannot be read or decoded.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, e) from e
    return EventDocument(path=path, text=text)


def iter_documents(directories: Iterable[Union[str, Path]]) -> Iterator[EventDocument]:
    """Yield every document in each directory, in directory order then name order."""
    for directory in directories:
        paths = list_document_paths(directory)
        logger.debug("Found %d document(s) in %s", len(paths), directory)
        for path in paths:
            yield read_document(path)
