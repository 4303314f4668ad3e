"""Agenda pipeline: documents to ordered, active events."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Union

from eventagenda.core.event_builder import build_event
from eventagenda.core.event_model import Event
from eventagenda.core.header_parser import parse_header
from eventagenda.core.ordering import select_active
from eventagenda.exceptions.errors import DocumentError, EventBuildError, HeaderParseError
from eventagenda.storage.documents import EventDocument, iter_documents

logger = logging.getLogger(__name__)


def parse_document(document: EventDocument) -> Event:
    """Parse and build the event held in one document.

    Raises:
        DocumentError: Wrapping the header or build error, with the path.
    """
    try:
        return build_event(parse_header(document.text))
    except (HeaderParseError, EventBuildError) as e:
        raise DocumentError(document.path, e) from e


def load_events(directories: Iterable[Union[str, Path]]) -> List[Event]:
    """Load every event from the given directories.

    All or nothing: the first document that fails aborts the load.

    Raises:
        DocumentError: If a document cannot be parsed or built.
        DocumentReadError: If a directory or file cannot be read.
    """
    events = [parse_document(document) for document in iter_documents(directories)]
    logger.info("Loaded %d event(s)", len(events))
    return events


def build_agenda(directories: Iterable[Union[str, Path]], now: datetime) -> List[Event]:
    """Load events and return those active at ``now`` in display order."""
    events = load_events(directories)
    active = select_active(events, now)
    logger.info("%d of %d event(s) active at %s", len(active), len(events), now.isoformat(timespec="minutes"))
    return active
