"""
Line indexer building the zone -> network -> node tree from nodelist lines.

The indexer is a small state machine. It remembers the zone and network
the previous lines opened, and attaches every following node line under
them. It works on plain strings so it can be driven without any I/O.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional

from nodelist.config import settings
from nodelist.lib.errors import NodelistLineError, NodelistStructureError
from nodelist.lib.keywords import LineType, classify
from nodelist.lib.models import MIN_FIELDS, NodelistEntry, parse_number

logger = logging.getLogger(__name__)

COMMENT_MARKER = ";"
FIELD_SEPARATOR = ","
# Some nodelists start node lines with an empty keyword field
KEYWORD_PLACEHOLDER = "###"
DOS_EOF = "\x1a"


class ParseState(Enum):
    NONE = "none"
    IN_ZONE = "in_zone"
    IN_NETWORK = "in_network"
    # The last Zone or Region/Host header was rejected; nothing attaches until the next valid one
    ORPHANED = "orphaned"


@dataclass
class ParseContext:
    """Current position in the tree while indexing."""

    state: ParseState = ParseState.NONE
    zone: Optional[int] = None
    network: Optional[int] = None

    def enter_zone(self, zone: int) -> None:
        self.state = ParseState.IN_ZONE
        self.zone = zone
        self.network = None

    def enter_network(self, network: int) -> None:
        self.state = ParseState.IN_NETWORK
        self.network = network

    def orphan(self, line_type: LineType) -> None:
        """Drop the context a rejected header line would have replaced."""
        self.state = ParseState.ORPHANED
        self.network = None
        if line_type is LineType.ZONE:
            self.zone = None


@dataclass
class IndexStats:
    """Counters collected over one parse."""

    lines_read: int = 0
    entries_parsed: int = 0
    lines_skipped: int = 0


def is_eligible(line: str) -> bool:
    """A line is indexed only if it is neither a comment nor blank."""
    return not line.startswith(COMMENT_MARKER) and bool(line.strip(" \t" + DOS_EOF))


def split_line(line: str) -> List[str]:
    """Split a line into fields, dropping trailing empty ones."""
    if line.startswith(FIELD_SEPARATOR):
        line = KEYWORD_PLACEHOLDER + line
    fields = line.split(FIELD_SEPARATOR)
    while fields and fields[-1] == "":
        fields.pop()
    return fields


class NodelistIndexer:
    """
    Builds the nodelist tree one line at a time.

    Args:
        strict: Abort on the first malformed line instead of skipping it.
            Defaults to ``settings.strict``.
    """

    def __init__(self, strict: Optional[bool] = None):
        self.entries: Dict[int, NodelistEntry] = {}
        self.context = ParseContext()
        self.stats = IndexStats()
        self.strict = settings.strict if strict is None else strict

    def feed(self, line: str) -> Optional[NodelistEntry]:
        """
        Process a single line.

        Returns:
            The entry created for the line, or None if the line was ignored

        Raises:
            NodelistFormatError: If the key or speed is not numeric
            NodelistStructureError: If a Region/Host line has no zone to attach to
        """
        line = line.rstrip("\r\n")
        if not is_eligible(line):
            return None

        fields = split_line(line)
        if len(fields) < MIN_FIELDS:
            return None

        line_type = classify(fields[0])
        try:
            key = parse_number(fields[1], "number")
            entry = NodelistEntry.from_fields(fields)
        except NodelistLineError:
            if line_type is not LineType.DEFAULT:
                self.context.orphan(line_type)
            raise

        if line_type is LineType.ZONE:
            self.entries[key] = entry
            self.context.enter_zone(key)
        elif line_type is LineType.REGION or line_type is LineType.HOST:
            zone = self._current_zone()
            if zone is None:
                raise NodelistStructureError(f"{fields[0]} {key} has no valid Zone line to attach to")
            zone.children[key] = entry
            self.context.enter_network(key)
        elif line_type is LineType.DEFAULT:
            parent = self._current_parent()
            if parent is None:
                if self.context.state is ParseState.ORPHANED:
                    logger.warning(f"Dropping node {key}: its Zone or Region/Host line was rejected")
                else:
                    logger.debug(f"Dropping node {key}: no zone seen yet")
                return None
            parent.children[key] = entry
        else:
            raise NodelistStructureError(f"Unhandled line type {line_type}")

        return entry

    def index(self, lines: Iterable[str]) -> Dict[int, NodelistEntry]:
        """Feed every line and return the finished tree."""
        for line_number, line in enumerate(lines, start=1):
            self.stats.lines_read += 1
            try:
                entry = self.feed(line)
            except NodelistLineError as e:
                e.line_number = line_number
                if self.strict:
                    raise
                self.stats.lines_skipped += 1
                logger.warning(f"Skipping malformed nodelist line: {e}")
                continue

            if entry is not None:
                self.stats.entries_parsed += 1

            if settings.progress_interval > 0 and line_number % settings.progress_interval == 0:
                logger.debug(f"  Processed {line_number:,} lines, {self.stats.entries_parsed:,} entries")

        logger.info(
            f"Nodelist indexed: {self.stats.entries_parsed:,} entries parsed from "
            f"{self.stats.lines_read:,} lines ({self.stats.lines_skipped:,} skipped)"
        )
        return self.entries

    def _current_zone(self) -> Optional[NodelistEntry]:
        if self.context.zone is None:
            return None
        return self.entries.get(self.context.zone)

    def _current_parent(self) -> Optional[NodelistEntry]:
        zone = self._current_zone()
        if zone is None or self.context.state in (ParseState.NONE, ParseState.ORPHANED):
            return None
        if self.context.state is ParseState.IN_ZONE:
            return zone
        return zone.children.get(self.context.network)
