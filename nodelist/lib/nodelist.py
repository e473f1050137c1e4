"""
Fidonet nodelist loaded into memory with address lookups.

A Nodelist is built once, from a file, a stream or an already assembled
zone mapping, and is read-only afterwards. Lookups descend the tree
zone -> network -> node and raise at the first missing level.

Typical usage:
    nodelist = Nodelist.from_path("NODELIST.123")
    entry = nodelist.get_entry("2:5020/1042")
    print(entry.sysop_name, entry.speed, entry.flags)
"""

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import IO, Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from pydantic import TypeAdapter

from nodelist.config import settings
from nodelist.lib.errors import (
    ConstructionError,
    EntryNotFoundError,
    NetworkNotFoundError,
    NodeNotFoundError,
    NodelistIOError,
    ZoneNotFoundError,
)
from nodelist.lib.indexer import IndexStats, NodelistIndexer
from nodelist.lib.keywords import LineType
from nodelist.lib.models import FidoAddress, NodelistEntry

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]
EntryRow = Tuple[int, Optional[int], Optional[int], NodelistEntry]

_TREE_ADAPTER = TypeAdapter(Dict[int, NodelistEntry])
_NETWORK_TYPES = (LineType.REGION, LineType.HOST)


class Nodelist:
    """
    In-memory Fidonet nodelist.

    Args:
        entries: Pre-built mapping of zone number to zone entry. Plain dicts
            are validated into NodelistEntry objects. Parsing is bypassed.
    """

    def __init__(self, entries: Optional[Mapping[int, object]] = None, stats: Optional[IndexStats] = None):
        self._entries: Dict[int, NodelistEntry] = _TREE_ADAPTER.validate_python(dict(entries or {}))
        self.stats = stats or IndexStats()

    @classmethod
    def from_path(
        cls, path: Optional[PathLike], encoding: Optional[str] = None, strict: Optional[bool] = None
    ) -> "Nodelist":
        """
        Load a nodelist file.

        Raises:
            ConstructionError: If path is None, missing or not a regular file
            NodelistIOError: If the file cannot be opened or read
        """
        if path is None:
            raise ConstructionError("Path is not set")

        path = Path(path)
        if not path.is_file():
            raise ConstructionError(f"File does not exist or is not a regular file: {path}")

        logger.info(f"Loading nodelist from {path}")
        try:
            stream = path.open("rb")
        except OSError as e:
            raise NodelistIOError(f"Cannot read file {path}: {e}") from e

        return cls.from_stream(stream, encoding=encoding, strict=strict)

    @classmethod
    def from_stream(
        cls, stream: IO, encoding: Optional[str] = None, strict: Optional[bool] = None
    ) -> "Nodelist":
        """
        Load a nodelist from a binary or text stream. The stream is always closed.

        Raises:
            NodelistIOError: If reading or decoding the stream fails
        """
        encoding = encoding or settings.encoding
        indexer = NodelistIndexer(strict=strict)
        try:
            with stream:
                indexer.index(_decode_lines(stream, encoding))
        except (OSError, UnicodeDecodeError) as e:
            raise NodelistIOError(f"Failed to read nodelist: {e}") from e

        return cls(indexer.entries, stats=indexer.stats)

    @property
    def entries(self) -> Mapping[int, NodelistEntry]:
        """Read-only view of the zone-keyed tree."""
        return MappingProxyType(self._entries)

    def get_entry(self, address: str) -> NodelistEntry:
        """
        Look up a node by ``zone:network/node`` address.

        Raises:
            AddressSyntaxError: If the address is malformed (no lookup is attempted)
            EntryNotFoundError: If any level of the address is missing
        """
        parsed = FidoAddress.parse(address)
        return self.get_node(parsed.zone, parsed.network, parsed.node)

    def get_node(self, zone: int, network: int, node: int) -> NodelistEntry:
        network_entry = self.get_network(zone, network)
        entry = network_entry.children.get(node)
        if entry is None:
            raise NodeNotFoundError(f"Node {zone}:{network}/{node} is not valid")
        return entry

    def get_network(self, zone: int, network: int) -> NodelistEntry:
        zone_entry = self.get_zone(zone)
        entry = zone_entry.children.get(network)
        if entry is None:
            raise NetworkNotFoundError(f"Network {zone}:{network} is not valid")
        return entry

    def get_zone(self, zone: int) -> NodelistEntry:
        entry = self._entries.get(zone)
        if entry is None:
            raise ZoneNotFoundError(f"Zone {zone} is not valid")
        return entry

    def iter_entries(self) -> Iterator[EntryRow]:
        """
        Walk the tree in file order.

        Yields ``(zone, network, node, entry)``; zones have no network or
        node number, networks (Region/Host entries, or any zone child that has
        children) have no node number, and childless nodes listed directly
        under a zone have no network number.
        """
        for zone_number, zone in self._entries.items():
            yield zone_number, None, None, zone
            for number, child in zone.children.items():
                if child.children or child.kind.line_type in _NETWORK_TYPES:
                    yield zone_number, number, None, child
                    for node_number, node in child.children.items():
                        yield zone_number, number, node_number, node
                else:
                    yield zone_number, None, number, child

    def __contains__(self, address: str) -> bool:
        try:
            self.get_entry(address)
        except EntryNotFoundError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Nodelist(zones={len(self._entries)}, parsed={self.stats.entries_parsed})"


def load_default(encoding: Optional[str] = None, strict: Optional[bool] = None) -> Nodelist:
    """Load the nodelist named by the NODELIST_FILE setting."""
    if not settings.nodelist_file:
        raise ConstructionError("NODELIST_FILE is not set")
    return Nodelist.from_path(settings.nodelist_file, encoding=encoding, strict=strict)


def _decode_lines(stream: Iterable, encoding: str) -> Iterator[str]:
    for line in stream:
        if isinstance(line, bytes):
            line = line.decode(encoding)
        yield line
