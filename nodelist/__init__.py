"""Fidonet nodelist parser with zone:network/node lookups."""

from nodelist.lib import (
    AddressSyntaxError,
    ConstructionError,
    EntryNotFoundError,
    FidoAddress,
    Keyword,
    Nodelist,
    NodelistEntry,
    NodelistError,
    NodelistIOError,
    NodelistLookupError,
    load_default,
)

__version__ = "0.1.0"

__all__ = [
    "Nodelist",
    "NodelistEntry",
    "FidoAddress",
    "Keyword",
    "load_default",
    "NodelistError",
    "ConstructionError",
    "NodelistIOError",
    "NodelistLookupError",
    "AddressSyntaxError",
    "EntryNotFoundError",
]
