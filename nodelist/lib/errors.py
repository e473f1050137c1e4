"""Exceptions raised while loading and querying a nodelist."""

from typing import Optional


class NodelistError(Exception):
    """Base class for all nodelist errors."""


class ConstructionError(NodelistError, ValueError):
    """The nodelist source is missing, unset or not a regular file."""


class NodelistIOError(NodelistError, OSError):
    """Reading the nodelist failed. The original exception is kept as ``__cause__``."""


class NodelistLineError(NodelistError, ValueError):
    """A single nodelist line could not be turned into an entry."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class NodelistFormatError(NodelistLineError):
    """A numeric field (key or speed) is not a non-negative integer."""


class NodelistStructureError(NodelistLineError):
    """A line has no parent to attach to, e.g. a Region before any Zone."""


class NodelistLookupError(NodelistError, LookupError):
    """Base class for address lookup failures."""


class AddressSyntaxError(NodelistLookupError, ValueError):
    """The address is not of the form ``zone:network/node``."""


class EntryNotFoundError(NodelistLookupError):
    """No entry exists for the requested key."""


class ZoneNotFoundError(EntryNotFoundError):
    pass


class NetworkNotFoundError(EntryNotFoundError):
    pass


class NodeNotFoundError(EntryNotFoundError):
    pass
