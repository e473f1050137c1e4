"""Library module containing models, the line indexer and nodelist lookups."""

from nodelist.lib.errors import (
    AddressSyntaxError,
    ConstructionError,
    EntryNotFoundError,
    NetworkNotFoundError,
    NodeNotFoundError,
    NodelistError,
    NodelistFormatError,
    NodelistIOError,
    NodelistLineError,
    NodelistLookupError,
    NodelistStructureError,
    ZoneNotFoundError,
)
from nodelist.lib.keywords import Keyword, LineType, classify
from nodelist.lib.models import FidoAddress, NodelistEntry
from nodelist.lib.indexer import IndexStats, NodelistIndexer, ParseContext, ParseState
from nodelist.lib.nodelist import Nodelist, load_default
from nodelist.lib.data import filter_by_flag, get_df_polars, nodelist_to_df

__all__ = [
    # Errors
    'NodelistError',
    'ConstructionError',
    'NodelistIOError',
    'NodelistLineError',
    'NodelistFormatError',
    'NodelistStructureError',
    'NodelistLookupError',
    'AddressSyntaxError',
    'EntryNotFoundError',
    'ZoneNotFoundError',
    'NetworkNotFoundError',
    'NodeNotFoundError',
    # Keywords
    'Keyword',
    'LineType',
    'classify',
    # Models
    'NodelistEntry',
    'FidoAddress',
    # Indexer
    'NodelistIndexer',
    'ParseContext',
    'ParseState',
    'IndexStats',
    # Nodelist
    'Nodelist',
    'load_default',
    # Data utilities
    'nodelist_to_df',
    'get_df_polars',
    'filter_by_flag',
]
