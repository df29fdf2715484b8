"""Splitting module for EAD finding aids.

This module turns one hierarchical finding aid into a sequence of
standalone unit records, each carrying its inherited archival context.
"""

from findingaid.parsers.splitting.engine import EadSplitter
from findingaid.parsers.splitting.protocols import CopyStrategy, RecordSplitter
from findingaid.parsers.splitting.registry import IdentifierRegistry
from findingaid.parsers.splitting.resolver import IdentifierResolver
from findingaid.parsers.splitting.strategies import (
    FilteredCopyStrategy,
    MergeByNameStrategy,
    is_container,
)

__all__ = [
    "CopyStrategy",
    "RecordSplitter",
    "IdentifierRegistry",
    "IdentifierResolver",
    "EadSplitter",
    "FilteredCopyStrategy",
    "MergeByNameStrategy",
    "is_container",
]
