"""Split hierarchical EAD finding aids into standalone unit records."""

from findingaid.config import SplitterOptions, load_options
from findingaid.models import Archive, ParentLink
from findingaid.parsers.ead_loader import EadParseError
from findingaid.parsers.splitting import EadSplitter

__version__ = "0.1.0"

__all__ = [
    "Archive",
    "EadParseError",
    "EadSplitter",
    "ParentLink",
    "SplitterOptions",
    "load_options",
]
