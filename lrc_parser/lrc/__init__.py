from .metadata import Metadata, MetadataBuilder
from .model import LrcDocument, LyricLine
from .parse import LrcParseStats, parse_lrc, parse_lrc_with_stats

__all__ = [
    "LrcDocument",
    "LrcParseStats",
    "LyricLine",
    "Metadata",
    "MetadataBuilder",
    "parse_lrc",
    "parse_lrc_with_stats",
]
