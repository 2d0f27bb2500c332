"""Strict parser and time-indexed lookup for LRC lyric files."""

from lrc_parser.config import ParserConfig, load_config
from lrc_parser.errors import (
    DuplicateTimestampError,
    InvalidArgumentError,
    LrcError,
    LrcFormatError,
    MetadataConflictError,
)
from lrc_parser.logging_setup import setup_logging
from lrc_parser.lrc import (
    LrcDocument,
    LrcParseStats,
    LyricLine,
    Metadata,
    parse_lrc,
    parse_lrc_with_stats,
)

__all__ = [
    "DuplicateTimestampError",
    "InvalidArgumentError",
    "LrcDocument",
    "LrcError",
    "LrcFormatError",
    "LrcParseStats",
    "LyricLine",
    "Metadata",
    "MetadataConflictError",
    "ParserConfig",
    "load_config",
    "parse_lrc",
    "parse_lrc_with_stats",
    "setup_logging",
]
