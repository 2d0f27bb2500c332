from __future__ import annotations

from dataclasses import dataclass
import logging

from lrc_parser.config import DEFAULT_CONFIG, ParserConfig
from lrc_parser.errors import InvalidArgumentError, LrcFormatError

from .metadata import MetadataBuilder
from .model import LrcDocument, LyricLine
from .tags import MetadataTag, TimestampTag, classify
from .tokenize import split_lines, tokenize_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LrcParseStats:
    lines_total: int
    groups_total: int
    timestamp_tags: int
    metadata_tags: int
    ignored_tags: int
    lines_out: int


def parse_lrc(text: str, config: ParserConfig | None = None) -> LrcDocument:
    """
    Parse LRC text into an LrcDocument.

    Supported:
    - [mm:ss], [mm:ss.x...] with any number of digits in each field
    - several timestamps sharing one lyric: [00:01][00:05]text
    - several groups on one line: [00:01]one[00:02]two
    - [ti:], [ar:], [al:], [by:], [offset:ms] (keys are case-insensitive)

    Unknown [key:value] tags are ignored. Anything else in brackets, text
    outside of a tag group, conflicting metadata and duplicate timestamps
    raise LrcFormatError.
    """
    doc, _ = parse_lrc_with_stats(text, config)
    return doc


def parse_lrc_with_stats(text: str, config: ParserConfig | None = None) -> tuple[LrcDocument, LrcParseStats]:
    if text is None:
        raise InvalidArgumentError("text must not be None")
    config = config or DEFAULT_CONFIG

    lines = split_lines(text)
    metadata = MetadataBuilder()
    lyrics: list[LyricLine] = []
    groups_total = 0
    metadata_tags = 0
    ignored = 0

    for line in lines:
        for group in tokenize_line(line):
            groups_total += 1
            for body in group.tags:
                tag = classify(body)
                if isinstance(tag, TimestampTag):
                    lyrics.append(LyricLine(tag.timestamp, group.content))
                elif isinstance(tag, MetadataTag):
                    metadata_tags += 1
                    metadata.add(tag.key, tag.value)
                else:
                    ignored += 1
                    logger.debug("Ignoring unsupported tag [%s]", body)

    if not groups_total:
        raise LrcFormatError("No LRC tags found")

    doc = LrcDocument(metadata.build(), lyrics, apply_offset=config.apply_offset)
    stats = LrcParseStats(
        lines_total=len(lines),
        groups_total=groups_total,
        timestamp_tags=len(lyrics),
        metadata_tags=metadata_tags,
        ignored_tags=ignored,
        lines_out=len(doc),
    )
    logger.debug(
        "Parsed LRC: %d lines, %d timestamps, %d metadata tags, %d ignored",
        stats.lines_total,
        stats.timestamp_tags,
        stats.metadata_tags,
        stats.ignored_tags,
    )
    return doc, stats
