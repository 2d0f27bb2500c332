"""
Split raw LRC text into tag groups.

A tag group is a run of adjacent bracketed tags plus the text that follows it,
up to the next tag or the end of the line:

    [00:12.00][01:40.50]Some lyric[02:10]Another
    -> (("00:12.00", "01:40.50"), "Some lyric"), (("02:10",), "Another")
"""

from __future__ import annotations

from dataclasses import dataclass

import regex

from lrc_parser.errors import LrcFormatError

# [mm:ss] / [mm:ss.xx] with any digit count, or [key:value]
_TAG_BODY = r"\d+:\d+(?:\.\d+)?|[A-Za-z][A-Za-z0-9_-]*:[^\]]*"
_GROUP_RE = regex.compile(rf"(?:\[(?P<tag>{_TAG_BODY})\])+(?P<content>[^\[\]]*)")
_LINE_BREAK_RE = regex.compile(r"[\r\n]+")


@dataclass(frozen=True, slots=True)
class TagGroup:
    tags: tuple[str, ...]
    content: str


def split_lines(text: str) -> list[str]:
    text = text.replace("\\'", "'")
    return [line for line in _LINE_BREAK_RE.split(text) if line]


def tokenize_line(line: str) -> list[TagGroup]:
    groups: list[TagGroup] = []
    pos = 0
    while pos < len(line):
        m = _GROUP_RE.match(line, pos)
        if m is None:
            raise LrcFormatError(f"Invalid LRC syntax at column {pos + 1}: {line!r}")
        # regex keeps every repetition of a group, not only the last one
        groups.append(TagGroup(tags=tuple(m.captures("tag")), content=m.group("content")))
        pos = m.end()
    return groups

