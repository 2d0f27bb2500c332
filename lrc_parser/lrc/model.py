from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, replace
from datetime import timedelta
import logging
from typing import Iterable, Iterator, Protocol, overload

from lrc_parser.errors import DuplicateTimestampError, InvalidArgumentError

from .metadata import Metadata

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LyricLine:
    timestamp: timedelta
    content: str

    def shifted(self, offset: timedelta) -> "LyricLine":
        return replace(self, timestamp=self.timestamp - offset)


class TimedLine(Protocol):
    @property
    def timestamp(self) -> timedelta: ...

    @property
    def content(self) -> str: ...


class LrcDocument:
    """
    Immutable LRC document: metadata plus lines sorted by timestamp.

    Timestamps are unique. All lookups are O(log n) via bisect.
    """

    __slots__ = ("_metadata", "_lines", "_timestamps")

    def __init__(self, metadata: Metadata, lines: Iterable[TimedLine], apply_offset: bool = True):
        if metadata is None:
            raise InvalidArgumentError("metadata must not be None")
        if lines is None:
            raise InvalidArgumentError("lines must not be None")

        items = [LyricLine(line.timestamp, line.content) for line in lines]
        offset = metadata.offset
        if apply_offset and offset is not None:
            items = [line.shifted(offset) for line in items]
        # stable: equal timestamps keep input order for the error message
        items.sort(key=lambda line: line.timestamp)

        for prev, cur in zip(items, items[1:]):
            if prev.timestamp == cur.timestamp:
                raise DuplicateTimestampError(cur.timestamp, prev.content, cur.content)

        self._metadata = metadata
        self._lines = tuple(items)
        self._timestamps = tuple(line.timestamp for line in items)
        logger.debug("Built LRC document with %d lines", len(items))

    @property
    def metadata(self) -> Metadata:
        return self._metadata

    @property
    def lines(self) -> tuple[LyricLine, ...]:
        return self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[LyricLine]:
        return iter(self._lines)

    @overload
    def __getitem__(self, index: int) -> LyricLine: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[LyricLine, ...]: ...

    def __getitem__(self, index):
        return self._lines[index]

    def __repr__(self) -> str:
        return f"LrcDocument(metadata={self._metadata!r}, lines={len(self._lines)})"

    def _search(self, timestamp: timedelta) -> tuple[int, bool]:
        """
        (index, True) on exact match, else (insertion point, False).
        """
        i = bisect_left(self._timestamps, timestamp)
        return i, i < len(self._timestamps) and self._timestamps[i] == timestamp

    def _at(self, index: int) -> LyricLine | None:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def index_of(self, timestamp: timedelta) -> int | None:
        i, found = self._search(timestamp)
        return i if found else None

    def exact(self, timestamp: timedelta) -> str | None:
        i, found = self._search(timestamp)
        return self._lines[i].content if found else None

    def before(self, timestamp: timedelta) -> LyricLine | None:
        # bisect_left already points at the match, so both cases step back one
        i, _ = self._search(timestamp)
        return self._at(i - 1)

    def before_or_at(self, timestamp: timedelta) -> LyricLine | None:
        i, found = self._search(timestamp)
        return self._lines[i] if found else self._at(i - 1)

    def after(self, timestamp: timedelta) -> LyricLine | None:
        i, found = self._search(timestamp)
        return self._at(i + 1) if found else self._at(i)

    def after_or_at(self, timestamp: timedelta) -> LyricLine | None:
        return self._at(self._search(timestamp)[0])
