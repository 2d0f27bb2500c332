from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from lrc_parser.errors import LrcFormatError, MetadataConflictError

from .tags import parse_offset

_FIELDS = {
    "ti": "title",
    "ar": "artist",
    "al": "album",
    "by": "maker",
}


@dataclass(frozen=True, slots=True)
class Metadata:
    title: str | None = None
    artist: str | None = None
    album: str | None = None
    maker: str | None = None
    offset: timedelta | None = None


@dataclass(slots=True)
class MetadataBuilder:
    """
    Collects metadata tags in document order.

    Repeating a tag with the same value is allowed, a different value is a
    conflict. The offset is compared on its raw text so "100" and "100.0"
    conflict even though they parse to the same duration.
    """

    title: str | None = None
    artist: str | None = None
    album: str | None = None
    maker: str | None = None
    offset: timedelta | None = None
    offset_text: str | None = None

    def add(self, key: str, value: str) -> None:
        key = key.lower()
        if key == "offset":
            self._check("offset", "offset", self.offset_text, value)
            if self.offset_text is None:
                self.offset = parse_offset(value)
                self.offset_text = value
            return

        field = _FIELDS.get(key)
        if field is None:
            raise LrcFormatError(f"Unsupported metadata tag: {key!r}")
        current = getattr(self, field)
        self._check(key, field, current, value)
        setattr(self, field, value)

    @staticmethod
    def _check(tag: str, field: str, current: str | None, value: str) -> None:
        if current is not None and current != value:
            raise MetadataConflictError(tag, field, current, value)

    def build(self) -> Metadata:
        return Metadata(
            title=self.title,
            artist=self.artist,
            album=self.album,
            maker=self.maker,
            offset=self.offset,
        )
