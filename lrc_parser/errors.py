from __future__ import annotations

from datetime import timedelta


class LrcError(Exception):
    pass


class InvalidArgumentError(LrcError, TypeError):
    pass


class LrcFormatError(LrcError, ValueError):
    pass


class MetadataConflictError(LrcFormatError):
    def __init__(self, tag: str, field: str, existing: str, new: str) -> None:
        super().__init__(
            f"Duplicate LRC metadata found. Metadata name: '{tag}', Values: '{existing}', '{new}'"
        )
        self.tag = tag
        self.field = field
        self.existing = existing
        self.new = new


class DuplicateTimestampError(LrcFormatError):
    def __init__(self, timestamp: timedelta, first: str, second: str) -> None:
        super().__init__(
            f"Found duplicate timestamp '{timestamp}' with lyric '{first}' and '{second}'"
        )
        self.timestamp = timestamp
        self.first = first
        self.second = second
