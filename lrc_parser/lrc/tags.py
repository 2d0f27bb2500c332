from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal, DecimalException

import regex

from lrc_parser.errors import LrcFormatError

METADATA_KEYS = ("ti", "ar", "al", "by", "offset")

_TIMESTAMP_RE = regex.compile(r"(?P<minutes>\d+):(?P<seconds>\d+(?:\.\d+)?)")
_METADATA_RE = regex.compile(r"(?P<key>[A-Za-z][A-Za-z0-9_-]*):(?P<value>.*)", regex.DOTALL)
_MAX_MICROSECONDS = Decimal(timedelta.max // timedelta(microseconds=1))


@dataclass(frozen=True, slots=True)
class TimestampTag:
    timestamp: timedelta


@dataclass(frozen=True, slots=True)
class MetadataTag:
    key: str
    value: str


def _to_timedelta(microseconds: Decimal, source: str) -> timedelta:
    # bound checked on the Decimal, round() of a large exponent builds a huge int
    if abs(microseconds) > _MAX_MICROSECONDS:
        raise LrcFormatError(f"Time value out of range: {source!r}")
    return timedelta(microseconds=round(microseconds))


def parse_timestamp(body: str) -> timedelta:
    m = _TIMESTAMP_RE.fullmatch(body)
    if m is None:
        raise LrcFormatError(f"Invalid timestamp: {body!r}")
    try:
        minutes = Decimal(m.group("minutes"))
        microseconds = (minutes * 60 + Decimal(m.group("seconds"))) * 1_000_000
    except DecimalException as e:
        raise LrcFormatError(f"Invalid timestamp: {body!r}") from e
    return _to_timedelta(microseconds, body)


def parse_offset(text: str) -> timedelta:
    """Offset value in (possibly signed, possibly fractional) milliseconds."""
    try:
        ms = Decimal(text.strip())
        if not ms.is_finite():
            raise LrcFormatError(f"Invalid offset: {text!r}")
        microseconds = ms * 1_000
    except DecimalException as e:
        raise LrcFormatError(f"Invalid offset: {text!r}") from e
    return _to_timedelta(microseconds, text)


def classify(body: str) -> TimestampTag | MetadataTag | None:
    """
    Returns None for well-formed tags with an unknown key, e.g. [length:03:20].
    """
    if _TIMESTAMP_RE.fullmatch(body):
        return TimestampTag(parse_timestamp(body))
    m = _METADATA_RE.fullmatch(body)
    if m is None:
        return None
    key = m.group("key").lower()
    if key not in METADATA_KEYS:
        return None
    return MetadataTag(key=key, value=m.group("value"))
