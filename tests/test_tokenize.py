from __future__ import annotations

from datetime import timedelta

import pytest

from lrc_parser.errors import LrcFormatError, MetadataConflictError
from lrc_parser.lrc.metadata import Metadata, MetadataBuilder
from lrc_parser.lrc.tags import MetadataTag, TimestampTag, classify, parse_offset, parse_timestamp
from lrc_parser.lrc.tokenize import TagGroup, split_lines, tokenize_line


class TestSplitLines:
    def test_mixed_line_breaks(self):
        assert split_lines("a\r\n\r\nb\rc\n") == ["a", "b", "c"]

    def test_apostrophe_escape(self):
        assert split_lines("it\\'s") == ["it's"]

    def test_empty(self):
        assert split_lines("") == []


class TestTokenizeLine:
    def test_groups(self):
        assert tokenize_line("[00:01][00:02]a[ti:x]b") == [
            TagGroup(tags=("00:01", "00:02"), content="a"),
            TagGroup(tags=("ti:x",), content="b"),
        ]

    def test_trailing_tag_has_empty_content(self):
        assert tokenize_line("[00:01]a[00:02]") == [
            TagGroup(tags=("00:01",), content="a"),
            TagGroup(tags=("00:02",), content=""),
        ]

    def test_unknown_key_is_tokenized(self):
        assert tokenize_line("[length:03:20]") == [TagGroup(tags=("length:03:20",), content="")]

    def test_text_before_first_tag(self):
        with pytest.raises(LrcFormatError, match="column 1"):
            tokenize_line("x[00:01]")

    def test_stray_closing_bracket(self):
        with pytest.raises(LrcFormatError, match="column 9"):
            tokenize_line("[00:01]a]")


class TestClassify:
    def test_timestamp(self):
        assert classify("01:02.5") == TimestampTag(timedelta(minutes=1, seconds=2.5))

    def test_metadata_key_is_lowercased(self):
        assert classify("AR:Some Artist") == MetadataTag(key="ar", value="Some Artist")

    def test_metadata_value_kept_verbatim(self):
        assert classify("ti: padded ") == MetadataTag(key="ti", value=" padded ")

    def test_empty_value(self):
        assert classify("offset:") == MetadataTag(key="offset", value="")

    def test_unknown_key(self):
        assert classify("xyz:1") is None


class TestTimeValues:
    def test_unbounded_fields(self):
        assert parse_timestamp("123:456.789") == timedelta(minutes=123, seconds=456, milliseconds=789)

    def test_timestamp_overflow(self):
        with pytest.raises(LrcFormatError):
            parse_timestamp("99999999999999:00")

    def test_minutes_with_many_digits(self):
        assert parse_timestamp("0" * 5000 + "1:00") == timedelta(minutes=1)
        with pytest.raises(LrcFormatError):
            parse_timestamp("9" * 5000 + ":00")

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("100", timedelta(milliseconds=100)),
            ("-456", timedelta(milliseconds=-456)),
            ("+20", timedelta(milliseconds=20)),
            (" 1.5 ", timedelta(microseconds=1500)),
            ("0", timedelta(0)),
        ],
    )
    def test_offset(self, text, expected):
        assert parse_offset(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "nan", "inf", "1e30", "1e999990", "1e999999", "-1e999999"])
    def test_invalid_offset(self, text):
        with pytest.raises(LrcFormatError):
            parse_offset(text)


class TestMetadataBuilder:
    def test_build(self):
        b = MetadataBuilder()
        b.add("ti", "t")
        b.add("ar", "a")
        b.add("al", "b")
        b.add("by", "m")
        b.add("offset", "-25")
        assert b.build() == Metadata(
            title="t", artist="a", album="b", maker="m", offset=timedelta(milliseconds=-25)
        )

    def test_repeated_value_is_noop(self):
        b = MetadataBuilder()
        b.add("by", "me")
        b.add("by", "me")
        assert b.build().maker == "me"

    def test_conflict(self):
        b = MetadataBuilder()
        b.add("al", "one")
        with pytest.raises(MetadataConflictError) as exc_info:
            b.add("al", "two")
        err = exc_info.value
        assert (err.tag, err.field, err.existing, err.new) == ("al", "album", "one", "two")

    def test_unsupported_key(self):
        with pytest.raises(LrcFormatError, match="Unsupported metadata tag"):
            MetadataBuilder().add("length", "03:20")

    def test_offset_compared_as_text(self):
        b = MetadataBuilder()
        b.add("offset", "100")
        with pytest.raises(MetadataConflictError):
            b.add("offset", "+100")
