"""
Unit tests for the header tokenizer (header_parser.py).

Tests cover:
- Single header key/value spans
- Folded values and CRLF line endings
- Header blocks and the blank separator line
- Lookup by key on HeaderCollection
- Structural errors and their offsets
"""

import pytest

from mailparse.errors import MalformedInputError
from mailparse.models.header import HeaderCollection
from mailparse.parsing.header_parser import (
    parse_header,
    parse_header_at,
    parse_headers,
)


class TestParseHeader:
    """Tests for parse_header() function."""

    @pytest.mark.unit
    def test_basic_header(self):
        header, consumed = parse_header(b"Key: Value")
        assert header.raw_key == b"Key"
        assert header.get_key() == "Key"
        assert header.raw_value == b"Value"
        assert header.get_value() == "Value"
        assert consumed == 10

    @pytest.mark.unit
    def test_space_before_colon_and_trailing_space(self):
        header, _ = parse_header(b"Key :  Value ")
        assert header.raw_key == b"Key "
        assert header.get_key() == "Key"
        assert header.raw_value == b"Value "
        assert header.get_value() == "Value "

    @pytest.mark.unit
    def test_empty_value(self):
        header, _ = parse_header(b"Key:")
        assert header.raw_key == b"Key"
        assert header.raw_value == b""
        assert header.get_value() == ""

    @pytest.mark.unit
    def test_empty_key_and_value(self):
        header, consumed = parse_header(b":\n")
        assert header.raw_key == b""
        assert header.raw_value == b""
        assert consumed == 2

    @pytest.mark.unit
    def test_folded_value_with_space(self):
        header, _ = parse_header(b"Key:Multi-line\n value")
        assert header.raw_value == b"Multi-line\n value"
        assert header.get_value() == "Multi-line value"

    @pytest.mark.unit
    def test_folded_value_over_several_lines(self):
        header, _ = parse_header(b"Key:  Multi\n  line\n value\n")
        assert header.raw_key == b"Key"
        assert header.raw_value == b"Multi\n  line\n value"
        assert header.get_value() == "Multi line value"

    @pytest.mark.unit
    def test_folded_value_with_tab(self):
        header, _ = parse_header(b"Key: One\n\tOverhang")
        assert header.raw_value == b"One\n\tOverhang"
        assert header.get_value() == "One Overhang"

    @pytest.mark.unit
    def test_stops_at_next_header(self):
        header, consumed = parse_header(b"Key: One\nKey2: Two")
        assert header.raw_key == b"Key"
        assert header.raw_value == b"One"
        assert consumed == 9

    @pytest.mark.unit
    def test_crlf_is_not_part_of_value(self):
        header, consumed = parse_header(b"Key: value\r\nNext: x")
        assert header.raw_value == b"value"
        assert consumed == 12

    @pytest.mark.unit
    def test_crlf_fold(self):
        header, _ = parse_header(b"Key: one\r\n two\r\n")
        assert header.raw_value == b"one\r\n two"
        assert header.get_value() == "one two"

    @pytest.mark.unit
    def test_eight_bit_value_uses_latin1(self):
        header, _ = parse_header(b"SPAM: VIAGRA \xae")
        assert header.raw_value == b"VIAGRA \xae"
        assert header.get_value() == "VIAGRA ®"

    @pytest.mark.unit
    def test_key_and_value_aliases(self):
        header, _ = parse_header(b"Subject: hi")
        assert header.key() == "Subject"
        assert header.value() == "hi"

    @pytest.mark.unit
    def test_leading_space_rejected(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_header(b" Leading: Space")
        assert exc_info.value.offset == 0

    @pytest.mark.unit
    def test_missing_colon_rejected(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_header(b"Just a string")
        assert exc_info.value.offset == len(b"Just a string")

    @pytest.mark.unit
    def test_newline_in_key_rejected(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_header(b"Key\nBroken: Value")
        assert exc_info.value.offset == 3

    @pytest.mark.unit
    def test_empty_input_rejected(self):
        with pytest.raises(MalformedInputError):
            parse_header(b"")

    @pytest.mark.unit
    def test_parse_header_at_offset(self):
        buffer = b"A: 1\nB: 2\n"
        header, ix = parse_header_at(buffer, 5)
        assert header.get_key() == "B"
        assert header.get_value() == "2"
        assert header.key_start == 5
        assert ix == len(buffer)


class TestParseHeaders:
    """Tests for parse_headers() function."""

    @pytest.mark.unit
    def test_two_headers(self):
        headers, consumed = parse_headers(b"Key: Value\nTwo: Second")
        assert isinstance(headers, HeaderCollection)
        assert len(headers) == 2
        assert headers[0].raw_key == b"Key"
        assert headers[0].raw_value == b"Value"
        assert headers[1].raw_key == b"Two"
        assert headers[1].raw_value == b"Second"
        assert consumed == 22

    @pytest.mark.unit
    def test_overhang_belongs_to_previous_header(self):
        headers, _ = parse_headers(b"Key: Value\n Overhang\nTwo: Second\nThree: Third")
        assert len(headers) == 3
        assert headers[0].raw_value == b"Value\n Overhang"
        assert headers[1].raw_value == b"Second"
        assert headers[2].raw_key == b"Three"
        assert headers[2].raw_value == b"Third"

    @pytest.mark.unit
    def test_stops_at_blank_line(self):
        data = b"Key: Value\nTwo: Second\n\nBody"
        headers, consumed = parse_headers(data)
        assert len(headers) == 2
        assert data[consumed:] == b"Body"

    @pytest.mark.unit
    def test_stops_at_crlf_blank_line(self):
        data = b"Key: value\r\nWith: CRLF\r\n\r\nBody"
        headers, consumed = parse_headers(data)
        assert len(headers) == 2
        assert headers.get_first_value("Key") == "value"
        assert headers.get_first_value("With") == "CRLF"
        assert data[consumed:] == b"Body"

    @pytest.mark.unit
    def test_real_world_block(self, encoded_headers_eml):
        headers, consumed = parse_headers(encoded_headers_eml)
        assert len(headers) == 5
        assert headers[0].get_key() == "Return-Path"
        assert headers[4].get_key() == "X-Mailer"
        assert encoded_headers_eml[consumed:] == b"This is a test mailing\n"

    @pytest.mark.unit
    def test_folded_received_header(self, encoded_headers_eml):
        headers, _ = parse_headers(encoded_headers_eml)
        assert headers.get_first_value("Received") == (
            "from foobar.staktrace.com (localhost [127.0.0.1]) "
            "by foobar.staktrace.com (Postfix) with ESMTP id 139F711C1C34 "
            "for <kats@baz.staktrace.com>; Fri, 27 May 2016 02:34:26 -0400 (EDT)"
        )

    @pytest.mark.unit
    def test_empty_header_block(self):
        headers, consumed = parse_headers(b"\nBody only")
        assert len(headers) == 0
        assert consumed == 1

    @pytest.mark.unit
    def test_empty_input(self):
        headers, consumed = parse_headers(b"")
        assert len(headers) == 0
        assert consumed == 0

    @pytest.mark.unit
    def test_newline_in_key_offset(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_headers(b"Bad\nKey")
        assert exc_info.value.offset == 3

    @pytest.mark.unit
    def test_newline_in_key_offset_is_absolute(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_headers(b"K:V\nBad\nKey")
        assert exc_info.value.offset == 7

    @pytest.mark.unit
    def test_lone_cr_rejected(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_headers(b"Key: Value\n\rBody")
        assert exc_info.value.offset == 11
        assert "lone CR" in str(exc_info.value)


class TestHeaderCollection:
    """Tests for HeaderCollection lookups."""

    @pytest.fixture
    def headers(self) -> HeaderCollection:
        headers, _ = parse_headers(
            b"Key: Value\nAnotherKey: AnotherValue\nKey: Value2\nKey: Value3\n"
        )
        return headers

    @pytest.mark.unit
    def test_first_value(self, headers):
        assert len(headers) == 4
        assert headers.get_first_value("Key") == "Value"
        assert headers.get_first_value("AnotherKey") == "AnotherValue"

    @pytest.mark.unit
    def test_all_values_in_source_order(self, headers):
        assert headers.get_all_values("Key") == ["Value", "Value2", "Value3"]
        assert headers.get_all_values("AnotherKey") == ["AnotherValue"]

    @pytest.mark.unit
    def test_missing_key(self, headers):
        assert headers.get_first_value("NoKey") is None
        assert headers.get_all_values("NoKey") == []

    @pytest.mark.unit
    def test_lookup_is_case_sensitive(self, headers):
        assert headers.get_first_value("key") is None
        assert headers.get_all_values("KEY") == []

    @pytest.mark.unit
    def test_short_aliases(self, headers):
        assert headers.first_value("Key") == "Value"
        assert headers.all_values("Key") == ["Value", "Value2", "Value3"]

    @pytest.mark.unit
    def test_headers_share_buffer(self):
        data = b"A: 1\nB: 2\n"
        headers, _ = parse_headers(data)
        assert all(header.buffer is data for header in headers)
