"""
mailheader Validator Tests

Tests for the name/value validators, charset classifier, filters and helpers.
"""

import pytest

from mailheader.utils.helpers import normalize_header_name, truncate_string, unfold
from mailheader.utils.validators import (
    classify_charset,
    filter_header_name,
    filter_header_value,
    is_ascii_compatible_charset,
    is_valid_header_name,
    is_valid_header_value,
)


class TestHeaderNameValidation:
    """Tests for is_valid_header_name."""

    @pytest.mark.parametrize("name", [
        "Subject",
        "X-Custom_Header!",
        "content-type",
        "~weird*but.valid",
    ])
    def test_valid_names(self, name):
        """Test printable ASCII names without colon are accepted."""
        assert is_valid_header_name(name) == True

    @pytest.mark.parametrize("name", [
        "",
        None,
        "Bad:Name",
        "Bad Name",
        "Tab\tName",
        "Subject\n",
        "Ümlaut",
        "Del\x7f",
    ])
    def test_invalid_names(self, name):
        """Test empty names and disallowed characters are rejected."""
        assert is_valid_header_name(name) == False


class TestHeaderValueValidation:
    """Tests for is_valid_header_value."""

    @pytest.mark.parametrize("value", [
        "",
        "hello world",
        "tab\tseparated",
        "folded\r\n value",
        "folded\r\n\tvalue",
        "twice\r\n folded\r\n  value",
        "=?UTF-8?B?aGVsbG8=?=",
    ])
    def test_valid_values(self, value):
        """Test printable ASCII and legal folds are accepted."""
        assert is_valid_header_value(value) == True

    @pytest.mark.parametrize("value", [
        None,
        "bare\nlf",
        "bare\rcr",
        "bad fold\r\nvalue",
        "trailing fold\r\n",
        "double\r\n\r\n value",
        "café",
        "bad\x01value",
        "del\x7f",
    ])
    def test_invalid_values(self, value):
        """Test control characters, non-ASCII and malformed folds are rejected."""
        assert is_valid_header_value(value) == False


class TestCharsetClassifier:
    """Tests for classify_charset."""

    def test_plain_ascii(self):
        """Test printable ASCII with whitespace is ASCII."""
        assert classify_charset("hello world") == "ASCII"
        assert classify_charset("tab\there") == "ASCII"
        assert classify_charset("") == "ASCII"

    def test_non_ascii(self):
        """Test non-ASCII text needs UTF-8."""
        assert classify_charset("héllo") == "UTF-8"
        assert classify_charset("日本") == "UTF-8"

    def test_line_breaks_need_encoding(self):
        """Test folds and control characters are not plain ASCII."""
        assert classify_charset("line\r\n break") == "UTF-8"

    def test_encoded_word_lookalike(self):
        """Test text containing =? is not emitted raw."""
        assert classify_charset("looks =?like?= a word") == "UTF-8"
        assert classify_charset("a=b") == "ASCII"

    def test_edge_whitespace(self):
        """Test leading or trailing whitespace is not emitted raw."""
        assert classify_charset("a\tb  ") == "UTF-8"
        assert classify_charset(" leading") == "UTF-8"
        assert classify_charset("inner  space") == "ASCII"

    @pytest.mark.parametrize("charset,expected", [
        ("UTF-8", True),
        ("ISO-8859-1", True),
        ("ascii", True),
        ("UTF-16", False),
        ("UTF-32", False),
        ("rot13", False),
        ("no-such-charset", False),
        ("", False),
    ])
    def test_ascii_compatible_charset(self, charset, expected):
        """Test only known charsets keeping ASCII bytes unchanged qualify."""
        assert is_ascii_compatible_charset(charset) == expected

    def test_custom_tags(self):
        """Test configurable charset tags."""
        assert classify_charset("abc", "US-ASCII", "ISO-8859-1") == "US-ASCII"
        assert classify_charset("é", "US-ASCII", "ISO-8859-1") == "ISO-8859-1"


class TestFilters:
    """Tests for the sanitizing filters."""

    def test_filter_header_name(self):
        """Test disallowed name characters are dropped."""
        assert filter_header_name("Sub ject:éX") == "SubjectX"
        assert filter_header_name("") == ""

    def test_filter_header_value(self):
        """Test bare CR/LF, controls and non-ASCII are dropped, folds kept."""
        filtered = filter_header_value("a\nb\r\n c\rdée\x01f")
        assert filtered == "ab\r\n cdef"
        assert is_valid_header_value(filtered)

    def test_filter_keeps_valid_value(self):
        """Test an already valid value is unchanged."""
        assert filter_header_value("plain\tvalue\r\n\tfolded") == "plain\tvalue\r\n\tfolded"


class TestHelpers:
    """Tests for helper functions."""

    @pytest.mark.parametrize("name", [
        "content_type",
        "Content-Type",
        "content type",
        "content-type",
    ])
    def test_normalize_header_name(self, name):
        """Test all separator styles normalize to Content-Type."""
        assert normalize_header_name(name) == "Content-Type"

    def test_normalize_keeps_inner_case(self):
        """Test only the first letter of each word is changed."""
        assert normalize_header_name("X-ABC") == "X-ABC"
        assert normalize_header_name("message-ID") == "Message-ID"
        assert normalize_header_name("x-mailer") == "X-Mailer"

    def test_normalize_is_idempotent(self):
        """Test normalizing twice gives the same name."""
        once = normalize_header_name("x_custom header")
        assert once == "X-Custom-Header"
        assert normalize_header_name(once) == once

    def test_unfold(self):
        """Test CRLF before whitespace is removed, whitespace kept."""
        assert unfold("a\r\n b") == "a b"
        assert unfold("a\r\n\tb") == "a\tb"
        assert unfold("a\r\nb") == "a\r\nb"
        assert unfold("") == ""

    def test_truncate_string(self):
        """Test truncation with suffix."""
        assert truncate_string("short", 10) == "short"
        assert truncate_string("a" * 20, 10) == "aaaaaaa..."
