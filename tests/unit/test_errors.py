"""Tests for error types and formatting."""

from pathlib import Path

from jailconf.core.errors import (
    ConfigError,
    ErrorContext,
    JailconfError,
    ParseError,
    ParseErrorKind,
    extract_snippet,
    make_config_error,
    make_parse_error,
)


class TestErrorContext:
    """Tests for location formatting."""

    def test_format_without_snippet(self):
        context = ErrorContext(file=Path("jail.conf"), line=4, column=2)
        assert context.format() == "jail.conf:4:2"

    def test_format_without_file(self):
        context = ErrorContext(file=None, line=1, column=9)
        assert context.format() == "<string>:1:9"

    def test_snippet_marker_under_column(self):
        context = ErrorContext(file=None, line=1, column=3, snippet="ab!cd")
        lines = context.format().split("\n")
        assert lines[1] == "   1 | ab!cd"
        assert lines[2].index("^^^") == len("   1 | ") + 2


class TestSnippets:
    """Tests for snippet extraction."""

    def test_extract_snippet_window(self):
        text = "\n".join(f"line{i}" for i in range(1, 11))
        assert extract_snippet(text, 5) == "line3\nline4\nline5\nline6\nline7"

    def test_extract_snippet_at_start(self):
        assert extract_snippet("a\nb\nc\nd", 1) == "a\nb\nc"


class TestFactories:
    """Tests for the error helper functions."""

    def test_make_parse_error(self):
        error = make_parse_error(
            "Unterminated string literal",
            ParseErrorKind.UNTERMINATED_STRING,
            Path("jail.conf"),
            2,
            5,
            offset=11,
            source='www {\n  k="\n}',
        )
        assert isinstance(error, JailconfError)
        assert error.kind == ParseErrorKind.UNTERMINATED_STRING
        assert (error.line, error.column, error.offset) == (2, 5, 11)
        assert error.byte_offset == 11
        assert error.message == "Unterminated string literal"
        assert str(error).startswith("jail.conf:2:5\n")
        assert str(error).endswith("Unterminated string literal")

    def test_parse_error_without_context(self):
        error = ParseError("boom")
        assert error.kind == ParseErrorKind.UNEXPECTED_TOKEN
        assert error.line is None
        assert error.offset is None
        assert error.byte_offset is None
        assert str(error) == "boom"

    def test_byte_offset_from_source(self):
        error = make_parse_error(
            "Unexpected '}'",
            ParseErrorKind.UNBALANCED_BLOCK,
            None,
            1,
            9,
            offset=8,
            source="ab = ü; }",
        )
        assert error.offset == 8
        assert error.byte_offset == 9

    def test_byte_offset_without_source(self):
        error = make_parse_error("x", ParseErrorKind.INVALID_KEY, None, 1, 4, offset=3)
        assert error.byte_offset == 3
        assert error.context.snippet is None

    def test_make_config_error(self):
        error = make_config_error("bad", Path("jailconf.toml"))
        assert isinstance(error, ConfigError)
        assert str(error) == "jailconf.toml:1:1\nbad"
        assert make_config_error("bad").context is None

    def test_kind_values(self):
        assert ParseErrorKind.UNBALANCED_BLOCK == "UnbalancedBlock"
        assert ParseErrorKind.INVALID_KEY.value == "InvalidKey"
