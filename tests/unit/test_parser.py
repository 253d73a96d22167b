"""
Unit tests for the token parser.
"""

import pytest

from doubt.models import End, File, Output, OutputFlag, Source
from doubt.parser import ArgumentsParser, ParseError, TokenParser


class TestTokenParser:
    """Tests for TokenParser class."""

    def test_parse_files_and_flags(self):
        """Test that files and flags are kept in command-line order."""
        chain = TokenParser().parse(["a.txt", "--unified", "b.txt"])
        assert chain == File(Source("a.txt"), OutputFlag(Output.UNIFIED, File(Source("b.txt"), End())))

    def test_parse_empty(self):
        """Test that no tokens produce End."""
        assert TokenParser().parse([]) == End()

    def test_short_flags(self):
        """Test short flag spellings."""
        chain = TokenParser().parse(["-u", "-s"])
        assert chain.output_flags() == [Output.UNIFIED, Output.SPLIT]

    def test_long_flags(self):
        """Test long flag spellings."""
        chain = TokenParser().parse(["--split", "--unified"])
        assert chain.output_flags() == [Output.SPLIT, Output.UNIFIED]

    def test_dash_is_stdin(self):
        """Test that a lone dash is a file token."""
        chain = TokenParser().parse(["-", "b.txt"])
        files = chain.files()
        assert files[0].is_stdin is True
        assert files[1].path == "b.txt"

    def test_double_dash_ends_options(self):
        """Test that tokens after '--' are files even if they look like flags."""
        chain = TokenParser().parse(["--split", "--", "--unified", "-x"])
        assert chain.output_flags() == [Output.SPLIT]
        assert [source.path for source in chain.files()] == ["--unified", "-x"]

    def test_unknown_option(self):
        """Test that unknown options are rejected with their position."""
        with pytest.raises(ParseError, match="Unknown option '--color'") as exc_info:
            TokenParser().parse(["a.txt", "--color"])
        assert exc_info.value.token == "--color"
        assert exc_info.value.position == 1

    def test_empty_token(self):
        """Test that empty tokens are rejected."""
        with pytest.raises(ParseError, match="Empty argument at position 0"):
            TokenParser().parse([""])

    def test_result_ends_in_end(self):
        """Test that parsed chains are terminated."""
        chain = TokenParser().parse(["a.txt", "-s"])
        assert list(chain.nodes())[-1] == End()

    def test_is_arguments_parser(self):
        """Test that TokenParser implements the parser interface."""
        assert isinstance(TokenParser(), ArgumentsParser)

    def test_interface_is_abstract(self):
        """Test that the interface cannot be instantiated."""
        with pytest.raises(TypeError):
            ArgumentsParser()
