# =============================================================================
# test_lexer.py - Source Cleaner Unit Tests
# =============================================================================
# Tests for comment and whitespace removal.
#
# Test coverage includes:
#   - Line comments and inline block comments
#   - Whitespace removal inside statements
#   - Blank line dropping with line numbers preserved
#   - Error conditions
# =============================================================================

import pytest

from hack_sdk.assembler.lexer import clean_source, strip_line
from hack_sdk.errors import AssemblySyntaxError, SourceLocation


# =============================================================================
# Single Line Tests
# =============================================================================

class TestStripLine:
    """Test cleaning of individual lines."""

    def test_plain_statement(self):
        assert strip_line("@R0") == "@R0"

    def test_removes_all_whitespace(self):
        """Whitespace inside a statement is removed, not just at the ends."""
        assert strip_line("   D = D + M\t") == "D=D+M"

    def test_full_line_comment(self):
        assert strip_line("// Computes R2 = max(R0, R1)") == ""

    def test_trailing_comment(self):
        assert strip_line("0;JMP   // infinite loop") == "0;JMP"

    def test_comment_without_space(self):
        assert strip_line("@i//counter") == "@i"

    def test_block_comment(self):
        assert strip_line("D=M /* load */") == "D=M"

    def test_block_comment_between_tokens(self):
        assert strip_line("D /* dest */ = /* comp */ A") == "D=A"

    def test_line_comment_inside_block(self):
        """A // inside a block comment does not end the statement."""
        assert strip_line("/* a // b */ M=0") == "M=0"

    def test_block_marker_inside_line_comment(self):
        """A /* after // is part of the line comment."""
        assert strip_line("M=0 // see /* note") == "M=0"

    def test_unterminated_block_comment(self):
        location = SourceLocation("Max.asm", 4, 1)
        with pytest.raises(AssemblySyntaxError) as exc_info:
            strip_line("D=M /* never closed", location)
        assert "Max.asm:4:1" in str(exc_info.value)


# =============================================================================
# Whole Source Tests
# =============================================================================

class TestCleanSource:
    """Test cleaning of complete source texts."""

    def test_drops_blank_and_comment_lines(self):
        source = "// header\n\n@R0\n   \nD=M\n"
        lines = clean_source(source)
        assert [l.text for l in lines] == ["@R0", "D=M"]

    def test_preserves_line_numbers(self):
        source = "// header\n\n@R0\n   \nD=M\n"
        lines = clean_source(source, "Max.asm")
        assert [l.location.line for l in lines] == [3, 5]
        assert all(l.location.filename == "Max.asm" for l in lines)

    def test_keeps_raw_text(self):
        lines = clean_source("  D = M  // load\n")
        assert lines[0].raw == "  D = M  // load"

    def test_windows_line_endings(self):
        lines = clean_source("@R0\r\nD=M\r\n")
        assert [l.text for l in lines] == ["@R0", "D=M"]

    def test_empty_source(self):
        assert clean_source("") == []
