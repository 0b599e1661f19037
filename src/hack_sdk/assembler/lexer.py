"""
Hack Assembly Source Cleaner
============================

This module turns raw Hack assembly source into cleaned statement lines:
one logical statement per line, with all whitespace and comments removed
and blank lines dropped.

Comments
--------
Two comment styles are supported:
- Line comment: "// comment" (anywhere on a line)
- Inline block: "/* comment */" (must close on the same line)

Every cleaned line remembers its original 1-based line number, so later
stages can report errors against the file the user actually wrote.

Example
-------
>>> from hack_sdk.assembler.lexer import clean_source
>>> source = '''
... // Computes R0 + 1
... @R0
... D = M  // load
... D=D+1
... '''
>>> [(l.text, l.location.line) for l in clean_source(source)]
[('@R0', 3), ('D=M', 4), ('D=D+1', 5)]
"""

from dataclasses import dataclass

from hack_sdk.errors import AssemblySyntaxError, SourceLocation


LINE_COMMENT = "//"
BLOCK_OPEN = "/*"
BLOCK_CLOSE = "*/"


@dataclass(frozen=True)
class SourceLine:
    """
    A cleaned, non-empty statement line.

    Attributes:
        text: Statement text with whitespace and comments removed
        location: Where the statement starts in the original source
        raw: The original, uncleaned line (for error context)
    """
    text: str
    location: SourceLocation
    raw: str = ""


def strip_line(line: str, location: SourceLocation | None = None) -> str:
    """
    Remove whitespace and comments from a single source line.

    Args:
        line: Raw source line
        location: Location used if the line has an unterminated block comment

    Returns:
        The cleaned statement text, or "" if nothing is left

    Raises:
        AssemblySyntaxError: If a /* comment is not closed on the same line
    """
    text = line

    # A // inside /* */ is not a line comment
    while BLOCK_OPEN in text:
        start = text.index(BLOCK_OPEN)
        line_start = text.find(LINE_COMMENT)
        if line_start != -1 and line_start < start:
            break
        stop = text.find(BLOCK_CLOSE, start + len(BLOCK_OPEN))
        if stop == -1:
            raise AssemblySyntaxError(
                "unterminated block comment",
                location=location,
                hint="close the comment with */ on the same line",
                source_line=line.rstrip("\n"),
            )
        text = text[:start] + text[stop + len(BLOCK_CLOSE):]

    if LINE_COMMENT in text:
        text = text[:text.index(LINE_COMMENT)]

    return "".join(text.split())


def clean_source(source: str, filename: str = "<input>") -> list[SourceLine]:
    """
    Clean a whole source text into statement lines.

    Args:
        source: Assembly source code
        filename: Name used in source locations

    Returns:
        Non-empty cleaned lines in source order
    """
    lines = []
    for number, raw in enumerate(source.splitlines(), start=1):
        location = SourceLocation(filename, number, 1)
        text = strip_line(raw, location)
        if text:
            lines.append(SourceLine(text, location, raw.rstrip()))
    return lines
