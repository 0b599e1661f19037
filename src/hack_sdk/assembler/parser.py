"""
Hack Assembly Language Parser
=============================

This module classifies each cleaned source line into exactly one statement
type. The classification is done once, here; the symbol table and the
encoder dispatch on the statement type instead of re-inspecting text.

Statement Types
---------------
1. **LabelDef**: label declaration, emits no code
   ```asm
   (LOOP)
   ```

2. **AddressNumeral**: address instruction with a literal value
   ```asm
   @21
   21              // resolved form produced by the symbol table
   ```

3. **AddressSymbol**: address instruction naming a symbol
   ```asm
   @LOOP
   @sum
   @ponggame.0
   ```

4. **Compute**: ALU computation with optional destination and jump
   ```asm
   D=M
   0;JMP
   AM=M-1;JNE
   ```

Symbol Names
------------
Symbols are case-sensitive sequences of letters, digits, underscore,
dot, dollar sign and colon that do not begin with a digit.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional
import re

from hack_sdk.cpu import MAX_ADDRESS_VALUE
from hack_sdk.errors import AssemblySyntaxError, SourceLocation, ValueRangeError
from hack_sdk.assembler.lexer import SourceLine, clean_source


SYMBOL_PATTERN = re.compile(r"[A-Za-z_.$:][A-Za-z0-9_.$:]*")
NUMERAL_PATTERN = re.compile(r"-?[0-9]+")


# =============================================================================
# Statement Data Classes
# =============================================================================

@dataclass
class Statement:
    """
    Base class for all parsed statements.

    Every statement has a source location for error reporting, and keeps
    the cleaned text it was parsed from.
    """
    location: SourceLocation
    source: str = field(default="", kw_only=True, compare=False)

    def render(self) -> str:
        """Return the statement as cleaned assembly text."""
        raise NotImplementedError


@dataclass
class LabelDef(Statement):
    """
    Label declaration statement.

    Attributes:
        name: Label name without the surrounding parentheses
    """
    name: str

    def render(self) -> str:
        return f"({self.name})"


@dataclass
class AddressNumeral(Statement):
    """
    Address instruction whose operand is a decimal literal.

    Range checking happens at encode time, so out-of-range values
    survive parsing and are reported against their source line.
    """
    value: int

    def render(self) -> str:
        return str(self.value)


@dataclass
class AddressSymbol(Statement):
    """Address instruction whose operand is a symbol name."""
    name: str

    def render(self) -> str:
        return f"@{self.name}"


@dataclass
class Compute(Statement):
    """
    Compute instruction: dest=comp;jump with dest and jump optional.

    Attributes:
        comp: ALU computation mnemonic (always present)
        dest: Destination mnemonic, or None
        jump: Jump condition mnemonic, or None
    """
    comp: str
    dest: Optional[str] = None
    jump: Optional[str] = None

    def render(self) -> str:
        text = self.comp
        if self.dest is not None:
            text = f"{self.dest}={text}"
        if self.jump is not None:
            text = f"{text};{self.jump}"
        return text


# =============================================================================
# Line Classification
# =============================================================================

def is_numeral(text: str) -> bool:
    """True for an optionally signed run of decimal digits."""
    return NUMERAL_PATTERN.fullmatch(text) is not None


def is_symbol_name(text: str) -> bool:
    """True if text is a legal symbol name."""
    return SYMBOL_PATTERN.fullmatch(text) is not None


def parse_line(text: str, location: Optional[SourceLocation] = None) -> Statement:
    """
    Classify one cleaned line.

    Args:
        text: Cleaned statement text (no whitespace, no comments)
        location: Source location for diagnostics

    Returns:
        LabelDef, AddressNumeral, AddressSymbol or Compute

    Raises:
        AssemblySyntaxError: If the line fits none of the statement forms
        ValueRangeError: If a numeral has more digits than any address
    """
    if location is None:
        location = SourceLocation("<input>", 1, 1)

    if text.startswith("("):
        return _parse_label(text, location)

    if text.startswith("@"):
        operand = text[1:]
        if is_numeral(operand):
            return _numeral(operand, location, text)
        if is_symbol_name(operand):
            return AddressSymbol(location, operand, source=text)
        hint = "symbol names cannot start with a digit" if operand[:1].isdigit() else None
        raise AssemblySyntaxError(
            f"invalid address operand '{operand}'" if operand else "missing address operand",
            location=_at_column(location, 2),
            hint=hint,
            source_line=text,
        )

    if is_numeral(text):
        return _numeral(text, location, text)

    return _parse_compute(text, location)


def _numeral(digits: str, location: SourceLocation, source: str) -> AddressNumeral:
    # Too many significant digits to fit a word; int() may refuse very long text
    significant = digits.lstrip("-").lstrip("0")
    if len(significant) > len(str(MAX_ADDRESS_VALUE)):
        shown = digits if len(digits) <= 20 else f"{digits[:12]}... ({len(significant)} digits)"
        raise ValueRangeError(shown, location=location, source_line=source)
    return AddressNumeral(location, int(digits), source=source)


def _parse_label(text: str, location: SourceLocation) -> LabelDef:
    if not text.endswith(")") or len(text) < 2:
        raise AssemblySyntaxError(
            "label declaration is missing ')'",
            location=location,
            source_line=text,
        )
    name = text[1:-1]
    if not is_symbol_name(name):
        raise AssemblySyntaxError(
            f"invalid label name '{name}'",
            location=_at_column(location, 2),
            hint="labels use letters, digits, '_', '.', '$', ':' and cannot start with a digit",
            source_line=text,
        )
    return LabelDef(location, name, source=text)


def _parse_compute(text: str, location: SourceLocation) -> Compute:
    """
    Split a compute line into dest, comp and jump.

    Accepts the full grammar: comp, dest=comp, comp;jump and dest=comp;jump.
    """
    if "=" not in text and ";" not in text:
        raise AssemblySyntaxError(
            f"malformed instruction '{text}'",
            location=location,
            hint="compute instructions need 'dest=comp' or 'comp;jump'",
            source_line=text,
        )
    if text.count("=") > 1 or text.count(";") > 1:
        raise AssemblySyntaxError(
            f"malformed instruction '{text}'",
            location=location,
            hint="use at most one '=' and one ';'",
            source_line=text,
        )

    dest = None
    rest = text
    if "=" in rest:
        dest, rest = rest.split("=", 1)
        if ";" in dest:
            raise AssemblySyntaxError(
                f"malformed instruction '{text}'",
                location=location,
                hint="the destination must come before the computation",
                source_line=text,
            )

    jump = None
    if ";" in rest:
        rest, jump = rest.split(";", 1)

    for part, what in ((dest, "destination"), (rest, "computation"), (jump, "jump")):
        if part is not None and not part:
            raise AssemblySyntaxError(
                f"empty {what} in '{text}'",
                location=location,
                source_line=text,
            )

    return Compute(location, rest, dest, jump, source=text)


def _at_column(location: SourceLocation, column: int) -> SourceLocation:
    return SourceLocation(location.filename, location.line, column)


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_lines(lines: Iterable[str], filename: str = "<input>") -> list[Statement]:
    """
    Parse already-cleaned lines, numbering them from 1.

    Args:
        lines: Cleaned, non-empty statement texts
        filename: Name used in source locations
    """
    return [
        parse_line(text, SourceLocation(filename, number, 1))
        for number, text in enumerate(lines, start=1)
    ]


def parse_source_lines(lines: Iterable[SourceLine]) -> list[Statement]:
    """Parse lines produced by the cleaner, keeping their original locations."""
    return [parse_line(line.text, line.location) for line in lines]


def parse_source(source: str, filename: str = "<input>") -> list[Statement]:
    """
    Clean and parse a complete source text.

    Args:
        source: Assembly source code
        filename: Name used in source locations

    Returns:
        Statements in source order
    """
    return parse_source_lines(clean_source(source, filename))
