"""
Hack SDK Error Hierarchy
========================

This module defines the exception hierarchy for the entire Hack SDK.
All exceptions inherit from HackError, allowing callers to catch all
SDK-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
├── AssemblerError (assembler-related)
│   ├── AssemblySyntaxError - malformed instruction, label or symbol name
│   ├── UndefinedSymbolError - reference that no pass could resolve
│   ├── DuplicateSymbolError - symbol bound more than once
│   ├── UnknownMnemonicError - comp/dest/jump not in its table
│   ├── ValueRangeError - address numeral outside [0, 32767]
│   └── MemoryOverflowError - variable allocation reached SCREEN
└── DisassemblyError - binary word that cannot be decoded

Design Philosophy
-----------------
Each exception captures source location information (filename, line, column)
when applicable. Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all Hack SDK errors.

    All exceptions in the SDK inherit from this class, allowing callers
    to catch all SDK-related errors with a single except clause:

        try:
            assembler.assemble_file("Pong.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for all assembler-related errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Max.asm:7:1: error: unknown computation 'D+Q'
                D=D+Q
                ^
            hint: computations are case-sensitive
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class AssemblySyntaxError(AssemblerError):
    """
    Syntax error in assembly source code.

    Examples:
        - Label declaration without closing parenthesis
        - Symbol name starting with a digit
        - Compute instruction with neither '=' nor ';'
        - Unterminated /* comment
    """
    pass


class UndefinedSymbolError(AssemblerError):
    """
    Reference to a symbol that is still unbound after every resolution pass.
    """

    def __init__(
        self,
        symbol: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        super().__init__(
            f"undefined symbol '{symbol}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class DuplicateSymbolError(AssemblerError):
    """
    Symbol bound more than once.

    Raised when a label is declared twice or reuses a predefined name.
    Names are never rebound once they enter the symbol table.
    """

    def __init__(
        self,
        symbol: str,
        location: Optional[SourceLocation] = None,
        original_location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        self.original_location = original_location

        if original_location:
            hint = f"'{symbol}' was first defined at {original_location}"
        else:
            hint = f"'{symbol}' is a predefined symbol"

        super().__init__(
            f"duplicate symbol '{symbol}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UnknownMnemonicError(AssemblerError):
    """
    A computation, destination or jump mnemonic absent from its table.

    Attributes:
        field: Which part of the instruction was wrong ("comp", "dest", "jump")
        mnemonic: The offending token
    """

    FIELD_NAMES = {
        "comp": "computation",
        "dest": "destination",
        "jump": "jump condition",
    }

    def __init__(
        self,
        field: str,
        mnemonic: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        valid: Optional[list[str]] = None,
    ):
        self.field = field
        self.mnemonic = mnemonic
        self.valid = valid or []

        hint = None
        if self.valid:
            hint = f"valid {self.FIELD_NAMES.get(field, field)}s: {', '.join(self.valid)}"

        super().__init__(
            f"unknown {self.FIELD_NAMES.get(field, field)} '{mnemonic}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class ValueRangeError(AssemblerError):
    """
    Address instruction numeral outside the positive 15-bit range.

    The top bit of every address instruction is 0, so only values
    0..32767 have an encoding.
    """

    def __init__(
        self,
        value: int | str,
        maximum: int = 32767,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.value = value
        self.maximum = maximum
        super().__init__(
            f"address value {value} is out of range",
            location=location,
            hint=f"address instructions accept 0 to {maximum}",
            source_line=source_line,
        )


class MemoryOverflowError(AssemblerError):
    """
    Variable allocation ran into the memory-mapped screen buffer.
    """

    def __init__(
        self,
        symbol: str,
        address: int,
        limit: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        self.address = address
        self.limit = limit
        super().__init__(
            f"no room for variable '{symbol}': address {address} reaches SCREEN ({limit})",
            location=location,
            hint="too many variables for data memory",
            source_line=source_line,
        )


# =============================================================================
# Disassembler Exceptions
# =============================================================================

class DisassemblyError(HackError):
    """
    Binary word that cannot be decoded.

    Raised when a line is not exactly 16 binary digits, or when the
    compute bits match no known computation, destination or jump.
    """

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
