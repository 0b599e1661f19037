"""
Hack Assembler - Main Interface
===============================

This module provides the main Assembler class, which is the primary interface
for assembling Hack source code. It coordinates the source cleaner, parser,
symbol table and instruction encoder to produce .hack binary text.

Example Usage
-------------
>>> from hack_sdk.assembler import Assembler
>>>
>>> asm = Assembler()
>>> asm.assemble_string('''
... // Adds R0 and R1, stores the sum in R2
... @R0
... D=M
... @R1
... D=D+M
... @R2
... M=D
... ''')
>>> asm.get_code()[:2]
['0000000000000000', '1111110000010000']
>>> asm.write_hack("Add.hack")

Command-Line Usage
------------------
The assembler can also be invoked from the command line:

    $ hackasm Add.asm -o Add.hack -s Add.sym -l Add.lst

Options:
    -o, --output FILE      Output .hack file
    -s, --symbols FILE     Generate symbol file
    -l, --listing FILE     Generate listing file
    -v, --verbose          Verbose output
"""

from pathlib import Path
from typing import Iterable, Optional
import logging

from hack_sdk.config import AssemblerConfig, DEFAULT_CONFIG
from hack_sdk.assembler.parser import (
    LabelDef,
    Statement,
    parse_lines,
    parse_source,
)
from hack_sdk.assembler.symbols import SymbolTable, SymbolKind
from hack_sdk.assembler.encoder import InstructionEncoder


logger = logging.getLogger(__name__)


class Assembler:
    """
    Main Hack assembler class.

    Each assemble_* call starts from a fresh symbol table, so one instance
    can assemble several programs in turn. Results of the most recent
    successful call are available through the get_* and write_* methods;
    a failing call raises and leaves the previous results untouched.

    Attributes:
        config: Memory layout and output settings
    """

    def __init__(self, config: Optional[AssemblerConfig] = None):
        """
        Initialize the assembler.

        Args:
            config: Memory layout and output settings (default: standard Hack)
        """
        self.config = config or DEFAULT_CONFIG
        self._encoder = InstructionEncoder(self.config)
        self._table = SymbolTable(self.config)
        self._statements: list[Statement] = []
        self._code: list[str] = []
        self._source_file: Optional[Path] = None

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_string(self, source: str, filename: str = "<input>") -> list[str]:
        """
        Assemble source code from a string.

        The assembly pipeline is:
        1. Clean and parse source into statements
        2. Resolve labels, variables and predefined symbols
        3. Encode every instruction

        Args:
            source: Assembly source code (comments and blank lines allowed)
            filename: Virtual filename for error messages

        Returns:
            Binary instruction lines

        Raises:
            AssemblerError: If assembly fails
        """
        statements = parse_source(source, filename)
        logger.debug(f"parsed {len(statements)} statements from {filename}")
        return self._assemble(statements)

    def assemble_lines(self, lines: Iterable[str], filename: str = "<input>") -> list[str]:
        """
        Assemble lines that are already free of comments and whitespace.

        Args:
            lines: Cleaned, non-empty statement lines
            filename: Virtual filename for error messages

        Returns:
            Binary instruction lines
        """
        return self._assemble(parse_lines(lines, filename))

    def assemble_file(self, filepath: str | Path) -> list[str]:
        """
        Assemble source code from a file.

        Args:
            filepath: Path to assembly source file

        Returns:
            Binary instruction lines

        Raises:
            AssemblerError: If assembly fails
            FileNotFoundError: If source file not found
            UnicodeDecodeError: If the file is not UTF-8 text
        """
        filepath = Path(filepath)
        logger.info(f"assembling {filepath}")
        source = filepath.read_text(encoding="utf-8")
        code = self.assemble_string(source, str(filepath))
        self._source_file = filepath
        return code

    def _assemble(self, statements: list[Statement]) -> list[str]:
        table = SymbolTable(self.config)
        resolved = table.resolve_statements(statements)
        code = self._encoder.encode_statements(resolved)

        self._table = table
        self._statements = statements
        self._code = code
        logger.debug(
            f"{len(code)} instructions, {len(table.labels())} labels, "
            f"{len(table.variables())} variables"
        )
        return code

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_code(self) -> list[str]:
        """
        Get the generated binary lines.

        Returns:
            One 16-character string per instruction
        """
        return list(self._code)

    def get_symbols(self) -> dict[str, int]:
        """
        Get the symbol table.

        Returns:
            Dictionary mapping every bound name (predefined, label and
            variable) to its address
        """
        return self._table.symbols()

    def get_symbol_table(self) -> SymbolTable:
        """Get the symbol table of the last successful run."""
        return self._table

    def get_source_file(self) -> Optional[Path]:
        """Path of the last file assembled with assemble_file, if any."""
        return self._source_file

    def get_listing(self) -> str:
        """
        Get the assembly listing as a string.

        Returns:
            Listing with instruction addresses, binary words and source text,
            followed by the user-defined symbols
        """
        lines = []
        lines.append("Hack Assembler Listing")
        lines.append("=" * 60)
        lines.append("")
        lines.append("Addr   Code              Line  Source")
        lines.append("-" * 60)

        address = 0
        for stmt in self._statements:
            source = stmt.source or stmt.render()
            if isinstance(stmt, LabelDef):
                lines.append(f"{'':6} {'':16}  {stmt.location.line:4}  {source}")
                continue
            word = self._code[address]
            lines.append(f"{address:6} {word}  {stmt.location.line:4}  {source}")
            address += 1

        lines.append("")
        lines.append("Symbol Table")
        lines.append("-" * 30)
        for sym in self._table.entries():
            if sym.kind is SymbolKind.PREDEFINED:
                continue
            kind = "label" if sym.kind is SymbolKind.LABEL else "var"
            lines.append(f"{sym.name:20s} = {sym.value:5d}  {kind}")
        return "\n".join(lines) + "\n"

    def write_hack(self, filepath: str | Path) -> None:
        """
        Write binary output, one 16-character line per instruction.

        Args:
            filepath: Output file path
        """
        with open(filepath, "w") as f:
            for word in self._code:
                f.write(f"{word}\n")
        logger.info(f"wrote {len(self._code)} instructions to {filepath}")

    def write_listing(self, filepath: str | Path) -> None:
        """
        Write assembly listing file.

        Args:
            filepath: Output file path
        """
        with open(filepath, "w") as f:
            f.write(self.get_listing())

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write symbol table file.

        Format: name address (one per line, labels then variables)
        """
        with open(filepath, "w") as f:
            f.write("# Symbol table\n")
            f.write("# Generated by hackasm\n")
            for name, value in self._table.labels().items():
                f.write(f"{name} {value}\n")
            for name, value in self._table.variables().items():
                f.write(f"{name} {value}\n")


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, filename: str = "<input>") -> list[str]:
    """
    Convenience function to assemble source code.

    Args:
        source: Assembly source code
        filename: Virtual filename for errors

    Returns:
        Binary instruction lines

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_string(source, filename)


def assemble_file(filepath: str | Path) -> list[str]:
    """
    Convenience function to assemble a file.

    Args:
        filepath: Path to source file

    Returns:
        Binary instruction lines

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_file(filepath)
