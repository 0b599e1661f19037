"""
Hack Symbol Table
=================

This module owns the mapping from symbol names to addresses and performs
the symbol-resolution half of the assembler. Resolution runs three
strictly ordered passes over the parsed program:

Pass 1 (Labels)
---------------
- Walk the statements with an instruction counter starting at 0
- Bind each (LABEL) to the current counter and drop the declaration
- Every other statement increments the counter

Pass 2 (Variables)
------------------
- Walk the label-free program in order
- Bind each @name that is not yet in the table to one more than the
  largest table value below SCREEN (labels included), starting at 16

Pass 3 (Substitution)
---------------------
- Replace every @name with the numeral it is bound to
- Numerals and compute instructions pass through untouched

Symbol Kinds
------------
Three kinds of entries share one table:

| Kind       | Bound when          | Example           |
|------------|---------------------|-------------------|
| PREDEFINED | table construction  | R0-R15, SP, KBD   |
| LABEL      | pass 1              | (LOOP) -> 4       |
| VARIABLE   | pass 2              | @sum -> 16        |

Once a name is bound it is never rebound.

Example
-------
>>> table = SymbolTable()
>>> table.resolve(["@i", "M=1", "(LOOP)", "@LOOP", "0;JMP"])
['16', 'M=1', '2', '0;JMP']
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional
import logging

from hack_sdk.config import AssemblerConfig, DEFAULT_CONFIG
from hack_sdk.cpu import PREDEFINED_SYMBOLS
from hack_sdk.errors import (
    DuplicateSymbolError,
    MemoryOverflowError,
    SourceLocation,
    UndefinedSymbolError,
)
from hack_sdk.assembler.parser import (
    AddressNumeral,
    AddressSymbol,
    LabelDef,
    Statement,
    parse_lines,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Symbol Table Entry
# =============================================================================

class SymbolKind(Enum):
    """Provenance of a symbol table entry."""
    PREDEFINED = auto()
    LABEL = auto()
    VARIABLE = auto()


@dataclass(frozen=True)
class Symbol:
    """
    Symbol table entry.

    Attributes:
        name: Symbol name (case-sensitive)
        value: Bound address
        kind: Where the binding came from
        location: Where the symbol was declared or first referenced
                  (None for predefined symbols)
    """
    name: str
    value: int
    kind: SymbolKind
    location: Optional[SourceLocation] = None


# =============================================================================
# Symbol Table
# =============================================================================

class SymbolTable:
    """
    Name-to-address mapping plus the three resolution passes.

    A fresh table holds only the predefined symbols. The table is the only
    writer of its own entries; callers read it through lookup() and the
    snapshot methods.

    Usage:
        table = SymbolTable()
        resolved = table.resolve(cleaned_lines)
        table.lookup("LOOP")
    """

    def __init__(self, config: Optional[AssemblerConfig] = None):
        """
        Initialize the table with the predefined symbols.

        Args:
            config: Memory layout settings (default: standard Hack layout)
        """
        self._config = config or DEFAULT_CONFIG
        self._symbols: dict[str, Symbol] = {}
        for name, value in PREDEFINED_SYMBOLS.items():
            self._symbols[name] = Symbol(name, value, SymbolKind.PREDEFINED)

    # =========================================================================
    # Table Access
    # =========================================================================

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def lookup(self, name: str) -> Optional[int]:
        """
        Get the address bound to a name.

        Returns:
            The bound address, or None if the name is unbound
        """
        symbol = self._symbols.get(name)
        return symbol.value if symbol is not None else None

    def get(self, name: str) -> Optional[Symbol]:
        """Get the full entry for a name, or None."""
        return self._symbols.get(name)

    def symbols(self) -> dict[str, int]:
        """Snapshot of every binding as name -> address."""
        return {name: sym.value for name, sym in self._symbols.items()}

    def labels(self) -> dict[str, int]:
        """Snapshot of label bindings in declaration order."""
        return self._of_kind(SymbolKind.LABEL)

    def variables(self) -> dict[str, int]:
        """Snapshot of variable bindings in allocation order."""
        return self._of_kind(SymbolKind.VARIABLE)

    def entries(self) -> list[Symbol]:
        """All entries in binding order."""
        return list(self._symbols.values())

    def _of_kind(self, kind: SymbolKind) -> dict[str, int]:
        return {
            name: sym.value
            for name, sym in self._symbols.items()
            if sym.kind is kind
        }

    def define(
        self,
        name: str,
        value: int,
        kind: SymbolKind = SymbolKind.LABEL,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> Symbol:
        """
        Bind a new name.

        Raises:
            DuplicateSymbolError: If the name is already bound
        """
        existing = self._symbols.get(name)
        if existing is not None:
            raise DuplicateSymbolError(
                name,
                location=location,
                original_location=existing.location,
                source_line=source_line,
            )
        symbol = Symbol(name, value, kind, location)
        self._symbols[name] = symbol
        logger.debug(f"bound {kind.name.lower()} '{name}' = {value}")
        return symbol

    def next_variable_address(self) -> int:
        """
        Address the next new variable would receive.

        One more than the highest binding below SCREEN, whatever its kind,
        and never below the variable base. A long program therefore pushes
        variables past its largest label address.
        """
        below_screen = [
            sym.value
            for sym in self._symbols.values()
            if sym.value < self._config.screen_base
        ]
        return max([self._config.variable_base - 1, *below_screen]) + 1

    # =========================================================================
    # Resolution
    # =========================================================================

    def resolve(self, lines: Iterable[str], filename: str = "<input>") -> list[str]:
        """
        Resolve cleaned instruction text.

        Label declarations are removed, every @name becomes the decimal
        numeral of its address, and compute instructions are returned
        unchanged.

        Args:
            lines: Cleaned, non-empty instruction lines
            filename: Name used in error locations

        Returns:
            Resolved lines, one per non-label input line
        """
        statements = parse_lines(lines, filename)
        return [_as_text(stmt) for stmt in self.resolve_statements(statements)]

    def resolve_statements(self, statements: Iterable[Statement]) -> list[Statement]:
        """
        Run the three resolution passes over parsed statements.

        Returns:
            Label-free statements with every AddressSymbol replaced by an
            AddressNumeral

        Raises:
            DuplicateSymbolError: Label declared twice or shadowing a predefined name
            MemoryOverflowError: Variables reached SCREEN
            UndefinedSymbolError: A reference is still unbound after pass 3
        """
        program = self._bind_labels(statements)
        program = self._allocate_variables(program)
        return self._substitute(program)

    def _bind_labels(self, statements: Iterable[Statement]) -> list[Statement]:
        """Pass 1: bind labels to the address of the next real instruction."""
        program = []
        counter = 0
        for stmt in statements:
            if isinstance(stmt, LabelDef):
                self.define(
                    stmt.name,
                    counter,
                    SymbolKind.LABEL,
                    location=stmt.location,
                    source_line=stmt.source or None,
                )
            else:
                program.append(stmt)
                counter += 1
        logger.debug(f"label pass: {len(program)} instructions")
        return program

    def _allocate_variables(self, program: list[Statement]) -> list[Statement]:
        """Pass 2: give every new @name the next free address."""
        for stmt in program:
            if not isinstance(stmt, AddressSymbol):
                continue
            if stmt.name in self._symbols:
                continue
            address = self.next_variable_address()
            if address >= self._config.screen_base:
                raise MemoryOverflowError(
                    stmt.name,
                    address,
                    self._config.screen_base,
                    location=stmt.location,
                    source_line=stmt.source or None,
                )
            self.define(stmt.name, address, SymbolKind.VARIABLE, location=stmt.location)
        return program

    def _substitute(self, program: list[Statement]) -> list[Statement]:
        """Pass 3: replace symbol references with their numerals."""
        resolved = []
        for stmt in program:
            if isinstance(stmt, AddressSymbol):
                value = self.lookup(stmt.name)
                if value is None:
                    raise UndefinedSymbolError(
                        stmt.name,
                        location=stmt.location,
                        source_line=stmt.source or None,
                    )
                stmt = AddressNumeral(stmt.location, value, source=stmt.source)
            resolved.append(stmt)
        return resolved


def _as_text(stmt: Statement) -> str:
    if isinstance(stmt, AddressNumeral):
        return stmt.render()
    return stmt.source or stmt.render()
