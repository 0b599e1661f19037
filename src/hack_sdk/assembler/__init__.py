"""
Hack Assembler
==============

This module provides a two-pass assembler for the 16-bit Hack computer.
It converts symbolic Hack assembly (.asm) into Hack binary text (.hack),
one 16-character line per instruction.

Main Components
---------------
- **Assembler**: Main assembler class that orchestrates the assembly process
- **clean_source**: Strips comments and whitespace, keeps line numbers
- **parse_line**: Classifies a line as label, address or compute statement
- **SymbolTable**: Binds labels and variables, substitutes symbols
- **InstructionEncoder**: Encodes resolved statements as 16-bit words

Assembly Process
----------------
1. **Cleaning and parsing**:
   - Remove // and /* */ comments and all whitespace
   - Classify each remaining line once

2. **Symbol resolution** (SymbolTable):
   - Pass 1: bind (LABEL) declarations to instruction addresses
   - Pass 2: allocate new @variables from address 16 upward
   - Pass 3: replace every @symbol with its numeral

3. **Encoding** (InstructionEncoder):
   - Address instructions: 0 + 15-bit value
   - Compute instructions: 111 a cccccc ddd jjj

Example Usage
-------------
>>> from hack_sdk.assembler import Assembler
>>> asm = Assembler()
>>> asm.assemble_string('''
... (LOOP)
...     @LOOP
...     0;JMP
... ''')
['0000000000000000', '1110101010000111']
"""

from hack_sdk.assembler.assembler import Assembler, assemble, assemble_file
from hack_sdk.assembler.lexer import SourceLine, clean_source, strip_line
from hack_sdk.assembler.parser import (
    Statement,
    LabelDef,
    AddressNumeral,
    AddressSymbol,
    Compute,
    parse_line,
    parse_lines,
    parse_source,
)
from hack_sdk.assembler.symbols import Symbol, SymbolKind, SymbolTable
from hack_sdk.assembler.encoder import InstructionEncoder, encode

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Cleaner
    "SourceLine",
    "clean_source",
    "strip_line",
    # Parser
    "Statement",
    "LabelDef",
    "AddressNumeral",
    "AddressSymbol",
    "Compute",
    "parse_line",
    "parse_lines",
    "parse_source",
    # Symbol table
    "Symbol",
    "SymbolKind",
    "SymbolTable",
    # Encoder
    "InstructionEncoder",
    "encode",
]
