"""
Hack SDK - Toolchain for the Hack Computer
==========================================

This package provides an assembler and disassembler for the 16-bit Hack
computer from "The Elements of Computing Systems" (nand2tetris).

Main Components
---------------
- **assembler**: Two-pass Hack assembler (hackasm)
    Converts symbolic assembly (.asm) to binary text (.hack)

- **disassembler**: Hack disassembler (hackdisasm)
    Converts binary text back to symbol-free assembly

- **cpu**: Instruction set tables shared by both tools

Quick Start
-----------
Assemble a program:
    >>> from hack_sdk.assembler import Assembler
    >>> asm = Assembler()
    >>> code = asm.assemble_file("Max.asm")
    >>> asm.write_hack("Max.hack")

Or use the command-line tools:
    $ hackasm Max.asm -o Max.hack
    $ hackdisasm Max.hack

Reference Documentation
-----------------------
- Hack machine language: https://www.nand2tetris.org/project06

Version History
---------------
1.0.0 - Initial release with assembler, disassembler and CLI tools
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hack_sdk.assembler import (
    Assembler,
    InstructionEncoder,
    SymbolTable,
    assemble,
    assemble_file,
)
from hack_sdk.disassembler import HackDisassembler, disassemble
from hack_sdk.config import AssemblerConfig
from hack_sdk.errors import (
    HackError,
    SourceLocation,
    AssemblerError,
    AssemblySyntaxError,
    UndefinedSymbolError,
    DuplicateSymbolError,
    UnknownMnemonicError,
    ValueRangeError,
    MemoryOverflowError,
    DisassemblyError,
)

__all__ = [
    # Version info
    "__version__",
    # Assembler
    "Assembler",
    "InstructionEncoder",
    "SymbolTable",
    "assemble",
    "assemble_file",
    # Disassembler
    "HackDisassembler",
    "disassemble",
    # Configuration
    "AssemblerConfig",
    # Exception hierarchy
    "HackError",
    "SourceLocation",
    "AssemblerError",
    "AssemblySyntaxError",
    "UndefinedSymbolError",
    "DuplicateSymbolError",
    "UnknownMnemonicError",
    "ValueRangeError",
    "MemoryOverflowError",
    "DisassemblyError",
]
