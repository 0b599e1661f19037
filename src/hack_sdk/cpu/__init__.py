"""
Hack SDK CPU Package
====================

This package contains the Hack CPU definitions used by both the assembler
(which encodes instructions) and the disassembler (which decodes them), so
the two always agree on the instruction set.

Modules:
    hack: Jump, destination and computation tables, predefined symbols,
          and lookup helpers.

Usage:
    from hack_sdk.cpu import (
        COMP_TABLE,
        PREDEFINED_SYMBOLS,
        get_comp_info,
    )
"""

from hack_sdk.cpu.hack import (
    # Core types
    CompInfo,
    # Instruction layout
    WORD_BITS,
    COMPUTE_PREFIX,
    MAX_ADDRESS_VALUE,
    NO_DEST,
    NO_JUMP,
    # Tables
    JUMP_TABLE,
    DEST_TABLE,
    COMP_TABLE,
    PREDEFINED_SYMBOLS,
    # Memory map
    SCREEN_BASE,
    KEYBOARD_ADDRESS,
    FIRST_VARIABLE_ADDRESS,
    # Lookup functions
    get_comp_info,
    get_dest_code,
    get_jump_code,
    get_valid_mnemonics,
)

__all__ = [
    "CompInfo",
    "WORD_BITS",
    "COMPUTE_PREFIX",
    "MAX_ADDRESS_VALUE",
    "NO_DEST",
    "NO_JUMP",
    "JUMP_TABLE",
    "DEST_TABLE",
    "COMP_TABLE",
    "PREDEFINED_SYMBOLS",
    "SCREEN_BASE",
    "KEYBOARD_ADDRESS",
    "FIRST_VARIABLE_ADDRESS",
    "get_comp_info",
    "get_dest_code",
    "get_jump_code",
    "get_valid_mnemonics",
]
