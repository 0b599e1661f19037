"""
Hack CPU Instruction Set Definition
===================================

This module defines the Hack instruction set tables shared by the assembler
and the disassembler: jump conditions, destinations, ALU computations and
the predefined symbols of the Hack memory map.

Instruction Formats
-------------------
Every Hack instruction is one 16-bit word.

1. **Address instruction** (``@value``)::

       0vvv vvvv vvvv vvvv      value = 0..32767

2. **Compute instruction** (``dest=comp;jump``)::

       111a cccc ccdd djjj

   - ``a``: selects A (0) or M (1) as the ALU's second operand
   - ``cccccc``: ALU control bits (zx nx zy ny f no)
   - ``ddd``: destination (A, D, M)
   - ``jjj``: jump condition (lt, eq, gt)

All tables are read-only mappings. Lookups go through the helper
functions, which return ``None`` for unknown mnemonics instead of a
default code.

Reference
---------
- Nisan & Schocken, "The Elements of Computing Systems", chapters 4 and 6
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


# =============================================================================
# Instruction Layout
# =============================================================================

WORD_BITS = 16
COMPUTE_PREFIX = "111"

# Address words keep the top bit clear
MAX_ADDRESS_VALUE = 2 ** (WORD_BITS - 1) - 1

NO_DEST = "null"
NO_JUMP = "null"


# =============================================================================
# ALU Computation Information
# =============================================================================

@dataclass(frozen=True)
class CompInfo:
    """
    Encoding of one ALU computation.

    Attributes:
        code: The six ALU control bits as a binary string
        a_bit: Source-select flag, "1" when the computation reads M
    """
    code: str
    a_bit: str

    @property
    def bits(self) -> str:
        """The seven a+c bits as they appear in the instruction word."""
        return self.a_bit + self.code


# =============================================================================
# Jump Table
# =============================================================================

JUMP_TABLE: Mapping[str, str] = MappingProxyType({
    NO_JUMP: "000",   # no jump
    "JGT": "001",     # if out > 0
    "JEQ": "010",     # if out = 0
    "JGE": "011",     # if out >= 0
    "JLT": "100",     # if out < 0
    "JNE": "101",     # if out != 0
    "JLE": "110",     # if out <= 0
    "JMP": "111",     # unconditional
})


# =============================================================================
# Destination Table
# =============================================================================

DEST_TABLE: Mapping[str, str] = MappingProxyType({
    NO_DEST: "000",   # value is not stored
    "M": "001",       # RAM[A]
    "D": "010",       # D register
    "MD": "011",      # RAM[A] and D
    "A": "100",       # A register
    "AM": "101",      # A and RAM[A]
    "AD": "110",      # A and D
    "AMD": "111",     # A, RAM[A] and D
})


# =============================================================================
# Computation Table
# =============================================================================
# Key: computation mnemonic
# Value: CompInfo(control bits, a flag)
#
# The a=1 half mirrors the a=0 entries that mention A, with M in its place.
# =============================================================================

COMP_TABLE: Mapping[str, CompInfo] = MappingProxyType({
    # Constants
    "0": CompInfo("101010", "0"),
    "1": CompInfo("111111", "0"),
    "-1": CompInfo("111010", "0"),

    # Single register, a=0
    "D": CompInfo("001100", "0"),
    "A": CompInfo("110000", "0"),
    "!D": CompInfo("001101", "0"),
    "!A": CompInfo("110001", "0"),
    "-D": CompInfo("001111", "0"),
    "-A": CompInfo("110011", "0"),
    "D+1": CompInfo("011111", "0"),
    "A+1": CompInfo("110111", "0"),
    "D-1": CompInfo("001110", "0"),
    "A-1": CompInfo("110010", "0"),

    # Register pairs, a=0
    "D+A": CompInfo("000010", "0"),
    "D-A": CompInfo("010011", "0"),
    "A-D": CompInfo("000111", "0"),
    "D&A": CompInfo("000000", "0"),
    "D|A": CompInfo("010101", "0"),

    # Memory operand, a=1
    "M": CompInfo("110000", "1"),
    "!M": CompInfo("110001", "1"),
    "-M": CompInfo("110011", "1"),
    "M+1": CompInfo("110111", "1"),
    "M-1": CompInfo("110010", "1"),
    "D+M": CompInfo("000010", "1"),
    "D-M": CompInfo("010011", "1"),
    "M-D": CompInfo("000111", "1"),
    "D&M": CompInfo("000000", "1"),
    "D|M": CompInfo("010101", "1"),
})


# =============================================================================
# Predefined Symbols
# =============================================================================

SCREEN_BASE = 16384
KEYBOARD_ADDRESS = 24576
FIRST_VARIABLE_ADDRESS = 16

PREDEFINED_SYMBOLS: Mapping[str, int] = MappingProxyType({
    **{f"R{i}": i for i in range(16)},
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    "SCREEN": SCREEN_BASE,
    "KBD": KEYBOARD_ADDRESS,
})


# =============================================================================
# Lookup Functions
# =============================================================================

def get_comp_info(mnemonic: str) -> Optional[CompInfo]:
    """
    Look up an ALU computation.

    Args:
        mnemonic: Computation text, e.g. "D+1" or "M"

    Returns:
        CompInfo, or None if the computation is not part of the instruction set
    """
    return COMP_TABLE.get(mnemonic)


def get_dest_code(mnemonic: Optional[str]) -> Optional[str]:
    """
    Return the 3-bit destination code.

    Only an absent destination (None) maps to "000"; the table's internal
    "null" key is not a mnemonic a program may write.
    """
    if mnemonic is None:
        return DEST_TABLE[NO_DEST]
    if mnemonic == NO_DEST:
        return None
    return DEST_TABLE.get(mnemonic)


def get_jump_code(mnemonic: Optional[str]) -> Optional[str]:
    """Return the 3-bit jump code; only an absent jump (None) maps to "000"."""
    if mnemonic is None:
        return JUMP_TABLE[NO_JUMP]
    if mnemonic == NO_JUMP:
        return None
    return JUMP_TABLE.get(mnemonic)


def get_valid_mnemonics(field: str) -> list[str]:
    """
    List the mnemonics accepted for one instruction field.

    Used to build error hints.

    Args:
        field: "comp", "dest" or "jump"
    """
    table = {"comp": COMP_TABLE, "dest": DEST_TABLE, "jump": JUMP_TABLE}[field]
    return [name for name in table if name != "null"]
