"""
Hack Disassembler
=================

Disassembles Hack binary text back into symbol-free assembly language.
This is the inverse operation of the assembler's instruction encoder.

Symbols do not survive assembly, so address instructions come back as
numerals (``@16``) and labels are not reconstructed.

Usage:
    disasm = HackDisassembler()

    # Disassemble a whole .hack file
    instructions = disasm.disassemble(Path("Max.hack").read_text(encoding="utf-8").splitlines())

    # Disassemble single instruction
    instr = disasm.disassemble_one("1110011111010000")
    print(instr.text)    # D=D+1
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from hack_sdk.cpu import (
    COMP_TABLE,
    COMPUTE_PREFIX,
    DEST_TABLE,
    JUMP_TABLE,
    NO_DEST,
    NO_JUMP,
    WORD_BITS,
)
from hack_sdk.errors import DisassemblyError


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class DisassembledInstruction:
    """
    Represents a single disassembled Hack instruction.

    Attributes:
        address: Instruction address (line index in the .hack file)
        word: The 16-character binary word
        text: Assembly text, e.g. "@21" or "AM=M-1;JNE"
        is_address: True for address instructions
    """
    address: int
    word: str
    text: str
    is_address: bool

    def __str__(self) -> str:
        """Format as listing line: ADDRESS: WORD  TEXT"""
        return f"{self.address:5d}: {self.word}  {self.text}"


# =============================================================================
# Hack Disassembler
# =============================================================================

class HackDisassembler:
    """
    Disassembler for Hack binary text.

    This class builds reverse lookup tables from the shared CPU tables so
    that decoding always agrees with encoding.
    """

    def __init__(self):
        self._comp: Dict[str, str] = {info.bits: name for name, info in COMP_TABLE.items()}
        self._dest: Dict[str, Optional[str]] = {
            code: (None if name == NO_DEST else name) for name, code in DEST_TABLE.items()
        }
        self._jump: Dict[str, Optional[str]] = {
            code: (None if name == NO_JUMP else name) for name, code in JUMP_TABLE.items()
        }

    def disassemble_one(self, word: str, address: int = 0) -> DisassembledInstruction:
        """
        Decode one binary word.

        Args:
            word: 16 characters of '0'/'1'
            address: Instruction address, used for reporting

        Raises:
            DisassemblyError: If the word is malformed or not a valid instruction
        """
        word = word.strip()
        if len(word) != WORD_BITS or set(word) - {"0", "1"}:
            raise DisassemblyError(f"'{word}' is not a {WORD_BITS}-bit binary word", line=address + 1)

        if word[0] == "0":
            return DisassembledInstruction(address, word, f"@{int(word, 2)}", True)

        if not word.startswith(COMPUTE_PREFIX):
            raise DisassemblyError(f"'{word}' has an invalid instruction prefix", line=address + 1)

        comp_bits = word[3:10]
        comp = self._comp.get(comp_bits)
        if comp is None:
            raise DisassemblyError(f"unknown computation bits {comp_bits} in '{word}'", line=address + 1)

        text = comp
        dest = self._dest[word[10:13]]
        jump = self._jump[word[13:16]]
        if dest is not None:
            text = f"{dest}={text}"
        if jump is not None:
            text = f"{text};{jump}"
        return DisassembledInstruction(address, word, text, False)

    def disassemble(self, lines: Iterable[str]) -> list[DisassembledInstruction]:
        """
        Decode every non-blank line of a .hack file.

        Args:
            lines: Binary lines in program order

        Returns:
            Decoded instructions; addresses count non-blank lines from 0
        """
        result = []
        for line in lines:
            if not line.strip():
                continue
            result.append(self.disassemble_one(line, address=len(result)))
        return result


def disassemble(lines: Iterable[str]) -> list[str]:
    """
    Convenience function returning just the assembly text.
    """
    return [instr.text for instr in HackDisassembler().disassemble(lines)]
