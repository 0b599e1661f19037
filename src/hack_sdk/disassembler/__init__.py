"""
Hack SDK Disassembler Package
=============================

Decodes Hack binary text (.hack) back into assembly language.

Usage:
    from hack_sdk.disassembler import HackDisassembler

    disasm = HackDisassembler()
    for instr in disasm.disassemble(lines):
        print(instr)
"""

from hack_sdk.disassembler.hack import (
    DisassembledInstruction,
    HackDisassembler,
    disassemble,
)

__all__ = [
    "DisassembledInstruction",
    "HackDisassembler",
    "disassemble",
]
