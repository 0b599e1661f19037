"""
Hack Instruction Encoder
========================

This module turns fully resolved statements into 16-character binary
strings, one per instruction, in program order.

Encoding
--------
Address instruction (numeral N, 0 <= N <= 32767)::

    format(N, "016b")            e.g. 21 -> 0000000000010101

Compute instruction (dest=comp;jump)::

    111 a cccccc ddd jjj         e.g. D=D+1 -> 1110011111010000
                                      0;JMP -> 1110101010000111

Absent destination and jump fields encode as 000. Unknown mnemonics are
errors; nothing is ever encoded with a default code.
"""

from typing import Iterable, Optional
import logging

from hack_sdk.config import AssemblerConfig, DEFAULT_CONFIG
from hack_sdk.cpu import (
    COMPUTE_PREFIX,
    WORD_BITS,
    get_comp_info,
    get_dest_code,
    get_jump_code,
    get_valid_mnemonics,
)
from hack_sdk.errors import (
    AssemblySyntaxError,
    UndefinedSymbolError,
    UnknownMnemonicError,
    ValueRangeError,
)
from hack_sdk.assembler.parser import (
    AddressNumeral,
    AddressSymbol,
    Compute,
    LabelDef,
    Statement,
    parse_lines,
)


logger = logging.getLogger(__name__)


class InstructionEncoder:
    """
    Encodes resolved Hack instructions as binary text.

    The encoder is stateless apart from its configuration; the same
    instance can encode any number of programs.

    Usage:
        encoder = InstructionEncoder()
        encoder.encode(["16", "M=1", "0;JMP"])
    """

    def __init__(self, config: Optional[AssemblerConfig] = None):
        self._config = config or DEFAULT_CONFIG

    def encode(self, lines: Iterable[str], filename: str = "<input>") -> list[str]:
        """
        Encode fully resolved instruction text.

        Args:
            lines: Resolved lines (numerals and compute instructions)
            filename: Name used in error locations

        Returns:
            One 16-character binary string per input line
        """
        return self.encode_statements(parse_lines(lines, filename))

    def encode_statements(self, statements: Iterable[Statement]) -> list[str]:
        """Encode parsed, resolved statements in order."""
        words = [self.encode_statement(stmt) for stmt in statements]
        logger.debug(f"encoded {len(words)} instructions")
        return words

    def encode_statement(self, stmt: Statement) -> str:
        """
        Encode a single resolved statement.

        Raises:
            ValueRangeError: Numeral outside [0, max_address]
            UnknownMnemonicError: comp, dest or jump not in its table
            UndefinedSymbolError: Statement still refers to a symbol
            AssemblySyntaxError: Label declarations emit no code
        """
        if isinstance(stmt, AddressNumeral):
            return self._encode_address(stmt)
        if isinstance(stmt, Compute):
            return self._encode_compute(stmt)
        if isinstance(stmt, AddressSymbol):
            raise UndefinedSymbolError(
                stmt.name,
                location=stmt.location,
                hint="symbols must be resolved before encoding",
                source_line=stmt.source or None,
            )
        if isinstance(stmt, LabelDef):
            raise AssemblySyntaxError(
                f"label '{stmt.name}' reached the encoder",
                location=stmt.location,
                hint="labels must be resolved before encoding",
                source_line=stmt.source or None,
            )
        raise TypeError(f"cannot encode {type(stmt).__name__}")

    def _encode_address(self, stmt: AddressNumeral) -> str:
        if not 0 <= stmt.value <= self._config.max_address:
            raise ValueRangeError(
                stmt.value,
                maximum=self._config.max_address,
                location=stmt.location,
                source_line=stmt.source or None,
            )
        return format(stmt.value, f"0{WORD_BITS}b")

    def _encode_compute(self, stmt: Compute) -> str:
        comp = get_comp_info(stmt.comp)
        if comp is None:
            raise self._unknown("comp", stmt.comp, stmt)

        dest = get_dest_code(stmt.dest)
        if dest is None:
            raise self._unknown("dest", stmt.dest, stmt)

        jump = get_jump_code(stmt.jump)
        if jump is None:
            raise self._unknown("jump", stmt.jump, stmt)

        return COMPUTE_PREFIX + comp.a_bit + comp.code + dest + jump

    @staticmethod
    def _unknown(field: str, mnemonic: str, stmt: Compute) -> UnknownMnemonicError:
        return UnknownMnemonicError(
            field,
            mnemonic,
            location=stmt.location,
            source_line=stmt.source or stmt.render(),
            valid=get_valid_mnemonics(field),
        )


def encode(lines: Iterable[str]) -> list[str]:
    """
    Convenience function to encode resolved lines with default settings.
    """
    return InstructionEncoder().encode(lines)
