# =============================================================================
# test_disassembler.py - Hack Disassembler Tests
# =============================================================================
# Tests for decoding binary words back into assembly text.
# =============================================================================

import pytest

from hack_sdk.assembler import Assembler
from hack_sdk.disassembler import HackDisassembler, disassemble
from hack_sdk.errors import DisassemblyError


class TestDisassembleOne:
    """Test decoding of single words."""

    def test_address_instruction(self):
        instr = HackDisassembler().disassemble_one("0000000000010101")
        assert instr.text == "@21"
        assert instr.is_address

    def test_increment_d(self):
        assert HackDisassembler().disassemble_one("1110011111010000").text == "D=D+1"

    def test_unconditional_jump(self):
        assert HackDisassembler().disassemble_one("1110101010000111").text == "0;JMP"

    def test_combined_form(self):
        assert HackDisassembler().disassemble_one("1111110010101101").text == "AM=M-1;JNE"

    def test_compute_without_dest_or_jump(self):
        assert HackDisassembler().disassemble_one("1110001100000000").text == "D"

    def test_str_includes_address_and_word(self):
        instr = HackDisassembler().disassemble_one("0000000000000111", address=3)
        assert str(instr) == "    3: 0000000000000111  @7"

    @pytest.mark.parametrize("word", ["", "0101", "00000000000000002", "1110101010000111 1"])
    def test_malformed_word(self, word):
        with pytest.raises(DisassemblyError):
            HackDisassembler().disassemble_one(word)

    def test_invalid_prefix(self):
        with pytest.raises(DisassemblyError):
            HackDisassembler().disassemble_one("1000101010000111")

    def test_unknown_computation_bits(self):
        with pytest.raises(DisassemblyError) as exc_info:
            HackDisassembler().disassemble_one("1111111111000000", address=4)
        assert "line 5" in str(exc_info.value)


class TestDisassemble:
    """Test decoding of whole programs."""

    def test_skips_blank_lines(self):
        words = ["0000000000000010", "", "1110110000010000", "  "]
        assert disassemble(words) == ["@2", "D=A"]

    def test_addresses_count_instructions(self):
        instructions = HackDisassembler().disassemble(["0000000000000010", "", "1110110000010000"])
        assert [i.address for i in instructions] == [0, 1]

    def test_reassembles_to_same_binary(self):
        source = """
            @R0
            D=M
            @R1
            D=D-M
            @OUTPUT_FIRST
            D;JGT
            @R1
            D=M
            @OUTPUT_D
            0;JMP
        (OUTPUT_FIRST)
            @R0
            D=M
        (OUTPUT_D)
            @R2
            M=D
        (INFINITE_LOOP)
            @INFINITE_LOOP
            0;JMP
        """
        code = Assembler().assemble_string(source)
        text = disassemble(code)
        assert Assembler().assemble_lines(text) == code
