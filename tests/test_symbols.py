# =============================================================================
# test_symbols.py - Symbol Table and Resolution Tests
# =============================================================================
# Tests for the three resolution passes.
#
# Test coverage includes:
#   - Predefined symbols
#   - Label binding (including consecutive labels)
#   - Variable allocation order and overflow
#   - Idempotence of resolution on resolved output
#   - Duplicate and undefined symbol errors
# =============================================================================

import pytest

from hack_sdk.assembler.parser import AddressSymbol, parse_lines
from hack_sdk.assembler.symbols import SymbolKind, SymbolTable
from hack_sdk.config import AssemblerConfig
from hack_sdk.errors import (
    DuplicateSymbolError,
    MemoryOverflowError,
    SourceLocation,
    UndefinedSymbolError,
)


# =============================================================================
# Predefined Symbol Tests
# =============================================================================

class TestPredefinedSymbols:
    """Test the table contents before any input is read."""

    @pytest.mark.parametrize("index", range(16))
    def test_registers(self, index):
        assert SymbolTable().lookup(f"R{index}") == index

    @pytest.mark.parametrize("name,value", [
        ("SP", 0), ("LCL", 1), ("ARG", 2), ("THIS", 3), ("THAT", 4),
        ("SCREEN", 16384), ("KBD", 24576),
    ])
    def test_pointers_and_io(self, name, value):
        assert SymbolTable().lookup(name) == value

    def test_unknown_name_is_none(self):
        assert SymbolTable().lookup("sum") is None

    def test_lookup_is_case_sensitive(self):
        assert SymbolTable().lookup("sp") is None

    def test_no_labels_or_variables(self):
        table = SymbolTable()
        assert table.labels() == {}
        assert table.variables() == {}

    def test_predefined_substitution(self):
        assert SymbolTable().resolve(["@SCREEN", "@KBD", "@R13"]) == ["16384", "24576", "13"]


# =============================================================================
# Label Pass Tests
# =============================================================================

class TestLabels:
    """Test label binding."""

    def test_label_removed_from_output(self):
        assert SymbolTable().resolve(["(START)", "@START", "0;JMP"]) == ["0", "0;JMP"]

    def test_label_binds_to_next_instruction(self):
        table = SymbolTable()
        table.resolve(["@0", "D=A", "(END)", "@END", "0;JMP"])
        assert table.lookup("END") == 2

    def test_labels_count_only_real_instructions(self):
        lines = ["(A0)", "@1", "(B1)", "(C1)", "D=A", "(D2)", "@A0", "0;JMP", "(E4)"]
        table = SymbolTable()
        table.resolve(lines)
        assert table.labels() == {"A0": 0, "B1": 1, "C1": 1, "D2": 2, "E4": 4}

    def test_consecutive_labels_share_address(self):
        table = SymbolTable()
        out = table.resolve(["(FIRST)", "(SECOND)", "@FIRST", "@SECOND", "0;JMP"])
        assert out == ["0", "0", "0;JMP"]

    def test_forward_reference(self):
        out = SymbolTable().resolve(["@END", "0;JMP", "(END)", "@END", "0;JMP"])
        assert out == ["2", "0;JMP", "2", "0;JMP"]

    def test_label_is_not_a_variable(self):
        table = SymbolTable()
        table.resolve(["@LOOP", "0;JMP", "(LOOP)", "@x", "M=0"])
        assert table.variables() == {"x": 16}
        assert table.get("LOOP").kind is SymbolKind.LABEL

    def test_forward_label_reference_is_not_allocated(self):
        table = SymbolTable()
        out = table.resolve(["@END", "D=A", "(END)", "@v"])
        assert table.variables() == {"v": 16}
        assert out == ["2", "D=A", "16"]

    def test_duplicate_label(self):
        with pytest.raises(DuplicateSymbolError) as exc_info:
            SymbolTable().resolve(["(LOOP)", "@LOOP", "(LOOP)", "0;JMP"], "dup.asm")
        assert "dup.asm:1:1" in str(exc_info.value)

    def test_label_shadowing_predefined(self):
        with pytest.raises(DuplicateSymbolError) as exc_info:
            SymbolTable().resolve(["(SCREEN)", "0;JMP"])
        assert "predefined" in str(exc_info.value)


# =============================================================================
# Variable Pass Tests
# =============================================================================

class TestVariables:
    """Test variable allocation."""

    def test_first_variable_at_16(self):
        assert SymbolTable().resolve(["@i", "M=1"]) == ["16", "M=1"]

    def test_first_reference_order(self):
        table = SymbolTable()
        table.resolve(["@i", "@sum", "@i", "@n", "@sum"])
        assert table.variables() == {"i": 16, "sum": 17, "n": 18}

    def test_repeated_reference_reuses_address(self):
        assert SymbolTable().resolve(["@x", "@y", "@x"]) == ["16", "17", "16"]

    def test_variables_allocate_above_labels(self):
        """Labels are bound first, so a far label raises the next variable address."""
        lines = ["@x"] + ["D=A"] * 40 + ["(FAR)", "@y", "@FAR"]
        table = SymbolTable()
        out = table.resolve(lines)
        assert table.lookup("FAR") == 41
        assert table.variables() == {"x": 42, "y": 43}
        assert out[0] == "42"
        assert out[-2:] == ["43", "41"]

    def test_label_at_screen_does_not_block_variables(self):
        table = SymbolTable(AssemblerConfig(screen_base=20))
        table.resolve(["D=A"] * 25 + ["(END)", "@v"])
        assert table.lookup("END") == 25
        assert table.variables() == {"v": 16}

    def test_variable_names_with_dots(self):
        table = SymbolTable()
        table.resolve(["@Main.0", "@Main.1", "@Main.0"])
        assert table.variables() == {"Main.0": 16, "Main.1": 17}

    def test_case_sensitive_variables(self):
        assert SymbolTable().resolve(["@x", "@X"]) == ["16", "17"]

    def test_numerals_are_not_variables(self):
        table = SymbolTable()
        assert table.resolve(["@100", "@16", "@y"]) == ["100", "16", "16"]
        assert table.variables() == {"y": 16}

    def test_next_variable_address(self):
        table = SymbolTable()
        assert table.next_variable_address() == 16
        table.resolve(["@a", "@b"])
        assert table.next_variable_address() == 18

    def test_configured_variable_base(self):
        table = SymbolTable(AssemblerConfig(variable_base=1024))
        assert table.resolve(["@a", "@b"]) == ["1024", "1025"]

    def test_overflow_into_screen(self):
        config = AssemblerConfig(screen_base=18)
        with pytest.raises(MemoryOverflowError) as exc_info:
            SymbolTable(config).resolve(["@a", "@b", "@c"])
        assert exc_info.value.symbol == "c"
        assert exc_info.value.address == 18


# =============================================================================
# Whole Resolution Tests
# =============================================================================

class TestResolve:
    """Test the full three-pass resolution."""

    def test_compute_lines_untouched(self):
        lines = ["D=M", "AM=M-1;JNE", "0;JMP"]
        assert SymbolTable().resolve(lines) == lines

    def test_idempotent_on_resolved_output(self):
        lines = ["@i", "M=1", "(LOOP)", "@i", "D=M", "@100", "D=D-A", "@END",
                 "D;JGT", "@LOOP", "0;JMP", "(END)", "@END", "0;JMP"]
        once = SymbolTable().resolve(lines)
        assert SymbolTable().resolve(once) == once

    def test_deterministic(self):
        lines = ["@b", "@a", "(L)", "@L", "@c"]
        assert SymbolTable().resolve(lines) == SymbolTable().resolve(lines)

    def test_resolve_statements_returns_numerals(self):
        statements = parse_lines(["@x", "(L)", "@L"])
        resolved = SymbolTable().resolve_statements(statements)
        assert [s.render() for s in resolved] == ["16", "1"]
        assert not any(isinstance(s, AddressSymbol) for s in resolved)

    def test_unbound_symbol_in_substitution(self):
        """Pass 3 on its own refuses to emit an unresolved name."""
        table = SymbolTable()
        stmt = AddressSymbol(SourceLocation("x.asm", 7, 1), "ghost", source="@ghost")
        with pytest.raises(UndefinedSymbolError) as exc_info:
            table._substitute([stmt])
        assert "ghost" in str(exc_info.value)
        assert "x.asm:7:1" in str(exc_info.value)


# =============================================================================
# Direct Definition Tests
# =============================================================================

class TestDefine:
    """Test the single-writer binding API."""

    def test_define_and_lookup(self):
        table = SymbolTable()
        table.define("START", 5)
        assert table.lookup("START") == 5
        assert "START" in table

    def test_never_rebinds(self):
        table = SymbolTable()
        table.define("START", 5)
        with pytest.raises(DuplicateSymbolError):
            table.define("START", 6, SymbolKind.VARIABLE)
        assert table.lookup("START") == 5

    def test_symbols_snapshot_is_a_copy(self):
        table = SymbolTable()
        snapshot = table.symbols()
        snapshot["R0"] = 99
        assert table.lookup("R0") == 0
