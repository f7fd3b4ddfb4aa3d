# tests/core/test_model.py
"""
opcode_dispatch_gen.core.modelモジュールの単体テスト。
"""
import pytest

from opcode_dispatch_gen.common.errors import MalformedRowError
from opcode_dispatch_gen.core.model import AddressingModeRow, OpcodeEntry, InstructionSpec

# @intent:test_suite テーブル行の解釈とエントリのキー表現を検証します。

def make_row(opcode="$A9", cycles="2", label="Immediate"):
    return AddressingModeRow(identifier="LDA", cells=(label, "LDA #$44", opcode, "2", cycles))

class TestAddressingModeRow:
    def test_opcode_from_middle_characters(self):
        row = make_row(opcode="$BD")
        assert row.opcode_text == "BD"
        assert row.opcode == 0xBD

    def test_lowercase_hex_is_accepted(self):
        assert make_row(opcode="$0a").opcode == 0x0A

    @pytest.mark.parametrize("cycles, expected, page_cross", [
        ("2", 2, False),
        ("4+", 4, True),
        ("5 +", 5, True),
        (" 7 ", 7, False),
    ])
    def test_cycles_and_page_cross(self, cycles, expected, page_cross):
        row = make_row(cycles=cycles)
        assert row.cycles == expected
        assert row.page_cross is page_cross

    @pytest.mark.parametrize("opcode", ["$G1", "A9", "$A", "$A9A"])
    def test_invalid_opcode(self, opcode):
        with pytest.raises(MalformedRowError, match="invalid opcode field"):
            make_row(opcode=opcode).opcode

    @pytest.mark.parametrize("cycles", ["", "x", "+4", "2 (+1 if branch)"])
    def test_invalid_cycles(self, cycles):
        with pytest.raises(MalformedRowError, match="invalid cycle field"):
            make_row(cycles=cycles).cycles

    def test_short_row_is_malformed(self):
        row = AddressingModeRow(identifier="LDA", cells=("Immediate", "LDA #$44", "$A9"))
        with pytest.raises(MalformedRowError) as excinfo:
            row.check_shape()
        assert excinfo.value.identifier == "LDA"
        assert "expected at least 5 columns, got 3" in str(excinfo.value)

class TestOpcodeEntry:
    def test_key_is_two_digit_lowercase_hex(self):
        assert OpcodeEntry(opcode=0x0A, mode="imp", instruction="ASL", cycles=2).key == "0a"
        assert OpcodeEntry(opcode=0xFF, mode="imp", instruction="XXX", cycles=7).key == "ff"

    def test_default_source(self):
        entry = OpcodeEntry(opcode=0x02, mode="imp", instruction="XXX", cycles=2)
        assert entry.is_default
        user = OpcodeEntry(opcode=0xA9, mode="imm", instruction="LDA", cycles=2, source="LDA (Immediate)")
        assert not user.is_default

    def test_entry_is_immutable(self):
        entry = OpcodeEntry(opcode=0xA9, mode="imm", instruction="LDA", cycles=2)
        with pytest.raises(AttributeError):
            entry.cycles = 3

def test_instruction_spec_defaults():
    spec = InstructionSpec(identifier="CLC", implementation="body")
    assert spec.rows is None
    assert spec.additional_codes == ""
    assert spec.macro_name == "clc"
