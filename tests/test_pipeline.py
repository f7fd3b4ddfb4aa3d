# tests/test_pipeline.py
"""
生成パイプライン全体の結合テスト。
仕様書ディレクトリから2つの出力ファイルまでの振る舞いを検証します。
"""
import re

import pytest

from opcode_dispatch_gen.arch.mos6502.reference import DEFAULT_OPCODE_REFERENCE
from opcode_dispatch_gen.common.errors import (
    GenerationFailed, OpcodeConflictError, SpecDirectoryError, SpecReadError, StructuralError,
    UnsupportedModeError,
)
from opcode_dispatch_gen.config.models import GeneratorConfig, OutputConfig
from opcode_dispatch_gen.pipeline import Generator
from conftest import LDA_SPEC, INC_SPEC, CLC_SPEC, entries_of, entry_at, table_spec

# @intent:test_suite ロードから書き込みまでの一連の生成処理を検証します。

def arm_keys(clock):
    return re.findall(r"^\s*0x([0-9a-f]{2}) => \{$", clock, flags=re.MULTILINE)

@pytest.fixture
def make_generator(tmp_path):
    def make(directory, **kwargs):
        config = GeneratorConfig(
            spec_dir=str(directory),
            output=OutputConfig(
                instructions=str(tmp_path / "out" / "instructions.rs"),
                clock=str(tmp_path / "out" / "clock.rs"),
            ),
        )
        return Generator(config, **kwargs)
    return make

@pytest.fixture
def outputs(tmp_path):
    return tmp_path / "out" / "instructions.rs", tmp_path / "out" / "clock.rs"

class TestSuccessfulGeneration:
    def test_writes_both_outputs(self, spec_dir, make_generator, outputs):
        directory = spec_dir({"LDA": LDA_SPEC, "INC": INC_SPEC, "CLC": CLC_SPEC})
        make_generator(directory).run()
        instructions, clock = (p.read_text(encoding="utf-8") for p in outputs)
        # 読み込み順（辞書順）で本体マクロが並ぶ
        assert instructions.index("macro_rules! clc") < instructions.index("macro_rules! inc") < instructions.index("macro_rules! lda")
        assert "abx!(self, memory);\n          lda!(self, memory);" in clock
        assert "inc!(self, memory);\n          $self.steps += 1;" in clock

    def test_spec_without_table_has_body_but_no_arms(self, spec_dir, make_generator):
        result = make_generator(spec_dir({"CLC": CLC_SPEC})).generate()
        assert "macro_rules! clc {" in result.instructions
        assert entries_of(result.table, "CLC") == []
        assert "clc!(self, memory)" not in result.clock

    def test_page_cross_flag_follows_plus_suffix(self, spec_dir, make_generator):
        result = make_generator(spec_dir({"LDA": LDA_SPEC})).generate()
        flags = {e.opcode: e.page_cross for e in entries_of(result.table, "LDA")}
        assert flags == {0xA9: False, 0xA5: False, 0xBD: True}

    def test_one_arm_per_populated_byte(self, spec_dir, make_generator):
        result = make_generator(spec_dir({"LDA": LDA_SPEC, "INC": INC_SPEC})).generate()
        keys = arm_keys(result.clock)
        assert len(keys) == len(set(keys)) == len(result.table)
        placeholders = sum(1 for _, name, _ in DEFAULT_OPCODE_REFERENCE if name in ("NOP", "XXX"))
        assert len(keys) == placeholders + 5

    def test_arms_strictly_ascending(self, spec_dir, make_generator):
        result = make_generator(spec_dir({"LDA": LDA_SPEC, "INC": INC_SPEC})).generate()
        values = [int(k, 16) for k in arm_keys(result.clock)]
        assert values == sorted(values)
        assert len(values) == len(set(values))
        assert arm_keys(result.clock)[:3] == ["02", "03", "04"]

    def test_full_coverage_with_complete_reference(self, spec_dir, make_generator):
        # 全バイトを仕様書で宣言し、参照表の全行をデフォルト扱いにする
        reference = [("imp", "NOP", cycles) for _, _, cycles in DEFAULT_OPCODE_REFERENCE]
        specs = {
            f"OP{hi:X}": table_spec(f"OP{hi:X}", [("Implied", f"{hi:X}{lo:X}", "2") for lo in range(16)])
            for hi in range(8)
        }
        result = make_generator(spec_dir(specs), reference=reference).generate()
        keys = arm_keys(result.clock)
        assert keys == [f"{b:02x}" for b in range(256)]
        assert entry_at(result.table, 0x0A).instruction == "OP0"
        assert entry_at(result.table, 0xFF).is_default

    def test_placeholder_bodies_emitted(self, spec_dir, make_generator):
        result = make_generator(spec_dir({"LDA": LDA_SPEC})).generate()
        assert "macro_rules! nop {" in result.instructions
        assert "macro_rules! xxx {" in result.instructions

    def test_generation_is_deterministic(self, spec_dir, make_generator, outputs):
        directory = spec_dir({"LDA": LDA_SPEC, "INC": INC_SPEC, "CLC": CLC_SPEC})
        make_generator(directory).run()
        first = [p.read_bytes() for p in outputs]
        make_generator(directory).run()
        assert [p.read_bytes() for p in outputs] == first

    def test_empty_directory(self, spec_dir, make_generator):
        result = make_generator(spec_dir({})).generate()
        assert result.specs == []
        assert "macro_rules! lda" not in result.instructions

class TestFailedGeneration:
    def test_opcode_conflict_writes_nothing(self, spec_dir, make_generator, outputs):
        directory = spec_dir({
            "LSR": table_spec("LSR", [("Implied", "4A", "2")]),
            "ROR": table_spec("ROR", [("Implied", "4A", "2")]),
        })
        with pytest.raises(GenerationFailed) as excinfo:
            make_generator(directory).run()
        (error,) = excinfo.value.errors
        assert isinstance(error, OpcodeConflictError)
        assert error.opcode == 0x4A
        assert "LSR" in str(error) and "ROR" in str(error) and "0x4a" in str(error)
        assert not any(p.exists() for p in outputs)

    def test_unsupported_mode(self, spec_dir, make_generator, outputs):
        directory = spec_dir({"ASL": table_spec("ASL", [("Accumulator", "0A", "2")])})
        with pytest.raises(GenerationFailed) as excinfo:
            make_generator(directory).run()
        (error,) = excinfo.value.errors
        assert isinstance(error, UnsupportedModeError)
        assert "Accumulator" in str(error) and "ASL" in str(error) and "0A" in str(error)
        assert not any(p.exists() for p in outputs)

    def test_every_error_is_reported(self, spec_dir, make_generator):
        directory = spec_dir({
            "ASL": table_spec("ASL", [("Accumulator", "0A", "2")]),
            "BAD": "# BAD\n\nno implementation here\n",
            "LSR": table_spec("LSR", [("Implied", "4A", "2")]),
            "ROR": table_spec("ROR", [("Implied", "4A", "2")]),
        })
        with pytest.raises(GenerationFailed) as excinfo:
            make_generator(directory).generate()
        kinds = sorted(type(e).__name__ for e in excinfo.value.errors)
        assert kinds == ["OpcodeConflictError", "StructuralError", "UnsupportedModeError"]

    def test_structural_error_aborts(self, spec_dir, make_generator, outputs):
        directory = spec_dir({"LDA": LDA_SPEC, "BAD": "# BAD\n"})
        with pytest.raises(GenerationFailed) as excinfo:
            make_generator(directory).run()
        assert isinstance(excinfo.value.errors[0], StructuralError)
        assert not any(p.exists() for p in outputs)

    def test_undecodable_spec_is_collected(self, spec_dir, make_generator, outputs):
        directory = spec_dir({"LDA": LDA_SPEC, "ASL": table_spec("ASL", [("Accumulator", "0A", "2")])})
        (directory / "BIN.md").write_bytes(b"\x89PNG\r\n\x1a\n\xff\xff")
        with pytest.raises(GenerationFailed) as excinfo:
            make_generator(directory).run()
        kinds = sorted(type(e).__name__ for e in excinfo.value.errors)
        assert kinds == ["SpecReadError", "UnsupportedModeError"]
        read_error = next(e for e in excinfo.value.errors if isinstance(e, SpecReadError))
        assert read_error.identifier == "BIN"
        assert not any(p.exists() for p in outputs)

    def test_missing_spec_directory(self, tmp_path, make_generator):
        with pytest.raises(SpecDirectoryError):
            make_generator(tmp_path / "missing").run()

    def test_enabling_mode_via_config(self, spec_dir, tmp_path):
        directory = spec_dir({"BNE": table_spec("BNE", [("Relative", "D0", "2+")])})
        config = GeneratorConfig(spec_dir=str(directory), modes={"Relative": True})
        result = Generator(config).generate()
        assert "rel!(self, memory);" in result.clock
