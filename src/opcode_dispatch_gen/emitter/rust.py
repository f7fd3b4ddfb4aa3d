# src/opcode_dispatch_gen/emitter/rust.py
"""
Rustコードエミッタ。

検証済みのモデルから、命令本体マクロ定義（instructions.rs）と
オペコードごとのディスパッチテーブル（clock.rs）の2つのテキストを生成します。
同じ入力からは常にバイト単位で同一の出力を生成します。
"""
from typing import List, Sequence

from opcode_dispatch_gen.arch.mos6502.addressing import AddressingModeRegistry
from opcode_dispatch_gen.core.model import InstructionSpec, OpcodeEntry
from opcode_dispatch_gen.core.table import OpcodeTable

KEY_WIDTH = 2

BODY_TEMPLATE = """#[allow(unused_macros)]
macro_rules! {name} {{
  ($self:expr, $memory:expr) => {{
    {body}
  }}
}}

"""

CLOCK_TEMPLATE = """
use crate::cpu::*;
use crate::Memory;

impl CPU {{
    pub fn clock(&mut self, memory: &mut dyn Memory) {{
        self.init_opcode(memory);

        match self.current_opcode {{
            {arms}
            _ => {{
              self.steps = 1;
            }}
        }}

        self.steps -= 1;
        self.cycles += 1;
    }}
}}
"""


class CodeEmitter:
    def __init__(self, registry: AddressingModeRegistry):
        self._registry = registry

    # @intent:responsibility 命令本体マクロ定義を仕様書の読み込み順で生成します。
    # @intent:note デフォルトエントリだけが参照する命令名には空の本体を追加し、未定義マクロの参照を防ぐ。
    def render_instructions(self, specs: Sequence[InstructionSpec], placeholders: Sequence[str] = ()) -> str:
        parts = [BODY_TEMPLATE.format(name=spec.macro_name, body=spec.implementation) for spec in specs]
        parts.extend(BODY_TEMPLATE.format(name=name, body="") for name in placeholders)
        return "".join(parts)

    # @intent:responsibility ディスパッチテーブル（clock関数）を生成します。
    def render_clock(self, table: OpcodeTable) -> str:
        arms = [self._render_arm(entry) for entry in self._sorted_entries(table)]
        return CLOCK_TEMPLATE.format(arms="\n".join(arms))

    # @intent:responsibility 固定幅の16進キーでエントリを並べ替えます。
    # @intent:pre-condition 全キーが同じ幅であること。幅が揃っていれば文字列順は数値順と一致する。
    def _sorted_entries(self, table: OpcodeTable) -> List[OpcodeEntry]:
        entries = list(table)
        for entry in entries:
            if len(entry.key) != KEY_WIDTH:
                raise ValueError(f"Opcode key '{entry.key}' is not {KEY_WIDTH} hex digits wide")
        return sorted(entries, key=lambda e: e.key)

    def _render_arm(self, entry: OpcodeEntry) -> str:
        lines = [
            f"0x{entry.key} => {{",
            f"        set_instruction!(self, {entry.cycles}, {{",
            f"          {self._render_mode_call(entry)};",
            f"          {entry.instruction.lower()}!(self, memory);",
        ]
        if entry.additional_codes:
            lines.append(f"          {entry.additional_codes}")
        lines.extend([
            "        });",
            "      },",
        ])
        return "\n".join(lines)

    # @intent:note ページ境界交差はリゾルバ側で実行時に判定されるため、page_crossは引数として渡さない。
    def _render_mode_call(self, entry: OpcodeEntry) -> str:
        cap = self._registry.by_code(entry.mode)
        if cap is None:
            # build()を通過したテーブルでは起こらない
            raise ValueError(f"Opcode 0x{entry.key} references unsupported addressing mode '{entry.mode}'")
        return f"{cap.code}!(self, memory)"
