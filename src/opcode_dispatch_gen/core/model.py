# src/opcode_dispatch_gen/core/model.py
"""
Core Layer (内部表現)

仕様書から構築される命令定義、アドレッシングモード行、オペコードエントリを定義します。
テキスト出力の前に、このモデル全体が検証されます。
"""
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from opcode_dispatch_gen.common.errors import MalformedRowError
from opcode_dispatch_gen.common.types import InstructionName

# 列の位置: モード | 構文 | オペコード($HH) | バイト数 | サイクル数
LABEL_COLUMN = 0
OPCODE_COLUMN = 2
CYCLES_COLUMN = 4
MIN_COLUMNS = 5

_RE_OPCODE = re.compile(r"^[0-9a-fA-F]{2}$")
_RE_CYCLES = re.compile(r"^(\d+)\s*(\+?)$")

DEFAULT_SOURCE = "default reference"

# @intent:responsibility アドレッシングモードテーブルの1行を保持し、オペコード・サイクル数を解釈します。
@dataclass(frozen=True)
class AddressingModeRow:
    """
    アドレッシングモードテーブルの1行。
    オペコードは3文字セル（例: "$A9"）の2-3文字目、サイクル数は5列目で、
    末尾の "+" はページ境界交差時の追加サイクルを表します。
    """
    identifier: InstructionName
    cells: Tuple[str, ...]

    # @intent:responsibility 列数が足りない行をMalformedRowErrorとして拒否します。
    def check_shape(self) -> None:
        if len(self.cells) < MIN_COLUMNS:
            raise MalformedRowError(
                self.identifier, self.cells,
                f"expected at least {MIN_COLUMNS} columns, got {len(self.cells)}"
            )

    @property
    def label(self) -> str:
        return self.cells[LABEL_COLUMN]

    @property
    def opcode_text(self) -> str:
        return self.cells[OPCODE_COLUMN][1:3]

    @property
    def cycles_text(self) -> str:
        return self.cells[CYCLES_COLUMN].strip()

    @property
    def opcode(self) -> int:
        text = self.opcode_text
        if not _RE_OPCODE.match(text) or len(self.cells[OPCODE_COLUMN]) != 3:
            raise MalformedRowError(self.identifier, self.cells, f"invalid opcode field '{self.cells[OPCODE_COLUMN]}'")
        return int(text, 16)

    @property
    def cycles(self) -> int:
        match = _RE_CYCLES.match(self.cycles_text)
        if not match:
            raise MalformedRowError(self.identifier, self.cells, f"invalid cycle field '{self.cycles_text}'")
        return int(match.group(1))

    @property
    def page_cross(self) -> bool:
        return self.cycles_text.endswith("+")


# @intent:responsibility 1命令分の仕様書から抽出された内容を保持します。
@dataclass(frozen=True)
class InstructionSpec:
    identifier: InstructionName
    implementation: str
    rows: Optional[Tuple[AddressingModeRow, ...]] = None  # None: 有効なテーブルなし
    additional_codes: str = ""

    @property
    def macro_name(self) -> str:
        return self.identifier.lower()


# @intent:responsibility ディスパッチテーブルの1バイト分のエントリ。
@dataclass(frozen=True)
class OpcodeEntry:
    opcode: int
    mode: str  # アドレッシングモードのリゾルバ名 (例: "abx")
    instruction: InstructionName
    cycles: int
    page_cross: bool = False
    additional_codes: str = ""
    source: str = DEFAULT_SOURCE

    @property
    def is_default(self) -> bool:
        return self.source == DEFAULT_SOURCE

    # @intent:note 固定幅2桁の小文字16進表記。この幅が一定である限り、文字列順と数値順は一致する。
    @property
    def key(self) -> str:
        return f"{self.opcode:02x}"
