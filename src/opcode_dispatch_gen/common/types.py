# src/opcode_dispatch_gen/common/types.py
"""
共通の型定義を提供するモジュール。
パーサ、テーブルビルダ、エミッタで共通して使用される型エイリアスを定義します。
"""
from typing import Tuple

# @intent:data_structure 命令識別子（ファイル名から拡張子を除いたもの。例: "LDA"）。
InstructionName = str

# @intent:data_structure デフォルトオペコード参照表の1行 (アドレッシングモードコード, 命令名, 基本サイクル数)。
ReferenceRow = Tuple[str, str, int]

# オペコードは1バイト
OPCODE_SPACE = 0x100
