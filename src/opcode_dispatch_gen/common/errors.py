# src/opcode_dispatch_gen/common/errors.py
"""
生成処理のエラー分類。

構造エラー、未対応アドレッシングモード、オペコード衝突、不正な行は
ビルドフェーズで収集され、出力ファイルが書き込まれる前にまとめて報告されます。
"""
from typing import Iterable, List


# @intent:responsibility このパッケージが送出する全ての例外の基底クラス。
class GeneratorError(Exception):
    pass


# @intent:responsibility 仕様ディレクトリが存在しない場合のエラー。実行全体を即座に中断します。
class SpecDirectoryError(GeneratorError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Spec directory not found: {path}")


# @intent:responsibility 設定ファイルまたは参照表ファイルの内容が不正な場合のエラー。
class ConfigError(GeneratorError):
    pass


# @intent:responsibility 仕様書ファイルを読めない、またはUTF-8として解釈できない場合のエラー。
class SpecReadError(GeneratorError):
    def __init__(self, identifier: str, path: str, reason: str):
        self.identifier = identifier
        self.path = path
        self.reason = reason
        super().__init__(f"{identifier}: cannot read {path}: {reason}")


# @intent:responsibility 出力ファイルを書き込めない場合のエラー。
class OutputWriteError(GeneratorError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write {path}: {reason}")


# @intent:responsibility 必須セクション（Implementation）が欠落している場合のエラー。
class StructuralError(GeneratorError):
    def __init__(self, identifier: str, heading: str, detail: str = "missing section"):
        self.identifier = identifier
        self.heading = heading
        super().__init__(f"{identifier}: {detail} '## {heading}'")


# @intent:responsibility レジストリに存在しない、または無効化されたアドレッシングモードのエラー。
class UnsupportedModeError(GeneratorError):
    def __init__(self, identifier: str, label: str, opcode_text: str):
        self.identifier = identifier
        self.label = label
        self.opcode_text = opcode_text
        super().__init__(
            f"{identifier}: unsupported addressing mode '{label}' for opcode {opcode_text}"
        )


# @intent:responsibility 同じオペコードバイトを2つのソースが宣言した場合のエラー。
class OpcodeConflictError(GeneratorError):
    def __init__(self, opcode: int, first_source: str, second_source: str):
        self.opcode = opcode
        self.first_source = first_source
        self.second_source = second_source
        super().__init__(
            f"opcode 0x{opcode:02x} declared by both {first_source} and {second_source}"
        )


# @intent:responsibility オペコードまたはサイクル欄を解釈できない行のエラー。
class MalformedRowError(GeneratorError):
    def __init__(self, identifier: str, row: Iterable[str], reason: str):
        self.identifier = identifier
        self.row = list(row)
        self.reason = reason
        super().__init__(f"{identifier}: {reason} in row | {' | '.join(self.row)} |")


# @intent:responsibility ビルド・検証フェーズで検出された全エラーをまとめて運ぶ例外。
# @intent:rationale 最初の1件だけでなく、検出された全てのエラーを利用者に提示するため。
class GenerationFailed(GeneratorError):
    def __init__(self, errors: List[GeneratorError]):
        self.errors = list(errors)
        lines = [f"{len(self.errors)} error(s) detected:"]
        lines.extend(f"  - {e}" for e in self.errors)
        super().__init__("\n".join(lines))
