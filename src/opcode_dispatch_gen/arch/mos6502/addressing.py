# src/opcode_dispatch_gen/arch/mos6502/addressing.py
"""
MOS 6502 アドレッシングモードのケイパビリティレジストリ。

仕様書テーブルの表示ラベル（例: "Zero Page,X"）を、生成コード内のリゾルバマクロ名
（例: "zpx"）に対応付けます。未実装のモードは削除せず、無効フラグで保持します。
"""
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Mapping, Optional

from opcode_dispatch_gen.common.errors import ConfigError, UnsupportedModeError

# @intent:data_structure 1つのアドレッシングモードの定義と有効状態。
@dataclass(frozen=True)
class ModeCapability:
    label: str
    code: str
    enabled: bool = True


DEFAULT_CAPABILITIES = (
    ModeCapability("Implied", "imp"),
    ModeCapability("Immediate", "imm"),
    ModeCapability("Zero Page", "zp0"),
    ModeCapability("Zero Page,X", "zpx"),
    ModeCapability("Zero Page,Y", "zpy"),
    ModeCapability("Absolute", "abs"),
    ModeCapability("Absolute,X", "abx"),
    ModeCapability("Absolute,Y", "aby"),
    ModeCapability("Indirect,X", "izx"),
    ModeCapability("Indirect,Y", "izy"),
    # リゾルバ未実装
    ModeCapability("Indirect", "ind", enabled=False),
    ModeCapability("Accumulator", "acc", enabled=False),
    ModeCapability("Relative", "rel", enabled=False),
)


class AddressingModeRegistry:
    """
    表示ラベルをキーとするアドレッシングモードの閉じたレジストリ。
    """
    def __init__(self, capabilities: Iterable[ModeCapability] = DEFAULT_CAPABILITIES):
        self._by_label: Dict[str, ModeCapability] = {}
        self._by_code: Dict[str, ModeCapability] = {}
        for cap in capabilities:
            self._by_label[cap.label] = cap
            self._by_code[cap.code] = cap

    # @intent:responsibility 設定ファイルの有効/無効フラグを適用した新しいレジストリを返します。
    def with_overrides(self, flags: Mapping[str, bool]) -> 'AddressingModeRegistry':
        caps = dict(self._by_label)
        for label, enabled in flags.items():
            if label not in caps:
                raise ConfigError(f"Unknown addressing mode label in config: '{label}'")
            caps[label] = replace(caps[label], enabled=enabled)
        return AddressingModeRegistry(caps.values())

    # @intent:responsibility 行のラベルを解決します。未知または無効なラベルはUnsupportedModeErrorとなります。
    # @intent:pre-condition ラベルはバイト単位で完全一致する必要がある（正規化しない）。
    def resolve(self, label: str, identifier: str, opcode_text: str) -> ModeCapability:
        cap = self._by_label.get(label)
        if cap is None or not cap.enabled:
            raise UnsupportedModeError(identifier, label, opcode_text)
        return cap

    def by_code(self, code: str) -> Optional[ModeCapability]:
        cap = self._by_code.get(code)
        if cap is None or not cap.enabled:
            return None
        return cap

    def is_enabled_code(self, code: str) -> bool:
        return self.by_code(code) is not None

    def enabled(self) -> List[ModeCapability]:
        return [cap for cap in self._by_label.values() if cap.enabled]

    def __contains__(self, label: str) -> bool:
        cap = self._by_label.get(label)
        return cap is not None and cap.enabled
