# src/opcode_dispatch_gen/core/table.py
"""
Core Layer (オペコードテーブル)

全命令の宣言を0x00-0xFFの256スロットに集約するビルダと、検証済みの不変テーブルを提供します。
同一バイトへの重複宣言は上書きせず、衝突として報告します。
"""
import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from opcode_dispatch_gen.arch.mos6502.addressing import AddressingModeRegistry
from opcode_dispatch_gen.arch.mos6502.reference import (
    DEFAULT_OPCODE_REFERENCE, is_placeholder, validate_reference,
)
from opcode_dispatch_gen.common.errors import (
    GenerationFailed, GeneratorError, MalformedRowError, OpcodeConflictError, UnsupportedModeError,
)
from opcode_dispatch_gen.common.types import OPCODE_SPACE, ReferenceRow
from .model import DEFAULT_SOURCE, InstructionSpec, OpcodeEntry

logger = logging.getLogger(__name__)

# @intent:responsibility 検証済みのオペコードエントリをバイト値の昇順で保持する不変テーブル。
class OpcodeTable:
    def __init__(self, entries: Sequence[OpcodeEntry]):
        self._entries: Tuple[OpcodeEntry, ...] = tuple(sorted(entries, key=lambda e: e.opcode))

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[OpcodeEntry]:
        return iter(self._entries)

    # @intent:responsibility デフォルトエントリが参照する命令名（NOP/XXX）のうち、
    #                       仕様書で定義されていないものを返します。
    def placeholder_instructions(self, defined: Sequence[str]) -> List[str]:
        defined_lower = {name.lower() for name in defined}
        names = []
        for entry in self._entries:
            lower = entry.instruction.lower()
            if entry.is_default and lower not in defined_lower and lower not in names:
                names.append(lower)
        return sorted(names)


class OpcodeTableBuilder:
    """
    256スロットのオペコード表を構築するビルダ。
    エラーは行ごとに収集し、build()で一括して報告します。
    """
    def __init__(self, registry: AddressingModeRegistry):
        self._registry = registry
        self._slots: List[Optional[OpcodeEntry]] = [None] * OPCODE_SPACE
        self._errors: List[GeneratorError] = []

    @property
    def errors(self) -> List[GeneratorError]:
        return list(self._errors)

    # @intent:responsibility 参照表のNOP/未実装行をデフォルトエントリとして登録します。
    def seed_defaults(self, reference: Sequence[ReferenceRow] = DEFAULT_OPCODE_REFERENCE) -> int:
        validate_reference(reference)
        seeded = 0
        for opcode, (mode, name, cycles) in enumerate(reference):
            if not is_placeholder(name):
                continue
            if not self._registry.is_enabled_code(mode):
                self._errors.append(UnsupportedModeError(DEFAULT_SOURCE, mode, f"{opcode:02X}"))
                continue
            self._slots[opcode] = OpcodeEntry(opcode=opcode, mode=mode, instruction=name, cycles=cycles)
            seeded += 1
        logger.debug("Seeded %d default opcode entries", seeded)
        return seeded

    # @intent:responsibility 1命令分のテーブル行をエントリとして登録します。
    # @intent:return 登録に成功したエントリ数。テーブルを持たない命令は0。
    def add_instruction(self, spec: InstructionSpec) -> int:
        if spec.rows is None:
            return 0

        added = 0
        for row in spec.rows:
            try:
                row.check_shape()
                cap = self._registry.resolve(row.label, spec.identifier, row.opcode_text)
                self.insert(OpcodeEntry(
                    opcode=row.opcode,
                    mode=cap.code,
                    instruction=spec.identifier,
                    cycles=row.cycles,
                    page_cross=row.page_cross,
                    additional_codes=spec.additional_codes,
                    source=f"{spec.identifier} ({row.label})",
                ))
                added += 1
            except (MalformedRowError, UnsupportedModeError, OpcodeConflictError) as e:
                self._errors.append(e)
        return added

    # @intent:responsibility エントリをスロットに登録します。
    # @intent:pre-condition 同一バイトに仕様書由来のエントリが未登録であること（デフォルトは上書き可）。
    def insert(self, entry: OpcodeEntry) -> None:
        existing = self._slots[entry.opcode]
        if existing is not None and not existing.is_default:
            # 先着のエントリを残し、以降の衝突も同じ相手に対して報告する
            raise OpcodeConflictError(entry.opcode, existing.source, entry.source)
        self._slots[entry.opcode] = entry

    # @intent:responsibility 収集したエラーがなければ不変テーブルを返し、あればGenerationFailedを送出します。
    def build(self) -> OpcodeTable:
        if self._errors:
            raise GenerationFailed(self._errors)
        return OpcodeTable([entry for entry in self._slots if entry is not None])
