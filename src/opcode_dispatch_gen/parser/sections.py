# src/opcode_dispatch_gen/parser/sections.py
"""
セクション抽出モジュール。

ブロック列から、見出しテキストの完全一致でアドレッシングモードテーブル、
Implementation本体、任意のAdditional Codesを取り出し、InstructionSpecを構築します。
"""
import logging
from typing import Optional, Sequence

from opcode_dispatch_gen.common.errors import StructuralError
from opcode_dispatch_gen.common.types import InstructionName
from opcode_dispatch_gen.config.models import HeadingConfig
from opcode_dispatch_gen.core.model import AddressingModeRow, InstructionSpec
from .tokenizer import Block, HeadingBlock, TableBlock, TextBlock

logger = logging.getLogger(__name__)

SECTION_DEPTH = 2

class SectionExtractor:
    def __init__(self, headings: Optional[HeadingConfig] = None):
        self._headings = headings or HeadingConfig()

    # @intent:responsibility 1命令分のブロック列からInstructionSpecを構築します。
    # @intent:pre-condition Implementationセクションが存在し、直後のブロックがテキストであること。
    def extract(self, identifier: InstructionName, blocks: Sequence[Block]) -> InstructionSpec:
        implementation = self._text_after(blocks, self._headings.implementation)
        if implementation is None:
            if self._find_heading(blocks, self._headings.implementation) is None:
                raise StructuralError(identifier, self._headings.implementation)
            raise StructuralError(identifier, self._headings.implementation, "no text block after")

        rows = None
        table = self._block_after(blocks, self._headings.addressing)
        if isinstance(table, TableBlock):
            rows = tuple(AddressingModeRow(identifier=identifier, cells=cells) for cells in table.rows)
        else:
            logger.warning("%s: no '%s' table, body only", identifier, self._headings.addressing)

        additional = ""
        if self._find_heading(blocks, self._headings.additional_codes) is not None:
            block = self._block_after(blocks, self._headings.additional_codes)
            if isinstance(block, TextBlock):
                additional = block.text
            else:
                logger.warning("%s: '%s' is not followed by a text block, ignored",
                               identifier, self._headings.additional_codes)

        return InstructionSpec(
            identifier=identifier,
            implementation=implementation,
            rows=rows,
            additional_codes=additional,
        )

    def _find_heading(self, blocks: Sequence[Block], text: str) -> Optional[int]:
        for index, block in enumerate(blocks):
            # バイト単位の完全一致（大文字小文字・綴りの正規化は行わない）
            if isinstance(block, HeadingBlock) and block.depth == SECTION_DEPTH and block.text == text:
                return index
        return None

    def _block_after(self, blocks: Sequence[Block], heading: str) -> Optional[Block]:
        index = self._find_heading(blocks, heading)
        if index is None or index + 1 >= len(blocks):
            return None
        return blocks[index + 1]

    def _text_after(self, blocks: Sequence[Block], heading: str) -> Optional[str]:
        block = self._block_after(blocks, heading)
        if isinstance(block, TextBlock):
            return block.text
        return None
