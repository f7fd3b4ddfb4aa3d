# src/opcode_dispatch_gen/pipeline.py
"""
生成パイプライン。

ロード → 抽出 → テーブル構築・検証 → テキスト生成 → 書き込み の順に処理します。
全てのエラーは書き込み前に収集され、GenerationFailedとしてまとめて送出されます。
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from opcode_dispatch_gen.arch.mos6502.addressing import AddressingModeRegistry
from opcode_dispatch_gen.arch.mos6502.reference import DEFAULT_OPCODE_REFERENCE
from opcode_dispatch_gen.common.errors import GenerationFailed, GeneratorError, SpecReadError, StructuralError
from opcode_dispatch_gen.common.types import ReferenceRow
from opcode_dispatch_gen.config.loader import ConfigLoader
from opcode_dispatch_gen.config.models import GeneratorConfig
from opcode_dispatch_gen.core.model import InstructionSpec
from opcode_dispatch_gen.core.table import OpcodeTable, OpcodeTableBuilder
from opcode_dispatch_gen.emitter.rust import CodeEmitter
from opcode_dispatch_gen.emitter.writer import OutputWriter
from opcode_dispatch_gen.loader.loader import SpecLoader
from opcode_dispatch_gen.parser.sections import SectionExtractor
from opcode_dispatch_gen.parser.tokenizer import SpecTokenizer

logger = logging.getLogger(__name__)

# @intent:responsibility 1回の生成実行の結果（モデルと2つの出力テキスト）を保持します。
@dataclass(frozen=True)
class GenerationResult:
    specs: List[InstructionSpec]
    table: OpcodeTable
    instructions: str
    clock: str


class Generator:
    """
    仕様ディレクトリから2つのRustソースを生成するパイプライン。
    """
    def __init__(self, config: Optional[GeneratorConfig] = None,
                 registry: Optional[AddressingModeRegistry] = None,
                 reference: Optional[Sequence[ReferenceRow]] = None):
        self._config = config or GeneratorConfig()
        base_registry = registry or AddressingModeRegistry()
        self._registry = base_registry.with_overrides(self._config.modes)
        if reference is None and self._config.reference_file:
            reference = ConfigLoader().load_reference(self._config.reference_file)
        self._reference = reference if reference is not None else DEFAULT_OPCODE_REFERENCE
        self._tokenizer = SpecTokenizer()
        self._extractor = SectionExtractor(self._config.headings)
        self._emitter = CodeEmitter(self._registry)

    # @intent:responsibility モデルを構築・検証し、出力テキストを生成します（ファイルには書き込まない）。
    def generate(self) -> GenerationResult:
        loader = SpecLoader(self._config.spec_dir)
        identifiers = loader.list_identifiers()
        logger.info("Loading %d instruction spec(s) from %s", len(identifiers), loader.spec_dir)

        errors: List[GeneratorError] = []
        specs: List[InstructionSpec] = []
        for identifier in identifiers:
            try:
                blocks = self._tokenizer.tokenize(loader.load_text(identifier))
                specs.append(self._extractor.extract(identifier, blocks))
            except (SpecReadError, StructuralError) as e:
                errors.append(e)

        builder = OpcodeTableBuilder(self._registry)
        builder.seed_defaults(self._reference)
        for spec in specs:
            added = builder.add_instruction(spec)
            logger.debug("%s: %d opcode entr%s", spec.identifier, added, "y" if added == 1 else "ies")

        errors.extend(builder.errors)
        if errors:
            raise GenerationFailed(errors)
        table = builder.build()

        placeholders = table.placeholder_instructions([spec.identifier for spec in specs])
        instructions = self._emitter.render_instructions(specs, placeholders)
        clock = self._emitter.render_clock(table)
        logger.info("Built dispatch table with %d opcode entries", len(table))
        return GenerationResult(specs=specs, table=table, instructions=instructions, clock=clock)

    # @intent:responsibility 生成と書き込みを行います。エラー時は何も書き込みません。
    def run(self) -> GenerationResult:
        result = self.generate()
        writer = OutputWriter(self._config.output.instructions, self._config.output.clock)
        writer.write(result.instructions, result.clock)
        return result
