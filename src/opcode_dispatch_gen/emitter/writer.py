# src/opcode_dispatch_gen/emitter/writer.py
"""
生成結果を固定の出力先に書き込むライター。
"""
import logging
import os
from typing import List, Tuple

from opcode_dispatch_gen.common.errors import OutputWriteError

logger = logging.getLogger(__name__)

TEMP_SUFFIX = ".tmp"

class OutputWriter:
    def __init__(self, instructions_path: str, clock_path: str):
        self.instructions_path = instructions_path
        self.clock_path = clock_path

    # @intent:responsibility 2つの生成物を書き込みます。既存の内容は常に上書きされます。
    # @intent:pre-condition モデルの検証が完了していること（部分的な出力を残さないため）。
    # @intent:note 両方を一時ファイルに書き終えてから置き換える。どちらかの書き込みに失敗した場合、既存の出力は変更されない。
    def write(self, instructions: str, clock: str) -> None:
        staged: List[Tuple[str, str]] = []
        try:
            for path, text in ((self.instructions_path, instructions), (self.clock_path, clock)):
                staged.append((self._stage(path, text), path))
        except OutputWriteError:
            self._discard(staged)
            raise

        for temp_path, path in staged:
            try:
                os.replace(temp_path, path)
            except OSError as e:
                self._discard(staged)
                raise OutputWriteError(path, e.strerror or str(e)) from e
            logger.info("Wrote %s (%d bytes)", path, os.path.getsize(path))

    def _stage(self, path: str, text: str) -> str:
        if os.path.isdir(path):
            raise OutputWriteError(path, "destination is a directory")
        temp_path = path + TEMP_SUFFIX
        try:
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(temp_path, 'w', encoding="utf-8", newline="\n") as f:
                f.write(text)
        except OSError as e:
            if os.path.isfile(temp_path):
                os.remove(temp_path)
            raise OutputWriteError(path, e.strerror or str(e)) from e
        return temp_path

    def _discard(self, staged: List[Tuple[str, str]]) -> None:
        for temp_path, _ in staged:
            if os.path.exists(temp_path):
                os.remove(temp_path)
