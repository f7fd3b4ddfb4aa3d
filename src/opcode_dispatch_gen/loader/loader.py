# src/opcode_dispatch_gen/loader/loader.py
"""
仕様書ローダーモジュール。
仕様ディレクトリから命令識別子を列挙し、各Markdown文書の生テキストを読み込みます。
"""
import logging
import os
from typing import List

from opcode_dispatch_gen.common.errors import SpecDirectoryError, SpecReadError
from opcode_dispatch_gen.common.types import InstructionName

logger = logging.getLogger(__name__)

SPEC_SUFFIX = ".md"

class SpecLoader:
    """
    `<IDENTIFIER>.md` 形式の仕様書を1命令1ファイルで保持するディレクトリを扱うローダー。
    """
    def __init__(self, spec_dir: str):
        self._spec_dir = spec_dir

    @property
    def spec_dir(self) -> str:
        return self._spec_dir

    # @intent:responsibility 命令識別子をファイル名の辞書順で返します。
    # @intent:note 並び順は命令本体の出力順にのみ影響し、ディスパッチテーブルは別途ソートされる。
    def list_identifiers(self) -> List[InstructionName]:
        if not os.path.isdir(self._spec_dir):
            raise SpecDirectoryError(self._spec_dir)

        names = sorted(
            entry for entry in os.listdir(self._spec_dir)
            if entry.endswith(SPEC_SUFFIX)
            and os.path.isfile(os.path.join(self._spec_dir, entry))
        )
        identifiers = [name[:-len(SPEC_SUFFIX)] for name in names]
        logger.debug("Found %d spec document(s) in %s", len(identifiers), self._spec_dir)
        return identifiers

    def path_for(self, identifier: InstructionName) -> str:
        return os.path.join(self._spec_dir, identifier + SPEC_SUFFIX)

    # @intent:responsibility 1命令分の仕様書テキストを読み込みます。
    def load_text(self, identifier: InstructionName) -> str:
        path = self.path_for(identifier)
        try:
            with open(path, 'r', encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise SpecReadError(identifier, path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e
        except OSError as e:
            raise SpecReadError(identifier, path, e.strerror or str(e)) from e
