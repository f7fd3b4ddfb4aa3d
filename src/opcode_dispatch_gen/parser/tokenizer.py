# src/opcode_dispatch_gen/parser/tokenizer.py
"""
仕様書トークナイザ。

markdown-it-py が生成するフラットなトークン列を、見出し・テーブル・テキストの
トップレベルブロック列に変換します。Markdownの一般的な正しさは対象外です。
"""
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union

from markdown_it import MarkdownIt
from markdown_it.token import Token

# @intent:data_structure 見出しブロック（"## Implementation" なら depth=2）。
@dataclass(frozen=True)
class HeadingBlock:
    depth: int
    text: str

# @intent:data_structure GFMテーブルブロック。rowsはヘッダ行を含まない本体行のみ。
@dataclass(frozen=True)
class TableBlock:
    header: Tuple[str, ...] = ()
    rows: Tuple[Tuple[str, ...], ...] = ()

# @intent:data_structure テキストとして扱えるブロック（コード、段落、HTML）。
@dataclass(frozen=True)
class TextBlock:
    kind: str  # "code", "paragraph", "html"
    text: str

# @intent:data_structure 上記以外のブロック（リスト、引用、水平線など）。
@dataclass(frozen=True)
class OtherBlock:
    kind: str

Block = Union[HeadingBlock, TableBlock, TextBlock, OtherBlock]


class SpecTokenizer:
    """
    生テキストをブロック列に変換するトークナイザ。
    """
    def __init__(self):
        self._md = MarkdownIt("commonmark").enable("table")

    def tokenize(self, text: str) -> List[Block]:
        return self._to_blocks(self._md.parse(text))

    def _to_blocks(self, tokens: Sequence[Token]) -> List[Block]:
        blocks: List[Block] = []
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token.level != 0:
                i += 1
                continue

            if token.type == "heading_open":
                inline = tokens[i + 1]
                blocks.append(HeadingBlock(depth=int(token.tag[1:]), text=inline.content.strip()))
                i = self._skip_to_close(tokens, i)
            elif token.type == "table_open":
                end = self._skip_to_close(tokens, i)
                blocks.append(self._build_table(tokens[i:end]))
                i = end
            elif token.type in ("fence", "code_block"):
                blocks.append(TextBlock(kind="code", text=token.content.rstrip("\n")))
                i += 1
            elif token.type == "paragraph_open":
                blocks.append(TextBlock(kind="paragraph", text=tokens[i + 1].content))
                i = self._skip_to_close(tokens, i)
            elif token.type == "html_block":
                blocks.append(TextBlock(kind="html", text=token.content.rstrip("\n")))
                i += 1
            elif token.nesting == 1:
                blocks.append(OtherBlock(kind=token.type[:-len("_open")]))
                i = self._skip_to_close(tokens, i)
            else:
                blocks.append(OtherBlock(kind=token.type))
                i += 1
        return blocks

    # @intent:responsibility 開始トークンに対応するトップレベルの終了トークンの次の位置を返します。
    def _skip_to_close(self, tokens: Sequence[Token], start: int) -> int:
        opening = tokens[start]
        close_type = opening.type[:-len("_open")] + "_close"
        for j in range(start + 1, len(tokens)):
            if tokens[j].type == close_type and tokens[j].level == opening.level:
                return j + 1
        return len(tokens)

    def _build_table(self, tokens: Sequence[Token]) -> TableBlock:
        header: Tuple[str, ...] = ()
        rows: List[Tuple[str, ...]] = []
        in_head = False
        current: List[str] = []
        for token in tokens:
            if token.type == "thead_open":
                in_head = True
            elif token.type == "thead_close":
                in_head = False
            elif token.type == "tr_open":
                current = []
            elif token.type == "inline":
                current.append(token.content.strip())
            elif token.type == "tr_close":
                if in_head:
                    header = tuple(current)
                else:
                    rows.append(tuple(current))
        return TableBlock(header=header, rows=tuple(rows))
