# src/opcode_dispatch_gen/arch/mos6502/reference.py
"""
MOS 6502 デフォルトオペコード参照表。

0x00-0xFFの全256バイトについて (アドレッシングモード, 命令名, 基本サイクル数) を保持します。
命令名が NOP または XXX (未実装のダミー) のバイトは、仕様書の宣言より先に
デフォルトエントリとしてディスパッチテーブルに登録されます。
"""
from typing import List, Sequence

from opcode_dispatch_gen.common.errors import ConfigError
from opcode_dispatch_gen.common.types import OPCODE_SPACE, ReferenceRow

NOP = "NOP"
UNIMPLEMENTED = "XXX"
PLACEHOLDER_NAMES = (NOP, UNIMPLEMENTED)

DEFAULT_OPCODE_REFERENCE: List[ReferenceRow] = [
    ("imp", "BRK", 7),  # 00
    ("izx", "ORA", 6),  # 01
    ("imp", "XXX", 2),  # 02
    ("imp", "XXX", 8),  # 03
    ("imp", "NOP", 3),  # 04
    ("zp0", "ORA", 3),  # 05
    ("zp0", "ASL", 5),  # 06
    ("imp", "XXX", 5),  # 07
    ("imp", "PHP", 3),  # 08
    ("imm", "ORA", 2),  # 09
    ("acc", "ASL", 2),  # 0a
    ("imp", "XXX", 2),  # 0b
    ("imp", "NOP", 4),  # 0c
    ("abs", "ORA", 4),  # 0d
    ("abs", "ASL", 6),  # 0e
    ("imp", "XXX", 6),  # 0f
    ("rel", "BPL", 2),  # 10
    ("izy", "ORA", 5),  # 11
    ("imp", "XXX", 2),  # 12
    ("imp", "XXX", 8),  # 13
    ("imp", "NOP", 4),  # 14
    ("zpx", "ORA", 4),  # 15
    ("zpx", "ASL", 6),  # 16
    ("imp", "XXX", 6),  # 17
    ("imp", "CLC", 2),  # 18
    ("aby", "ORA", 4),  # 19
    ("imp", "NOP", 2),  # 1a
    ("imp", "XXX", 7),  # 1b
    ("abx", "NOP", 4),  # 1c
    ("abx", "ORA", 4),  # 1d
    ("abx", "ASL", 7),  # 1e
    ("imp", "XXX", 7),  # 1f
    ("abs", "JSR", 6),  # 20
    ("izx", "AND", 6),  # 21
    ("imp", "XXX", 2),  # 22
    ("imp", "XXX", 8),  # 23
    ("zp0", "BIT", 3),  # 24
    ("zp0", "AND", 3),  # 25
    ("zp0", "ROL", 5),  # 26
    ("imp", "XXX", 5),  # 27
    ("imp", "PLP", 4),  # 28
    ("imm", "AND", 2),  # 29
    ("acc", "ROL", 2),  # 2a
    ("imp", "XXX", 2),  # 2b
    ("abs", "BIT", 4),  # 2c
    ("abs", "AND", 4),  # 2d
    ("abs", "ROL", 6),  # 2e
    ("imp", "XXX", 6),  # 2f
    ("rel", "BMI", 2),  # 30
    ("izy", "AND", 5),  # 31
    ("imp", "XXX", 2),  # 32
    ("imp", "XXX", 8),  # 33
    ("imp", "NOP", 4),  # 34
    ("zpx", "AND", 4),  # 35
    ("zpx", "ROL", 6),  # 36
    ("imp", "XXX", 6),  # 37
    ("imp", "SEC", 2),  # 38
    ("aby", "AND", 4),  # 39
    ("imp", "NOP", 2),  # 3a
    ("imp", "XXX", 7),  # 3b
    ("abx", "NOP", 4),  # 3c
    ("abx", "AND", 4),  # 3d
    ("abx", "ROL", 7),  # 3e
    ("imp", "XXX", 7),  # 3f
    ("imp", "RTI", 6),  # 40
    ("izx", "EOR", 6),  # 41
    ("imp", "XXX", 2),  # 42
    ("imp", "XXX", 8),  # 43
    ("imp", "NOP", 3),  # 44
    ("zp0", "EOR", 3),  # 45
    ("zp0", "LSR", 5),  # 46
    ("imp", "XXX", 5),  # 47
    ("imp", "PHA", 3),  # 48
    ("imm", "EOR", 2),  # 49
    ("acc", "LSR", 2),  # 4a
    ("imp", "XXX", 2),  # 4b
    ("abs", "JMP", 3),  # 4c
    ("abs", "EOR", 4),  # 4d
    ("abs", "LSR", 6),  # 4e
    ("imp", "XXX", 6),  # 4f
    ("rel", "BVC", 2),  # 50
    ("izy", "EOR", 5),  # 51
    ("imp", "XXX", 2),  # 52
    ("imp", "XXX", 8),  # 53
    ("imp", "NOP", 4),  # 54
    ("zpx", "EOR", 4),  # 55
    ("zpx", "LSR", 6),  # 56
    ("imp", "XXX", 6),  # 57
    ("imp", "CLI", 2),  # 58
    ("aby", "EOR", 4),  # 59
    ("imp", "NOP", 2),  # 5a
    ("imp", "XXX", 7),  # 5b
    ("abx", "NOP", 4),  # 5c
    ("abx", "EOR", 4),  # 5d
    ("abx", "LSR", 7),  # 5e
    ("imp", "XXX", 7),  # 5f
    ("imp", "RTS", 6),  # 60
    ("izx", "ADC", 6),  # 61
    ("imp", "XXX", 2),  # 62
    ("imp", "XXX", 8),  # 63
    ("imp", "NOP", 3),  # 64
    ("zp0", "ADC", 3),  # 65
    ("zp0", "ROR", 5),  # 66
    ("imp", "XXX", 5),  # 67
    ("imp", "PLA", 4),  # 68
    ("imm", "ADC", 2),  # 69
    ("acc", "ROR", 2),  # 6a
    ("imp", "XXX", 2),  # 6b
    ("ind", "JMP", 5),  # 6c
    ("abs", "ADC", 4),  # 6d
    ("abs", "ROR", 6),  # 6e
    ("imp", "XXX", 6),  # 6f
    ("rel", "BVS", 2),  # 70
    ("izy", "ADC", 5),  # 71
    ("imp", "XXX", 2),  # 72
    ("imp", "XXX", 8),  # 73
    ("imp", "NOP", 4),  # 74
    ("zpx", "ADC", 4),  # 75
    ("zpx", "ROR", 6),  # 76
    ("imp", "XXX", 6),  # 77
    ("imp", "SEI", 2),  # 78
    ("aby", "ADC", 4),  # 79
    ("imp", "NOP", 2),  # 7a
    ("imp", "XXX", 7),  # 7b
    ("abx", "NOP", 4),  # 7c
    ("abx", "ADC", 4),  # 7d
    ("abx", "ROR", 7),  # 7e
    ("imp", "XXX", 7),  # 7f
    ("imp", "NOP", 2),  # 80
    ("izx", "STA", 6),  # 81
    ("imp", "NOP", 2),  # 82
    ("imp", "XXX", 6),  # 83
    ("zp0", "STY", 3),  # 84
    ("zp0", "STA", 3),  # 85
    ("zp0", "STX", 3),  # 86
    ("imp", "XXX", 3),  # 87
    ("imp", "DEY", 2),  # 88
    ("imp", "NOP", 2),  # 89
    ("imp", "TXA", 2),  # 8a
    ("imp", "XXX", 2),  # 8b
    ("abs", "STY", 4),  # 8c
    ("abs", "STA", 4),  # 8d
    ("abs", "STX", 4),  # 8e
    ("imp", "XXX", 4),  # 8f
    ("rel", "BCC", 2),  # 90
    ("izy", "STA", 6),  # 91
    ("imp", "XXX", 2),  # 92
    ("imp", "XXX", 6),  # 93
    ("zpx", "STY", 4),  # 94
    ("zpx", "STA", 4),  # 95
    ("zpy", "STX", 4),  # 96
    ("imp", "XXX", 4),  # 97
    ("imp", "TYA", 2),  # 98
    ("aby", "STA", 5),  # 99
    ("imp", "TXS", 2),  # 9a
    ("imp", "XXX", 5),  # 9b
    ("imp", "NOP", 5),  # 9c
    ("abx", "STA", 5),  # 9d
    ("imp", "XXX", 5),  # 9e
    ("imp", "XXX", 5),  # 9f
    ("imm", "LDY", 2),  # a0
    ("izx", "LDA", 6),  # a1
    ("imm", "LDX", 2),  # a2
    ("imp", "XXX", 6),  # a3
    ("zp0", "LDY", 3),  # a4
    ("zp0", "LDA", 3),  # a5
    ("zp0", "LDX", 3),  # a6
    ("imp", "XXX", 3),  # a7
    ("imp", "TAY", 2),  # a8
    ("imm", "LDA", 2),  # a9
    ("imp", "TAX", 2),  # aa
    ("imp", "XXX", 2),  # ab
    ("abs", "LDY", 4),  # ac
    ("abs", "LDA", 4),  # ad
    ("abs", "LDX", 4),  # ae
    ("imp", "XXX", 4),  # af
    ("rel", "BCS", 2),  # b0
    ("izy", "LDA", 5),  # b1
    ("imp", "XXX", 2),  # b2
    ("imp", "XXX", 5),  # b3
    ("zpx", "LDY", 4),  # b4
    ("zpx", "LDA", 4),  # b5
    ("zpy", "LDX", 4),  # b6
    ("imp", "XXX", 4),  # b7
    ("imp", "CLV", 2),  # b8
    ("aby", "LDA", 4),  # b9
    ("imp", "TSX", 2),  # ba
    ("imp", "XXX", 4),  # bb
    ("abx", "LDY", 4),  # bc
    ("abx", "LDA", 4),  # bd
    ("aby", "LDX", 4),  # be
    ("imp", "XXX", 4),  # bf
    ("imm", "CPY", 2),  # c0
    ("izx", "CMP", 6),  # c1
    ("imp", "NOP", 2),  # c2
    ("imp", "XXX", 8),  # c3
    ("zp0", "CPY", 3),  # c4
    ("zp0", "CMP", 3),  # c5
    ("zp0", "DEC", 5),  # c6
    ("imp", "XXX", 5),  # c7
    ("imp", "INY", 2),  # c8
    ("imm", "CMP", 2),  # c9
    ("imp", "DEX", 2),  # ca
    ("imp", "XXX", 2),  # cb
    ("abs", "CPY", 4),  # cc
    ("abs", "CMP", 4),  # cd
    ("abs", "DEC", 6),  # ce
    ("imp", "XXX", 6),  # cf
    ("rel", "BNE", 2),  # d0
    ("izy", "CMP", 5),  # d1
    ("imp", "XXX", 2),  # d2
    ("imp", "XXX", 8),  # d3
    ("imp", "NOP", 4),  # d4
    ("zpx", "CMP", 4),  # d5
    ("zpx", "DEC", 6),  # d6
    ("imp", "XXX", 6),  # d7
    ("imp", "CLD", 2),  # d8
    ("aby", "CMP", 4),  # d9
    ("imp", "NOP", 2),  # da
    ("imp", "XXX", 7),  # db
    ("abx", "NOP", 4),  # dc
    ("abx", "CMP", 4),  # dd
    ("abx", "DEC", 7),  # de
    ("imp", "XXX", 7),  # df
    ("imm", "CPX", 2),  # e0
    ("izx", "SBC", 6),  # e1
    ("imp", "NOP", 2),  # e2
    ("imp", "XXX", 8),  # e3
    ("zp0", "CPX", 3),  # e4
    ("zp0", "SBC", 3),  # e5
    ("zp0", "INC", 5),  # e6
    ("imp", "XXX", 5),  # e7
    ("imp", "INX", 2),  # e8
    ("imm", "SBC", 2),  # e9
    ("imp", "NOP", 2),  # ea
    ("imp", "SBC", 2),  # eb
    ("abs", "CPX", 4),  # ec
    ("abs", "SBC", 4),  # ed
    ("abs", "INC", 6),  # ee
    ("imp", "XXX", 6),  # ef
    ("rel", "BEQ", 2),  # f0
    ("izy", "SBC", 5),  # f1
    ("imp", "XXX", 2),  # f2
    ("imp", "XXX", 8),  # f3
    ("imp", "NOP", 4),  # f4
    ("zpx", "SBC", 4),  # f5
    ("zpx", "INC", 6),  # f6
    ("imp", "XXX", 6),  # f7
    ("imp", "SED", 2),  # f8
    ("aby", "SBC", 4),  # f9
    ("imp", "NOP", 2),  # fa
    ("imp", "XXX", 7),  # fb
    ("abx", "NOP", 4),  # fc
    ("abx", "SBC", 4),  # fd
    ("abx", "INC", 7),  # fe
    ("imp", "XXX", 7),  # ff
]

# @intent:responsibility 参照表の行がプレースホルダ（NOP/未実装）かどうかを判定します。
def is_placeholder(name: str) -> bool:
    return name.upper() in PLACEHOLDER_NAMES

# @intent:responsibility 参照表が正確に256行であることを検証します。
def validate_reference(rows: Sequence[ReferenceRow]) -> None:
    if len(rows) != OPCODE_SPACE:
        raise ConfigError(f"Opcode reference must have {OPCODE_SPACE} rows, got {len(rows)}")
