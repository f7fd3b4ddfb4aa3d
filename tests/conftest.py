# tests/conftest.py
"""
テスト共通のフィクスチャと仕様書サンプル。
"""
import pytest

LDA_SPEC = """# LDA - Load Accumulator

## Addresing Modes

| Addressing Mode | Assembly Language Form | Opcode | No. Bytes | No. Cycles |
|-----------------|------------------------|--------|-----------|------------|
| Immediate       | LDA #$44               | $A9    | 2         | 2          |
| Zero Page       | LDA $44                | $A5    | 2         | 3          |
| Absolute,X      | LDA $4400,X            | $BD    | 3         | 4+         |

## Implementation

```rust
$self.a = $memory.read($self.absolute_address, false);
```
"""

INC_SPEC = """# INC - Increment Memory

## Addresing Modes

| Addressing Mode | Assembly Language Form | Opcode | No. Bytes | No. Cycles |
|-----------------|------------------------|--------|-----------|------------|
| Absolute        | INC $4400              | $EE    | 3         | 6          |
| Absolute,X      | INC $4400,X            | $FE    | 3         | 7          |

## Implementation

```rust
let value = $memory.read($self.absolute_address, false).wrapping_add(1);
$memory.write($self.absolute_address, value);
```

## Additional Codes

```rust
$self.steps += 1;
```
"""

CLC_SPEC = """# CLC - Clear Carry Flag

## Implementation

```rust
$self.p &= !0x01;
```
"""

def table_spec(name: str, rows, implementation: str = "// body") -> str:
    lines = [
        f"# {name}",
        "",
        "## Addresing Modes",
        "",
        "| Addressing Mode | Assembly Language Form | Opcode | No. Bytes | No. Cycles |",
        "|---|---|---|---|---|",
    ]
    for label, opcode, cycles in rows:
        lines.append(f"| {label} | {name} | ${opcode} | 1 | {cycles} |")
    lines.extend(["", "## Implementation", "", "```rust", implementation, "```", ""])
    return "\n".join(lines)

@pytest.fixture
def spec_dir(tmp_path):
    """
    仕様書ディレクトリを作成し、{識別子: 本文} を書き込む関数を返す。
    """
    directory = tmp_path / "documentations"
    directory.mkdir()

    def write(specs):
        for identifier, text in specs.items():
            (directory / f"{identifier}.md").write_text(text, encoding="utf-8")
        return directory

    return write


def entry_at(table, opcode):
    return next((entry for entry in table if entry.opcode == opcode), None)


def entries_of(table, instruction):
    return [entry for entry in table if entry.instruction == instruction]
