from dataclasses import dataclass, field
from typing import Dict, Optional

# 仕様書コーパスの見出し綴り（"Addresing" は原文どおり）
DEFAULT_ADDRESSING_HEADING = "Addresing Modes"

@dataclass
class HeadingConfig:
    addressing: str = DEFAULT_ADDRESSING_HEADING
    implementation: str = "Implementation"
    additional_codes: str = "Additional Codes"

@dataclass
class OutputConfig:
    instructions: str = "src/cpu/instructions.rs"
    clock: str = "src/cpu/clock.rs"

@dataclass
class GeneratorConfig:
    spec_dir: str = "documentations"
    headings: HeadingConfig = field(default_factory=HeadingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    reference_file: Optional[str] = None  # None: 組み込みの6502参照表を使用
    modes: Dict[str, bool] = field(default_factory=dict)  # ラベル -> 有効/無効の上書き
