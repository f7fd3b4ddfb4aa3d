# src/opcode_dispatch_gen/__init__.py
"""
Markdown形式の命令仕様書から、命令本体マクロとオペコードディスパッチテーブルを生成するパッケージ。
"""
from .common.errors import (
    GeneratorError, SpecDirectoryError, SpecReadError, OutputWriteError, ConfigError, StructuralError,
    UnsupportedModeError, OpcodeConflictError, MalformedRowError, GenerationFailed,
)
from .config.models import GeneratorConfig, HeadingConfig, OutputConfig
from .pipeline import Generator, GenerationResult

__version__ = "0.1.0"
