# src/opcode_dispatch_gen/config/loader.py
"""
YAML設定ファイルとデフォルトオペコード参照表のローダー。
"""
import os
from typing import Any, Dict, List

import yaml

from opcode_dispatch_gen.common.errors import ConfigError
from opcode_dispatch_gen.common.types import OPCODE_SPACE, ReferenceRow
from .models import GeneratorConfig, HeadingConfig, OutputConfig

class ConfigLoader:
    def load_from_file(self, path: str) -> GeneratorConfig:
        try:
            with open(path, 'r', encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        config = self._parse_config(data or {})
        # @intent:rationale 相対パスは設定ファイルのあるディレクトリを基準に解決する。
        base_dir = os.path.dirname(os.path.abspath(path))
        return self._resolve_paths(config, base_dir)

    def _parse_config(self, data: Dict[str, Any]) -> GeneratorConfig:
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping")

        headings_data = data.get("headings", {}) or {}
        headings = HeadingConfig(
            addressing=headings_data.get("addressing", HeadingConfig.addressing),
            implementation=headings_data.get("implementation", HeadingConfig.implementation),
            additional_codes=headings_data.get("additional_codes", HeadingConfig.additional_codes),
        )

        output_data = data.get("output", {}) or {}
        output = OutputConfig(
            instructions=output_data.get("instructions", OutputConfig.instructions),
            clock=output_data.get("clock", OutputConfig.clock),
        )

        modes = {}
        for label, enabled in (data.get("modes", {}) or {}).items():
            if not isinstance(enabled, bool):
                raise ConfigError(f"Mode flag for '{label}' must be true or false, got {enabled!r}")
            modes[str(label)] = enabled

        return GeneratorConfig(
            spec_dir=data.get("spec_dir", GeneratorConfig.spec_dir),
            headings=headings,
            output=output,
            reference_file=data.get("reference_file"),
            modes=modes,
        )

    def _resolve_paths(self, config: GeneratorConfig, base_dir: str) -> GeneratorConfig:
        def resolve(p: str) -> str:
            return p if os.path.isabs(p) else os.path.join(base_dir, p)

        config.spec_dir = resolve(config.spec_dir)
        config.output.instructions = resolve(config.output.instructions)
        config.output.clock = resolve(config.output.clock)
        if config.reference_file:
            config.reference_file = resolve(config.reference_file)
        return config

    # @intent:responsibility 外部YAMLで与えられた256行の参照表を読み込みます。
    def load_reference(self, path: str) -> List[ReferenceRow]:
        try:
            with open(path, 'r', encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read reference file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, list) or len(data) != OPCODE_SPACE:
            raise ConfigError(f"Reference file {path} must list exactly {OPCODE_SPACE} entries")

        rows: List[ReferenceRow] = []
        for index, item in enumerate(data):
            if not isinstance(item, dict) or "name" not in item or "cycles" not in item:
                raise ConfigError(f"Reference entry {index:#04x} needs 'name' and 'cycles'")
            rows.append((
                str(item.get("mode", "imp")).lower(),
                str(item["name"]).upper(),
                self._parse_int(item["cycles"]),
            ))
        return rows

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                if value.startswith("0x"):
                    return int(value, 16)
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"Invalid integer format: {value}")
