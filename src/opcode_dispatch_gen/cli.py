# src/opcode_dispatch_gen/cli.py
"""
コマンドラインのエントリポイント。
設定を読み込み、ロギングを初期化し、生成パイプラインを実行します。
"""
import argparse
import logging
import sys
from typing import List, Optional

from opcode_dispatch_gen.common.errors import ConfigError, GenerationFailed, GeneratorError
from opcode_dispatch_gen.config.loader import ConfigLoader
from opcode_dispatch_gen.config.models import GeneratorConfig
from opcode_dispatch_gen.pipeline import Generator

EXIT_OK = 0
EXIT_GENERATION_FAILED = 1
EXIT_CONFIG_ERROR = 2

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="opcode-dispatch-gen",
        description="Generate instruction macros and the opcode dispatch table from Markdown specs.",
    )
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--spec-dir", help="Directory of <INSTRUCTION>.md files")
    parser.add_argument("--instructions-out", help="Output path for instruction macros")
    parser.add_argument("--clock-out", help="Output path for the dispatch table")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase verbosity (-v for debug)")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser

# @intent:responsibility 引数に応じてルートロガーを設定します。
def setup_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose == 0:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", force=True)

def load_config(args: argparse.Namespace) -> GeneratorConfig:
    config = ConfigLoader().load_from_file(args.config) if args.config else GeneratorConfig()
    if args.spec_dir:
        config.spec_dir = args.spec_dir
    if args.instructions_out:
        config.output.instructions = args.instructions_out
    if args.clock_out:
        config.output.clock = args.clock_out
    return config

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.quiet)
    logger = logging.getLogger("opcode_dispatch_gen")

    try:
        config = load_config(args)
        generator = Generator(config)
    except ConfigError as e:
        logger.error("%s", e)
        return EXIT_CONFIG_ERROR

    try:
        generator.run()
    except GenerationFailed as e:
        for error in e.errors:
            logger.error("%s", error)
        logger.error("Generation failed with %d error(s); no files written", len(e.errors))
        return EXIT_GENERATION_FAILED
    except GeneratorError as e:
        logger.error("%s", e)
        return EXIT_GENERATION_FAILED
    except OSError as e:
        logger.error("I/O error: %s", e)
        return EXIT_GENERATION_FAILED
    return EXIT_OK

if __name__ == '__main__':
    sys.exit(main())
