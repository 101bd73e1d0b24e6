"""Command-line interface for the Haven front end."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from haven.diagnostics import Diagnostic, ErrorLevel, print_reports

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_LEX_ERROR = 64
EXIT_NO_INPUT = 66
EXIT_PARSE_ERROR = 69

CONFIG_NAME = "haven.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    error_level: ErrorLevel
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="haven",
        description="Haven's interpreter",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=None,
        help="Dump tokens and syntax tree to stderr",
    )
    p.add_argument(
        "--error-level",
        choices=[level.value for level in ErrorLevel],
        default=None,
        help="Diagnostic verbosity (default: normal)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    return p


def parse_error_level(value: str) -> ErrorLevel:
    """Map a level name to ErrorLevel, case-insensitively."""
    try:
        return ErrorLevel(value.lower())
    except ValueError:
        choices = ", ".join(level.value for level in ErrorLevel)
        raise argparse.ArgumentTypeError(
            f"invalid error level {value!r} (expected one of: {choices})"
        ) from None


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from None

    error_level = ErrorLevel.NORMAL
    cfg_level = config.get("error_level")
    if isinstance(cfg_level, str):
        error_level = parse_error_level(cfg_level)
    if args.error_level is not None:
        error_level = parse_error_level(args.error_level)

    debug = False
    cfg_debug = config.get("debug")
    if isinstance(cfg_debug, bool):
        debug = cfg_debug
    if args.debug is not None:
        debug = args.debug

    return CliOptions(input_file=input_file, error_level=error_level, debug=debug)


def run_source(
    source: str,
    filename: str,
    options: CliOptions,
    reports: list[Diagnostic],
) -> int:
    """Lex and parse one source text, appending diagnostics to *reports*.

    Returns the exit code for the pass. Nothing is parsed once the lexer
    has reported an error.
    """
    from haven.debug import dump_ast, dump_tokens
    from haven.lexer import Lexer
    from haven.parser import Parser

    lexer = Lexer(source, filename, reports)
    tokens = lexer.tokenize()
    if options.debug:
        dump_tokens(tokens, file=sys.stderr)
    if lexer.had_error:
        return EXIT_LEX_ERROR

    parser = Parser(tokens, reports)
    node = parser.parse()
    if node is None or parser.had_error:
        return EXIT_PARSE_ERROR
    if options.debug:
        dump_ast(node, file=sys.stderr)

    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the exit code. Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        source = options.input_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return EXIT_NO_INPUT

    reports: list[Diagnostic] = []
    code = run_source(source, str(options.input_file), options, reports)
    if reports:
        print_reports(reports, options.error_level, source, file=sys.stderr)
    return code
