"""ircstyle entrypoint. Reads IRC-formatted text and prints HTML, plain text or JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from ircstyle import __version__
from ircstyle.config import OUTPUT_FORMATS, Config, cfg, load_config_with_env
from ircstyle.core.errors import IrcStyleConfigurationError
from ircstyle.formatting import parse_style, render_fragments


def setup_logging(verbose: bool = False) -> None:
    """Configure loguru. Replace default logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "INFO",
        format=(
            "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan> | {message}"
        ),
    )


def reload_config(config_path: Path, overrides: dict[str, Any] | None = None) -> Config:
    """Resolve config (defaults, file, env, overrides) and update global cfg."""
    data = load_config_with_env(config_path, overrides)
    cfg.reload(data)
    return cfg


def read_input(source: str | None) -> str:
    """Read text from a file path, or stdin for None / '-'."""
    if source is None or source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def convert(text: str, output_format: str, config: Config) -> str:
    """Parse ``text`` and render it in ``output_format``."""
    fragments = parse_style(text, placeholder=config.placeholder)
    logger.debug("Parsed {} fragments from {} characters", len(fragments), len(text))

    if output_format == "json":
        return json.dumps([f.to_dict() for f in fragments], ensure_ascii=False)
    if output_format == "text":
        return "".join(f.text for f in fragments)
    return render_fragments(fragments, prefix=config.class_prefix)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ircstyle",
        description="Convert mIRC-style formatted text to HTML",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Input file (default: stdin, also '-')",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("ircstyle.yaml"),
        help="Path to config file (default: ircstyle.yaml)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (overrides config output_format)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entrypoint."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)

    try:
        config = reload_config(
            args.config, {"output_format": args.format} if args.format else None
        )
    except IrcStyleConfigurationError as exc:
        logger.error("Invalid config ({}): {}", exc.code, exc)
        sys.exit(1)
    except yaml.YAMLError:
        sys.exit(1)
    if args.config.exists():
        logger.info("Config loaded from {}", args.config)
    else:
        logger.info("No config file at {}; using defaults", args.config)

    try:
        text = read_input(args.input)
    except OSError as exc:
        logger.error("Cannot read input {}: {}", args.input, exc)
        sys.exit(1)

    result = convert(text, config.output_format, config)
    print(result, end="" if result.endswith("\n") else "\n")


if __name__ == "__main__":
    main()
