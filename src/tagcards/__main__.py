from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from tagcards.common.logging_config import setup_logging
from tagcards.config import DEFAULT_CONFIG_PATH, load_config
from tagcards.errors import ConfigError, SourceReadError
from tagcards.models import Languages, ParseResult
from tagcards.parser import parse_file
from tagcards.writer import write_result

logger = logging.getLogger(__name__)


def run_from_config(
    config_path: Optional[Path] = None,
    input_file: Optional[Path] = None,
    output_file: Optional[Path] = None,
    log_level: str = "INFO",
) -> ParseResult:
    """Convert the configured flashcard source to a JSON document.

    If config_path is None, defaults to ./config.yaml in the current working
    directory. The file may be absent when input_file is given.

    Args:
        config_path: Path to the configuration file
        input_file: Overrides tagcards.input_file
        output_file: Overrides tagcards.output_file
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Raises:
        SystemExit: On invalid configuration or an unreadable source file.
    """
    setup_logging(log_level)

    path = config_path or Path(DEFAULT_CONFIG_PATH)
    try:
        cfg = load_config(
            path,
            overrides={"input_file": input_file, "output_file": output_file},
            required=input_file is None,
        )
    except ConfigError as e:
        raise SystemExit(str(e))

    logger.info("Parsing source", extra={"file": str(cfg.input_file), "default_separator": cfg.default_separator})

    languages = Languages(original=cfg.languages.original, translate=cfg.languages.translate)
    try:
        result = parse_file(cfg.input_file, cfg.default_separator, languages)
    except SourceReadError as e:
        logger.error("Cannot read source", extra={"file": str(e.path), "reason": e.reason})
        raise SystemExit(str(e))

    try:
        out_path = write_result(result, cfg.output_file)
    except OSError as e:
        logger.error("Cannot write result", extra={"file": str(cfg.output_file), "reason": e.strerror or str(e)})
        raise SystemExit(f"Cannot write file {cfg.output_file}: {e.strerror or e}")

    logger.info(
        f"Saved: {out_path}",
        extra={"fields": len(result.fields), "content": result.content_count(), "errors": len(result.errors)},
    )
    if result.errors:
        logger.warning(f"{len(result.errors)} malformed line(s) excluded from output", extra={"file": str(cfg.input_file)})

    return result


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Convert a tagged flashcard text file to JSON")
    parser.add_argument(
        "--config",
        required=False,
        default=DEFAULT_CONFIG_PATH,
        help="Path to YAML config (defaults to ./config.yaml)",
    )
    parser.add_argument("--input", required=False, default=None, help="Source file (overrides tagcards.input_file)")
    parser.add_argument("--output", required=False, default=None, help="JSON output (overrides tagcards.output_file)")
    parser.add_argument(
        "--log-level",
        required=False,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    run_from_config(
        config_path=Path(args.config),
        input_file=Path(args.input) if args.input else None,
        output_file=Path(args.output) if args.output else None,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
