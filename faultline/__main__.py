"""
CLI entrypoint for checking exception data and trying out classifications.

Commands:
- check:    load and validate an exception data file, print its categories
- classify: build an exception from a class name and message, classify it
            against an in-memory counter and print the recorded values

Usage:
    python -m faultline --taxonomy configs/exception_data.yaml check
    python -m faultline classify PermissionError --message "user invalid details"
"""

import argparse
import builtins
import logging
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

from faultline.application import ErrorObserver
from faultline.domain import ErrorOrigin, Taxonomy, TaxonomyConfigError
from faultline.infrastructure.config import load_error_handling_config, load_taxonomy_config
from faultline.infrastructure.metrics import InMemoryErrorCounter
from faultline.infrastructure.observability import configure_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="faultline", description="Exception categorisation tools")
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to error_handling.yaml (default: configs/error_handling.yaml if present)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env, ignored if missing)",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level (default: log_level from config)",
    )
    p.add_argument(
        "--taxonomy",
        type=str,
        default=None,
        help="Exception data file (default: taxonomy_file from config, else the packaged data)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("check", help="Validate exception data and list its categories")

    c = sub.add_parser("classify", help="Classify a synthetic exception")
    c.add_argument("exception_name", help="Exception class name, e.g. ValueError or JsonGenerationException")
    c.add_argument("--message", type=str, default=None, help="Exception message")
    c.add_argument(
        "--origin",
        type=str,
        default=ErrorOrigin.UNRECOGNISED.name,
        choices=[o.name for o in ErrorOrigin],
        help="Call site the exception is attributed to",
    )
    c.add_argument("--service", type=str, default=None, help="Service path, if any")
    return p.parse_args(argv)


def _make_exception(name: str, message: str | None) -> BaseException:
    """Instantiate a builtin exception by name, or a synthetic class carrying that name."""
    args = () if message is None else (message,)
    cls = getattr(builtins, name, None)
    if isinstance(cls, type) and issubclass(cls, BaseException):
        try:
            return cls(*args)
        except TypeError:
            # e.g. UnicodeDecodeError needs five positional arguments
            logger.debug("Cannot build builtin %s from a message, using a synthetic class", name)
    return type(name, (Exception,), {})(*args)


def _print_taxonomy(taxonomy: Taxonomy) -> None:
    for i, category in enumerate(taxonomy.categories, 1):
        outlines = sum(len(t.exceptions) for t in category.types)
        print(
            f"{i}. {category.name}: {len(category.keywords)} keywords, "
            f"{len(category.types)} types, {outlines} exception outlines"
        )


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=False)

    cfg = load_error_handling_config(Path(args.config) if args.config else None)
    configure_logging(console_level=getattr(logging, args.console_level or cfg.log_level))

    taxonomy_file = Path(args.taxonomy) if args.taxonomy else cfg.taxonomy_file

    if args.command == "check":
        try:
            taxonomy = load_taxonomy_config(taxonomy_file)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"Invalid exception data: {e}", file=sys.stderr)
            return 1
        _print_taxonomy(taxonomy)
        return 0

    counter = InMemoryErrorCounter(name=cfg.metric_name)
    observer = ErrorObserver(
        counter,
        taxonomy_loader=lambda: load_taxonomy_config(taxonomy_file),
        depth_limit=cfg.depth_limit,
        categorisation_enabled=cfg.categorisation_enabled,
    )
    exception = _make_exception(args.exception_name, args.message)
    try:
        obs = observer.classify(ErrorOrigin[args.origin], exception, args.service)
    except TaxonomyConfigError as e:
        print(f"Invalid exception data: {e}", file=sys.stderr)
        return 1

    print(f"label:    {obs.label}")
    print(f"category: {obs.category}")
    print(f"source:   {obs.source}")
    print(f"service:  {obs.service}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
