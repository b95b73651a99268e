"""
Main application module.

Usage:
    foodie [--buckets N] [--auto-resize] [--log-level LEVEL] [--log-file PATH]
           [--skip-setup] [--no-clear]
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from .core.config import Settings, get_settings
from .core.logging_config import setup_logging
from .shell import ConsoleShell
from .system import FoodDeliverySystem

logger = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foodie",
        description="Foodie Express: menu catalog and delivery order queue.",
    )
    parser.add_argument("--buckets", type=_positive_int, default=None,
                        help="number of hash index buckets (default: 47)")
    parser.add_argument("--auto-resize", action="store_true", default=None,
                        help="grow the hash index when it gets crowded")
    parser.add_argument("--log-level", default=None,
                        help="log level, e.g. DEBUG or INFO (default: ERROR)")
    parser.add_argument("--log-file", default=None,
                        help="also write log records to this file")
    parser.add_argument("--skip-setup", action="store_true",
                        help="skip the initial 'how many items' prompt")
    parser.add_argument("--no-clear", action="store_true",
                        help="do not clear the screen between commands")
    return parser


def describe_errors(error: ValidationError) -> str:
    """Join the invalid settings into one message, e.g. ``log_level: Value error, ...``."""
    return "; ".join(
        f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in error.errors())


def load_settings(args: argparse.Namespace) -> Settings:
    """Apply command line overrides on top of the environment settings."""
    overrides = {}
    if args.buckets is not None:
        overrides["hash_bucket_count"] = args.buckets
    if args.auto_resize:
        overrides["auto_resize"] = True
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()
    if args.log_file is not None:
        overrides["log_file"] = args.log_file
    if args.no_clear:
        overrides["clear_screen"] = False
    # model_copy(update=...) would skip the field validators
    return Settings.model_validate({**get_settings().model_dump(), **overrides})


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point of the application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings(args)
    except ValidationError as e:
        parser.error(describe_errors(e))

    setup_logging(settings.log_level, settings.log_file)
    logger.info("Starting with %d hash buckets (auto resize: %s)",
                settings.hash_bucket_count, settings.auto_resize)

    system = FoodDeliverySystem.from_settings(settings)
    return ConsoleShell(system, settings).run(skip_setup=args.skip_setup)


if __name__ == "__main__":
    sys.exit(main())
