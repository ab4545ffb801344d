"""CLI configuration: frozen dataclass loaded from env vars, overridden by CLI args."""

import argparse
import os
from dataclasses import dataclass

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    script_path: str = ""
    log_level: str = "WARNING"
    dry_run: bool = False


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="mini-log",
        description="Replay a YAML session script into a collector and flush it.",
    )
    parser.add_argument(
        "script",
        help="Path to a YAML session script",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Level for diagnostic logging on stderr (default: WARNING)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Print per-kind entry counts instead of flushing",
    )
    return parser


def load_config(argv=None) -> Config:
    """Build Config from environment variables, then override with CLI args.

    Pass argv for testability; when None, argparse reads sys.argv.
    """
    env_log_level = os.environ.get("MINI_LOG_LEVEL", Config.log_level).upper()
    env_dry_run = _parse_bool(os.environ.get("MINI_LOG_DRY_RUN", "false"))

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level is None and env_log_level not in LOG_LEVELS:
        parser.error(f"MINI_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{env_log_level}'")

    return Config(
        script_path=args.script,
        log_level=args.log_level if args.log_level is not None else env_log_level,
        dry_run=True if args.dry_run else env_dry_run,
    )
