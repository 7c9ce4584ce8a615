"""CLI entrypoint for the Decorum relay."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path

from decorum import __version__
from decorum.config import load_config, load_runtime_settings, validate_config_file
from decorum.constants.branding import CLI_DESCRIPTION
from decorum.constants.config import CONFIG_FILENAME
from decorum.engine import evaluate
from decorum.exceptions import ConfigError, DecorumError
from decorum.exceptions.validation import format_errors
from decorum.reporting.stdout import StdoutReporter


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="decorum",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Connect to Discord and moderate the monitored channel")
    run.add_argument("-c", "--config", type=Path, default=Path(CONFIG_FILENAME), help="Config file path")
    run.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without connecting")
    validate.add_argument("-c", "--config", type=Path, default=Path(CONFIG_FILENAME), help="Config file path")

    evaluate_cmd = subparsers.add_parser("evaluate", help="Evaluate a set of attribute scores offline")
    evaluate_cmd.add_argument("-c", "--config", type=Path, default=Path(CONFIG_FILENAME), help="Config file path")
    evaluate_cmd.add_argument(
        "-s",
        "--scores",
        required=True,
        help='JSON object of attribute scores, e.g. \'{"TOXICITY": 0.91}\'',
    )
    evaluate_cmd.add_argument("--no-color", action="store_true", help="Disable colored output")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)
    if args.command == "evaluate":
        return _handle_evaluate(args)
    if args.command != "run":
        parser.error(f"Unsupported command: {args.command}")

    validation_errors = validate_config_file(args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        config = load_config(args.config)
        settings = load_runtime_settings()
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    from decorum.relay import run_bot

    run_bot(settings, config)
    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _handle_evaluate(args: argparse.Namespace) -> int:
    """Evaluate scores given on the command line; exit 1 when rejected."""
    try:
        scores = _parse_scores(args.scores)
        config = load_config(args.config)
        evaluation = evaluate(scores, config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except DecorumError as exc:
        print(f"Evaluation error: {exc}", file=sys.stderr)
        return 2

    use_color = not args.no_color and sys.stdout.isatty()
    print(StdoutReporter(evaluation, color=use_color).render())
    return 1 if evaluation.verdict else 0


def _parse_scores(raw: str) -> dict[str, float]:
    """Parse a JSON object of attribute name to numeric score."""
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"--scores is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ConfigError("--scores must be a JSON object")

    scores: dict[str, float] = {}
    for name, value in parsed.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"--scores value for {name!r} must be a number")
        if not math.isfinite(value):
            raise ConfigError(f"--scores value for {name!r} must be a finite number, got {value!r}")
        scores[name] = float(value)
    return scores


if __name__ == "__main__":
    raise SystemExit(main())
