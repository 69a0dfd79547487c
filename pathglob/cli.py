#!/usr/bin/env python3
"""Command-line interface for pathglob.

Sub-commands:
- find:  list files under a root selected by include/exclude patterns
- check: report validation rule violations for patterns
- match: test whether a single path is selected by patterns

Patterns and the root directory may also come from a YAML configuration file
(``--config``) or PATHGLOB_* environment variables; command-line values win.

Example:
    >>> from pathglob.cli import main
    >>> main(["check", "./src/**/*.js", "**/*.js"])
    1
"""

import argparse
import sys
from typing import List, Optional

from pathglob.core.constants import PATHGLOB_VERSION, ConfigKey
from pathglob.core.validators import ValidationError, describe_violations
from pathglob.infrastructure.config_manager import ConfigError, ConfigManager, ConfigSource
from pathglob.infrastructure.logger import Logger, set_global_logger
from pathglob.rules.pattern_set import PatternSet
from pathglob.scan.finder import FinderError, find_files

DESCRIPTION = "pathglob - glob-style path pattern matching"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: Argument list to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace

    Raises:
        SystemExit: On invalid arguments or --help/--version
    """
    parser = argparse.ArgumentParser(
        prog="pathglob",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List JavaScript sources, skipping vendored code
  pathglob find --root . "./src/**/*.js" "!./src/vendor/**"

  # Check patterns against the default safety rules
  pathglob check "./src/**/*.js" "**/*.js"

  # Test a single path
  pathglob match ./src/app/main.js "./src/**/*.js"
        """,
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {PATHGLOB_VERSION}",
    )

    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        type=str,
        help="Configuration file path (YAML format)",
    )

    log_group = parser.add_argument_group("logging options")

    log_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    log_group.add_argument(
        "--log-file",
        metavar="FILE",
        type=str,
        help="Also write log messages to FILE",
    )

    validation_group = parser.add_argument_group("validation options")

    validation_group.add_argument(
        "--no-validation",
        action="store_true",
        help="Disable all pattern validation rules",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    find_parser = subparsers.add_parser("find", help="List files selected by patterns")
    find_parser.add_argument("patterns", nargs="*", help="Patterns, '!' prefix to exclude")
    find_parser.add_argument(
        "--root",
        metavar="DIR",
        help="Directory to search (default: from config)",
    )

    check_parser = subparsers.add_parser("check", help="Validate patterns")
    check_parser.add_argument("patterns", nargs="*", help="Patterns to validate")

    match_parser = subparsers.add_parser("match", help="Test a path against patterns")
    match_parser.add_argument("path", help="Path to test")
    match_parser.add_argument("patterns", nargs="*", help="Patterns, '!' prefix to exclude")
    match_parser.add_argument(
        "--root",
        metavar="DIR",
        help="Anchor relative patterns to DIR before matching",
    )

    return parser.parse_args(args)


def load_configuration(args: argparse.Namespace) -> ConfigManager:
    """
    Build the configuration from the config file, environment and arguments.

    Args:
        args: Parsed arguments namespace

    Returns:
        Configuration manager

    Raises:
        ConfigError: If the configuration file cannot be loaded
    """
    config = ConfigManager(config_file=args.config)

    if args.no_validation:
        config.set(
            f"pathglob.{ConfigKey.VALIDATION}.{ConfigKey.VALIDATION_ENABLED}",
            False,
            ConfigSource.CLI_ARGS,
        )

    if args.debug:
        config.set(f"pathglob.{ConfigKey.LOGGING}.level", "DEBUG", ConfigSource.CLI_ARGS)

    if args.log_file:
        config.set(f"pathglob.{ConfigKey.LOGGING}.file", args.log_file, ConfigSource.CLI_ARGS)

    return config


def setup_logging(config: ConfigManager) -> Logger:
    """
    Setup logging based on configuration.

    Args:
        config: Configuration manager

    Returns:
        Configured logger instance, also installed as the global logger
    """
    level = config.get(f"pathglob.{ConfigKey.LOGGING}.level", "WARNING")
    log_file = config.get(f"pathglob.{ConfigKey.LOGGING}.file")

    try:
        logger = Logger("pathglob", level=level)
    except KeyError:
        raise CLIError(f"Unknown log level: {level}")

    if log_file:
        logger.add_handler(logger.create_file_handler(log_file))

    set_global_logger(logger)
    return logger


def _resolve_patterns(args: argparse.Namespace, config: ConfigManager) -> List[str]:
    patterns = args.patterns or config.get(f"pathglob.{ConfigKey.PATTERNS}") or []
    if isinstance(patterns, str):
        patterns = [patterns]
    if not patterns:
        raise CLIError("No patterns given on the command line or in the configuration")
    return list(patterns)


def run_find(args: argparse.Namespace, config: ConfigManager, logger: Logger) -> int:
    """
    Print every file under the root selected by the patterns.

    Returns:
        Exit code
    """
    root = args.root or config.get(f"pathglob.{ConfigKey.ROOT}")
    if not root:
        raise CLIError("No root directory given on the command line or in the configuration")

    patterns = _resolve_patterns(args, config)
    for path in find_files(root, patterns, rules=config.get_rules(), logger=logger):
        print(path)

    return EXIT_OK


def run_check(args: argparse.Namespace, config: ConfigManager, logger: Logger) -> int:
    """
    Print rule violations for each invalid pattern.

    Returns:
        EXIT_OK if every pattern is valid, EXIT_FAILURE otherwise
    """
    rules = config.get_rules()
    invalid = PatternSet(None, _resolve_patterns(args, config)).validate(rules)

    for pattern, violations in invalid.items():
        print(f"{pattern}:")
        for message in describe_violations(violations, rules):
            print(f"  {message}")

    logger.debug("Checked patterns", invalid=len(invalid))
    return EXIT_FAILURE if invalid else EXIT_OK


def run_match(args: argparse.Namespace, config: ConfigManager, logger: Logger) -> int:
    """
    Test a single path against the patterns.

    Returns:
        EXIT_OK if the path is selected, EXIT_FAILURE otherwise
    """
    pattern_set = PatternSet(args.root, _resolve_patterns(args, config))
    selected = pattern_set.matches(args.path)

    logger.debug("Matched path", path=args.path, selected=selected)
    print("match" if selected else "no match")
    return EXIT_OK if selected else EXIT_FAILURE


COMMANDS = {
    "find": run_find,
    "check": run_check,
    "match": run_match,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    try:
        args = parse_arguments(argv)
        config = load_configuration(args)
        logger = setup_logging(config)

        return COMMANDS[args.command](args, config, logger)

    except (CLIError, ConfigError, FinderError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
