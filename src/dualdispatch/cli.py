"""Command-line interface.

Provides the `dualdispatch` command with subcommands for:
- Resolving collisions between game objects
- Rendering arithmetic expressions
- Evaluating arithmetic expressions
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dualdispatch.builder import parse_expression
from dualdispatch.collisions import HARMLESS, collision_resolver, make_object
from dualdispatch.config import DispatchConfig, load_config
from dualdispatch.errors import ConfigurationError, DispatchError
from dualdispatch.resolver import NO_HANDLER
from dualdispatch.visitor import (
    ExpressionEvaluator,
    ExpressionPrinter,
    ParenthesizingPrinter,
)

logger = logging.getLogger(__name__)


def cmd_collide(args: argparse.Namespace, config: DispatchConfig) -> int:
    """Print the outcome of a collision."""
    try:
        first = make_object(args.first)
        second = make_object(args.second)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    outcome = collision_resolver(config).resolve(first, second)
    print(HARMLESS if outcome is NO_HANDLER else outcome)
    return 0


def cmd_print(args: argparse.Namespace, config: DispatchConfig) -> int:
    """Render an expression."""
    tree = parse_expression(args.expression)
    printer_class = ParenthesizingPrinter if args.parens else ExpressionPrinter
    print(printer_class(config.number_format).render(tree))
    return 0


def cmd_eval(args: argparse.Namespace, config: DispatchConfig) -> int:
    """Evaluate an expression."""
    tree = parse_expression(args.expression)
    result = ExpressionEvaluator().evaluate(tree)
    print(format(result, config.number_format))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dualdispatch",
        description="Double dispatch and expression visitor tools",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    collide_parser = subparsers.add_parser(
        "collide", help="Resolve a collision between two objects"
    )
    collide_parser.add_argument("first", help="planet, asteroid or spaceship")
    collide_parser.add_argument("second", help="planet, asteroid or spaceship")
    collide_parser.set_defaults(func=cmd_collide)

    print_parser = subparsers.add_parser("print", help="Render an expression")
    print_parser.add_argument("expression", help='e.g. "(13-4)-(12+1)"')
    print_parser.add_argument(
        "--parens",
        action="store_true",
        help="Parenthesize every binary operation",
    )
    print_parser.set_defaults(func=cmd_print)

    eval_parser = subparsers.add_parser("eval", help="Evaluate an expression")
    eval_parser.add_argument("expression", help='e.g. "(13-4)-(12+1)"')
    eval_parser.set_defaults(func=cmd_eval)

    return parser


def configure_logging(config: DispatchConfig, verbosity: int) -> None:
    level = config.logging_level
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = min(level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(Path(args.config)) if args.config else DispatchConfig()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(config, args.verbose)

    try:
        return args.func(args, config)
    except DispatchError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        # Trees deeper than the interpreter stack cannot be walked
        print("Error: expression too deeply nested", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
