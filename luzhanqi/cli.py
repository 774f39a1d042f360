"""
Luzhanqi CLI - Command-line interface for the engine.

Usage:
    luzhanqi generate --seed N [--json]   Generate a starting position
    luzhanqi validate <state_file>        Validate a position ('-' for stdin)
    luzhanqi board                        Show the terrain diagram
"""

import argparse
import json
import logging
import os
import sys

# Environment configuration
LUZHANQI_LOG_LEVEL = os.getenv("LUZHANQI_LOG_LEVEL", "WARNING")

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Luzhanqi - Starting position engine",
        prog="luzhanqi",
    )
    parser.add_argument(
        "--log-level",
        default=LUZHANQI_LOG_LEVEL,
        help="Logging level (default: $LUZHANQI_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Generate command
    generate_parser = subparsers.add_parser("generate", help="Generate a starting position")
    generate_parser.add_argument("--seed", type=int, required=True, help="Unsigned 64-bit seed")
    generate_parser.add_argument("--json", action="store_true", help="Print structural JSON")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a position")
    validate_parser.add_argument("state_file", help="Path to JSON position, or '-' for stdin")

    # Board command
    subparsers.add_parser("board", help="Show the terrain diagram")

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running command: %s", args.command)

    if args.command == "generate":
        return cmd_generate(args)
    elif args.command == "validate":
        return cmd_validate(args)
    elif args.command == "board":
        return cmd_board(args)
    parser.print_help()
    return 1


def cmd_generate(args) -> int:
    """Generate a starting position."""
    from .board.diagram import render_state
    from .engine_core.state import GameState
    from .startpos import generate_start

    try:
        state: GameState = generate_start(args.seed)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(state.to_dict()))
    else:
        print(render_state(state))
    return 0


def cmd_validate(args) -> int:
    """Validate a position read from a file or stdin."""
    from .api.service import APIService

    try:
        if args.state_file == "-":
            data = json.load(sys.stdin)
        else:
            with open(args.state_file, "r", encoding="utf-8") as f:
                data = json.load(f)
    except FileNotFoundError:
        print(f"Error: File not found: {args.state_file}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"Error: Invalid JSON: {exc}", file=sys.stderr)
        return 1

    verdict = APIService().validate_payload(data)
    if verdict.legal:
        print("legal")
        return 0

    print("illegal")
    for error in verdict.errors:
        print(f"  - {error}")
    return 1


def cmd_board(args) -> int:
    """Show the terrain diagram."""
    from .board.diagram import render_terrain

    print(render_terrain())
    return 0


if __name__ == "__main__":
    sys.exit(main())
