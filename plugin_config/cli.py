#!/usr/bin/env python3
"""
plugin-config CLI

Inspect and tidy plugin config and language files from a shell.

Usage:
    plugin-config message lang.yml messages.balance Alice 30
    plugin-config message --advanced lang.yml messages.join player Alice
    plugin-config list --plain lang.yml help.lines
    plugin-config distinct config.yml player-names
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from .chat_color import strip_color, to_ansi
from .config import Config
from .exceptions import InvalidConfigurationError
from .settings import settings


def _render(text: str, output: str) -> str:
    if output == "plain":
        return strip_color(text)
    if output == "ansi":
        return to_ansi(text)
    return text


def _load(path: str) -> Optional[Config]:
    try:
        return Config(path, load_now=True)
    except (OSError, InvalidConfigurationError):
        return None


def cmd_message(args) -> int:
    config = _load(args.file)
    if config is None:
        return 1

    config.set_exclude_prefix(args.no_prefix)
    if args.prefix_path:
        config.set_prefix_path(args.prefix_path)

    if args.advanced:
        message = config.get_prefixed_message_advanced(args.key, *args.args)
    else:
        message = config.get_message(args.key, *args.args)

    print(_render(message, args.output))
    return 0


def cmd_list(args) -> int:
    config = _load(args.file)
    if config is None:
        return 1

    for line in config.get_message_list(args.key, *args.args):
        print(_render(line, args.output))
    return 0


def cmd_distinct(args) -> int:
    config = _load(args.file)
    if config is None:
        return 1

    before = config.get_list(args.key)
    if before is None:
        logger.warning(f"No list at '{args.key}' in {args.file}")
        return 0

    try:
        config.make_list_distinct(args.key).save(config.config_file)
    except OSError as e:
        logger.error(f"Cannot write {args.file}: {e}")
        return 1

    removed = len(before) - len(config.get_list(args.key))
    print(f"Removed {removed} duplicate(s) from '{args.key}'")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plugin-config",
        description="plugin-config - Render messages and tidy lists in plugin YAML files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  plugin-config message lang.yml messages.balance Alice 30
  plugin-config message --advanced lang.yml messages.join player Alice
  plugin-config distinct config.yml player-names
        """
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Log level (default: {settings.log_level})"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    output_parent = argparse.ArgumentParser(add_help=False)
    output_parent.add_argument(
        "--output",
        choices=["raw", "plain", "ansi"],
        default="raw",
        help="raw keeps § codes, plain strips them, ansi renders them for a terminal (default: raw)"
    )
    output_parent.add_argument(
        "--plain",
        dest="output",
        action="store_const",
        const="plain",
        help="Strip color codes (same as --output plain)"
    )

    message = subparsers.add_parser("message", parents=[output_parent], help="Render a message")
    message.add_argument("file", help="YAML file")
    message.add_argument("key", help="Message path, e.g. messages.welcome")
    message.add_argument("args", nargs="*", help="Replacements for {0}, {1}, ... (or name/value pairs with --advanced)")
    message.add_argument(
        "--advanced",
        action="store_true",
        help="Treat args as %%name/value pairs"
    )
    message.add_argument(
        "--no-prefix",
        action="store_true",
        help="Leave out the message prefix"
    )
    message.add_argument(
        "--prefix-path",
        help=f"Where the prefix is located (default: {settings.prefix_path})"
    )
    message.set_defaults(func=cmd_message)

    lines = subparsers.add_parser("list", parents=[output_parent], help="Render a message list")
    lines.add_argument("file", help="YAML file")
    lines.add_argument("key", help="List path, e.g. help.lines")
    lines.add_argument("args", nargs="*", help="Replacements for {0}, {1}, ...")
    lines.set_defaults(func=cmd_list)

    dedupe = subparsers.add_parser("distinct", help="Remove duplicate list entries and save the file")
    dedupe.add_argument("file", help="YAML file")
    dedupe.add_argument("key", help="List path, e.g. player-names")
    dedupe.set_defaults(func=cmd_distinct)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
