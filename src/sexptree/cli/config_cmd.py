"""
Config command for sexptree CLI.

Provides commands to view and initialize configuration.

Usage:
    sexptree config --show          Show effective configuration with sources
    sexptree config --init          Create template config file
    sexptree config --paths         Show config file paths
"""

import argparse
import sys
from pathlib import Path

from sexptree.config import (
    CONFIG_FILENAMES,
    USER_CONFIG_PATH,
    Config,
    ConfigError,
    generate_template,
    get_config_paths,
)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for config command."""
    parser = argparse.ArgumentParser(
        prog="sexptree config",
        description="Manage sexptree configuration",
    )

    action_group = parser.add_mutually_exclusive_group()
    action_group.add_argument(
        "--show",
        action="store_true",
        help="Show effective configuration with sources",
    )
    action_group.add_argument(
        "--init",
        action="store_true",
        help="Create template config file in current directory",
    )
    action_group.add_argument(
        "--paths",
        action="store_true",
        help="Show config file paths",
    )

    parser.add_argument(
        "--user",
        action="store_true",
        help="Use user config (~/.config/sexptree/config.toml) for --init",
    )

    args = parser.parse_args(argv)

    try:
        if args.init:
            return _init_config(args.user)
        elif args.paths:
            return _show_paths()
        else:
            # Default to showing config
            return _show_config()

    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _show_config() -> int:
    """Show effective configuration with sources."""
    config = Config.load()

    print("# Effective sexptree configuration")
    print()

    print("[defaults]")
    _print_value("verbose", config.defaults.verbose, config.get_source("defaults.verbose"))
    print()

    print("[parser]")
    _print_value("strict", config.parser.strict, config.get_source("parser.strict"))
    _print_value("max_depth", config.parser.max_depth, config.get_source("parser.max_depth"))
    print()

    print("[output]")
    _print_value("format", config.output.format, config.get_source("output.format"))

    return 0


def _print_value(key: str, value, source: str) -> None:
    """Print a config value as TOML, annotated with the file it came from."""
    if isinstance(value, bool):
        formatted = str(value).lower()
    elif isinstance(value, str):
        formatted = f'"{value}"'
    else:
        formatted = str(value)

    origin = source if source == "default" else Path(source).name
    if key == "max_depth" and value == 0:
        origin += " (unlimited)"
    print(f"{key} = {formatted}  # from: {origin}")


def _init_config(user: bool) -> int:
    """Write a template config file, refusing to overwrite an existing one."""
    path = USER_CONFIG_PATH if user else Path.cwd() / CONFIG_FILENAMES[0]

    if path.exists():
        print(f"Error: Config file already exists: {path}", file=sys.stderr)
        return 1

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_template(), encoding="utf-8")
    print(f"Created config file: {path}")
    return 0


def _show_paths() -> int:
    """List config locations in the order they are applied."""
    paths = get_config_paths()

    print("Config files (later entries override earlier ones):")
    print(f"  User config: {USER_CONFIG_PATH} [{'found' if paths['user'] else 'missing'}]")
    if paths["project"]:
        print(f"  Project config: {paths['project']} [found]")
    else:
        names = ", ".join(CONFIG_FILENAMES)
        print(f"  Project config: none of {names} between here and the repository root")
    return 0
