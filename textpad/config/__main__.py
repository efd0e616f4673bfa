"""
Module: textpad.config.__main__
"""

import argparse
import json

from textpad.config import DEFAULT_CONF, config


def walk(data, prefix=""):
    for k, v in data.items():
        full = f"{prefix}.{k}" if prefix else k
        if isinstance(v, dict):
            yield from walk(v, full)
        else:
            yield full


def main():
    parser = argparse.ArgumentParser(description="Text Editor Configuration Utility")
    subparsers = parser.add_subparsers(dest="command")

    # View value(s)
    view = subparsers.add_parser(
        "view", help="View a config value or the entire config"
    )
    view.add_argument("key", nargs="?", default=None, help="Config key (dot notation)")

    # List keys
    subparsers.add_parser("list", help="List all config keys")

    # Reset config
    subparsers.add_parser("reset", help="Reset config to defaults")

    args = parser.parse_args()

    if args.command == "view":
        if args.key:
            print(config.get_value(args.key))
        else:
            print(json.dumps(config.data, indent=2))
    elif args.command == "list":
        for key in walk(config.data):
            print(key)
    elif args.command == "reset":
        # Overwrite the config file directly with defaults
        config.reset(initial_data=DEFAULT_CONF)
        print("Config reset to defaults.")
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
