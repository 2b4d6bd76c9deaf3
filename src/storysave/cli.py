import argparse
import logging
import sys
from pathlib import Path

from .config import SaveConfig
from .context import SaveContext
from .logging_config import configure_logging
from .persistence import HistoryPersistence
from .storage.file import JsonFileStore


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="storysave",
        description="Inspect and manage stored save histories.",
    )
    parser.add_argument(
        "--store",
        dest="store_path",
        type=Path,
        default=None,
        help="Path to the JSON store file (defaults to the user data dir).",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to a JSON config file.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")

    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("info", "Print the save points stored in a slot."),
        ("exists", "Report whether a slot holds save data."),
        ("delete", "Delete the save data stored in a slot."),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--slot", default=None, help="Slot key (defaults to the configured slot).")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(logging.WARNING, debug=args.debug)

    config = SaveConfig.from_json(args.config_path) if args.config_path else SaveConfig()
    config = config.with_env()
    store_path = args.store_path or config.resolved_storage_path()
    slot = args.slot or config.default_slot

    context = SaveContext()
    persistence = HistoryPersistence(context, JsonFileStore(store_path), indent=config.indent)

    if args.command == "exists":
        found = persistence.exists(slot)
        print("yes" if found else "no")
        return 0 if found else 1

    if args.command == "delete":
        persistence.delete(slot)
        return 0

    if not persistence.read(slot):
        print(f"No readable save data in slot '{slot}' ({store_path})", file=sys.stderr)
        return 1
    print(context.history.get_debug_info(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
