"""Command line front end: manage saved servers, view and control them."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Mapping, Sequence

from bwhdesk.api import ApiError, BwhClient
from bwhdesk.config import (
    CONFIG_FILENAME,
    ConfigStore,
    DuplicateEntryError,
    InvalidCredentialsError,
)
from bwhdesk.dashboard import build_dashboard
from bwhdesk.vps import parse_vps
from bwhdesk.vpsinfo import VpsInfo, vps_info_from_json

REFRESH_SECONDS = 15

_ACTIONS = {
    "start": ("start", "Server will start in a few seconds."),
    "stop": ("stop", "Server will stop in a few seconds."),
    "restart": ("restart", "Server will restart in a few seconds."),
    "kill": ("kill", "Server will stop in a few seconds."),
}


class _UsageError(Exception):
    pass


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bwhdesk", description="Manage and monitor virtual servers."
    )
    parser.add_argument(
        "--config", default=CONFIG_FILENAME, help="path of the saved server list"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="list saved servers")

    add = commands.add_parser("add", help="save a server after checking it")
    add.add_argument("veid")
    add.add_argument("api_key")

    remove = commands.add_parser("remove", help="remove saved servers by index")
    remove.add_argument("indexes", type=int, nargs="+")

    export = commands.add_parser("export", help="copy the saved list to a file")
    export.add_argument("path")

    imp = commands.add_parser("import", help="replace the saved list with a file")
    imp.add_argument("path")

    show = commands.add_parser("show", help="show live information for a server")
    show.add_argument("index", type=int, nargs="?", default=0)
    show.add_argument(
        "--watch", action="store_true", help=f"refresh every {REFRESH_SECONDS} seconds"
    )

    for name in _ACTIONS:
        action = commands.add_parser(name, help=f"{name} a server")
        action.add_argument("index", type=int, nargs="?", default=0)
    return parser


def _entries(store: ConfigStore) -> list[VpsInfo]:
    return [vps_info_from_json(e) for e in store.load() if isinstance(e, Mapping)]


def _select(store: ConfigStore, index: int) -> VpsInfo:
    entries = _entries(store)
    if not entries:
        raise _UsageError("no servers saved")
    if not 0 <= index < len(entries):
        raise _UsageError(f"no server at index {index}")
    return entries[index]


def _print_list(entries: Sequence[VpsInfo]) -> None:
    for index, info in enumerate(entries):
        print(f"{index}: {info.title}")


def _show(client: BwhClient, info: VpsInfo) -> None:
    reply = client.get_live_service_info(info.veid, info.api_key)
    print(build_dashboard(parse_vps(reply)).render())


def _run(args: argparse.Namespace) -> int:
    store = ConfigStore(args.config)
    command = args.command

    if command == "list":
        _print_list(_entries(store))
    elif command == "add":
        entry = store.add(args.veid, args.api_key, BwhClient())
        print(entry["title"])
    elif command == "remove":
        kept = store.remove(args.indexes)
        _print_list([vps_info_from_json(e) for e in kept if isinstance(e, Mapping)])
    elif command == "export":
        store.export_to(args.path)
    elif command == "import":
        entries = store.import_from(args.path)
        _print_list([vps_info_from_json(e) for e in entries if isinstance(e, Mapping)])
    elif command == "show":
        info = _select(store, args.index)
        client = BwhClient()
        _show(client, info)
        while args.watch:
            time.sleep(REFRESH_SECONDS)
            print()
            _show(client, info)
    else:
        call, message = _ACTIONS[command]
        info = _select(store, args.index)
        getattr(BwhClient(), call)(info.veid, info.api_key)
        print(message)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = _parser().parse_args(argv)
    try:
        return _run(args)
    except KeyboardInterrupt:
        return 0
    except (
        ApiError,
        DuplicateEntryError,
        InvalidCredentialsError,
        _UsageError,
        OSError,
    ) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())