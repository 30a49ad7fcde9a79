# ruff: noqa: T201

import argparse
import sys

from result import Err, Ok

from petcli.interfaces.tui import endpoint
from petcli.storage import get_store
from petcli.util.dirs import load_env
from petcli.util.logger import setup_logger, setup_mode

logger = setup_logger("petcli", is_stream=False, is_file=True)


def build_parser(env: dict[str, str]) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="petcli", description="pet-CLI terminal dashboard")
    p.add_argument(
        "--data-path",
        default=env["DATA_PATH"],
        help="pets file (.json, .yaml or .yml) (default: %(default)s)",
    )
    p.add_argument(
        "--tick-ms",
        type=int,
        default=int(env["TICK_MS"]),
        help="redraw interval without input in milliseconds (default: %(default)s)",
    )
    p.add_argument("--debug", action="store_true", help="verbose logging")
    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    try:
        env = load_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    parser = build_parser(env)
    args = parser.parse_args(argv)
    if args.tick_ms <= 0:
        parser.error("--tick-ms must be positive")
    setup_mode(is_debug=args.debug)

    try:
        store = get_store(args.data_path)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    match store.ensure_data_file():
        case Ok(None):
            pass
        case Err(e):
            print(f"Error: {e}", file=sys.stderr)
            return 1
    return endpoint.run(store, args)


if __name__ == "__main__":
    sys.exit(main())
