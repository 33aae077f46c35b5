from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from mintsync.adapters.cache_files import load_cache_snapshot, save_cache_snapshot
from mintsync.app import run_daemon, update_metadata_from_cache
from mintsync.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("Batch size must be a positive integer")
    return parsed


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Push cache link changes to minted NFT metadata")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    update = subparsers.add_parser("update", help="Update minted metadata from a new cache")
    update.add_argument(
        "--candy-machine",
        type=str,
        required=True,
        help="Address of the candy machine account",
    )
    update.add_argument(
        "--cache",
        type=Path,
        required=True,
        help="Cache file reflecting what was last pushed on-chain",
    )
    update.add_argument(
        "--new-cache",
        type=Path,
        required=True,
        help="Cache file with the desired links",
    )
    update.add_argument(
        "--batch-size",
        type=_positive_int,
        default=None,
        help="Number of metadata updates per transaction (defaults to config)",
    )
    update.add_argument(
        "--creator",
        type=str,
        help="First-creator address to search by (defaults to the candy machine PDA)",
    )
    update.add_argument(
        "--daemon",
        action="store_true",
        help="Keep running, repeating the update after a fixed interval",
    )
    update.add_argument(
        "--write-cache",
        action="store_true",
        help="Write the refreshed current cache back after each successful run",
    )

    return parser.parse_args(list(argv))


def _run_update(args: argparse.Namespace) -> None:
    current = load_cache_snapshot(args.cache)
    candidate = load_cache_snapshot(args.new_cache)

    def run_once() -> None:
        update_metadata_from_cache(
            candy_machine=args.candy_machine,
            current=current,
            candidate=candidate,
            batch_size=args.batch_size,
            creator_address=args.creator,
        )
        if args.write_cache:
            save_cache_snapshot(current, args.cache)

    if args.daemon:
        run_daemon(run_once)
    else:
        run_once()


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "update":
            _run_update(parsed_args)
        else:
            raise ConfigurationError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during metadata update")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
