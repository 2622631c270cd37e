from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from foundsongs.app import load_stored_songs, show_found_songs
from foundsongs.config import ConfigurationError, configure_logging
from foundsongs.config.catalog import get_http_cache_config
from foundsongs.ui.presenter import row_for

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from types import FrameType

    from foundsongs.ui.presenter import ListPresenter, Row

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show songs found in the iTunes catalog")
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level name (defaults to FOUNDSONGS_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("fetch", help="Search the catalog, store and list the found songs")
    subparsers.add_parser("show", help="List the found songs stored by the last fetch")

    return parser.parse_args(list(argv))


def _resolve_level(name: str | None) -> int | None:
    if name is None:
        return None
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ValueError(f"Unknown log level: {name}")
    return level


def format_row(row: Row) -> str:
    return f"{row.title} - {row.subtitle}"


def _print_rows(rows: Iterable[Row]) -> None:
    for row in rows:
        print(format_row(row))  # noqa: T201


def _render(presenter: ListPresenter) -> None:
    _print_rows(presenter.rows())


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=_resolve_level(parsed_args.log_level))
        get_http_cache_config()
    except (ValueError, ConfigurationError):
        configure_logging(level=logging.INFO)
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "fetch":
            show_found_songs(on_reload=_render)
        elif parsed_args.command == "show":
            records = load_stored_songs()
            if records is None:
                log.info("No found songs stored yet; run 'foundsongs fetch' first")
                return
            _print_rows(row_for(record) for record in records)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error while showing found songs")
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
