from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from hydralist.adapters.listing_file import ListingFormatError
from hydralist.app import hydrate_listing_file
from hydralist.common.logging import configure_logging
from hydralist.config import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

_MS_PER_HOUR = 1000 * 60 * 60


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hydralist",
        description="Hydrate a project listing with GitHub repository metadata",
    )
    parser.add_argument("source", type=Path, help="Listing JSON file (an array of entries)")
    parser.add_argument(
        "--raw",
        type=Path,
        help="Where to write the trimmed listing",
    )
    parser.add_argument(
        "--hydrated",
        type=Path,
        help="Where to write the hydrated listing",
    )
    parser.add_argument(
        "--corrective",
        action="store_true",
        help="Drop local values that duplicate the GitHub data from the raw listing",
    )
    parser.add_argument(
        "--cache-hours",
        type=float,
        default=24.0,
        help="How long GitHub responses are cached; 0 disables caching (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(list(argv))
    if args.cache_hours < 0:
        parser.error("--cache-hours must be non-negative")
    return args


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        hydrate_listing_file(
            parsed_args.source,
            raw_path=parsed_args.raw,
            hydrated_path=parsed_args.hydrated,
            corrective=parsed_args.corrective,
            cache_ms=int(parsed_args.cache_hours * _MS_PER_HOUR),
        )
    except (ConfigurationError, ListingFormatError, FileNotFoundError) as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during hydration")
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
