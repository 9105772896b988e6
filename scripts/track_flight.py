#!/usr/bin/env python3
"""
Compute the progress of a flight from a saved flight-detail JSON file.

This script:
1. Loads a flight-detail record (bare or wrapped in {"result": ...})
2. Computes phase, fraction and current position for the given instant
3. Prints a one-line summary and optionally writes an HTML route map

Usage:
    python scripts/track_flight.py flight.json
    python scripts/track_flight.py flight.json --now 2026-05-01T12:00:00Z --html map.html
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from flight_progress.adapters.data_providers import parse_flight_detail
from flight_progress.application import TrackFlightProgress
from flight_progress.config import EngineConfig
from flight_progress.exceptions import FlightDetailParseError
from flight_progress.renderers import create_progress_figure
from flight_progress.services.schedule_status import (
    arrival_status_text,
    block_duration,
    departure_status_text,
    format_duration,
)
from flight_progress.services.time_parser import parse_timestamp

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stdout with timestamps."""
    level = logging.DEBUG if verbose else logging.INFO
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def main(
    path: Path,
    now_text: Optional[str] = None,
    html_path: Optional[Path] = None,
) -> int:
    try:
        with path.open(encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Malformed JSON in %s: %s", path, e)
        return 1

    now = parse_timestamp(now_text) if now_text else None
    if now_text and now is None:
        logger.error("Could not parse --now value %r", now_text)
        return 2

    tracker = TrackFlightProgress(config=EngineConfig.from_env())
    try:
        request = parse_flight_detail(payload)
    except FlightDetailParseError as e:
        logger.error("Invalid flight detail in %s: %s", path, e)
        return 1

    snapshot = tracker.track_request(request, now=now)
    print(
        f"{request.flight_id or path.stem}: {snapshot.status_text} "
        f"{snapshot.fraction:.0%} at "
        f"({snapshot.current_position.latitude:.4f}, "
        f"{snapshot.current_position.longitude:.4f}), "
        f"heading {snapshot.heading_degrees:.0f}°"
    )
    print(
        f"  departure: {departure_status_text(request.window)}, "
        f"arrival: {arrival_status_text(request.window)}, "
        f"duration: {format_duration(block_duration(request.window))}"
    )

    if html_path is not None:
        fig = create_progress_figure(
            snapshot,
            region=tracker.region_for(request),
            title=request.flight_id,
        )
        fig.write_html(str(html_path))
        logger.info("Route map written to %s", html_path)

    return 0


if __name__ == "__main__":
    import argparse

    load_dotenv()

    parser = argparse.ArgumentParser(description="Track a flight's progress")
    parser.add_argument("file", type=Path, help="Flight-detail JSON file")
    parser.add_argument("--now", type=str, help="Query instant (ISO 8601, default: now)")
    parser.add_argument("--html", type=Path, help="Write a route map to this HTML file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)
    sys.exit(main(args.file, now_text=args.now, html_path=args.html))
