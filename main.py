"""Entry point — renders one month to a PNG using the saved settings."""

from __future__ import annotations

import argparse
import logging
from datetime import date

from calendar_logic import MONTH_NAMES, CalendarError, build_grid, days_in_month
from calendar_theme import ThemeMode, resolve_theme
from day_annotations import attach_annotations
from preview import background_for, render_month
from settings import load_settings, save_settings

logger = logging.getLogger(__name__)

# Demo markers, keyed by day of month
_SAMPLE_MARKERS = {1: "party", 10: "meeting", 14: "heart", 25: "star"}


def sample_annotations(year: int, month: int) -> list[str | None]:
    """Return one entry per day of the month, with a few demo markers."""
    return [_SAMPLE_MARKERS.get(day) for day in range(1, days_in_month(year, month) + 1)]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a monthly calendar grid to a PNG.")
    parser.add_argument("year", type=int, nargs="?", help="Year (default: current year).")
    parser.add_argument("month", type=int, nargs="?", help="Month 1-12 (default: current month).")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--dark", dest="dark_mode", action="store_true", default=None,
                      help="Use the dark theme.")
    mode.add_argument("--light", dest="dark_mode", action="store_false", default=None,
                      help="Use the light theme.")
    parser.add_argument("--no-headers", action="store_true", help="Hide the weekday header row.")
    parser.add_argument("--sample-annotations", action="store_true",
                        help="Annotate a few days with demo markers.")
    parser.add_argument("--output", help="PNG path (default: from settings).")
    parser.add_argument("--settings", help="Settings file to read (and write with --save).")
    parser.add_argument("--save", action="store_true", help="Remember the chosen theme.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if (args.year is None) != (args.month is None):
        parser.error("give both YEAR and MONTH, or neither")
    if args.year is None:
        today = date.today()
        args.year, args.month = today.year, today.month

    settings = load_settings(args.settings)
    if args.dark_mode is not None:
        settings["dark_mode"] = args.dark_mode
    mode = ThemeMode.from_flag(settings["dark_mode"])

    try:
        grid = build_grid(args.year, args.month)
        if args.sample_annotations:
            grid = attach_annotations(grid, sample_annotations(args.year, args.month))
    except CalendarError as exc:
        parser.error(str(exc))

    show_headers = settings["show_headers"] and not args.no_headers
    image = render_month(
        grid,
        resolve_theme(settings["dark_mode"]),
        headers=settings["headers"] if show_headers else None,
        cell_size=settings["cell_size"],
        background=background_for(mode),
        title=f"{MONTH_NAMES[args.month - 1]} {args.year}",
    )
    output = args.output or settings["output"]
    image.save(output, format="PNG")
    logger.info("Wrote %s (%s theme)", output, mode.value)

    if args.save:
        save_settings(settings, args.settings)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
