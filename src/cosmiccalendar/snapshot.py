"""CLI entry point for static cosmic calendar snapshots.

    uv run python src/cosmiccalendar/snapshot.py --zoom 5 --date "2024-02-29 12:00"
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from cosmiccalendar.calendar_math import MAX_YEAR, MIN_YEAR  # noqa: E402
from cosmiccalendar.catalog import ZOOM_LEVELS  # noqa: E402
from cosmiccalendar.compute import run  # noqa: E402
from cosmiccalendar.formatting import format_selection  # noqa: E402
from cosmiccalendar.renderers.static import save_static_chart  # noqa: E402
from cosmiccalendar.settings import load_settings  # noqa: E402
from cosmiccalendar.theme import palette  # noqa: E402

logger = logging.getLogger(__name__)


def _parse_when(value: str) -> datetime:
    try:
        when = datetime.strptime(value, "%Y-%m-%d %H:%M")
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected 'YYYY-MM-DD HH:MM', got {value!r}") from e
    if not MIN_YEAR <= when.year <= MAX_YEAR:
        raise argparse.ArgumentTypeError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {when.year}"
        )
    return when


def build_parser(default_zoom: int) -> argparse.ArgumentParser:
    levels = ", ".join(f"{z.index}={z.name}" for z in ZOOM_LEVELS)
    parser = argparse.ArgumentParser(description="Render a cosmic calendar snapshot to PNG.")
    parser.add_argument("--zoom", type=int, default=default_zoom,
                        choices=range(len(ZOOM_LEVELS)), help=f"zoom level ({levels})")
    parser.add_argument("--date", type=_parse_when, default=None,
                        help="selected datetime 'YYYY-MM-DD HH:MM' (default: now)")
    parser.add_argument("--output", type=Path, default=None, help="PNG path (default: results/)")
    return parser


def main(argv: list[str] | None = None) -> Path:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser(settings.start_zoom).parse_args(argv)

    scene = run(args.zoom, selected=args.date, tz_name=settings.tz_name)
    path = save_static_chart(scene, args.output, palette(settings.theme))
    logger.info("%s: %s", scene.zoom.name, format_selection(scene.selected, args.zoom))
    print(f"Saved: {path}")
    return path


if __name__ == "__main__":
    main()
