from __future__ import annotations

import argparse
import json
import sys

from letswift_gallery.catalog.loader import CatalogLoader
from letswift_gallery.config import settings
from letswift_gallery.engine.gallery_state import GalleryState
from letswift_gallery.engine.player_url import make_watch_url
from letswift_gallery.engine.view import render
from letswift_gallery.log import setup_logging


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="letswift-gallery")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--data-dir", default=None, help="Directory holding playlist-<year>.json files")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("years", help="List supported conference years")

    ls = sub.add_parser("list", help="List talks for a year")
    ls.add_argument("--year", default=settings.default_year)
    ls.add_argument("--query", default="")
    ls.add_argument("--json", action="store_true", help="Print the rendered view as JSON")

    play = sub.add_parser("play", help="Print the watch URL for a video id")
    play.add_argument("video_id")

    args = p.parse_args(argv)
    setup_logging(debug=args.debug)

    loader = CatalogLoader(data_dir=args.data_dir)

    if args.cmd == "years":
        for year in loader.years:
            mark = "*" if year == settings.default_year else " "
            print(f"{mark} {year}")
        return 0

    if args.cmd == "list":
        state = GalleryState(loader=loader)
        state.select_year(args.year)
        state.set_query(args.query)
        view = render(state.snapshot())

        if args.json:
            print(json.dumps(view, indent=2, ensure_ascii=False))
        elif view["status"] == "error":
            print(view["error"], file=sys.stderr)
        elif view["status"] == "empty":
            print(f"No talks match {args.query!r}")
        else:
            print(view["title"])
            for row in view["rows"]:
                print(f"- {row['title']} ({row['speaker']})  {row['watch_url']}")
        return 1 if view["status"] == "error" else 0

    # play
    print(make_watch_url(args.video_id))
    return 0


if __name__ == "__main__":
    sys.exit(main())
