from __future__ import annotations

import argparse
import json
import logging
import re
from pathlib import Path
from typing import Any, List, Optional

from rich.console import Console
from rich.table import Table

from route_model.config import settings
from route_model.core.builder import build_routes_from_envelope
from route_model.core.models import Route
from route_model.core.polyline import MalformedPolyline

log = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]+>")


def _plain(html: str) -> str:
    return _TAG_RE.sub("", html).strip()


def _read_directions(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}")
    except json.JSONDecodeError as exc:
        raise SystemExit(f"{path} is not valid JSON: {exc}")


def _save_json(path: Path, obj) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2), encoding="utf-8")


def _steps_table(route: Route, index: int) -> Table:
    table = Table(title=f"Route {index}: {route.summary or '(no summary)'}")
    table.add_column("Leg")
    table.add_column("Step")
    table.add_column("Mode")
    table.add_column("Maneuver")
    table.add_column("Instructions")
    table.add_column("Distance")
    table.add_column("Duration")
    table.add_column("Points", justify="right")

    for li, leg in enumerate(route.legs):
        for si, step in enumerate(leg.steps):
            table.add_row(
                str(li),
                str(si),
                step.travel_mode,
                step.maneuver,
                _plain(step.instructions)[:80],
                step.distance.text,
                step.duration.text,
                str(len(step.path)),
            )
    return table


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Decode a directions response into routes, legs and steps")
    ap.add_argument("--directions", default="directions/last_response.json", help="Path to a directions JSON file")
    ap.add_argument("--route-index", type=int, default=None, help="Only show this route")
    ap.add_argument("--lenient", action="store_true", help="Drop malformed step polylines instead of failing")
    ap.add_argument("--save", default=None, help="Write the decoded routes as JSON to this path")
    ap.add_argument("--debug", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else settings.log_level.upper(),
        format="%(asctime)s [route-model] %(levelname)s %(message)s",
    )

    directions_path = Path(args.directions)
    doc = _read_directions(directions_path)
    log.debug("Loaded directions document from %s", directions_path)
    strict = settings.strict_polylines and not args.lenient

    try:
        routes = build_routes_from_envelope(doc, strict=strict)
    except MalformedPolyline as exc:
        raise SystemExit(f"Malformed step polyline in {directions_path}: {exc}")

    console = Console()
    if not routes:
        console.print(f"No routes in {directions_path}")
        return

    for i, route in enumerate(routes):
        if args.route_index is not None and i != args.route_index:
            continue
        console.print(_steps_table(route, i))
        for leg in route.legs:
            console.print(
                f"{leg.start_address or '?'} -> {leg.end_address or '?'}: "
                f"{leg.distance.text or leg.distance.value} / {leg.duration.text or leg.duration.value}"
            )
        if route.copyrights:
            console.print(route.copyrights)

    if args.save:
        out = Path(args.save)
        _save_json(out, [r.model_dump(mode="json") for r in routes])
        console.print(f"Saved: {out.resolve()}")


if __name__ == "__main__":
    main()
