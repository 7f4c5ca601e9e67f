from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

from route_model.cli import _read_directions
from route_model.core.builder import build_routes_from_envelope
from route_model.core.models import Route
from route_model.core.polyline import MalformedPolyline


def route_to_features(route: Route, route_index: int = 0) -> List[Dict[str, Any]]:
    """One LineString feature per step; steps with fewer than two points are skipped."""
    features: List[Dict[str, Any]] = []
    for li, leg in enumerate(route.legs):
        for si, step in enumerate(leg.steps):
            if len(step.path) < 2:
                continue
            features.append(
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "LineString",
                        "coordinates": [list(c.as_lng_lat()) for c in step.path],
                    },
                    "properties": {
                        "route": route_index,
                        "leg": li,
                        "step": si,
                        "travel_mode": step.travel_mode,
                        "maneuver": step.maneuver,
                        "distance_m": step.distance.value,
                        "duration_s": step.duration.value,
                        "instructions": step.instructions,
                    },
                }
            )
    return features


def routes_to_geojson(routes: Iterable[Route]) -> Dict[str, Any]:
    features: List[Dict[str, Any]] = []
    for i, route in enumerate(routes):
        features.extend(route_to_features(route, route_index=i))
    return {"type": "FeatureCollection", "features": features}


def main() -> None:
    ap = argparse.ArgumentParser(description="Export step paths of a directions response as GeoJSON")
    ap.add_argument("--directions", default="directions/last_response.json", help="Path to a directions JSON file")
    ap.add_argument("--out", default="directions/last_routes.geojson")
    ap.add_argument("--lenient", action="store_true", help="Drop malformed step polylines instead of failing")
    args = ap.parse_args()

    directions_path = Path(args.directions)
    doc = _read_directions(directions_path)
    try:
        routes = build_routes_from_envelope(doc, strict=not args.lenient)
    except MalformedPolyline as exc:
        raise SystemExit(f"Malformed step polyline in {directions_path}: {exc}")
    if not routes:
        raise SystemExit(f"No routes found in {args.directions}")

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(routes_to_geojson(routes), indent=2), encoding="utf-8")
    print(f"Wrote: {out_path.resolve()}")


if __name__ == "__main__":
    main()
