"""Build the immutable Route -> Leg -> Step tree from a parsed directions response.

Leaf fields are extracted with the total accessors, so a missing or mistyped
field becomes its zero value and never fails the build.  The only error that
can leave this module is :class:`MalformedPolyline`, and only when ``strict``
is true (the default); with ``strict=False`` the affected step keeps an empty
path and a warning is logged.
"""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Tuple

from route_model.config import settings
from route_model.core.accessors import get_dict, get_int, get_float, get_list, get_str, get_str_path
from route_model.core.models import Bounds, Coordinate, Leg, NamedQuantity, Route, Step
from route_model.core.polyline import MalformedPolyline, decode

log = logging.getLogger(__name__)


def _objects(value: Any) -> List[Mapping[str, Any]]:
    """Mapping entries of a list value, in order; anything else yields []."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, Mapping)]


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------

def build_coordinate(node: Any) -> Coordinate:
    return Coordinate(latitude=get_float(node, "lat"), longitude=get_float(node, "lng"))


def build_quantity(node: Any) -> NamedQuantity:
    return NamedQuantity(text=get_str(node, "text"), value=get_int(node, "value"))


def build_bounds(node: Any) -> Bounds:
    return Bounds(
        northeast=build_coordinate(get_dict(node, "northeast")),
        southwest=build_coordinate(get_dict(node, "southwest")),
    )


def build_path(node: Any, strict: bool = True) -> Tuple[Coordinate, ...]:
    """Decode the step's encoded points string; absent string means an empty path."""
    points = get_str_path(node, settings.polyline_points_path)
    try:
        return decode(points, precision=settings.polyline_precision)
    except MalformedPolyline as exc:
        if strict:
            raise
        log.warning("Dropping malformed step polyline: %s", exc)
        return ()


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------

def build_step(node: Any, strict: bool = True) -> Step:
    return Step(
        distance=build_quantity(get_dict(node, "distance")),
        duration=build_quantity(get_dict(node, "duration")),
        instructions=get_str(node, "html_instructions"),
        maneuver=get_str(node, "maneuver"),
        travel_mode=get_str(node, "travel_mode"),
        path=build_path(node, strict=strict),
        start_location=build_coordinate(get_dict(node, "start_location")),
        end_location=build_coordinate(get_dict(node, "end_location")),
    )


def build_steps(value: Any, strict: bool = True) -> Tuple[Step, ...]:
    return tuple(build_step(n, strict=strict) for n in _objects(value))


def build_leg(node: Any, strict: bool = True) -> Leg:
    return Leg(
        distance=build_quantity(get_dict(node, "distance")),
        duration=build_quantity(get_dict(node, "duration")),
        start_address=get_str(node, "start_address"),
        start_location=build_coordinate(get_dict(node, "start_location")),
        end_address=get_str(node, "end_address"),
        end_location=build_coordinate(get_dict(node, "end_location")),
        steps=build_steps(get_list(node, "steps"), strict=strict),
    )


def build_legs(value: Any, strict: bool = True) -> Tuple[Leg, ...]:
    return tuple(build_leg(n, strict=strict) for n in _objects(value))


def build_route(node: Any, strict: bool = True) -> Route:
    return Route(
        bounds=build_bounds(get_dict(node, "bounds")),
        copyrights=get_str(node, "copyrights"),
        summary=get_str(node, "summary"),
        legs=build_legs(get_list(node, "legs"), strict=strict),
    )


def build_routes(value: Any, strict: bool = True) -> Tuple[Route, ...]:
    """
    Build every route in a ``routes`` array, preserving provider order.

    An absent or non-list value yields an empty tuple.
    """
    routes = tuple(build_route(n, strict=strict) for n in _objects(value))
    log.debug("Built %d route(s)", len(routes))
    return routes


def build_routes_from_envelope(document: Any, strict: bool = True) -> Tuple[Route, ...]:
    """Build from the top-level response object (``{"status": ..., "routes": [...]}``)."""
    status = get_str(document, "status")
    if status and status != "OK":
        log.info("Directions response status is %s", status)
    return build_routes(get_list(document, "routes"), strict=strict)
