from __future__ import annotations

import pytest

SAMPLE_POINTS = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


@pytest.fixture
def sample_points() -> str:
    return SAMPLE_POINTS


@pytest.fixture
def directions_doc() -> dict:
    """A trimmed Directions API response: one route, two legs."""
    return {
        "status": "OK",
        "routes": [
            {
                "bounds": {
                    "northeast": {"lat": 43.252, "lng": -120.2},
                    "southwest": {"lat": 38.5, "lng": -126.453},
                },
                "copyrights": "Map data ©2020",
                "summary": "I-5 N",
                "legs": [
                    {
                        "distance": {"text": "1.2 km", "value": 1234},
                        "duration": {"text": "3 mins", "value": 180},
                        "start_address": "A Street",
                        "start_location": {"lat": 38.5, "lng": -120.2},
                        "end_address": "B Street",
                        "end_location": {"lat": 43.252, "lng": -126.453},
                        "steps": [
                            {
                                "distance": {"text": "0.5 km", "value": 500},
                                "duration": {"text": "1 min", "value": 60},
                                "html_instructions": "Head <b>north</b>",
                                "travel_mode": "DRIVING",
                                "polyline": {"points": SAMPLE_POINTS},
                                "start_location": {"lat": 38.5, "lng": -120.2},
                                "end_location": {"lat": 43.252, "lng": -126.453},
                            },
                            {
                                "distance": {"text": "0.7 km", "value": 734},
                                "duration": {"text": "2 mins", "value": 120},
                                "html_instructions": "Turn <b>left</b>",
                                "maneuver": "turn-left",
                                "travel_mode": "DRIVING",
                                "polyline": {"points": "??"},
                            },
                        ],
                    },
                    {
                        "start_address": "B Street",
                        "end_address": "C Street",
                        "steps": [],
                    },
                ],
            }
        ],
    }
