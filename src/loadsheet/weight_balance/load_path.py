"""Cumulative load path for the loading chart.

Starting from the empty aircraft, stations are added one at a time in a fixed
boarding order and the running weight and CG are emitted after each. Fuel is
not part of the path; the chart shows it as the separate takeoff/landing pair.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from loadsheet.aircraft.profile import AircraftProfile
from loadsheet.weight_balance.aggregator import cg_from_moment, station_moment

LOAD_ORDER = (
    "pilot",
    "front_passenger",
    "rear_passenger_1",
    "rear_passenger_2",
    "baggage_a",
    "baggage_b",
    "baggage_c",
)

EMPTY_LABEL = "Empty Aircraft"


@dataclass(frozen=True)
class LoadPathPoint:
    """One point on the load path.

    Attributes:
        weight_lbs: Cumulative weight (lbs)
        cg_mm: Cumulative CG (mm)
        label: Station added at this step
    """

    weight_lbs: float
    cg_mm: float
    label: str


def iter_load_path(
    aircraft: AircraftProfile, weights_lbs: dict[str, float]
) -> Iterator[LoadPathPoint]:
    """Yield the load path, empty aircraft first.

    Stations with zero weight, or missing from the profile, are skipped.
    Each call starts a fresh path.

    Args:
        aircraft: Aircraft profile.
        weights_lbs: Station id -> weight in pounds.
    """
    weight = aircraft.empty_weight_lbs
    moment = station_moment(weight, aircraft.empty_cg_mm)
    yield LoadPathPoint(weight, cg_from_moment(weight, moment), EMPTY_LABEL)

    for station_id in LOAD_ORDER:
        station = aircraft.station(station_id)
        station_weight = weights_lbs.get(station_id, 0.0)
        if station is None or station_weight == 0:
            continue
        weight += station_weight
        moment += station_moment(station_weight, station.arm_mm)
        yield LoadPathPoint(weight, cg_from_moment(weight, moment), station.name)


def load_path(aircraft: AircraftProfile, weights_lbs: dict[str, float]) -> tuple[LoadPathPoint, ...]:
    return tuple(iter_load_path(aircraft, weights_lbs))
