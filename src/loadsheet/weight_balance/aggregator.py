"""Weight and moment aggregation.

Weights are carried in pounds and converted to kilograms only for the moment,
so moments are in kg·mm and CG = moment / weight(kg) comes out in mm.
"""

from dataclasses import dataclass

from loadsheet.aircraft.profile import AircraftProfile, StationCategory
from loadsheet.core.logging_system import get_logger
from loadsheet.units.conversions import fuel_weight_lbs, lbs_to_kg
from loadsheet.weight_balance.loading import LoadingInput

logger = get_logger(__name__)


@dataclass(frozen=True)
class MassProperties:
    """Total weight, moment and CG of a loading condition.

    Attributes:
        weight_lbs: Total weight (lbs)
        moment_kg_mm: Total moment about the datum (kg·mm)
        cg_mm: CG position (mm aft of datum), 0 when weight is 0
    """

    weight_lbs: float
    moment_kg_mm: float
    cg_mm: float


def station_moment(weight_lbs: float, arm_mm: float) -> float:
    """Moment of a weight at an arm, in kg·mm."""
    return lbs_to_kg(weight_lbs) * arm_mm


def cg_from_moment(weight_lbs: float, moment_kg_mm: float) -> float:
    """CG position for a total weight and moment.

    Returns:
        CG in mm, or 0 when the weight is zero.
    """
    if weight_lbs == 0:
        return 0.0
    return moment_kg_mm / lbs_to_kg(weight_lbs)


def station_weights_lbs(aircraft: AircraftProfile, loading: LoadingInput) -> dict[str, float]:
    """Normalize a loading snapshot to pounds per station.

    Fuel stations are converted from the snapshot's fuel unit with the
    profile's fuel density. Values for unknown station ids are dropped.

    Args:
        aircraft: Aircraft profile.
        loading: Loading snapshot.

    Returns:
        Station id -> weight in pounds, for every station of the profile.
    """
    density = aircraft.fuel_density_lbs_per_gallon
    weights = {}
    for station in aircraft.stations:
        value = loading.value(station.id)
        if station.is_fuel:
            value = fuel_weight_lbs(value, loading.fuel_unit, density)
        weights[station.id] = value

    unknown = set(loading.values) - set(weights)
    if unknown:
        logger.debug("Ignoring values for unknown stations: %s", ", ".join(sorted(unknown)))

    return weights


def aggregate(
    aircraft: AircraftProfile, weights_lbs: dict[str, float], include_fuel: bool = True
) -> MassProperties:
    """Sum the empty aircraft and every station into weight, moment and CG.

    Args:
        aircraft: Aircraft profile.
        weights_lbs: Station id -> weight in pounds.
        include_fuel: If False, fuel stations count as empty (zero-fuel condition).

    Returns:
        MassProperties of the loading condition.
    """
    total_weight = aircraft.empty_weight_lbs
    total_moment = station_moment(aircraft.empty_weight_lbs, aircraft.empty_cg_mm)

    for station in aircraft.stations:
        if station.is_fuel and not include_fuel:
            continue
        weight = weights_lbs.get(station.id, 0.0)
        total_weight += weight
        total_moment += station_moment(weight, station.arm_mm)

    return MassProperties(
        weight_lbs=total_weight,
        moment_kg_mm=total_moment,
        cg_mm=cg_from_moment(total_weight, total_moment),
    )


def zero_fuel(aircraft: AircraftProfile, weights_lbs: dict[str, float]) -> MassProperties:
    return aggregate(aircraft, weights_lbs, include_fuel=False)


def total_fuel_lbs(aircraft: AircraftProfile, weights_lbs: dict[str, float]) -> float:
    return sum(weights_lbs.get(s.id, 0.0) for s in aircraft.fuel_stations)


def weight_breakdown(aircraft: AircraftProfile, weights_lbs: dict[str, float]) -> dict[str, float]:
    """Split the total weight by station category.

    Returns:
        Dictionary with keys 'empty', one per StationCategory value
        ('pilot', 'passenger', 'baggage', 'fuel') and 'total', in pounds.
    """
    breakdown = {"empty": aircraft.empty_weight_lbs}
    for category in StationCategory:
        breakdown[category.value] = sum(
            weights_lbs.get(s.id, 0.0) for s in aircraft.stations_in(category)
        )
    breakdown["total"] = sum(breakdown.values())
    return breakdown
