"""Landing weight and CG after a planned fuel burn.

Every tank shares one arm, so burning fuel moves the CG along a straight
line from the takeoff point toward the zero-fuel point. The burn is clamped
at the fuel on board: a plan longer than the endurance lands at zero fuel.
"""

from dataclasses import dataclass

from loadsheet.core.logging_system import get_logger
from loadsheet.units.conversions import (
    AVGAS_LBS_PER_GALLON,
    FuelUnit,
    fuel_volume,
    gallons_to_weight_lbs,
)
from loadsheet.weight_balance.aggregator import MassProperties, cg_from_moment, station_moment
from loadsheet.weight_balance.loading import FuelBurnPlan

logger = get_logger(__name__)


@dataclass(frozen=True)
class LandingProjection:
    """Projected condition at the end of the flight.

    Attributes:
        fuel_burned_lbs: Fuel the plan asks for (lbs), before clamping
        fuel_remaining_lbs: Fuel left on board (lbs), never negative
        fuel_remaining_volume: Fuel left on board in fuel_unit
        fuel_unit: Unit of fuel_remaining_volume
        weight_lbs: Landing weight (lbs)
        moment_kg_mm: Landing moment (kg·mm)
        cg_mm: Landing CG (mm)
        exceeds_max_landing_weight: True if the landing weight is above MLW
    """

    fuel_burned_lbs: float
    fuel_remaining_lbs: float
    fuel_remaining_volume: float
    fuel_unit: FuelUnit
    weight_lbs: float
    moment_kg_mm: float
    cg_mm: float
    exceeds_max_landing_weight: bool = False


def project_landing(
    zero_fuel: MassProperties,
    current_fuel_lbs: float,
    plan: FuelBurnPlan,
    fuel_arm_mm: float,
    lbs_per_gallon: float = AVGAS_LBS_PER_GALLON,
    fuel_unit: FuelUnit = FuelUnit.GALLONS,
    max_landing_weight_lbs: float | None = None,
) -> LandingProjection:
    """Project landing weight and CG.

    Args:
        zero_fuel: Zero-fuel weight, moment and CG.
        current_fuel_lbs: Fuel on board at takeoff, all tanks (lbs).
        plan: Burn rate and flight duration.
        fuel_arm_mm: Arm shared by the fuel tanks (mm).
        lbs_per_gallon: Fuel density.
        fuel_unit: Unit for the reported remaining volume.
        max_landing_weight_lbs: MLW to flag against, if known.

    Returns:
        The landing projection.

    Examples:
        >>> landing = project_landing(zfw, 522.0, FuelBurnPlan(14.0, 3.0), 1181.0)
        >>> landing.fuel_remaining_lbs  # 522 - 14 * 3 * 6
        270.0
    """
    fuel_burned = gallons_to_weight_lbs(plan.burn_rate_gph * plan.duration_hours, lbs_per_gallon)
    remaining = max(0.0, current_fuel_lbs - fuel_burned)

    weight = zero_fuel.weight_lbs + remaining
    moment = zero_fuel.moment_kg_mm + station_moment(remaining, fuel_arm_mm)
    cg = cg_from_moment(weight, moment)

    exceeds_mlw = max_landing_weight_lbs is not None and weight > max_landing_weight_lbs

    if remaining == 0.0 and fuel_burned > current_fuel_lbs:
        logger.debug(
            "Planned burn %.1f lbs exceeds %.1f lbs on board, landing at zero fuel",
            fuel_burned,
            current_fuel_lbs,
        )

    return LandingProjection(
        fuel_burned_lbs=fuel_burned,
        fuel_remaining_lbs=remaining,
        fuel_remaining_volume=fuel_volume(remaining, fuel_unit, lbs_per_gallon),
        fuel_unit=fuel_unit,
        weight_lbs=weight,
        moment_kg_mm=moment,
        cg_mm=cg,
        exceeds_max_landing_weight=exceeds_mlw,
    )
