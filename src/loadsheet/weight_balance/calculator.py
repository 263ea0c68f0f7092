"""Weight and balance calculation entry point.

compute() turns an aircraft profile and a loading snapshot into a complete
CalculationResult. It never raises for a well-formed snapshot: limit
violations come back as strings in 'errors' (blocking) and 'warnings'
(caution), next to fully computed numbers.

Typical usage:
    profile = load_builtin_profile("VH-YPB")
    loading = LoadingInput({"pilot": 170.0, "fuel_left": 43.5, "fuel_right": 43.5})
    result = compute(profile, loading, fuel_burn=FuelBurnPlan(13.0, 2.5))
    if result.status is LoadingStatus.OUT_OF_LIMITS:
        ...
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType

from loadsheet.aircraft.envelope import CGMargins, percent_mac
from loadsheet.aircraft.profile import AircraftProfile, StationCategory
from loadsheet.core.logging_system import get_logger
from loadsheet.weight_balance.aggregator import (
    aggregate,
    station_weights_lbs,
    total_fuel_lbs,
    weight_breakdown,
    zero_fuel,
)
from loadsheet.weight_balance.fuel_burn import LandingProjection, project_landing
from loadsheet.weight_balance.load_path import LoadPathPoint, load_path
from loadsheet.weight_balance.loading import FuelBurnPlan, LoadingInput, UnitPreferences

logger = get_logger(__name__)

# Below this a non-zero pilot weight is most likely a typo or a kg/lbs mixup.
PILOT_MIN_PLAUSIBLE_LBS = 40.0


class LoadingStatus(Enum):
    """Overall verdict shown to the pilot."""

    WITHIN_LIMITS = "within_limits"
    CAUTION = "caution"
    OUT_OF_LIMITS = "out_of_limits"


@dataclass(frozen=True)
class CalculationResult:
    """Everything the chart, side view and loading sheet need.

    Attributes:
        total_weight_lbs: Takeoff weight (lbs)
        total_moment_kg_mm: Takeoff moment (kg·mm)
        cg_mm: Takeoff CG (mm)
        percent_mac: Takeoff CG as %MAC
        within_envelope: Whether (weight, CG) lies inside the envelope
        weight_margin_lbs: MTOW minus total weight (negative when over)
        cg_margin: Signed distance to the forward and aft limits (mm)
        forward_limit_mm: Forward CG limit at the takeoff weight (mm)
        aft_limit_mm: Aft CG limit (mm)
        zero_fuel_weight_lbs: Weight without fuel (lbs)
        zero_fuel_moment_kg_mm: Moment without fuel (kg·mm)
        zero_fuel_cg_mm: CG without fuel (mm)
        fuel_weight_lbs: Fuel on board (lbs)
        breakdown: Weight per category (read-only), see weight_breakdown()
        load_path: Cumulative points as stations are added
        warnings: Non-blocking findings
        errors: Blocking findings
        landing: Landing projection, when a fuel burn plan was given
    """

    total_weight_lbs: float
    total_moment_kg_mm: float
    cg_mm: float
    percent_mac: float
    within_envelope: bool
    weight_margin_lbs: float
    cg_margin: CGMargins
    forward_limit_mm: float
    aft_limit_mm: float
    zero_fuel_weight_lbs: float
    zero_fuel_moment_kg_mm: float
    zero_fuel_cg_mm: float
    fuel_weight_lbs: float
    breakdown: Mapping[str, float] = field(default_factory=dict)
    load_path: tuple[LoadPathPoint, ...] = ()
    warnings: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()
    landing: LandingProjection | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "breakdown", MappingProxyType(dict(self.breakdown)))

    def __hash__(self) -> int:
        values = tuple(getattr(self, f.name) for f in fields(self) if f.name != "breakdown")
        return hash((values, frozenset(self.breakdown.items())))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def status(self) -> LoadingStatus:
        """Out of limits on any error or outside the envelope, caution on warnings."""
        if self.errors or not self.within_envelope:
            return LoadingStatus.OUT_OF_LIMITS
        if self.warnings:
            return LoadingStatus.CAUTION
        return LoadingStatus.WITHIN_LIMITS


def validate_loading(aircraft: AircraftProfile, weights_lbs: dict[str, float]) -> list[str]:
    """Collect non-blocking warnings for a loading condition.

    Args:
        aircraft: Aircraft profile.
        weights_lbs: Station id -> weight in pounds.

    Returns:
        Warning messages, in station order.
    """
    warnings = []

    for station in aircraft.stations:
        if weights_lbs.get(station.id, 0.0) > station.max_weight_lbs:
            warnings.append(
                f"{station.name} exceeds maximum weight of {station.max_weight_lbs:.0f} lbs"
            )

    baggage = sum(weights_lbs.get(s.id, 0.0) for s in aircraft.stations_in(StationCategory.BAGGAGE))
    if baggage > aircraft.max_combined_baggage_lbs:
        warnings.append(
            f"Combined baggage ({baggage:.1f} lbs) exceeds limit of "
            f"{aircraft.max_combined_baggage_lbs:.0f} lbs"
        )

    for station in aircraft.stations_in(StationCategory.PILOT):
        weight = weights_lbs.get(station.id, 0.0)
        if 0 < weight < PILOT_MIN_PLAUSIBLE_LBS:
            warnings.append(f"{station.name} weight seems unusually low - please verify")

    return warnings


def compute(
    aircraft: AircraftProfile,
    loading: LoadingInput,
    fuel_burn: FuelBurnPlan | None = None,
    preferences: UnitPreferences | None = None,
) -> CalculationResult:
    """Compute weight, CG and limit compliance for a loading snapshot.

    Args:
        aircraft: Aircraft profile.
        loading: Current station values.
        fuel_burn: Optional burn plan; the landing projection is only made
            when both its rate and duration are positive.
        preferences: Output units (only the fuel unit of the landing
            projection depends on it).

    Returns:
        A fresh CalculationResult.
    """
    preferences = preferences or UnitPreferences()
    weights = station_weights_lbs(aircraft, loading)

    takeoff = aggregate(aircraft, weights)
    zfw = zero_fuel(aircraft, weights)
    fuel_lbs = total_fuel_lbs(aircraft, weights)

    envelope = aircraft.envelope
    forward_limit, aft_limit = envelope.limits_at(takeoff.weight_lbs)

    errors = []
    if takeoff.weight_lbs > aircraft.max_takeoff_weight_lbs:
        errors.append(
            f"Total weight ({takeoff.weight_lbs:.1f} lbs) exceeds MTOW "
            f"({aircraft.max_takeoff_weight_lbs:.0f} lbs)"
        )
    warnings = validate_loading(aircraft, weights)

    landing = None
    if fuel_burn is not None and fuel_burn.is_active:
        landing = project_landing(
            zfw,
            fuel_lbs,
            fuel_burn,
            aircraft.fuel_arm_mm,
            lbs_per_gallon=aircraft.fuel_density_lbs_per_gallon,
            fuel_unit=preferences.fuel_unit,
            max_landing_weight_lbs=aircraft.max_landing_weight_lbs,
        )

    result = CalculationResult(
        total_weight_lbs=takeoff.weight_lbs,
        total_moment_kg_mm=takeoff.moment_kg_mm,
        cg_mm=takeoff.cg_mm,
        percent_mac=percent_mac(takeoff.cg_mm, aircraft.mac_start_mm, aircraft.mac_length_mm),
        within_envelope=envelope.within_envelope(takeoff.weight_lbs, takeoff.cg_mm),
        weight_margin_lbs=aircraft.max_takeoff_weight_lbs - takeoff.weight_lbs,
        cg_margin=envelope.margins(takeoff.weight_lbs, takeoff.cg_mm),
        forward_limit_mm=forward_limit,
        aft_limit_mm=aft_limit,
        zero_fuel_weight_lbs=zfw.weight_lbs,
        zero_fuel_moment_kg_mm=zfw.moment_kg_mm,
        zero_fuel_cg_mm=zfw.cg_mm,
        fuel_weight_lbs=fuel_lbs,
        breakdown=weight_breakdown(aircraft, weights),
        load_path=load_path(aircraft, weights),
        warnings=tuple(warnings),
        errors=tuple(errors),
        landing=landing,
    )

    logger.debug(
        "%s: %.1f lbs @ %.1f mm (%.1f%% MAC), %s, %d warning(s), %d error(s)",
        aircraft.registration,
        result.total_weight_lbs,
        result.cg_mm,
        result.percent_mac,
        result.status.value,
        len(result.warnings),
        len(result.errors),
    )

    return result
