"""Loading input snapshot and the commands that change it.

The caller owns a LoadingInput and replaces it on every edit. Edits are
expressed as command objects and applied by reduce_loading(), which returns a
new snapshot and leaves the old one untouched:

    state = LoadingInput()
    state = reduce_loading(state, UpdateStation("pilot", 170.0), profile)
    state = reduce_loading(state, UpdateStation("fuel_left", 40.0), profile)
    state = reduce_loading(state, SyncFuelTanks(), profile)
    result = compute(profile, state)
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from loadsheet.aircraft.profile import AircraftProfile
from loadsheet.core.logging_system import get_logger
from loadsheet.units.conversions import DistanceUnit, FuelUnit, WeightUnit, convert_fuel_quantity

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoadingInput:
    """Current value of every loading station.

    Weight stations hold pounds. Fuel stations hold a volume in fuel_unit.
    Stations that are not listed are empty. Values are stored read-only, so
    a snapshot is hashable and can key a cache of results.

    Attributes:
        values: Station id -> value
        fuel_unit: Unit of the fuel station values
    """

    values: Mapping[str, float] = field(default_factory=dict)
    fuel_unit: FuelUnit = FuelUnit.GALLONS

    def __post_init__(self) -> None:
        checked = {}
        for station_id, value in self.values.items():
            value = float(value)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Station {station_id} value must be a non-negative number, got {value}")
            checked[station_id] = value
        object.__setattr__(self, "values", MappingProxyType(checked))

    def __hash__(self) -> int:
        return hash((frozenset(self.values.items()), self.fuel_unit))

    def value(self, station_id: str) -> float:
        return self.values.get(station_id, 0.0)

    def with_value(self, station_id: str, value: float) -> "LoadingInput":
        return replace(self, values={**self.values, station_id: value})


@dataclass(frozen=True)
class UnitPreferences:
    """Units the caller wants to see at the output boundary."""

    weight_unit: WeightUnit = WeightUnit.LBS
    fuel_unit: FuelUnit = FuelUnit.GALLONS
    distance_unit: DistanceUnit = DistanceUnit.MM


@dataclass(frozen=True)
class FuelBurnPlan:
    """Planned fuel consumption for the landing projection.

    Attributes:
        burn_rate_gph: Fuel burn in US gallons per hour
        duration_hours: Flight time in hours
    """

    burn_rate_gph: float
    duration_hours: float

    @property
    def is_active(self) -> bool:
        """A plan only produces a projection when both figures are positive."""
        return self.burn_rate_gph > 0 and self.duration_hours > 0


@dataclass(frozen=True)
class UpdateStation:
    """Set one station to a new value (lbs, or fuel volume for tanks)."""

    station_id: str
    value: float


@dataclass(frozen=True)
class SyncFuelTanks:
    """Copy one tank's quantity into another."""

    source: str = "fuel_left"
    target: str = "fuel_right"


@dataclass(frozen=True)
class ConvertFuelUnits:
    """Re-express every fuel quantity in a different volume unit."""

    unit: FuelUnit


@dataclass(frozen=True)
class ResetAll:
    """Empty every station, keeping the fuel unit."""


LoadingCommand = UpdateStation | SyncFuelTanks | ConvertFuelUnits | ResetAll


def reduce_loading(
    state: LoadingInput, command: LoadingCommand, aircraft: AircraftProfile
) -> LoadingInput:
    """Apply a command to a loading snapshot.

    Args:
        state: Current snapshot (not modified).
        command: Command to apply.
        aircraft: Profile, used to tell fuel stations from weight stations.

    Returns:
        The new snapshot.

    Raises:
        ValueError: If an update carries a negative or non-finite value.
        TypeError: If command is not a LoadingCommand.
    """
    logger.debug("Applying %s", command)

    if isinstance(command, UpdateStation):
        return state.with_value(command.station_id, command.value)

    if isinstance(command, SyncFuelTanks):
        return state.with_value(command.target, state.value(command.source))

    if isinstance(command, ConvertFuelUnits):
        if command.unit is state.fuel_unit:
            return state
        values = dict(state.values)
        for station in aircraft.fuel_stations:
            if station.id in values:
                values[station.id] = convert_fuel_quantity(
                    values[station.id], state.fuel_unit, command.unit
                )
        return LoadingInput(values=values, fuel_unit=command.unit)

    if isinstance(command, ResetAll):
        return LoadingInput(fuel_unit=state.fuel_unit)

    raise TypeError(f"Unknown loading command: {command!r}")
