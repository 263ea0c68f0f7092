"""Aircraft profile: the static descriptor the engine computes against.

A profile is loaded once per session and never modified. All weights are in
pounds and all arms in millimeters aft of the datum.
"""

from dataclasses import dataclass, field
from enum import Enum

from loadsheet.aircraft.envelope import CGEnvelope
from loadsheet.units.conversions import GALLONS_TO_LITRES

# Relative tolerance when comparing the gallon and litre fuel capacities.
_CAPACITY_TOLERANCE = 1e-3


class ProfileError(ValueError):
    """Raised when an aircraft profile violates its invariants."""


class FuelType(Enum):
    """Fuel grades with their density in pounds per US gallon."""

    AVGAS_100LL = "avgas_100ll"  # 6.0 lbs/gal
    MOGAS = "mogas"  # 6.0 lbs/gal
    JET_A = "jet_a"  # 6.7 lbs/gal

    @property
    def lbs_per_gallon(self) -> float:
        return _FUEL_DENSITY_LBS_PER_GALLON[self]


_FUEL_DENSITY_LBS_PER_GALLON = {
    FuelType.AVGAS_100LL: 6.0,
    FuelType.MOGAS: 6.0,
    FuelType.JET_A: 6.7,
}


class StationCategory(Enum):
    """What a loading station carries."""

    PILOT = "pilot"
    PASSENGER = "passenger"
    BAGGAGE = "baggage"
    FUEL = "fuel"


@dataclass(frozen=True)
class LoadingStation:
    """A place in the aircraft where load can be added.

    Attributes:
        id: Station identifier (e.g., "pilot", "baggage_a", "fuel_left")
        name: Human-readable label (e.g., "Baggage Area A")
        arm_mm: Distance aft of datum (mm)
        max_weight_lbs: Placarded maximum for this station (lbs)
        required: Whether the station must be occupied for flight
        category: What the station carries
    """

    id: str
    name: str
    arm_mm: float
    max_weight_lbs: float
    required: bool = False
    category: StationCategory = StationCategory.PASSENGER

    @property
    def is_fuel(self) -> bool:
        return self.category is StationCategory.FUEL


@dataclass(frozen=True)
class AircraftProfile:
    """Static weight and balance data for one airframe.

    Attributes:
        registration: Aircraft registration (e.g., "VH-YPB")
        model: Aircraft model name
        empty_weight_lbs: Basic empty weight (lbs)
        empty_cg_mm: Basic empty CG (mm aft of datum)
        max_takeoff_weight_lbs: MTOW (lbs)
        max_landing_weight_lbs: MLW (lbs)
        max_ramp_weight_lbs: Maximum ramp weight (lbs)
        fuel_capacity_gallons: Usable fuel (US gal)
        fuel_capacity_litres: Usable fuel (L), must agree with the gallon figure
        stations: Loading stations in display order
        envelope: CG envelope
        mac_start_mm: Leading edge of the mean aerodynamic chord (mm)
        mac_length_mm: Length of the mean aerodynamic chord (mm)
        max_combined_baggage_lbs: Limit on all baggage areas together (lbs)
        fuel_type: Fuel grade, which fixes the fuel density
        date_approved: Date of the weight and balance approval
        work_order: Work order reference of the approval
    """

    registration: str
    model: str
    empty_weight_lbs: float
    empty_cg_mm: float
    max_takeoff_weight_lbs: float
    max_landing_weight_lbs: float
    max_ramp_weight_lbs: float
    fuel_capacity_gallons: float
    fuel_capacity_litres: float
    stations: tuple[LoadingStation, ...]
    envelope: CGEnvelope
    mac_start_mm: float
    mac_length_mm: float
    max_combined_baggage_lbs: float
    fuel_type: FuelType = FuelType.AVGAS_100LL
    date_approved: str = ""
    work_order: str = ""
    _by_id: dict[str, LoadingStation] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "stations", tuple(self.stations))

        by_id: dict[str, LoadingStation] = {}
        for station in self.stations:
            if station.id in by_id:
                raise ProfileError(f"Duplicate station id: {station.id}")
            by_id[station.id] = station
        object.__setattr__(self, "_by_id", by_id)

        expected_litres = self.fuel_capacity_gallons * GALLONS_TO_LITRES
        if abs(expected_litres - self.fuel_capacity_litres) > _CAPACITY_TOLERANCE * max(expected_litres, 1.0):
            raise ProfileError(
                f"Fuel capacity mismatch: {self.fuel_capacity_gallons} gal is "
                f"{expected_litres:.1f} L, profile says {self.fuel_capacity_litres} L"
            )

        fuel_arms = {s.arm_mm for s in self.fuel_stations}
        if len(fuel_arms) > 1:
            raise ProfileError(f"Fuel stations must share one arm, got {sorted(fuel_arms)}")

        if self.mac_length_mm <= 0:
            raise ProfileError("MAC length must be positive")

    def station(self, station_id: str) -> LoadingStation | None:
        return self._by_id.get(station_id)

    def stations_in(self, category: StationCategory) -> list[LoadingStation]:
        return [s for s in self.stations if s.category is category]

    @property
    def fuel_stations(self) -> list[LoadingStation]:
        return self.stations_in(StationCategory.FUEL)

    @property
    def fuel_arm_mm(self) -> float:
        """Arm shared by all fuel tanks (0 for a profile without tanks)."""
        fuel = self.fuel_stations
        return fuel[0].arm_mm if fuel else 0.0

    @property
    def fuel_density_lbs_per_gallon(self) -> float:
        return self.fuel_type.lbs_per_gallon
