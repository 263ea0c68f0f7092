"""Build aircraft profiles from YAML configuration.

Profiles are YAML documents with an 'aircraft' root. Station arms may be
given in millimeters (arm_mm) or inches (arm_in); everything is stored in
millimeters once loaded.

Typical usage:
    profile = load_builtin_profile("VH-YPB")
    profile = load_profile("config/aircraft/my_182.yaml")
"""

from pathlib import Path
from typing import Any

from loadsheet.aircraft.envelope import CGEnvelope, EnvelopeError
from loadsheet.aircraft.profile import (
    AircraftProfile,
    FuelType,
    LoadingStation,
    ProfileError,
    StationCategory,
)
from loadsheet.core.config import ConfigError, ConfigLoader
from loadsheet.core.logging_system import get_logger
from loadsheet.units.conversions import inches_to_mm

logger = get_logger(__name__)

DATA_DIR = Path(__file__).parent / "data"


def load_profile(path: str | Path) -> AircraftProfile:
    """Load an aircraft profile from a YAML file.

    Args:
        path: Path to the profile YAML file.

    Returns:
        The validated profile.

    Raises:
        ConfigError: If the file cannot be read or parsed.
        ProfileError: If the data violates a profile invariant.
    """
    config = ConfigLoader.load(path)
    profile = profile_from_config(config)
    logger.info(
        "Loaded aircraft %s (%s): empty=%.0f lbs @ %.0f mm, MTOW=%.0f lbs, %d stations",
        profile.registration,
        profile.model,
        profile.empty_weight_lbs,
        profile.empty_cg_mm,
        profile.max_takeoff_weight_lbs,
        len(profile.stations),
    )
    return profile


def profile_from_config(config: ConfigLoader) -> AircraftProfile:
    """Build a profile from an already parsed configuration.

    Raises:
        ProfileError: If a required key is missing or a value is invalid.
    """
    try:
        config.get_section("aircraft")
        stations = tuple(_parse_station(s) for s in config.get("aircraft.stations", []))
        envelope = CGEnvelope.from_polyline(
            (float(w), float(cg)) for w, cg in config.require("aircraft.envelope_mm")
        )
        return AircraftProfile(
            registration=str(config.require("aircraft.registration")),
            model=str(config.get("aircraft.model", "")),
            empty_weight_lbs=float(config.require("aircraft.weights.empty_lbs")),
            empty_cg_mm=_distance_mm(config.get_section("aircraft"), "empty_cg"),
            max_takeoff_weight_lbs=float(config.require("aircraft.weights.max_takeoff_lbs")),
            max_landing_weight_lbs=float(config.require("aircraft.weights.max_landing_lbs")),
            max_ramp_weight_lbs=float(config.require("aircraft.weights.max_ramp_lbs")),
            max_combined_baggage_lbs=float(
                config.require("aircraft.weights.max_combined_baggage_lbs")
            ),
            fuel_capacity_gallons=float(config.require("aircraft.fuel_capacity.gallons")),
            fuel_capacity_litres=float(config.require("aircraft.fuel_capacity.litres")),
            mac_start_mm=float(config.require("aircraft.mac.start_mm")),
            mac_length_mm=float(config.require("aircraft.mac.length_mm")),
            fuel_type=FuelType(config.get("aircraft.fuel_type", FuelType.AVGAS_100LL.value)),
            stations=stations,
            envelope=envelope,
            date_approved=str(config.get("aircraft.date_approved", "")),
            work_order=str(config.get("aircraft.work_order", "")),
        )
    except ProfileError:
        raise
    except (ConfigError, EnvelopeError, KeyError, TypeError, ValueError) as e:
        raise ProfileError(f"Invalid aircraft profile {config.source}: {e}") from e


def _parse_station(data: dict[str, Any]) -> LoadingStation:
    return LoadingStation(
        id=str(data["id"]),
        name=str(data.get("name", data["id"])),
        arm_mm=_distance_mm(data, "arm"),
        max_weight_lbs=float(data["max_weight_lbs"]),
        required=bool(data.get("required", False)),
        category=StationCategory(data.get("category", StationCategory.PASSENGER.value)),
    )


def _distance_mm(data: dict[str, Any], key: str) -> float:
    """Read '<key>_mm' or '<key>_in' from a mapping, in millimeters."""
    if f"{key}_mm" in data:
        return float(data[f"{key}_mm"])
    if f"{key}_in" in data:
        return inches_to_mm(float(data[f"{key}_in"]))
    raise KeyError(f"{key}_mm")


def available_profiles() -> list[str]:
    """List the registrations of the profiles shipped with the package."""
    registrations = []
    for path in sorted(DATA_DIR.glob("*.yaml")):
        registration = ConfigLoader.load(path).get("aircraft.registration")
        if registration:
            registrations.append(str(registration))
    return registrations


def load_builtin_profile(registration: str) -> AircraftProfile:
    """Load one of the shipped profiles by registration.

    Args:
        registration: Aircraft registration, e.g. "VH-YPB" (case-insensitive).

    Raises:
        ConfigError: If no profile is shipped for that registration.
    """
    path = DATA_DIR / f"{registration.strip().lower().replace('-', '_')}.yaml"
    if not path.exists():
        raise ConfigError(f"No built-in profile for {registration}")
    return load_profile(path)
