"""Aircraft descriptors: profile, loading stations and CG envelope.

Profiles are static data. They are loaded once from YAML and passed into
every calculation unchanged.
"""

from loadsheet.aircraft.envelope import (
    CGEnvelope,
    CGMargins,
    EnvelopeError,
    EnvelopePoint,
    percent_mac,
)
from loadsheet.aircraft.loader import (
    available_profiles,
    load_builtin_profile,
    load_profile,
    profile_from_config,
)
from loadsheet.aircraft.profile import (
    AircraftProfile,
    FuelType,
    LoadingStation,
    ProfileError,
    StationCategory,
)

__all__ = [
    "AircraftProfile",
    "CGEnvelope",
    "CGMargins",
    "EnvelopeError",
    "EnvelopePoint",
    "FuelType",
    "LoadingStation",
    "ProfileError",
    "StationCategory",
    "available_profiles",
    "load_builtin_profile",
    "load_profile",
    "percent_mac",
    "profile_from_config",
]
