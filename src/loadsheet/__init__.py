"""Weight and balance engine for light aircraft.

Typical usage:
    from loadsheet import LoadingInput, compute, load_builtin_profile

    profile = load_builtin_profile("VH-YPB")
    result = compute(profile, LoadingInput({"pilot": 170.0, "fuel_left": 43.5}))
    print(result.total_weight_lbs, result.cg_mm, result.status)
"""

from loadsheet.aircraft import AircraftProfile, load_builtin_profile, load_profile
from loadsheet.weight_balance import (
    CalculationResult,
    FuelBurnPlan,
    LoadingInput,
    LoadingStatus,
    UnitPreferences,
    compute,
    reduce_loading,
)

__version__ = "0.1.0"

__all__ = [
    "AircraftProfile",
    "CalculationResult",
    "FuelBurnPlan",
    "LoadingInput",
    "LoadingStatus",
    "UnitPreferences",
    "compute",
    "load_builtin_profile",
    "load_profile",
    "reduce_loading",
]
