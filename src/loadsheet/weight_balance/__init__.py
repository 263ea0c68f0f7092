"""Weight and balance computation.

This package turns a loading snapshot into total weight, CG, envelope
compliance, a load path and an optional landing projection.
"""

from loadsheet.weight_balance.aggregator import (
    MassProperties,
    aggregate,
    cg_from_moment,
    station_moment,
    station_weights_lbs,
    weight_breakdown,
    zero_fuel,
)
from loadsheet.weight_balance.calculator import (
    CalculationResult,
    LoadingStatus,
    compute,
    validate_loading,
)
from loadsheet.weight_balance.fuel_burn import LandingProjection, project_landing
from loadsheet.weight_balance.load_path import LOAD_ORDER, LoadPathPoint, iter_load_path, load_path
from loadsheet.weight_balance.loading import (
    ConvertFuelUnits,
    FuelBurnPlan,
    LoadingCommand,
    LoadingInput,
    ResetAll,
    SyncFuelTanks,
    UnitPreferences,
    UpdateStation,
    reduce_loading,
)

__all__ = [
    "LOAD_ORDER",
    "CalculationResult",
    "ConvertFuelUnits",
    "FuelBurnPlan",
    "LandingProjection",
    "LoadPathPoint",
    "LoadingCommand",
    "LoadingInput",
    "LoadingStatus",
    "MassProperties",
    "ResetAll",
    "SyncFuelTanks",
    "UnitPreferences",
    "UpdateStation",
    "aggregate",
    "cg_from_moment",
    "compute",
    "iter_load_path",
    "load_path",
    "project_landing",
    "reduce_loading",
    "station_moment",
    "station_weights_lbs",
    "validate_loading",
    "weight_breakdown",
    "zero_fuel",
]
