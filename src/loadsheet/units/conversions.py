"""Unit conversions for weight and balance inputs and outputs.

Internally the engine works in pounds for weight, kilograms for moment mass,
millimeters for arms and CG, and pounds for fuel. These helpers translate to
and from whatever the caller prefers.

Fuel density has a single source of truth: pounds per US gallon. The litre
path always goes through gallons, so 10 gallons and 37.8541 litres weigh the
same.
"""

from enum import Enum

LBS_TO_KG = 0.453592
GALLONS_TO_LITRES = 3.78541
INCHES_TO_MM = 25.4

AVGAS_LBS_PER_GALLON = 6.0


class WeightUnit(Enum):
    """Weight units accepted at the input/output boundary."""

    LBS = "lbs"
    KG = "kg"


class FuelUnit(Enum):
    """Fuel volume units."""

    GALLONS = "gallons"
    LITRES = "litres"


class DistanceUnit(Enum):
    """Arm and CG distance units."""

    INCHES = "inches"
    MM = "mm"


def lbs_to_kg(lbs: float) -> float:
    return lbs * LBS_TO_KG


def kg_to_lbs(kg: float) -> float:
    return kg / LBS_TO_KG


def gallons_to_litres(gallons: float) -> float:
    return gallons * GALLONS_TO_LITRES


def litres_to_gallons(litres: float) -> float:
    return litres / GALLONS_TO_LITRES


def inches_to_mm(inches: float) -> float:
    return inches * INCHES_TO_MM


def mm_to_inches(mm: float) -> float:
    return mm / INCHES_TO_MM


def kg_per_litre(lbs_per_gallon: float = AVGAS_LBS_PER_GALLON) -> float:
    """Express a lb/gal density in kg/L.

    Args:
        lbs_per_gallon: Fuel density in pounds per US gallon.

    Returns:
        The same density in kilograms per litre (6.0 lb/gal is about 0.719 kg/L).
    """
    return lbs_to_kg(lbs_per_gallon) / GALLONS_TO_LITRES


def gallons_to_weight_lbs(gallons: float, lbs_per_gallon: float = AVGAS_LBS_PER_GALLON) -> float:
    return gallons * lbs_per_gallon


def litres_to_weight_lbs(litres: float, lbs_per_gallon: float = AVGAS_LBS_PER_GALLON) -> float:
    return gallons_to_weight_lbs(litres_to_gallons(litres), lbs_per_gallon)


def weight_lbs_to_gallons(lbs: float, lbs_per_gallon: float = AVGAS_LBS_PER_GALLON) -> float:
    return lbs / lbs_per_gallon


def convert_fuel_quantity(quantity: float, from_unit: FuelUnit, to_unit: FuelUnit) -> float:
    """Convert a fuel volume between gallons and litres.

    Examples:
        >>> convert_fuel_quantity(10.0, FuelUnit.GALLONS, FuelUnit.LITRES)
        37.8541
    """
    if from_unit is to_unit:
        return quantity
    if from_unit is FuelUnit.GALLONS:
        return gallons_to_litres(quantity)
    return litres_to_gallons(quantity)


def fuel_weight_lbs(
    quantity: float, unit: FuelUnit, lbs_per_gallon: float = AVGAS_LBS_PER_GALLON
) -> float:
    """Get fuel weight in pounds regardless of the volume unit.

    Args:
        quantity: Fuel volume in the given unit.
        unit: Unit of the quantity.
        lbs_per_gallon: Fuel density.

    Returns:
        Fuel weight in pounds.
    """
    if unit is FuelUnit.GALLONS:
        return gallons_to_weight_lbs(quantity, lbs_per_gallon)
    return litres_to_weight_lbs(quantity, lbs_per_gallon)


def fuel_volume(
    weight_lbs: float, unit: FuelUnit, lbs_per_gallon: float = AVGAS_LBS_PER_GALLON
) -> float:
    """Inverse of fuel_weight_lbs(): pounds of fuel to a volume in unit."""
    gallons = weight_lbs_to_gallons(weight_lbs, lbs_per_gallon)
    return convert_fuel_quantity(gallons, FuelUnit.GALLONS, unit)


def convert_weight_for_display(weight_lbs: float, unit: WeightUnit) -> float:
    if unit is WeightUnit.KG:
        return lbs_to_kg(weight_lbs)
    return weight_lbs


def convert_weight_to_lbs(weight: float, unit: WeightUnit) -> float:
    """Convert a weight entered in unit back to pounds for calculation."""
    if unit is WeightUnit.KG:
        return kg_to_lbs(weight)
    return weight


def convert_distance_for_display(distance_mm: float, unit: DistanceUnit) -> float:
    if unit is DistanceUnit.INCHES:
        return mm_to_inches(distance_mm)
    return distance_mm


def round_to_precision(value: float, precision: int = 1) -> float:
    """Round half away from zero to the given number of decimals.

    Unlike round(), 0.25 rounds to 0.3 at one decimal, which matches how
    loading sheets are written by hand.
    """
    factor = 10**precision
    scaled = abs(value) * factor
    rounded = int(scaled + 0.5) / factor
    return rounded if value >= 0 else -rounded


def format_number(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}"
