"""Unit conversions between imperial and metric loading units."""

from loadsheet.units.conversions import (
    AVGAS_LBS_PER_GALLON,
    GALLONS_TO_LITRES,
    INCHES_TO_MM,
    LBS_TO_KG,
    DistanceUnit,
    FuelUnit,
    WeightUnit,
    convert_distance_for_display,
    convert_fuel_quantity,
    convert_weight_for_display,
    convert_weight_to_lbs,
    format_number,
    fuel_volume,
    fuel_weight_lbs,
    gallons_to_litres,
    gallons_to_weight_lbs,
    inches_to_mm,
    kg_per_litre,
    kg_to_lbs,
    lbs_to_kg,
    litres_to_gallons,
    litres_to_weight_lbs,
    mm_to_inches,
    round_to_precision,
    weight_lbs_to_gallons,
)

__all__ = [
    "AVGAS_LBS_PER_GALLON",
    "GALLONS_TO_LITRES",
    "INCHES_TO_MM",
    "LBS_TO_KG",
    "DistanceUnit",
    "FuelUnit",
    "WeightUnit",
    "convert_distance_for_display",
    "convert_fuel_quantity",
    "convert_weight_for_display",
    "convert_weight_to_lbs",
    "format_number",
    "fuel_volume",
    "fuel_weight_lbs",
    "gallons_to_litres",
    "gallons_to_weight_lbs",
    "inches_to_mm",
    "kg_per_litre",
    "kg_to_lbs",
    "lbs_to_kg",
    "litres_to_gallons",
    "litres_to_weight_lbs",
    "mm_to_inches",
    "round_to_precision",
    "weight_lbs_to_gallons",
]
