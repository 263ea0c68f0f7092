"""Pytest configuration and fixtures for all tests."""

from dataclasses import replace

import pytest

from loadsheet.aircraft import AircraftProfile, load_builtin_profile
from loadsheet.aircraft.profile import LoadingStation, StationCategory


@pytest.fixture(scope="session")
def vh_ypb() -> AircraftProfile:
    """The shipped Cessna 182T profile."""
    return load_builtin_profile("VH-YPB")


@pytest.fixture
def roomy_baggage_profile(vh_ypb: AircraftProfile) -> AircraftProfile:
    """VH-YPB with 150 lbs per baggage area, combined limit unchanged at 200 lbs."""
    stations = tuple(
        replace(s, max_weight_lbs=150.0) if s.category is StationCategory.BAGGAGE else s
        for s in vh_ypb.stations
    )
    return replace(vh_ypb, stations=stations)


@pytest.fixture
def bare_profile(vh_ypb: AircraftProfile) -> AircraftProfile:
    """A weightless airframe with a single pilot seat, for guard cases."""
    return replace(
        vh_ypb,
        empty_weight_lbs=0.0,
        empty_cg_mm=0.0,
        stations=(
            LoadingStation("pilot", "Pilot", 940.0, 400.0, True, StationCategory.PILOT),
        ),
    )
