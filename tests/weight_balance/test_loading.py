"""Tests for loading snapshots and the command reducer."""

import math

import pytest

from loadsheet.aircraft import AircraftProfile
from loadsheet.units import FuelUnit
from loadsheet.weight_balance import (
    ConvertFuelUnits,
    LoadingInput,
    ResetAll,
    SyncFuelTanks,
    UpdateStation,
    reduce_loading,
)


class TestLoadingInput:
    """Test LoadingInput validation and access."""

    def test_missing_station_is_empty(self) -> None:
        """Test unspecified stations read as zero."""
        assert LoadingInput().value("pilot") == 0.0

    def test_values_coerced_to_float(self) -> None:
        """Test integer input is stored as float."""
        loading = LoadingInput({"pilot": 170})
        assert isinstance(loading.value("pilot"), float)

    @pytest.mark.parametrize("bad", [-1.0, math.nan, math.inf])
    def test_rejects_invalid(self, bad: float) -> None:
        """Test negative and non-finite values are refused."""
        with pytest.raises(ValueError, match="pilot"):
            LoadingInput({"pilot": bad})

    def test_input_mapping_copied(self) -> None:
        """Test later changes to the source dict do not leak in."""
        source = {"pilot": 170.0}
        loading = LoadingInput(source)
        source["pilot"] = 10.0
        assert loading.value("pilot") == 170.0

    def test_values_read_only(self) -> None:
        """Test the stored values cannot be changed in place."""
        loading = LoadingInput({"pilot": 170.0})
        with pytest.raises(TypeError):
            loading.values["pilot"] = 10.0  # type: ignore[index]

    def test_hashable(self) -> None:
        """Test equal snapshots hash alike and can key a dict."""
        first = LoadingInput({"pilot": 170.0, "fuel_left": 20.0})
        second = LoadingInput({"fuel_left": 20, "pilot": 170})

        assert first == second
        assert hash(first) == hash(second)
        assert {first: "cached"}[second] == "cached"
        assert first != LoadingInput({"pilot": 170.0, "fuel_left": 20.0}, fuel_unit=FuelUnit.LITRES)


class TestReduceLoading:
    """Test reduce_loading for each command."""

    def test_update_station(self, vh_ypb: AircraftProfile) -> None:
        """Test update returns a new snapshot and leaves the old one alone."""
        before = LoadingInput({"pilot": 170.0})
        after = reduce_loading(before, UpdateStation("front_passenger", 150.0), vh_ypb)

        assert after.value("front_passenger") == 150.0
        assert after.value("pilot") == 170.0
        assert before.value("front_passenger") == 0.0

    def test_update_rejects_negative(self, vh_ypb: AircraftProfile) -> None:
        """Test invalid updates raise."""
        with pytest.raises(ValueError):
            reduce_loading(LoadingInput(), UpdateStation("pilot", -5.0), vh_ypb)

    def test_sync_fuel_tanks(self, vh_ypb: AircraftProfile) -> None:
        """Test right tank copies the left tank by default."""
        state = LoadingInput({"fuel_left": 30.0, "fuel_right": 10.0})
        synced = reduce_loading(state, SyncFuelTanks(), vh_ypb)
        assert synced.value("fuel_right") == 30.0
        assert synced.value("fuel_left") == 30.0

    def test_convert_fuel_units(self, vh_ypb: AircraftProfile) -> None:
        """Test fuel quantities follow the unit, weights do not."""
        state = LoadingInput({"pilot": 170.0, "fuel_left": 20.0, "fuel_right": 10.0})
        converted = reduce_loading(state, ConvertFuelUnits(FuelUnit.LITRES), vh_ypb)

        assert converted.fuel_unit is FuelUnit.LITRES
        assert converted.value("fuel_left") == pytest.approx(75.7082)
        assert converted.value("fuel_right") == pytest.approx(37.8541)
        assert converted.value("pilot") == 170.0

        back = reduce_loading(converted, ConvertFuelUnits(FuelUnit.GALLONS), vh_ypb)
        assert back.value("fuel_left") == pytest.approx(20.0)

    def test_convert_to_same_unit(self, vh_ypb: AircraftProfile) -> None:
        """Test converting to the current unit is a no-op."""
        state = LoadingInput({"fuel_left": 20.0})
        assert reduce_loading(state, ConvertFuelUnits(FuelUnit.GALLONS), vh_ypb) is state

    def test_reset_all_keeps_unit(self, vh_ypb: AircraftProfile) -> None:
        """Test reset empties every station."""
        state = LoadingInput({"pilot": 170.0, "fuel_left": 80.0}, fuel_unit=FuelUnit.LITRES)
        reset = reduce_loading(state, ResetAll(), vh_ypb)
        assert reset.values == {}
        assert reset.fuel_unit is FuelUnit.LITRES

    def test_unknown_command(self, vh_ypb: AircraftProfile) -> None:
        """Test a non-command is a programming error."""
        with pytest.raises(TypeError, match="Unknown loading command"):
            reduce_loading(LoadingInput(), "UPDATE_PILOT", vh_ypb)  # type: ignore[arg-type]

    def test_replay_is_deterministic(self, vh_ypb: AircraftProfile) -> None:
        """Test replaying the same commands gives equal snapshots."""
        commands = [
            UpdateStation("pilot", 170.0),
            UpdateStation("fuel_left", 40.0),
            SyncFuelTanks(),
            ConvertFuelUnits(FuelUnit.LITRES),
        ]

        def replay() -> LoadingInput:
            state = LoadingInput()
            for command in commands:
                state = reduce_loading(state, command, vh_ypb)
            return state

        assert replay() == replay()
