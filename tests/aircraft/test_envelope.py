"""Tests for the CG envelope model."""

import numpy as np
import pytest

from loadsheet.aircraft.envelope import CGEnvelope, EnvelopeError, EnvelopePoint, percent_mac


@pytest.fixture
def envelope() -> CGEnvelope:
    """Cessna 182T normal category envelope (mm)."""
    return CGEnvelope(
        min_weight=2100.0,
        max_weight=3100.0,
        forward_flat_cg=889.0,
        forward_breakpoint_weight=2250.0,
        forward_max_weight_cg=1028.7,
        aft_cg=1201.4,
    )


class TestForwardLimit:
    """Test the two-segment forward limit."""

    def test_flat_below_breakpoint(self, envelope: CGEnvelope) -> None:
        """Test the limit is constant up to the breakpoint."""
        assert envelope.forward_limit(2100.0) == 889.0
        assert envelope.forward_limit(2200.0) == 889.0
        assert envelope.forward_limit(2250.0) == 889.0

    def test_taper_above_breakpoint(self, envelope: CGEnvelope) -> None:
        """Test linear interpolation between breakpoint and max weight."""
        midpoint = (2250.0 + 3100.0) / 2
        assert envelope.forward_limit(midpoint) == pytest.approx((889.0 + 1028.7) / 2)
        assert envelope.forward_limit(3100.0) == pytest.approx(1028.7)

    def test_continuous_at_breakpoint(self, envelope: CGEnvelope) -> None:
        """Test the limit does not jump where the flat segment meets the taper."""
        bp = envelope.forward_breakpoint_weight

        assert abs(envelope.forward_limit(bp) - envelope.taper_segment(bp)) <= 1e-9
        assert abs(envelope.forward_limit(bp - 1e-9) - envelope.forward_limit(bp + 1e-9)) <= 1e-9

    def test_segment_selection(self, envelope: CGEnvelope) -> None:
        """Test each side of the breakpoint uses its own segment."""
        assert envelope.forward_limit(2200.0) == envelope.flat_segment(2200.0)
        assert envelope.forward_limit(2800.0) == envelope.taper_segment(2800.0)
        assert envelope.taper_segment(2200.0) < envelope.forward_limit(2200.0)

    def test_clamps_outside_range(self, envelope: CGEnvelope) -> None:
        """Test weights outside the envelope use the end values."""
        assert envelope.forward_limit(1500.0) == 889.0
        assert envelope.forward_limit(3500.0) == pytest.approx(1028.7)

    def test_curve_matches_scalar(self, envelope: CGEnvelope) -> None:
        """Test the vectorized curve agrees with the scalar limit."""
        weights = np.linspace(2100.0, 3100.0, 11)
        curve = envelope.forward_limit_curve(weights)
        assert curve.shape == (11,)
        for w, cg in zip(weights, curve):
            assert cg == pytest.approx(envelope.forward_limit(float(w)))

    def test_breakpoint_at_min_weight(self) -> None:
        """Test a forward limit that tapers over the whole range."""
        env = CGEnvelope(2000.0, 3000.0, 900.0, 2000.0, 1000.0, 1200.0)
        assert env.forward_limit(2000.0) == pytest.approx(900.0)
        assert env.forward_limit(2500.0) == pytest.approx(950.0)


class TestEnvelopeChecks:
    """Test within-envelope and margin computation."""

    def test_aft_limit_constant(self, envelope: CGEnvelope) -> None:
        """Test aft limit does not depend on weight."""
        assert envelope.aft_limit(2100.0) == envelope.aft_limit(3100.0) == 1201.4

    def test_inside(self, envelope: CGEnvelope) -> None:
        """Test a typical loaded point."""
        assert envelope.within_envelope(2699.0, 1012.6)

    def test_boundaries_are_inside(self, envelope: CGEnvelope) -> None:
        """Test limits are inclusive."""
        assert envelope.within_envelope(2100.0, 889.0)
        assert envelope.within_envelope(3100.0, 1201.4)

    def test_too_heavy(self, envelope: CGEnvelope) -> None:
        """Test weight above the envelope."""
        assert not envelope.within_envelope(3100.1, 1100.0)

    def test_too_light(self, envelope: CGEnvelope) -> None:
        """Test weight below the envelope."""
        assert not envelope.within_envelope(2007.0, 975.0)

    def test_cg_forward_of_taper(self, envelope: CGEnvelope) -> None:
        """Test a CG legal at light weight becomes illegal at heavy weight."""
        assert envelope.within_envelope(2200.0, 950.0)
        assert not envelope.within_envelope(3000.0, 950.0)

    def test_cg_aft(self, envelope: CGEnvelope) -> None:
        """Test a CG past the aft limit."""
        assert not envelope.within_envelope(2500.0, 1210.0)

    def test_margins_signed(self, envelope: CGEnvelope) -> None:
        """Test margins are positive inside and negative past a limit."""
        margins = envelope.margins(2200.0, 1000.0)
        assert margins.forward == pytest.approx(111.0)
        assert margins.aft == pytest.approx(201.4)

        aft_violation = envelope.margins(2200.0, 1250.0)
        assert aft_violation.aft == pytest.approx(-48.6)

        forward_violation = envelope.margins(2200.0, 880.0)
        assert forward_violation.forward == pytest.approx(-9.0)


class TestPolyline:
    """Test the chart polyline and building from one."""

    def test_polyline_shape(self, envelope: CGEnvelope) -> None:
        """Test forward points then aft points."""
        points = envelope.polyline()
        assert points[:3] == [
            EnvelopePoint(2100.0, 889.0),
            EnvelopePoint(2250.0, 889.0),
            EnvelopePoint(3100.0, 1028.7),
        ]
        assert all(p.cg == 1201.4 for p in points[3:])

    def test_from_polyline_round_trip(self, envelope: CGEnvelope) -> None:
        """Test the polyline rebuilds the same envelope."""
        assert CGEnvelope.from_polyline(envelope.polyline()) == envelope

    def test_from_tuples(self) -> None:
        """Test building from (weight, cg) tuples with extra aft points."""
        env = CGEnvelope.from_polyline(
            [(2100, 889), (2250, 889), (3100, 1028.7), (3100, 1201.4), (2950, 1201.4), (2100, 1201.4)]
        )
        assert env.aft_cg == 1201.4
        assert env.forward_breakpoint_weight == 2250

    def test_too_few_points(self) -> None:
        """Test fewer than five points is rejected."""
        with pytest.raises(EnvelopeError, match="at least 5"):
            CGEnvelope.from_polyline([(2100, 889), (2250, 889), (3100, 1028.7), (3100, 1201.4)])

    def test_forward_not_flat(self) -> None:
        """Test the first segment must be flat."""
        with pytest.raises(EnvelopeError, match="flat"):
            CGEnvelope.from_polyline(
                [(2100, 889), (2950, 965), (3100, 1028.7), (3100, 1201.4), (2100, 1201.4)]
            )

    def test_forward_not_monotonic(self) -> None:
        """Test forward points must increase in weight."""
        with pytest.raises(EnvelopeError, match="increase"):
            CGEnvelope.from_polyline(
                [(2250, 889), (2100, 889), (3100, 1028.7), (3100, 1201.4), (2100, 1201.4)]
            )

    def test_aft_not_constant(self) -> None:
        """Test aft points must share one CG."""
        with pytest.raises(EnvelopeError, match="Aft"):
            CGEnvelope.from_polyline(
                [(2100, 889), (2250, 889), (3100, 1028.7), (3100, 1201.4), (2100, 1190.0)]
            )

    def test_forward_must_span_range(self) -> None:
        """Test an aft point outside the forward weight range is rejected."""
        with pytest.raises(EnvelopeError, match="span"):
            CGEnvelope.from_polyline(
                [(2100, 889), (2250, 889), (3100, 1028.7), (3200, 1201.4), (2100, 1201.4)]
            )

    def test_invalid_descriptor(self) -> None:
        """Test descriptor invariants."""
        with pytest.raises(EnvelopeError):
            CGEnvelope(3100.0, 2100.0, 889.0, 2250.0, 1028.7, 1201.4)
        with pytest.raises(EnvelopeError):
            CGEnvelope(2100.0, 3100.0, 889.0, 3100.0, 1028.7, 1201.4)
        with pytest.raises(EnvelopeError):
            CGEnvelope(2100.0, 3100.0, 1300.0, 2250.0, 1028.7, 1201.4)


class TestPercentMac:
    """Test %MAC mapping."""

    def test_leading_edge(self) -> None:
        """Test 0% at the MAC leading edge."""
        assert percent_mac(889.0, 889.0, 305.0) == 0.0

    def test_trailing_edge(self) -> None:
        """Test 100% at the MAC trailing edge."""
        assert percent_mac(1194.0, 889.0, 305.0) == pytest.approx(100.0)

    def test_forward_of_mac(self) -> None:
        """Test negative %MAC forward of the leading edge."""
        assert percent_mac(858.5, 889.0, 305.0) == pytest.approx(-10.0)
