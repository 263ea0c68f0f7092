"""CG envelope model and limit checks.

The envelope is held in one canonical form: a forward limit that is flat up
to a breakpoint weight and then tapers linearly to the maximum weight, and an
aft limit that is constant. The polyline drawn on a loading chart and the
limit function used for validation are both derived from these six numbers,
so they cannot drift apart.

Typical usage:
    envelope = CGEnvelope.from_polyline([
        (2100, 889.0), (2250, 889.0), (3100, 1028.7),
        (3100, 1201.4), (2100, 1201.4),
    ])
    envelope.within_envelope(2699.0, 1012.6)  # True
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Aft-limit points must agree to this tolerance to count as one constant line.
_AFT_TOLERANCE_MM = 1e-6


class EnvelopeError(ValueError):
    """Raised when envelope data does not describe a valid envelope."""


@dataclass(frozen=True)
class EnvelopePoint:
    """One vertex of the envelope polyline.

    Attributes:
        weight: Aircraft weight (lbs)
        cg: CG position (mm aft of datum)
    """

    weight: float
    cg: float


@dataclass(frozen=True)
class CGMargins:
    """Signed distance from the CG to each limit (mm).

    Negative values mean the CG is past that limit.
    """

    forward: float
    aft: float


@dataclass(frozen=True)
class CGEnvelope:
    """Piecewise-linear CG envelope.

    Attributes:
        min_weight: Lowest weight covered by the envelope (lbs)
        max_weight: Highest weight covered by the envelope (lbs)
        forward_flat_cg: Forward limit at and below the breakpoint (mm)
        forward_breakpoint_weight: Weight where the forward limit starts to taper (lbs)
        forward_max_weight_cg: Forward limit at max_weight (mm)
        aft_cg: Aft limit, constant over the weight range (mm)
    """

    min_weight: float
    max_weight: float
    forward_flat_cg: float
    forward_breakpoint_weight: float
    forward_max_weight_cg: float
    aft_cg: float

    def __post_init__(self) -> None:
        if not self.min_weight < self.max_weight:
            raise EnvelopeError(
                f"Envelope min weight {self.min_weight} must be below max weight {self.max_weight}"
            )
        if not self.min_weight <= self.forward_breakpoint_weight < self.max_weight:
            raise EnvelopeError(
                f"Forward breakpoint {self.forward_breakpoint_weight} lbs outside "
                f"[{self.min_weight}, {self.max_weight}) lbs"
            )
        if self.forward_flat_cg > self.aft_cg or self.forward_max_weight_cg > self.aft_cg:
            raise EnvelopeError("Forward limit lies aft of the aft limit")

    @classmethod
    def from_polyline(cls, points: Iterable[EnvelopePoint | tuple[float, float]]) -> "CGEnvelope":
        """Build the envelope from chart polyline points.

        The first three points are the forward limit in increasing weight:
        (min weight, flat CG), (breakpoint, flat CG), (max weight, taper CG).
        All remaining points (at least two) lie on the constant aft limit.

        Args:
            points: EnvelopePoint instances or (weight, cg) tuples.

        Returns:
            The canonical envelope.

        Raises:
            EnvelopeError: If the points do not follow that shape.
        """
        pts = [p if isinstance(p, EnvelopePoint) else EnvelopePoint(*p) for p in points]
        if len(pts) < 5:
            raise EnvelopeError(f"Envelope needs at least 5 points, got {len(pts)}")

        start, bend, end = pts[:3]
        aft_points = pts[3:]

        if not start.weight < bend.weight < end.weight:
            # A breakpoint at the minimum weight (pure taper) is written with
            # the first two points sharing a weight.
            if not (start.weight == bend.weight < end.weight):
                raise EnvelopeError("Forward limit points must increase in weight")
        if start.cg != bend.cg:
            raise EnvelopeError(
                f"Forward limit must be flat up to the breakpoint: {start.cg} != {bend.cg}"
            )

        aft_cg = aft_points[0].cg
        if any(abs(p.cg - aft_cg) > _AFT_TOLERANCE_MM for p in aft_points):
            raise EnvelopeError("Aft limit points must share one CG position")

        weights = [p.weight for p in pts]
        if min(weights) != start.weight or max(weights) != end.weight:
            raise EnvelopeError("Forward limit must span the full envelope weight range")

        return cls(
            min_weight=start.weight,
            max_weight=end.weight,
            forward_flat_cg=start.cg,
            forward_breakpoint_weight=bend.weight,
            forward_max_weight_cg=end.cg,
            aft_cg=aft_cg,
        )

    def polyline(self) -> list[EnvelopePoint]:
        """Derive the closed chart polyline: forward limit, then aft limit."""
        return [
            EnvelopePoint(self.min_weight, self.forward_flat_cg),
            EnvelopePoint(self.forward_breakpoint_weight, self.forward_flat_cg),
            EnvelopePoint(self.max_weight, self.forward_max_weight_cg),
            EnvelopePoint(self.max_weight, self.aft_cg),
            EnvelopePoint(self.min_weight, self.aft_cg),
        ]

    def flat_segment(self, weight: float) -> float:
        """Forward limit on the constant segment, up to the breakpoint."""
        return self.forward_flat_cg

    def taper_segment(self, weight: float) -> float:
        """Forward limit on the linear segment, from the breakpoint to max weight."""
        span = self.max_weight - self.forward_breakpoint_weight
        ratio = (weight - self.forward_breakpoint_weight) / span
        return self.forward_flat_cg + ratio * (self.forward_max_weight_cg - self.forward_flat_cg)

    def forward_limit(self, weight: float) -> float:
        """Forward CG limit at a weight (mm).

        Weights outside the envelope clamp to the nearest end value.
        """
        weight = min(max(weight, self.min_weight), self.max_weight)
        if weight <= self.forward_breakpoint_weight:
            return self.flat_segment(weight)
        return self.taper_segment(weight)

    def forward_limit_curve(self, weights: Sequence[float] | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """Vectorized forward limit, for sampling the limit line on a chart.

        Agrees with forward_limit() at every weight.
        """
        xp = [self.min_weight, self.forward_breakpoint_weight, self.max_weight]
        fp = [self.forward_flat_cg, self.forward_flat_cg, self.forward_max_weight_cg]
        if self.forward_breakpoint_weight == self.min_weight:
            xp, fp = xp[1:], fp[1:]
        return np.interp(np.asarray(weights, dtype=float), xp, fp)

    def aft_limit(self, weight: float) -> float:
        return self.aft_cg

    def limits_at(self, weight: float) -> tuple[float, float]:
        """Return (forward, aft) CG limits at a weight."""
        return self.forward_limit(weight), self.aft_limit(weight)

    def within_weight_range(self, weight: float) -> bool:
        return self.min_weight <= weight <= self.max_weight

    def within_envelope(self, weight: float, cg: float) -> bool:
        """Check whether a (weight, CG) point lies inside the envelope."""
        if not self.within_weight_range(weight):
            return False
        forward, aft = self.limits_at(weight)
        return forward <= cg <= aft

    def margins(self, weight: float, cg: float) -> CGMargins:
        """Signed CG margins to the forward and aft limits at a weight."""
        forward, aft = self.limits_at(weight)
        return CGMargins(forward=cg - forward, aft=aft - cg)


def percent_mac(cg: float, mac_start: float, mac_length: float) -> float:
    """Express a CG position as a percentage of the mean aerodynamic chord.

    Args:
        cg: CG position (mm aft of datum)
        mac_start: Leading edge of the MAC (mm aft of datum)
        mac_length: MAC length (mm)

    Returns:
        %MAC; 0 at the leading edge, 100 at the trailing edge.
    """
    return (cg - mac_start) / mac_length * 100.0
