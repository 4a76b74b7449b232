# smithchart/core/transform.py
"""
Normalized impedance to gamma-space transform.

Gamma = (Z - 1) / (Z + 1) = (R - 1 + jX) / (R + 1 + jX). Multiplying numerator
and denominator by the conjugate (R + 1 - jX) leaves a purely real denominator,
|Z + 1|^2, so U and V fall out as two real quotients.
"""
import math

from smithchart.core.exceptions import InvalidArgumentError
from smithchart.core.types import RX, UV


def _check_finite(rx: RX) -> None:
    if not (math.isfinite(rx.R) and math.isfinite(rx.X)):
        raise InvalidArgumentError(f"Non-finite immittance {rx!r}")


def rx_to_uv(rx: RX) -> UV:
    """
    Convert normalized R + jX to Cartesian gamma coordinates.

    Args:
        rx: Normalized resistance and reactance.

    Returns:
        The (U, V) point in gamma space.

    Raises:
        InvalidArgumentError: If R = -1 and X = 0 (|Z + 1| = 0) or an input is not finite.
    """
    _check_finite(rx)
    r, x = float(rx.R), float(rx.X)
    # (Z + 1) times its complex conjugate
    zplus1_mag_squ = r * r + x * x + 2.0 * r + 1.0
    if zplus1_mag_squ == 0.0:
        raise InvalidArgumentError(f"{rx!r} maps to infinity (R = -1, X = 0)")
    return UV((r * r + x * x - 1.0) / zplus1_mag_squ, 2.0 * x / zplus1_mag_squ)


def angle_of_resistance_arc(rx: RX) -> float:
    """Angle (radians) from the center of the R = rx.R circle to rx in gamma space."""
    if rx.R == -1.0:
        raise InvalidArgumentError("The R = -1 circle has infinite radius")
    uv = rx_to_uv(rx)
    return math.atan2(uv.V, uv.U - (rx.R / (rx.R + 1.0)))


def angle_of_reactance_arc(rx: RX) -> float:
    """Angle (radians) from the center of the X = rx.X circle (on U = 1) to rx in gamma space."""
    if rx.X == 0.0:
        raise InvalidArgumentError("The X = 0 arc has infinite radius")
    uv = rx_to_uv(rx)
    return math.atan2(uv.V - 1.0 / rx.X, uv.U - 1.0)
