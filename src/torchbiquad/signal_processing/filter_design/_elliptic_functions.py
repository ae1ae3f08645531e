"""Jacobi elliptic helpers for the elliptic prototype."""

import math
from typing import List, Tuple

import numpy as np
from scipy import special

# Terms kept in the nome series of the degree equation
_NOME_TERMS = 7
_NEWTON_ITERATIONS = 50
_NEWTON_TOLERANCE = 1e-14
EPSILON = 2e-16


def _ellipdeg(n: int, m1: float) -> float:
    """Solve the degree equation ``n K(m)/K'(m) = K(m1)/K'(m1)`` for ``m``."""
    nome = np.exp(-np.pi * special.ellipkm1(m1) / special.ellipk(m1))
    q = nome ** (1.0 / n)

    terms = np.arange(_NOME_TERMS + 1)
    numerator = np.sum(q ** (terms * (terms + 1)))
    denominator = 1.0 + 2.0 * np.sum(q ** ((terms + 1) ** 2))

    return float(16.0 * q * (numerator / denominator) ** 4)


def _arc_jac_sc1(w: float, m: float) -> float:
    """Real ``z`` with ``sc(z, 1 - m) = w``, by Newton's method."""
    if m == 0.0:
        return math.atan(w)

    z = math.atan(w)
    for _ in range(_NEWTON_ITERATIONS):
        sn, cn, dn, _ = special.ellipj(z, 1.0 - m)
        error = sn / cn - w
        if abs(error) < _NEWTON_TOLERANCE * max(1.0, abs(w)):
            break
        # d sc / dz = dn / cn^2
        z -= error * cn * cn / dn

    return float(z)


def elliptic_zeros_poles(
    n: int,
    passband_ripple_db: float,
    stopband_attenuation_db: float,
) -> Tuple[List[complex], List[complex], float]:
    """Zeros, poles and gain of the elliptic lowpass prototype.

    Odd orders have ``n - 1`` zeros and one real pole. Even orders are
    scaled so the DC gain sits at the bottom of the passband ripple.
    """
    eps_sq = 10.0 ** (0.1 * passband_ripple_db) - 1.0

    if n == 1:
        pole = -math.sqrt(1.0 / eps_sq)
        return [], [complex(pole, 0.0)], -pole

    ck1_sq = eps_sq / (10.0 ** (0.1 * stopband_attenuation_db) - 1.0)
    if ck1_sq == 0.0:
        raise ValueError(
            "Cannot design an elliptic prototype with "
            f"passband_ripple_db={passband_ripple_db} and "
            f"stopband_attenuation_db={stopband_attenuation_db}"
        )

    m = _ellipdeg(n, ck1_sq)
    capk = float(special.ellipk(m))

    v0 = (
        capk
        * _arc_jac_sc1(1.0 / math.sqrt(eps_sq), ck1_sq)
        / (n * float(special.ellipk(ck1_sq)))
    )
    sv, cv, dv, _ = special.ellipj(v0, 1.0 - m)

    zeros: List[complex] = []
    poles: List[complex] = []
    for j in range(1 - n % 2, n, 2):
        s, c, d, _ = special.ellipj(j * capk / n, m)

        if abs(s) > EPSILON:
            zero = complex(0.0, 1.0 / (math.sqrt(m) * s))
            zeros.extend([zero, zero.conjugate()])

        denominator = 1.0 - (d * sv) ** 2
        pole = complex(
            -c * d * sv * cv / denominator, -s * dv / denominator
        )
        if abs(pole.imag) > EPSILON * abs(pole):
            poles.extend([pole, pole.conjugate()])
        else:
            poles.append(complex(pole.real, 0.0))

    gain = np.prod([-p for p in poles]) / np.prod([-z for z in zeros])
    gain = float(gain.real)
    if n % 2 == 0:
        gain /= math.sqrt(1.0 + eps_sq)

    return zeros, poles, gain
