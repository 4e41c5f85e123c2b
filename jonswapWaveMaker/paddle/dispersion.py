# -- Dispersion Relation -- #

'''
Wavenumber-depth product kh for a given angular frequency and depth.

Linear dispersion relation:
    omega^2 = g * k * tanh(k * h)

Two solutions are provided:
- approximateWaveNumberDepth: explicit approximation
      k0 = omega^2 / g
      kh = k0*h * (1 - exp(-(k0*h)^1.25))^(-0.4)
- solveDispersionRelation: Newton-Raphson on the full relation

References:
-----------
Dean, R.G. & Dalrymple, R.A. -- Water Wave Mechanics for Engineers and Scientists
Guo (2002) -- Simple and explicit solution of wave dispersion equation
'''

from __future__ import annotations

import math

from jonswapWaveMaker import constants as c
from jonswapWaveMaker.errors import InvalidParameterError


def _checkInputs(omega: float, depth: float) -> None:
    if not math.isfinite(omega) or omega <= 0.0:
        raise InvalidParameterError(f'omega must be a finite positive number, got {omega}')
    if not math.isfinite(depth) or depth <= 0.0:
        raise InvalidParameterError(f'Water depth must be a finite positive number, got {depth}')


def approximateWaveNumberDepth(omega: float, depth: float) -> float:
    '''
    Explicit approximation of kh.

    Parameters:
    -----------
    omega : float
        Angular frequency [rad/s]
    depth : float
        Water depth h [m]

    Returns:
    --------
    float : kh [-]
    '''
    _checkInputs(omega, depth)

    k0h = omega * omega / c.gravity * depth
    return k0h * (-math.expm1(-k0h ** 1.25)) ** -0.4


def solveDispersionRelation(omega: float, depth: float) -> float:
    '''
    Solve omega^2 = g * k * tanh(k * h) for the wavenumber k.

    Newton-Raphson starting from the explicit approximation, which is
    already within ~1% so convergence takes a few iterations.

    Parameters:
    -----------
    omega : float
        Angular frequency [rad/s]
    depth : float
        Water depth [m]

    Returns:
    --------
    float : Wavenumber k [rad/m]
    '''
    _checkInputs(omega, depth)
    g = c.gravity

    k = approximateWaveNumberDepth(omega, depth) / depth

    # f(k) = omega^2 - g*k*tanh(k*h)
    # f'(k) = -g*(tanh(k*h) + k*h*(1 - tanh^2(k*h)))
    for _ in range(50):
        tanhKh = math.tanh(k * depth)
        f = omega * omega - g * k * tanhKh
        fPrime = -g * (tanhKh + k * depth * (1.0 - tanhKh * tanhKh))

        if abs(fPrime) < 1e-30:
            break

        dk = -f / fPrime
        k += dk

        if abs(dk) < 1e-12 * abs(k):
            break

    return k


def exactWaveNumberDepth(omega: float, depth: float) -> float:
    '''kh from the Newton-Raphson solution of the dispersion relation.'''
    return solveDispersionRelation(omega, depth) * depth
