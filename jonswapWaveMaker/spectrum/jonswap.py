# -- JONSWAP Spectral Density -- #

'''
JONSWAP wave energy spectrum in angular frequency.

    S(omega) = alpha * g^2 * omega^-5 * exp(-1.2 * (omega_p/omega)^4) * gamma^r

    r = exp( -(omega - omega_p)^2 / (2 * sigma^2 * omega_p^2) )
    sigma = sigmaLow  for omega <= omega_p
            sigmaHigh for omega >  omega_p

At omega = omega_p, r = 1 for either sigma, so both branches meet and
the density is continuous at the peak.

S(omega) is singular at omega = 0 (omega^-5). Evaluating at omega <= 0
raises SingularEvaluationError instead of returning inf/nan.

References:
-----------
Hasselmann et al. (1973) -- JONSWAP
DNV-RP-C205 -- Environmental conditions and environmental loads, Sec. 3.5.5
'''

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from jonswapWaveMaker import constants as const
from jonswapWaveMaker.errors import SingularEvaluationError
from jonswapWaveMaker.spectrum.parameters import SpectrumParameters


class JonswapSpectrum:
    '''
    JONSWAP spectral density evaluator. Satisfies the SpectrumModel protocol.

    Parameters:
    -----------
    parameters : SpectrumParameters
        Spectral parameters (immutable)
    '''

    def __init__(self, parameters: SpectrumParameters) -> None:
        self._params = parameters

    @property
    def parameters(self) -> SpectrumParameters:
        return self._params

    @property
    def peakDensity(self) -> float:
        '''Density at the peak frequency, alpha*g^2*wp^-5*exp(-1.2)*gamma.'''
        return self.density(self._params.peakFrequency)

    ######################################################################
    # -- Evaluation -- #
    ######################################################################

    def density(self, omega: float) -> float:
        '''
        Spectral density S(omega) at one angular frequency.

        Parameters:
        -----------
        omega : float
            Angular frequency [rad/s], must be > 0

        Returns:
        --------
        float : Spectral density [m^2*s/rad]
        '''
        if not math.isfinite(omega) or omega <= 0.0:
            raise SingularEvaluationError(
                f'JONSWAP density is undefined at omega={omega} (omega must be > 0)'
            )

        p = self._params
        g = const.gravity
        wp = p.peakFrequency

        sigma = p.sigmaLow if omega <= wp else p.sigmaHigh
        dw = omega - wp
        r = math.exp(-(dw * dw) / (2.0 * sigma * sigma * wp * wp))

        # Log space: very small omega underflows to 0 instead of overflowing
        ratio = wp / omega
        logDensity = (
            math.log(p.alpha * g * g)
            - 5.0 * math.log(omega)
            - const.shapeCoefficient * (ratio * ratio) * (ratio * ratio)
            + r * math.log(p.peakSharpening)
        )
        return math.exp(logDensity)

    def densityBatch(self, omegas: Sequence[float] | np.ndarray) -> np.ndarray:
        '''
        Element-wise spectral density for a sequence of angular frequencies.

        Order and length are preserved. The whole batch is rejected if any
        entry is <= 0 or non-finite.

        Parameters:
        -----------
        omegas : Sequence[float] | np.ndarray
            Angular frequencies [rad/s]

        Returns:
        --------
        np.ndarray : Spectral densities, same shape as the input
        '''
        w = np.asarray(omegas, dtype=float)
        if w.size == 0:
            return np.zeros_like(w)

        bad = ~np.isfinite(w) | (w <= 0.0)
        if np.any(bad):
            first = w[bad].flat[0]
            raise SingularEvaluationError(
                f'JONSWAP density is undefined at omega={first} (omega must be > 0)'
            )

        p = self._params
        g = const.gravity
        wp = p.peakFrequency

        sigma = np.where(w <= wp, p.sigmaLow, p.sigmaHigh)
        r = np.exp(-((w - wp) ** 2) / (2.0 * sigma ** 2 * wp ** 2))

        ratio = wp / w
        with np.errstate(over='ignore', under='ignore'):
            logDensity = (
                math.log(p.alpha * g * g)
                - 5.0 * np.log(w)
                - const.shapeCoefficient * ratio ** 4
                + r * math.log(p.peakSharpening)
            )
            return np.exp(logDensity)

    def __call__(self, omegas: Sequence[float] | np.ndarray) -> np.ndarray:
        return self.densityBatch(omegas)

    def __repr__(self) -> str:
        p = self._params
        return (
            f'JonswapSpectrum(alpha={p.alpha:.5g}, wp={p.peakFrequency:.4g}, '
            f'wmax={p.maxFrequency:.4g}, gamma={p.peakSharpening:.3g})'
        )
