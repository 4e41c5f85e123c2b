# -- JONSWAP Spectrum Parameters -- #

'''
Immutable parameter record for the JONSWAP spectrum.

Parameters are either supplied directly or derived from the 10 m wind
speed and the fetch using the JONSWAP growth relations:

    alpha = 0.076 * (U^2 / (F*g))^0.22
    omega_p = 22 * (g^2 / (U*F))^(1/3)
    omega_max = 33 * omega_p / (2*pi)

References:
-----------
Hasselmann et al. (1973) -- JONSWAP
Goda (2000) -- Random Seas and Design of Maritime Structures
'''

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Optional

from jonswapWaveMaker import constants as const
from jonswapWaveMaker.errors import InvalidParameterError


def _requirePositive(name: str, value: float) -> None:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise InvalidParameterError(f'{name} must be a number, got {value!r}')
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidParameterError(f'{name} must be a finite positive number, got {value}')


@dataclass(frozen=True)
class SpectrumParameters:
    '''
    JONSWAP spectral parameters.

    Parameters:
    -----------
    alpha : float
        Energy scale (Phillips constant) [-]
    peakFrequency : float
        Peak angular frequency omega_p [rad/s]
    maxFrequency : float
        Upper integration bound omega_max [rad/s]
    peakSharpening : float
        Peak enhancement factor gamma [-]
    sigmaLow : float
        Spectral width for omega <= omega_p [-]
    sigmaHigh : float
        Spectral width for omega > omega_p [-]
    windSpeed10m : float, optional
        Wind speed at 10 m [m/s], set when derived from wind and fetch
    fetch : float, optional
        Fetch length [m], set when derived from wind and fetch
    '''

    alpha: float
    peakFrequency: float             # rad/s
    maxFrequency: float              # rad/s
    peakSharpening: float = const.defaultPeakSharpening
    sigmaLow: float = const.defaultSigmaLow
    sigmaHigh: float = const.defaultSigmaHigh
    windSpeed10m: Optional[float] = None   # m/s
    fetch: Optional[float] = None          # m

    def __post_init__(self) -> None:
        _requirePositive('alpha', self.alpha)
        _requirePositive('peakFrequency', self.peakFrequency)
        _requirePositive('maxFrequency', self.maxFrequency)
        _requirePositive('peakSharpening', self.peakSharpening)
        _requirePositive('sigmaLow', self.sigmaLow)
        _requirePositive('sigmaHigh', self.sigmaHigh)
        if self.windSpeed10m is not None:
            _requirePositive('windSpeed10m', self.windSpeed10m)
        if self.fetch is not None:
            _requirePositive('fetch', self.fetch)

    @property
    def isWindDerived(self) -> bool:
        '''True when the parameters were derived from wind speed and fetch.'''
        return self.windSpeed10m is not None and self.fetch is not None

    @property
    def peakPeriod(self) -> float:
        '''Peak period Tp = 2*pi/omega_p [s].'''
        return 2.0 * math.pi / self.peakFrequency

    @classmethod
    def fromWindFetch(cls, windSpeed10m: float, fetch: float) -> SpectrumParameters:
        '''
        Derive the spectral parameters from wind speed and fetch.

        The shape parameters take their JONSWAP mean values
        (gamma = 3.3, sigma = 0.07 / 0.09).

        Parameters:
        -----------
        windSpeed10m : float
            Wind speed at 10 m elevation [m/s]
        fetch : float
            Fetch length [m]

        Returns:
        --------
        SpectrumParameters : Derived parameter record
        '''
        _requirePositive('windSpeed10m', windSpeed10m)
        _requirePositive('fetch', fetch)

        peakFrequency = calcPeakFrequency(windSpeed10m, fetch)

        return cls(
            alpha=calcAlpha(windSpeed10m, fetch),
            peakFrequency=peakFrequency,
            maxFrequency=calcMaxFrequency(peakFrequency),
            peakSharpening=const.defaultPeakSharpening,
            sigmaLow=const.defaultSigmaLow,
            sigmaHigh=const.defaultSigmaHigh,
            windSpeed10m=float(windSpeed10m),
            fetch=float(fetch),
        )

    def asDict(self) -> dict:
        '''Plain dict of all parameters, for reports and JSON output.'''
        return {
            'alpha': self.alpha,
            'peakFrequency': self.peakFrequency,
            'maxFrequency': self.maxFrequency,
            'peakSharpening': self.peakSharpening,
            'sigmaLow': self.sigmaLow,
            'sigmaHigh': self.sigmaHigh,
            'windSpeed10m': self.windSpeed10m,
            'fetch': self.fetch,
        }


######################################################################
# -- Wind/Fetch Derivation -- #
######################################################################

def calcAlpha(windSpeed10m: float, fetch: float) -> float:
    '''alpha = 0.076 * (U^2 / (F*g))^0.22'''
    g = const.gravity
    return const.alphaScale * (windSpeed10m * windSpeed10m / (fetch * g)) ** const.alphaExponent


def calcPeakFrequency(windSpeed10m: float, fetch: float) -> float:
    '''omega_p = 22 * (g^2 / (U*F))^(1/3) [rad/s]'''
    g = const.gravity
    return const.peakScale * (g * g / (windSpeed10m * fetch)) ** (1.0 / 3.0)


def calcMaxFrequency(peakFrequency: float) -> float:
    '''omega_max = 33 * omega_p / (2*pi) [rad/s]'''
    return const.maxFrequencyFactor * peakFrequency / (2.0 * math.pi)
