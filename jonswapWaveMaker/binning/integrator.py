# -- Per-Bin Trapezoidal Integration -- #

'''
Integrates the spectral density over each frequency bin.

Each bin [low, high) is integrated with the composite trapezoidal rule

    area = sum over steps [ dx * (S(x_i) + S(x_i + dx)) / 2 ]

with nodes low, low + dx, low + 2dx, ... and one final shortened step
that lands exactly on high. Adjacent bins therefore share their edge node
and the sum of all bin areas is the composite trapezoid over
[dx, omega_max].

The first bin starts at dx instead of 0 because S(omega) is singular at
omega = 0. The JONSWAP density vanishes faster than any power there, so
the skipped sliver [0, dx) carries no measurable energy. A first bin
whose upper edge is at or below dx gets zero area.

Two result policies:
- 'raw': integrated area per bin
- 'widthNormalized': area / bin width, i.e. the mean density of the bin
'''

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Literal

import numpy as np

from jonswapWaveMaker.errors import InvalidParameterError
from jonswapWaveMaker.binning.boundaries import BinSet
from jonswapWaveMaker.spectrum.protocols import SpectrumModel

logger = logging.getLogger(__name__)

IntegrationPolicy = Literal['raw', 'widthNormalized']


@dataclass(frozen=True)
class BinEnergies:
    '''
    Integrated spectral energy per bin, aligned with BinSet.centerFrequencies.

    Parameters:
    -----------
    energies : tuple[float, ...]
        Per-bin area ('raw') or mean density ('widthNormalized')
    centerFrequencies : tuple[float, ...]
        Bin centre frequencies [rad/s]
    widths : tuple[float, ...]
        Bin widths [rad/s]
    totalArea : float
        Sum of the raw per-bin areas [m^2]
    policy : str
        Integration policy that produced the energies
    '''

    energies: tuple[float, ...]
    centerFrequencies: tuple[float, ...]
    widths: tuple[float, ...]
    totalArea: float
    policy: str

    @property
    def numberOfBins(self) -> int:
        return len(self.energies)

    @property
    def areas(self) -> np.ndarray:
        '''Raw per-bin areas regardless of policy [m^2].'''
        e = np.asarray(self.energies)
        if self.policy == 'widthNormalized':
            return e * np.asarray(self.widths)
        return e


def trapezoid(spectrum: SpectrumModel, low: float, high: float, dx: float) -> float:
    '''
    Composite trapezoid of the spectrum over [low, high] with step dx.

    The last step is shortened to end exactly on high.

    Parameters:
    -----------
    spectrum : SpectrumModel
        Density to integrate
    low : float
        Lower bound [rad/s], must be > 0
    high : float
        Upper bound [rad/s]
    dx : float
        Step size [rad/s]

    Returns:
    --------
    float : Integrated area
    '''
    if high <= low:
        return 0.0

    nSteps = int(math.ceil((high - low) / dx))
    nodes = np.append(low + dx * np.arange(nSteps), high)
    values = spectrum.densityBatch(nodes)

    return float(np.sum(np.diff(nodes) * (values[1:] + values[:-1]) / 2.0))


class BinIntegrator:
    '''
    Integrates a spectrum over every bin of a BinSet.

    Parameters:
    -----------
    spectrum : SpectrumModel
        Spectral density to integrate
    '''

    def __init__(self, spectrum: SpectrumModel) -> None:
        self._spectrum = spectrum

    def integrateBins(
        self,
        binSet: BinSet,
        dx: float,
        policy: IntegrationPolicy = 'raw',
    ) -> BinEnergies:
        '''
        Integrate the spectrum over each bin.

        Parameters:
        -----------
        binSet : BinSet
            Bins to integrate over
        dx : float
            Integration step [rad/s], must be positive
        policy : str
            'raw' or 'widthNormalized'

        Returns:
        --------
        BinEnergies : Per-bin energies and the total raw area
        '''
        if policy not in ('raw', 'widthNormalized'):
            raise InvalidParameterError(f"policy must be 'raw' or 'widthNormalized', got {policy!r}")
        if binSet is None:
            raise InvalidParameterError('A BinSet is required for integration')
        if isinstance(dx, bool) or not isinstance(dx, numbers.Real) or not math.isfinite(dx) or dx <= 0.0:
            raise InvalidParameterError(f'Integration step dx must be a finite positive number, got {dx!r}')

        areas = []
        for idx, (low, high) in enumerate(binSet.binRanges()):
            if idx == 0:
                # First bin ending at or below dx has zero area
                low = dx
            area = trapezoid(self._spectrum, low, high, dx)
            areas.append(area)
            logger.debug('Bin %d [%.4f, %.4f): area = %.6e', idx, low, high, area)

        totalArea = float(sum(areas))
        logger.info('Integrated %d bins, total area = %.6e', len(areas), totalArea)

        widths = binSet.widths
        if policy == 'widthNormalized':
            energies = tuple(float(a / w) for a, w in zip(areas, widths))
        else:
            energies = tuple(float(a) for a in areas)

        return BinEnergies(
            energies=energies,
            centerFrequencies=binSet.centerFrequencies,
            widths=tuple(float(w) for w in widths),
            totalArea=totalArea,
            policy=policy,
        )
