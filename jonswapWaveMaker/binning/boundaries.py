# -- Frequency Bin Boundaries -- #

'''
Partitions [0, omega_max] into frequency bins.

A BinSet holds k = numberOfBins - 1 strictly increasing interior
boundaries b_1 < ... < b_k inside (0, omega_max), and the k + 1 bin
centre frequencies

    c_0 = b_1 / 2
    c_i = (b_i + b_(i+1)) / 2
    c_k = (b_k + omega_max) / 2

Two boundary strategies are provided:

- RandomBoundaryStrategy: normal draws around the peak frequency, with
  rejection of out-of-band and duplicate values. Needs an explicit
  numpy Generator (or seed), never the global random state.
- UniformBoundaryStrategy: equally spaced grid i*omega_max/n with a
  small bounded jitter to avoid exact grid alignment.
'''

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Literal, Protocol, Union

import numpy as np

from jonswapWaveMaker import constants as const
from jonswapWaveMaker.errors import InvalidParameterError, NonTerminatingGenerationError
from jonswapWaveMaker.spectrum.parameters import SpectrumParameters

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


def makeGenerator(rng: RandomSource) -> np.random.Generator:
    '''Return rng if it is already a Generator, otherwise seed a new one from it.'''
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def centerFrequencies(boundaries: tuple[float, ...], maxFrequency: float) -> tuple[float, ...]:
    '''
    Centre frequency of every bin defined by the interior boundaries.

    Parameters:
    -----------
    boundaries : tuple[float, ...]
        Strictly increasing interior boundaries [rad/s]
    maxFrequency : float
        Upper bound of the last bin [rad/s]

    Returns:
    --------
    tuple[float, ...] : len(boundaries) + 1 centre frequencies [rad/s]
    '''
    edges = (0.0,) + tuple(boundaries) + (float(maxFrequency),)
    return tuple(0.5 * (lo + hi) for lo, hi in zip(edges[:-1], edges[1:]))


######################################################################
# -- Bin Set -- #
######################################################################

@dataclass(frozen=True)
class BinSet:
    '''
    Ordered interior bin boundaries and their centre frequencies.

    Parameters:
    -----------
    boundaries : tuple[float, ...]
        Strictly increasing boundaries inside (0, maxFrequency) [rad/s]
    centerFrequencies : tuple[float, ...]
        One centre per bin, len(boundaries) + 1 entries [rad/s]
    maxFrequency : float
        Upper bound of the last bin [rad/s]
    '''

    boundaries: tuple[float, ...]
    centerFrequencies: tuple[float, ...]
    maxFrequency: float

    def __post_init__(self) -> None:
        b = self.boundaries
        if not (math.isfinite(self.maxFrequency) and self.maxFrequency > 0.0):
            raise InvalidParameterError(f'maxFrequency must be positive, got {self.maxFrequency}')
        if any(hi <= lo for lo, hi in zip(b[:-1], b[1:])):
            raise InvalidParameterError('Bin boundaries must be strictly increasing')
        if b and (b[0] <= 0.0 or b[-1] >= self.maxFrequency):
            raise InvalidParameterError(
                f'Bin boundaries must lie inside (0, {self.maxFrequency}), '
                f'got [{b[0]}, {b[-1]}]'
            )
        if len(self.centerFrequencies) != len(b) + 1:
            raise InvalidParameterError(
                f'Expected {len(b) + 1} centre frequencies, got {len(self.centerFrequencies)}'
            )

    @classmethod
    def fromBoundaries(cls, boundaries, maxFrequency: float) -> BinSet:
        '''Sort and de-duplicate the boundaries, then derive the centres.'''
        ordered = tuple(sorted({float(x) for x in boundaries}))
        return cls(
            boundaries=ordered,
            centerFrequencies=centerFrequencies(ordered, maxFrequency),
            maxFrequency=float(maxFrequency),
        )

    @property
    def numberOfBins(self) -> int:
        return len(self.boundaries) + 1

    @property
    def edges(self) -> np.ndarray:
        '''All bin edges: 0, b_1, ..., b_k, omega_max.'''
        return np.concatenate(([0.0], self.boundaries, [self.maxFrequency]))

    @property
    def widths(self) -> np.ndarray:
        '''Width of each bin [rad/s].'''
        return np.diff(self.edges)

    def binRanges(self) -> list[tuple[float, float]]:
        '''(low, high) pair for each bin.'''
        e = self.edges
        return [(float(lo), float(hi)) for lo, hi in zip(e[:-1], e[1:])]


######################################################################
# -- Boundary Strategies -- #
######################################################################

class BoundaryStrategy(Protocol):
    '''Produces numberOfBins - 1 distinct boundaries inside (0, omega_max).'''

    def generate(self, numberOfBins: int, parameters: SpectrumParameters) -> list[float]:
        ...


class RandomBoundaryStrategy:
    '''
    Normal-distribution boundary sampling around the spectral peak.

    Draws are centred on omega_p with standard deviation omega_p/2 ('wide')
    or omega_p/4 ('narrow'). Draws outside the validity band are rejected,
    as are repeated values. The band is (omega_p/4, 4*omega_p) for 'peak'
    or (0, omega_max) for 'spectrum', always intersected with
    (0, omega_max).

    Parameters:
    -----------
    rng : np.random.Generator | int | None
        Random source or seed
    spread : str
        'wide' (std = omega_p/2) or 'narrow' (std = omega_p/4)
    band : str
        'peak' or 'spectrum'
    maxDraws : int
        Upper bound on the number of draws before giving up
    '''

    def __init__(
        self,
        rng: RandomSource = None,
        spread: Literal['wide', 'narrow'] = 'wide',
        band: Literal['peak', 'spectrum'] = 'peak',
        maxDraws: int = const.defaultMaxDraws,
    ) -> None:
        if spread not in ('wide', 'narrow'):
            raise InvalidParameterError(f"spread must be 'wide' or 'narrow', got {spread!r}")
        if band not in ('peak', 'spectrum'):
            raise InvalidParameterError(f"band must be 'peak' or 'spectrum', got {band!r}")
        if maxDraws < 1:
            raise InvalidParameterError(f'maxDraws must be >= 1, got {maxDraws}')

        self._rng = makeGenerator(rng)
        self._spread = spread
        self._band = band
        self._maxDraws = int(maxDraws)

    def validBand(self, parameters: SpectrumParameters) -> tuple[float, float]:
        '''Open interval (low, high) from which draws are accepted [rad/s].'''
        wp = parameters.peakFrequency
        wmax = parameters.maxFrequency
        if self._band == 'peak':
            return (wp / 4.0, min(4.0 * wp, wmax))
        return (0.0, wmax)

    def generate(self, numberOfBins: int, parameters: SpectrumParameters) -> list[float]:
        nBounds = numberOfBins - 1
        wp = parameters.peakFrequency
        std = wp / 2.0 if self._spread == 'wide' else wp / 4.0
        low, high = self.validBand(parameters)

        if nBounds > 0 and low >= high:
            raise NonTerminatingGenerationError(
                f'Empty boundary band ({low:.4g}, {high:.4g}) for wp={wp:.4g}, '
                f'wmax={parameters.maxFrequency:.4g}'
            )

        bounds: set[float] = set()
        draws = 0
        while len(bounds) < nBounds:
            if draws >= self._maxDraws:
                raise NonTerminatingGenerationError(
                    f'Collected {len(bounds)} of {nBounds} boundaries after '
                    f'{draws} draws in band ({low:.4g}, {high:.4g})'
                )
            bound = float(self._rng.normal(wp, std))
            draws += 1
            if bound <= low or bound >= high or bound in bounds:
                continue
            bounds.add(bound)
            logger.debug('Boundary found: %.6f rad/s', bound)

        logger.debug('Random strategy: %d boundaries from %d draws', nBounds, draws)
        return sorted(bounds)


class UniformBoundaryStrategy:
    '''
    Equally spaced boundaries with bounded jitter.

    boundary_i = i * omega_max / n + jitter_i, |jitter_i| <= jitterFraction * omega_max / n

    Without an rng the jitter alternates sign (+, -, +, ...) at full
    amplitude, so the result is fully deterministic. With an rng it is
    drawn uniformly inside the bound.

    Parameters:
    -----------
    jitterFraction : float
        Jitter bound as a fraction of the bin width, in [0, 0.5)
    rng : np.random.Generator | int | None
        Optional random source for the jitter
    '''

    def __init__(
        self,
        jitterFraction: float = const.defaultJitterFraction,
        rng: RandomSource = None,
    ) -> None:
        if not (0.0 <= jitterFraction < 0.5):
            raise InvalidParameterError(
                f'jitterFraction must lie in [0, 0.5), got {jitterFraction}'
            )
        self._jitterFraction = float(jitterFraction)
        self._rng = None if rng is None else makeGenerator(rng)

    def generate(self, numberOfBins: int, parameters: SpectrumParameters) -> list[float]:
        wmax = parameters.maxFrequency
        binWidth = wmax / numberOfBins
        maxJitter = self._jitterFraction * binWidth

        bounds = []
        for i in range(1, numberOfBins):
            if self._rng is None:
                jitter = maxJitter if i % 2 == 1 else -maxJitter
            else:
                jitter = float(self._rng.uniform(-maxJitter, maxJitter))
            bounds.append(i * binWidth + jitter)

        return bounds


######################################################################
# -- Generator -- #
######################################################################

class BinBoundaryGenerator:
    '''
    Builds a BinSet for a spectrum using a boundary strategy.

    Parameters:
    -----------
    parameters : SpectrumParameters
        Spectrum whose [0, omega_max] range is partitioned
    '''

    def __init__(self, parameters: SpectrumParameters) -> None:
        self._params = parameters

    def generateBins(self, numberOfBins: int, strategy: BoundaryStrategy) -> BinSet:
        '''
        Generate the bin boundaries and centre frequencies.

        Parameters:
        -----------
        numberOfBins : int
            Number of bins (>= 1)
        strategy : BoundaryStrategy
            Random or uniform boundary strategy

        Returns:
        --------
        BinSet : Sorted boundaries with their centre frequencies
        '''
        if isinstance(numberOfBins, bool) or not isinstance(numberOfBins, (int, np.integer)):
            raise InvalidParameterError(f'numberOfBins must be an integer, got {numberOfBins!r}')
        if numberOfBins < 1:
            raise InvalidParameterError(f'numberOfBins must be >= 1, got {numberOfBins}')

        bounds = strategy.generate(int(numberOfBins), self._params)
        binSet = BinSet.fromBoundaries(bounds, self._params.maxFrequency)

        if len(binSet.boundaries) != numberOfBins - 1:
            raise InvalidParameterError(
                f'Strategy produced {len(binSet.boundaries)} distinct boundaries, '
                f'expected {numberOfBins - 1}'
            )

        logger.info(
            'Generated %d bins over [0, %.4g] rad/s', binSet.numberOfBins, binSet.maxFrequency
        )
        return binSet
