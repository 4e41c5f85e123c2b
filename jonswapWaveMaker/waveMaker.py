# -- Spectral Wave Maker -- #

'''
End-to-end JONSWAP to paddle-stroke pipeline.

Holds one immutable SpectrumParameters record and the current bin set,
and runs the stages in order:

    parameters -> JonswapSpectrum -> BinBoundaryGenerator
               -> BinIntegrator -> PaddleTransfer

Regenerating the bins discards previously computed energies and
amplitudes, since those are only valid for the bins they came from.
'''

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from jonswapWaveMaker.spectrum.parameters import SpectrumParameters
from jonswapWaveMaker.spectrum.jonswap import JonswapSpectrum
from jonswapWaveMaker.binning.boundaries import BinBoundaryGenerator, BinSet, BoundaryStrategy
from jonswapWaveMaker.binning.integrator import BinEnergies, BinIntegrator
from jonswapWaveMaker.paddle.transfer import PaddleAmplitudes, PaddleTransfer


class SpectralWaveMaker:
    '''
    JONSWAP spectrum discretized into paddle strokes.

    Parameters:
    -----------
    parameters : SpectrumParameters
        Spectral parameters
    '''

    def __init__(self, parameters: SpectrumParameters) -> None:
        self._params = parameters
        self._spectrum = JonswapSpectrum(parameters)
        self._binSet: Optional[BinSet] = None
        self._energies: Optional[BinEnergies] = None
        self._amplitudes: Optional[PaddleAmplitudes] = None

    @classmethod
    def fromParameters(
        cls,
        alpha: float,
        peakFrequency: float,
        maxFrequency: float,
        peakSharpening: float,
        sigmaLow: float,
        sigmaHigh: float,
    ) -> SpectralWaveMaker:
        '''Build from explicit JONSWAP parameters.'''
        return cls(SpectrumParameters(
            alpha=alpha,
            peakFrequency=peakFrequency,
            maxFrequency=maxFrequency,
            peakSharpening=peakSharpening,
            sigmaLow=sigmaLow,
            sigmaHigh=sigmaHigh,
        ))

    @classmethod
    def fromWindFetch(cls, windSpeed10m: float, fetch: float) -> SpectralWaveMaker:
        '''Build from 10 m wind speed [m/s] and fetch [m].'''
        return cls(SpectrumParameters.fromWindFetch(windSpeed10m, fetch))

    ######################################################################
    # -- Accessors -- #
    ######################################################################

    @property
    def parameters(self) -> SpectrumParameters:
        return self._params

    @property
    def spectrum(self) -> JonswapSpectrum:
        return self._spectrum

    @property
    def alpha(self) -> float:
        return self._params.alpha

    @property
    def peakFrequency(self) -> float:
        return self._params.peakFrequency

    @property
    def maxFrequency(self) -> float:
        return self._params.maxFrequency

    @property
    def peakSharpening(self) -> float:
        return self._params.peakSharpening

    @property
    def sigmaLow(self) -> float:
        return self._params.sigmaLow

    @property
    def sigmaHigh(self) -> float:
        return self._params.sigmaHigh

    @property
    def windSpeed10m(self) -> Optional[float]:
        return self._params.windSpeed10m

    @property
    def fetch(self) -> Optional[float]:
        return self._params.fetch

    @property
    def binSet(self) -> Optional[BinSet]:
        return self._binSet

    @property
    def boundaries(self) -> tuple[float, ...]:
        return self._binSet.boundaries if self._binSet is not None else ()

    @property
    def centerFrequencies(self) -> tuple[float, ...]:
        return self._binSet.centerFrequencies if self._binSet is not None else ()

    @property
    def energies(self) -> Optional[BinEnergies]:
        return self._energies

    @property
    def amplitudes(self) -> Optional[PaddleAmplitudes]:
        return self._amplitudes

    ######################################################################
    # -- Pipeline Stages -- #
    ######################################################################

    def density(self, omega: float) -> float:
        return self._spectrum.density(omega)

    def densityBatch(self, omegas: Sequence[float] | np.ndarray) -> np.ndarray:
        return self._spectrum.densityBatch(omegas)

    def generateBins(self, numberOfBins: int, strategy: BoundaryStrategy) -> BinSet:
        '''
        Generate a new bin set, replacing the current one.

        Parameters:
        -----------
        numberOfBins : int
            Number of bins (>= 1)
        strategy : BoundaryStrategy
            RandomBoundaryStrategy or UniformBoundaryStrategy

        Returns:
        --------
        BinSet : The new bins
        '''
        binSet = BinBoundaryGenerator(self._params).generateBins(numberOfBins, strategy)
        self._binSet = binSet
        self._energies = None
        self._amplitudes = None
        return binSet

    def integrateBins(self, dx: float, policy: str = 'raw') -> BinEnergies:
        '''
        Integrate the spectrum over the current bins.

        Parameters:
        -----------
        dx : float
            Integration step [rad/s]
        policy : str
            'raw' or 'widthNormalized'

        Returns:
        --------
        BinEnergies : Energy per bin
        '''
        if self._binSet is None:
            raise RuntimeError('No bins generated. Call generateBins first.')

        self._energies = BinIntegrator(self._spectrum).integrateBins(self._binSet, dx, policy)
        self._amplitudes = None
        return self._energies

    def computePaddleAmplitudes(
        self,
        waterDepth: float,
        kinematics: str = 'piston',
        maxStroke: Optional[float] = None,
        policy: str = 'transferFunction',
        normalization: str = 'peak',
        dispersion: str = 'approximate',
    ) -> PaddleAmplitudes:
        '''
        Convert the current bin energies into paddle strokes.

        Parameters:
        -----------
        waterDepth : float
            Water depth at the paddle [m]
        kinematics : str
            'piston' or 'flap'
        maxStroke : float, optional
            Stroke to normalize to [m]
        policy : str
            'transferFunction' or 'totalEnergy'
        normalization : str
            'peak' or 'sum' (transfer-function policy only)
        dispersion : str
            'approximate' or 'exact'

        Returns:
        --------
        PaddleAmplitudes : Stroke per bin
        '''
        if self._energies is None:
            raise RuntimeError('No bin energies. Call integrateBins first.')

        transfer = PaddleTransfer(waterDepth, kinematics=kinematics, dispersion=dispersion)
        self._amplitudes = transfer.computeAmplitudes(
            self._energies,
            policy=policy,
            maxStroke=maxStroke,
            normalization=normalization,
        )
        return self._amplitudes

    ######################################################################
    # -- Reporting -- #
    ######################################################################

    def summary(self) -> dict:
        '''Parameters and current pipeline state, for reports.'''
        out = {
            'parameters': self._params.asDict(),
            'numberOfBins': self._binSet.numberOfBins if self._binSet is not None else 0,
            'boundaries': list(self.boundaries),
            'centerFrequencies': list(self.centerFrequencies),
        }
        if self._energies is not None:
            out['energies'] = list(self._energies.energies)
            out['totalArea'] = self._energies.totalArea
            out['integrationPolicy'] = self._energies.policy
        if self._amplitudes is not None:
            out['amplitudes'] = list(self._amplitudes.amplitudes)
            out['kinematics'] = self._amplitudes.kinematics
            out['paddlePolicy'] = self._amplitudes.policy
        return out

    def __repr__(self) -> str:
        p = self._params
        nBins = self._binSet.numberOfBins if self._binSet is not None else 0
        return (
            f'SpectralWaveMaker(alpha={p.alpha:.5g}, wp={p.peakFrequency:.4g}, '
            f'wmax={p.maxFrequency:.4g}, nBins={nBins})'
        )
