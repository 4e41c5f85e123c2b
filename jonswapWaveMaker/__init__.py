# -- JONSWAP Wave Maker Package -- #

'''
JONSWAP spectrum discretization for wavemaker paddle control.

Computes a JONSWAP spectrum from explicit parameters or from wind speed
and fetch, splits it into frequency bins, integrates each bin and
converts the bin energy into a piston or flap paddle stroke.

    from jonswapWaveMaker import SpectralWaveMaker, UniformBoundaryStrategy
    waveMaker = SpectralWaveMaker.fromWindFetch(10.0, 100_000.0)
    waveMaker.generateBins(10, UniformBoundaryStrategy())
    waveMaker.integrateBins(dx=0.01)
    strokes = waveMaker.computePaddleAmplitudes(waterDepth=2.0, maxStroke=0.75)

Sub-modules:
    - spectrum: parameters and JONSWAP density
    - binning: bin boundaries and per-bin integration
    - paddle: dispersion relation and piston/flap transfer functions
    - export: two-column spectrum table
    - visualization: Plotly figures
'''

__version__ = '0.1.0'

from jonswapWaveMaker.errors import (
    WaveMakerError,
    InvalidParameterError,
    SingularEvaluationError,
    NonTerminatingGenerationError,
)
from jonswapWaveMaker.spectrum import SpectrumParameters, JonswapSpectrum
from jonswapWaveMaker.binning import (
    BinSet,
    BinEnergies,
    BinBoundaryGenerator,
    BinIntegrator,
    RandomBoundaryStrategy,
    UniformBoundaryStrategy,
)
from jonswapWaveMaker.paddle import PaddleAmplitudes, PaddleTransfer
from jonswapWaveMaker.waveMaker import SpectralWaveMaker
from jonswapWaveMaker.config import WaveMakerConfig

__all__ = [
    # Errors
    'WaveMakerError',
    'InvalidParameterError',
    'SingularEvaluationError',
    'NonTerminatingGenerationError',
    # Spectrum
    'SpectrumParameters',
    'JonswapSpectrum',
    # Binning
    'BinSet',
    'BinEnergies',
    'BinBoundaryGenerator',
    'BinIntegrator',
    'RandomBoundaryStrategy',
    'UniformBoundaryStrategy',
    # Paddle
    'PaddleAmplitudes',
    'PaddleTransfer',
    # Pipeline
    'SpectralWaveMaker',
    'WaveMakerConfig',
]
