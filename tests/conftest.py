'''
Shared fixtures for the jonswapWaveMaker tests.
'''

import numpy as np
import pytest

from jonswapWaveMaker.spectrum.parameters import SpectrumParameters
from jonswapWaveMaker.spectrum.jonswap import JonswapSpectrum
from jonswapWaveMaker.binning.boundaries import BinBoundaryGenerator, UniformBoundaryStrategy
from jonswapWaveMaker.binning.integrator import BinIntegrator


@pytest.fixture
def referenceParameters():
    '''Open-ocean reference case: alpha=0.0081, wp=0.8 rad/s, wmax=3.0 rad/s.'''
    return SpectrumParameters(alpha=0.0081, peakFrequency=0.8, maxFrequency=3.0)


@pytest.fixture
def spectrum(referenceParameters):
    return JonswapSpectrum(referenceParameters)


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def uniformBins(referenceParameters):
    '''Ten deterministic bins over [0, 3] rad/s.'''
    return BinBoundaryGenerator(referenceParameters).generateBins(10, UniformBoundaryStrategy())


@pytest.fixture
def rawEnergies(spectrum, uniformBins):
    return BinIntegrator(spectrum).integrateBins(uniformBins, dx=0.01)
